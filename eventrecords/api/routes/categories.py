"""Categories router module."""

from fastapi import APIRouter, Depends, HTTPException

from ...taxonomy import TaxonomyRegistry
from ..dependencies import get_registry, require_editor, require_session
from ..schemas import CategoryIn

router = APIRouter(tags=["categories"], dependencies=[Depends(require_session)])

@router.get("/categories")
async def get_categories(registry: TaxonomyRegistry = Depends(get_registry)):
    """All categories with their subcategories, in registration order."""
    return [
        {"name": category, "subcategories": subcategories}
        for category, subcategories in registry.as_dict().items()
    ]

@router.post("/categories", dependencies=[Depends(require_editor)])
async def add_category(payload: CategoryIn, registry: TaxonomyRegistry = Depends(get_registry)):
    """Register a category. Adding an existing one changes nothing."""
    added = registry.add_category(payload.name)
    name = payload.name.strip()
    return {"name": name, "subcategories": registry.subcategories_of(name), "added": added}

@router.post("/categories/{category}/subcategories", dependencies=[Depends(require_editor)])
async def add_subcategory(
    category: str,
    payload: CategoryIn,
    registry: TaxonomyRegistry = Depends(get_registry)
):
    """Register a subcategory under an existing category."""
    if not registry.has_category(category):
        raise HTTPException(status_code=404, detail="Category not found")
    added = registry.add_subcategory(category, payload.name)
    return {"name": category, "subcategories": registry.subcategories_of(category), "added": added}
