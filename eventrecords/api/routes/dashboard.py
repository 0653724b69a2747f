"""Dashboard router module."""

from fastapi import APIRouter, Depends

from ...repository import EventRepository
from ...taxonomy import TaxonomyRegistry
from ...utils.dashboard import category_counts
from ..dependencies import get_registry, get_repository, require_session

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_session)])

@router.get("/dashboard")
async def get_dashboard(
    repository: EventRepository = Depends(get_repository),
    registry: TaxonomyRegistry = Depends(get_registry)
):
    """Total number of events and the count per category."""
    return category_counts(repository.events, registry)
