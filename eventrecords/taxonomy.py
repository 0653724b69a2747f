"""Category / subcategory registry.

The registry starts from the defaults in `eventrecords.config.categories`
and only ever grows. It lives for the lifetime of the object that owns it
and is not persisted.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from .config.categories import DEFAULT_SUBCATEGORIES, CATCH_ALL_SUBCATEGORY
from .models.event import ValidationFailed

logger = logging.getLogger(__name__)

def _clean_name(name: str, what: str) -> str:
    cleaned = (name or '').strip()
    if not cleaned:
        raise ValidationFailed(f"{what} name must not be empty", [what.lower()])
    return cleaned

class TaxonomyRegistry:
    """Ordered mapping of category name to subcategory names."""

    def __init__(self, seed: Optional[Mapping[str, Sequence[str]]] = None):
        self._entries: Dict[str, List[str]] = {}
        for category, subcategories in (seed if seed is not None else DEFAULT_SUBCATEGORIES).items():
            names = list(dict.fromkeys(subcategories))
            if CATCH_ALL_SUBCATEGORY not in names:
                names.append(CATCH_ALL_SUBCATEGORY)
            self._entries[category] = names

    def list_categories(self) -> List[str]:
        """Categories in insertion order, defaults first."""
        return list(self._entries)

    def subcategories_of(self, category: str) -> List[str]:
        """Registered subcategories, or an empty list for an unknown category."""
        return list(self._entries.get(category, []))

    def has_category(self, category: str) -> bool:
        return category in self._entries

    def add_category(self, name: str) -> bool:
        """
        Register a new category seeded with the catch-all subcategory.

        Matching is exact and case-sensitive.

        Returns:
            bool: True if the category was added, False if it already existed

        Raises:
            ValidationFailed: If the name is blank
        """
        name = _clean_name(name, 'Category')
        if name in self._entries:
            return False
        self._entries[name] = [CATCH_ALL_SUBCATEGORY]
        logger.info(f"Added category: {name}")
        return True

    def add_subcategory(self, category: str, name: str) -> bool:
        """
        Register a subcategory under an existing category.

        Returns:
            bool: True if added; False if the category is unknown or the
                  subcategory already exists

        Raises:
            ValidationFailed: If the name is blank
        """
        name = _clean_name(name, 'Subcategory')
        subcategories = self._entries.get(category)
        if subcategories is None or name in subcategories:
            return False
        subcategories.append(name)
        logger.info(f"Added subcategory {name} to {category}")
        return True

    def as_dict(self) -> Dict[str, List[str]]:
        """Copy of the whole taxonomy."""
        return {category: list(names) for category, names in self._entries.items()}
