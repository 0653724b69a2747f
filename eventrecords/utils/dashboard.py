"""Dashboard counts and free-text event search."""

from typing import Dict, Iterable, List, Optional, Any

from ..config.categories import CATCH_ALL_CATEGORY
from ..models.event import Event
from ..taxonomy import TaxonomyRegistry

SEARCH_FIELDS = ['title', 'description', 'coordinator', 'venue', 'department', 'event_type']

def category_counts(events: Iterable[Event], registry: TaxonomyRegistry) -> Dict[str, Any]:
    """
    Count events overall and per category.

    Categories come from the registry first, then any extra categories found
    on events. The catch-all category and blank categories are not listed.

    Returns:
        Dict with 'total' and 'categories' (ordered list of name/count pairs)
    """
    events = list(events)
    names: List[str] = []
    for name in registry.list_categories() + [event.category for event in events]:
        if name and name != CATCH_ALL_CATEGORY and name not in names:
            names.append(name)

    counts = {name: 0 for name in names}
    for event in events:
        if event.category in counts:
            counts[event.category] += 1

    return {
        'total': len(events),
        'categories': [{'name': name, 'count': counts[name]} for name in names],
    }

def search_events(
    events: Iterable[Event],
    query: str = "",
    category: Optional[str] = None
) -> List[Event]:
    """Case-insensitive substring search over the main text fields."""
    needle = (query or '').strip().lower()
    results = []
    for event in events:
        if category and event.category != category:
            continue
        if needle and not any(
            needle in (getattr(event, name) or '').lower() for name in SEARCH_FIELDS
        ):
            continue
        results.append(event)
    return results
