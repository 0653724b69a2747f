"""Report filtering over the in-memory event list.

Dates compare at day granularity on the event's start (the end date does not
widen the match); text criteria are case-insensitive substring matches.
All active criteria must pass.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..models.event import Event
from .dates import to_day

logger = logging.getLogger(__name__)

@dataclass
class ReportCriteria:
    """
    Filter settings for reports.

    Fields:
        start_date: Earliest event start day (inclusive, optional)
        end_date: Latest event start day (inclusive, optional)
        coordinator: Substring of the coordinator name
        venue: Substring of the venue
        department: Substring of the department
    """
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    coordinator: str = ""
    venue: str = ""
    department: str = ""

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None

def _matches_text(value: Optional[str], needle: str) -> bool:
    needle = (needle or '').strip().lower()
    if not needle:
        return True
    if value is None:
        return False
    return needle in value.lower()

def _matches_dates(event: Event, criteria: ReportCriteria) -> bool:
    if not criteria.has_date_range:
        return True

    event_start = to_day(event.start_datetime())

    if criteria.start_date is not None and event_start < to_day(criteria.start_date):
        return False
    if criteria.end_date is not None and event_start > to_day(criteria.end_date):
        return False
    return True

def matches(event: Event, criteria: ReportCriteria) -> bool:
    """
    Check an event against report criteria.

    An event whose dates cannot be parsed never matches a date range; the
    problem is logged rather than raised.
    """
    try:
        if not _matches_dates(event, criteria):
            return False
    except (ValueError, TypeError) as e:
        logger.warning(f"Excluding event {event.id} ({event.title!r}) from date filter: {e}")
        return False

    return (
        _matches_text(event.coordinator, criteria.coordinator)
        and _matches_text(event.venue, criteria.venue)
        and _matches_text(event.department, criteria.department)
    )

def filter_events(events: Iterable[Event], criteria: ReportCriteria) -> List[Event]:
    """Events matching `criteria`, in their original order."""
    return [event for event in events if matches(event, criteria)]
