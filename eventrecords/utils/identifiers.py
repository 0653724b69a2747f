"""Identifier allocation for new event records."""

from typing import Iterable

from ..models.event import Event

def next_id(events: Iterable[Event]) -> int:
    """
    Return one more than the largest id in `events`, or 1 if there are none.

    Not safe against two callers racing on the same snapshot; the service
    has a single writer.
    """
    return max((event.id for event in events), default=0) + 1
