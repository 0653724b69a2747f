"""Models package initialization."""

from .base import Base
from .event import Event, MediaItem, ValidationFailed
from .stored_event import StoredEvent

__all__ = ['Base', 'Event', 'MediaItem', 'ValidationFailed', 'StoredEvent']
