"""Model for the persisted form of event records."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, JSON

from .base import Base
from .event import Event

class StoredEvent(Base):
    """
    One row per event record, keyed by the event id.

    The whole record is kept as a JSON document so that changes to the
    record shape never require a migration: rows written by older versions
    are read back through the tolerant `Event.from_dict`.

    Fields:
        id: Event identifier (primary key, never auto-generated)
        payload: The event in its wire form (`Event.to_dict()`)
    """
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, autoincrement=False)
    payload = Column(JSON, nullable=False)

    @classmethod
    def from_event(cls, event: Event) -> 'StoredEvent':
        """Build a row from a domain event."""
        return cls(id=event.id, payload=event.to_dict())

    def to_event(self) -> Event:
        """Convert the stored payload back into a domain event."""
        data: Dict[str, Any] = dict(self.payload or {})
        data['id'] = self.id
        return Event.from_dict(data)

    def __str__(self) -> str:
        """String representation."""
        title = (self.payload or {}).get('title')
        return f"StoredEvent(id={self.id}, title={title})"
