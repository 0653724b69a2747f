"""Event model definition."""

import base64
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from ..utils.dates import parse_timestamp, format_display_date

logger = logging.getLogger(__name__)

class ValidationFailed(ValueError):
    """Raised when an event or media item is missing required data."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []

@dataclass
class MediaItem:
    """
    A file attached to an event.

    Exactly one of `data` (an inline ``data:`` URL) or `url` (a remote
    location) references the content.

    Fields:
        type: MIME type; drives how the item is previewed
        name: Display name
        data: Inline base64 data URL (optional)
        url: Remote URL to fetch the bytes from (optional)
    """
    type: str
    name: str = ""
    data: Optional[str] = None
    url: Optional[str] = None

    def __post_init__(self):
        if not self.type:
            raise ValidationFailed("Media item requires a MIME type", ['type'])
        if bool(self.data) == bool(self.url):
            raise ValidationFailed(
                "Media item requires exactly one of 'data' or 'url'", ['data', 'url']
            )

    @property
    def kind(self) -> str:
        """Preview category: image, video, audio, pdf or file."""
        mime = self.type.lower()
        if mime.startswith('image/'):
            return 'image'
        if mime.startswith('video/'):
            return 'video'
        if mime.startswith('audio/'):
            return 'audio'
        if mime == 'application/pdf':
            return 'pdf'
        return 'file'

    @property
    def source(self) -> str:
        """The content reference, whichever form it takes."""
        return self.url or self.data or ""

    @classmethod
    def from_bytes(cls, name: str, mime_type: str, payload: bytes) -> 'MediaItem':
        """Build an inline media item from raw file content."""
        encoded = base64.b64encode(payload).decode('ascii')
        return cls(type=mime_type, name=name, data=f"data:{mime_type};base64,{encoded}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        out: Dict[str, Any] = {'type': self.type, 'name': self.name}
        if self.data:
            out['data'] = self.data
        if self.url:
            out['url'] = self.url
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MediaItem':
        """Create a media item from its dictionary form."""
        return cls(
            type=data.get('type') or '',
            name=data.get('name') or '',
            data=data.get('data') or None,
            url=data.get('url') or None,
        )

# Wire/persisted key for every attribute that is not spelled the same way
_WIRE_KEYS = {
    'end_date': 'endDate',
    'event_type': 'eventType',
    'team_members': 'teamMembers',
    'resource_persons': 'resourcePersons',
    'participants_count': 'participantsCount',
    'external_participants': 'externalParticipants',
    'sponsored_by': 'sponsoredBy',
    'financial_assistance': 'financialAssistance',
    'total_expenses': 'totalExpenses',
}

REQUIRED_FIELDS = ['title', 'date', 'category']

def _split_names(value: Any) -> List[str]:
    """Accept a list of names or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    return [str(part).strip() for part in value if str(part).strip()]

def _to_int(value: Any) -> Optional[int]:
    if value is None or value == '':
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric count value: {value!r}")
        return None

def _to_float(value: Any) -> Optional[float]:
    if value is None or value == '':
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric amount value: {value!r}")
        return None

def _to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)

@dataclass
class Event:
    """
    A college event record.

    Fields:
        id: Unique positive identifier, assigned by `next_id` and never changed
        title: Event title
        date: Start as an ISO-8601 timestamp string
        category: Category name from the taxonomy (or user supplied)
        coordinator: Coordinator name (may be empty)
        end_date: End as an ISO-8601 timestamp string (optional)
        event_type: Subcategory within the category (optional)
        department: Organising department (optional)
        venue: Where the event takes place (optional)
        team_members: Names of the organising team
        resource_persons: Names of invited speakers or trainers
        participants_count: Number of participants (optional)
        external_participants: Number of participants from outside the college (optional)
        sponsored_by: Sponsor name (optional)
        financial_assistance: Amount of financial assistance received (optional)
        total_expenses: Total amount spent (optional)
        description: Free text description (optional)
        media: Attached files, in display order
    """
    id: int
    title: str
    date: str
    category: str
    coordinator: str = ""
    end_date: Optional[str] = None
    event_type: Optional[str] = None
    department: Optional[str] = None
    venue: Optional[str] = None
    team_members: List[str] = field(default_factory=list)
    resource_persons: List[str] = field(default_factory=list)
    participants_count: Optional[int] = None
    external_participants: Optional[int] = None
    sponsored_by: Optional[str] = None
    financial_assistance: Optional[float] = None
    total_expenses: Optional[float] = None
    description: Optional[str] = None
    media: List[MediaItem] = field(default_factory=list)

    def validate(self) -> 'Event':
        """
        Check required fields and date formats.

        Returns:
            Event: self, to allow chaining

        Raises:
            ValidationFailed: If a required field is missing or a date cannot be parsed
        """
        missing = [name for name in REQUIRED_FIELDS if not str(getattr(self, name) or '').strip()]
        if missing:
            raise ValidationFailed(f"Missing required fields: {', '.join(missing)}", missing)

        invalid = []
        for name in ('date', 'end_date'):
            value = getattr(self, name)
            if value is None:
                continue
            try:
                parse_timestamp(value)
            except ValueError:
                invalid.append(name)
        if invalid:
            raise ValidationFailed(f"Invalid date fields: {', '.join(invalid)}", invalid)
        return self

    def start_datetime(self) -> datetime:
        """Parsed start timestamp. Raises ValueError if malformed."""
        return parse_timestamp(self.date)

    def display_date(self) -> str:
        """Start date for display, or the invalid-date sentinel."""
        return format_display_date(self.date)

    def display_end_date(self) -> Optional[str]:
        """End date for display, None when the event has no end date."""
        if not self.end_date:
            return None
        return format_display_date(self.end_date)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire/persisted dictionary form."""
        out: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == 'media':
                value = [item.to_dict() for item in value]
            elif isinstance(value, list):
                value = list(value)
            out[_WIRE_KEYS.get(name, name)] = value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """
        Create an event from its dictionary form.

        Missing keys default to empty values and unknown keys are ignored,
        so records written by older versions still load. Both the wire keys
        (``endDate``) and attribute names (``end_date``) are accepted.

        Raises:
            ValidationFailed: If the id is missing or not a positive integer
        """
        def pick(name: str, default: Any = None) -> Any:
            wire = _WIRE_KEYS.get(name, name)
            if wire in data:
                return data[wire]
            return data.get(name, default)

        try:
            event_id = int(data['id'])
        except (KeyError, TypeError, ValueError):
            raise ValidationFailed("Event requires an integer id", ['id'])
        if event_id <= 0:
            raise ValidationFailed("Event id must be positive", ['id'])

        media = []
        for raw in pick('media') or []:
            try:
                media.append(raw if isinstance(raw, MediaItem) else MediaItem.from_dict(raw))
            except (ValidationFailed, AttributeError) as e:
                logger.warning(f"Dropping unreadable media item on event {event_id}: {e}")

        return cls(
            id=event_id,
            title=_to_text(pick('title')) or '',
            date=_to_text(pick('date')) or '',
            category=_to_text(pick('category')) or '',
            coordinator=_to_text(pick('coordinator')) or '',
            end_date=_to_text(pick('end_date')) or None,
            event_type=_to_text(pick('event_type')),
            department=_to_text(pick('department')),
            venue=_to_text(pick('venue')),
            team_members=_split_names(pick('team_members')),
            resource_persons=_split_names(pick('resource_persons')),
            participants_count=_to_int(pick('participants_count')),
            external_participants=_to_int(pick('external_participants')),
            sponsored_by=_to_text(pick('sponsored_by')),
            financial_assistance=_to_float(pick('financial_assistance')),
            total_expenses=_to_float(pick('total_expenses')),
            description=_to_text(pick('description')),
            media=media,
        )

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, title={self.title}, date={self.date})"
