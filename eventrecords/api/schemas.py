"""Request bodies accepted by the HTTP API.

Field aliases keep the camelCase names the web client already sends
(``endDate``, ``teamMembers``, ...).
"""

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models.event import Event, MediaItem
from ..utils.dates import to_iso
from ..utils.report_filter import ReportCriteria

class MediaItemIn(BaseModel):
    type: str
    name: str = ""
    data: Optional[str] = None
    url: Optional[str] = None

    def to_media_item(self) -> MediaItem:
        return MediaItem(type=self.type, name=self.name, data=self.data, url=self.url)

class EventIn(BaseModel):
    """Full event record as submitted by the event form."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    date: str = ""
    category: str = ""
    coordinator: str = ""
    end_date: Optional[str] = Field(default=None, alias='endDate')
    event_type: Optional[str] = Field(default=None, alias='eventType')
    department: Optional[str] = None
    venue: Optional[str] = None
    team_members: Union[List[str], str] = Field(default_factory=list, alias='teamMembers')
    resource_persons: Union[List[str], str] = Field(default_factory=list, alias='resourcePersons')
    participants_count: Optional[Union[int, str]] = Field(default=None, alias='participantsCount')
    external_participants: Optional[Union[int, str]] = Field(default=None, alias='externalParticipants')
    sponsored_by: Optional[str] = Field(default=None, alias='sponsoredBy')
    financial_assistance: Optional[Union[float, str]] = Field(default=None, alias='financialAssistance')
    total_expenses: Optional[Union[float, str]] = Field(default=None, alias='totalExpenses')
    description: Optional[str] = None
    media: List[MediaItemIn] = Field(default_factory=list)

    def to_event(self, event_id: int) -> Event:
        """
        Build a validated event carrying `event_id`.

        Text fields are trimmed and dates normalised to ISO-8601.

        Raises:
            ValidationFailed: If required fields are missing, dates are invalid
                              or a media item has no content reference
        """
        data = self.model_dump(exclude={'media'})
        data['id'] = event_id
        for name in ('title', 'coordinator', 'venue'):
            if data.get(name) is not None:
                data[name] = data[name].strip()
        data['media'] = [item.to_media_item() for item in self.media]

        event = Event.from_dict(data).validate()
        event.date = to_iso(event.date)
        if event.end_date:
            event.end_date = to_iso(event.end_date)
        return event

class ReportCriteriaIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: Optional[date] = Field(default=None, alias='startDate')
    end_date: Optional[date] = Field(default=None, alias='endDate')
    coordinator: str = ""
    venue: str = ""
    department: str = ""

    def to_criteria(self) -> ReportCriteria:
        return ReportCriteria(
            start_date=self.start_date,
            end_date=self.end_date,
            coordinator=self.coordinator,
            venue=self.venue,
            department=self.department,
        )

class CategoryIn(BaseModel):
    name: str

class SessionIn(BaseModel):
    username: str = ""
    role: str = "view"
    password: Optional[str] = None
