"""Events router module."""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from ...repository import EventRepository
from ...utils.dashboard import search_events
from ...utils.identifiers import next_id
from ..dependencies import get_repository, require_editor, require_session
from ..schemas import EventIn

router = APIRouter(tags=["events"], dependencies=[Depends(require_session)])

@router.get("/events", response_model=List[Dict])
async def get_events(
    q: Optional[str] = None,
    category: Optional[str] = None,
    repository: EventRepository = Depends(get_repository)
):
    """Get all events, optionally narrowed by a search term and category."""
    events = search_events(repository.events, q or "", category)
    return [event.to_dict() for event in events]

@router.get("/events/{event_id}", response_model=Dict)
async def get_event(event_id: int, repository: EventRepository = Depends(get_repository)):
    """Get a single event by ID."""
    event = repository.get(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event.to_dict()

@router.post("/events", response_model=Dict, status_code=201, dependencies=[Depends(require_editor)])
async def create_event(payload: EventIn, repository: EventRepository = Depends(get_repository)):
    """Create an event; the id is allocated here."""
    event = payload.to_event(next_id(repository.events))
    return repository.add(event).to_dict()

@router.put("/events/{event_id}", response_model=Dict, dependencies=[Depends(require_editor)])
async def update_event(
    event_id: int,
    payload: EventIn,
    repository: EventRepository = Depends(get_repository)
):
    """Replace an event with the submitted record."""
    if repository.get(event_id) is None:
        raise HTTPException(status_code=404, detail="Event not found")
    event = payload.to_event(event_id)
    repository.update(event)
    return event.to_dict()

@router.delete("/events/{event_id}", status_code=204, dependencies=[Depends(require_editor)])
async def delete_event(event_id: int, repository: EventRepository = Depends(get_repository)):
    """Delete an event. Deleting an unknown id succeeds without effect."""
    repository.delete(event_id)
    return Response(status_code=204)
