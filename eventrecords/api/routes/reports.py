"""Reports router module."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ...export import ALL_EVENTS_FILENAME, render_all_events_pdf, render_event_pdf, report_filename
from ...repository import EventRepository
from ...utils.report_filter import filter_events
from ..dependencies import get_repository, require_session
from ..schemas import ReportCriteriaIn

router = APIRouter(tags=["reports"], dependencies=[Depends(require_session)])

def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

@router.post("/reports/filter", response_model=List[Dict])
async def filter_report_events(
    criteria: ReportCriteriaIn,
    repository: EventRepository = Depends(get_repository)
):
    """Events matching the report filters."""
    return [event.to_dict() for event in filter_events(repository.events, criteria.to_criteria())]

@router.post("/reports/export")
def export_report(
    criteria: ReportCriteriaIn,
    repository: EventRepository = Depends(get_repository)
):
    """Combined PDF report of every event matching the filters."""
    events = filter_events(repository.events, criteria.to_criteria())
    if not events:
        raise HTTPException(status_code=404, detail="No events to generate report from")
    return _pdf_response(render_all_events_pdf(events), ALL_EVENTS_FILENAME)

@router.get("/reports/events/{event_id}")
def export_event_report(event_id: int, repository: EventRepository = Depends(get_repository)):
    """PDF report of a single event."""
    event = repository.get(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return _pdf_response(render_event_pdf(event), report_filename(event))
