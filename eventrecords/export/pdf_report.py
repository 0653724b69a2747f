"""PDF event reports.

One page per event: the institution header, a title line and a striped
two-column table of the event details.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from fpdf import FPDF
from fpdf.enums import TableCellFillMode

from ..config.reports import ReportConfig
from ..models.event import Event

logger = logging.getLogger(__name__)

NOT_PROVIDED = 'Not provided'
ALL_EVENTS_FILENAME = 'all-events-report.pdf'

class ExportFailed(Exception):
    """Raised when a report document cannot be produced."""
    pass

def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1."""
    return text.encode('latin-1', 'replace').decode('latin-1')

def _amount(value: Optional[float], config: ReportConfig) -> str:
    if not value:
        return NOT_PROVIDED
    shown = int(value) if float(value).is_integer() else value
    return f"{config.currency_prefix}{shown}"

def _count(value: Optional[int]) -> str:
    return NOT_PROVIDED if value is None else str(value)

def _names(values: List[str]) -> str:
    return ', '.join(values) if values else NOT_PROVIDED

def event_rows(event: Event, config: Optional[ReportConfig] = None) -> List[Tuple[str, str]]:
    """Label/value pairs printed in the report table."""
    config = config or ReportConfig()
    return [
        ("Event Name", event.title or NOT_PROVIDED),
        ("Category", event.category or NOT_PROVIDED),
        ("Event Type", event.event_type or NOT_PROVIDED),
        ("Start Date", event.display_date() if event.date else NOT_PROVIDED),
        ("End Date", event.display_end_date() or NOT_PROVIDED),
        ("Department", event.department or NOT_PROVIDED),
        ("Venue", event.venue or NOT_PROVIDED),
        ("Coordinator", event.coordinator or NOT_PROVIDED),
        ("Team Members", _names(event.team_members)),
        ("Resource Persons", _names(event.resource_persons)),
        ("Participants Count", _count(event.participants_count)),
        ("External Participants", _count(event.external_participants)),
        ("Sponsored By", event.sponsored_by or NOT_PROVIDED),
        ("Financial Assistance", _amount(event.financial_assistance, config)),
        ("Total Expenses", _amount(event.total_expenses, config)),
    ]

def report_filename(event: Event) -> str:
    """File name for a single-event report."""
    stem = re.sub(r'[^a-z0-9]', '_', event.title or 'event', flags=re.IGNORECASE)
    return f"{stem}-report.pdf"

def _new_document() -> FPDF:
    pdf = FPDF(orientation='P', unit='mm', format='A4')
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.set_margins(20, 20, 20)
    return pdf

def _add_event_page(pdf: FPDF, event: Event, heading: str, config: ReportConfig) -> None:
    pdf.add_page()
    pdf.set_font('Helvetica', 'B', 16)
    pdf.cell(0, 10, _latin1(config.institution_name), align='C', new_x='LMARGIN', new_y='NEXT')
    pdf.set_font('Helvetica', '', 14)
    pdf.cell(0, 10, _latin1(heading), align='C', new_x='LMARGIN', new_y='NEXT')
    pdf.ln(10)

    pdf.set_font('Helvetica', '', 10)
    with pdf.table(
        col_widths=(50, 120),
        first_row_as_headings=False,
        cell_fill_color=(235, 235, 235),
        cell_fill_mode=TableCellFillMode.ROWS,
        line_height=7,
    ) as table:
        for label, value in event_rows(event, config):
            row = table.row()
            row.cell(_latin1(label))
            row.cell(_latin1(value))

def render_event_pdf(event: Event, config: Optional[ReportConfig] = None) -> bytes:
    """
    Build the report for one event.

    Returns:
        bytes: The PDF document

    Raises:
        ExportFailed: If the document cannot be generated
    """
    config = config or ReportConfig()
    try:
        pdf = _new_document()
        _add_event_page(pdf, event, "Event Report", config)
        return bytes(pdf.output())
    except Exception as e:
        logger.error(f"Failed to generate report for event {event.id}: {e}")
        raise ExportFailed(f"Failed to generate PDF report: {e}") from e

def render_all_events_pdf(events: Iterable[Event], config: Optional[ReportConfig] = None) -> bytes:
    """
    Build one document with a page per event.

    An event that fails to render is logged and skipped.

    Returns:
        bytes: The PDF document

    Raises:
        ExportFailed: If there are no events or nothing could be rendered
    """
    config = config or ReportConfig()
    events = list(events)
    if not events:
        raise ExportFailed("No events to generate report from")

    pdf = _new_document()
    rendered = 0
    for event in events:
        try:
            _add_event_page(pdf, event, f"Event Report - {event.title}", config)
            rendered += 1
        except Exception as e:
            logger.warning(f"Error processing event {event.id} ({event.title!r}): {e}")
            continue

    if not rendered:
        raise ExportFailed("Failed to generate PDF report: no event could be rendered")

    try:
        return bytes(pdf.output())
    except Exception as e:
        logger.error(f"Error generating PDF: {e}")
        raise ExportFailed(f"Failed to generate PDF report: {e}") from e

def _write(path: Path, content: bytes) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as e:
        raise ExportFailed(f"Failed to save PDF file {path}: {e}") from e
    logger.info(f"Wrote report {path}")
    return path

def generate_event_pdf(
    event: Event,
    output_dir: Optional[Union[str, Path]] = None,
    config: Optional[ReportConfig] = None
) -> Path:
    """Write the single-event report into `output_dir` and return its path."""
    config = config or ReportConfig()
    directory = Path(output_dir) if output_dir is not None else config.output_dir
    return _write(directory / report_filename(event), render_event_pdf(event, config))

def generate_all_events_pdf(
    events: Iterable[Event],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ReportConfig] = None
) -> Path:
    """Write the combined report and return its path."""
    config = config or ReportConfig()
    path = Path(output_path) if output_path is not None else config.output_dir / ALL_EVENTS_FILENAME
    return _write(path, render_all_events_pdf(events, config))
