"""Report export package."""

from .pdf_report import (
    ExportFailed,
    generate_event_pdf,
    generate_all_events_pdf,
    render_event_pdf,
    render_all_events_pdf,
    report_filename,
    ALL_EVENTS_FILENAME
)

__all__ = [
    'ExportFailed',
    'generate_event_pdf',
    'generate_all_events_pdf',
    'render_event_pdf',
    'render_all_events_pdf',
    'report_filename',
    'ALL_EVENTS_FILENAME',
]
