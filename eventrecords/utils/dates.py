"""Date helpers for event timestamps.

Event dates travel as ISO-8601 strings. Parsing never guesses a format:
anything `datetime.fromisoformat` rejects (after normalising a trailing
``Z``) is treated as invalid.
"""

from datetime import datetime, date
from typing import Optional, Union

INVALID_DATE = "Invalid Date"

def parse_timestamp(value: Optional[str]) -> datetime:
    """
    Parse an ISO-8601 timestamp string.

    Args:
        value: Timestamp such as ``2024-02-05``, ``2024-02-05T10:30:00``
               or ``2024-02-05T10:30:00.000Z``

    Returns:
        datetime: Parsed value (timezone-aware if the string carried an offset)

    Raises:
        ValueError: If the value is empty or not a valid ISO-8601 timestamp
    """
    if not value or not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text)

def to_day(value: Union[str, date, datetime]) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_timestamp(value).date()

def to_iso(value: Union[str, date, datetime]) -> str:
    """Normalise a date or timestamp to an ISO-8601 string."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).isoformat()
    return parse_timestamp(value).isoformat()

def format_display_date(value: Optional[str]) -> str:
    """Format a timestamp for display, or return the invalid-date sentinel."""
    try:
        return parse_timestamp(value).strftime('%d/%m/%Y')
    except (ValueError, TypeError):
        return INVALID_DATE
