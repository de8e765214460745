"""
Date sorting and formatting helpers for the experience timeline and chat widget.
"""

from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Sequence, TypeVar, Union

DateLike = Union[date, datetime, str]
T = TypeVar("T")

PRESENT_LABEL = "Present"
DURATION_SEPARATOR = " - "

# Fixed English abbreviations so output never depends on the process locale
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_date(value: DateLike) -> date:
    """
    Coerce a date-like value to a calendar date.

    Strings must start with an ISO date (``YYYY-MM-DD``); any time or offset part
    after it is ignored. Datetimes keep their own calendar day with no timezone
    conversion.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported date value: {value!r}")


def _start_date_of(record: Any) -> date:
    if isinstance(record, Mapping):
        value = record.get("start_date", record.get("startDate"))
    else:
        value = getattr(record, "start_date")
    return to_date(value)


def sort_by_start_date_descending(records: Sequence[T]) -> List[T]:
    """
    Order records so the latest start date comes first.

    Returns a new list and leaves ``records`` untouched. Records sharing a start
    date keep their original relative order. End dates play no part.
    """
    return sorted(records, key=_start_date_of, reverse=True)


def format_date(value: Optional[DateLike]) -> str:
    """Render a date as e.g. ``Jan 2024``; ``None`` renders as ``Present``."""
    if value is None:
        return PRESENT_LABEL
    day = to_date(value)
    return f"{_MONTH_ABBREVIATIONS[day.month - 1]} {day.year:04d}"


def format_duration(start: DateLike, end: Optional[DateLike]) -> str:
    """Render a date range, e.g. ``Jan 2023 - Present``."""
    return f"{format_date(start)}{DURATION_SEPARATOR}{format_date(end)}"


def format_timestamp(moment: datetime) -> str:
    """Render a chat timestamp as 24-hour ``HH:MM``."""
    return moment.strftime("%H:%M")
