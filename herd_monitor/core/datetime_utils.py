"""
UTC-first datetime utilities.

Sheet timestamps are caller-supplied ISO-8601 strings and are kept as
strings on every record. These helpers only produce timestamps (mock
data, export filenames).
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Get current datetime in UTC with timezone info."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Current calendar date in UTC."""
    return utc_now().date()


def format_iso(dt: datetime) -> str:
    """
    Format datetime as ISO 8601 with millisecond precision and a ``Z`` suffix.

    Matches what browsers emit for ``Date.toISOString()``, which is the
    format the sheet's own rows use.

    Example:
        >>> format_iso(datetime(2024, 12, 29, 14, 30, tzinfo=timezone.utc))
        '2024-12-29T14:30:00.000Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def iso_from_now(offset: timedelta = timedelta(0)) -> str:
    """ISO string for now plus ``offset`` (negative for the past)."""
    return format_iso(utc_now() + offset)


def iso_date(value: Optional[date] = None) -> str:
    """``YYYY-MM-DD`` for ``value`` (default: today in UTC)."""
    return (value or utc_today()).isoformat()

