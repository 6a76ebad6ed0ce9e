"""
DateTime utilities for consistent timezone handling.
"""
from datetime import datetime, timezone
from typing import Callable


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC timezone.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    if dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp (accepting a trailing 'Z') into aware UTC."""
    return to_utc(datetime.fromisoformat(value.replace('Z', '+00:00')))
