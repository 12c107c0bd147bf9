"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Every timestamp that is compared or persisted is a timezone-aware UTC datetime.

Functions:
- utc_now(): Returns the current timezone-aware UTC datetime
- ensure_utc(): Normalizes naive/aware datetimes to aware UTC
- to_iso(): Convert datetime object to ISO 8601 string
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string with a 'Z' suffix.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    return ensure_utc(dt).replace(microsecond=0).isoformat().replace("+00:00", "Z")
