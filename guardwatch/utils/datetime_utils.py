"""
Centralized DateTime Utilities
==============================

All timestamps persisted to MongoDB are timezone-aware UTC. PyMongo/Motor
return BSON dates as naive datetimes representing UTC, so values read back
from the store are normalized with ensure_utc().
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


def truncate_to_millis(dt: datetime) -> datetime:
    """
    Drop sub-millisecond precision.

    BSON dates carry milliseconds only; truncating before insert keeps the
    value returned to the caller equal to what a later read will return.
    """
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)
