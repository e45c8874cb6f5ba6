"""Utility modules for the GuardWatch backend."""

from .datetime_utils import utc_now, ensure_utc, truncate_to_millis

__all__ = [
    "utc_now",
    "ensure_utc",
    "truncate_to_millis",
]
