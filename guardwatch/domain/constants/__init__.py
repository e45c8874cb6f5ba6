"""Constants for domain model field names"""

from .user_fields import UserFields
from .event_fields import EventFields

__all__ = [
    "UserFields",
    "EventFields",
]
