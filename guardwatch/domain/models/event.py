from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class EventStatus(str, Enum):
    """Lifecycle status of a detection event"""

    ACTIVE = "Active"
    RESOLVED = "Resolved"
    DISMISSED = "Dismissed"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EventStatus":
        """Return the matching status or raise ValueError for anything else"""
        for status in cls:
            if status.value == value:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise ValueError(f"Invalid status '{value}'. Allowed values: {allowed}")


@dataclass
class Event:
    """Domain model for a detection event owned by one account"""

    id: Optional[str]
    user_id: str
    timestamp: datetime

    type: Optional[str] = None
    location: Optional[str] = None
    severity: Optional[str] = None
    image: Optional[str] = None
    status: EventStatus = EventStatus.ACTIVE

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id or not self.user_id.strip():
            raise ValueError("Owner account ID is required")
        if not isinstance(self.status, EventStatus):
            self.status = EventStatus.parse(self.status)
