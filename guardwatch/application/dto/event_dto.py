from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from .base import CamelModel
from ...domain.models.event import Event


class EventCreateRequest(CamelModel):
    """
    Inbound event. The owning account may be sent as userId or accountId;
    status is validated by the use case so bad values map to 400.
    """
    user_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("userId", "accountId", "user_id"),
    )
    timestamp: Optional[datetime] = None
    image: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    severity: Optional[str] = None


class EventStatusUpdateRequest(CamelModel):
    status: Optional[str] = None


class EventResponse(CamelModel):
    id: str
    user_id: str
    timestamp: datetime
    image: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    status: str
    severity: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id or "",
            user_id=event.user_id,
            timestamp=event.timestamp,
            image=event.image,
            type=event.type,
            location=event.location,
            status=event.status.value,
            severity=event.severity,
        )
