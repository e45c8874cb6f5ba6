from typing import Optional

from pydantic import Field

from .base import CamelModel
from ...domain.models.user import User


class UserResponse(CamelModel):
    """DTO for account response (no password)"""
    id: str
    email: str
    notification_email: str
    full_name: Optional[str] = None
    camera_location: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            email=user.email,
            notification_email=user.notification_email,
            full_name=user.full_name,
            camera_location=user.camera_location,
        )


class CameraLocationResponse(CamelModel):
    id: str
    camera_location: Optional[str] = None


class CameraLocationUpdateRequest(CamelModel):
    camera_location: Optional[str] = Field(default=None, max_length=200)
