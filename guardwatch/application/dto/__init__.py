from .auth_dto import SignupRequest, LoginRequest
from .user_dto import UserResponse, CameraLocationResponse, CameraLocationUpdateRequest
from .event_dto import EventCreateRequest, EventStatusUpdateRequest, EventResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "CameraLocationResponse",
    "CameraLocationUpdateRequest",
    "EventCreateRequest",
    "EventStatusUpdateRequest",
    "EventResponse",
]
