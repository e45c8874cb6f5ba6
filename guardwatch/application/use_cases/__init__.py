from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .user import (
    GetCameraLocationUseCase,
    UpdateCameraLocationUseCase,
)
from .event import (
    CreateEventUseCase,
    ListEventsUseCase,
    GetEventUseCase,
    UpdateEventStatusUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCameraLocationUseCase",
    "UpdateCameraLocationUseCase",
    "CreateEventUseCase",
    "ListEventsUseCase",
    "GetEventUseCase",
    "UpdateEventStatusUseCase",
]
