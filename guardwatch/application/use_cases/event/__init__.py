from .create_event import CreateEventUseCase
from .list_events import ListEventsUseCase
from .get_event import GetEventUseCase
from .update_event_status import UpdateEventStatusUseCase

__all__ = [
    "CreateEventUseCase",
    "ListEventsUseCase",
    "GetEventUseCase",
    "UpdateEventStatusUseCase",
]
