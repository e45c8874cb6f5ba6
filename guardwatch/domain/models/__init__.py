from .user import User
from .event import Event, EventStatus

__all__ = ["User", "Event", "EventStatus"]
