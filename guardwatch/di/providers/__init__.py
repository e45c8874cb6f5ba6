from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .realtime_provider import RealtimeProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider
from .events_provider import EventsProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "RealtimeProvider",
    "AuthProvider",
    "UserProvider",
    "EventsProvider",
]
