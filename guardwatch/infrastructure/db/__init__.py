from .mongo_connection import (
    ConnectionState,
    MongoConnectionManager,
    EVENTS_COLLECTION,
    USERS_COLLECTION,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_event_repository import MongoEventRepository

__all__ = [
    "ConnectionState",
    "MongoConnectionManager",
    "EVENTS_COLLECTION",
    "USERS_COLLECTION",
    "MongoUserRepository",
    "MongoEventRepository",
]
