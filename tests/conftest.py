"""
Shared pytest fixtures for guardwatch tests.
"""
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from guardwatch.domain.exceptions import DuplicateAccountError
from guardwatch.domain.models.event import Event, EventStatus
from guardwatch.domain.models.user import User
from guardwatch.domain.repositories.event_repository import EventRepository
from guardwatch.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_guardwatch_db",
        "MONGO_RECONNECT_DELAY_SECONDS": "0",
        "CORS_ALLOWED_ORIGINS": "http://localhost:3000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Settings double with short timeouts."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_server_selection_timeout_ms = 100
    mock.mongo_connect_timeout_ms = 100
    mock.mongo_reconnect_delay_seconds = 0
    mock.store_operation_timeout_seconds = 1
    mock.broadcast_send_timeout_seconds = 1
    mock.cors_allowed_origins = ["http://localhost:3000"]
    return mock


class FakeWebSocket:
    """Transport double recording every message pushed to it"""

    def __init__(self, fail: bool = False) -> None:
        self.sent: List[str] = []
        self.fail = fail
        self.closed = False

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(text)

    async def close(self) -> None:
        self.closed = True


class InMemoryEventRepository(EventRepository):
    """EventRepository double keeping documents in insertion order"""

    def __init__(self) -> None:
        self.events: List[Event] = []

    async def create(self, event: Event) -> Event:
        stored = Event(
            id=str(ObjectId()),
            user_id=event.user_id,
            timestamp=event.timestamp,
            type=event.type,
            location=event.location,
            severity=event.severity,
            image=event.image,
            status=event.status,
        )
        self.events.append(stored)
        return stored

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        return next((e for e in self.events if e.id == event_id), None)

    async def list_by_user(self, user_id: str) -> List[Event]:
        owned = [e for e in self.events if e.user_id == user_id]
        return sorted(owned, key=lambda e: e.timestamp, reverse=True)

    async def update_status(self, event_id: str, status: EventStatus) -> Optional[Event]:
        event = await self.get_by_id(event_id)
        if event is None:
            return None
        event.status = status
        return event


class InMemoryUserRepository(UserRepository):
    """UserRepository double enforcing the unique email handle"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def save(self, user: User) -> User:
        if user.id is None:
            if await self.find_by_email(user.email) is not None:
                raise DuplicateAccountError("User with this email already exists")
            user.id = str(ObjectId())
        self.users[user.id] = user
        return user

    async def update_camera_location(self, user_id: str, camera_location: Optional[str]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        user.camera_location = camera_location
        return user


@pytest.fixture
def fake_websocket_factory():
    return FakeWebSocket


@pytest.fixture
def event_repository():
    return InMemoryEventRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def make_event():
    def _make(user_id: str = "user-1", minute: int = 0, **kwargs) -> Event:
        return Event(
            id=kwargs.pop("id", None),
            user_id=user_id,
            timestamp=datetime(2025, 1, 15, 12, minute, tzinfo=timezone.utc),
            **kwargs,
        )
    return _make


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()
