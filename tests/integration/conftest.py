"""
Fixtures for API tests.

The application runs through TestClient against a container holding the real
use cases, realtime registry and broadcast router, with in-memory
repositories in place of MongoDB.
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from guardwatch.application.use_cases.auth import LoginUserUseCase, RegisterUserUseCase
from guardwatch.application.use_cases.event import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    UpdateEventStatusUseCase,
)
from guardwatch.application.use_cases.user import GetCameraLocationUseCase, UpdateCameraLocationUseCase
from guardwatch.di.base_container import BaseContainer
from guardwatch.domain.repositories import EventRepository, UserRepository
from guardwatch.infrastructure.db.mongo_connection import ConnectionState, MongoConnectionManager
from guardwatch.infrastructure.notifications import BroadcastRouter, SessionRegistry

CONTAINER_TARGETS = (
    "guardwatch.main.get_container",
    "guardwatch.api.v1.auth_controller.get_container",
    "guardwatch.api.v1.users_controller.get_container",
    "guardwatch.api.v1.events_controller.get_container",
    "guardwatch.api.v1.notifications_controller.get_container",
    "guardwatch.api.v1.health_controller.get_container",
)


def build_container(connection, user_repository: UserRepository, event_repository: EventRepository) -> BaseContainer:
    container = BaseContainer()
    registry = SessionRegistry()

    container.register_singleton(MongoConnectionManager, connection)
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(EventRepository, event_repository)
    container.register_singleton(SessionRegistry, registry)
    container.register_singleton(BroadcastRouter, BroadcastRouter(registry, send_timeout_seconds=1))

    container.register_factory(RegisterUserUseCase, lambda: RegisterUserUseCase(user_repository))
    container.register_factory(LoginUserUseCase, lambda: LoginUserUseCase(user_repository))
    container.register_factory(GetCameraLocationUseCase, lambda: GetCameraLocationUseCase(user_repository))
    container.register_factory(UpdateCameraLocationUseCase, lambda: UpdateCameraLocationUseCase(user_repository))
    container.register_factory(CreateEventUseCase, lambda: CreateEventUseCase(event_repository))
    container.register_factory(ListEventsUseCase, lambda: ListEventsUseCase(event_repository))
    container.register_factory(GetEventUseCase, lambda: GetEventUseCase(event_repository))
    container.register_factory(UpdateEventStatusUseCase, lambda: UpdateEventStatusUseCase(event_repository))
    return container


def run_app(container):
    """Start the app with every get_container() lookup pointed at container"""
    from guardwatch.main import app

    stack = ExitStack()
    for target in CONTAINER_TARGETS:
        stack.enter_context(patch(target, return_value=container))
    client = stack.enter_context(TestClient(app))
    return stack, client


@pytest.fixture
def connected_store():
    connection = MagicMock()
    connection.connect = AsyncMock(return_value=True)
    connection.close = AsyncMock()
    connection.state = ConnectionState.CONNECTED
    return connection


@pytest.fixture
def container(connected_store, user_repository, event_repository):
    return build_container(connected_store, user_repository, event_repository)


@pytest.fixture
def client(container):
    stack, test_client = run_app(container)
    with stack:
        yield test_client


@pytest.fixture
def app_factory():
    """Returns (build_container, run_app) for tests wiring their own store"""
    return build_container, run_app
