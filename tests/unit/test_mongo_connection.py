"""
Unit tests for MongoConnectionManager state handling and reconnects.

The Motor client is replaced by a factory returning MagicMocks, so no
MongoDB server is needed.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from guardwatch.domain.exceptions import ServiceUnavailableError, StoreError
from guardwatch.infrastructure.db.mongo_connection import ConnectionState, MongoConnectionManager


class FakeClientFactory:
    """Builds mock clients; the first `failures` clients fail their ping"""

    def __init__(self, failures: int = 0) -> None:
        self.failures = failures
        self.clients = []

    def __call__(self, uri, **kwargs):
        client = MagicMock()
        client.kwargs = kwargs
        if len(self.clients) < self.failures:
            client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
        else:
            client.admin.command = AsyncMock(return_value={"ok": 1})
        database = MagicMock()
        database.__getitem__.return_value.create_index = AsyncMock()
        client.__getitem__.return_value = database
        self.clients.append(client)
        return client


async def _wait_for(predicate, attempts: int = 200) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0.01)
    raise AssertionError("condition not reached")


@pytest.mark.asyncio
async def test_connect_success(mock_settings):
    factory = FakeClientFactory()
    manager = MongoConnectionManager(mock_settings, client_factory=factory)

    assert manager.state == ConnectionState.DISCONNECTED
    assert await manager.connect() is True
    assert manager.state == ConnectionState.CONNECTED
    assert manager.is_ready()

    kwargs = factory.clients[0].kwargs
    assert kwargs["serverSelectionTimeoutMS"] == 100
    assert kwargs["tz_aware"] is True
    assert len(kwargs["event_listeners"]) == 1

    await manager.close()
    assert manager.state == ConnectionState.DISCONNECTED
    factory.clients[0].close.assert_called_once()


@pytest.mark.asyncio
async def test_failed_connect_keeps_retrying(mock_settings):
    factory = FakeClientFactory(failures=2)
    manager = MongoConnectionManager(mock_settings, client_factory=factory)

    assert await manager.connect() is False
    assert manager.state == ConnectionState.DISCONNECTED
    factory.clients[0].close.assert_called_once()

    await _wait_for(manager.is_ready)
    assert len(factory.clients) == 3
    await manager.close()


@pytest.mark.asyncio
async def test_with_connection_fails_fast_when_disconnected(mock_settings):
    manager = MongoConnectionManager(mock_settings, client_factory=FakeClientFactory())
    operation = AsyncMock()

    with pytest.raises(ServiceUnavailableError):
        await manager.with_connection(operation)
    operation.assert_not_called()


@pytest.mark.asyncio
async def test_with_connection_runs_operation(mock_settings):
    factory = FakeClientFactory()
    manager = MongoConnectionManager(mock_settings, client_factory=factory)
    await manager.connect()

    async def operation(database):
        return database

    assert await manager.with_connection(operation) is factory.clients[0]["guardwatch"]
    await manager.close()


@pytest.mark.asyncio
async def test_with_connection_timeout_is_store_error(mock_settings):
    mock_settings.store_operation_timeout_seconds = 0.01
    manager = MongoConnectionManager(mock_settings, client_factory=FakeClientFactory())
    await manager.connect()

    async def slow(database):
        await asyncio.sleep(1)

    with pytest.raises(StoreError, match="timed out") as exc_info:
        await manager.with_connection(slow)
    assert not isinstance(exc_info.value, ServiceUnavailableError)
    await manager.close()


@pytest.mark.asyncio
async def test_driver_error_is_store_error(mock_settings):
    manager = MongoConnectionManager(mock_settings, client_factory=FakeClientFactory())
    await manager.connect()

    async def failing(database):
        raise OperationFailure("boom")

    with pytest.raises(StoreError):
        await manager.with_connection(failing)
    assert manager.state == ConnectionState.CONNECTED
    await manager.close()


@pytest.mark.asyncio
async def test_server_selection_error_triggers_reconnect(mock_settings):
    factory = FakeClientFactory()
    manager = MongoConnectionManager(mock_settings, client_factory=factory)
    await manager.connect()

    async def lost(database):
        raise ServerSelectionTimeoutError("gone")

    with pytest.raises(StoreError):
        await manager.with_connection(lost)
    assert manager.state != ConnectionState.CONNECTED

    await _wait_for(manager.is_ready)
    assert len(factory.clients) == 2
    # Previous client is closed once the new handle is in place
    factory.clients[0].close.assert_called_once()
    await manager.close()


@pytest.mark.asyncio
async def test_stale_generation_loss_is_ignored(mock_settings):
    factory = FakeClientFactory()
    manager = MongoConnectionManager(mock_settings, client_factory=factory)
    await manager.connect()

    manager.report_connection_lost(1, "topology lost")
    await _wait_for(lambda: len(factory.clients) == 2 and manager.is_ready())

    # A late report from the first client must not tear down the second one
    manager.report_connection_lost(1, "late report")
    await asyncio.sleep(0.05)
    assert manager.state == ConnectionState.CONNECTED
    assert len(factory.clients) == 2
    await manager.close()


@pytest.mark.asyncio
async def test_close_stops_reconnecting(mock_settings):
    mock_settings.mongo_reconnect_delay_seconds = 0.05
    factory = FakeClientFactory(failures=100)
    manager = MongoConnectionManager(mock_settings, client_factory=factory)

    await manager.connect()
    await manager.close()
    attempts = len(factory.clients)

    await asyncio.sleep(0.1)
    assert len(factory.clients) == attempts
    assert await manager.connect() is False
