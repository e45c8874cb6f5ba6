"""
MongoDB connection manager.

Owns the single logical connection to MongoDB. The handle is replaced as a
whole on every successful (re)connect so readers never observe a half-built
connection. Loss of the server is observed through pymongo's topology
monitoring and turns into a reconnect loop with a fixed delay.

Store operations go through with_connection(), which fails fast with
ServiceUnavailableError while the manager is not connected.
"""

# Standard library imports
import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple, TypeVar

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, monitoring
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.constants import EventFields, UserFields
from ...domain.exceptions import ServiceUnavailableError, StoreConnectionError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

USERS_COLLECTION = "users"
EVENTS_COLLECTION = "events"


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class _TopologyWatcher(monitoring.TopologyListener):
    """
    Reports loss of every readable server for one client generation.

    pymongo calls these hooks from its monitor threads.
    """

    def __init__(self, manager: "MongoConnectionManager", generation: int) -> None:
        self._manager = manager
        self._generation = generation

    def opened(self, event: monitoring.TopologyOpenedEvent) -> None:
        pass

    def description_changed(self, event: monitoring.TopologyDescriptionChangedEvent) -> None:
        previous = event.previous_description
        new = event.new_description
        if previous.has_readable_server() and not new.has_readable_server():
            self._manager.report_connection_lost(self._generation, "no readable server in topology")

    def closed(self, event: monitoring.TopologyClosedEvent) -> None:
        pass


class MongoConnectionManager:
    """
    Connection manager with explicit Disconnected/Connecting/Connected state.

    Args:
        settings: Application settings (defaults to get_settings())
        client_factory: Callable building the Motor client, overridable in tests
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ) -> None:
        self._settings = settings or get_settings()
        self._client_factory = client_factory
        self._state = ConnectionState.DISCONNECTED
        self._handle: Optional[Tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]] = None
        self._generation = 0
        self._connect_lock = asyncio.Lock()
        self._reconnect_task: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._closed = False

    @property
    def state(self) -> ConnectionState:
        return self._state

    def is_ready(self) -> bool:
        return self._state == ConnectionState.CONNECTED and self._handle is not None

    async def connect(self) -> bool:
        """
        Open the connection, scheduling background reconnects on failure.

        Never raises: a failed attempt is logged and the process keeps serving
        requests, which fail with ServiceUnavailableError until a reconnect
        succeeds.

        Returns:
            True if the manager is connected when the call returns
        """
        connected = await self._attempt()
        if not connected:
            self._schedule_reconnect()
        return connected

    async def close(self) -> None:
        """Stop reconnecting and close the current client"""
        self._closed = True
        if self._reconnect_task is not None and not self._reconnect_task.done():
            self._reconnect_task.cancel()
            try:
                await self._reconnect_task
            except asyncio.CancelledError:
                pass
        self._reconnect_task = None

        handle, self._handle = self._handle, None
        self._state = ConnectionState.DISCONNECTED
        if handle is not None:
            handle[0].close()
        logger.info("MongoDB connection closed")

    async def with_connection(self, operation: Callable[[AsyncIOMotorDatabase], Awaitable[T]]) -> T:
        """
        Run a store operation against the current database handle.

        Args:
            operation: Coroutine function receiving the database

        Returns:
            Whatever the operation returns

        Raises:
            ServiceUnavailableError: If not connected (the backend is not touched)
            StoreError: On timeout or any pymongo failure
        """
        handle = self._handle
        if self._state != ConnectionState.CONNECTED or handle is None:
            raise ServiceUnavailableError("Database is not available")

        _, database = handle
        try:
            return await asyncio.wait_for(
                operation(database),
                timeout=self._settings.store_operation_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise StoreError("Database operation timed out") from e
        except ServerSelectionTimeoutError as e:
            self.mark_disconnected(str(e))
            raise StoreError(f"Database connection lost: {e}") from e
        except PyMongoError as e:
            raise StoreError(f"Database error: {e}") from e

    def mark_disconnected(self, reason: str = "") -> None:
        """Transition Connected -> Disconnected and start reconnecting. Must run on the event loop."""
        if self._state != ConnectionState.CONNECTED:
            return
        self._state = ConnectionState.DISCONNECTED
        logger.warning("MongoDB disconnected: %s", reason or "unknown reason")
        self._schedule_reconnect()

    def report_connection_lost(self, generation: int, reason: str) -> None:
        """Thread-safe entry point for pymongo monitor threads"""
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        loop.call_soon_threadsafe(self._on_connection_lost, generation, reason)

    def _on_connection_lost(self, generation: int, reason: str) -> None:
        if generation != self._generation:
            # Superseded client
            return
        self.mark_disconnected(reason)

    async def _attempt(self) -> bool:
        async with self._connect_lock:
            if self._closed:
                return False
            if self.is_ready():
                return True

            self._loop = asyncio.get_running_loop()
            self._state = ConnectionState.CONNECTING
            self._generation += 1
            generation = self._generation

            try:
                client, database = await self._open(generation)
            except StoreConnectionError as e:
                logger.error("MongoDB connection error: %s", e)
                self._state = ConnectionState.DISCONNECTED
                return False

            previous, self._handle = self._handle, (client, database)
            self._state = ConnectionState.CONNECTED
            logger.info(
                "Connection to MongoDB made successfully (database=%s, generation=%d)",
                self._settings.mongo_database_name,
                generation,
            )
            if previous is not None:
                previous[0].close()
            return True

    async def _open(self, generation: int) -> Tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]:
        client = self._client_factory(
            self._settings.mongo_uri,
            serverSelectionTimeoutMS=self._settings.mongo_server_selection_timeout_ms,
            connectTimeoutMS=self._settings.mongo_connect_timeout_ms,
            tz_aware=True,
            event_listeners=[_TopologyWatcher(self, generation)],
        )
        try:
            await client.admin.command("ping")
            database = client[self._settings.mongo_database_name]
            await self._ensure_indexes(database)
        except PyMongoError as e:
            client.close()
            raise StoreConnectionError(f"Failed to connect to MongoDB: {e}") from e
        return client, database

    async def _ensure_indexes(self, database: AsyncIOMotorDatabase) -> None:
        await database[USERS_COLLECTION].create_index(
            [(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"
        )
        await database[EVENTS_COLLECTION].create_index(
            [(EventFields.USER_ID, ASCENDING), (EventFields.TIMESTAMP, DESCENDING)],
            name="user_timestamp_desc",
        )

    def _schedule_reconnect(self) -> None:
        if self._closed:
            return
        if self._reconnect_task is not None and not self._reconnect_task.done():
            return
        self._reconnect_task = asyncio.get_running_loop().create_task(self._reconnect_loop())

    async def _reconnect_loop(self) -> None:
        delay = self._settings.mongo_reconnect_delay_seconds
        attempt = 0
        while not self._closed and not self.is_ready():
            attempt += 1
            logger.info("Reconnecting to MongoDB in %.1fs (attempt %d)", delay, attempt)
            await asyncio.sleep(delay)
            await self._attempt()
