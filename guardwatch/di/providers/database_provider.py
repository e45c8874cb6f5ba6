from typing import TYPE_CHECKING

from ...infrastructure.db.mongo_connection import MongoConnectionManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB connection"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the connection manager. It is created disconnected; the
        application lifespan calls connect() on startup.
        """
        container.register_singleton(MongoConnectionManager, MongoConnectionManager())
