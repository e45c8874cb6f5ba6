from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.event_repository import EventRepository
from ...infrastructure.db.mongo_connection import MongoConnectionManager
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_event_repository import MongoEventRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        connection = container.get(MongoConnectionManager)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(connection=connection)
        )

        container.register_singleton(
            EventRepository,
            MongoEventRepository(connection=connection)
        )
