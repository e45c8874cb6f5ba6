# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    EventsProvider,
    RealtimeProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection manager (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on the connection manager
    3. Realtime session registry and broadcast router (RealtimeProvider)
    4. Use cases (AuthProvider, UserProvider, EventsProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → realtime → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        RealtimeProvider.register(self)

        AuthProvider.register(self)
        UserProvider.register(self)
        EventsProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
