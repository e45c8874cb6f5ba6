# Standard library imports
from threading import Lock
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service container.

    Keys are usually interface classes (e.g. UserRepository) or strings.
    Singletons are stored instances; factories build a fresh object on every
    get() call.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
        self._lock = Lock()

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        with self._lock:
            self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        with self._lock:
            self._factories[key] = factory

    def has(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._singletons or key in self._factories

    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency

        Raises:
            KeyError: If nothing is registered under key
        """
        with self._lock:
            if key in self._singletons:
                return self._singletons[key]
            factory = self._factories.get(key)
        if factory is None:
            name = getattr(key, "__name__", key)
            raise KeyError(f"No dependency registered for {name}")
        return factory()
