from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.notifications import BroadcastRouter, SessionRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RealtimeProvider:
    """Registers the session registry and the broadcast router that reads from it"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        registry = SessionRegistry()
        container.register_singleton(SessionRegistry, registry)
        container.register_singleton(
            BroadcastRouter,
            BroadcastRouter(
                registry=registry,
                send_timeout_seconds=get_settings().broadcast_send_timeout_seconds,
            ),
        )
