"""Session Registry: owns live subscriber connections"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, Optional

from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class SubscriberSession:
    """
    One live subscriber connection.

    The transport is anything with an async send_text(str) method, in
    practice a FastAPI WebSocket.
    """

    id: str
    transport: Any
    account_id: Optional[str] = None
    alive: bool = True
    connected_at: datetime = field(default_factory=utc_now)

    async def send(self, message_json: str) -> None:
        await self.transport.send_text(message_json)


class SessionRegistry:
    """
    Tracks connect/disconnect of subscriber sessions.

    Thread-safe; connect and disconnect of independent sessions may interleave.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, SubscriberSession] = {}
        self._lock = Lock()

    def on_connect(self, transport: Any) -> str:
        """
        Register a new connection.

        Args:
            transport: Connection used to push messages to the client

        Returns:
            Ephemeral session ID
        """
        session = SubscriberSession(id=uuid.uuid4().hex, transport=transport)
        with self._lock:
            self._sessions[session.id] = session
            total = len(self._sessions)
        logger.info(f"Session {session.id} connected. Total sessions: {total}")
        return session.id

    def on_disconnect(self, session_id: str) -> Optional[SubscriberSession]:
        """
        Forget a session. Unknown IDs are ignored.

        Returns:
            The removed session, marked not alive, or None
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
            total = len(self._sessions)
        if session is None:
            return None
        session.alive = False
        logger.info(f"Session {session_id} disconnected. Total sessions: {total}")
        return session

    def get(self, session_id: str) -> Optional[SubscriberSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def bind_account(self, session_id: str, account_id: Optional[str]) -> bool:
        """Record which account a session follows. Returns False for unknown sessions."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            session.account_id = account_id
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
