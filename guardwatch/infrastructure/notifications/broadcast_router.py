"""Broadcast Router: per-account fan-out of realtime notifications"""

import asyncio
import json
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, List, Optional, Set

from .session_registry import SessionRegistry, SubscriberSession

logger = logging.getLogger(__name__)

NEW_EVENT_TOPIC = "new_event"
EVENT_UPDATED_TOPIC = "event_updated"


def routing_key(topic: str, account_id: str) -> str:
    """Client-visible event name, e.g. new_event_<accountId>"""
    return f"{topic}_{account_id}"


@dataclass(frozen=True)
class Subscription:
    """Handle returned by BroadcastRouter.subscribe()"""

    router: "BroadcastRouter"
    account_id: str
    session_id: str

    def cancel(self) -> None:
        self.router.unsubscribe(self.account_id, self.session_id)


class BroadcastRouter:
    """
    Maps account IDs to the sessions following them and publishes typed
    notifications to those sessions.

    Holds session IDs only; sessions are resolved through the registry at
    publish time, so a session that disconnected is never sent to. Delivery is
    at most once per currently subscribed session with no replay.
    """

    def __init__(self, registry: SessionRegistry, send_timeout_seconds: float = 5.0) -> None:
        self._registry = registry
        self._send_timeout_seconds = send_timeout_seconds
        # account_id -> session IDs
        self._subscribers: Dict[str, Set[str]] = {}
        # session_id -> account_id
        self._session_accounts: Dict[str, str] = {}
        self._lock = Lock()

    def subscribe(self, account_id: str, session_id: str) -> Subscription:
        """
        Associate a session with an account. A session follows one account at
        a time; subscribing again moves it.

        Raises:
            ValueError: If account_id is empty or the session is unknown or closed
        """
        if not account_id or not account_id.strip():
            raise ValueError("Account ID is required to subscribe")
        session = self._registry.get(session_id)
        if session is None:
            raise ValueError(f"Unknown session {session_id}")
        if not session.alive:
            raise ValueError(f"Session {session_id} is closed")

        with self._lock:
            self._remove_locked(session_id)
            self._subscribers.setdefault(account_id, set()).add(session_id)
            self._session_accounts[session_id] = account_id
        self._registry.bind_account(session_id, account_id)

        logger.info(f"Session {session_id} subscribed to account {account_id}")
        return Subscription(router=self, account_id=account_id, session_id=session_id)

    def unsubscribe(self, account_id: str, session_id: str) -> None:
        with self._lock:
            if self._session_accounts.get(session_id) != account_id:
                return
            self._remove_locked(session_id)
        self._registry.bind_account(session_id, None)
        logger.info(f"Session {session_id} unsubscribed from account {account_id}")

    def drop_session(self, session_id: str) -> None:
        """Remove every subscription held by a session (used on disconnect)"""
        with self._lock:
            self._remove_locked(session_id)

    def subscriber_count(self, account_id: str) -> int:
        with self._lock:
            return len(self._subscribers.get(account_id, ()))

    def get_subscribed_accounts(self) -> List[str]:
        with self._lock:
            return list(self._subscribers.keys())

    async def publish(self, topic: str, account_id: str, payload: Dict[str, Any]) -> int:
        """
        Send a notification to every live session subscribed to an account.

        Delivery failures are logged and the failing session is dropped; they
        are never raised to the caller.

        Args:
            topic: Notification topic (NEW_EVENT_TOPIC, EVENT_UPDATED_TOPIC)
            account_id: Owning account
            payload: JSON-serializable notification body

        Returns:
            Number of sessions the message was delivered to
        """
        with self._lock:
            session_ids = list(self._subscribers.get(account_id, ()))

        if not session_ids:
            logger.debug(f"No subscribers for {routing_key(topic, account_id)}")
            return 0

        message = {
            "event": routing_key(topic, account_id),
            "type": topic,
            "data": payload,
        }
        try:
            message_json = json.dumps(message)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize {topic} notification to JSON: {e}")
            return 0

        sessions: List[SubscriberSession] = []
        for session_id in session_ids:
            session = self._registry.get(session_id)
            if session is None or not session.alive:
                self.drop_session(session_id)
                continue
            sessions.append(session)

        results = await asyncio.gather(*(self._deliver(session, message_json) for session in sessions))

        failed = [session for session, delivered in zip(sessions, results) if not delivered]
        for session in failed:
            session.alive = False
            self.drop_session(session.id)
        if failed:
            await asyncio.gather(*(self._close(session) for session in failed))

        sent_count = sum(1 for delivered in results if delivered)
        logger.debug(
            f"Published {routing_key(topic, account_id)} to {sent_count}/{len(session_ids)} sessions"
        )
        return sent_count

    async def _deliver(self, session: SubscriberSession, message_json: str) -> bool:
        try:
            await asyncio.wait_for(session.send(message_json), timeout=self._send_timeout_seconds)
            return True
        except asyncio.TimeoutError:
            logger.warning(f"Timed out sending to session {session.id}")
            return False
        except Exception as e:
            logger.warning(f"Failed to send to session {session.id}: {e}")
            return False

    def _remove_locked(self, session_id: str) -> Optional[str]:
        account_id = self._session_accounts.pop(session_id, None)
        if account_id is None:
            return None
        members = self._subscribers.get(account_id)
        if members is not None:
            members.discard(session_id)
            if not members:
                del self._subscribers[account_id]
        return account_id

    async def _close(self, session: SubscriberSession) -> None:
        """Close a dead session's transport so its connection handler cleans up"""
        close = getattr(session.transport, "close", None)
        if close is None:
            return
        try:
            await asyncio.wait_for(close(), timeout=self._send_timeout_seconds)
        except Exception as e:
            logger.debug(f"Error closing session {session.id}: {e}")
