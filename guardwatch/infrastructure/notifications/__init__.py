"""Notifications infrastructure for real-time event notifications"""

from .session_registry import SessionRegistry, SubscriberSession
from .broadcast_router import (
    BroadcastRouter,
    Subscription,
    NEW_EVENT_TOPIC,
    EVENT_UPDATED_TOPIC,
    routing_key,
)

__all__ = [
    "SessionRegistry",
    "SubscriberSession",
    "BroadcastRouter",
    "Subscription",
    "NEW_EVENT_TOPIC",
    "EVENT_UPDATED_TOPIC",
    "routing_key",
]
