"""Notifications API endpoint for real-time event notifications via WebSocket"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from ...di.container import get_container
from ...infrastructure.notifications import BroadcastRouter, SessionRegistry, Subscription

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.websocket("/ws")
async def websocket_notifications(
    websocket: WebSocket,
    user_id: Optional[str] = Query(None, alias="userId", description="Account to follow right away"),
):
    """
    WebSocket endpoint for receiving real-time event notifications.

    A session follows one account. It joins either with ?userId= on connect
    or later by sending {"action": "join", "userId": "..."}; {"action": "leave"}
    stops the notifications. Plain "ping" text is answered with "pong".

    Pushed messages look like:
        {"event": "new_event_<userId>", "type": "new_event", "data": {...}}
        {"event": "event_updated_<userId>", "type": "event_updated", "data": {...}}

    Example connection:
        ws://host/ws?userId=<account_id>
    """
    container = get_container()
    registry: SessionRegistry = container.get(SessionRegistry)
    broadcast_router: BroadcastRouter = container.get(BroadcastRouter)

    await websocket.accept()
    session_id = registry.on_connect(websocket)
    subscription: Optional[Subscription] = None

    try:
        await websocket.send_json({
            "type": "connection_established",
            "message": "Connected to notifications service",
            "sessionId": session_id,
        })

        if user_id and user_id.strip():
            subscription = broadcast_router.subscribe(user_id.strip(), session_id)
            await websocket.send_json({"type": "joined", "userId": subscription.account_id})

        while True:
            message = await websocket.receive_text()

            # Keep-alive
            if message == "ping":
                await websocket.send_text("pong")
                continue

            try:
                data = json.loads(message)
            except json.JSONDecodeError:
                logger.debug(f"Ignoring non-JSON message from session {session_id}: {message}")
                continue
            if not isinstance(data, dict):
                continue

            action = data.get("action")
            if action == "join":
                account_id = data.get("userId") or data.get("accountId")
                if not isinstance(account_id, str) or not account_id.strip():
                    await websocket.send_json({"type": "error", "error": "userId is required to join"})
                    continue
                try:
                    subscription = broadcast_router.subscribe(account_id.strip(), session_id)
                except ValueError as e:
                    await websocket.send_json({"type": "error", "error": str(e)})
                    continue
                await websocket.send_json({"type": "joined", "userId": subscription.account_id})
            elif action == "leave":
                left = subscription.account_id if subscription else None
                if subscription is not None:
                    subscription.cancel()
                    subscription = None
                await websocket.send_json({"type": "left", "userId": left})
            else:
                logger.debug(f"Unknown action from session {session_id}: {action}")

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for session {session_id}")
    except Exception as e:
        logger.error(f"Error in WebSocket session {session_id}: {e}", exc_info=True)
    finally:
        broadcast_router.drop_session(session_id)
        registry.on_disconnect(session_id)
