from typing import Any, Dict

from fastapi import APIRouter

from ...di.container import get_container
from ...infrastructure.db.mongo_connection import MongoConnectionManager
from ...infrastructure.notifications import SessionRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Liveness plus the current database connection state"""
    container = get_container()
    connection = container.get(MongoConnectionManager)
    registry = container.get(SessionRegistry)
    return {
        "status": "ok",
        "database": connection.state.value,
        "sessions": registry.count(),
    }
