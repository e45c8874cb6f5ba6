from .auth_controller import router as auth_router
from .users_controller import router as users_router
from .events_controller import router as events_router
from .notifications_controller import router as notifications_router
from .health_controller import router as health_router


__all__ = ["auth_router", "users_router", "events_router", "notifications_router", "health_router"]
