# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Sequence
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, users_router, events_router, notifications_router, health_router
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import MongoConnectionManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Root logging setup; a no-op when handlers are already installed"""
    logging.basicConfig(level=level, format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB on startup. A failed connection does not stop the
    application: requests needing the store answer 503/500 while the
    connection manager keeps reconnecting in the background.
    """
    connection = get_container().get(MongoConnectionManager)

    if not await connection.connect():
        logger.warning("Starting without a database connection; reconnecting in background")

    yield

    await connection.close()
    logger.info("Application shutdown complete")


def _format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    parts: List[str] = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": _format_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - JSON error bodies of the form {"error": "<message>"}
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="GuardWatch API",
        version="1.0.0",
        description="Camera event ingestion with per-account realtime notifications",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/auth")
    application.include_router(users_router, prefix="/users")
    application.include_router(events_router, prefix="/events")
    application.include_router(notifications_router)
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()
