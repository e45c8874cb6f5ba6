"""
Events API: ingest events, list them per account, update status.

Successful writes are followed by a realtime broadcast to the owning
account's sessions. Broadcast failures are logged and never change the
response of the request that caused them.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException, Query, status

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.event_dto import EventCreateRequest, EventResponse, EventStatusUpdateRequest
from ...application.use_cases.event.create_event import CreateEventUseCase
from ...application.use_cases.event.get_event import GetEventUseCase
from ...application.use_cases.event.list_events import ListEventsUseCase
from ...application.use_cases.event.update_event_status import UpdateEventStatusUseCase
from ...di.container import get_container
from ...domain.exceptions import (
    MissingAccountError,
    NotFoundError,
    ServiceUnavailableError,
    StoreError,
    ValidationError,
)
from ...infrastructure.notifications import BroadcastRouter, EVENT_UPDATED_TOPIC, NEW_EVENT_TOPIC

# -----------------------------------------------------------------------------
# Logging and router
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)
router = APIRouter(tags=["events"])


async def broadcast_event(topic: str, event: EventResponse) -> int:
    """Publish an event to its owner's sessions. Returns deliveries, 0 on failure."""
    try:
        broadcast_router = get_container().get(BroadcastRouter)
        return await broadcast_router.publish(
            topic,
            event.user_id,
            event.model_dump(mode="json", by_alias=True),
        )
    except Exception as e:
        logger.error("Failed to publish %s for event %s: %s", topic, event.id, e, exc_info=True)
        return 0


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(request: EventCreateRequest) -> EventResponse:
    """
    Ingest a detection event.

    - 401 when userId is missing
    - 400 when status is not Active | Resolved | Dismissed
    - 500 on any store failure, including the store being unavailable
    """
    container = get_container()
    use_case = container.get(CreateEventUseCase)

    try:
        event = await use_case.execute(request.user_id or "", request)
    except MissingAccountError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StoreError as e:
        logger.error("Error creating event: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create event: {e.message}")

    await broadcast_event(NEW_EVENT_TOPIC, event)
    return event


@router.get("", response_model=List[EventResponse])
async def list_events(
    user_id: Optional[str] = Query(None, alias="userId"),
    account_id: Optional[str] = Query(None, alias="accountId"),
) -> List[EventResponse]:
    """
    List events of one account, newest first.
    """
    container = get_container()
    use_case = container.get(ListEventsUseCase)

    try:
        return await use_case.execute(user_id or account_id or "")
    except MissingAccountError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except StoreError as e:
        logger.error("Error listing events: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to list events")


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: str) -> EventResponse:
    container = get_container()
    use_case = container.get(GetEventUseCase)
    try:
        return await use_case.execute(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except StoreError as e:
        logger.error("Error getting event: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get event")


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event_status(event_id: str, request: EventStatusUpdateRequest) -> EventResponse:
    """
    Change the status of an event and notify the owner's sessions.
    """
    container = get_container()
    use_case = container.get(UpdateEventStatusUseCase)

    try:
        event = await use_case.execute(event_id, request.status)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except StoreError as e:
        logger.error("Error updating event %s: %s", event_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update event")

    await broadcast_event(EVENT_UPDATED_TOPIC, event)
    return event
