# Standard library imports
import logging

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.models.event import Event, EventStatus
from ....domain.exceptions import MissingAccountError, ValidationError
from ....utils.datetime_utils import utc_now
from ...dto.event_dto import EventCreateRequest, EventResponse

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """
    Persist a new detection event.

    Does not publish: the caller triggers the broadcast after this returns,
    so a failed notification can never undo a successful write. No
    idempotency key exists, so a retried request creates a second event.
    """

    def __init__(self, event_repository: EventRepository) -> None:
        self._event_repository = event_repository

    async def execute(self, account_id: str, request: EventCreateRequest) -> EventResponse:
        if not account_id or not account_id.strip():
            raise MissingAccountError("userId is required")

        status = EventStatus.ACTIVE
        if request.status is not None:
            try:
                status = EventStatus.parse(request.status)
            except ValueError as e:
                raise ValidationError(str(e))

        event = Event(
            id=None,  # Assigned by the store
            user_id=account_id.strip(),
            timestamp=request.timestamp or utc_now(),
            image=request.image,
            type=request.type,
            location=request.location,
            severity=request.severity,
            status=status,
        )

        saved = await self._event_repository.create(event)
        logger.info("Event %s created for user %s (type=%s)", saved.id, saved.user_id, saved.type)
        return EventResponse.from_event(saved)
