# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....domain.models.event import EventStatus
from ....domain.exceptions import NotFoundError, ValidationError
from ...dto.event_dto import EventResponse

logger = logging.getLogger(__name__)


class UpdateEventStatusUseCase:
    """Status transition for an event (Active, Resolved, Dismissed)"""

    def __init__(self, event_repository: EventRepository) -> None:
        self._event_repository = event_repository

    async def execute(self, event_id: str, new_status: Optional[str]) -> EventResponse:
        """
        Set the status of an event.

        The status is validated before the store is touched, so an invalid
        value never mutates the event.

        Args:
            event_id: Event ID
            new_status: One of the EventStatus values

        Returns:
            The updated event, including its owner for routing the broadcast

        Raises:
            ValidationError: If new_status is missing or not an allowed value
            NotFoundError: If no event has this ID
        """
        if new_status is None:
            raise ValidationError("status is required")
        try:
            status = EventStatus.parse(new_status)
        except ValueError as e:
            raise ValidationError(str(e))

        updated = await self._event_repository.update_status(event_id, status)
        if updated is None:
            raise NotFoundError("Event not found")

        logger.info("Event %s status set to %s", updated.id, updated.status.value)
        return EventResponse.from_event(updated)
