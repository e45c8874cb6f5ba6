from ....domain.repositories.event_repository import EventRepository
from ....domain.exceptions import NotFoundError
from ....application.dto.event_dto import EventResponse


class GetEventUseCase:
    def __init__(self, event_repository: EventRepository) -> None:
        self._event_repository = event_repository

    async def execute(self, event_id: str) -> EventResponse:
        ev = await self._event_repository.get_by_id(event_id)
        if not ev:
            raise NotFoundError("Event not found")
        return EventResponse.from_event(ev)
