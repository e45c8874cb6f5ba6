from typing import List

from ....domain.repositories.event_repository import EventRepository
from ....domain.exceptions import MissingAccountError
from ....application.dto.event_dto import EventResponse


class ListEventsUseCase:
    def __init__(self, event_repository: EventRepository) -> None:
        self._event_repository = event_repository

    async def execute(self, account_id: str) -> List[EventResponse]:
        if not account_id or not account_id.strip():
            raise MissingAccountError("userId is required")

        account_id = account_id.strip()
        events = await self._event_repository.list_by_user(account_id)
        # The query is already scoped; this guards the invariant against a misbehaving store
        return [EventResponse.from_event(e) for e in events if e.user_id == account_id]
