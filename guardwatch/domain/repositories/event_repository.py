from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.event import Event, EventStatus


class EventRepository(ABC):
    """Repository interface - defines contract for event data access"""

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Persist a new event and return it with its assigned ID"""
        pass

    @abstractmethod
    async def get_by_id(self, event_id: str) -> Optional[Event]:
        """Get event by ID, None if absent or the ID is malformed"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Event]:
        """List events owned by a user, newest first, ties in insertion order"""
        pass

    @abstractmethod
    async def update_status(self, event_id: str, status: EventStatus) -> Optional[Event]:
        """Set the status of an event and return the updated event, None if absent"""
        pass
