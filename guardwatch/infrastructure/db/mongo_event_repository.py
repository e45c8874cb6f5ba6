# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event, EventStatus
from ...domain.constants import EventFields
from ...utils.datetime_utils import ensure_utc, truncate_to_millis, utc_now
from .mongo_connection import EVENTS_COLLECTION, MongoConnectionManager


def _to_object_id(event_id: str) -> Optional[ObjectId]:
    if not event_id:
        return None
    try:
        return ObjectId(event_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoEventRepository(EventRepository):
    """MongoDB implementation of EventRepository"""

    # Newest first; equal timestamps keep insertion order (ObjectIds increase on insert)
    LIST_SORT = [(EventFields.TIMESTAMP, DESCENDING), (EventFields.MONGO_ID, ASCENDING)]

    def __init__(self, connection: MongoConnectionManager, collection_name: str = EVENTS_COLLECTION) -> None:
        self.connection = connection
        self.collection_name = collection_name

    async def create(self, event: Event) -> Event:
        if not event:
            raise ValueError("Event cannot be None")

        doc = self._event_to_document(event)

        async def _insert(database: AsyncIOMotorDatabase) -> str:
            result = await database[self.collection_name].insert_one(doc)
            return str(result.inserted_id)

        event_id = await self.connection.with_connection(_insert)
        return self._document_to_event({**doc, EventFields.MONGO_ID: event_id})

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        object_id = _to_object_id(event_id)
        if object_id is None:
            return None

        async def _find(database: AsyncIOMotorDatabase) -> Optional[dict]:
            return await database[self.collection_name].find_one({EventFields.MONGO_ID: object_id})

        doc = await self.connection.with_connection(_find)
        if not doc:
            return None
        return self._document_to_event(doc)

    async def list_by_user(self, user_id: str) -> List[Event]:
        if not user_id:
            return []

        async def _list(database: AsyncIOMotorDatabase) -> List[dict]:
            cursor = database[self.collection_name].find({EventFields.USER_ID: user_id}).sort(self.LIST_SORT)
            return [doc async for doc in cursor]

        docs = await self.connection.with_connection(_list)
        return [self._document_to_event(doc) for doc in docs]

    async def update_status(self, event_id: str, status: EventStatus) -> Optional[Event]:
        object_id = _to_object_id(event_id)
        if object_id is None:
            return None

        async def _update(database: AsyncIOMotorDatabase) -> Optional[dict]:
            return await database[self.collection_name].find_one_and_update(
                {EventFields.MONGO_ID: object_id},
                {"$set": {EventFields.STATUS: status.value}},
                return_document=ReturnDocument.AFTER,
            )

        doc = await self.connection.with_connection(_update)
        if not doc:
            return None
        return self._document_to_event(doc)

    def _event_to_document(self, event: Event) -> dict:
        timestamp = ensure_utc(event.timestamp) or utc_now()
        return {
            EventFields.USER_ID: event.user_id,
            EventFields.TIMESTAMP: truncate_to_millis(timestamp),
            EventFields.IMAGE: event.image,
            EventFields.TYPE: event.type,
            EventFields.LOCATION: event.location,
            EventFields.STATUS: event.status.value,
            EventFields.SEVERITY: event.severity,
        }

    def _document_to_event(self, doc: dict) -> Event:
        return Event(
            id=str(doc.get(EventFields.MONGO_ID)),
            user_id=doc.get(EventFields.USER_ID) or "",
            timestamp=ensure_utc(doc.get(EventFields.TIMESTAMP)) or utc_now(),
            image=doc.get(EventFields.IMAGE),
            type=doc.get(EventFields.TYPE),
            location=doc.get(EventFields.LOCATION),
            status=EventStatus.parse(doc.get(EventFields.STATUS) or EventStatus.ACTIVE.value),
            severity=doc.get(EventFields.SEVERITY),
        )
