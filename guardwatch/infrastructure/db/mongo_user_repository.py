# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateAccountError, NotFoundError
from .mongo_connection import USERS_COLLECTION, MongoConnectionManager


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, connection: MongoConnectionManager, collection_name: str = USERS_COLLECTION) -> None:
        self.connection = connection
        self.collection_name = collection_name

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        async def _find(database: AsyncIOMotorDatabase) -> Optional[dict]:
            return await database[self.collection_name].find_one({UserFields.EMAIL: email})

        document = await self.connection.with_connection(_find)
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        async def _find(database: AsyncIOMotorDatabase) -> Optional[dict]:
            return await database[self.collection_name].find_one({UserFields.MONGO_ID: object_id})

        document = await self.connection.with_connection(_find)
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateAccountError: If the email is already registered
            NotFoundError: If updating a user that does not exist
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        if user.id:
            object_id = _to_object_id(user.id)
            if object_id is None:
                raise NotFoundError(f"User with ID {user.id} not found")

            async def _update(database: AsyncIOMotorDatabase) -> Optional[dict]:
                return await database[self.collection_name].find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                    return_document=ReturnDocument.AFTER,
                )

            document = await self.connection.with_connection(_update)
            if document is None:
                raise NotFoundError(f"User with ID {user.id} not found")
            return self._document_to_user(document)

        async def _insert(database: AsyncIOMotorDatabase) -> ObjectId:
            try:
                result = await database[self.collection_name].insert_one(dict(user_dict))
            except DuplicateKeyError:
                raise DuplicateAccountError("User with this email already exists")
            return result.inserted_id

        inserted_id = await self.connection.with_connection(_insert)
        return self._document_to_user({**user_dict, UserFields.MONGO_ID: inserted_id})

    async def update_camera_location(self, user_id: str, camera_location: Optional[str]) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        async def _update(database: AsyncIOMotorDatabase) -> Optional[dict]:
            return await database[self.collection_name].find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": {UserFields.CAMERA_LOCATION: camera_location}},
                return_document=ReturnDocument.AFTER,
            )

        document = await self.connection.with_connection(_update)
        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        email = document.get(UserFields.EMAIL, "")
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=email,
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            notification_email=document.get(UserFields.NOTIFICATION_EMAIL) or email,
            full_name=document.get(UserFields.FULL_NAME),
            camera_location=document.get(UserFields.CAMERA_LOCATION),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.NOTIFICATION_EMAIL: user.notification_email,
            UserFields.FULL_NAME: user.full_name,
            UserFields.CAMERA_LOCATION: user.camera_location,
        }
