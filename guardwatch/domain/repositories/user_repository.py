from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for account data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (login handle)"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def update_camera_location(self, user_id: str, camera_location: Optional[str]) -> Optional[User]:
        """Set the camera location label, returning the updated user or None if absent"""
        pass
