# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import CameraLocationResponse


class UpdateCameraLocationUseCase:
    """Use case for changing the camera location label of an account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, camera_location: Optional[str]) -> CameraLocationResponse:
        """
        Args:
            user_id: Account ID
            camera_location: New label; blank values clear it

        Raises:
            NotFoundError: If the account does not exist
        """
        value = camera_location.strip() if camera_location else None
        user = await self.user_repository.update_camera_location(user_id, value or None)
        if user is None:
            raise NotFoundError("User not found")
        return CameraLocationResponse(id=user.id or "", camera_location=user.camera_location)
