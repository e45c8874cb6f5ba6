from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import CameraLocationResponse


class GetCameraLocationUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> CameraLocationResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return CameraLocationResponse(id=user.id or "", camera_location=user.camera_location)
