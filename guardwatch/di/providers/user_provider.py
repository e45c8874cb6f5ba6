from typing import TYPE_CHECKING

from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_camera_location import GetCameraLocationUseCase
from ...application.use_cases.user.update_camera_location import UpdateCameraLocationUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """Account profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetCameraLocationUseCase,
            lambda: GetCameraLocationUseCase(user_repository=container.get(UserRepository)),
        )

        container.register_factory(
            UpdateCameraLocationUseCase,
            lambda: UpdateCameraLocationUseCase(user_repository=container.get(UserRepository)),
        )
