# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password
from ...dto.auth_dto import LoginRequest
from ...dto.user_dto import UserResponse


class LoginUserUseCase:
    """Use case for verifying account credentials"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: LoginRequest) -> Optional[UserResponse]:
        """
        Verify email and password

        Args:
            request: Login request with email and password

        Returns:
            UserResponse if the credentials match, None otherwise
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        return UserResponse.from_user(user)
