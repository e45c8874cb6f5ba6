# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateAccountError
from ....core.security import hash_password
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import UserResponse


class RegisterUserUseCase:
    """Use case for signing up a new account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: SignupRequest) -> UserResponse:
        """
        Register a new account

        Args:
            request: Signup request with credentials and profile fields

        Returns:
            UserResponse with created account information

        Raises:
            DuplicateAccountError: If an account with this email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateAccountError("User with this email already exists")

        hashed_password = hash_password(request.password)

        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=hashed_password,
            notification_email=request.notification_email or request.email,
            full_name=request.full_name,
            camera_location=request.camera_location,
        )

        # The unique index still guards against a concurrent signup
        saved_user = await self.user_repository.save(new_user)
        return UserResponse.from_user(saved_user)
