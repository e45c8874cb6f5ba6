# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, LoginRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container
from ...domain.exceptions import ServiceUnavailableError, StoreError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest) -> UserResponse:
    """
    Register a new account

    Args:
        request: Signup request

    Returns:
        UserResponse with created account information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )
    except ServiceUnavailableError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exception.message
        )
    except StoreError as exception:
        logger.error("Error during signup: %s", exception)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create account"
        )


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest) -> UserResponse:
    """
    Verify credentials

    Args:
        request: Login request

    Returns:
        UserResponse for the matching account
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        user = await login_use_case.execute(request)
    except ServiceUnavailableError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exception.message
        )
    except StoreError as exception:
        logger.error("Error during login: %s", exception)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to verify credentials"
        )

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return user
