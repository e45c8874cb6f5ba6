from typing import Annotated, Optional

from pydantic import AfterValidator, EmailStr, Field

from .base import CamelModel

# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[str, Field(min_length=1), AfterValidator(_check_password_bytes)]


class SignupRequest(CamelModel):
    """DTO for account signup request"""
    email: EmailStr
    password: Password
    notification_email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(default=None, max_length=200)
    camera_location: Optional[str] = Field(default=None, max_length=200)


class LoginRequest(CamelModel):
    """DTO for login request"""
    email: EmailStr
    password: Password
