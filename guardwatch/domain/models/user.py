from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for an account - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str
    notification_email: str
    full_name: Optional[str] = None
    camera_location: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
