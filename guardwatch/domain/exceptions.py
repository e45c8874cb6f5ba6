"""
Exception hierarchy for the GuardWatch backend.

Validation and lookup errors are the caller's fault and are raised before any
store access. Store errors describe the persistence backend and are never
retried inside a request; reconnection is handled by the connection manager.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class GuardWatchError(Exception):
    """Base exception for all GuardWatch errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(GuardWatchError):
    """Raised when input shape or an enumerated value is invalid."""
    pass


class MissingAccountError(ValidationError):
    """Raised when a request does not identify the owning account."""
    pass


class DuplicateAccountError(ValidationError):
    """Raised when signing up with a login handle that is already taken."""
    pass


class NotFoundError(GuardWatchError):
    """Raised when a referenced entity does not exist."""
    pass


# -----------------------------------------------------------------------------
# Store errors
# -----------------------------------------------------------------------------


class StoreError(GuardWatchError):
    """Raised when the persistence backend fails or times out."""
    pass


class ServiceUnavailableError(StoreError):
    """Raised without touching the backend when the connection is not ready."""
    pass


class StoreConnectionError(GuardWatchError):
    """Raised by connect attempts; logged, never surfaced to a request."""
    pass
