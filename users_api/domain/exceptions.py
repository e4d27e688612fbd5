"""
Exception hierarchy for the Users API.

Raised by the repository and the use cases, translated to HTTP responses by
the API layer. All errors inherit from UsersApiError.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(UsersApiError):
    """Raised when request fields fail validation. Carries every field error."""

    def __init__(self, field_errors: Dict[str, List[str]]):
        super().__init__(
            "request validation failed",
            details={"field_errors": field_errors},
        )
        self.field_errors = field_errors


# -----------------------------------------------------------------------------
# Repository
# -----------------------------------------------------------------------------


class UserNotFoundError(UsersApiError):
    """Raised when no user exists for the given ID."""

    def __init__(self, user_id: str):
        super().__init__(
            f"user with id: {user_id} not found",
            details={"user_id": user_id},
        )
        self.user_id = user_id


class IdGenerationError(UsersApiError):
    """Raised when a new user ID could not be generated."""
    pass
