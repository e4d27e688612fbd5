from .user_request_validation import (
    BLANK_MESSAGE,
    validate_create_request,
    validate_update_request,
)

__all__ = [
    "BLANK_MESSAGE",
    "validate_create_request",
    "validate_update_request",
]
