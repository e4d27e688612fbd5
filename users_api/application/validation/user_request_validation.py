"""
Validation rules for user create and update requests.

Create requires every field; update treats blank fields as not supplied and
only checks the ones that carry a value.
"""

# Local application imports
from ...core.validator import Validator, not_blank, min_chars, max_chars
from ...domain.constants import UserFields, UserLimits
from ..dto.user_dto import UserRequest

BLANK_MESSAGE = "this field cannot be blank"


def _length_message(field: str, minimum: int, maximum: int) -> str:
    return f"{field} must be at least {minimum} chars long and smaller than {maximum} chars"


def _check_lengths(validator: Validator, field: str, value: str, minimum: int, maximum: int) -> None:
    validator.check_field(
        min_chars(value, minimum) and max_chars(value, maximum),
        field,
        _length_message(field, minimum, maximum),
    )


def validate_create_request(request: UserRequest) -> Validator:
    """
    Check a create request: every field must be present and within bounds
    
    Args:
        request: Incoming create request
        
    Returns:
        Validator holding every field error found
    """
    validator = Validator()
    
    validator.check_field(not_blank(request.first_name), UserFields.FIRST_NAME, BLANK_MESSAGE)
    validator.check_field(not_blank(request.last_name), UserFields.LAST_NAME, BLANK_MESSAGE)
    validator.check_field(not_blank(request.bio), UserFields.BIO, BLANK_MESSAGE)
    
    _check_lengths(validator, UserFields.FIRST_NAME, request.first_name, UserLimits.NAME_MIN, UserLimits.NAME_MAX)
    _check_lengths(validator, UserFields.LAST_NAME, request.last_name, UserLimits.NAME_MIN, UserLimits.NAME_MAX)
    _check_lengths(validator, UserFields.BIO, request.bio, UserLimits.BIO_MIN, UserLimits.BIO_MAX)
    
    return validator


def validate_update_request(request: UserRequest) -> Validator:
    """
    Check an update request: only non-blank fields are length-checked
    
    Args:
        request: Incoming update request
        
    Returns:
        Validator holding every field error found
    """
    validator = Validator()
    
    if not_blank(request.first_name):
        _check_lengths(validator, UserFields.FIRST_NAME, request.first_name, UserLimits.NAME_MIN, UserLimits.NAME_MAX)
    
    if not_blank(request.last_name):
        _check_lengths(validator, UserFields.LAST_NAME, request.last_name, UserLimits.NAME_MIN, UserLimits.NAME_MAX)
    
    if not_blank(request.bio):
        _check_lengths(validator, UserFields.BIO, request.bio, UserLimits.BIO_MIN, UserLimits.BIO_MAX)
    
    return validator
