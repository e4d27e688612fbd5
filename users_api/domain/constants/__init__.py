"""Constants for domain model field names"""

from .user_fields import UserFields, UserLimits

__all__ = [
    "UserFields",
    "UserLimits",
]
