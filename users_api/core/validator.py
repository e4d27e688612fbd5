"""
Field validation helpers.

A Validator collects error messages per field for a single request. Rules are
plain predicates combined by the caller; the Validator only records failures.
"""

# Standard library imports
from typing import Dict, List


class Validator:
    """Per-request accumulator of field-level validation errors"""
    
    def __init__(self) -> None:
        self.field_errors: Dict[str, List[str]] = {}
    
    def check_field(self, ok: bool, field: str, message: str) -> None:
        """
        Record `message` under `field` when `ok` is False
        
        Args:
            ok: Result of the rule being checked
            field: Name of the field the rule applies to
            message: Human-readable error message
        """
        if not ok:
            self.field_errors.setdefault(field, []).append(message)
    
    def valid(self) -> bool:
        """True if no field has an error recorded"""
        return not self.field_errors


def not_blank(value: str) -> bool:
    return value.strip() != ""


def min_chars(value: str, n: int) -> bool:
    return len(value.strip()) >= n


def max_chars(value: str, n: int) -> bool:
    return len(value.strip()) <= n
