from .config import Settings, get_settings, reset_settings
from .logging_config import configure_logging
from .validator import Validator, not_blank, min_chars, max_chars

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "Validator",
    "not_blank",
    "min_chars",
    "max_chars",
]
