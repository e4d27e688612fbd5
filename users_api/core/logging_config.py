"""
Centralized logging configuration.

Modules obtain loggers with ``logging.getLogger(__name__)``; this module only
installs the root handler once, at application startup.
"""

# Standard library imports
import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Unknown names fall back to INFO.
    """
    global _initialized
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True
