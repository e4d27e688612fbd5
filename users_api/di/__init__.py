from .base_container import BaseContainer, DependencyNotRegisteredError
from .container import DIContainer, get_container, reset_container

__all__ = [
    "BaseContainer",
    "DependencyNotRegisteredError",
    "DIContainer",
    "get_container",
    "reset_container",
]
