from .repository_provider import RepositoryProvider
from .user_provider import UserProvider


__all__ = [
    "RepositoryProvider",
    "UserProvider",
]
