from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        The in-memory store lives as long as the container does.
        """
        container.register_singleton(
            UserRepository,
            InMemoryUserRepository()
        )
