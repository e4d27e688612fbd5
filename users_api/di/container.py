# Local application imports
from .base_container import BaseContainer
from .providers import (
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Repositories (RepositoryProvider)
    2. Use cases (UserProvider) - depend on repositories
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: repositories → use cases
        """
        RepositoryProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Discard the global container; the next get_container() starts with an empty store"""
    global _container
    _container = None
