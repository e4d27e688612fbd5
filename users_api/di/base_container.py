# Standard library imports
from typing import Any, Callable, Dict, Hashable


class DependencyNotRegisteredError(KeyError):
    """Raised when a dependency is requested that no provider registered"""
    pass


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Singletons are stored as instances; factories are called on every get().
    Keys are usually the interface or use case class, or a plain string.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance under key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory that builds a new instance for each get()"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Args:
            key: Registration key
            
        Returns:
            The singleton instance, or a fresh instance from the factory
            
        Raises:
            DependencyNotRegisteredError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise DependencyNotRegisteredError(f"No dependency registered for {name}")
