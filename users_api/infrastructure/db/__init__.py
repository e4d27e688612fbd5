from .in_memory_user_repository import InMemoryUserRepository, generate_user_id

__all__ = ["InMemoryUserRepository", "generate_user_id"]
