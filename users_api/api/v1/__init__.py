"""
API layer for the Users API.

Exposes the health check at / and the user CRUD endpoints under /api/users.
"""
from .health_controller import router as health_router
from .user_controller import router as user_router


__all__ = ["health_router", "user_router"]
