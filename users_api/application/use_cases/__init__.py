from .user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
