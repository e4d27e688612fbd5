from .user_dto import UserRequest, UserResponse, UserEnvelope, UserListEnvelope

__all__ = [
    "UserRequest",
    "UserResponse",
    "UserEnvelope",
    "UserListEnvelope",
]
