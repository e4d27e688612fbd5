from typing import Any, List

from pydantic import BaseModel, field_validator

from ...domain.models.user import User


class UserRequest(BaseModel):
    """DTO for user create/update request. Missing or null fields decode to an empty string."""
    first_name: str = ""
    last_name: str = ""
    bio: str = ""

    @field_validator("first_name", "last_name", "bio", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class UserResponse(BaseModel):
    """DTO for user response"""
    id: str
    first_name: str
    last_name: str
    biography: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            biography=user.bio,
        )


class UserEnvelope(BaseModel):
    """{"user": ...} response body"""
    user: UserResponse


class UserListEnvelope(BaseModel):
    """{"users": [...]} response body"""
    users: List[UserResponse]
