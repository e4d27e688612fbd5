from dataclasses import dataclass


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: str
    first_name: str
    last_name: str
    bio: str


@dataclass
class UserPatch:
    """Partial update for a User; an empty field is left unchanged"""
    first_name: str = ""
    last_name: str = ""
    bio: str = ""
