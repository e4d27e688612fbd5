from .user import User, UserPatch

__all__ = ["User", "UserPatch"]
