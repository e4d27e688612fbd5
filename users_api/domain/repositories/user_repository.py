from abc import ABC, abstractmethod
from typing import List
from ..models.user import User, UserPatch


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user, in no particular order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> User:
        """Find user by ID, raising UserNotFoundError when absent"""
        pass
    
    @abstractmethod
    async def insert(self, first_name: str, last_name: str, bio: str) -> User:
        """Create a user with a freshly generated ID"""
        pass
    
    @abstractmethod
    async def update(self, user_id: str, patch: UserPatch) -> User:
        """Merge the non-empty fields of patch into the stored user"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> User:
        """Remove a user and return it as it was before removal"""
        pass
