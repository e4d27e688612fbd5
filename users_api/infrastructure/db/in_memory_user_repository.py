# Standard library imports
import threading
import uuid
from dataclasses import replace
from typing import Callable, Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, UserPatch
from ...domain.exceptions import IdGenerationError, UserNotFoundError


def generate_user_id() -> str:
    """Random UUID4 in its canonical 36-character form"""
    return str(uuid.uuid4())


class InMemoryUserRepository(UserRepository):
    """In-process implementation of UserRepository backed by a dict keyed by user ID"""
    
    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory if id_factory is not None else generate_user_id
    
    async def find_all(self) -> List[User]:
        """
        Return every stored user
        
        Returns:
            List of users. Order is unspecified.
        """
        with self._lock:
            return [replace(user) for user in self._users.values()]
    
    async def find_by_id(self, user_id: str) -> User:
        """
        Find user by ID
        
        Args:
            user_id: User ID to look up
            
        Returns:
            User domain model
            
        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return replace(user)
    
    async def insert(self, first_name: str, last_name: str, bio: str) -> User:
        """
        Create and store a new user
        
        Args:
            first_name: First name
            last_name: Last name
            bio: Biography
            
        Returns:
            Stored User with its generated ID
            
        Raises:
            IdGenerationError: If the random ID source fails
        """
        try:
            user_id = self._id_factory()
        except (OSError, NotImplementedError) as e:
            raise IdGenerationError(f"could not generate user id: {e}") from e
        if not user_id:
            raise IdGenerationError("could not generate user id: empty id")
        
        user = User(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            bio=bio,
        )
        
        with self._lock:
            if user_id in self._users:
                raise IdGenerationError(f"could not generate user id: {user_id} already in use")
            self._users[user_id] = user
            return replace(user)
    
    async def update(self, user_id: str, patch: UserPatch) -> User:
        """
        Merge a partial update into a stored user
        
        Only non-empty fields of the patch overwrite stored values.
        
        Args:
            user_id: ID of the user to update
            patch: Fields to overwrite
            
        Returns:
            The merged User
            
        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            
            if patch.first_name != "":
                user.first_name = patch.first_name
            if patch.last_name != "":
                user.last_name = patch.last_name
            if patch.bio != "":
                user.bio = patch.bio
            
            return replace(user)
    
    async def delete(self, user_id: str) -> User:
        """
        Remove a user
        
        Args:
            user_id: ID of the user to delete
            
        Returns:
            The User as it was immediately before removal
            
        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                raise UserNotFoundError(user_id)
            return user
