# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Delete a user by ID
        
        Returns:
            UserResponse with the user as it was before deletion
            
        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repository.delete(user_id)
        logger.info(f"Deleted user {user.id}")
        return UserResponse.from_domain(user)
