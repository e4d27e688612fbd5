# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import ValidationError
from ...dto.user_dto import UserRequest, UserResponse
from ...validation.user_request_validation import validate_create_request

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRequest) -> UserResponse:
        """
        Validate and create a new user
        
        Args:
            request: Create request with all user fields
            
        Returns:
            UserResponse with the created user
            
        Raises:
            ValidationError: If any field is blank or out of bounds
            IdGenerationError: If a user ID could not be generated
        """
        validator = validate_create_request(request)
        if not validator.valid():
            logger.warning(f"Rejected user creation: {sorted(validator.field_errors)}")
            raise ValidationError(validator.field_errors)
        
        user = await self.user_repository.insert(
            request.first_name,
            request.last_name,
            request.bio,
        )
        
        logger.info(f"Created user {user.id}")
        return UserResponse.from_domain(user)
