# Standard library imports
import logging

# Local application imports
from ....core.validator import not_blank
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import UserPatch
from ....domain.exceptions import ValidationError
from ...dto.user_dto import UserRequest, UserResponse
from ...validation.user_request_validation import validate_update_request

logger = logging.getLogger(__name__)


def _supplied(value: str) -> str:
    # Blank values are "not supplied" and must not overwrite stored data
    return value if not_blank(value) else ""


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserRequest) -> UserResponse:
        """
        Validate the supplied fields and merge them into the stored user
        
        Args:
            user_id: ID of the user to update
            request: Update request; blank fields are left unchanged
            
        Returns:
            UserResponse with the merged user
            
        Raises:
            ValidationError: If a supplied field is out of bounds
            UserNotFoundError: If the user does not exist
        """
        validator = validate_update_request(request)
        if not validator.valid():
            logger.warning(f"Rejected update of user {user_id}: {sorted(validator.field_errors)}")
            raise ValidationError(validator.field_errors)
        
        patch = UserPatch(
            first_name=_supplied(request.first_name),
            last_name=_supplied(request.last_name),
            bio=_supplied(request.bio),
        )
        user = await self.user_repository.update(user_id, patch)
        
        logger.info(f"Updated user {user.id}")
        return UserResponse.from_domain(user)
