# Standard library imports
import logging
import uuid
from typing import Optional

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import UserRequest, UserEnvelope, UserListEnvelope
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...domain.exceptions import IdGenerationError, UserNotFoundError, ValidationError
from ...di.container import get_container


logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _invalid_uuid_response(user_id: str) -> Optional[JSONResponse]:
    """Return a 400 response if user_id is not a UUID, None otherwise"""
    try:
        uuid.UUID(user_id)
    except ValueError as exception:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "id must be of type uuid",
                "error": str(exception),
            },
        )
    return None


def _field_errors_response(exception: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exception.field_errors,
    )


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserRequest):
    """
    Create a new user
    
    Args:
        request: User fields (first_name, last_name, bio)
        
    Returns:
        {"user": ...} with the created user, or a map of field errors
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        user = await create_user_use_case.execute(request)
    except ValidationError as exception:
        return _field_errors_response(exception)
    except IdGenerationError as exception:
        logger.error(f"Could not insert user: {exception.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "could not insert user on database"},
        )
    return UserEnvelope(user=user)


@router.get("", response_model=UserListEnvelope, include_in_schema=False)
@router.get("/", response_model=UserListEnvelope)
async def list_users() -> UserListEnvelope:
    """
    List all users (order is unspecified)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    users = await list_users_use_case.execute()
    return UserListEnvelope(users=users)


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(user_id: str):
    """
    Get a user by ID
    
    Args:
        user_id: UUID of the user
        
    Returns:
        {"user": ...} with the user information
    """
    invalid = _invalid_uuid_response(user_id)
    if invalid is not None:
        return invalid
    
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        user = await get_user_use_case.execute(user_id)
    except UserNotFoundError as exception:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exception.message},
        )
    return UserEnvelope(user=user)


@router.put("/{user_id}", response_model=UserEnvelope)
async def update_user(user_id: str, request: UserRequest):
    """
    Partially update a user; blank or missing fields keep their stored value
    
    Args:
        user_id: ID of the user
        request: Fields to overwrite
        
    Returns:
        {"user": ...} with the merged user
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    # ValidationError and UserNotFoundError are mapped by the app exception handlers
    user = await update_user_use_case.execute(user_id, request)
    return UserEnvelope(user=user)


@router.delete("/{user_id}", response_model=UserEnvelope)
async def delete_user(user_id: str):
    """
    Delete a user by ID
    
    Args:
        user_id: UUID of the user
        
    Returns:
        {"user": ...} with the user as it was before deletion
    """
    invalid = _invalid_uuid_response(user_id)
    if invalid is not None:
        return invalid
    
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    # UserNotFoundError is mapped by the app exception handlers
    user = await delete_user_use_case.execute(user_id)
    return UserEnvelope(user=user)
