# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List every registered user with the IDs of their blogs"""
    container = get_container()
    return await container.get(ListUsersUseCase).execute()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)
