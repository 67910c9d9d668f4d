# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ValidationError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 3


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationError: If the password is too short, the username is
                too short or the username is already taken
        """
        if not request.password or len(request.password) < PASSWORD_MIN_LENGTH:
            raise ValidationError("password too short")
        
        # Check if user already exists
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ValidationError("expected `username` to be unique")
        
        # Create domain user entity (validates username length)
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            name=request.name,
            hashed_password=hash_password(request.password),
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info("Registered user %s (%s)", saved_user.username, saved_user.id)
        
        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
            blogs=list(saved_user.blog_ids),
        )
