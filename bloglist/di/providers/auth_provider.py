from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...application.services.authorization_gate import AuthorizationGate
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the authorization gate and auth use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the gate as a singleton (its signing secret is read once here)
        and the auth use cases as factories.
        """
        settings = get_settings()
        container.register_singleton(
            AuthorizationGate,
            AuthorizationGate(
                user_repository=container.get(UserRepository),
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
            )
        )
        
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
