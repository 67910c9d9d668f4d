"""
Authorization Gate
------------------

Resolves the bearer credential carried by a request to a domain User.

The gate is built with the signing secret and algorithm as explicit
configuration; nothing inside it reads global settings. Token verification
is pure computation, the user lookup is the only awaited step, and no caller
gets a User back until that lookup has completed.
"""
# Standard library imports
import logging
from typing import Mapping, Optional

# Local application imports
from ...core.security import decode_jwt_token
from ...domain.exceptions import Unauthorized
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "authorization"
BEARER_PREFIX = "bearer "
UNAUTHORIZED_MESSAGE = "token missing or invalid"


class AuthorizationGate:
    """Extracts, verifies and resolves bearer credentials"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> None:
        self.user_repository = user_repository
        self._secret_key = secret_key
        self._algorithm = algorithm
    
    @staticmethod
    def extract_credential(headers: Mapping[str, str]) -> Optional[str]:
        """
        Locate the raw bearer token in a set of request headers
        
        Header names and the scheme prefix are matched case-insensitively.
        
        Returns:
            The token text after "bearer ", or None when absent
        """
        value: Optional[str] = None
        for header_name, header_value in headers.items():
            if header_name.lower() == AUTHORIZATION_HEADER:
                value = header_value
                break
        
        if value and value.lower().startswith(BEARER_PREFIX):
            return value[len(BEARER_PREFIX):]
        return None
    
    async def authenticate(self, token: Optional[str]) -> User:
        """
        Verify a raw token and resolve the User it names
        
        Raises:
            Unauthorized: If the token is absent, fails verification, lacks a
                subject or refers to a user that no longer exists
        """
        if not token:
            raise Unauthorized("Bearer token absent", UNAUTHORIZED_MESSAGE)
        
        try:
            payload = decode_jwt_token(token, self._secret_key, self._algorithm)
        except ValueError as exception:
            logger.info("Rejected bearer token: %s", exception)
            raise Unauthorized(str(exception), UNAUTHORIZED_MESSAGE)
        
        user_id = payload.get("sub")
        if not user_id:
            raise Unauthorized("Token payload missing subject", UNAUTHORIZED_MESSAGE)
        
        user = await self.user_repository.find_by_id(str(user_id))
        if user is None:
            logger.info("Token subject %s does not resolve to a user", user_id)
            raise Unauthorized(f"User {user_id} not found", UNAUTHORIZED_MESSAGE)
        
        return user
    
    async def authenticate_headers(self, headers: Mapping[str, str]) -> User:
        """Extract the credential from headers and authenticate it"""
        return await self.authenticate(self.extract_credential(headers))
