# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.services.authorization_gate import AuthorizationGate
from ...domain.models.user import User
from ...di.container import get_container


# Advertises the bearer scheme in OpenAPI; the gate parses the header itself
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    _credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> User:
    """
    FastAPI dependency resolving the bearer token to the authenticated user

    A missing Authorization header is not a framework error here; the gate
    treats it like any other bad credential.

    Raises:
        Unauthorized: If the token is missing, invalid or names an unknown user
    """
    gate = get_container().get(AuthorizationGate)
    return await gate.authenticate_headers(request.headers)
