# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password
    
    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_jwt_token(
    payload: Dict[str, Any],
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """
    Create a JWT token with issue and expiration claims
    
    Args:
        payload: Dictionary containing token claims (e.g., sub, username)
        secret_key: Signing secret; defaults to the configured one
        algorithm: Signing algorithm; defaults to the configured one
        
    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)
    
    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }
    
    return jwt.encode(
        token_payload,
        secret_key or settings.jwt_secret_key,
        algorithm=algorithm or settings.jwt_algorithm,
    )


def decode_jwt_token(
    token: str,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Decode and validate a JWT token
    
    Args:
        token: The JWT token string to decode
        secret_key: Verification secret; defaults to the configured one
        algorithm: Accepted algorithm; defaults to the configured one
        
    Returns:
        Dictionary containing decoded token claims
        
    Raises:
        ValueError: If token is invalid, tampered with or expired
    """
    if secret_key is None or algorithm is None:
        settings = get_settings()
        secret_key = secret_key or settings.jwt_secret_key
        algorithm = algorithm or settings.jwt_algorithm
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
