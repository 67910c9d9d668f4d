"""
Domain exception hierarchy for the bloglist backend.

Every error raised by use cases, repositories and the authorization gate
inherits from BlogListError and carries a stable ``kind`` plus the HTTP
status the API layer maps it to.
"""

# Standard library imports
from typing import Optional


class BlogListError(Exception):
    """Base exception for all bloglist errors."""

    kind: str = "error"
    http_status: int = 400

    def __init__(self, message: str, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message

    def to_response(self) -> dict:
        """Machine-readable error body returned to API callers"""
        return {"error": self.user_message, "kind": self.kind}


class Unauthorized(BlogListError):
    """Raised when a bearer credential is missing, invalid or names an unknown user."""

    kind = "unauthorized"
    http_status = 401


class ValidationError(BlogListError):
    """Raised when a required field is missing or a model invariant is broken."""

    kind = "validation_error"
    http_status = 400


class NotFound(BlogListError):
    """Raised when a targeted single record does not exist."""

    kind = "not_found"
    http_status = 404


class PersistenceFailure(BlogListError):
    """Raised when the storage layer fails; details never reach the caller."""

    kind = "persistence_failure"
    http_status = 400

    def __init__(self, message: str, user_message: Optional[str] = None) -> None:
        super().__init__(message, user_message or "storage operation failed")
