from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions import ValidationError

USERNAME_MIN_LENGTH = 3


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    name: str
    hashed_password: str
    blog_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.username or len(self.username.strip()) < USERNAME_MIN_LENGTH:
            raise ValidationError(
                f"Username must be at least {USERNAME_MIN_LENGTH} characters"
            )
        if not self.hashed_password:
            raise ValidationError("Password hash is required")
