# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..exceptions import ValidationError


@dataclass
class Blog:
    """
    Pure domain model for a blog post - no external dependencies.

    ``owner_user_id`` is set once when the post is created through an
    authenticated request and is authoritative for ownership; the owner's
    ``blog_ids`` list is only a back-reference.
    """
    id: Optional[str]
    title: str
    author: str
    url: str
    likes: int = 0
    owner_user_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or len(self.title.strip()) < 1:
            raise ValidationError("Blog title is required")
        if not self.url or len(self.url.strip()) < 1:
            raise ValidationError("Blog url is required")
        if self.likes is None:
            self.likes = 0
        if self.likes < 0:
            raise ValidationError("Blog likes cannot be negative")
