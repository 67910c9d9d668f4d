"""Conversions from Blog/User domain models to response DTOs"""
# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.blog import Blog
from ....domain.models.user import User
from ...dto.blog_dto import BlogResponse
from ...dto.user_dto import OwnerSummary


def to_owner_summary(user: Optional[User]) -> Optional[OwnerSummary]:
    """Redact an owner down to id, username and name"""
    if user is None:
        return None
    return OwnerSummary(id=user.id or "", username=user.username, name=user.name)


def to_blog_response(blog: Blog, owner: Optional[User] = None) -> BlogResponse:
    return BlogResponse(
        id=blog.id or "",
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        user=to_owner_summary(owner),
    )
