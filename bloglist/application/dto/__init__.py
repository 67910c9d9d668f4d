from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, OwnerSummary
from .blog_dto import (
    BlogCreateRequest,
    BlogUpdateRequest,
    BlogResponse,
    BlogStatsResponse,
    AuthorBlogCountResponse,
    AuthorLikesResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "OwnerSummary",
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogResponse",
    "BlogStatsResponse",
    "AuthorBlogCountResponse",
    "AuthorLikesResponse",
]
