from typing import Optional

from pydantic import BaseModel, Field

from .user_dto import OwnerSummary


class BlogCreateRequest(BaseModel):
    """DTO for blog creation request; title and url are checked by the use case"""
    title: Optional[str] = None
    author: str = ""
    url: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)


class BlogUpdateRequest(BaseModel):
    """DTO for partial or full blog update; the owner cannot be changed"""
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: str
    url: str
    likes: int = 0
    user: Optional[OwnerSummary] = None


class AuthorBlogCountResponse(BaseModel):
    author: str
    blogs: int


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int


class BlogStatsResponse(BaseModel):
    """DTO for corpus-wide blog statistics"""
    total_likes: int
    favorite_blog: Optional[BlogResponse] = None
    most_blogs: Optional[AuthorBlogCountResponse] = None
    most_likes: Optional[AuthorLikesResponse] = None
