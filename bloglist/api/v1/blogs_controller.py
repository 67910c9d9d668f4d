# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.blog_dto import (
    BlogCreateRequest,
    BlogResponse,
    BlogStatsResponse,
    BlogUpdateRequest,
)
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.get_blog import GetBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...application.use_cases.blog.blog_stats import BlogStatsUseCase
from ...domain.models.user import User
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[BlogResponse])
async def list_blogs() -> List[BlogResponse]:
    """
    List all blogs
    
    Returns:
        Every blog, each owner redacted to id/username/name
    """
    container = get_container()
    return await container.get(ListBlogsUseCase).execute()


@router.get("/stats", response_model=BlogStatsResponse)
async def blog_stats() -> BlogStatsResponse:
    """Corpus statistics: total likes, favourite blog, most prolific and most liked author"""
    container = get_container()
    return await container.get(BlogStatsUseCase).execute()


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str) -> BlogResponse:
    """
    Get a blog by ID
    
    Args:
        blog_id: ID of the blog
        
    Returns:
        BlogResponse; 404 if absent
    """
    container = get_container()
    return await container.get(GetBlogUseCase).execute(blog_id)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogCreateRequest,
    current_user: User = Depends(get_current_user),
) -> BlogResponse:
    """
    Create a new blog owned by the authenticated user
    
    Args:
        request: Blog creation request
        current_user: Current authenticated user (from dependency)
        
    Returns:
        BlogResponse with created blog information
    """
    container = get_container()
    create_blog_use_case = container.get(CreateBlogUseCase)
    return await create_blog_use_case.execute(request=request, owner=current_user)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, request: BlogUpdateRequest) -> BlogResponse:
    """
    Update a blog's title, author, url or likes
    
    The caller's identity is not checked against the blog's owner.
    """
    container = get_container()
    return await container.get(UpdateBlogUseCase).execute(blog_id, request)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str) -> Response:
    """Delete a blog; succeeds whether or not it existed"""
    container = get_container()
    await container.get(DeleteBlogUseCase).execute(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
