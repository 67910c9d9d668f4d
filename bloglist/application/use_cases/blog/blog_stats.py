# Local application imports
from ....domain import statistics
from ...dto.blog_dto import (
    AuthorBlogCountResponse,
    AuthorLikesResponse,
    BlogStatsResponse,
)
from .list_blogs import ListBlogsUseCase


class BlogStatsUseCase:
    """Use case computing corpus statistics over the already-listed blogs"""
    
    def __init__(self, list_blogs_use_case: ListBlogsUseCase) -> None:
        self.list_blogs_use_case = list_blogs_use_case
    
    async def execute(self) -> BlogStatsResponse:
        blogs = await self.list_blogs_use_case.execute()
        
        top_author = statistics.most_blogs(blogs)
        liked_author = statistics.most_likes(blogs)
        
        return BlogStatsResponse(
            total_likes=statistics.total_likes(blogs),
            favorite_blog=statistics.favorite_blog(blogs),
            most_blogs=AuthorBlogCountResponse(**top_author._asdict()) if top_author else None,
            most_likes=AuthorLikesResponse(**liked_author._asdict()) if liked_author else None,
        )
