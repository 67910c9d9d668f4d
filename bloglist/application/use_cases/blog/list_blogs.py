# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.blog_dto import BlogResponse
from .blog_mapper import to_blog_response


class ListBlogsUseCase:
    """Use case for listing the whole blog corpus with redacted owners"""
    
    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository
    
    async def execute(self) -> List[BlogResponse]:
        """
        List every blog post
        
        Returns:
            List of BlogResponse objects, each owner reduced to id/username/name
        """
        blogs = await self.blog_repository.find_all()
        
        owner_ids = {blog.owner_user_id for blog in blogs if blog.owner_user_id}
        owners = await self.user_repository.find_by_ids(owner_ids) if owner_ids else []
        owners_by_id = {owner.id: owner for owner in owners}
        
        return [
            to_blog_response(blog, owners_by_id.get(blog.owner_user_id))
            for blog in blogs
        ]
