# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFound
from ...dto.blog_dto import BlogResponse
from .blog_mapper import to_blog_response


class GetBlogUseCase:
    """Use case for getting a blog post by ID"""
    
    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository
    
    async def execute(self, blog_id: str) -> BlogResponse:
        """
        Get a blog post by ID
        
        Raises:
            NotFound: If no blog post has this ID
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFound(f"Blog {blog_id} not found", "blog not found")
        
        owner = None
        if blog.owner_user_id:
            owner = await self.user_repository.find_by_id(blog.owner_user_id)
        
        return to_blog_response(blog, owner)
