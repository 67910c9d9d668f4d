# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFound
from ...dto.blog_dto import BlogResponse, BlogUpdateRequest
from .blog_mapper import to_blog_response

logger = logging.getLogger(__name__)


class UpdateBlogUseCase:
    """
    Use case for updating a blog post.
    
    Any caller may update any post: the authenticated identity is not compared
    with the post's owner. The owner itself is never changed by an update.
    """
    
    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository
    
    async def execute(self, blog_id: str, request: BlogUpdateRequest) -> BlogResponse:
        """
        Apply the fields present in request to a blog post
        
        Raises:
            NotFound: If no blog post has this ID
            ValidationError: If the merged post would break a Blog invariant
        """
        existing = await self.blog_repository.find_by_id(blog_id)
        if existing is None:
            raise NotFound(f"Blog {blog_id} not found", "blog not found")
        
        fields = request.model_dump(exclude_none=True)
        # Validates the merged record before anything is written
        replace(existing, **fields)
        
        updated = await self.blog_repository.update_fields(blog_id, fields)
        if updated is None:
            raise NotFound(f"Blog {blog_id} disappeared during update", "blog not found")
        logger.info("Updated blog %s fields %s", blog_id, sorted(fields))
        
        owner = None
        if updated.owner_user_id:
            owner = await self.user_repository.find_by_id(updated.owner_user_id)
        return to_blog_response(updated, owner)
