# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.blog import Blog
from ....domain.models.user import User
from ....domain.exceptions import PersistenceFailure, ValidationError
from ...dto.blog_dto import BlogCreateRequest, BlogResponse
from .blog_mapper import to_blog_response

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Use case for creating a blog post owned by the authenticated user"""
    
    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository
    
    async def execute(self, request: BlogCreateRequest, owner: User) -> BlogResponse:
        """
        Create a new blog post
        
        The post is inserted first, then its ID is added to the owner's
        blog list with an atomic set-add. If the owner update fails or the
        owner is gone, the inserted post is deleted again, so either both
        writes are visible or neither is.
        
        Args:
            request: Blog creation request
            owner: Authenticated user; becomes the immutable owner
            
        Returns:
            BlogResponse with created blog information
            
        Raises:
            ValidationError: If title or url is missing or empty
            PersistenceFailure: If storing the post or updating the owner fails
        """
        if not request.title or not request.title.strip():
            raise ValidationError("Blog title is required")
        if not request.url or not request.url.strip():
            raise ValidationError("Blog url is required")
        
        new_blog = Blog(
            id=None,  # Will be set by repository
            title=request.title,
            author=request.author,
            url=request.url,
            likes=request.likes if request.likes is not None else 0,
            owner_user_id=owner.id,
        )
        
        saved_blog = await self.blog_repository.save(new_blog)
        
        try:
            linked = await self.user_repository.add_blog_id(owner.id, saved_blog.id)
            if not linked:
                raise PersistenceFailure(f"User {owner.id} no longer exists")
        except Exception as exception:
            logger.error(
                "Failed to link blog %s to user %s, rolling back insert: %s",
                saved_blog.id, owner.id, exception,
            )
            try:
                await self.blog_repository.delete_by_id(saved_blog.id)
            except Exception as rollback_exception:
                logger.error(
                    "Rollback of blog %s failed: %s", saved_blog.id, rollback_exception,
                    exc_info=True,
                )
            raise PersistenceFailure(
                f"Could not update owner {owner.id} for blog {saved_blog.id}"
            ) from exception
        
        logger.info("User %s created blog %s", owner.id, saved_blog.id)
        return to_blog_response(saved_blog, owner)
