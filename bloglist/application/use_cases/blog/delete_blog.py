# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository

logger = logging.getLogger(__name__)


class DeleteBlogUseCase:
    """
    Use case for deleting a blog post.
    
    Deleting an unknown ID is not an error. As with updates, ownership is
    not checked.
    """
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str) -> None:
        removed = await self.blog_repository.delete_by_id(blog_id)
        if removed:
            logger.info("Deleted blog %s", blog_id)
        else:
            logger.debug("Delete requested for unknown blog %s", blog_id)
