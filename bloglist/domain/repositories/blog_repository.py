from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.blog import Blog


class BlogRepository(ABC):
    """Repository interface - defines contract for blog post data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Blog]:
        """List every blog post in insertion order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog post by ID"""
        pass
    
    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save blog post (create or update)"""
        pass
    
    @abstractmethod
    async def update_fields(self, blog_id: str, fields: Dict[str, Any]) -> Optional[Blog]:
        """Apply a partial update, returning the updated post or None if absent"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, blog_id: str) -> bool:
        """Delete blog post by ID, returning whether a record was removed"""
        pass
