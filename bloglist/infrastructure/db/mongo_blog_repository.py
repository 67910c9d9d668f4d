# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.models.blog import Blog
from ...domain.constants import BlogFields
from ...domain.exceptions import PersistenceFailure
from .mongo_connection import get_blog_collection

# Fields a partial update may touch; the owner is deliberately absent
_UPDATABLE_FIELDS = (BlogFields.TITLE, BlogFields.AUTHOR, BlogFields.URL, BlogFields.LIKES)


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoBlogRepository(BlogRepository):
    """MongoDB implementation of BlogRepository"""
    
    def __init__(self, blog_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.blog_collection = blog_collection if blog_collection is not None else get_blog_collection()
    
    async def find_all(self) -> List[Blog]:
        """
        List every blog post in natural (insertion) order
        
        Returns:
            List of Blog domain models
        """
        try:
            cursor = self.blog_collection.find({})
            return [self._document_to_blog(document) async for document in cursor]
        except Exception as e:
            raise PersistenceFailure(f"Error listing blogs: {str(e)}")
    
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """
        Find blog post by ID
        
        Returns:
            Blog domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return None
        
        try:
            document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except Exception as e:
            raise PersistenceFailure(f"Error finding blog by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def save(self, blog: Blog) -> Blog:
        """
        Save blog post (create new or replace existing)
        
        Returns:
            Saved Blog domain model with ID set
        """
        blog_dict = self._blog_to_dict(blog)
        
        try:
            if blog.id:
                object_id = _to_object_id(blog.id)
                if object_id is None:
                    raise PersistenceFailure(f"Invalid blog ID format: {blog.id}")
                await self.blog_collection.replace_one(
                    {BlogFields.MONGO_ID: object_id}, blog_dict, upsert=True
                )
                document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
            else:
                result = await self.blog_collection.insert_one(blog_dict)
                document = await self.blog_collection.find_one({BlogFields.MONGO_ID: result.inserted_id})
        except PersistenceFailure:
            raise
        except Exception as e:
            raise PersistenceFailure(f"Error saving blog: {str(e)}")
        
        if document is None:
            raise PersistenceFailure("Blog was saved but could not be retrieved")
        return self._document_to_blog(document)
    
    async def update_fields(self, blog_id: str, fields: Dict[str, Any]) -> Optional[Blog]:
        """
        Apply a partial update to a blog post
        
        Only title, author, url and likes are written; anything else in
        fields (including the owner) is ignored.
        
        Returns:
            Updated Blog domain model, or None if the post does not exist
        """
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return None
        
        changes = {key: value for key, value in fields.items() if key in _UPDATABLE_FIELDS}
        
        try:
            if changes:
                document = await self.blog_collection.find_one_and_update(
                    {BlogFields.MONGO_ID: object_id},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except Exception as e:
            raise PersistenceFailure(f"Error updating blog: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def delete_by_id(self, blog_id: str) -> bool:
        """
        Delete blog post by ID
        
        Returns:
            True if a document was removed, False otherwise
        """
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return False
        
        try:
            result = await self.blog_collection.delete_one({BlogFields.MONGO_ID: object_id})
        except Exception as e:
            raise PersistenceFailure(f"Error deleting blog: {str(e)}")
        return result.deleted_count > 0
    
    def _document_to_blog(self, document: Dict[str, Any]) -> Blog:
        """
        Convert MongoDB document to Blog domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Blog domain model
        """
        if not document or BlogFields.MONGO_ID not in document:
            raise PersistenceFailure("Invalid document: missing _id field")
        
        owner = document.get(BlogFields.OWNER_USER_ID)
        return Blog(
            id=str(document[BlogFields.MONGO_ID]),
            title=document.get(BlogFields.TITLE, ""),
            author=document.get(BlogFields.AUTHOR, ""),
            url=document.get(BlogFields.URL, ""),
            likes=document.get(BlogFields.LIKES) or 0,
            owner_user_id=str(owner) if owner is not None else None,
        )
    
    def _blog_to_dict(self, blog: Blog) -> Dict[str, Any]:
        """
        Convert Blog domain model to MongoDB document (without _id)
        """
        owner = None
        if blog.owner_user_id:
            owner = _to_object_id(blog.owner_user_id) or blog.owner_user_id
        
        return {
            BlogFields.TITLE: blog.title,
            BlogFields.AUTHOR: blog.author,
            BlogFields.URL: blog.url,
            BlogFields.LIKES: blog.likes,
            BlogFields.OWNER_USER_ID: owner,
        }
