# Standard library imports
from typing import Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import BlogListError, PersistenceFailure, ValidationError
from .mongo_connection import get_user_collection


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username
        
        Args:
            username: Exact username to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise PersistenceFailure(f"Error finding user by username: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None
        
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise PersistenceFailure(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Find all users whose ID is in user_ids; malformed IDs are skipped"""
        object_ids = [oid for oid in (_to_object_id(uid) for uid in user_ids) if oid is not None]
        if not object_ids:
            return []
        
        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            return [self._document_to_user(document) async for document in cursor]
        except Exception as e:
            raise PersistenceFailure(f"Error finding users by ID: {str(e)}")
    
    async def find_all(self) -> List[User]:
        try:
            cursor = self.user_collection.find({})
            return [self._document_to_user(document) async for document in cursor]
        except Exception as e:
            raise PersistenceFailure(f"Error listing users: {str(e)}")
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Returns:
            Saved User domain model with ID set
            
        Raises:
            ValidationError: If the username is already taken
            PersistenceFailure: If the write fails or the user to update is gone
        """
        user_dict = self._user_to_dict(user)
        
        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise PersistenceFailure(f"Invalid user ID format: {user.id}")
                
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                )
                if update_result.matched_count == 0:
                    raise PersistenceFailure(f"User with ID {user.id} not found")
                
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError:
            raise ValidationError("expected `username` to be unique")
        except BlogListError:
            raise
        except Exception as e:
            raise PersistenceFailure(f"Error saving user: {str(e)}")
        
        if document is None:
            raise PersistenceFailure("User was saved but could not be retrieved")
        return self._document_to_user(document)
    
    async def add_blog_id(self, user_id: str, blog_id: str) -> bool:
        """
        Add a blog reference to a user's blog list in a single atomic update
        
        Concurrent calls for the same user never overwrite each other, and
        the rest of the user document is left untouched.
        
        Returns:
            True if the user exists, False otherwise (including malformed IDs)
        """
        user_object_id = _to_object_id(user_id)
        if user_object_id is None:
            return False
        blog_object_id = _to_object_id(blog_id)
        
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_object_id},
                {"$addToSet": {UserFields.BLOG_IDS: blog_object_id if blog_object_id is not None else blog_id}},
            )
        except Exception as e:
            raise PersistenceFailure(f"Error linking blog {blog_id} to user {user_id}: {str(e)}")
        return update_result.matched_count > 0
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise PersistenceFailure("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            blog_ids=[str(blog_id) for blog_id in document.get(UserFields.BLOG_IDS, [])],
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)
        """
        blog_object_ids = []
        for blog_id in user.blog_ids:
            object_id = _to_object_id(blog_id)
            blog_object_ids.append(object_id if object_id is not None else blog_id)
        
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.BLOG_IDS: blog_object_ids,
        }
