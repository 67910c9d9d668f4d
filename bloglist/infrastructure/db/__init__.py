from .mongo_connection import (
    get_database,
    get_user_collection,
    get_blog_collection,
    ensure_indexes,
    close_connection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_blog_repository import MongoBlogRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_blog_collection",
    "ensure_indexes",
    "close_connection",
    "MongoUserRepository",
    "MongoBlogRepository",
]
