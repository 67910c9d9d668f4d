from .user import User
from .blog import Blog

__all__ = ["User", "Blog"]
