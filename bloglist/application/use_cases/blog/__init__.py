from .create_blog import CreateBlogUseCase
from .list_blogs import ListBlogsUseCase
from .get_blog import GetBlogUseCase
from .update_blog import UpdateBlogUseCase
from .delete_blog import DeleteBlogUseCase
from .blog_stats import BlogStatsUseCase

__all__ = [
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "BlogStatsUseCase",
]
