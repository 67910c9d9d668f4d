from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .user import ListUsersUseCase
from .blog import (
    CreateBlogUseCase,
    ListBlogsUseCase,
    GetBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
    BlogStatsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListUsersUseCase",
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "BlogStatsUseCase",
]
