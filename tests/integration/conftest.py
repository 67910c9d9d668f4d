"""
Fixtures for API tests: a TestClient wired to a mocked DI container.
No MongoDB is contacted; repositories are AsyncMocks behind real use cases.
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from bloglist.application.services.authorization_gate import AuthorizationGate
from bloglist.application.use_cases.auth.login_user import LoginUserUseCase
from bloglist.application.use_cases.auth.register_user import RegisterUserUseCase
from bloglist.application.use_cases.blog.blog_stats import BlogStatsUseCase
from bloglist.application.use_cases.blog.create_blog import CreateBlogUseCase
from bloglist.application.use_cases.blog.delete_blog import DeleteBlogUseCase
from bloglist.application.use_cases.blog.get_blog import GetBlogUseCase
from bloglist.application.use_cases.blog.list_blogs import ListBlogsUseCase
from bloglist.application.use_cases.blog.update_blog import UpdateBlogUseCase
from bloglist.application.use_cases.user.list_users import ListUsersUseCase

CONTAINER_USERS = (
    "bloglist.api.v1.auth_controller.get_container",
    "bloglist.api.v1.users_controller.get_container",
    "bloglist.api.v1.blogs_controller.get_container",
    "bloglist.api.v1.dependencies.get_container",
)


@pytest.fixture
def blog_repo():
    return AsyncMock()


@pytest.fixture
def user_repo():
    return AsyncMock()


@pytest.fixture
def mock_container(blog_repo, user_repo, mock_settings):
    list_blogs = ListBlogsUseCase(blog_repo, user_repo)
    registry = {
        AuthorizationGate: AuthorizationGate(
            user_repo, secret_key=mock_settings.jwt_secret_key, algorithm="HS256"
        ),
        LoginUserUseCase: LoginUserUseCase(user_repo),
        RegisterUserUseCase: RegisterUserUseCase(user_repo),
        ListUsersUseCase: ListUsersUseCase(user_repo),
        CreateBlogUseCase: CreateBlogUseCase(blog_repo, user_repo),
        ListBlogsUseCase: list_blogs,
        GetBlogUseCase: GetBlogUseCase(blog_repo, user_repo),
        UpdateBlogUseCase: UpdateBlogUseCase(blog_repo, user_repo),
        DeleteBlogUseCase: DeleteBlogUseCase(blog_repo),
        BlogStatsUseCase: BlogStatsUseCase(list_blogs),
    }
    container = MagicMock()
    container.get.side_effect = registry.__getitem__
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container and no index creation."""
    from bloglist.main import app

    with ExitStack() as stack:
        for target in CONTAINER_USERS:
            stack.enter_context(patch(target, return_value=mock_container))
        stack.enter_context(patch("bloglist.main.ensure_indexes", AsyncMock()))
        stack.enter_context(patch("bloglist.main.close_connection"))
        with TestClient(app) as c:
            yield c
