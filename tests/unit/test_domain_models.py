"""
Unit tests for domain models, exceptions and the DI base container.
"""
from unittest.mock import patch

import pytest
from bloglist.di.base_container import BaseContainer
from bloglist.di.providers.database_provider import DatabaseProvider
from bloglist.domain.exceptions import NotFound, PersistenceFailure, Unauthorized, ValidationError
from bloglist.domain.models.blog import Blog
from bloglist.domain.models.user import User


class TestBlogModel:
    """Tests for Blog invariants"""

    def test_likes_default_to_zero(self):
        blog = Blog(id=None, title="t", author="a", url="u")
        assert blog.likes == 0
        assert blog.owner_user_id is None

    def test_none_likes_become_zero(self):
        assert Blog(id=None, title="t", author="a", url="u", likes=None).likes == 0

    @pytest.mark.parametrize("title,url", [("", "u"), ("  ", "u"), ("t", ""), ("t", "   ")])
    def test_title_and_url_required(self, title, url):
        with pytest.raises(ValidationError):
            Blog(id=None, title=title, author="a", url=url)

    def test_negative_likes_rejected(self):
        with pytest.raises(ValidationError):
            Blog(id=None, title="t", author="a", url="u", likes=-1)


class TestUserModel:
    """Tests for User invariants"""

    def test_valid_user(self):
        user = User(id=None, username="root", name="", hashed_password="hash")
        assert user.blog_ids == []

    @pytest.mark.parametrize("username", ["", "un", "  ab  "])
    def test_username_minimum_length(self, username):
        with pytest.raises(ValidationError):
            User(id=None, username=username, name="", hashed_password="hash")

    def test_password_hash_required(self):
        with pytest.raises(ValidationError):
            User(id=None, username="root", name="", hashed_password="")


class TestExceptions:
    """Tests for the error taxonomy"""

    @pytest.mark.parametrize(
        "error_class,status,kind",
        [
            (Unauthorized, 401, "unauthorized"),
            (ValidationError, 400, "validation_error"),
            (NotFound, 404, "not_found"),
            (PersistenceFailure, 400, "persistence_failure"),
        ],
    )
    def test_status_and_kind(self, error_class, status, kind):
        error = error_class("internal detail")
        assert error.http_status == status
        assert error.to_response()["kind"] == kind

    def test_persistence_failure_hides_detail(self):
        error = PersistenceFailure("E11000 raw driver message")
        assert "E11000" not in error.to_response()["error"]

    def test_user_message_overrides_message(self):
        error = Unauthorized("Signature verification failed", "token missing or invalid")
        assert error.to_response() == {"error": "token missing or invalid", "kind": "unauthorized"}


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_fresh_instances(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get("missing")


def test_database_provider_registers_only_collections():
    container = BaseContainer()
    users, blogs = object(), object()
    with patch("bloglist.di.providers.database_provider.get_user_collection", return_value=users), \
            patch("bloglist.di.providers.database_provider.get_blog_collection", return_value=blogs):
        DatabaseProvider.register(container)

    assert container.get("user_collection") is users
    assert container.get("blog_collection") is blogs
    with pytest.raises(ValueError):
        container.get("database")
