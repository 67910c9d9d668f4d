"""
Shared pytest fixtures for bloglist tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from bloglist.domain.models.blog import Blog
from bloglist.domain.models.user import User


TEST_SECRET = "test_jwt_secret"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_bloglist",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = TEST_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("bloglist.core.config.get_settings", return_value=mock), patch(
        "bloglist.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def sample_blogs():
    """The six-post corpus used throughout the statistics tests."""
    return [
        Blog(id="b1", title="React patterns", author="Michael Chan",
             url="https://reactpatterns.com/", likes=7),
        Blog(id="b2", title="Go To Statement Considered Harmful", author="Edsger W. Dijkstra",
             url="http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
             likes=5),
        Blog(id="b3", title="Canonical string reduction", author="Edsger W. Dijkstra",
             url="http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html", likes=12),
        Blog(id="b4", title="First class tests", author="Robert C. Martin",
             url="http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll", likes=10),
        Blog(id="b5", title="TDD harms architecture", author="Robert C. Martin",
             url="http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html", likes=0),
        Blog(id="b6", title="Type wars", author="Robert C. Martin",
             url="http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html", likes=2),
    ]


@pytest.fixture
def sample_user():
    return User(
        id="64b7f0c2a1b2c3d4e5f60718",
        username="tfarrell01",
        name="Tim Farrell",
        hashed_password="$2b$04$hashed",
    )
