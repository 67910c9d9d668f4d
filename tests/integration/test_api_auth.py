"""
Integration tests for login and user endpoints.
Uses TestClient with real use cases over mocked repositories (no real DB).
"""
import pytest

pytestmark = pytest.mark.integration

from bloglist.core.security import hash_password
from bloglist.domain.models.user import User


class TestUsersAPI:
    """Tests for /api/users"""

    def test_register_success(self, client, user_repo):
        user_repo.find_by_username.return_value = None
        user_repo.save.side_effect = lambda user: User(
            id="64b7f0c2a1b2c3d4e5f60718",
            username=user.username,
            name=user.name,
            hashed_password=user.hashed_password,
        )

        response = client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "mluukkai"
        assert "password" not in data
        assert "hashed_password" not in data

    def test_register_duplicate_returns_400(self, client, user_repo):
        user_repo.find_by_username.return_value = User(
            id="u1", username="root", name="", hashed_password="hash",
        )
        response = client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )
        assert response.status_code == 400
        assert "`username` to be unique" in response.json()["error"]
        assert response.json()["kind"] == "validation_error"

    def test_register_short_password_returns_400(self, client, user_repo):
        response = client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "ps"},
        )
        assert response.status_code == 400
        assert "password too short" in response.json()["error"]
        user_repo.save.assert_not_called()

    def test_register_short_username_returns_400(self, client, user_repo):
        user_repo.find_by_username.return_value = None
        response = client.post(
            "/api/users",
            json={"username": "un", "name": "Superuser", "password": "password"},
        )
        assert response.status_code == 400
        user_repo.save.assert_not_called()

    def test_register_missing_body_field_returns_400(self, client):
        response = client.post("/api/users", json={"name": "No Username"})
        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    def test_list_users(self, client, user_repo):
        user_repo.find_all.return_value = [
            User(id="u1", username="root", name="", hashed_password="hash", blog_ids=["b1"]),
        ]
        response = client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == [{"id": "u1", "username": "root", "name": "", "blogs": ["b1"]}]


class TestLoginAPI:
    """Tests for /api/login"""

    def test_login_success(self, client, user_repo):
        user_repo.find_by_username.return_value = User(
            id="64b7f0c2a1b2c3d4e5f60718",
            username="tfarrell01",
            name="Tim Farrell",
            hashed_password=hash_password("password"),
        )
        response = client.post("/api/login", json={"username": "tfarrell01", "password": "password"})
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["username"] == "tfarrell01"
        assert len(data["token"]) > 0
        assert data["access_token"] == data["token"]

    def test_login_invalid_returns_401(self, client, user_repo):
        user_repo.find_by_username.return_value = None
        response = client.post("/api/login", json={"username": "tfarrell01", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"
