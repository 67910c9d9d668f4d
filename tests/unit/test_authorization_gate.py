"""
Unit tests for the AuthorizationGate (credential extraction and authentication).
"""
from unittest.mock import AsyncMock

import pytest
from bloglist.application.services.authorization_gate import AuthorizationGate
from bloglist.core.security import create_jwt_token
from bloglist.domain.exceptions import PersistenceFailure, Unauthorized

SECRET = "gate-secret"


@pytest.fixture
def mock_user_repo():
    return AsyncMock()


@pytest.fixture
def gate(mock_user_repo):
    return AuthorizationGate(mock_user_repo, secret_key=SECRET, algorithm="HS256")


class TestExtractCredential:
    """Tests for AuthorizationGate.extract_credential"""

    def test_lowercase_scheme(self):
        assert AuthorizationGate.extract_credential({"Authorization": "bearer abc.def"}) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert AuthorizationGate.extract_credential({"Authorization": "BeArEr tok"}) == "tok"

    def test_header_name_is_case_insensitive(self):
        assert AuthorizationGate.extract_credential({"authorization": "Bearer tok"}) == "tok"

    def test_missing_header_is_none(self):
        assert AuthorizationGate.extract_credential({"Content-Type": "application/json"}) is None

    def test_other_scheme_is_none(self):
        assert AuthorizationGate.extract_credential({"Authorization": "Basic dXNlcjpwYXNz"}) is None

    def test_scheme_without_space_is_none(self):
        assert AuthorizationGate.extract_credential({"Authorization": "Bearertok"}) is None


class TestAuthenticate:
    """Tests for AuthorizationGate.authenticate"""

    @pytest.mark.asyncio
    async def test_valid_token_returns_user(self, gate, mock_user_repo, sample_user, mock_settings):
        mock_user_repo.find_by_id.return_value = sample_user
        token = create_jwt_token({"sub": sample_user.id}, secret_key=SECRET)

        user = await gate.authenticate(token)

        assert user is sample_user
        mock_user_repo.find_by_id.assert_awaited_once_with(sample_user.id)

    @pytest.mark.asyncio
    async def test_absent_token_raises(self, gate, mock_user_repo):
        with pytest.raises(Unauthorized) as exc_info:
            await gate.authenticate(None)
        assert exc_info.value.user_message == "token missing or invalid"
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_garbage_token_raises(self, gate):
        with pytest.raises(Unauthorized):
            await gate.authenticate("not.a.jwt")

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_raises(self, gate, mock_settings):
        token = create_jwt_token({"sub": "64b7f0c2a1b2c3d4e5f60718"}, secret_key="wrong")
        with pytest.raises(Unauthorized):
            await gate.authenticate(token)

    @pytest.mark.asyncio
    async def test_token_without_subject_raises(self, gate, mock_user_repo, mock_settings):
        token = create_jwt_token({"username": "someone"}, secret_key=SECRET)
        with pytest.raises(Unauthorized):
            await gate.authenticate(token)
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, gate, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = None
        token = create_jwt_token({"sub": "64b7f0c2a1b2c3d4e5f60718"}, secret_key=SECRET)
        with pytest.raises(Unauthorized):
            await gate.authenticate(token)

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, gate, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.side_effect = PersistenceFailure("db down")
        token = create_jwt_token({"sub": "64b7f0c2a1b2c3d4e5f60718"}, secret_key=SECRET)
        with pytest.raises(PersistenceFailure):
            await gate.authenticate(token)

    @pytest.mark.asyncio
    async def test_authenticate_headers(self, gate, mock_user_repo, sample_user, mock_settings):
        mock_user_repo.find_by_id.return_value = sample_user
        token = create_jwt_token({"sub": sample_user.id}, secret_key=SECRET)

        user = await gate.authenticate_headers({"Authorization": f"Bearer {token}"})

        assert user.username == "tfarrell01"

    @pytest.mark.asyncio
    async def test_authenticate_headers_without_header_raises(self, gate):
        with pytest.raises(Unauthorized):
            await gate.authenticate_headers({})
