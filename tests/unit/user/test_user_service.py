"""Tests for customer registration, login and sessions."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from snackstore.core.modules.session.models import AuthToken
from snackstore.core.modules.session.service import SessionService
from snackstore.core.modules.user.models import User
from snackstore.core.modules.user.passwords import check_password, hash_password
from snackstore.core.modules.user.service import LOGIN_FAILED_MESSAGE, UserService
from snackstore.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError

PASSWORD = "Masala#Chai9"


@pytest.fixture
def users(mock_database):
    return UserService(mock_database)


@pytest.fixture
def stored_user():
    return User(
        email="ravi@example.com",
        first_name="Ravi",
        last_name="Kumar",
        password_hash=hash_password(PASSWORD, rounds=4),
    )


class TestRegistration:
    def test_account_created_with_hashed_password(self, users, mock_collection):
        user = asyncio.run(users.create_user(" Ravi@Example.com ", PASSWORD, "Ravi", "Kumar", "+91 98765 43210"))

        assert user.email == "ravi@example.com"
        assert user.phone == "+919876543210"
        assert check_password(PASSWORD, user.password_hash)
        assert mock_collection.insert_one.await_args.args[0]["email"] == "ravi@example.com"

    def test_duplicate_email_refused(self, users, mock_collection, stored_user):
        mock_collection.find_one.return_value = stored_user.to_mongo()
        with pytest.raises(ConflictError, match="already exists"):
            asyncio.run(users.create_user("ravi@example.com", PASSWORD, "Ravi", "Kumar"))
        mock_collection.insert_one.assert_not_awaited()

    def test_invalid_name_refused(self, users):
        with pytest.raises(ValidationError, match="Invalid last name"):
            asyncio.run(users.create_user("ravi@example.com", PASSWORD, "Ravi", "K"))


class TestAuthenticate:
    def test_valid_credentials(self, users, mock_collection, stored_user):
        mock_collection.find_one.return_value = stored_user.to_mongo()
        user = asyncio.run(users.authenticate("RAVI@example.com", PASSWORD))
        assert user.id == stored_user.id

    @pytest.mark.parametrize(
        ("email", "password", "known"),
        [
            ("ravi@example.com", "Wrong#Pass1", True),
            ("nobody@example.com", PASSWORD, False),
            ("not-an-email", PASSWORD, False),
        ],
    )
    def test_failures_share_one_message(self, users, mock_collection, stored_user, email, password, known):
        mock_collection.find_one.return_value = stored_user.to_mongo() if known else None
        with pytest.raises(AuthenticationError) as exc_info:
            asyncio.run(users.authenticate(email, password))
        assert str(exc_info.value) == LOGIN_FAILED_MESSAGE

    def test_unknown_user_id(self, users):
        with pytest.raises(NotFoundError):
            asyncio.run(users.get_user(uuid4()))


class TestSessions:
    @pytest.fixture
    def sessions(self, mock_database, stored_user):
        sessions = SessionService(mock_database)
        user_service = SimpleNamespace(get_user=AsyncMock(return_value=stored_user))
        sessions.set_core(SimpleNamespace(services=SimpleNamespace(user=user_service)))
        return sessions

    def test_created_token_stored(self, sessions, mock_collection, stored_user):
        token = asyncio.run(sessions.create_session(stored_user.id))
        inserted = mock_collection.insert_one.await_args.args[0]
        assert inserted["auth_token"] == token
        assert inserted["user_id"] == stored_user.id

    def test_known_token_resolves_user(self, sessions, mock_collection, stored_user):
        mock_collection.find_one.return_value = {"auth_token": "t", "user_id": stored_user.id}
        assert asyncio.run(sessions.get_authenticated_user(AuthToken("t"))) is stored_user

    def test_unknown_token_invalid(self, sessions):
        assert asyncio.run(sessions.is_auth_token_valid(AuthToken("missing"))) is False

    def test_token_of_deleted_user_invalid(self, sessions, mock_collection, stored_user):
        mock_collection.find_one.return_value = {"auth_token": "t", "user_id": stored_user.id}
        sessions.core.services.user.get_user.side_effect = NotFoundError("gone")
        assert asyncio.run(sessions.is_auth_token_valid(AuthToken("t"))) is False

    def test_invalidate_deletes_session(self, sessions, mock_collection):
        asyncio.run(sessions.invalidate_session(AuthToken("t")))
        mock_collection.delete_one.assert_awaited_once_with({"auth_token": "t"})
