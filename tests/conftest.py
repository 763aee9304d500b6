"""Shared pytest fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import bcrypt
import pytest

from snackstore.core.modules.seller.validator import SessionValidator

# 2023-11-14T22:13:20Z
NOW_MS = 1_700_000_000_000
SELLER_PASSWORD = "seller123"  # Must match the password hashed in seller_password_hash


@pytest.fixture
def fixed_clock():
    """Clock frozen one second after NOW_MS."""
    return lambda: NOW_MS + 1000


@pytest.fixture
def validator(fixed_clock):
    return SessionValidator(clock=fixed_clock)


@pytest.fixture(scope="session")
def seller_password_hash():
    # Low cost factor keeps the suite fast
    return bcrypt.hashpw(SELLER_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


@pytest.fixture
def mock_collection():
    """MongoDB collection double with awaitable methods."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))
    collection.delete_one = AsyncMock()
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def mock_database(mock_collection):
    database = MagicMock()
    database.get_collection.return_value = mock_collection
    return database
