"""Customer session models."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import Field

from snackstore.core.db import MongoModel
from snackstore.utils import now

AuthToken = NewType("AuthToken", str)

AUTH_TOKEN_COOKIE = "auth_token"
SESSION_TTL_SECONDS = 30 * 24 * 60 * 60


class Session(MongoModel):
    """Customer authentication session.

    Indexed on auth_token - unique, user_id, created_at (TTL 30 days).
    """

    user_id: UUID
    auth_token: str
    created_at: datetime = Field(default_factory=now)
