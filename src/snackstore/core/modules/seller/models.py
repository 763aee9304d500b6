"""Seller session records."""

from datetime import datetime

from pydantic import Field

from snackstore.core.db import MongoModel
from snackstore.utils import now

SELLER_SESSION_COOKIE = "seller-session"


class SellerSession(MongoModel):
    """Server-side record of an issued seller session token.

    Indexed on token - unique, created_at (TTL equal to the session lifetime).
    """

    token: str
    issued_at: datetime
    expires_at: datetime
    revoked: bool = False
    created_at: datetime = Field(default_factory=now)
