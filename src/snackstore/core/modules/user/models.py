from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from snackstore.core.db import TimestampedModel


class User(TimestampedModel):
    """Customer account with credentials.

    Indexed on email - unique.
    """

    email: str  # Stored lower-cased
    first_name: str
    last_name: str
    phone: str | None = None
    password_hash: str  # bcrypt hash


class UserView(BaseModel):
    """Customer account information (API representation, no password hash)."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    phone: str | None = Field(None, description="Phone number")
    created_at: datetime = Field(..., description="Account creation time (UTC)")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            created_at=user.created_at,
        )
