from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.user.models import User
from snackstore.core.modules.user.passwords import check_password, hash_password
from snackstore.core.modules.user.validators import normalize_email, sanitize_phone, validate_name, validate_password
from snackstore.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

# Same message for unknown email and wrong password, so accounts cannot be enumerated
LOGIN_FAILED_MESSAGE = "Invalid email or password"


class UserService(Service):
    """Manages customer accounts."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        await self._collection.create_index([("email", 1)], unique=True)

    async def get_user(self, user_id: UUID) -> User:
        doc = await self._collection.find_one({"_id": user_id})
        if doc is None:
            raise NotFoundError(f"User '{user_id}' not found")
        return User.model_validate(doc)

    async def find_by_email(self, email: str) -> User | None:
        doc = await self._collection.find_one({"email": email})
        return User.model_validate(doc) if doc else None

    async def create_user(
        self, email: str, password: str, first_name: str, last_name: str, phone: str | None = None
    ) -> User:
        """Validate registration data and store a new account with a bcrypt password hash."""
        email = normalize_email(email)
        first_name = validate_name(first_name, "first name")
        last_name = validate_name(last_name, "last name")
        validate_password(password)

        if await self.find_by_email(email) is not None:
            raise ConflictError("An account with this email already exists")

        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=sanitize_phone(phone) if phone else None,
            password_hash=hash_password(password),
        )
        await self._collection.insert_one(user.to_mongo())
        logger.info("user_registered", user_id=str(user.id))
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials; raise AuthenticationError otherwise."""
        try:
            email = normalize_email(email)
        except ValidationError:
            raise AuthenticationError(LOGIN_FAILED_MESSAGE) from None

        user = await self.find_by_email(email)
        if user is None or not check_password(password, user.password_hash):
            logger.info("user_login_failed")
            raise AuthenticationError(LOGIN_FAILED_MESSAGE)
        return user
