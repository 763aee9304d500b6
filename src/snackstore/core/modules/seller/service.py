from datetime import UTC, datetime
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.seller.models import SellerSession
from snackstore.core.modules.seller.token import SESSION_LIFETIME_MS, generate_token, parse_token
from snackstore.core.modules.seller.validator import SessionValidator
from snackstore.core.modules.user.passwords import check_password
from snackstore.errors import AuthenticationError, ValidationError
from snackstore.utils import now_millis

logger = structlog.get_logger(__name__)


def _from_millis(millis: int) -> datetime:
    return datetime.fromtimestamp(millis / 1000, UTC)


class SellerService(Service):
    """Issues, verifies and revokes seller sessions.

    Token format and expiry are checked by the shared SessionValidator; the
    `seller_sessions` collection adds a server-side record so that tokens can
    be revoked and forged tokens are refused by the API.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("seller_sessions")
        self.validator = SessionValidator()

    async def on_start(self) -> None:
        await self._collection.create_index([("token", 1)], unique=True)
        await self._collection.create_index([("created_at", 1)], expireAfterSeconds=SESSION_LIFETIME_MS // 1000)

    def verify_password(self, password: str) -> bool:
        return check_password(password, self.core.config.seller_password_hash)

    async def login(self, password: object, client_key: str) -> str:
        """Check the seller password and return a freshly issued session token.

        `password` is the raw JSON value; anything but a non-empty string counts as missing.
        """
        if not isinstance(password, str) or not password:
            raise ValidationError("Password is required")

        await self.core.services.login_attempt.ensure_allowed(client_key)

        if not self.verify_password(password):
            count = await self.core.services.login_attempt.record_failure(client_key)
            logger.warning("seller_login_failed", client_key=client_key, failed_attempts=count)
            raise AuthenticationError("Invalid password")

        token = await self.create(generate_token(now_millis()))
        await self.core.services.login_attempt.clear(client_key)
        logger.info("seller_login_succeeded", client_key=client_key)
        return token

    async def create(self, token: str) -> str:
        """Record an issued token."""
        parsed = parse_token(token)
        if parsed is None:
            raise ValueError("Refusing to record a malformed seller session token")

        session = SellerSession(
            token=token,
            issued_at=_from_millis(parsed.issued_at_millis),
            expires_at=_from_millis(parsed.expires_at_millis),
        )
        await self._collection.insert_one(session.to_mongo())
        return token

    async def validate(self, token: str | None) -> bool:
        """True iff the token is well-formed, current, known and not revoked."""
        if not self.validator.is_authenticated(token):
            return False

        doc = await self._collection.find_one({"token": token})
        if doc is None:
            logger.debug("seller_session_rejected", reason="unknown")
            return False
        if doc["revoked"]:
            logger.debug("seller_session_rejected", reason="revoked")
            return False
        return True

    async def revoke(self, token: str) -> None:
        result = await self._collection.update_one({"token": token}, {"$set": {"revoked": True}})
        if result.matched_count:
            logger.info("seller_session_revoked")
