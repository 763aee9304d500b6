from datetime import timedelta
from typing import Any

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.login_attempt.models import LoginAttempt
from snackstore.errors import RateLimitError
from snackstore.utils import now

logger = structlog.get_logger(__name__)

MAX_FAILED_ATTEMPTS = 5
ATTEMPT_WINDOW = timedelta(minutes=15)


class LoginAttemptService(Service):
    """Counts failed logins per client key and refuses further tries once the limit is hit."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("login_attempts")

    async def on_start(self) -> None:
        await self._collection.create_index([("key", 1)], unique=True)
        await self._collection.create_index([("reset_at", 1)], expireAfterSeconds=0)

    async def get_attempt(self, key: str) -> LoginAttempt | None:
        doc = await self._collection.find_one({"key": key})
        return LoginAttempt.model_validate(doc) if doc else None

    async def ensure_allowed(self, key: str) -> None:
        """Raise RateLimitError when the key has used up its attempts in the current window."""
        attempt = await self.get_attempt(key)
        if attempt is not None and now() < attempt.reset_at and attempt.count >= MAX_FAILED_ATTEMPTS:
            logger.warning("login_rate_limited", key=key, count=attempt.count)
            raise RateLimitError("Too many login attempts. Please try again in 15 minutes.")

    async def record_failure(self, key: str) -> int:
        """Count one failed attempt and return the count within the current window.

        One atomic upsert either increments the open window or starts a new one at 1.
        """
        timestamp = now()
        window_open = {"$gt": ["$reset_at", timestamp]}
        doc = await self._collection.find_one_and_update(
            {"key": key},
            [
                {
                    "$set": {
                        "count": {"$cond": [window_open, {"$add": ["$count", 1]}, 1]},
                        "reset_at": {"$cond": [window_open, "$reset_at", timestamp + ATTEMPT_WINDOW]},
                    }
                }
            ],
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["count"])

    async def clear(self, key: str) -> None:
        await self._collection.delete_one({"key": key})
