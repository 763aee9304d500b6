from datetime import datetime

from pydantic import BaseModel


class LoginAttempt(BaseModel):
    """Failed login counter for one client within the current window.

    Stored by an upserting pipeline update, so `_id` is the server-generated
    ObjectId and is not part of the model. Indexed on key - unique,
    reset_at (TTL, removed once the window closes).
    """

    key: str
    count: int = 0
    reset_at: datetime
