from collections.abc import Callable
from enum import StrEnum

import structlog

from snackstore.core.modules.seller.token import parse_token
from snackstore.utils import now_millis

logger = structlog.get_logger(__name__)

Clock = Callable[[], int]


class SessionCheck(StrEnum):
    """Outcome of a session check. Diagnostic only: callers decide on the boolean."""

    VALID = "valid"
    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"


class SessionValidator:
    """Decides whether a seller session cookie value is current.

    Shared by the page route guard and the seller API dependency. The result is
    a pure function of the cookie value and the clock reading.
    """

    def __init__(self, clock: Clock = now_millis) -> None:
        self._clock = clock

    def diagnose(self, cookie_value: str | None) -> SessionCheck:
        if not cookie_value:
            return SessionCheck.MISSING
        token = parse_token(cookie_value)
        if token is None:
            return SessionCheck.MALFORMED
        if self._clock() > token.expires_at_millis:
            return SessionCheck.EXPIRED
        return SessionCheck.VALID

    def is_authenticated(self, cookie_value: str | None) -> bool:
        check = self.diagnose(cookie_value)
        if check is not SessionCheck.VALID:
            logger.debug("seller_session_rejected", reason=check.value)
        return check is SessionCheck.VALID
