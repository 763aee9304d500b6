"""Route guard for the seller area pages.

Only ``/seller`` and paths below it are guarded. ``/seller/login`` is the one
exception: it stays reachable without a session and bounces sellers who
already have one back to the dashboard.
"""

from enum import StrEnum
from urllib.parse import urlencode

from pydantic import BaseModel

SELLER_PREFIX = "/seller"
SELLER_LOGIN_PATH = "/seller/login"
SELLER_HOME_PATH = "/seller"
REDIRECT_PARAM = "redirect"


class GuardAction(StrEnum):
    ALLOW = "allow"
    REDIRECT = "redirect"


class GuardDecision(BaseModel):
    action: GuardAction
    location: str | None = None  # Set only for redirects

    model_config = {"frozen": True}

    @classmethod
    def allow(cls) -> "GuardDecision":
        return cls(action=GuardAction.ALLOW)

    @classmethod
    def redirect(cls, location: str) -> "GuardDecision":
        return cls(action=GuardAction.REDIRECT, location=location)


def is_seller_path(path: str) -> bool:
    return path == SELLER_PREFIX or path.startswith(SELLER_PREFIX + "/")


def login_url(original_path: str) -> str:
    """Login page URL that carries the originally requested path back."""
    return f"{SELLER_LOGIN_PATH}?{urlencode({REDIRECT_PARAM: original_path})}"


def evaluate(path: str, authenticated: bool) -> GuardDecision:
    """Decide what to do with a request for `path` given the seller's session state."""
    if path == SELLER_LOGIN_PATH:
        if authenticated:
            return GuardDecision.redirect(SELLER_HOME_PATH)
        return GuardDecision.allow()

    if is_seller_path(path) and not authenticated:
        return GuardDecision.redirect(login_url(path))

    return GuardDecision.allow()
