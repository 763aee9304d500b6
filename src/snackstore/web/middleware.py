from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from snackstore.core.modules.seller.guard import GuardAction, evaluate, is_seller_path
from snackstore.core.modules.seller.models import SELLER_SESSION_COOKIE
from snackstore.core.modules.seller.validator import SessionValidator

logger = structlog.get_logger(__name__)


class SellerRouteGuardMiddleware(BaseHTTPMiddleware):
    """Redirects requests for seller pages according to the seller session cookie.

    Runs before any handler. Paths outside /seller pass through untouched.
    """

    def __init__(self, app: ASGIApp, validator: SessionValidator) -> None:
        super().__init__(app)
        self.validator = validator

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        path = request.url.path
        if not is_seller_path(path):
            return await call_next(request)

        authenticated = self.validator.is_authenticated(request.cookies.get(SELLER_SESSION_COOKIE))
        decision = evaluate(path, authenticated)
        if decision.action is GuardAction.REDIRECT and decision.location is not None:
            logger.debug("seller_guard_redirect", path=path, location=decision.location)
            return RedirectResponse(decision.location, status_code=307)
        return await call_next(request)
