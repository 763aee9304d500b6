from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from snackstore.app import App
from snackstore.config import Config
from snackstore.core.modules.seller.models import SELLER_SESSION_COOKIE
from snackstore.core.modules.session.models import AUTH_TOKEN_COOKIE, AuthToken
from snackstore.errors import AuthenticationError

# Security schemes
bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name=AUTH_TOKEN_COOKIE, auto_error=False)
seller_cookie_scheme = APIKeyCookie(name=SELLER_SESSION_COOKIE, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_optional_auth_token(
    app: Annotated[App, Depends(get_app)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> AuthToken | None:
    """Return a valid customer token from the Bearer header or cookie, or None."""

    # Check Bearer token first (preferred)
    if credentials and credentials.scheme == "Bearer":
        auth_token = AuthToken(credentials.credentials)
        if await app.is_auth_token_valid(auth_token):
            return auth_token

    if token_cookie:
        auth_token = AuthToken(token_cookie)
        if await app.is_auth_token_valid(auth_token):
            return auth_token

    return None


async def get_auth_token(auth_token: Annotated[AuthToken | None, Depends(get_optional_auth_token)]) -> AuthToken:
    if auth_token is None:
        raise AuthenticationError
    return auth_token


def get_client_key(request: Request) -> str:
    """Client address used to key login rate limits.

    Taken from the first X-Forwarded-For hop, then X-Real-IP. Both headers are
    client-controlled unless a trusted proxy overwrites them.
    """
    forwarded_for = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    client_ip = forwarded_for or request.headers.get("x-real-ip", "").strip() or "unknown"
    return f"seller_login_{client_ip}"


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
OptionalAuthTokenDep = Annotated[AuthToken | None, Depends(get_optional_auth_token)]
SellerTokenDep = Annotated[str | None, Depends(seller_cookie_scheme)]
ClientKeyDep = Annotated[str, Depends(get_client_key)]
