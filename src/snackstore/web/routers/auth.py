from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from snackstore.core.modules.session.models import AUTH_TOKEN_COOKIE, SESSION_TTL_SECONDS
from snackstore.core.modules.user.models import UserView
from snackstore.web.deps import AppDep, AuthTokenDep, ConfigDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class RegisterRequest(BaseModel):
    """Customer registration request."""

    email: str = Field(..., description="Email address, used as the login name")
    password: str = Field(..., description="Password (8+ chars, mixed case, digit and special character)")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    phone: str | None = Field(None, description="Phone number")


class LoginRequest(BaseModel):
    """Customer authentication request."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class LoginResponse(BaseModel):
    """Customer authentication response."""

    token: str = Field(..., description="Authentication token for subsequent requests")
    user: UserView


@router.post(
    "/auth/register",
    summary="Create customer account",
    description="Register a new customer account.",
    operation_id="register",
    status_code=201,
    responses={
        201: {"description": "Account created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(data: RegisterRequest, app: AppDep) -> UserView:
    return await app.register(data.email, data.password, data.first_name, data.last_name, data.phone)


@router.post(
    "/auth/login",
    summary="Authenticate customer",
    description="Authenticate with email and password to receive an authentication token.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(data: LoginRequest, app: AppDep, config: ConfigDep, response: Response) -> LoginResponse:
    token, user = await app.login(data.email, data.password)

    # Cookie for browser-based clients
    response.set_cookie(
        key=AUTH_TOKEN_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        secure=config.cookie_secure,
        max_age=SESSION_TTL_SECONDS,
    )
    return LoginResponse(token=token, user=user)


@router.post(
    "/auth/logout",
    summary="End customer session",
    description="Invalidate the current authentication session.",
    operation_id="logout",
    status_code=204,
    responses={
        204: {"description": "Successfully logged out"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def logout(app: AppDep, auth_token: AuthTokenDep, response: Response) -> None:
    await app.logout(auth_token)
    response.delete_cookie(AUTH_TOKEN_COOKIE)
