from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from snackstore.core.modules.order.models import Order, OrderStatus
from snackstore.core.modules.seller.models import SELLER_SESSION_COOKIE
from snackstore.core.modules.seller.token import SESSION_LIFETIME_MS
from snackstore.core.pagination import PaginationResult
from snackstore.web.deps import AppDep, ClientKeyDep, ConfigDep, SellerTokenDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["seller"])


class SellerLoginRequest(BaseModel):
    """Seller authentication request."""

    password: Any = Field(None, description="Seller password (string)")


class SuccessResponse(BaseModel):
    success: bool = True


class SellerSessionStatus(BaseModel):
    success: bool
    authenticated: bool


def clear_seller_cookie(response: Response) -> None:
    response.delete_cookie(SELLER_SESSION_COOKIE, path="/")


@router.post(
    "/seller/login",
    summary="Authenticate seller",
    description="Check the seller password and set the seller-session cookie (valid for 24 hours).",
    operation_id="sellerLogin",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Password missing"},
        401: {"model": ErrorResponse, "description": "Invalid password"},
        429: {"model": ErrorResponse, "description": "Too many failed attempts"},
    },
)
async def seller_login(
    app: AppDep,
    config: ConfigDep,
    client_key: ClientKeyDep,
    response: Response,
    data: Annotated[SellerLoginRequest | None, Body()] = None,
) -> SuccessResponse:
    token = await app.seller_login(data.password if data else None, client_key)
    response.set_cookie(
        key=SELLER_SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=config.cookie_secure,
        samesite="strict",
        max_age=SESSION_LIFETIME_MS // 1000,
        path="/",
    )
    return SuccessResponse()


@router.get(
    "/seller/login",
    summary="Check seller session",
    description="Report whether the seller-session cookie belongs to a live session. Clears the cookie otherwise.",
    operation_id="sellerSessionStatus",
    response_model=SellerSessionStatus,
    responses={
        200: {"description": "Session is live"},
        401: {"model": SellerSessionStatus, "description": "No live session"},
    },
)
async def seller_session_status(app: AppDep, seller_token: SellerTokenDep) -> JSONResponse:
    if await app.is_seller_session_valid(seller_token):
        return JSONResponse(content=SellerSessionStatus(success=True, authenticated=True).model_dump())

    response = JSONResponse(
        status_code=401,
        content=SellerSessionStatus(success=False, authenticated=False).model_dump(),
    )
    if seller_token is not None:
        clear_seller_cookie(response)
    return response


@router.post(
    "/seller/logout",
    summary="End seller session",
    description="Revoke the seller session and clear the cookie.",
    operation_id="sellerLogout",
    responses={200: {"description": "Logged out"}},
)
async def seller_logout(app: AppDep, seller_token: SellerTokenDep, response: Response) -> SuccessResponse:
    await app.seller_logout(seller_token)
    clear_seller_cookie(response)
    return SuccessResponse()


@router.get(
    "/seller/orders",
    summary="List all orders",
    description="List orders from all customers, newest first, optionally filtered by status.",
    operation_id="listAllOrders",
    responses={
        200: {"description": "Page of orders"},
        403: {"model": ErrorResponse, "description": "Seller authentication required"},
    },
)
async def list_orders(
    app: AppDep,
    seller_token: SellerTokenDep,
    status: Annotated[OrderStatus | None, Query(description="Only orders with this status")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> PaginationResult[Order]:
    return await app.list_orders(seller_token, status, limit, offset)
