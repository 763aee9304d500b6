"""Seller area pages.

Requests reach these handlers only after SellerRouteGuardMiddleware has let
them through, so they assume a well-formed, unexpired seller cookie.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from snackstore.core.modules.order.models import DashboardSummary, Order
from snackstore.core.modules.seller.guard import REDIRECT_PARAM, SELLER_HOME_PATH, is_seller_path
from snackstore.web.deps import AppDep, SellerTokenDep

router = APIRouter(tags=["seller-pages"])

RECENT_ORDERS_LIMIT = 20


class LoginPage(BaseModel):
    login_endpoint: str = Field("/api/v1/seller/login", description="Where the login form posts the password")
    redirect_to: str = Field(..., description="Page to open after a successful login")


class RecentOrdersPage(BaseModel):
    orders: list[Order]
    total: int


@router.get("/seller", summary="Seller dashboard", operation_id="sellerDashboardPage")
async def dashboard_page(app: AppDep, seller_token: SellerTokenDep) -> DashboardSummary:
    return await app.get_dashboard(seller_token)


@router.get("/seller/orders", summary="Seller order list", operation_id="sellerOrdersPage")
async def orders_page(app: AppDep, seller_token: SellerTokenDep) -> RecentOrdersPage:
    page = await app.list_orders(seller_token, limit=RECENT_ORDERS_LIMIT)
    return RecentOrdersPage(orders=page.items, total=page.total)


@router.get("/seller/login", summary="Seller login page", operation_id="sellerLoginPage")
async def login_page(redirect: Annotated[str | None, Query(alias=REDIRECT_PARAM)] = None) -> LoginPage:
    # Only send sellers back into the seller area, never to an arbitrary URL
    target = redirect if redirect and is_seller_path(redirect) else SELLER_HOME_PATH
    return LoginPage(redirect_to=target)
