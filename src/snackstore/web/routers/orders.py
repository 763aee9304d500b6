from uuid import UUID

from fastapi import APIRouter
from pydantic import BaseModel, Field

from snackstore.core.modules.order.models import Order, OrderItem, OrderStatus, PaymentMethod, ShippingAddress
from snackstore.web.deps import AppDep, AuthTokenDep, OptionalAuthTokenDep, SellerTokenDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["orders"])


class CreateOrderRequest(BaseModel):
    """Request to place an order."""

    items: list[OrderItem] = Field(..., min_length=1, description="Cart lines")
    shipping_address: ShippingAddress
    total: float = Field(..., ge=0, description="Order total in INR")
    payment_method: PaymentMethod = Field(PaymentMethod.CARD, description="How the customer pays")
    payment_intent_id: str | None = Field(None, description="Payment provider reference for card payments")


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus = Field(..., description="New order status")


@router.post(
    "/orders",
    summary="Place order",
    description="Place an order for the authenticated customer. A tracking number is assigned immediately.",
    operation_id="createOrder",
    status_code=201,
    responses={
        201: {"description": "Order placed"},
        400: {"model": ErrorResponse, "description": "Invalid order"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_order(data: CreateOrderRequest, app: AppDep, auth_token: AuthTokenDep) -> Order:
    return await app.create_order(
        auth_token, data.items, data.shipping_address, data.total, data.payment_method, data.payment_intent_id
    )


@router.get(
    "/orders",
    summary="List my orders",
    description="Orders of the authenticated customer, newest first.",
    operation_id="listMyOrders",
    responses={
        200: {"description": "Orders"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_my_orders(app: AppDep, auth_token: AuthTokenDep) -> list[Order]:
    return await app.get_my_orders(auth_token)


@router.get(
    "/orders/{order_id}",
    summary="Get order",
    description="Get one order. Customers see their own orders; the seller sees every order.",
    operation_id="getOrder",
    responses={
        200: {"description": "Order"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Order belongs to another customer"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
)
async def get_order(
    order_id: UUID, app: AppDep, auth_token: OptionalAuthTokenDep, seller_token: SellerTokenDep
) -> Order:
    return await app.get_order(order_id, auth_token, seller_token)


@router.patch(
    "/orders/{order_id}",
    summary="Update order status",
    description="Move an order to another status. Seller only.",
    operation_id="updateOrderStatus",
    responses={
        200: {"description": "Updated order"},
        403: {"model": ErrorResponse, "description": "Seller authentication required"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
)
async def update_order_status(
    order_id: UUID, data: UpdateOrderStatusRequest, app: AppDep, seller_token: SellerTokenDep
) -> Order:
    return await app.update_order_status(seller_token, order_id, data.status)
