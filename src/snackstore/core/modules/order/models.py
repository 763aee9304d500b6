"""Customer orders."""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, Field

from snackstore.core.db import TimestampedModel


class OrderStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class PaymentMethod(StrEnum):
    CARD = "card"
    COD = "cod"  # Cash on delivery
    UPI = "upi"


class OrderItem(BaseModel):
    """Product line as it was in the cart when the order was placed."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    image: str
    weight: str | None = None
    ingredients: list[str] = []


class ShippingAddress(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class Order(TimestampedModel):
    """Placed order.

    Indexed on (user_id, created_at desc), (status, created_at desc), tracking_number - unique.
    """

    user_id: UUID
    items: list[OrderItem]
    shipping_address: ShippingAddress
    total: float
    status: OrderStatus = OrderStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.CARD
    payment_intent_id: str | None = None
    tracking_number: str
    estimated_delivery: datetime


class DashboardSummary(BaseModel):
    """Order statistics shown on the seller dashboard."""

    total_orders: int = Field(..., ge=0)
    orders_by_status: dict[OrderStatus, int]
    revenue: float = Field(..., description="Sum of order totals, all statuses")
