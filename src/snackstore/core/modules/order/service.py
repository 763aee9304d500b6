from datetime import timedelta
from typing import Any
from uuid import UUID

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.order.models import (
    DashboardSummary,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
)
from snackstore.core.modules.order.utils import generate_tracking_number
from snackstore.core.pagination import PaginationResult
from snackstore.errors import NotFoundError, ValidationError
from snackstore.utils import now

logger = structlog.get_logger(__name__)

DELIVERY_ESTIMATE = timedelta(days=7)


class OrderService(Service):
    """Places orders and tracks their fulfilment status."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("orders")

    async def on_start(self) -> None:
        await self._collection.create_index([("user_id", 1), ("created_at", -1)])
        await self._collection.create_index([("status", 1), ("created_at", -1)])
        await self._collection.create_index([("tracking_number", 1)], unique=True)

    async def create_order(
        self,
        user_id: UUID,
        items: list[OrderItem],
        shipping_address: ShippingAddress,
        total: float,
        payment_method: PaymentMethod = PaymentMethod.CARD,
        payment_intent_id: str | None = None,
    ) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        if total < 0:
            raise ValidationError("Order total cannot be negative")

        order = Order(
            user_id=user_id,
            items=items,
            shipping_address=shipping_address,
            total=total,
            payment_method=payment_method,
            payment_intent_id=payment_intent_id,
            tracking_number=generate_tracking_number(),
            estimated_delivery=now() + DELIVERY_ESTIMATE,
        )
        await self._collection.insert_one(order.to_mongo())
        logger.info("order_created", order_id=str(order.id), user_id=str(user_id), total=total)
        return order

    async def get_order(self, order_id: UUID) -> Order:
        doc = await self._collection.find_one({"_id": order_id})
        if doc is None:
            raise NotFoundError("Order not found")
        return Order.model_validate(doc)

    async def list_user_orders(self, user_id: UUID) -> list[Order]:
        """Orders placed by a customer, newest first."""
        return await Order.list_cursor(self._collection.find({"user_id": user_id}).sort("created_at", -1))

    async def list_orders(
        self, status: OrderStatus | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[Order]:
        """All orders, optionally by status, newest first."""
        query: dict[str, Any] = {} if status is None else {"status": status}
        total = await self._collection.count_documents(query)
        cursor = self._collection.find(query).sort("created_at", -1).skip(offset).limit(limit)
        orders = await Order.list_cursor(cursor)
        return PaginationResult(items=orders, total=total, limit=limit, offset=offset)

    async def update_status(self, order_id: UUID, status: OrderStatus) -> Order:
        doc = await self._collection.find_one_and_update(
            {"_id": order_id},
            {"$set": {"status": status, "updated_at": now()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError("Order not found")
        logger.info("order_status_updated", order_id=str(order_id), status=status.value)
        return Order.model_validate(doc)

    async def get_dashboard_summary(self) -> DashboardSummary:
        pipeline: list[dict[str, Any]] = [
            {"$group": {"_id": "$status", "count": {"$sum": 1}, "revenue": {"$sum": "$total"}}},
        ]
        orders_by_status = dict.fromkeys(OrderStatus, 0)
        revenue = 0.0
        cursor = await self._collection.aggregate(pipeline)
        async for row in cursor:
            orders_by_status[OrderStatus(row["_id"])] = int(row["count"])
            revenue += float(row["revenue"])
        return DashboardSummary(
            total_orders=sum(orders_by_status.values()),
            orders_by_status=orders_by_status,
            revenue=round(revenue, 2),
        )
