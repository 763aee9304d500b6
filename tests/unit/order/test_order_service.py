"""Tests for OrderService with a mocked collection."""

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from snackstore.core.modules.order.models import Order, OrderItem, OrderStatus, ShippingAddress
from snackstore.core.modules.order.service import DELIVERY_ESTIMATE, OrderService
from snackstore.errors import NotFoundError, ValidationError
from snackstore.utils import now


class AsyncRows:
    """Minimal async iterator standing in for an aggregation cursor."""

    def __init__(self, rows):
        self._rows = iter(rows)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return next(self._rows)
        except StopIteration:
            raise StopAsyncIteration from None


@pytest.fixture
def service(mock_database):
    return OrderService(mock_database)


@pytest.fixture
def items():
    return [OrderItem(id="p1", name="Aloo Bhujia", price=120.0, quantity=2, image="/img/bhujia.jpg")]


@pytest.fixture
def address():
    return ShippingAddress(
        first_name="Ravi",
        last_name="Kumar",
        email="ravi@example.com",
        phone="9876543210",
        address="12 MG Road",
        city="Bengaluru",
        state="KA",
        zip_code="560001",
        country="India",
    )


class TestCreateOrder:
    def test_order_stored_pending_with_tracking_number(self, service, mock_collection, items, address):
        order = asyncio.run(service.create_order(uuid4(), items, address, 240.0))

        assert order.status is OrderStatus.PENDING
        assert order.tracking_number.startswith("TRK")
        assert order.estimated_delivery - order.created_at >= DELIVERY_ESTIMATE - timedelta(seconds=1)
        assert mock_collection.insert_one.await_args.args[0]["_id"] == order.id

    def test_empty_order_rejected(self, service, address):
        with pytest.raises(ValidationError, match="at least one item"):
            asyncio.run(service.create_order(uuid4(), [], address, 0.0))

    def test_negative_total_rejected(self, service, items, address):
        with pytest.raises(ValidationError, match="cannot be negative"):
            asyncio.run(service.create_order(uuid4(), items, address, -1.0))


class TestOrderLookup:
    def test_missing_order(self, service):
        with pytest.raises(NotFoundError, match="Order not found"):
            asyncio.run(service.get_order(uuid4()))

    def test_update_status_of_missing_order(self, service):
        with pytest.raises(NotFoundError):
            asyncio.run(service.update_status(uuid4(), OrderStatus.SHIPPED))

    def test_update_status_returns_updated_order(self, service, mock_collection, items, address):
        order = Order(
            user_id=uuid4(),
            items=items,
            shipping_address=address,
            total=240.0,
            status=OrderStatus.SHIPPED,
            tracking_number="TRKABCDEF1234",
            estimated_delivery=now() + DELIVERY_ESTIMATE,
        )
        mock_collection.find_one_and_update.return_value = order.to_mongo()

        updated = asyncio.run(service.update_status(order.id, OrderStatus.SHIPPED))

        assert updated.id == order.id
        assert updated.status is OrderStatus.SHIPPED


class TestDashboardSummary:
    def test_counts_and_revenue_per_status(self, service, mock_collection):
        mock_collection.aggregate = AsyncMock(
            return_value=AsyncRows(
                [
                    {"_id": "pending", "count": 3, "revenue": 450.5},
                    {"_id": "delivered", "count": 2, "revenue": 300.0},
                ]
            )
        )

        summary = asyncio.run(service.get_dashboard_summary())

        assert summary.total_orders == 5
        assert summary.orders_by_status[OrderStatus.PENDING] == 3
        assert summary.orders_by_status[OrderStatus.SHIPPED] == 0
        assert summary.revenue == 750.5

    def test_empty_store(self, service, mock_collection):
        mock_collection.aggregate = AsyncMock(return_value=AsyncRows([]))
        summary = asyncio.run(service.get_dashboard_summary())
        assert summary.total_orders == 0
        assert summary.revenue == 0.0
