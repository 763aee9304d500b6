from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.bulk_inquiry.models import MIN_BULK_QUANTITY, BulkInquiry, CustomerInfo
from snackstore.core.modules.user.validators import normalize_email, sanitize_phone, sanitize_text
from snackstore.errors import ValidationError

logger = structlog.get_logger(__name__)


class BulkInquiryService(Service):
    """Stores bulk-order inquiries for the seller to follow up."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("bulk_inquiries")

    async def on_start(self) -> None:
        await self._collection.create_index([("created_at", -1)])

    async def submit_inquiry(
        self,
        product_id: str,
        product_name: str,
        quantity: int,
        customer_info: CustomerInfo,
        original_price: float | None = None,
        discount: float | None = None,
        final_price: float | None = None,
    ) -> BulkInquiry:
        if quantity < MIN_BULK_QUANTITY:
            raise ValidationError(f"Invalid bulk order request. Minimum quantity is {MIN_BULK_QUANTITY} units.")
        if not customer_info.name.strip() or not customer_info.phone.strip():
            raise ValidationError("Name and phone number are required")

        inquiry = BulkInquiry(
            product_id=product_id,
            product_name=sanitize_text(product_name, max_length=200),
            quantity=quantity,
            original_price=original_price,
            discount=discount,
            final_price=final_price,
            customer_info=CustomerInfo(
                name=sanitize_text(customer_info.name, max_length=100),
                email=normalize_email(customer_info.email),
                phone=sanitize_phone(customer_info.phone),
                company=sanitize_text(customer_info.company, max_length=100) if customer_info.company else None,
            ),
        )
        await self._collection.insert_one(inquiry.to_mongo())
        logger.info(
            "bulk_inquiry_submitted",
            inquiry_id=str(inquiry.id),
            product_id=product_id,
            quantity=quantity,
            discount=f"{(discount or 0) * 100:.0f}%",
        )
        return inquiry

    async def list_inquiries(self, limit: int = 50, offset: int = 0) -> list[BulkInquiry]:
        cursor = self._collection.find({}).sort("created_at", -1).skip(offset).limit(limit)
        return await BulkInquiry.list_cursor(cursor)
