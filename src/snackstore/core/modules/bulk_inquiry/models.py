from datetime import datetime

from pydantic import BaseModel, Field

from snackstore.core.db import MongoModel
from snackstore.utils import now

MIN_BULK_QUANTITY = 50


class CustomerInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    company: str | None = None


class BulkInquiry(MongoModel):
    """Request for a quote on a large quantity of one product.

    Indexed on created_at.
    """

    product_id: str
    product_name: str
    quantity: int
    original_price: float | None = None
    discount: float | None = Field(None, description="Discount as a fraction, e.g. 0.15")
    final_price: float | None = None
    customer_info: CustomerInfo
    created_at: datetime = Field(default_factory=now)
