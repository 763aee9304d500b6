from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from snackstore.core.modules.bulk_inquiry.models import BulkInquiry, CustomerInfo
from snackstore.web.deps import AppDep, SellerTokenDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["bulk-orders"])


class BulkInquiryRequest(BaseModel):
    """Bulk order inquiry submitted from a product page."""

    product_id: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., description="Requested units, at least 50")
    original_price: float | None = None
    discount: float | None = Field(None, ge=0, le=1, description="Offered discount as a fraction")
    final_price: float | None = None
    customer_info: CustomerInfo


class BulkInquiryResponse(BaseModel):
    success: bool = True
    message: str


@router.post(
    "/bulk-orders",
    summary="Submit bulk order inquiry",
    description="Ask for a quote on 50 or more units of a product.",
    operation_id="submitBulkInquiry",
    responses={
        200: {"description": "Inquiry received"},
        400: {"model": ErrorResponse, "description": "Invalid inquiry"},
    },
)
async def submit_bulk_inquiry(data: BulkInquiryRequest, app: AppDep) -> BulkInquiryResponse:
    await app.submit_bulk_inquiry(
        data.product_id,
        data.product_name,
        data.quantity,
        data.customer_info,
        data.original_price,
        data.discount,
        data.final_price,
    )
    return BulkInquiryResponse(
        message="Bulk order inquiry submitted successfully. We will contact you within 24 hours."
    )


@router.get(
    "/bulk-orders",
    summary="List bulk order inquiries",
    description="Stored inquiries, newest first. Seller only.",
    operation_id="listBulkInquiries",
    responses={
        200: {"description": "Inquiries"},
        403: {"model": ErrorResponse, "description": "Seller authentication required"},
    },
)
async def list_bulk_inquiries(
    app: AppDep,
    seller_token: SellerTokenDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[BulkInquiry]:
    return await app.list_bulk_inquiries(seller_token, limit, offset)
