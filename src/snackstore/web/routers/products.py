from typing import Annotated

from fastapi import APIRouter, Query

from snackstore.core.modules.product.models import NewProduct, Product
from snackstore.web.deps import AppDep, SellerTokenDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["products"])


@router.get(
    "/products",
    summary="List products",
    description="Catalogue products, newest first. Filter by category (`all` means no filter) and search text.",
    operation_id="listProducts",
    responses={200: {"description": "Products"}},
)
async def list_products(
    app: AppDep,
    category: Annotated[str | None, Query(description="Category, or `all`")] = None,
    search: Annotated[str | None, Query(description="Matched against name and description")] = None,
) -> list[Product]:
    return await app.list_products(category, search)


@router.post(
    "/products",
    summary="Add product",
    description="Add a product to the catalogue. Seller only.",
    operation_id="createProduct",
    status_code=201,
    responses={
        201: {"description": "Product created"},
        400: {"model": ErrorResponse, "description": "Invalid product"},
        403: {"model": ErrorResponse, "description": "Seller authentication required"},
    },
)
async def create_product(data: NewProduct, app: AppDep, seller_token: SellerTokenDep) -> Product:
    return await app.create_product(seller_token, data)
