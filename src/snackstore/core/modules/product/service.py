import re
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.core.core import Service
from snackstore.core.modules.product.models import NewProduct, Product
from snackstore.core.modules.user.validators import sanitize_text

logger = structlog.get_logger(__name__)

# Category value that means "no category filter"
ALL_CATEGORIES = "all"


class ProductService(Service):
    """Catalogue storage: seller-created products and the storefront listing."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("products")

    async def on_start(self) -> None:
        await self._collection.create_index([("name", 1)])
        await self._collection.create_index([("category", 1)])
        await self._collection.create_index([("created_at", -1)])

    async def create_product(self, data: NewProduct) -> Product:
        product = Product.model_validate(
            data.model_dump() | {"name": sanitize_text(data.name), "category": sanitize_text(data.category)}
        )
        await self._collection.insert_one(product.to_mongo())
        logger.info("product_created", product_id=str(product.id), category=product.category)
        return product

    async def list_products(self, category: str | None = None, search: str | None = None) -> list[Product]:
        """Products newest first, optionally in one category and matching a case-insensitive search term."""
        query: dict[str, Any] = {}
        if category and category != ALL_CATEGORIES:
            query["category"] = category
        if search:
            # The term is matched literally, never as a pattern
            pattern = {"$regex": re.escape(search), "$options": "i"}
            query["$or"] = [{"name": pattern}, {"description": pattern}]
        return await Product.list_cursor(self._collection.find(query).sort("created_at", -1))
