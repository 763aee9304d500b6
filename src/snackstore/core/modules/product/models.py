"""Catalogue products."""

from pydantic import BaseModel, Field

from snackstore.core.db import TimestampedModel


class NewProduct(BaseModel):
    """Product fields supplied by the seller when adding to the catalogue."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Price in INR")
    image: str = Field(..., min_length=1, description="Image URL or path")
    category: str = Field(..., min_length=1)
    in_stock: bool = True
    stock_quantity: int = Field(0, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    best_seller: bool = False
    new_arrival: bool = False
    weight: str | None = Field(None, description="Pack size, e.g. 400g")
    ingredients: list[str] = []


class Product(TimestampedModel, NewProduct):
    """Catalogue product.

    Indexed on name, category, created_at desc.
    """
