from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from snackstore.core.modules.seller.models import SELLER_SESSION_COOKIE
from snackstore.core.modules.session.models import AUTH_TOKEN_COOKIE

# Endpoints reachable without any credentials
PUBLIC_ENDPOINTS = {
    ("POST", "/api/v1/auth/register"),
    ("POST", "/api/v1/auth/login"),
    ("POST", "/api/v1/seller/login"),
    ("GET", "/api/v1/seller/login"),
    ("POST", "/api/v1/seller/logout"),
    ("POST", "/api/v1/bulk-orders"),
    ("GET", "/api/v1/products"),
    ("GET", "/seller/login"),
    ("GET", "/health"),
}

# Everything else under these prefixes takes the seller cookie instead of a customer token
SELLER_PREFIXES = ("/seller", "/api/v1/seller", "/api/v1/bulk-orders")

# Seller-only operations outside those prefixes
SELLER_ENDPOINTS = {
    ("POST", "/api/v1/products"),
    ("PATCH", "/api/v1/orders/{order_id}"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="SnackStore API",
            version="0.1.0",
            summary="Storefront backend for an Indian snacks retailer",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "Customer token authentication (preferred)",
            },
            "AuthTokenCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": AUTH_TOKEN_COOKIE,
                "description": "Customer token stored in cookie",
            },
            "SellerSessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SELLER_SESSION_COOKIE,
                "description": "Seller session issued by /api/v1/seller/login",
            },
        }
        openapi_schema["security"] = [
            {"BearerAuth": []},
            {"AuthTokenCookie": []},
        ]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []
                elif path.startswith(SELLER_PREFIXES) or (method.upper(), path) in SELLER_ENDPOINTS:
                    operation["security"] = [{"SellerSessionCookie": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid email or password", "type": "authentication_error"},
                {"message": "Order not found", "type": "not_found"},
                {"message": "Unauthorized. Seller authentication required.", "type": "access_denied"},
            ]
        }
    }
