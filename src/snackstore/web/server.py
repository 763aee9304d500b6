from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from snackstore.app import App
from snackstore.config import Config
from snackstore.errors import UserError
from snackstore.web.error_handlers import (
    general_exception_handler,
    request_validation_error_handler,
    user_error_handler,
)
from snackstore.web.middleware import SellerRouteGuardMiddleware
from snackstore.web.openapi import set_custom_openapi
from snackstore.web.routers import (
    auth_router,
    bulk_orders_router,
    orders_router,
    products_router,
    profile_router,
    seller_pages_router,
    seller_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="SnackStore API", lifespan=lifespan)

    # Available to dependencies from the first request on
    app.state.app = app_instance
    app.state.config = config

    # Seller pages are gated before any handler runs
    app.add_middleware(SellerRouteGuardMiddleware, validator=app_instance.seller_validator)

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(profile_router, prefix="/api/v1")
    app.include_router(orders_router, prefix="/api/v1")
    app.include_router(products_router, prefix="/api/v1")
    app.include_router(bulk_orders_router, prefix="/api/v1")
    app.include_router(seller_router, prefix="/api/v1")
    app.include_router(seller_pages_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
