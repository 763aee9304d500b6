from snackstore.web.routers.auth import router as auth_router
from snackstore.web.routers.bulk_orders import router as bulk_orders_router
from snackstore.web.routers.orders import router as orders_router
from snackstore.web.routers.products import router as products_router
from snackstore.web.routers.profile import router as profile_router
from snackstore.web.routers.seller import router as seller_router
from snackstore.web.routers.seller_pages import router as seller_pages_router

__all__ = [
    "auth_router",
    "bulk_orders_router",
    "orders_router",
    "products_router",
    "profile_router",
    "seller_pages_router",
    "seller_router",
]
