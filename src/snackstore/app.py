from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

from snackstore.config import Config
from snackstore.core.core import Core
from snackstore.core.modules.bulk_inquiry.models import BulkInquiry, CustomerInfo
from snackstore.core.modules.order.models import (
    DashboardSummary,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
)
from snackstore.core.modules.product.models import NewProduct, Product
from snackstore.core.modules.seller.validator import SessionValidator
from snackstore.core.modules.session.models import AuthToken
from snackstore.core.modules.user.models import UserView
from snackstore.core.pagination import PaginationResult
from snackstore.errors import AccessDeniedError, AuthenticationError


class App:
    """Facade for all application operations, validates permissions before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        async with self._core.lifespan():
            yield

    @property
    def seller_validator(self) -> SessionValidator:
        """Stateless seller session check shared by the page guard and the API."""
        return self._core.services.seller.validator

    # === Seller session ===
    async def seller_login(self, password: object, client_key: str) -> str:
        """Verify the seller password and issue a session token."""
        return await self._core.services.seller.login(password, client_key)

    async def is_seller_session_valid(self, seller_token: str | None) -> bool:
        return await self._core.services.access.is_seller(seller_token)

    async def seller_logout(self, seller_token: str | None) -> None:
        """Revoke the seller session, if any. Always succeeds."""
        if seller_token:
            await self._core.services.seller.revoke(seller_token)

    # === Customer accounts ===
    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        return await self._core.services.session.is_auth_token_valid(auth_token)

    async def register(
        self, email: str, password: str, first_name: str, last_name: str, phone: str | None = None
    ) -> UserView:
        user = await self._core.services.user.create_user(email, password, first_name, last_name, phone)
        return UserView.from_domain(user)

    async def login(self, email: str, password: str) -> tuple[AuthToken, UserView]:
        """Authenticate a customer and create a session."""
        user = await self._core.services.user.authenticate(email, password)
        auth_token = await self._core.services.session.create_session(user.id)
        return auth_token, UserView.from_domain(user)

    async def logout(self, auth_token: AuthToken) -> None:
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.session.invalidate_session(auth_token)

    async def get_current_user(self, auth_token: AuthToken) -> UserView:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return UserView.from_domain(current_user)

    # === Orders ===
    async def create_order(
        self,
        auth_token: AuthToken,
        items: list[OrderItem],
        shipping_address: ShippingAddress,
        total: float,
        payment_method: PaymentMethod = PaymentMethod.CARD,
        payment_intent_id: str | None = None,
    ) -> Order:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.order.create_order(
            current_user.id, items, shipping_address, total, payment_method, payment_intent_id
        )

    async def get_my_orders(self, auth_token: AuthToken) -> list[Order]:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.order.list_user_orders(current_user.id)

    async def get_order(self, order_id: UUID, auth_token: AuthToken | None, seller_token: str | None) -> Order:
        """Get an order (its owner or the seller)."""
        order = await self._core.services.order.get_order(order_id)
        if await self._core.services.access.is_seller(seller_token):
            return order

        if auth_token is None:
            raise AuthenticationError
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        if order.user_id != current_user.id:
            raise AccessDeniedError("Unauthorized")
        return order

    async def update_order_status(self, seller_token: str | None, order_id: UUID, status: OrderStatus) -> Order:
        """Move an order to a new status (seller only)."""
        await self._core.services.access.ensure_seller(seller_token)
        return await self._core.services.order.update_status(order_id, status)

    async def list_orders(
        self, seller_token: str | None, status: OrderStatus | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[Order]:
        await self._core.services.access.ensure_seller(seller_token)
        return await self._core.services.order.list_orders(status, limit, offset)

    async def get_dashboard(self, seller_token: str | None) -> DashboardSummary:
        await self._core.services.access.ensure_seller(seller_token)
        return await self._core.services.order.get_dashboard_summary()

    # === Bulk inquiries ===
    async def submit_bulk_inquiry(
        self,
        product_id: str,
        product_name: str,
        quantity: int,
        customer_info: CustomerInfo,
        original_price: float | None = None,
        discount: float | None = None,
        final_price: float | None = None,
    ) -> BulkInquiry:
        return await self._core.services.bulk_inquiry.submit_inquiry(
            product_id, product_name, quantity, customer_info, original_price, discount, final_price
        )

    async def list_bulk_inquiries(self, seller_token: str | None, limit: int = 50, offset: int = 0) -> list[BulkInquiry]:
        """List bulk inquiries, newest first (seller only)."""
        await self._core.services.access.ensure_seller(seller_token)
        return await self._core.services.bulk_inquiry.list_inquiries(limit, offset)

    # === Products ===
    async def list_products(self, category: str | None = None, search: str | None = None) -> list[Product]:
        return await self._core.services.product.list_products(category, search)

    async def create_product(self, seller_token: str | None, data: NewProduct) -> Product:
        """Add a product to the catalogue (seller only)."""
        await self._core.services.access.ensure_seller(seller_token)
        return await self._core.services.product.create_product(data)
