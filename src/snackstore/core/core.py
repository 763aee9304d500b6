from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from snackstore.config import Config

if TYPE_CHECKING:
    from snackstore.core.modules.access.service import AccessService
    from snackstore.core.modules.bulk_inquiry.service import BulkInquiryService
    from snackstore.core.modules.login_attempt.service import LoginAttemptService
    from snackstore.core.modules.order.service import OrderService
    from snackstore.core.modules.product.service import ProductService
    from snackstore.core.modules.seller.service import SellerService
    from snackstore.core.modules.session.service import SessionService
    from snackstore.core.modules.user.service import UserService

logger = structlog.get_logger(__name__)


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        self._core = core


class Services:
    """Service registry; instantiates every service against one database."""

    user: UserService
    session: SessionService
    login_attempt: LoginAttemptService
    seller: SellerService
    access: AccessService
    order: OrderService
    bulk_inquiry: BulkInquiryService
    product: ProductService

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._services: list[Service] = []

        # (attribute_name, module_path, class_name); started in this order
        service_configs = [
            ("user", "snackstore.core.modules.user.service", "UserService"),
            ("session", "snackstore.core.modules.session.service", "SessionService"),
            ("login_attempt", "snackstore.core.modules.login_attempt.service", "LoginAttemptService"),
            ("seller", "snackstore.core.modules.seller.service", "SellerService"),
            ("access", "snackstore.core.modules.access.service", "AccessService"),
            ("order", "snackstore.core.modules.order.service", "OrderService"),
            ("bulk_inquiry", "snackstore.core.modules.bulk_inquiry.service", "BulkInquiryService"),
            ("product", "snackstore.core.modules.product.service", "ProductService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()
            logger.debug("service_started", service=type(service).__name__)

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, database, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard", tz_aware=True)
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()
        logger.info("core_started", database=self.database.name)

    async def on_stop(self) -> None:
        """Stop services and close the MongoDB connection."""
        await self.services.stop_all()
        await self.mongo_client.aclose()
