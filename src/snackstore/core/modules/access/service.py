from snackstore.core.core import Service
from snackstore.core.modules.session.models import AuthToken
from snackstore.core.modules.user.models import User
from snackstore.errors import AccessDeniedError

SELLER_REQUIRED_MESSAGE = "Unauthorized. Seller authentication required."


class AccessService(Service):
    async def ensure_authenticated(self, auth_token: AuthToken) -> User:
        """Ensure a customer is logged in and return the account."""
        return await self.core.services.session.get_authenticated_user(auth_token)

    async def is_seller(self, seller_token: str | None) -> bool:
        return await self.core.services.seller.validate(seller_token)

    async def ensure_seller(self, seller_token: str | None) -> None:
        """Ensure the request carries a live seller session, raise AccessDeniedError if not."""
        if not await self.is_seller(seller_token):
            raise AccessDeniedError(SELLER_REQUIRED_MESSAGE)
