from fastapi import APIRouter

from snackstore.core.modules.user.models import UserView
from snackstore.web.deps import AppDep, AuthTokenDep
from snackstore.web.openapi import ErrorResponse

router = APIRouter(tags=["profile"])


@router.get(
    "/profile",
    summary="Get current customer profile",
    description="Get the profile of the currently authenticated customer.",
    operation_id="getCurrentUserProfile",
    responses={
        200: {"description": "Current customer profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_profile(app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.get_current_user(auth_token)
