from typing import cast

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from snackstore.errors import (
    AccessDeniedError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

# (status code, machine-readable type) per UserError subclass
ERROR_STATUS: list[tuple[type[Exception], int, str]] = [
    (AuthenticationError, 401, "authentication_error"),
    (AccessDeniedError, 403, "access_denied"),
    (NotFoundError, 404, "not_found"),
    (ValidationError, 400, "validation_error"),
    (ConflictError, 409, "conflict"),
    (RateLimitError, 429, "rate_limited"),
]


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    for error_class, status_code, error_type in ERROR_STATUS:
        if isinstance(exc, error_class):
            return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)
    return create_json_error_response(status_code=400, message=str(exc), error_type="bad_request")


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Log unexpected errors and answer with a fixed message (500)."""
    logger.exception("unexpected_error", path=request.url.path, method=request.method, error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )


# Leading element of a validation error location, not part of the field name
REQUEST_PARTS = ("body", "query", "path", "header", "cookie")


def describe_validation_error(exc: RequestValidationError) -> str:
    """First schema problem as `Invalid <field>: <reason>`."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = tuple(error.get("loc", ()))
    if loc and loc[0] in REQUEST_PARTS:
        loc = loc[1:]
    field = ".".join(str(part) for part in loc)
    if not field:
        return "Invalid request body"
    return f"Invalid {field}: {error.get('msg', 'invalid value')}"


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Request schema failures are client errors like any other ValidationError (400)."""
    message = describe_validation_error(cast(RequestValidationError, exc))
    return create_json_error_response(status_code=400, message=message, error_type="validation_error")
