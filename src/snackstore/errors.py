from abc import ABC


class UserError(ABC, Exception):
    """Base class for errors whose message is safe to show to the client.

    Subclasses must never carry details that reveal whether an account
    exists or why a credential check failed.
    """


class NotFoundError(UserError):
    """Raised when a requested document does not exist."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when credentials or a session token are rejected."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when the caller is authenticated but not allowed to act."""


class ValidationError(UserError):
    """Raised when client input fails validation."""


class ConflictError(UserError):
    """Raised when creating a document that already exists."""


class RateLimitError(UserError):
    """Raised when a client exceeds an attempt limit."""
