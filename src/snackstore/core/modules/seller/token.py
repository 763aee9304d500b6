"""Seller session token format.

A token is the literal cookie value ``SESSION-<issued-at-millis>-<suffix>``.
The suffix only provides uniqueness; it may itself contain ``-`` and is never
interpreted.
"""

import secrets
import string
from dataclasses import dataclass

TOKEN_MARKER = "SESSION"
TOKEN_DELIMITER = "-"
SUFFIX_LENGTH = 24
SUFFIX_ALPHABET = string.ascii_letters + string.digits

# Lifetime of every seller session: 24 hours, counted from the issue time in the token
SESSION_LIFETIME_MS = 24 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class SessionToken:
    raw: str
    issued_at_millis: int

    @property
    def expires_at_millis(self) -> int:
        return self.issued_at_millis + SESSION_LIFETIME_MS


def parse_token(raw: str | None) -> SessionToken | None:
    """Parse a cookie value into a SessionToken, or None when malformed."""
    if not raw:
        return None

    parts = raw.split(TOKEN_DELIMITER)
    if len(parts) < 3 or parts[0] != TOKEN_MARKER:
        return None

    issued = parts[1]
    # int() alone would accept "+12", " 12" or "1_000"
    if not issued.isascii() or not issued.isdigit():
        return None

    return SessionToken(raw=raw, issued_at_millis=int(issued))


def encode_token(issued_at_millis: int, suffix: str) -> str:
    return TOKEN_DELIMITER.join((TOKEN_MARKER, str(issued_at_millis), suffix))


def generate_token(issued_at_millis: int) -> str:
    """Mint a new token issued at the given time with a random suffix."""
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return encode_token(issued_at_millis, suffix)
