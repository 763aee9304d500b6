import secrets
import string

TRACKING_PREFIX = "TRK"
TRACKING_ALPHABET = string.ascii_uppercase + string.digits


def generate_tracking_number(length: int = 10) -> str:
    """Return a tracking number such as TRK7Q2XK9B4ZD."""
    return TRACKING_PREFIX + "".join(secrets.choice(TRACKING_ALPHABET) for _ in range(length))
