import re

from snackstore.core.modules.user.passwords import BCRYPT_MAX_BYTES
from snackstore.errors import ValidationError

EMAIL_RE = re.compile(r"^[^@\s]+@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)+$")
NAME_RE = re.compile(r"^[A-Za-z\s'-]+$")
TAG_RE = re.compile(r"<[^>]*>")
PHONE_STRIP_RE = re.compile(r"[^\d+()-]")
SPECIAL_CHARS = set("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def normalize_email(email: str) -> str:
    """Return the trimmed, lower-cased email or raise ValidationError."""
    normalized = email.strip().lower()
    if len(normalized) > 254 or not EMAIL_RE.fullmatch(normalized):
        raise ValidationError("Invalid email address")
    return normalized


def sanitize_text(value: str, max_length: int | None = None) -> str:
    """Strip markup tags and surrounding whitespace."""
    sanitized = TAG_RE.sub("", value).strip()
    if max_length is not None:
        sanitized = sanitized[:max_length]
    return sanitized


def validate_name(name: str, label: str = "name") -> str:
    """Validate a person's name: 2-50 letters, spaces, apostrophes or hyphens."""
    sanitized = sanitize_text(name)
    if not 2 <= len(sanitized) <= 50 or not NAME_RE.fullmatch(sanitized):
        raise ValidationError(f"Invalid {label}")
    return sanitized


def sanitize_phone(phone: str) -> str:
    return PHONE_STRIP_RE.sub("", phone.strip())


def password_problems(password: str) -> list[str]:
    """List every strength rule the password breaks; empty when it is acceptable."""
    problems = []
    if len(password) < 8:
        problems.append("Password must be at least 8 characters long")
    if len(password) > 128:
        problems.append("Password must be less than 128 characters")
    elif len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        problems.append(f"Password must be at most {BCRYPT_MAX_BYTES} bytes long")
    if not any(c.islower() for c in password):
        problems.append("Password must contain at least one lowercase letter")
    if not any(c.isupper() for c in password):
        problems.append("Password must contain at least one uppercase letter")
    if not any(c.isdigit() for c in password):
        problems.append("Password must contain at least one number")
    if not any(c in SPECIAL_CHARS for c in password):
        problems.append("Password must contain at least one special character")
    return problems


def validate_password(password: str) -> None:
    """Raise ValidationError listing all broken strength rules."""
    problems = password_problems(password)
    if problems:
        raise ValidationError(". ".join(problems))
