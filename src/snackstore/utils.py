from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def now_millis() -> int:
    """Current wall-clock time as integer milliseconds since the epoch."""
    return int(now().timestamp() * 1000)
