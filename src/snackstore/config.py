from pydantic_settings import BaseSettings

# bcrypt hash of the stock seller password ("seller123"); override in production
DEFAULT_SELLER_PASSWORD_HASH = "$2b$12$rFGgy0IGObVT/fXWypxFeOLvq7rYRCb1sXKVxuYgFrEJcQrdRhLyO"


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    seller_password_hash: str = DEFAULT_SELLER_PASSWORD_HASH
    cookie_secure: bool = False  # Set to True when served over HTTPS
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SNACKSTORE_",
        "extra": "ignore",
    }
