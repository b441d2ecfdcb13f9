"""Front desk backend - Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60
    PASSWORD_MIN_LENGTH: int = 6
    DEFAULT_ROLE: str = "receptionist"

    # Default front desk account (dev only)
    CREATE_DEFAULT_USER: bool = True
    DEFAULT_USER_EMAIL: str = "reception@hotel.com"
    DEFAULT_USER_PASSWORD: str = "password123"

    # Timezone used for report period boundaries
    TIMEZONE: str = "UTC"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
