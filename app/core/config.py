"""
Application configuration using pydantic-settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields in .env
    )

    # Application
    APP_NAME: str = "Account Forms"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # HTTP
    API_PREFIX: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_FILE: str | None = Field(default=None)

    # Mock credential oracle (not a credential store)
    MOCK_LOGIN_EMAIL: str = "test@example.com"
    MOCK_LOGIN_PASSWORD: str = "password123"
    MOCK_CURRENT_PASSWORD: str = "password123"

    # Form client
    CLIENT_BASE_URL: str = Field(default="http://localhost:8000")
    CLIENT_TIMEOUT: float = 10.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
