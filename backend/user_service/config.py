"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_NAME = "test"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # MongoDB
    mongodb_uri: str = "mongodb://127.0.0.1:27017/test"
    mongodb_timeout_ms: int = 5000
    enforce_unique_email: bool = True
    require_store_on_startup: bool = False

    # Runtime
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT", "environment"),
    )
    host: str = "0.0.0.0"
    port: int = 4000

    # Logging
    log_level: Optional[str] = None
    log_dir: str = "."

    # CORS
    cors_allow_headers: list[str] = [
        "Origin",
        "X-Requested-With",
        "Content-Type",
        "Accept",
    ]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def effective_log_level(self) -> str:
        """Explicit LOG_LEVEL wins, otherwise INFO in production and DEBUG elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "INFO" if self.is_production else "DEBUG"

    @property
    def database_name(self) -> str:
        """Database named in the URI path, falling back to `test`."""
        path = urlsplit(self.mongodb_uri).path.lstrip("/")
        return path or DEFAULT_DB_NAME


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
