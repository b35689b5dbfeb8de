"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        DATABASE_URL: SQLAlchemy connection string
        MAX_PASTE_SIZE: Maximum accepted document size in bytes (UTF-8)
        KEY_LENGTH: Number of letters in generated document keys
        DEFAULT_EXPIRE_DAYS: Days until a document expires (0 = never)
        ABOUT_DOCUMENT_PATH: Text file served under the reserved key "about"
        CELERY_BROKER_URL: Broker for the retention worker
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default true)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./haste.db"
    AUTO_CREATE_TABLES: bool = False

    # Documents
    MAX_PASTE_SIZE: int = 400_000
    KEY_LENGTH: int = 10
    DEFAULT_EXPIRE_DAYS: int = 30
    ABOUT_DOCUMENT_PATH: Optional[str] = None

    # Retention worker
    CELERY_BROKER_URL: str = "redis://localhost:6379/0"
    CELERY_RESULT_BACKEND: str = "redis://localhost:6379/0"
    PURGE_INTERVAL_MINUTES: int = 60

    # Application
    APP_NAME: str = "Haste"
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
