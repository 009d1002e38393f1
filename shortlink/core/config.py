"""Application configuration settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SHORTLINK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "shortlink.db"

    # Application
    app_title: str = "Shortlink"
    app_version: str = "0.1.0"
    app_description: str = "URL shortening service with click accounting"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Short codes
    default_short_code_length: int = 6
    min_short_code_length: int = 4
    max_short_code_length: int = 32
    max_short_code_attempts: int = 10
    create_conflict_retries: int = 1

    # Listing
    default_list_limit: int = 50
    max_list_limit: int = 200

    # Metrics
    metrics_window: int = 1000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
