"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Device Lending API"
    app_version: str = "0.1.0"

    database_url: str = "sqlite:///./device_lending.db"

    # SKIP_DB_INIT=1 leaves schema creation to the caller (tests)
    skip_db_init: bool = False
    seed_demo_data: bool = True

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
