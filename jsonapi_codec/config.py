"""Codec settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec settings loaded from environment variables with JSONAPI_ prefix."""

    # Status stamped on every error produced while parsing
    error_status: str = "422"
    # Page size used when a page is built without one
    default_page_size: int = 10
    media_type: str = "application/vnd.api+json"
    version: str = "1.0"

    model_config = SettingsConfigDict(env_prefix="JSONAPI_")


@lru_cache
def get_settings() -> Settings:
    """Return cached codec settings instance."""
    return Settings()
