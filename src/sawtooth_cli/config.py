"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI settings loaded from SAWTOOTH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAWTOOTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Signing
    # ======================
    key_name: Optional[str] = Field(
        default=None,
        description="Default signing key name (falls back to the current username)",
    )

    # ======================
    # Environment
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
