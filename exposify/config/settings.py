"""
Configuration management for the Exposify client.
Loads settings from EXPOSIFY_-prefixed environment variables with defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXPOSIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Exposify API
    api_key: str = Field(default="", description="Secret API token (EXPOSIFY_API_KEY)")

    # HTTP Settings
    request_timeout: float = Field(default=5.0, gt=0)


# Global settings instance
settings = Settings()
