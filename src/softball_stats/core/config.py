"""
Configuration management for Softball Stats.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables,
    e.g. NCAA_MIN_REQUEST_INTERVAL=2.0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "Softball Stats API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = "INFO"

    # ==========================================================================
    # Upstream NCAA API
    # ==========================================================================
    ncaa_api_base_url: str = Field(
        default="https://ncaa-api.henrygd.me",
        description="Base URL of the upstream statistics API",
    )
    ncaa_api_key: Optional[str] = Field(
        default=None,
        description="Optional key sent as the x-ncaa-key header",
    )
    ncaa_user_agent: str = "College Softball App/1.0"
    ncaa_request_timeout: float = Field(default=15.0, gt=0, description="Per-request timeout (seconds)")
    ncaa_min_request_interval: float = Field(
        default=1.0,
        ge=0,
        description="Minimum spacing between outbound requests (seconds)",
    )

    @computed_field
    @property
    def ncaa_headers(self) -> dict[str, str]:
        """Headers sent with every outbound request."""
        headers = {"User-Agent": self.ncaa_user_agent}
        if self.ncaa_api_key:
            headers["x-ncaa-key"] = self.ncaa_api_key
        return headers

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api"

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type"]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
