"""
Application configuration using Pydantic settings.

Usage:
    from rivix_core.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified site settings loaded from environment variables and .env file.

    Every value has a local-development default, so the site boots with no
    environment at all.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App settings
    app_name: str = "Rivix Servers"
    env: str = Field(default="development", validation_alias=AliasChoices("ENV", "NODE_ENV", "env"))
    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "port"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    # Site / company details rendered into every page
    base_url: str = Field(default="https://rivixservers.com", validation_alias=AliasChoices("BASE_URL", "base_url"))
    company_name: str = Field(default="Rivix Servers", validation_alias=AliasChoices("COMPANY_NAME", "company_name"))
    company_email: str = Field(
        default="support@rivixservers.com", validation_alias=AliasChoices("COMPANY_EMAIL", "company_email")
    )
    billing_url: str = Field(
        default="https://billing.rivixservers.com", validation_alias=AliasChoices("BILLING_URL", "billing_url")
    )
    ticket_url: str = Field(
        default="https://billing.rivixservers.com/tickets/create",
        validation_alias=AliasChoices("TICKET_URL", "ticket_url"),
    )

    # Reserved for the AI support assistant page
    openai_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("API_KEY_OPENAI", "openai_api_key")
    )

    # Rate limiting (POST requests, per client IP)
    rate_limit_window_seconds: int = Field(
        default=60, validation_alias=AliasChoices("RATE_LIMIT_WINDOW_SECONDS", "rate_limit_window_seconds")
    )
    rate_limit_max_requests: int = Field(
        default=5, validation_alias=AliasChoices("RATE_LIMIT_MAX_REQUESTS", "rate_limit_max_requests")
    )
    rate_limit_sweep_interval_seconds: int = Field(
        default=300,
        validation_alias=AliasChoices("RATE_LIMIT_SWEEP_INTERVAL_SECONDS", "rate_limit_sweep_interval_seconds"),
    )
    rate_limit_sweep_enabled: bool = Field(
        default=True, validation_alias=AliasChoices("RATE_LIMIT_SWEEP_ENABLED", "rate_limit_sweep_enabled")
    )
    # Only enable behind a proxy that overwrites X-Forwarded-For
    trust_forwarded_for: bool = Field(
        default=False, validation_alias=AliasChoices("TRUST_FORWARDED_FOR", "trust_forwarded_for")
    )

    @field_validator(
        "rate_limit_window_seconds",
        "rate_limit_max_requests",
        "rate_limit_sweep_interval_seconds",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Rate limit knobs must be strictly positive."""
        if v <= 0:
            raise ValueError(f"must be a positive integer (got {v})")
        return v

    @property
    def is_production(self) -> bool:
        return self.env.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        return self.env.lower() in ("development", "dev")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
