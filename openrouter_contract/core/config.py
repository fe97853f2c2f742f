"""
Core configuration module for the OpenRouter contract package.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the
OPENROUTER_CONTRACT_ prefix.

Settings only feed defaults into payload construction (attribution headers,
fallback model) and logging; the contract shapes themselves never read them.

Reference:
- OpenRouter app attribution: https://openrouter.ai/docs/api-reference/overview#headers
- Pattern: Pydantic BaseSettings with lru_cache singleton
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    All fields use the OPENROUTER_CONTRACT_ prefix for environment variables.
    Example: OPENROUTER_CONTRACT_LOG_LEVEL=DEBUG
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="openrouter-contract",
        description="Name of the service for logging and identification",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level emitted by the structured logger",
    )

    # =========================================================================
    # Attribution Headers
    # Used when a request config does not carry its own httpReferer / xTitle
    # =========================================================================
    http_referer: Optional[str] = Field(
        default=None,
        description="Default HTTP-Referer header identifying the calling app",
    )
    x_title: Optional[str] = Field(
        default=None,
        description="Default X-Title header identifying the calling app",
    )

    # =========================================================================
    # Routing Defaults
    # =========================================================================
    default_model: Optional[str] = Field(
        default=None,
        description="Model used when a single-model config names none",
    )

    model_config = {
        "env_prefix": "OPENROUTER_CONTRACT_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("http_referer")
    @classmethod
    def validate_http_referer(cls, v: Optional[str]) -> Optional[str]:
        """Validate HTTP-Referer is an http(s) URL."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("HTTP referer must start with http:// or https://")
        return v


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get the package settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.
    Tests that change the environment call ``get_settings.cache_clear()``.

    Returns:
        Settings: The settings instance.
    """
    return Settings()
