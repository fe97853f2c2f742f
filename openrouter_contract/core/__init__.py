"""
Core module for the OpenRouter contract package.

This module contains configuration, exceptions, and shared utilities.
"""

from openrouter_contract.core.config import Settings, get_settings
from openrouter_contract.core.exceptions import (
    AuthenticationError,
    ChoiceError,
    ContractValidationError,
    ErrorCode,
    OpenRouterContractException,
    RateLimitError,
    UpstreamError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "OpenRouterContractException",
    "ContractValidationError",
    "UpstreamError",
    "AuthenticationError",
    "RateLimitError",
    "ChoiceError",
]
