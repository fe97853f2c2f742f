"""
OpenRouter contract - typed request/response shapes for an OpenRouter-style
chat-completion API.

Models live in ``openrouter_contract.models``; parse/build entry points in
``openrouter_contract.services``.
"""

from openrouter_contract.models import (
    Config,
    FallbackConfig,
    GenerationStats,
    Message,
    Response,
    ResponseError,
    ResponseSuccess,
    SingleModelConfig,
)
from openrouter_contract.services import (
    build_request_body,
    build_request_headers,
    parse_config,
    parse_generation_stats,
    parse_response,
    raise_for_error,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "SingleModelConfig",
    "FallbackConfig",
    "Message",
    "Response",
    "ResponseSuccess",
    "ResponseError",
    "GenerationStats",
    "parse_config",
    "build_request_body",
    "build_request_headers",
    "parse_response",
    "raise_for_error",
    "parse_generation_stats",
]
