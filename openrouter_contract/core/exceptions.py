"""
Custom exceptions for the OpenRouter contract package.

This module provides a hierarchy of custom exceptions. All exceptions inherit
from OpenRouterContractException and include error codes for consistent error
handling and logging.

The contract models describe errors as data (ResponseError, per-choice Error).
These exceptions exist for callers that want those payloads, or a payload
that does not conform, surfaced as control flow instead.
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes Enum
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for contract exceptions.

    These codes provide a consistent way to identify error types
    in logging and in calling code.
    """

    CONTRACT_ERROR = "CONTRACT_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    CHOICE_ERROR = "CHOICE_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class OpenRouterContractException(Exception):
    """
    Base exception for all contract errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.CONTRACT_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# ContractValidationError
# =============================================================================


class ContractValidationError(OpenRouterContractException):
    """
    Exception for payloads that do not conform to a contract shape.

    Raised by the payload services when a raw mapping or JSON document fails
    validation. The underlying pydantic.ValidationError is chained as
    ``__cause__``.

    Note: Named ContractValidationError to avoid conflict with
    pydantic.ValidationError.

    Attributes:
        field: Dotted path of the first offending field, if known.
        errors: pydantic's structured error list.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        error_code: str = ErrorCode.VALIDATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field
        self.errors = errors or []


# =============================================================================
# UpstreamError and subclasses
# =============================================================================


class UpstreamError(OpenRouterContractException):
    """
    Exception for a top-level error envelope returned by the API.

    Attributes:
        status: Numeric status carried by the envelope.
        metadata: Opaque metadata carried by the envelope (if any).
    """

    def __init__(
        self,
        message: str,
        status: int,
        metadata: Any = None,
        error_code: str = ErrorCode.UPSTREAM_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.status = status
        self.metadata = metadata


class AuthenticationError(UpstreamError):
    """Error envelope with status 401 or 403."""

    def __init__(
        self,
        message: str,
        status: int = 401,
        metadata: Any = None,
        error_code: str = ErrorCode.AUTHENTICATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status, metadata, error_code, **kwargs)


class RateLimitError(UpstreamError):
    """Error envelope with status 429."""

    def __init__(
        self,
        message: str,
        status: int = 429,
        metadata: Any = None,
        error_code: str = ErrorCode.RATE_LIMIT_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status, metadata, error_code, **kwargs)


# =============================================================================
# ChoiceError
# =============================================================================


class ChoiceError(OpenRouterContractException):
    """
    Exception for a single failed choice inside a success envelope.

    Attributes:
        code: Numeric error code carried by the choice.
        choice_index: Position of the failed choice in ``choices``.
    """

    def __init__(
        self,
        message: str,
        code: int,
        choice_index: int,
        error_code: str = ErrorCode.CHOICE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.code = code
        self.choice_index = choice_index
