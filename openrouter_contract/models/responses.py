"""
Response Models - non-streaming chat-completion responses.

The top-level body is either a success envelope (``choices``) or an error
envelope (``error``). ``Response`` discriminates on the presence of ``error``.

Nullable keys (``finish_reason``, message ``content`` and ``reasoning``) are
required and may be null; merely optional keys (``tool_calls``, ``images``,
``error``, ``usage``) may be absent. Nulls are kept as None and never coerced
to empty strings.

Reference:
- https://openrouter.ai/docs/api-reference/overview#responses
- https://openrouter.ai/docs/api-reference/errors
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag

from openrouter_contract.models.base import ResponseModel
from openrouter_contract.models.tools import ToolCall


# =============================================================================
# Per-choice Error
# =============================================================================


class Error(ResponseModel):
    """
    Error attached to a single choice in an otherwise successful response.

    Attributes:
        code: Numeric error code.
        message: Human-readable message.
    """

    code: int
    message: str


# =============================================================================
# Choice Message
# =============================================================================


class GeneratedImageUrl(ResponseModel):
    url: str


class ResponseImage(ResponseModel):
    """Image produced by an image-generation model."""

    type: Literal["image_url"] = "image_url"
    image_url: GeneratedImageUrl


class ResponseMessage(ResponseModel):
    """
    Message within a choice.

    Attributes:
        content: Completion text, null when the model only called tools.
        role: Message role as reported by the API.
        reasoning: Reasoning trace, null when none was produced or requested.
        tool_calls: Function calls requested by the model.
        images: Generated images.
    """

    content: Optional[str] = Field(..., description="Completion text")
    role: str
    reasoning: Optional[str] = Field(..., description="Reasoning trace")
    tool_calls: Optional[list[ToolCall]] = None
    images: Optional[list[ResponseImage]] = None


class ResponseChoice(ResponseModel):
    """
    A single completion choice.

    ``finish_reason`` depends on the model; common values are stop, length,
    content_filter, tool_calls and function_call.
    """

    finish_reason: Optional[str] = Field(..., description="Completion stop reason")
    message: ResponseMessage
    error: Optional[Error] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


# =============================================================================
# Usage
# =============================================================================


class Usage(ResponseModel):
    """
    Token usage statistics.

    Attributes:
        prompt_tokens: Prompt tokens, images and tools included
        completion_tokens: Generated tokens
        total_tokens: Sum of the two
    """

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


# =============================================================================
# Envelopes
# =============================================================================


class ResponseSuccess(ResponseModel):
    """
    Success envelope.

    Attributes:
        id: Generation id, also the key for GenerationStats lookups.
        choices: One or more completion choices.
        created: Unix timestamp of creation.
        model: Model that served the request.
        system_fingerprint: Present only if the provider supports it.
        usage: Token usage statistics.
    """

    id: str
    choices: list[ResponseChoice] = Field(..., min_length=1)
    created: int
    model: str
    system_fingerprint: Optional[str] = None
    usage: Optional[Usage] = None

    @property
    def is_error(self) -> bool:
        return False


class ErrorBody(ResponseModel):
    status: int
    message: str
    metadata: Any = None


class ResponseError(ResponseModel):
    """
    Error envelope.

    Example:
        >>> ResponseError(error={"status": 429, "message": "rate limited"}).status
        429
    """

    error: ErrorBody

    @property
    def is_error(self) -> bool:
        return True

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def message(self) -> str:
        return self.error.message


def _envelope_tag(value: Any) -> str:
    """Select the envelope variant from the presence of ``error``."""
    if isinstance(value, dict):
        return "error" if "error" in value else "success"
    return "error" if isinstance(value, ResponseError) else "success"


Response = Annotated[
    Union[
        Annotated[ResponseSuccess, Tag("success")],
        Annotated[ResponseError, Tag("error")],
    ],
    Discriminator(_envelope_tag),
]
