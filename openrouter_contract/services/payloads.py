"""
Payload Service - entry points between raw JSON and contract shapes.

These functions are the seam calling code uses on each side of the wire:
validating caller-supplied configs and messages, assembling the request body
and attribution headers, and validating responses and generation stats. They
do no network I/O.

Validation failures surface as ContractValidationError, with the pydantic
error chained as the cause.

Pattern: TypeAdapter for union-typed entry points
Pattern: Structured logging via observability.get_logger
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from openrouter_contract.core.config import Settings, get_settings
from openrouter_contract.core.exceptions import (
    AuthenticationError,
    ChoiceError,
    ContractValidationError,
    RateLimitError,
    UpstreamError,
)
from openrouter_contract.models.content import Message
from openrouter_contract.models.requests import (
    HEADER_FIELDS,
    Config,
    FallbackConfig,
    SingleModelConfig,
)
from openrouter_contract.models.responses import (
    Error,
    Response,
    ResponseError,
    ResponseSuccess,
)
from openrouter_contract.models.stats import GenerationStats
from openrouter_contract.observability.logging import get_logger

T = TypeVar("T")

RawPayload = Union[Mapping[str, Any], str, bytes]

_config_adapter: TypeAdapter[Union[SingleModelConfig, FallbackConfig]] = TypeAdapter(Config)
_messages_adapter: TypeAdapter[list[Message]] = TypeAdapter(list[Message])
_response_adapter: TypeAdapter[Union[ResponseSuccess, ResponseError]] = TypeAdapter(
    Response
)
_stats_adapter: TypeAdapter[GenerationStats] = TypeAdapter(GenerationStats)

AUTH_STATUSES = frozenset({401, 403})
RATE_LIMIT_STATUS = 429


def _validate(adapter: TypeAdapter[T], payload: Any, shape: str) -> T:
    """Validate a mapping or JSON document, translating pydantic failures."""
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return adapter.validate_json(payload)
        if isinstance(payload, Mapping) and not isinstance(payload, dict):
            payload = dict(payload)
        return adapter.validate_python(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        field = None
        if errors and errors[0]["loc"]:
            field = ".".join(str(part) for part in errors[0]["loc"])
        get_logger(__name__).warning(
            "payload rejected",
            shape=shape,
            field=field,
            error_count=e.error_count(),
        )
        detail = errors[0]["msg"] if errors else str(e)
        raise ContractValidationError(
            f"{shape} payload does not conform: {detail}",
            field=field,
            errors=errors,
        ) from e


# =============================================================================
# Request Side
# =============================================================================


def parse_config(payload: RawPayload) -> Union[SingleModelConfig, FallbackConfig]:
    """
    Validate a request config into its routing variant.

    Example:
        >>> parse_config({"route": "fallback", "models": ["a/b", "c/d"]}).route_mode
        <RouteMode.FALLBACK: 'fallback'>
    """
    return _validate(_config_adapter, payload, "config")


def parse_messages(payload: Union[Sequence[Any], str, bytes]) -> list[Message]:
    """
    Validate a conversation.

    Raises:
        ContractValidationError: If any message does not conform, or the
            conversation is empty.
    """
    messages = _validate(_messages_adapter, payload, "messages")
    if not messages:
        raise ContractValidationError("messages must not be empty", field="messages")
    return messages


def build_request_body(
    config: Union[SingleModelConfig, FallbackConfig, Mapping[str, Any]],
    messages: Sequence[Any],
    settings: Settings | None = None,
) -> dict[str, Any]:
    """
    Assemble the JSON request body.

    Config fields are emitted by their wire names with absent (None) fields
    dropped; attribution header fields are left out. A single-model config
    without a model falls back to ``settings.default_model`` when set.

    Args:
        config: A config variant, or a raw mapping to validate first.
        messages: Message instances or raw message mappings.
        settings: Overrides the settings singleton.

    Returns:
        JSON-ready dict including ``messages``.
    """
    if not isinstance(config, (SingleModelConfig, FallbackConfig)):
        config = parse_config(config)
    settings = settings or get_settings()

    body = config.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
        exclude=set(HEADER_FIELDS),
    )
    if (
        isinstance(config, SingleModelConfig)
        and config.model is None
        and settings.default_model
    ):
        body["model"] = settings.default_model

    body["messages"] = [
        message.model_dump(mode="json", by_alias=True, exclude_none=True)
        for message in parse_messages(messages)
    ]

    get_logger(__name__).debug(
        "request body built",
        route=config.route_mode.value,
        message_count=len(body["messages"]),
    )
    return body


def build_request_headers(
    config: Union[SingleModelConfig, FallbackConfig],
    settings: Settings | None = None,
) -> dict[str, str]:
    """
    Attribution headers for the request.

    Values on the config win over the settings defaults; unset headers are
    omitted.
    """
    settings = settings or get_settings()
    headers: dict[str, str] = {}

    referer = config.http_referer or settings.http_referer
    if referer:
        headers["HTTP-Referer"] = referer
    title = config.x_title or settings.x_title
    if title:
        headers["X-Title"] = title
    return headers


# =============================================================================
# Response Side
# =============================================================================


def choice_errors(response: ResponseSuccess) -> list[tuple[int, Error]]:
    """Return ``(index, error)`` for every choice carrying an error."""
    return [
        (index, choice.error)
        for index, choice in enumerate(response.choices)
        if choice.error is not None
    ]


def parse_response(payload: RawPayload) -> Union[ResponseSuccess, ResponseError]:
    """
    Validate a response body into a success or error envelope.

    A body with a top-level ``error`` key is an error envelope; anything else
    must be a success envelope.
    """
    response = _validate(_response_adapter, payload, "response")
    logger = get_logger(__name__)

    if isinstance(response, ResponseError):
        logger.warning(
            "error envelope received",
            status=response.status,
            message=response.message,
        )
        return response

    for index, error in choice_errors(response):
        logger.warning(
            "choice failed",
            response_id=response.id,
            choice_index=index,
            code=error.code,
            message=error.message,
        )
    logger.debug(
        "response parsed",
        response_id=response.id,
        model=response.model,
        choice_count=len(response.choices),
    )
    return response


def dump_response(response: Union[ResponseSuccess, ResponseError]) -> dict[str, Any]:
    """
    Re-serialize a parsed response.

    Emits exactly the keys that were present on input; explicit nulls stay
    null.
    """
    return response.model_dump(mode="json", by_alias=True, exclude_unset=True)


def raise_for_error(
    response: Union[ResponseSuccess, ResponseError],
    include_choice_errors: bool = False,
) -> ResponseSuccess:
    """
    Turn error payloads into exceptions.

    Args:
        response: A parsed envelope.
        include_choice_errors: Also raise for the first failed choice of a
            success envelope.

    Returns:
        The success envelope, unchanged.

    Raises:
        RateLimitError: Error envelope with status 429.
        AuthenticationError: Error envelope with status 401 or 403.
        UpstreamError: Any other error envelope.
        ChoiceError: A failed choice, when include_choice_errors is set.
    """
    if isinstance(response, ResponseError):
        status = response.status
        message = response.message
        metadata = response.error.metadata
        if status == RATE_LIMIT_STATUS:
            raise RateLimitError(message, metadata=metadata)
        if status in AUTH_STATUSES:
            raise AuthenticationError(message, status=status, metadata=metadata)
        raise UpstreamError(message, status=status, metadata=metadata)

    if include_choice_errors:
        failures = choice_errors(response)
        if failures:
            index, error = failures[0]
            raise ChoiceError(error.message, code=error.code, choice_index=index)
    return response


# =============================================================================
# Generation Stats
# =============================================================================


def parse_generation_stats(payload: RawPayload) -> GenerationStats:
    """Validate a generation stats record."""
    stats = _validate(_stats_adapter, payload, "generation_stats")
    get_logger(__name__).debug(
        "generation stats parsed",
        generation_id=stats.generation_id,
        total_cost=stats.data.total_cost,
    )
    return stats
