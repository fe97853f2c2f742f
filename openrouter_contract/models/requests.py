"""
Request Models - chat-completion request configuration.

``Config`` is a union of two routing variants selected by the ``route``
discriminator:

- SingleModelConfig: an optional ``model`` and no ``route``.
- FallbackConfig: ``route="fallback"`` and a non-empty ordered ``models`` list.

Both variants share the generation controls and optional blocks defined on
ConfigOptions. Since request shapes are closed, a single-model config that
carries ``models`` and a fallback config that carries ``model`` are both
rejected.

Reference:
- Model routing: https://openrouter.ai/docs/features/model-routing
- Parameters: https://openrouter.ai/docs/api-reference/parameters
- Provider routing: https://openrouter.ai/docs/features/provider-routing
- Reasoning tokens: https://openrouter.ai/docs/use-cases/reasoning-tokens
- Transforms: https://openrouter.ai/docs/features/message-transforms
- Predicted outputs: https://platform.openai.com/docs/guides/predicted-outputs
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag, model_validator

from openrouter_contract.models.base import RequestModel
from openrouter_contract.models.plugins import Plugin
from openrouter_contract.models.response_format import ResponseFormat
from openrouter_contract.models.tools import Tool, ToolChoice

Quantization = Literal["int4", "int8", "fp6", "fp8", "fp16", "bf16", "unknown"]
ReasoningEffort = Literal["high", "medium", "low"]
ProviderDataCollection = Literal["allow", "deny"]
WebSearchContextSize = Literal["low", "med", "high"]
ImageAspectRatio = Literal[
    "1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"
]
ImageSize = Literal["1K", "2K", "4K"]

HEADER_FIELDS = frozenset({"http_referer", "x_title"})


class RouteMode(str, Enum):
    """Routing variant of a request config."""

    SINGLE = "single"
    FALLBACK = "fallback"


# =============================================================================
# Reasoning
# =============================================================================


class Reasoning(RequestModel):
    """
    Reasoning-token controls.

    ``effort`` and ``max_tokens`` are alternative ways to size the reasoning
    budget; at most one of them may be set.

    Attributes:
        enabled: Turn reasoning on at the provider's default budget.
        exclude: Reason, but leave the trace out of the response.
        effort: Relative budget (high, medium, low).
        max_tokens: Explicit token budget.
    """

    enabled: Optional[bool] = None
    exclude: Optional[bool] = None
    effort: Optional[ReasoningEffort] = None
    max_tokens: Optional[int] = None

    @model_validator(mode="after")
    def effort_or_budget(self) -> "Reasoning":
        """Reject a block that sets both effort and max_tokens."""
        if self.effort is not None and self.max_tokens is not None:
            raise ValueError("reasoning accepts either effort or max_tokens, not both")
        return self


# =============================================================================
# Provider Routing Preferences
# =============================================================================


class ProviderPreferences(RequestModel):
    """
    Provider routing preferences. All fields are independent.

    Attributes:
        only: Restrict routing to these provider slugs.
        order: Try providers in this order.
        ignore: Never route to these provider slugs.
        quantizations: Accept only endpoints serving these precisions.
        data_collection: Whether providers that store prompts are allowed.
        allow_fallbacks: Allow backup providers when the preferred ones fail.
        require_parameters: Route only to providers supporting every parameter.
        enforce_distillable_text: Route only to models whose output may be distilled.
    """

    only: Optional[list[str]] = None
    order: Optional[list[str]] = None
    ignore: Optional[list[str]] = None
    quantizations: Optional[list[Quantization]] = None
    data_collection: Optional[ProviderDataCollection] = None
    allow_fallbacks: Optional[bool] = None
    require_parameters: Optional[bool] = None
    enforce_distillable_text: Optional[bool] = None


# =============================================================================
# Small Option Blocks
# =============================================================================


class Prediction(RequestModel):
    """Predicted output used to cut latency."""

    type: Literal["content"] = "content"
    content: str


class WebSearchOptions(RequestModel):
    search_context_size: WebSearchContextSize


class ImageConfig(RequestModel):
    """Image generation settings (Google image models)."""

    aspect_ratio: ImageAspectRatio
    image_size: ImageSize


class DebugOptions(RequestModel):
    # Returns the transformed request body sent to the upstream provider
    echo_upstream_body: Optional[bool] = None


# =============================================================================
# Config Variants
# =============================================================================


class ConfigOptions(RequestModel):
    """
    Fields shared by both routing variants.

    Absent fields mean "use the provider default". Documented numeric bounds
    are enforced at construction.

    ``httpReferer`` and ``xTitle`` are attribution headers, not body fields;
    see ``services.payloads.build_request_headers``.
    """

    # Headers
    http_referer: Optional[str] = Field(default=None, alias="httpReferer")
    x_title: Optional[str] = Field(default=None, alias="xTitle")

    reasoning: Optional[Reasoning] = None
    response_format: Optional[ResponseFormat] = None
    provider: Optional[ProviderPreferences] = None
    user: Optional[str] = Field(
        default=None, description="Stable end-user identifier for abuse detection"
    )

    stop: Optional[Union[str, list[str]]] = None

    # Sampling parameters
    min_p: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_a: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_p: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, ge=1)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    repetition_penalty: Optional[float] = Field(default=None, gt=0.0, le=2.0)
    seed: Optional[int] = None

    logit_bias: Optional[dict[int, float]] = Field(
        default=None, description="Bias per token id"
    )

    tools: Optional[list[Tool]] = None
    tool_choice: Optional[ToolChoice] = None

    # Applied by the router itself, never forwarded to providers
    transforms: Optional[list[Literal["middle-out"]]] = Field(
        default=None, max_length=1
    )

    prediction: Optional[Prediction] = None

    plugins: Optional[list[Plugin]] = None
    web_search_options: Optional[WebSearchOptions] = None

    # Image generation only
    modalities: Optional[tuple[Literal["image"], Literal["text"]]] = None
    image_config: Optional[ImageConfig] = None

    debug: Optional[DebugOptions] = None


class SingleModelConfig(ConfigOptions):
    """
    Route to one model, or to the account default when ``model`` is absent.

    ``route`` exists only so that an explicit null is accepted; any other
    value selects the fallback variant.
    """

    model: Optional[str] = None
    route: None = None

    @property
    def route_mode(self) -> RouteMode:
        return RouteMode.SINGLE


class FallbackConfig(ConfigOptions):
    """
    Try ``models`` in order until one succeeds.

    Example:
        >>> FallbackConfig(models=["openai/gpt-4o", "anthropic/claude-3.5-sonnet"])
    """

    tag_field = "route"

    models: list[str] = Field(..., min_length=1)
    route: Literal["fallback"] = "fallback"

    @property
    def route_mode(self) -> RouteMode:
        return RouteMode.FALLBACK


def _route_tag(value: Any) -> str:
    """Select the config variant from the ``route`` discriminator."""
    if isinstance(value, dict):
        route = value.get("route")
    else:
        route = getattr(value, "route", None)
    return RouteMode.FALLBACK.value if route is not None else RouteMode.SINGLE.value


Config = Annotated[
    Union[
        Annotated[SingleModelConfig, Tag(RouteMode.SINGLE.value)],
        Annotated[FallbackConfig, Tag(RouteMode.FALLBACK.value)],
    ],
    Discriminator(_route_tag),
]
