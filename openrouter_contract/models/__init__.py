"""Models Package - the request/response wire contract.

Every shape is a frozen Pydantic model; every union is tagged so calling
code can branch on its discriminator.
"""

from openrouter_contract.models.content import (
    CamelCaseFileAttachment,
    ContentPart,
    FileAttachment,
    FileContent,
    ImageUrl,
    ImageUrlContent,
    InputAudio,
    InputAudioContent,
    Message,
    TextContent,
    VideoUrl,
    VideoUrlContent,
)
from openrouter_contract.models.plugins import (
    FileParserPlugin,
    PdfOptions,
    Plugin,
    ResponseHealingPlugin,
    WebPlugin,
)
from openrouter_contract.models.requests import (
    Config,
    ConfigOptions,
    DebugOptions,
    FallbackConfig,
    ImageConfig,
    Prediction,
    ProviderPreferences,
    Reasoning,
    RouteMode,
    SingleModelConfig,
    WebSearchOptions,
)
from openrouter_contract.models.response_format import (
    ArraySchema,
    JsonObjectResponseFormat,
    JsonSchemaResponseFormat,
    JsonSchemaSpec,
    ObjectSchema,
    PropertySchema,
    ResponseFormat,
    SchemaDescriptor,
)
from openrouter_contract.models.responses import (
    Error,
    ErrorBody,
    Response,
    ResponseChoice,
    ResponseError,
    ResponseImage,
    ResponseMessage,
    ResponseSuccess,
    Usage,
)
from openrouter_contract.models.stats import GenerationData, GenerationStats
from openrouter_contract.models.tools import (
    FunctionCall,
    FunctionDescription,
    NamedToolChoice,
    Tool,
    ToolCall,
    ToolChoice,
)

__all__ = [
    # Messages
    "Message",
    "ContentPart",
    "TextContent",
    "ImageUrl",
    "ImageUrlContent",
    "FileContent",
    "FileAttachment",
    "CamelCaseFileAttachment",
    "InputAudio",
    "InputAudioContent",
    "VideoUrl",
    "VideoUrlContent",
    # Requests
    "Config",
    "ConfigOptions",
    "SingleModelConfig",
    "FallbackConfig",
    "RouteMode",
    "Reasoning",
    "ProviderPreferences",
    "Prediction",
    "WebSearchOptions",
    "ImageConfig",
    "DebugOptions",
    # Response format
    "ResponseFormat",
    "JsonObjectResponseFormat",
    "JsonSchemaResponseFormat",
    "JsonSchemaSpec",
    "SchemaDescriptor",
    "ObjectSchema",
    "ArraySchema",
    "PropertySchema",
    # Plugins
    "Plugin",
    "FileParserPlugin",
    "PdfOptions",
    "WebPlugin",
    "ResponseHealingPlugin",
    # Tools
    "Tool",
    "FunctionDescription",
    "ToolChoice",
    "NamedToolChoice",
    "ToolCall",
    "FunctionCall",
    # Responses
    "Response",
    "ResponseSuccess",
    "ResponseError",
    "ErrorBody",
    "ResponseChoice",
    "ResponseMessage",
    "ResponseImage",
    "Error",
    "Usage",
    # Stats
    "GenerationStats",
    "GenerationData",
]
