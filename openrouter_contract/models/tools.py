"""
Tool Models - function calling on both sides of the wire.

Request side: Tool / FunctionDescription describe callable functions and
ToolChoice selects how the model may use them.

Response side: ToolCall / FunctionCall carry the model's request to call a
function, with arguments encoded as a JSON string.

Reference:
- https://openrouter.ai/docs/features/tool-calling
- Pattern: Tool calling with JSON Schema parameters (OpenAI compatible)
"""

import json
from typing import Any, Literal, Optional, Union

from pydantic import Field

from openrouter_contract.core.exceptions import ContractValidationError
from openrouter_contract.models.base import RequestModel, ResponseModel


# =============================================================================
# Tool Definitions (request)
# =============================================================================


class FunctionDescription(RequestModel):
    """
    Callable function descriptor.

    Attributes:
        name: Function name the model refers to in tool calls.
        description: Free-text description of what the function does.
        parameters: JSON Schema object describing the arguments.
    """

    name: str
    description: Optional[str] = None
    parameters: dict[str, Any] = Field(
        ..., description="JSON Schema for input parameters"
    )


class Tool(RequestModel):
    """Tool definition for function calling."""

    type: Literal["function"] = "function"
    function: FunctionDescription


class NamedFunction(RequestModel):
    name: str


class NamedToolChoice(RequestModel):
    """Force the model to call one specific function."""

    type: Literal["function"] = "function"
    function: NamedFunction


ToolChoice = Union[Literal["none", "auto"], NamedToolChoice]


# =============================================================================
# Tool Calls (response)
# =============================================================================


class FunctionCall(ResponseModel):
    """
    Function invocation requested by the model.

    Attributes:
        name: Name of the function to call.
        arguments: Arguments encoded as a JSON string.
    """

    name: str
    arguments: str = Field(..., description="JSON-encoded arguments")

    def parsed_arguments(self) -> dict[str, Any]:
        """
        Decode ``arguments`` into a mapping.

        An empty string decodes to an empty mapping.

        Raises:
            ContractValidationError: If arguments are not a JSON object.
        """
        if not self.arguments:
            return {}
        try:
            decoded = json.loads(self.arguments)
        except json.JSONDecodeError as e:
            raise ContractValidationError(
                f"Tool call arguments for '{self.name}' are not valid JSON: {e}",
                field="function.arguments",
            ) from e
        if not isinstance(decoded, dict):
            raise ContractValidationError(
                f"Tool call arguments for '{self.name}' must be a JSON object",
                field="function.arguments",
            )
        return decoded


class ToolCall(ResponseModel):
    """
    A request from the model to execute a function.

    Example:
        >>> ToolCall(
        ...     id="call_abc123",
        ...     function={"name": "search", "arguments": '{"query": "python"}'},
        ... ).function.parsed_arguments()
        {'query': 'python'}
    """

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall
