"""
Response Format Models - structured output requests.

``response_format`` is either free-form JSON-object mode or strict JSON-schema
mode. The schema carried by strict mode is a recursive descriptor: an object
shape, or an array whose items are again an object or array shape, nested to
any depth.

Reference:
- https://openrouter.ai/docs/features/structured-outputs
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from openrouter_contract.models.base import RequestModel

ScalarType = Literal["string", "number", "boolean"]


class PropertySchema(RequestModel):
    """Schema of a single object property."""

    type: Union[ScalarType, list[ScalarType]]
    description: Optional[str] = None
    enum: Optional[list[Any]] = None


class ObjectSchema(RequestModel):
    """Object shape with named scalar properties."""

    tag_field = "type"

    type: Literal["object"] = "object"
    properties: dict[str, PropertySchema]
    required: Optional[list[str]] = None
    additional_properties: Optional[bool] = Field(
        default=None, alias="additionalProperties"
    )


class ArraySchema(RequestModel):
    """Array shape wrapping one nested object or array descriptor."""

    tag_field = "type"

    type: Literal["array"] = "array"
    items: "SchemaDescriptor"

    @property
    def depth(self) -> int:
        """Number of array layers, this one included."""
        if isinstance(self.items, ArraySchema):
            return 1 + self.items.depth
        return 1


SchemaDescriptor = Annotated[
    Union[ObjectSchema, ArraySchema],
    Field(discriminator="type"),
]

ArraySchema.model_rebuild()


# =============================================================================
# Response Format Union
# =============================================================================


class JsonSchemaSpec(RequestModel):
    """
    Named, strictly validated schema.

    ``schema`` is exposed as ``schema_`` to avoid shadowing BaseModel
    attributes; it is read and written on the wire as ``schema``.
    """

    name: str
    strict: bool
    schema_: SchemaDescriptor = Field(..., alias="schema")


class JsonObjectResponseFormat(RequestModel):
    tag_field = "type"

    type: Literal["json_object"] = "json_object"


class JsonSchemaResponseFormat(RequestModel):
    tag_field = "type"

    type: Literal["json_schema"] = "json_schema"
    json_schema: JsonSchemaSpec


ResponseFormat = Annotated[
    Union[JsonObjectResponseFormat, JsonSchemaResponseFormat],
    Field(discriminator="type"),
]
