"""
Base models shared by every contract shape.

Request shapes are closed: an unknown key is a contract violation. Response
shapes are frozen as well but tolerate keys the API adds over time (``object``,
``provider``, ``index`` and the like), since the caller does not control them.

Union members name their tag in ``tag_field``. The tag keeps its default for
Python construction and is listed as required in the exported JSON Schema.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel


def _require_tag(schema: dict[str, Any], model_class: type[BaseModel]) -> None:
    """Add the model's union tag to its JSON-Schema ``required`` list."""
    tag = getattr(model_class, "tag_field", None)
    if tag is None:
        return
    field = model_class.model_fields[tag]
    name = field.alias or tag
    required = schema.setdefault("required", [])
    if name not in required:
        required.insert(0, name)


class RequestModel(BaseModel):
    """Immutable, closed shape sent to the API."""

    tag_field: ClassVar[Optional[str]] = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
        "json_schema_extra": _require_tag,
    }


class ResponseModel(BaseModel):
    """Immutable shape received from the API."""

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "populate_by_name": True,
    }
