"""
Schema Export Service - publish the contract as JSON Schema.

Generates a JSON-Schema document for each public top-level shape so that
non-Python consumers and contract tests can check payloads against the same
source of truth. Documents are written as JSON and YAML.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter

from openrouter_contract.models.content import Message
from openrouter_contract.models.requests import Config
from openrouter_contract.models.responses import Response
from openrouter_contract.models.stats import GenerationStats
from openrouter_contract.observability.logging import get_logger

SCHEMA_SHAPES: dict[str, Any] = {
    "config": Config,
    "message": Message,
    "response": Response,
    "generation_stats": GenerationStats,
}

_TITLES = {
    "config": "Config",
    "message": "Message",
    "response": "Response",
    "generation_stats": "GenerationStats",
}


def build_json_schemas() -> dict[str, dict[str, Any]]:
    """
    Build a JSON-Schema document per top-level shape.

    Property names use wire names (aliases), e.g. ``schema``, ``fileData``,
    ``inputAudio``.

    Returns:
        Mapping of shape name to its JSON-Schema document.
    """
    schemas: dict[str, dict[str, Any]] = {}
    for name, shape in SCHEMA_SHAPES.items():
        schema = TypeAdapter(shape).json_schema(by_alias=True)
        schema.setdefault("title", _TITLES[name])
        schemas[name] = schema
    return schemas


def export_schemas(directory: Path) -> list[Path]:
    """
    Write every schema as ``<name>.json`` and ``<name>.yaml``.

    Args:
        directory: Output directory, created if missing.

    Returns:
        Paths written, in write order.
    """
    directory.mkdir(parents=True, exist_ok=True)
    logger = get_logger(__name__)
    written: list[Path] = []

    for name, schema in build_json_schemas().items():
        json_path = directory / f"{name}.json"
        with open(json_path, "w") as f:
            json.dump(schema, f, indent=2)
        written.append(json_path)

        yaml_path = directory / f"{name}.yaml"
        with open(yaml_path, "w") as f:
            yaml.safe_dump(schema, f, default_flow_style=False, sort_keys=False)
        written.append(yaml_path)

        logger.info("schema exported", shape=name, directory=str(directory))

    return written
