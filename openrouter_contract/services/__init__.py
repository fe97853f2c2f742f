"""Services Package - payload entry points and schema export."""

from openrouter_contract.services.payloads import (
    build_request_body,
    build_request_headers,
    choice_errors,
    dump_response,
    parse_config,
    parse_generation_stats,
    parse_messages,
    parse_response,
    raise_for_error,
)
from openrouter_contract.services.schema_export import (
    build_json_schemas,
    export_schemas,
)

__all__ = [
    # Payloads
    "parse_config",
    "parse_messages",
    "build_request_body",
    "build_request_headers",
    "parse_response",
    "dump_response",
    "raise_for_error",
    "choice_errors",
    "parse_generation_stats",
    # Schema export
    "build_json_schemas",
    "export_schemas",
]
