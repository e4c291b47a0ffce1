"""Build OpenAPI parameters and response schemas from catalog columns.

Handles:
- PostgreSQL declared type -> JSON Schema type mapping
- Fixed pagination/ordering query parameters (limit, offset, order)
- One filter query parameter per column
- Accept/Prefer request headers
- Array-of-objects response schema
"""

from __future__ import annotations

from typing import Any, Iterable

from .catalog import ColumnDescriptor

# Declared types with a non-string mapping, plus the string-like ones
# listed explicitly. Anything missing falls back to "string".
_TYPE_MAP: dict[str, str] = {
    "integer": "integer",
    "boolean": "boolean",
    "text": "string",
    "character varying": "string",
    "character": "string",
    "timestamp without time zone": "string",
    "timestamp with time zone": "string",
    "date": "string",
    "numeric": "number",
    "double precision": "number",
    "real": "number",
}

FALLBACK_TYPE = "string"

JSON_SCHEMA_TYPES = frozenset({"integer", "boolean", "string", "number"})


def map_type(declared_type: str) -> str:
    """Map a catalog type name to a JSON Schema type.

    Case-sensitive. Unknown types (uuid, json, arrays, enums, bigint, ...)
    map to "string" so the document stays valid.
    """
    return _TYPE_MAP.get(declared_type, FALLBACK_TYPE)


def _parameter(
    name: str,
    location: str,
    description: str,
    schema: dict[str, Any],
) -> dict[str, Any]:
    return {
        "name": name,
        "in": location,
        "description": description,
        "required": False,
        "schema": schema,
    }


def fixed_parameters() -> list[dict[str, Any]]:
    """Return the limit/offset/order query parameters."""
    return [
        _parameter(
            "limit", "query", "Maximum number of results to return",
            {"type": "integer", "minimum": 1},
        ),
        _parameter(
            "offset", "query", "Number of results to skip",
            {"type": "integer", "minimum": 0},
        ),
        _parameter(
            "order", "query", "Order results by column (e.g. col.asc, col.desc)",
            {"type": "string"},
        ),
    ]


def filter_parameters(columns: Iterable[ColumnDescriptor]) -> list[dict[str, Any]]:
    """Return one optional query filter per column, in column order."""
    return [
        _parameter(
            col.name, "query", f"Filter by {col.name} ({col.declared_type})",
            {"type": map_type(col.declared_type)},
        )
        for col in columns
    ]


def header_parameters() -> list[dict[str, Any]]:
    """Return the Accept and Prefer request headers."""
    return [
        _parameter(
            "Accept", "header", "Response media type",
            {"type": "string", "default": "application/json"},
        ),
        _parameter(
            "Prefer", "header", "PostgREST preferences (e.g. return=representation)",
            {"type": "string"},
        ),
    ]


def build_parameters(columns: list[ColumnDescriptor]) -> list[dict[str, Any]]:
    """Return fixed, filter and header parameters in that order."""
    return fixed_parameters() + filter_parameters(columns) + header_parameters()


def build_response_schema(columns: list[ColumnDescriptor]) -> dict[str, Any]:
    """Return the array-of-rows schema for a table's columns."""
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                col.name: {"type": map_type(col.declared_type)} for col in columns
            },
        },
    }


def build_responses(columns: list[ColumnDescriptor]) -> dict[str, Any]:
    """Return the responses object for a table's GET operation."""
    # String status key: an int key would not survive the JSON round trip
    return {
        "200": {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "schema": build_response_schema(columns),
                },
            },
        },
    }
