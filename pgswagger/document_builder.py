"""Assemble the OpenAPI document from a table catalog.

Builds one GET path item per table and wraps them with the document
metadata and server list taken from DocumentSettings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .catalog import ColumnDescriptor, TableCatalog
from .naming import operation_summary, table_path
from .schema_builder import build_parameters, build_responses

OPENAPI_VERSION = "3.0.0"


@dataclass(frozen=True)
class DocumentSettings:
    """Document metadata and the single server entry."""

    title: str = "PostgREST API"
    version: str = "1.0.0"
    server_url: str = "http://localhost:3005"
    server_description: str = "Local PostgREST server"


DEFAULT_SETTINGS = DocumentSettings()


def build_path_item(table_name: str, columns: list[ColumnDescriptor]) -> dict[str, Any]:
    """Build the path item for one table. Only GET is generated."""
    return {
        "get": {
            "summary": operation_summary(table_name),
            "parameters": build_parameters(columns),
            "responses": build_responses(columns),
        },
    }


def build_document(
    catalog: TableCatalog,
    settings: DocumentSettings = DEFAULT_SETTINGS,
) -> dict[str, Any]:
    """Build the full OpenAPI document. Paths follow catalog order."""
    paths: dict[str, Any] = {}
    for table_name, columns in catalog.items():
        paths[table_path(table_name)] = build_path_item(table_name, columns)

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": settings.title,
            "version": settings.version,
        },
        "servers": [
            {
                "url": settings.server_url,
                "description": settings.server_description,
            },
        ],
        "paths": paths,
    }
