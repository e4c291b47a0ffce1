"""Name paths and operations after tables.

  books  -> path "/books", summary "List books"
"""

from __future__ import annotations


def table_path(table_name: str) -> str:
    """Return the OpenAPI path key for a table."""
    return f"/{table_name}"


def operation_summary(table_name: str) -> str:
    """Return the GET operation summary for a table."""
    return f"List {table_name}"
