"""Read table and column metadata from the PostgreSQL catalog.

Queries information_schema for the base tables of one schema and the
columns of each, and returns them as a table name -> columns mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import psycopg

from .errors import CatalogConnectionError, CatalogQueryError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "public"

_TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = %s AND table_type = 'BASE TABLE'
    ORDER BY table_name
"""

_COLUMNS_SQL = """
    SELECT column_name, data_type, is_nullable
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
    ORDER BY ordinal_position
"""

# Single statement, single snapshot: a table is either listed with all of
# its columns or not listed at all.
_CATALOG_SQL = """
    SELECT t.table_name, c.column_name, c.data_type, c.is_nullable
    FROM information_schema.tables t
    LEFT JOIN information_schema.columns c
        ON c.table_schema = t.table_schema AND c.table_name = t.table_name
    WHERE t.table_schema = %s AND t.table_type = 'BASE TABLE'
    ORDER BY t.table_name, c.ordinal_position
"""


@dataclass(frozen=True)
class ColumnDescriptor:
    """One column as reported by the catalog."""

    name: str
    declared_type: str
    nullable: bool


TableCatalog = dict[str, list[ColumnDescriptor]]


def _column_from_row(name: str, data_type: str, is_nullable: str) -> ColumnDescriptor:
    return ColumnDescriptor(
        name=name,
        declared_type=data_type,
        nullable=is_nullable == "YES",
    )


def connect(db_uri: str) -> psycopg.Connection:
    """Open a catalog connection for the given URI.

    Autocommit: the catalog reads need no transaction to commit on close.
    """
    try:
        return psycopg.connect(db_uri, autocommit=True)
    except psycopg.Error as exc:
        raise CatalogConnectionError(f"cannot connect to database: {exc}") from exc


class CatalogReader:
    """Introspect the base tables of one schema over an open connection."""

    def __init__(self, conn: psycopg.Connection, schema: str = DEFAULT_SCHEMA) -> None:
        self.conn = conn
        self.schema = schema

    def _fetch(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        logger.debug("catalog query: %s %r", " ".join(sql.split()), params)
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        except (psycopg.OperationalError, psycopg.InterfaceError) as exc:
            raise CatalogConnectionError(f"catalog connection failed: {exc}") from exc
        except psycopg.Error as exc:
            raise CatalogQueryError(f"catalog query failed: {exc}") from exc

    def list_base_tables(self) -> list[str]:
        """Return the names of all base tables in the schema."""
        rows = self._fetch(_TABLES_SQL, (self.schema,))
        return [row[0] for row in rows]

    def list_columns(self, table_name: str) -> list[ColumnDescriptor]:
        """Return the columns of one table in native column order.

        A table with no visible columns yields an empty list.
        """
        rows = self._fetch(_COLUMNS_SQL, (self.schema, table_name))
        return [_column_from_row(*row) for row in rows]

    def read_catalog(self) -> TableCatalog:
        """Return every base table with its columns.

        Uses one batched statement instead of a query per table. A table
        dropped concurrently is omitted entirely; tables without visible
        columns map to an empty list.
        """
        rows = self._fetch(_CATALOG_SQL, (self.schema,))
        catalog: TableCatalog = {}
        for table_name, column_name, data_type, is_nullable in rows:
            columns = catalog.setdefault(table_name, [])
            # LEFT JOIN yields a single all-NULL column row for empty tables
            if column_name is None:
                continue
            columns.append(_column_from_row(column_name, data_type, is_nullable))

        logger.info(
            "Read %d tables from schema %r",
            len(catalog), self.schema,
        )
        return catalog


def load_catalog(db_uri: str, schema: str = DEFAULT_SCHEMA) -> TableCatalog:
    """Connect, read the full catalog and close the connection.

    Failures while closing are reported as CatalogConnectionError too.
    """
    conn = connect(db_uri)
    try:
        with conn:
            return CatalogReader(conn, schema).read_catalog()
    except psycopg.Error as exc:
        raise CatalogConnectionError(f"catalog connection failed: {exc}") from exc
