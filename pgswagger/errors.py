"""Error types raised by the generator stages.

Every stage raises a subclass of PgSwaggerError; the entry point reports it
once and exits non-zero.
"""

from __future__ import annotations


class PgSwaggerError(Exception):
    """Base class for all generator failures."""


class ConfigError(PgSwaggerError):
    """The db-uri could not be located in the config file."""


class CatalogConnectionError(PgSwaggerError, ConnectionError):
    """A catalog connection could not be established or was lost."""


class CatalogQueryError(PgSwaggerError):
    """A listing or introspection query failed."""


class SerializationError(PgSwaggerError):
    """An output artifact could not be rendered or written."""
