"""Load the database URI from postgrest.conf.

Reads the PostgREST config in the working directory and extracts db-uri.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import ConfigError

CONF_NAME = "postgrest.conf"

_DB_URI_RE = re.compile(r'db-uri\s*=\s*"([^"]+)"')


def default_conf_path() -> Path:
    """Return postgrest.conf in the current working directory."""
    return Path.cwd() / CONF_NAME


def parse_db_uri(text: str) -> str:
    """Extract the db-uri value from config text."""
    match = _DB_URI_RE.search(text)
    if not match:
        raise ConfigError("db-uri not found")
    return match.group(1)


def load_db_uri(path: Path | None = None) -> str:
    """Read the config file and return its db-uri."""
    conf_file = path or default_conf_path()
    try:
        text = conf_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ConfigError(f"cannot read {conf_file}: {exc}") from exc
    return parse_db_uri(text)
