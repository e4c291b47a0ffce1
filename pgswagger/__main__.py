"""Entry point: python -m pgswagger

Reads db-uri from postgrest.conf, introspects the public schema, writes
swagger.json and swagger.yml to the working directory.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .catalog import load_catalog
from .document_builder import build_document
from .errors import PgSwaggerError
from .loader import load_db_uri
from .writer import write_documents

logger = logging.getLogger("pgswagger")


def main(conf_path: Path | None = None, output_dir: Path | None = None) -> int:
    """Run every stage once. Returns the process exit status."""
    try:
        db_uri = load_db_uri(conf_path)
        catalog = load_catalog(db_uri)
        document = build_document(catalog)
        json_path, yaml_path = write_documents(document, output_dir or Path.cwd())
    except PgSwaggerError as exc:
        logger.debug("generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated {json_path.name} and {yaml_path.name} ({len(document['paths'])} paths)")
    return 0


def run() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
