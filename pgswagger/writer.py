"""Serialize the document and write swagger.json / swagger.yml.

Both texts are rendered and staged as temp files in the output directory
before either is moved into place; a failed run removes everything it wrote.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import SerializationError

logger = logging.getLogger(__name__)

JSON_NAME = "swagger.json"
YAML_NAME = "swagger.yml"


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that never emits anchors or aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def to_json(document: dict[str, Any]) -> str:
    """Render the document as 2-space indented JSON."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def to_yaml(document: dict[str, Any]) -> str:
    """Render the document as block-style YAML in key order."""
    return yaml.dump(
        document,
        Dumper=_NoAliasDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def write_documents(document: dict[str, Any], output_dir: Path) -> tuple[Path, Path]:
    """Write swagger.json and swagger.yml into output_dir."""
    try:
        rendered = [
            (output_dir / JSON_NAME, to_json(document)),
            (output_dir / YAML_NAME, to_yaml(document)),
        ]
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise SerializationError(f"cannot serialize document: {exc}") from exc

    staged: list[tuple[Path, Path]] = []
    try:
        for path, text in rendered:
            tmp = path.with_name(f".{path.name}.tmp")
            staged.append((tmp, path))
            tmp.write_text(text, encoding="utf-8")
            logger.debug("staged %s (%d bytes)", tmp, len(text))
    except OSError as exc:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise SerializationError(f"cannot write {staged[-1][1]}: {exc}") from exc

    replaced: list[Path] = []
    try:
        for tmp, target in staged:
            os.replace(tmp, target)
            replaced.append(target)
    except OSError as exc:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        for done in replaced:
            done.unlink(missing_ok=True)
        raise SerializationError(f"cannot replace {target}: {exc}") from exc

    return replaced[0], replaced[1]
