"""Write resolved registries as JSON files."""

from __future__ import annotations

import json
import shutil
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from specref.domain.identity import Registry

log = getLogger(__name__)

JSON_INDENT = 2


def prepare_output_dir(path: Path) -> Path:
    """Delete ``path`` with everything in it and create it again, empty."""

    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)
    log.info("Output will be saved in %s", path.resolve())
    return path


def render_registry(registry: Registry) -> str:
    return json.dumps(registry.to_document(), indent=JSON_INDENT, ensure_ascii=False)


def write_registry(registry: Registry, path: Path) -> Path:
    """Write ``registry`` to ``path``; an interrupted write leaves no file behind."""

    text = render_registry(registry)
    partial = path.with_name(f".{path.name}.partial")
    try:
        # UTF-8 without a byte order mark
        partial.write_text(text, encoding="utf-8")
        partial.replace(path)
    finally:
        partial.unlink(missing_ok=True)
    log.info("Wrote %s entries and %s aliases to %s", len(registry), len(registry.aliases), path)
    return path
