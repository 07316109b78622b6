"""Schema document serialization to disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

JSON_INDENT = "\t"

logger = logging.getLogger(__name__)


def render_schema(document: Mapping[str, Any]) -> str:
    """Serialize ``document`` as tab-indented JSON with a trailing newline."""
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_schema(output_dir: Path | str, filename: str, document: Mapping[str, Any]) -> Path:
    """Write ``document`` to ``output_dir / filename``, replacing any existing file.

    Args:
      output_dir: Directory receiving the document; created with its parents when missing.
      filename: File name relative to ``output_dir``.
      document: Normalized schema document.

    Returns:
      The resolved path of the written file.

    Raises:
      OSError: If the directory cannot be created or the file cannot be written.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    destination = directory / filename
    destination.write_text(render_schema(document), encoding="utf-8", newline="\n")
    logger.debug("Wrote %s", destination)
    return destination.resolve()
