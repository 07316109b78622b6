"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("schemas") / "pi-agent"


@dataclass(frozen=True)
class GeneratorSettings:
    """Where schema documents are written and which of them are produced."""

    output_dir: Path = DEFAULT_OUTPUT_DIR
    documents: tuple[str, ...] | None = None
    path: Path | None = None
