"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pi_schema_generator.schema_catalog import SCHEMA_TARGETS, SchemaTarget


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    output_dir: Path
    targets: tuple[SchemaTarget, ...] = SCHEMA_TARGETS


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_dir: Path
    written_paths: tuple[Path, ...]
