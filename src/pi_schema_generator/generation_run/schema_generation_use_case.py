"""Schema generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pi_schema_generator.schema_export import SchemaError, to_json_schema, write_schema

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot write one of its documents."""


def generate_schemas(
    request: GenerationRequest,
    *,
    on_written: Callable[[Path], None] | None = None,
) -> GenerationOutcome:
    """Normalize and write every requested schema document, in catalog order.

    Documents written before a failure stay on disk; the run stops at the
    first document that cannot be produced.
    """
    written: list[Path] = []
    for target in request.targets:
        try:
            document = to_json_schema(target.definition, target.title, target.description)
            path = write_schema(request.output_dir, target.filename, document)
        except SchemaError as exc:
            raise GenerationError(f"Cannot build {target.filename}: {exc}") from exc
        except OSError as exc:
            raise GenerationError(f"Cannot write {target.filename}: {exc}") from exc
        logger.info("Generated %s schema at %s", target.name, path)
        written.append(path)
        if on_written is not None:
            on_written(path)

    return GenerationOutcome(output_dir=Path(request.output_dir), written_paths=tuple(written))
