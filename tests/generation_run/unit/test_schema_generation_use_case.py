"""Schema generation use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pi_schema_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    generate_schemas,
)
from pi_schema_generator.schema_catalog import SchemaTarget, select_schema_targets


def test_generates_every_document_in_catalog_order(tmp_path: Path) -> None:
    announced: list[Path] = []

    outcome = generate_schemas(GenerationRequest(output_dir=tmp_path), on_written=announced.append)

    assert [path.name for path in outcome.written_paths] == [
        "settings.schema.json",
        "models.schema.json",
        "auth.schema.json",
    ]
    assert list(outcome.written_paths) == announced
    assert outcome.output_dir == tmp_path
    for path in outcome.written_paths:
        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["$schema"] == "http://json-schema.org/draft-07/schema#"


def test_second_run_produces_byte_identical_output(tmp_path: Path) -> None:
    first = generate_schemas(GenerationRequest(output_dir=tmp_path / "first"))
    second = generate_schemas(GenerationRequest(output_dir=tmp_path / "second"))

    for first_path, second_path in zip(first.written_paths, second.written_paths, strict=True):
        assert first_path.read_bytes() == second_path.read_bytes()


def test_rerun_into_same_directory_leaves_files_unchanged(tmp_path: Path) -> None:
    first = generate_schemas(GenerationRequest(output_dir=tmp_path))
    before = [path.read_bytes() for path in first.written_paths]

    second = generate_schemas(GenerationRequest(output_dir=tmp_path))

    assert [path.read_bytes() for path in second.written_paths] == before


def test_generates_only_requested_targets(tmp_path: Path) -> None:
    outcome = generate_schemas(
        GenerationRequest(output_dir=tmp_path, targets=select_schema_targets(("auth",)))
    )

    assert [path.name for path in outcome.written_paths] == ["auth.schema.json"]
    assert sorted(path.name for path in tmp_path.iterdir()) == ["auth.schema.json"]


def test_filesystem_failure_stops_run_and_keeps_earlier_documents(tmp_path: Path) -> None:
    (tmp_path / "models.schema.json").mkdir()

    with pytest.raises(GenerationError, match="Cannot write models.schema.json") as excinfo:
        generate_schemas(GenerationRequest(output_dir=tmp_path))

    assert isinstance(excinfo.value.__cause__, OSError)
    assert (tmp_path / "settings.schema.json").is_file()
    assert not (tmp_path / "auth.schema.json").exists()


def test_malformed_definition_is_reported_with_its_file_name(tmp_path: Path) -> None:
    broken = SchemaTarget(
        name="broken",
        filename="broken.schema.json",
        definition=["not", "a", "mapping"],  # type: ignore[arg-type]
        title="Broken",
        description="Broken",
    )

    with pytest.raises(GenerationError, match="Cannot build broken.schema.json"):
        generate_schemas(GenerationRequest(output_dir=tmp_path, targets=(broken,)))
