"""Schema writer tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pi_schema_generator.schema_export.schema_writer import render_schema, write_schema


def test_render_schema_uses_tabs_and_trailing_newline() -> None:
    text = render_schema({"type": "object", "properties": {"a": {"type": "string"}}})

    assert text == (
        '{\n\t"type": "object",\n\t"properties": {\n\t\t"a": {\n\t\t\t"type": "string"\n'
        "\t\t}\n\t}\n}\n"
    )


def test_render_schema_keeps_non_ascii_text() -> None:
    text = render_schema({"description": "Größe"})

    assert "Größe" in text


def test_write_schema_creates_missing_nested_directories(tmp_path: Path) -> None:
    output_dir = tmp_path / "a" / "b" / "c"

    written = write_schema(output_dir, "x.schema.json", {"type": "object"})

    assert written == (output_dir / "x.schema.json").resolve()
    assert written.read_text(encoding="utf-8") == render_schema({"type": "object"})


def test_write_schema_overwrites_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "x.schema.json"
    destination.write_text("stale", encoding="utf-8")

    write_schema(tmp_path, "x.schema.json", {"type": "string"})

    assert destination.read_text(encoding="utf-8") == render_schema({"type": "string"})


def test_write_schema_propagates_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(OSError):
        write_schema(blocker / "schemas", "x.schema.json", {"type": "object"})


def test_write_schema_keeps_lf_line_endings(tmp_path: Path) -> None:
    written = write_schema(tmp_path, "x.schema.json", {"type": "object", "title": "X"})

    raw = written.read_bytes()
    assert b"\r\n" not in raw
    assert raw.endswith(b"}\n")
    assert raw.count(b"\n") == 4
