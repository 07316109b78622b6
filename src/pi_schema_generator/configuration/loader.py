"""Generator configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from pi_schema_generator.schema_catalog import SchemaCatalogError, get_schema_target

from .runtime_settings import GeneratorSettings

_KNOWN_KEYS = frozenset({"output_dir", "documents"})


class ConfigurationError(Exception):
    """Raised when the generator configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> GeneratorSettings:
    """Load generator settings, or return the defaults when no file is given."""
    if config_path is None:
        return GeneratorSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    defaults = GeneratorSettings()
    output_dir = defaults.output_dir
    if parsed.get("output_dir") is not None:
        raw_output_dir = _require_non_empty_string(parsed["output_dir"], "output_dir")
        output_dir = _resolve_path(path.parent, raw_output_dir)

    documents = _parse_documents(parsed.get("documents"))
    return GeneratorSettings(output_dir=output_dir, documents=documents, path=path)


def _parse_documents(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("documents must be a list of schema document names.")
    names: list[str] = []
    for item in value:
        name = _require_non_empty_string(item, "documents entry")
        try:
            get_schema_target(name)
        except SchemaCatalogError as exc:
            raise ConfigurationError(str(exc)) from exc
        if name not in names:
            names.append(name)
    if not names:
        raise ConfigurationError("documents must name at least one schema document.")
    return tuple(names)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
