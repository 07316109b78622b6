"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "pi-schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for pi-schema-generator.
# Every key is optional; remove a key to fall back to its default.

# Directory receiving the schema documents.
# Relative paths resolve against the directory holding this file.
output_dir: "schemas/pi-agent"

# Schema documents to generate (settings, models, auth).
# Documents are always written in that order.
documents:
  - settings
  - models
  - auth
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration listing every supported key with its default."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
