"""Ordered catalog of the schema documents produced by a generation run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pi_schema_generator.schema_building import freeze

from .auth_schema import AUTH_STORAGE_SCHEMA
from .models_schema import MODELS_CONFIG_SCHEMA
from .settings_schema import SETTINGS_SCHEMA


class SchemaCatalogError(Exception):
    """Raised when a requested schema document is not part of the catalog."""


@dataclass(frozen=True)
class SchemaTarget:
    """One schema document: its read-only definition, output file name and fallback metadata."""

    name: str
    filename: str
    definition: Mapping[str, Any]
    title: str
    description: str

    @property
    def schema_id(self) -> str | None:
        schema_id = self.definition.get("$id")
        return schema_id if isinstance(schema_id, str) else None


SCHEMA_TARGETS: tuple[SchemaTarget, ...] = (
    SchemaTarget(
        name="settings",
        filename="settings.schema.json",
        definition=freeze(SETTINGS_SCHEMA),
        title="Pi Coding Agent Settings",
        description="Configuration file for pi coding agent",
    ),
    SchemaTarget(
        name="models",
        filename="models.schema.json",
        definition=freeze(MODELS_CONFIG_SCHEMA),
        title="Pi Coding Agent Models Configuration",
        description="Custom models and provider configuration",
    ),
    SchemaTarget(
        name="auth",
        filename="auth.schema.json",
        definition=freeze(AUTH_STORAGE_SCHEMA),
        title="Pi Coding Agent Auth Storage",
        description="Credential storage for API keys and OAuth tokens",
    ),
)

SCHEMA_TARGET_NAMES: tuple[str, ...] = tuple(target.name for target in SCHEMA_TARGETS)


def get_schema_target(name: str) -> SchemaTarget:
    """Return the catalog entry called ``name``."""
    for target in SCHEMA_TARGETS:
        if target.name == name:
            return target
    raise SchemaCatalogError(
        f"Unknown schema document '{name}'. Expected one of: {', '.join(SCHEMA_TARGET_NAMES)}"
    )


def select_schema_targets(names: tuple[str, ...] | None = None) -> tuple[SchemaTarget, ...]:
    """Return the requested targets in catalog order; all targets when ``names`` is None."""
    if names is None:
        return SCHEMA_TARGETS
    requested = {get_schema_target(name).name for name in names}
    return tuple(target for target in SCHEMA_TARGETS if target.name in requested)
