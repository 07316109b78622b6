"""Schema catalog exports."""

from .auth_schema import AUTH_SCHEMA_ID, AUTH_STORAGE_SCHEMA
from .catalog import (
    SCHEMA_TARGET_NAMES,
    SCHEMA_TARGETS,
    SchemaCatalogError,
    SchemaTarget,
    get_schema_target,
    select_schema_targets,
)
from .models_schema import MODELS_CONFIG_SCHEMA, MODELS_SCHEMA_ID
from .settings_schema import SETTINGS_SCHEMA, SETTINGS_SCHEMA_ID

__all__ = [
    "AUTH_SCHEMA_ID",
    "AUTH_STORAGE_SCHEMA",
    "MODELS_CONFIG_SCHEMA",
    "MODELS_SCHEMA_ID",
    "SCHEMA_TARGET_NAMES",
    "SCHEMA_TARGETS",
    "SETTINGS_SCHEMA",
    "SETTINGS_SCHEMA_ID",
    "SchemaCatalogError",
    "SchemaTarget",
    "get_schema_target",
    "select_schema_targets",
]
