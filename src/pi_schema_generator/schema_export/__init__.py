"""Schema normalization and writing exports."""

from .schema_normalization import (
    JSON_SCHEMA_DIALECT,
    SchemaError,
    is_internal_key,
    strip_internal_keys,
    to_json_schema,
)
from .schema_writer import render_schema, write_schema

__all__ = [
    "JSON_SCHEMA_DIALECT",
    "SchemaError",
    "is_internal_key",
    "render_schema",
    "strip_internal_keys",
    "to_json_schema",
    "write_schema",
]
