"""Declarative schema definition builders.

Every builder returns a plain ``dict`` that is already valid JSON Schema apart
from a few bookkeeping keys carrying the reserved ``~`` prefix. Those keys let
the builders track node kinds and optional object properties; they are removed
by :func:`pi_schema_generator.schema_export.to_json_schema` before a document
is written.

Builders never mutate their arguments. Nested schemas are deep-copied into
their parents so a single definition can be reused across several documents;
the copies are plain ``dict`` and ``list`` containers even when the input holds
tuples or read-only views produced by :func:`freeze`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

INTERNAL_KEY_PREFIX = "~"
KIND_KEY = "~kind"
OPTIONAL_KEY = "~optional"

RECORD_KEY_PATTERN = "^(.*)$"

SchemaNode = dict[str, Any]


class SchemaBuildError(Exception):
    """Raised when a schema definition is assembled from invalid parts."""


def string(**options: Any) -> SchemaNode:
    return _node("String", options, {"type": "string"})


def number(**options: Any) -> SchemaNode:
    return _node("Number", options, {"type": "number"})


def integer(**options: Any) -> SchemaNode:
    return _node("Integer", options, {"type": "integer"})


def boolean(**options: Any) -> SchemaNode:
    return _node("Boolean", options, {"type": "boolean"})


def literal(value: str | int | float | bool, **options: Any) -> SchemaNode:
    """Build a single-value schema such as ``{"const": "oauth", "type": "string"}``."""
    return _node("Literal", options, {"const": value, "type": _literal_type(value)})


def union(variants: Sequence[Mapping[str, Any]], **options: Any) -> SchemaNode:
    """Build an ``anyOf`` schema over the given variants."""
    if not variants:
        raise SchemaBuildError("A union requires at least one variant.")
    return _node("Union", options, {"anyOf": [_copy_schema(variant) for variant in variants]})


def array(items: Mapping[str, Any], **options: Any) -> SchemaNode:
    return _node("Array", options, {"type": "array", "items": _copy_schema(items)})


def record(
    key: Mapping[str, Any],
    value: Mapping[str, Any],
    *,
    schema_id: str | None = None,
    **options: Any,
) -> SchemaNode:
    """Build an open mapping from arbitrary string keys to ``value`` schemas."""
    if key.get(KIND_KEY) != "String":
        raise SchemaBuildError(
            f"Record keys must be string schemas, got kind {key.get(KIND_KEY)!r}."
        )
    return _node(
        "Record",
        _with_schema_id(options, schema_id),
        {
            "type": "object",
            "patternProperties": {RECORD_KEY_PATTERN: _copy_schema(value)},
        },
    )


def object_(
    properties: Mapping[str, Mapping[str, Any]],
    *,
    schema_id: str | None = None,
    **options: Any,
) -> SchemaNode:
    """Build an object schema; properties not wrapped in :func:`optional` are required."""
    structure: SchemaNode = {
        "type": "object",
        "properties": {name: _copy_schema(schema) for name, schema in properties.items()},
    }
    required = [name for name, schema in properties.items() if not is_optional(schema)]
    if required:
        structure["required"] = required
    return _node("Object", _with_schema_id(options, schema_id), structure)


def optional(schema: Mapping[str, Any]) -> SchemaNode:
    """Return a copy of ``schema`` marked as an optional object property."""
    marked = _copy_schema(schema)
    marked[OPTIONAL_KEY] = "Optional"
    return marked


def is_optional(schema: Mapping[str, Any]) -> bool:
    return schema.get(OPTIONAL_KEY) == "Optional"


def _node(kind: str, options: Mapping[str, Any], structure: Mapping[str, Any]) -> SchemaNode:
    for name in options:
        if name.startswith(INTERNAL_KEY_PREFIX):
            raise SchemaBuildError(f"Option '{name}' uses the reserved internal key prefix.")
    overlap = set(options) & set(structure)
    if overlap:
        raise SchemaBuildError(
            f"{kind} options must not override structural keys: {', '.join(sorted(overlap))}"
        )
    return {KIND_KEY: kind, **_thaw(dict(options)), **structure}


def _with_schema_id(options: Mapping[str, Any], schema_id: str | None) -> dict[str, Any]:
    if schema_id is None:
        return dict(options)
    return {"$id": schema_id, **options}


def _copy_schema(schema: Mapping[str, Any]) -> SchemaNode:
    if not isinstance(schema, Mapping):
        raise SchemaBuildError(f"Schema nodes must be mappings, got {type(schema).__name__}.")
    thawed: SchemaNode = _thaw(schema)
    return thawed


def _literal_type(value: Any) -> str:
    # bool is checked first because it is an int subclass.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    raise SchemaBuildError(f"Unsupported literal value: {value!r}")


def freeze(schema: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of ``schema``: mappings become proxies, lists become tuples."""
    frozen: Mapping[str, Any] = _freeze_value(schema)
    return frozen


def _freeze_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze_value(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    # Deep copy that also accepts frozen schemas and emits JSON-shaped containers.
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value
