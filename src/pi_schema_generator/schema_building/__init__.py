"""Schema definition builder exports."""

from .schema_nodes import (
    INTERNAL_KEY_PREFIX,
    KIND_KEY,
    OPTIONAL_KEY,
    SchemaBuildError,
    SchemaNode,
    array,
    boolean,
    freeze,
    integer,
    is_optional,
    literal,
    number,
    object_,
    optional,
    record,
    string,
    union,
)

__all__ = [
    "INTERNAL_KEY_PREFIX",
    "KIND_KEY",
    "OPTIONAL_KEY",
    "SchemaBuildError",
    "SchemaNode",
    "array",
    "boolean",
    "freeze",
    "integer",
    "is_optional",
    "literal",
    "number",
    "object_",
    "optional",
    "record",
    "string",
    "union",
]
