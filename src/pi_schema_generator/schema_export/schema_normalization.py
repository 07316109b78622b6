"""Conversion of schema definitions into standalone JSON Schema documents."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pi_schema_generator.schema_building import INTERNAL_KEY_PREFIX

JSON_SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"

logger = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised when a schema definition cannot be turned into a JSON Schema document."""


def to_json_schema(definition: Any, title: str, description: str) -> dict[str, Any]:
    """Return a normalized copy of ``definition`` ready for serialization.

    The copy declares the Draft 07 dialect, falls back to ``title`` and
    ``description`` when the root does not set them, and carries no internal
    bookkeeping keys at any depth. ``definition`` itself is left untouched.

    Raises:
      SchemaError: If ``definition`` is not a mapping.
    """
    if not isinstance(definition, Mapping):
        raise SchemaError(
            f"Schema definition root must be a mapping, got {type(definition).__name__}."
        )

    document: dict[str, Any] = strip_internal_keys(definition)
    document["$schema"] = JSON_SCHEMA_DIALECT
    if not document.get("title"):
        document["title"] = title
    if not document.get("description"):
        document["description"] = description

    logger.debug("Normalized schema %s", document.get("$id") or document["title"])
    return document


def strip_internal_keys(node: Any) -> Any:
    """Return a copy of ``node`` without internal bookkeeping keys at any depth.

    Mappings come back as ``dict`` and lists or tuples as ``list``, so the
    result serializes the same way the input would.
    """
    if isinstance(node, Mapping):
        return {
            key: strip_internal_keys(value)
            for key, value in node.items()
            if not is_internal_key(key)
        }
    if isinstance(node, (list, tuple)):
        return [strip_internal_keys(item) for item in node]
    return node


def is_internal_key(key: Any) -> bool:
    return isinstance(key, str) and key.startswith(INTERNAL_KEY_PREFIX)
