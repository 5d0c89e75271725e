"""Schema definitions: the closed set of semantic field types.

A schema is an ordered ``dict[str, FieldType]``. Order only matters for
column ordering downstream (exports, DataFrames); it carries no generation
semantics.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping


class FieldType(str, Enum):
    """Semantic type tag of a schema field."""

    TEXT = "text"
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    LIST = "list"
    MAP = "map"


SchemaSpec = dict[str, FieldType]

_TAG_ALIASES: dict[str, FieldType] = {
    "text": FieldType.TEXT,
    "string": FieldType.TEXT,
    "str": FieldType.TEXT,
    "integer": FieldType.INTEGER,
    "int": FieldType.INTEGER,
    "real": FieldType.REAL,
    "float": FieldType.REAL,
    "double": FieldType.REAL,
    "boolean": FieldType.BOOLEAN,
    "bool": FieldType.BOOLEAN,
    "timestamp": FieldType.TIMESTAMP,
    "datetime": FieldType.TIMESTAMP,
    "date": FieldType.TIMESTAMP,
    "list": FieldType.LIST,
    "array": FieldType.LIST,
    "map": FieldType.MAP,
    "dict": FieldType.MAP,
    "object": FieldType.MAP,
}

_PYTHON_TYPES: dict[type, FieldType] = {
    str: FieldType.TEXT,
    int: FieldType.INTEGER,
    float: FieldType.REAL,
    bool: FieldType.BOOLEAN,
    datetime: FieldType.TIMESTAMP,
    date: FieldType.TIMESTAMP,
    list: FieldType.LIST,
    dict: FieldType.MAP,
}


def to_field_type(tag: Any) -> FieldType:
    """Resolve a tag (enum member, tag string or Python type) to a :class:`FieldType`.

    Raises
    ------
    ValueError
        If the tag is not one of the supported spellings.
    """
    if isinstance(tag, FieldType):
        return tag
    if isinstance(tag, str):
        resolved = _TAG_ALIASES.get(tag.strip().lower())
        if resolved is not None:
            return resolved
    elif isinstance(tag, type) and tag in _PYTHON_TYPES:
        return _PYTHON_TYPES[tag]
    raise ValueError(f"Unsupported field type tag: {tag!r}")


def parse_schema(mapping: Mapping[str, Any]) -> SchemaSpec:
    """Build an ordered schema from a mapping of field name to type tag."""
    if not isinstance(mapping, Mapping):
        raise TypeError(f"Schema must be a mapping, got {type(mapping).__name__}")

    schema: SchemaSpec = {}
    for name, tag in mapping.items():
        if not isinstance(name, str) or not name:
            raise ValueError(f"Schema field names must be non-empty strings: {name!r}")
        schema[name] = to_field_type(tag)
    return schema


def matches_type(value: Any, field_type: FieldType) -> bool:
    """Return True if ``value``'s runtime type matches ``field_type``."""
    if field_type is FieldType.TEXT:
        return isinstance(value, str)
    if field_type is FieldType.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if field_type is FieldType.REAL:
        return isinstance(value, float)
    if field_type is FieldType.BOOLEAN:
        return isinstance(value, bool)
    if field_type is FieldType.TIMESTAMP:
        return isinstance(value, datetime)
    if field_type is FieldType.LIST:
        return isinstance(value, list)
    if field_type is FieldType.MAP:
        return isinstance(value, dict)
    return False
