"""Constraint-to-fragment converter table and overlay handling."""

from __future__ import annotations

import copy
import enum
import logging
import re
from types import MappingProxyType
from typing import Any, Mapping

from valschema.metadata.types import ConstraintType as CT
from valschema.schema.types import ConverterTable, ObjectRef

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_CONVERTERS", "resolve_converters", "lookup_fragment"]


def _enum_values(enum_type: Any) -> list[Any]:
    if isinstance(enum_type, type) and issubclass(enum_type, enum.Enum):
        return [member.value for member in enum_type]
    if isinstance(enum_type, Mapping):
        return list(enum_type.values())
    return list(enum_type)


def _enum_type(values: list[Any]) -> dict[str, Any]:
    if values and all(isinstance(v, str) for v in values):
        return {"type": "string"}
    if values and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        return {"type": "number"}
    return {}


def _pattern(value: Any) -> str:
    return value.pattern if isinstance(value, re.Pattern) else str(value)


def _ip(args: tuple[Any, ...]) -> dict[str, Any]:
    version = str(args[0]) if args and args[0] is not None else None
    if version in ("4", "6"):
        return {"format": f"ipv{version}", "type": "string"}
    return {"anyOf": [{"format": "ipv4"}, {"format": "ipv6"}], "type": "string"}


def _length(args: tuple[Any, ...]) -> dict[str, Any]:
    fragment: dict[str, Any] = {"minLength": args[0], "type": "string"}
    if len(args) > 1 and args[1] is not None:
        fragment["maxLength"] = args[1]
    return fragment


def _nested(args: tuple[Any, ...]) -> dict[str, Any]:
    if not args:
        return {"type": "object"}
    return {"$ref": ObjectRef(args[0])}


_DEFAULTS: dict[str, Any] = {
    CT.IS_DEFINED: {"not": {"type": "null"}},
    CT.NESTED_VALIDATION: _nested,
    CT.CUSTOM_SCHEMA: lambda args: args[0],
    # Common
    CT.EQUALS: lambda args: {"enum": [args[0]]},
    CT.NOT_EQUALS: lambda args: {"not": {"enum": [args[0]]}},
    CT.IS_IN: lambda args: {"enum": list(args[0])},
    CT.IS_NOT_IN: lambda args: {"not": {"enum": list(args[0])}},
    CT.IS_NOT_EMPTY: {"anyOf": [{"type": "string", "minLength": 1}, {"not": {"type": "string"}}]},
    # Types
    CT.IS_STRING: {"type": "string"},
    CT.IS_INT: {"type": "integer"},
    CT.IS_NUMBER: {"type": "number"},
    CT.IS_BOOLEAN: {"type": "boolean"},
    CT.IS_DATE: {"oneOf": [{"format": "date", "type": "string"}, {"format": "date-time", "type": "string"}]},
    CT.IS_ARRAY: {"items": {}, "type": "array"},
    CT.IS_ENUM: lambda args: {"enum": _enum_values(args[0]), **_enum_type(_enum_values(args[0]))},
    # String formats
    CT.IS_EMAIL: {"format": "email", "type": "string"},
    CT.IS_URL: {"format": "uri", "type": "string"},
    CT.IS_UUID: {"format": "uuid", "type": "string"},
    CT.IS_IP: _ip,
    CT.IS_ISO8601: {"format": "date-time", "type": "string"},
    # String length and pattern
    CT.MIN_LENGTH: lambda args: {"minLength": args[0], "type": "string"},
    CT.MAX_LENGTH: lambda args: {"maxLength": args[0], "type": "string"},
    CT.LENGTH: _length,
    CT.MATCHES: lambda args: {"pattern": _pattern(args[0]), "type": "string"},
    # Numbers
    CT.MIN: lambda args: {"minimum": args[0], "type": "number"},
    CT.MAX: lambda args: {"maximum": args[0], "type": "number"},
    CT.IS_POSITIVE: {"exclusiveMinimum": 0, "type": "number"},
    CT.IS_NEGATIVE: {"exclusiveMaximum": 0, "type": "number"},
    CT.IS_DIVISIBLE_BY: lambda args: {"multipleOf": args[0], "type": "number"},
    # Arrays
    CT.ARRAY_MIN_SIZE: lambda args: {"minItems": args[0], "type": "array"},
    CT.ARRAY_MAX_SIZE: lambda args: {"maxItems": args[0], "type": "array"},
    CT.ARRAY_NOT_EMPTY: {"minItems": 1, "type": "array"},
    CT.ARRAY_UNIQUE: {"type": "array", "uniqueItems": True},
}

DEFAULT_CONVERTERS: ConverterTable = MappingProxyType(_DEFAULTS)


def resolve_converters(
    table: ConverterTable, overlay: ConverterTable | None = None
) -> dict[str, Any]:
    """Return a new table with ``overlay`` entries replacing those of ``table``.

    Keys only in ``table`` are kept, keys only in ``overlay`` are added.
    Neither input is modified.
    """
    effective = dict(table)
    if overlay:
        effective.update(overlay)
    return effective


def lookup_fragment(
    effective: ConverterTable, constraint_type: str, arguments: tuple[Any, ...] = ()
) -> dict[str, Any] | None:
    """Produce the schema fragment for one constraint.

    Returns None when no converter is registered for ``constraint_type`` or
    when a converter function produces nothing.
    """
    entry = effective.get(constraint_type)
    if entry is None:
        logger.debug("No converter for constraint '%s', skipping", constraint_type)
        return None
    if callable(entry):
        fragment = entry(tuple(arguments))
        if fragment is None:
            return None
    else:
        fragment = entry
    return copy.deepcopy(dict(fragment))
