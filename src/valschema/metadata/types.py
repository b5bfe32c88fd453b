"""Constraint identifiers and metadata data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

__all__ = [
    "ConstraintType",
    "OPTIONAL_MARKERS",
    "NON_VALIDATING",
    "Constraint",
    "ConstraintRecord",
    "MetadataSnapshot",
    "ClassSchemaExtra",
]

ClassSchemaExtra = Union[Mapping[str, Any], Callable[[dict[str, Any]], Mapping[str, Any]]]


class ConstraintType:
    """Identifiers of the constraints understood by the default converter table."""

    IS_DEFINED = "is_defined"
    IS_OPTIONAL = "is_optional"
    CONDITIONAL_VALIDATION = "validate_if"
    NESTED_VALIDATION = "validate_nested"
    CUSTOM_SCHEMA = "json_schema"

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    IS_IN = "is_in"
    IS_NOT_IN = "is_not_in"
    IS_NOT_EMPTY = "is_not_empty"

    IS_STRING = "is_string"
    IS_INT = "is_int"
    IS_NUMBER = "is_number"
    IS_BOOLEAN = "is_boolean"
    IS_DATE = "is_date"
    IS_ARRAY = "is_array"
    IS_ENUM = "is_enum"

    IS_EMAIL = "is_email"
    IS_URL = "is_url"
    IS_UUID = "is_uuid"
    IS_IP = "is_ip"
    IS_ISO8601 = "is_iso8601"

    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    LENGTH = "length"
    MATCHES = "matches"

    MIN = "min"
    MAX = "max"
    IS_POSITIVE = "is_positive"
    IS_NEGATIVE = "is_negative"
    IS_DIVISIBLE_BY = "is_divisible_by"

    ARRAY_MIN_SIZE = "array_min_size"
    ARRAY_MAX_SIZE = "array_max_size"
    ARRAY_NOT_EMPTY = "array_not_empty"
    ARRAY_UNIQUE = "array_unique"


# Markers that make a property optional unless it is also explicitly defined.
OPTIONAL_MARKERS = frozenset({ConstraintType.IS_OPTIONAL, ConstraintType.CONDITIONAL_VALIDATION})

# Records that only decorate the schema and say nothing about presence.
NON_VALIDATING = frozenset({ConstraintType.CUSTOM_SCHEMA})


@dataclass(frozen=True)
class Constraint:
    """A constraint marker placed in an ``Annotated[...]`` property annotation.

    Attributes:
        constraint_type: Identifier looked up in the converter table.
        arguments: Positional constraint arguments, in declaration order.
        each: Whether the constraint applies to each element of a collection.
    """

    constraint_type: str
    arguments: tuple[Any, ...] = ()
    each: bool = False


@dataclass(frozen=True)
class ConstraintRecord:
    """One constraint use-site, as produced by a metadata provider.

    Attributes:
        declaring_class: Stable, unique name of the class owning the property.
        property_name: Name of the constrained property.
        constraint_type: Identifier looked up in the converter table.
        arguments: Positional constraint arguments, in declaration order.
        each: Whether the constraint applies to each element of a collection.
    """

    declaring_class: str
    property_name: str
    constraint_type: str
    arguments: tuple[Any, ...] = ()
    each: bool = False


@dataclass(frozen=True)
class MetadataSnapshot:
    """An immutable view of everything a provider knows at one point in time."""

    records: tuple[ConstraintRecord, ...] = ()
    class_names: tuple[str, ...] = ()
    class_schemas: Mapping[str, ClassSchemaExtra] = field(default_factory=lambda: MappingProxyType({}))
