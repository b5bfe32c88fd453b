"""Constraint marker factories for use inside ``typing.Annotated``.

Example usage::

    class User:
        id: Annotated[str, is_defined(), is_string()]
        email: Annotated[str, is_email()]
        tags: Annotated[list[str], is_optional(), max_length(20, each=True)]
"""

from __future__ import annotations

import re
from typing import Any

from valschema.metadata.types import Constraint, ConstraintType

__all__ = [
    "is_defined",
    "is_optional",
    "validate_if",
    "validate_nested",
    "json_schema",
    "equals",
    "not_equals",
    "is_in",
    "is_not_in",
    "is_not_empty",
    "is_string",
    "is_int",
    "is_number",
    "is_boolean",
    "is_date",
    "is_array",
    "is_enum",
    "is_email",
    "is_url",
    "is_uuid",
    "is_ip",
    "is_iso8601",
    "min_length",
    "max_length",
    "length",
    "matches",
    "min",
    "max",
    "is_positive",
    "is_negative",
    "is_divisible_by",
    "array_min_size",
    "array_max_size",
    "array_not_empty",
    "array_unique",
]


# ----- Presence and structure -----


def is_defined(*, each: bool = False) -> Constraint:
    """Value must not be None; always makes the property required."""
    return Constraint(ConstraintType.IS_DEFINED, each=each)


def is_optional(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_OPTIONAL, each=each)


def validate_if(condition: Any, *, each: bool = False) -> Constraint:
    """Validate only when ``condition`` holds; the property becomes optional."""
    return Constraint(ConstraintType.CONDITIONAL_VALIDATION, (condition,), each=each)


def validate_nested(target: type | str | None = None, *, each: bool = False) -> Constraint:
    """Validate the property as an instance of another registered class.

    The target is inferred from the annotation when omitted.
    """
    args: tuple[Any, ...] = () if target is None else (target,)
    return Constraint(ConstraintType.NESTED_VALIDATION, args, each=each)


def json_schema(fragment: dict[str, Any], *, each: bool = False) -> Constraint:
    """Merge a literal schema fragment into the property schema."""
    return Constraint(ConstraintType.CUSTOM_SCHEMA, (dict(fragment),), each=each)


# ----- Common -----


def equals(value: Any, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.EQUALS, (value,), each=each)


def not_equals(value: Any, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.NOT_EQUALS, (value,), each=each)


def is_in(values: list[Any], *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_IN, (list(values),), each=each)


def is_not_in(values: list[Any], *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_NOT_IN, (list(values),), each=each)


def is_not_empty(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_NOT_EMPTY, each=each)


# ----- Types -----


def is_string(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_STRING, each=each)


def is_int(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_INT, each=each)


def is_number(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_NUMBER, each=each)


def is_boolean(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_BOOLEAN, each=each)


def is_date(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_DATE, each=each)


def is_array(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_ARRAY, each=each)


def is_enum(enum_type: Any, *, each: bool = False) -> Constraint:
    """Value must be one of the members of ``enum_type`` (an Enum or a mapping)."""
    return Constraint(ConstraintType.IS_ENUM, (enum_type,), each=each)


# ----- String formats -----


def is_email(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_EMAIL, each=each)


def is_url(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_URL, each=each)


def is_uuid(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_UUID, each=each)


def is_ip(version: int | None = None, *, each: bool = False) -> Constraint:
    args: tuple[Any, ...] = () if version is None else (version,)
    return Constraint(ConstraintType.IS_IP, args, each=each)


def is_iso8601(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_ISO8601, each=each)


# ----- String length and pattern -----


def min_length(limit: int, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.MIN_LENGTH, (limit,), each=each)


def max_length(limit: int, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.MAX_LENGTH, (limit,), each=each)


def length(minimum: int, maximum: int | None = None, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.LENGTH, (minimum, maximum), each=each)


def matches(pattern: str | re.Pattern[str], *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.MATCHES, (pattern,), each=each)


# ----- Numbers -----


def min(value: float, *, each: bool = False) -> Constraint:  # noqa: A001
    return Constraint(ConstraintType.MIN, (value,), each=each)


def max(value: float, *, each: bool = False) -> Constraint:  # noqa: A001
    return Constraint(ConstraintType.MAX, (value,), each=each)


def is_positive(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_POSITIVE, each=each)


def is_negative(*, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_NEGATIVE, each=each)


def is_divisible_by(divisor: float, *, each: bool = False) -> Constraint:
    return Constraint(ConstraintType.IS_DIVISIBLE_BY, (divisor,), each=each)


# ----- Arrays -----


def array_min_size(size: int) -> Constraint:
    return Constraint(ConstraintType.ARRAY_MIN_SIZE, (size,))


def array_max_size(size: int) -> Constraint:
    return Constraint(ConstraintType.ARRAY_MAX_SIZE, (size,))


def array_not_empty() -> Constraint:
    return Constraint(ConstraintType.ARRAY_NOT_EMPTY)


def array_unique() -> Constraint:
    return Constraint(ConstraintType.ARRAY_UNIQUE)
