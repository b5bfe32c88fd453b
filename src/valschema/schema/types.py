"""Schema-side data structures shared by the builder and the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

__all__ = [
    "ObjectRef",
    "ConverterEntry",
    "ConverterTable",
    "BuildResult",
]

ConverterEntry = Union[Mapping[str, Any], Callable[[tuple[Any, ...]], Union[Mapping[str, Any], None]]]
ConverterTable = Mapping[str, ConverterEntry]


@dataclass(frozen=True)
class ObjectRef:
    """Placeholder for a pointer to another class's schema.

    Sits as the value of a ``$ref`` key until the resolver turns it into
    ``ref_pointer_prefix + class_name``.
    """

    class_name: str


@dataclass
class BuildResult:
    """Per-class schemas that may still contain ObjectRef placeholders.

    Attributes:
        schemas: Class name to class schema, in first-seen order.
        references: Class name to referenced class names, in first-seen order.
    """

    schemas: dict[str, dict[str, Any]] = field(default_factory=dict)
    references: dict[str, list[str]] = field(default_factory=dict)
