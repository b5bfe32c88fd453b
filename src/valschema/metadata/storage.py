"""Class registration and constraint collection from ``Annotated`` type hints."""

from __future__ import annotations

import logging
import threading
import types
import typing
from collections.abc import Collection, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Union, get_args, get_origin

from valschema.errors import DuplicateClassError, InvalidMetadataError
from valschema.metadata.types import (
    ClassSchemaExtra,
    Constraint,
    ConstraintRecord,
    ConstraintType,
    MetadataSnapshot,
)

logger = logging.getLogger(__name__)

__all__ = ["MetadataStorage", "default_storage", "validated"]


def _unwrap_optional(hint: Any) -> Any:
    """Strip ``None`` from ``Optional[X]`` / ``X | None``."""
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(hint) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return hint


def _nested_target(hint: Any, each: bool) -> str | None:
    """Infer the class a ``validate_nested`` marker points at from the bare type hint."""
    hint = _unwrap_optional(hint)
    if each:
        origin = get_origin(hint)
        args = get_args(hint)
        if isinstance(origin, type) and issubclass(origin, Collection) and args:
            # Mappings validate their values, sequences and sets their items.
            element = args[-1] if issubclass(origin, Mapping) else args[0]
            hint = _unwrap_optional(element)
    if isinstance(hint, type) and hint.__module__ not in ("builtins", "typing"):
        return hint.__name__
    return None


class MetadataStorage:
    """Registry of classes whose ``Annotated`` properties carry constraints.

    Records are collected when a snapshot is taken rather than at
    registration, so classes may reference classes defined after them.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}
        self._class_schemas: dict[str, ClassSchemaExtra] = {}
        self._lock = threading.RLock()

    def register(self, cls: type, schema: ClassSchemaExtra | None = None) -> type:
        """Register a class, optionally with class-level schema extras.

        Raises:
            DuplicateClassError: If a different class is already registered
                under the same name.
        """
        name = cls.__name__
        with self._lock:
            existing = self._classes.get(name)
            if existing is not None and existing is not cls:
                raise DuplicateClassError(class_name=name)
            self._classes[name] = cls
            if schema is not None:
                self._class_schemas[name] = schema
        logger.debug("Registered class '%s'", name)
        return cls

    def unregister(self, cls_or_name: type | str) -> None:
        name = cls_or_name if isinstance(cls_or_name, str) else cls_or_name.__name__
        with self._lock:
            self._classes.pop(name, None)
            self._class_schemas.pop(name, None)

    def clear(self) -> None:
        with self._lock:
            self._classes.clear()
            self._class_schemas.clear()

    @property
    def class_names(self) -> list[str]:
        with self._lock:
            return list(self._classes)

    def __contains__(self, cls_or_name: object) -> bool:
        name = cls_or_name.__name__ if isinstance(cls_or_name, type) else cls_or_name
        with self._lock:
            return name in self._classes

    def snapshot(self) -> MetadataSnapshot:
        """Collect constraint records for every registered class.

        Raises:
            InvalidMetadataError: If a class's type hints cannot be resolved.
        """
        with self._lock:
            classes = list(self._classes.items())
            class_schemas = dict(self._class_schemas)

        records: list[ConstraintRecord] = []
        for name, cls in classes:
            records.extend(self._collect(name, cls))

        return MetadataSnapshot(
            records=tuple(records),
            class_names=tuple(name for name, _ in classes),
            class_schemas=MappingProxyType(class_schemas),
        )

    def _collect(self, name: str, cls: type) -> list[ConstraintRecord]:
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except NameError as exc:
            raise InvalidMetadataError(
                message=f"Cannot resolve type hints of class '{name}': {exc}",
                class_name=name,
                cause=exc,
            ) from exc

        records: list[ConstraintRecord] = []
        for prop, hint in hints.items():
            if get_origin(hint) is not Annotated:
                continue
            base, *extras = get_args(hint)
            for marker in extras:
                if not isinstance(marker, Constraint):
                    continue
                arguments = marker.arguments
                if marker.constraint_type == ConstraintType.NESTED_VALIDATION:
                    arguments = self._nested_arguments(name, prop, base, marker)
                records.append(
                    ConstraintRecord(
                        declaring_class=name,
                        property_name=prop,
                        constraint_type=marker.constraint_type,
                        arguments=arguments,
                        each=marker.each,
                    )
                )
        return records

    @staticmethod
    def _nested_arguments(name: str, prop: str, base: Any, marker: Constraint) -> tuple[Any, ...]:
        if marker.arguments:
            target = marker.arguments[0]
            return (target if isinstance(target, str) else target.__name__,)
        target_name = _nested_target(base, marker.each)
        if target_name is None:
            logger.warning(
                "Cannot infer nested class for '%s.%s' from %r; emitting a plain object schema",
                name, prop, base,
            )
            return ()
        return (target_name,)


_default_storage = MetadataStorage()


def default_storage() -> MetadataStorage:
    """Return the process-wide storage used when no explicit storage is given."""
    return _default_storage


def validated(
    cls_or_none: type | None = None,
    /,
    *,
    schema: ClassSchemaExtra | None = None,
    storage: MetadataStorage | None = None,
) -> Any:
    """Register a class so its constrained properties are converted to a schema.

    Works bare (``@validated``) and with arguments
    (``@validated(schema={...}, storage=...)``).
    """
    target_storage = storage if storage is not None else _default_storage

    def _wrap(cls: type) -> type:
        return target_storage.register(cls, schema=schema)

    if cls_or_none is not None:
        return _wrap(cls_or_none)

    def decorator(cls: type) -> type:
        return _wrap(cls)

    return decorator
