"""Grouping of flat constraint records by declaring class and property."""

from __future__ import annotations

from typing import Iterable

from valschema.errors import InvalidMetadataError
from valschema.metadata.types import ConstraintRecord

__all__ = ["MetadataIndex", "index_metadata"]

MetadataIndex = dict[str, dict[str, list[ConstraintRecord]]]


def index_metadata(records: Iterable[ConstraintRecord]) -> MetadataIndex:
    """Group records by class name, then property name.

    Classes, properties and the records under each property keep their
    first-seen order; record order is the later fragment-merge order.

    Raises:
        InvalidMetadataError: If a record has no usable class or property name.
    """
    index: MetadataIndex = {}
    for record in records:
        class_name = record.declaring_class
        property_name = record.property_name
        if not isinstance(class_name, str) or not class_name:
            raise InvalidMetadataError(
                message=f"Constraint '{record.constraint_type}' has no declaring class name",
                class_name=class_name,
                property_name=property_name,
            )
        if not isinstance(property_name, str) or not property_name:
            raise InvalidMetadataError(
                message=f"Constraint '{record.constraint_type}' on '{class_name}' has no property name",
                class_name=class_name,
                property_name=property_name,
            )
        index.setdefault(class_name, {}).setdefault(property_name, []).append(record)
    return index
