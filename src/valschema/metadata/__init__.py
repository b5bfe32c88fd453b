"""valschema metadata -- constraint markers, class registration, and indexing."""

from __future__ import annotations

from valschema.metadata.index import MetadataIndex, index_metadata
from valschema.metadata.storage import MetadataStorage, default_storage, validated
from valschema.metadata.types import (
    NON_VALIDATING,
    OPTIONAL_MARKERS,
    Constraint,
    ConstraintRecord,
    ConstraintType,
    MetadataSnapshot,
)

__all__ = [
    "Constraint",
    "ConstraintRecord",
    "ConstraintType",
    "MetadataSnapshot",
    "MetadataStorage",
    "MetadataIndex",
    "OPTIONAL_MARKERS",
    "NON_VALIDATING",
    "default_storage",
    "index_metadata",
    "validated",
]
