"""valschema - JSON Schema generation from class validation constraints."""

from __future__ import annotations

# Conversion
from valschema.convert import target_to_schema, validation_metadata_to_schemas

# Options and config
from valschema.config import Config
from valschema.options import DEFAULT_REF_POINTER_PREFIX, ResolveOptions

# Metadata
from valschema.metadata import (
    Constraint,
    ConstraintRecord,
    ConstraintType,
    MetadataSnapshot,
    MetadataStorage,
    default_storage,
    index_metadata,
    validated,
)

# Schema engine
from valschema.schema import DEFAULT_CONVERTERS, ObjectRef, export_schemas, resolve_converters

# Errors
from valschema.errors import (
    ConfigError,
    ConfigNotFoundError,
    DanglingReferenceError,
    DuplicateClassError,
    ErrorCodes,
    InvalidMetadataError,
    ValschemaError,
)

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "validation_metadata_to_schemas",
    "target_to_schema",
    # Options and config
    "Config",
    "ResolveOptions",
    "DEFAULT_REF_POINTER_PREFIX",
    # Metadata
    "Constraint",
    "ConstraintRecord",
    "ConstraintType",
    "MetadataSnapshot",
    "MetadataStorage",
    "default_storage",
    "index_metadata",
    "validated",
    # Schema engine
    "DEFAULT_CONVERTERS",
    "ObjectRef",
    "resolve_converters",
    "export_schemas",
    # Errors
    "ErrorCodes",
    "ValschemaError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidMetadataError",
    "DuplicateClassError",
    "DanglingReferenceError",
]
