"""Conversion entry points: constraint metadata in, JSON Schemas out."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from valschema.errors import DanglingReferenceError
from valschema.metadata.index import index_metadata
from valschema.metadata.storage import MetadataStorage, default_storage
from valschema.metadata.types import ConstraintRecord, MetadataSnapshot
from valschema.options import ResolveOptions
from valschema.schema.builder import build_schemas
from valschema.schema.converters import DEFAULT_CONVERTERS, resolve_converters
from valschema.schema.resolver import resolve_references, resolve_root
from valschema.schema.types import BuildResult

logger = logging.getLogger(__name__)

__all__ = ["validation_metadata_to_schemas", "target_to_schema"]

MetadataSource = Union[MetadataStorage, MetadataSnapshot, Iterable[ConstraintRecord], None]
OptionsSource = Union[ResolveOptions, Mapping[str, Any], None]


def _snapshot(metadata: MetadataSource) -> MetadataSnapshot:
    if metadata is None:
        return default_storage().snapshot()
    if isinstance(metadata, MetadataStorage):
        return metadata.snapshot()
    if isinstance(metadata, MetadataSnapshot):
        return metadata
    return MetadataSnapshot(records=tuple(metadata))


def _build(metadata: MetadataSource, options: ResolveOptions) -> BuildResult:
    snapshot = _snapshot(metadata)
    index = index_metadata(snapshot.records)
    effective = resolve_converters(DEFAULT_CONVERTERS, options.additional_converters)
    return build_schemas(
        index,
        effective,
        options,
        class_names=snapshot.class_names,
        class_schemas=snapshot.class_schemas,
    )


def validation_metadata_to_schemas(
    metadata: MetadataSource = None,
    options: OptionsSource = None,
    **overrides: Any,
) -> dict[str, dict[str, Any]]:
    """Convert constraint metadata into one JSON Schema per class.

    Args:
        metadata: A storage, a snapshot, or records. Defaults to the process
            default storage.
        options: ResolveOptions or a mapping of option values.
        **overrides: Individual option values applied over ``options``.

    Returns:
        Class name to schema. With ``resolve_references`` each schema also
        carries a definitions block of the classes it reaches.

    Raises:
        InvalidMetadataError: If a record lacks a class or property name.
        DanglingReferenceError: If resolving reaches a class with no schema.
        ConfigError: If the options are invalid.
    """
    resolved_options = ResolveOptions.coerce(options, **overrides)
    result = _build(metadata, resolved_options)
    schemas = resolve_references(result, resolved_options)
    logger.debug("Converted %d classes", len(schemas))
    return schemas


def target_to_schema(
    target: type | str,
    metadata: MetadataSource = None,
    options: OptionsSource = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Convert a single class, given as a class object or its name.

    Raises:
        DanglingReferenceError: If the class, or with ``resolve_references``
            a class it reaches, has no schema.
    """
    name = target if isinstance(target, str) else target.__name__
    resolved_options = ResolveOptions.coerce(options, **overrides)
    result = _build(metadata, resolved_options)
    if name not in result.schemas:
        raise DanglingReferenceError(class_name=name)
    if resolved_options.resolve_references:
        return resolve_root(result, name, resolved_options)
    return resolve_references(result, resolved_options)[name]
