"""Per-class schema assembly from indexed constraint records."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Mapping

from valschema.metadata.index import MetadataIndex
from valschema.metadata.types import (
    NON_VALIDATING,
    OPTIONAL_MARKERS,
    ClassSchemaExtra,
    ConstraintRecord,
    ConstraintType,
)
from valschema.options import ResolveOptions
from valschema.schema.converters import lookup_fragment
from valschema.schema.types import BuildResult, ConverterTable, ObjectRef

logger = logging.getLogger(__name__)

__all__ = ["build_schemas", "build_property_schema", "is_required"]


def build_property_schema(
    records: Iterable[ConstraintRecord], effective: ConverterTable
) -> dict[str, Any]:
    """Merge the fragments of one property's constraints in declaration order.

    Later fragments overwrite earlier ones key by key. Fragments of
    element-wise constraints are merged separately and end up under
    ``items`` of an array schema.
    """
    schema: dict[str, Any] = {}
    items: dict[str, Any] | None = None
    for record in records:
        fragment = lookup_fragment(effective, record.constraint_type, record.arguments)
        if fragment is None:
            continue
        if record.each:
            if items is None:
                items = {}
            items.update(fragment)
        else:
            schema.update(fragment)
    if items is not None:
        schema["type"] = "array"
        schema["items"] = items
    return schema


def is_required(records: Iterable[ConstraintRecord], skip_missing_properties: bool = False) -> bool:
    """Whether a property belongs in its class's ``required`` list.

    An explicit ``is_defined`` always counts. Otherwise, unless missing
    properties are skipped, any validating constraint implies presence as
    long as no optional marker is present.
    """
    types = {record.constraint_type for record in records}
    if ConstraintType.IS_DEFINED in types:
        return True
    if skip_missing_properties or types & OPTIONAL_MARKERS:
        return False
    return bool(types - NON_VALIDATING)


def build_schemas(
    index: MetadataIndex,
    effective: ConverterTable,
    options: ResolveOptions,
    *,
    class_names: Iterable[str] = (),
    class_schemas: Mapping[str, ClassSchemaExtra] | None = None,
) -> BuildResult:
    """Build one object schema per class.

    Classes listed in ``class_names`` but absent from ``index`` get an empty
    object schema. Class-level extras are merged over the finished schema.
    """
    result = BuildResult()
    ordered = list(index)
    ordered.extend(name for name in class_names if name not in index)

    for class_name in ordered:
        properties_index = index.get(class_name, {})
        properties: dict[str, Any] = {}
        required: list[str] = []
        for property_name, records in properties_index.items():
            properties[property_name] = build_property_schema(records, effective)
            if is_required(records, options.skip_missing_properties):
                required.append(property_name)

        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required

        extra = (class_schemas or {}).get(class_name)
        if extra is not None:
            resolved = extra(copy.deepcopy(schema)) if callable(extra) else extra
            schema.update(copy.deepcopy(dict(resolved)))

        result.schemas[class_name] = schema
        result.references[class_name] = _collect_references(properties)
        logger.debug(
            "Built schema for '%s': %d properties, %d required",
            class_name, len(properties), len(required),
        )
    return result


def _collect_references(node: Any, found: list[str] | None = None) -> list[str]:
    """List ObjectRef targets under ``node`` in first-seen order, without duplicates."""
    if found is None:
        found = []
    if isinstance(node, ObjectRef):
        if node.class_name not in found:
            found.append(node.class_name)
    elif isinstance(node, dict):
        for value in node.values():
            _collect_references(value, found)
    elif isinstance(node, (list, tuple)):
        for item in node:
            _collect_references(item, found)
    return found
