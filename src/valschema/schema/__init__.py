"""valschema schema engine -- converters, builder, resolver, and export.

Example usage::

    from valschema.schema import DEFAULT_CONVERTERS, resolve_converters
    from valschema.schema import build_schemas, resolve_references
"""

from __future__ import annotations

from valschema.schema.builder import build_property_schema, build_schemas, is_required
from valschema.schema.converters import DEFAULT_CONVERTERS, lookup_fragment, resolve_converters
from valschema.schema.export import export_schemas
from valschema.schema.resolver import definitions_path, resolve_references, resolve_root
from valschema.schema.types import BuildResult, ConverterEntry, ConverterTable, ObjectRef

__all__ = [
    "ObjectRef",
    "BuildResult",
    "ConverterEntry",
    "ConverterTable",
    "DEFAULT_CONVERTERS",
    "resolve_converters",
    "lookup_fragment",
    "build_schemas",
    "build_property_schema",
    "is_required",
    "resolve_references",
    "resolve_root",
    "definitions_path",
    "export_schemas",
]
