"""Replacement of ObjectRef placeholders with pointers or inlined definitions."""

from __future__ import annotations

import copy
import logging
from collections import deque
from typing import Any

from valschema.errors import DanglingReferenceError
from valschema.options import ResolveOptions
from valschema.schema.types import BuildResult, ObjectRef

logger = logging.getLogger(__name__)

__all__ = ["resolve_references", "resolve_root", "definitions_path"]

_FALLBACK_BLOCK = "definitions"


def definitions_path(ref_pointer_prefix: str) -> list[str]:
    """Location of the definitions block implied by a pointer prefix.

    ``#/definitions/`` gives ``["definitions"]`` and ``#/components/schemas/``
    gives ``["components", "schemas"]``. A prefix without any segment falls
    back to ``["definitions"]``.
    """
    segments = [s for s in ref_pointer_prefix.lstrip("#").split("/") if s]
    return segments or [_FALLBACK_BLOCK]


def _substitute(node: Any, prefix: str) -> Any:
    """Return a copy of ``node`` with every ObjectRef turned into a pointer string."""
    if isinstance(node, ObjectRef):
        return prefix + node.class_name
    if isinstance(node, dict):
        return {key: _substitute(value, prefix) for key, value in node.items()}
    if isinstance(node, list):
        return [_substitute(item, prefix) for item in node]
    if isinstance(node, tuple):
        return tuple(_substitute(item, prefix) for item in node)
    return copy.deepcopy(node)


def resolve_root(result: BuildResult, root: str, options: ResolveOptions) -> dict[str, Any]:
    """Emit ``root``'s schema with every class it reaches in a definitions block.

    The walk is breadth-first over the reference graph. The visited set is
    seeded with the root, so cycles terminate and each reachable class is
    materialized exactly once; the root itself never enters the block.

    Raises:
        DanglingReferenceError: If ``root`` or a reachable class has no schema.
    """
    if root not in result.schemas:
        raise DanglingReferenceError(class_name=root)

    prefix = options.ref_pointer_prefix
    definitions: dict[str, Any] = {}
    visited: set[str] = {root}
    queue: deque[tuple[str, str]] = deque(
        (target, root) for target in result.references.get(root, [])
    )
    while queue:
        name, referenced_by = queue.popleft()
        if name in visited:
            continue
        visited.add(name)
        if name not in result.schemas:
            raise DanglingReferenceError(class_name=name, referenced_by=referenced_by)
        definitions[name] = _substitute(result.schemas[name], prefix)
        queue.extend((target, name) for target in result.references.get(name, []))

    document = _substitute(result.schemas[root], prefix)
    if definitions:
        block = document
        path = definitions_path(prefix)
        for segment in path[:-1]:
            block = block.setdefault(segment, {})
        block[path[-1]] = definitions
    logger.debug("Resolved '%s' with %d definitions", root, len(definitions))
    return document


def resolve_references(result: BuildResult, options: ResolveOptions) -> dict[str, dict[str, Any]]:
    """Turn builder output into the final class name to schema mapping.

    Without ``resolve_references`` every placeholder becomes a bare pointer,
    and targets are not checked. With it, each class is emitted by
    :func:`resolve_root`.
    """
    if options.resolve_references:
        return {name: resolve_root(result, name, options) for name in result.schemas}

    output: dict[str, dict[str, Any]] = {}
    for name, schema in result.schemas.items():
        for target in result.references.get(name, []):
            if target not in result.schemas:
                logger.debug("'%s' points at '%s', which has no schema", name, target)
        output[name] = _substitute(schema, options.ref_pointer_prefix)
    return output
