"""Serialization of converted schemas to JSON or YAML."""

from __future__ import annotations

import json
from typing import Any

import yaml

__all__ = ["export_schemas"]


def export_schemas(schemas: dict[str, Any], format: str = "json", compact: bool = False) -> str:
    """Serialize a class name to schema mapping as a JSON or YAML string.

    ``compact`` drops indentation from JSON output and switches YAML to
    flow style.
    """
    if format == "yaml":
        return yaml.dump(schemas, default_flow_style=compact, sort_keys=False)
    if format != "json":
        raise ValueError(f"Unsupported export format: {format!r}")
    if compact:
        return json.dumps(schemas, separators=(",", ":"))
    return json.dumps(schemas, indent=2)
