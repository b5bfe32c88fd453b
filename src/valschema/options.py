"""Conversion options."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from valschema.config import Config
from valschema.errors import ConfigError

__all__ = ["ResolveOptions", "DEFAULT_REF_POINTER_PREFIX"]

DEFAULT_REF_POINTER_PREFIX = "#/definitions/"

_CONFIG_KEYS = (
    "ref_pointer_prefix",
    "additional_converters",
    "skip_missing_properties",
    "resolve_references",
)


class ResolveOptions(BaseModel):
    """Options controlling a single conversion call.

    Attributes:
        ref_pointer_prefix: Prepended to class names to form ``$ref`` targets.
            With ``resolve_references`` it also names the definitions block.
        additional_converters: Converter entries replacing or extending the
            default table for this call only.
        skip_missing_properties: Only explicitly defined properties are required.
        resolve_references: Emit each class with a definitions block holding
            every class it reaches instead of bare pointers alone.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ref_pointer_prefix: str = DEFAULT_REF_POINTER_PREFIX
    additional_converters: dict[str, Union[dict[str, Any], Callable[..., Any]]] = Field(default_factory=dict)
    skip_missing_properties: bool = False
    resolve_references: bool = False

    @classmethod
    def coerce(
        cls, options: ResolveOptions | Mapping[str, Any] | None = None, **overrides: Any
    ) -> ResolveOptions:
        """Build options from a model, a mapping or None, applying keyword overrides.

        Raises:
            ConfigError: If an option is unknown or has the wrong type.
        """
        if isinstance(options, ResolveOptions):
            if not overrides:
                return options
            values = {name: getattr(options, name) for name in cls.model_fields}
        else:
            values = dict(options or {})
        values.update(overrides)
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid conversion options: {e}", cause=e) from e

    @classmethod
    def from_config(cls, config: Config, **overrides: Any) -> ResolveOptions:
        """Read options from the ``schema.*`` keys of a Config."""
        values: dict[str, Any] = {}
        for key in _CONFIG_KEYS:
            value = config.get(f"schema.{key}")
            if value is not None:
                values[key] = value
        return cls.coerce(values, **overrides)
