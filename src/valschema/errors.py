"""Error hierarchy for valschema."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ValschemaError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidMetadataError",
    "DuplicateClassError",
    "DanglingReferenceError",
    "ErrorCodes",
]


class ValschemaError(Exception):
    """Base error for all valschema errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ValschemaError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ValschemaError):
    """Raised when configuration or conversion options are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidMetadataError(ValschemaError):
    """Raised when a constraint record lacks a usable class or property name."""

    def __init__(
        self,
        message: str,
        class_name: Any = None,
        property_name: Any = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("code", "INVALID_METADATA")
        super().__init__(
            message=message,
            details={"class_name": class_name, "property_name": property_name},
            **kwargs,
        )

    @property
    def class_name(self) -> Any:
        """The offending declaring class name, if any."""
        return self.details["class_name"]

    @property
    def property_name(self) -> Any:
        """The offending property name, if any."""
        return self.details["property_name"]


class DuplicateClassError(InvalidMetadataError):
    """Raised when two distinct classes are registered under the same name."""

    def __init__(self, class_name: str, **kwargs: Any) -> None:
        super().__init__(
            message=f"A different class is already registered as '{class_name}'",
            class_name=class_name,
            code="DUPLICATE_CLASS",
            **kwargs,
        )


class DanglingReferenceError(ValschemaError):
    """Raised when a referenced class is absent from the metadata snapshot."""

    def __init__(self, class_name: str, referenced_by: str | None = None, **kwargs: Any) -> None:
        if referenced_by is None:
            message = f"Class not found in metadata: {class_name}"
        else:
            message = f"Class '{referenced_by}' references unknown class '{class_name}'"
        super().__init__(
            code="DANGLING_REFERENCE",
            message=message,
            details={"class_name": class_name, "referenced_by": referenced_by},
            **kwargs,
        )

    @property
    def class_name(self) -> str:
        """The class that could not be found."""
        return self.details["class_name"]

    @property
    def referenced_by(self) -> str | None:
        """The class whose property points at the missing class."""
        return self.details["referenced_by"]


class ErrorCodes:
    """All valschema error codes as constants.

    Example:
        if error.code == ErrorCodes.DANGLING_REFERENCE:
            register_missing_class()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_METADATA = "INVALID_METADATA"
    DUPLICATE_CLASS = "DUPLICATE_CLASS"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
