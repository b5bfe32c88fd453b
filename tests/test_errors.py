"""Tests for the valschema error hierarchy."""

from __future__ import annotations

import pytest

from valschema.errors import (
    ConfigError,
    ConfigNotFoundError,
    DanglingReferenceError,
    DuplicateClassError,
    ErrorCodes,
    InvalidMetadataError,
    ValschemaError,
)


class TestValschemaError:
    def test_str_includes_code(self) -> None:
        err = ValschemaError(code="X", message="boom")
        assert str(err) == "[X] boom"
        assert err.details == {}
        assert err.timestamp

    def test_cause_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigError(message="outer", cause=cause)
        assert err.cause is cause


class TestSubclasses:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigNotFoundError(config_path="/x.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError(message="bad"), ErrorCodes.CONFIG_INVALID),
            (InvalidMetadataError(message="bad", class_name="User"), ErrorCodes.INVALID_METADATA),
            (DuplicateClassError(class_name="User"), ErrorCodes.DUPLICATE_CLASS),
            (DanglingReferenceError(class_name="User"), ErrorCodes.DANGLING_REFERENCE),
        ],
    )
    def test_codes(self, error: ValschemaError, code: str) -> None:
        assert isinstance(error, ValschemaError)
        assert error.code == code

    def test_dangling_message_names_referrer(self) -> None:
        err = DanglingReferenceError(class_name="User", referenced_by="Post")
        assert "Post" in err.message
        assert err.details == {"class_name": "User", "referenced_by": "Post"}

    def test_duplicate_is_invalid_metadata(self) -> None:
        err = DuplicateClassError(class_name="User")
        assert isinstance(err, InvalidMetadataError)
        assert err.class_name == "User"
        assert err.property_name is None


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().DANGLING_REFERENCE = "other"
