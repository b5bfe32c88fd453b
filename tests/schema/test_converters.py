"""Tests for the default converter table, overlays and fragment lookup."""

from __future__ import annotations

import logging
import re
from enum import Enum

import pytest

from valschema.metadata import ConstraintType
from valschema.schema.converters import DEFAULT_CONVERTERS, lookup_fragment, resolve_converters
from valschema.schema.types import ObjectRef


class Level(Enum):
    LOW = 1
    HIGH = 2


class TestResolveConverters:
    def test_overlay_replaces_only_its_keys(self) -> None:
        table = {"a": {"type": "string"}, "b": {"type": "number"}}
        effective = resolve_converters(table, {"a": {"type": "integer"}})
        assert effective == {"a": {"type": "integer"}, "b": {"type": "number"}}

    def test_overlay_only_keys_added(self) -> None:
        effective = resolve_converters({"a": {}}, {"custom": {"x-custom": True}})
        assert set(effective) == {"a", "custom"}

    def test_inputs_not_mutated(self) -> None:
        table = {"a": {"type": "string"}}
        overlay = {"a": {"type": "integer"}}
        resolve_converters(table, overlay)
        assert table == {"a": {"type": "string"}}
        assert overlay == {"a": {"type": "integer"}}

    def test_none_overlay_copies(self) -> None:
        effective = resolve_converters(DEFAULT_CONVERTERS)
        assert effective == dict(DEFAULT_CONVERTERS)
        assert effective is not DEFAULT_CONVERTERS

    def test_default_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_CONVERTERS["is_string"] = {}  # type: ignore[index]


class TestLookupFragment:
    def test_static_fragment(self) -> None:
        assert lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.IS_STRING) == {"type": "string"}

    def test_static_fragment_is_a_copy(self) -> None:
        fragment = lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.IS_DEFINED)
        fragment["not"]["type"] = "changed"
        assert DEFAULT_CONVERTERS[ConstraintType.IS_DEFINED] == {"not": {"type": "null"}}

    def test_function_receives_arguments(self) -> None:
        seen: list[tuple] = []

        def conv(args: tuple) -> dict:
            seen.append(args)
            return {"maxLength": args[0] + 1}

        assert lookup_fragment({"max_length": conv}, "max_length", (20,)) == {"maxLength": 21}
        assert seen == [(20,)]

    def test_unknown_constraint_is_noop(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="valschema.schema.converters"):
            assert lookup_fragment(DEFAULT_CONVERTERS, "is_optional") is None
        assert "is_optional" in caplog.text

    def test_function_returning_none(self) -> None:
        assert lookup_fragment({"x": lambda args: None}, "x") is None


class TestDefaultConverters:
    @pytest.mark.parametrize(
        ("ctype", "args", "expected"),
        [
            (ConstraintType.MAX_LENGTH, (20,), {"maxLength": 20, "type": "string"}),
            (ConstraintType.MIN_LENGTH, (2,), {"minLength": 2, "type": "string"}),
            (ConstraintType.LENGTH, (2, 5), {"minLength": 2, "maxLength": 5, "type": "string"}),
            (ConstraintType.LENGTH, (2, None), {"minLength": 2, "type": "string"}),
            (ConstraintType.MIN, (0,), {"minimum": 0, "type": "number"}),
            (ConstraintType.IS_IN, (["a", "b"],), {"enum": ["a", "b"]}),
            (ConstraintType.EQUALS, ("x",), {"enum": ["x"]}),
            (ConstraintType.IS_IP, (4,), {"format": "ipv4", "type": "string"}),
            (ConstraintType.ARRAY_MAX_SIZE, (3,), {"maxItems": 3, "type": "array"}),
            (ConstraintType.CUSTOM_SCHEMA, ({"description": "d"},), {"description": "d"}),
        ],
    )
    def test_parameterized_fragments(self, ctype: str, args: tuple, expected: dict) -> None:
        assert lookup_fragment(DEFAULT_CONVERTERS, ctype, args) == expected

    def test_matches_accepts_compiled_pattern(self) -> None:
        fragment = lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.MATCHES, (re.compile(r"^\d+$"),))
        assert fragment == {"pattern": r"^\d+$", "type": "string"}

    def test_enum_values(self) -> None:
        fragment = lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.IS_ENUM, (Level,))
        assert fragment == {"enum": [1, 2], "type": "number"}

    def test_nested_yields_placeholder(self) -> None:
        fragment = lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.NESTED_VALIDATION, ("User",))
        assert fragment == {"$ref": ObjectRef("User")}

    def test_nested_without_target(self) -> None:
        assert lookup_fragment(DEFAULT_CONVERTERS, ConstraintType.NESTED_VALIDATION, ()) == {"type": "object"}

    def test_presence_markers_have_no_converter(self) -> None:
        assert ConstraintType.IS_OPTIONAL not in DEFAULT_CONVERTERS
        assert ConstraintType.CONDITIONAL_VALIDATION not in DEFAULT_CONVERTERS
