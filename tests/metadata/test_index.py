"""Tests for grouping constraint records by class and property."""

import pytest

from valschema.errors import ErrorCodes, InvalidMetadataError
from valschema.metadata import ConstraintRecord, index_metadata


def rec(cls: str, prop: str, ctype: str = "is_string", *args: object, each: bool = False) -> ConstraintRecord:
    return ConstraintRecord(cls, prop, ctype, tuple(args), each)


class TestGrouping:
    def test_empty(self) -> None:
        assert index_metadata([]) == {}

    def test_groups_by_class_then_property(self) -> None:
        records = [
            rec("User", "id"),
            rec("Post", "title"),
            rec("User", "email", "is_email"),
            rec("User", "id", "is_defined"),
        ]
        index = index_metadata(records)
        assert list(index) == ["User", "Post"]
        assert list(index["User"]) == ["id", "email"]
        assert [r.constraint_type for r in index["User"]["id"]] == ["is_string", "is_defined"]

    def test_record_identity_preserved(self) -> None:
        record = rec("User", "tags", "max_length", 20, each=True)
        index = index_metadata([record])
        assert index["User"]["tags"][0] is record

    def test_accepts_generator(self) -> None:
        index = index_metadata(rec("A", f"p{i}") for i in range(3))
        assert list(index["A"]) == ["p0", "p1", "p2"]


class TestInvalid:
    @pytest.mark.parametrize("cls", ["", None])
    def test_missing_class(self, cls: object) -> None:
        with pytest.raises(InvalidMetadataError) as exc_info:
            index_metadata([rec("User", "id"), ConstraintRecord(cls, "id", "is_string")])  # type: ignore[arg-type]
        assert exc_info.value.code == ErrorCodes.INVALID_METADATA
        assert exc_info.value.property_name == "id"

    @pytest.mark.parametrize("prop", ["", None])
    def test_missing_property(self, prop: object) -> None:
        with pytest.raises(InvalidMetadataError) as exc_info:
            index_metadata([ConstraintRecord("User", prop, "is_string")])  # type: ignore[arg-type]
        assert exc_info.value.class_name == "User"
