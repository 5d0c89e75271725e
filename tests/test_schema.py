"""Tests for schema tags and runtime type matching."""

from datetime import date, datetime

import pytest

from context_synth.core.schema import FieldType, matches_type, parse_schema, to_field_type


class TestToFieldType:
    """Tag resolution from enum members, strings and Python types."""

    def test_enum_member_passes_through(self):
        assert to_field_type(FieldType.MAP) is FieldType.MAP

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("text", FieldType.TEXT),
            ("String", FieldType.TEXT),
            ("int", FieldType.INTEGER),
            ("double", FieldType.REAL),
            ("bool", FieldType.BOOLEAN),
            ("datetime", FieldType.TIMESTAMP),
            ("array", FieldType.LIST),
            ("object", FieldType.MAP),
        ],
    )
    def test_string_aliases(self, tag, expected):
        assert to_field_type(tag) is expected

    @pytest.mark.parametrize(
        "tag, expected",
        [
            (str, FieldType.TEXT),
            (int, FieldType.INTEGER),
            (float, FieldType.REAL),
            (bool, FieldType.BOOLEAN),
            (datetime, FieldType.TIMESTAMP),
            (date, FieldType.TIMESTAMP),
            (list, FieldType.LIST),
            (dict, FieldType.MAP),
        ],
    )
    def test_python_types(self, tag, expected):
        assert to_field_type(tag) is expected

    def test_unsupported_tag_raises(self):
        with pytest.raises(ValueError, match="Unsupported"):
            to_field_type("uuid")
        with pytest.raises(ValueError):
            to_field_type(bytes)


def test_parse_schema_preserves_order():
    schema = parse_schema({"z": "text", "a": int, "m": FieldType.REAL})
    assert list(schema) == ["z", "a", "m"]
    assert schema == {"z": FieldType.TEXT, "a": FieldType.INTEGER, "m": FieldType.REAL}


def test_parse_schema_rejects_bad_input():
    with pytest.raises(TypeError):
        parse_schema([("name", "text")])
    with pytest.raises(ValueError):
        parse_schema({"": "text"})


def test_matches_type_distinguishes_bool_from_int():
    assert matches_type(3, FieldType.INTEGER)
    assert not matches_type(True, FieldType.INTEGER)
    assert matches_type(True, FieldType.BOOLEAN)
    assert not matches_type(3, FieldType.REAL)
    assert matches_type(datetime(2024, 1, 1), FieldType.TIMESTAMP)
    assert matches_type({}, FieldType.MAP)
    assert not matches_type(None, FieldType.TEXT)
