"""Tests for the custom field value union."""

import pytest

from mcp_youtrack.models.youtrack.issue import decode_custom_fields
from mcp_youtrack.models.youtrack.values import (
    BoolValue,
    ListValue,
    NullValue,
    NumberValue,
    ReferenceValue,
    TextValue,
    flatten_field_value,
    parse_field_value,
)
from mcp_youtrack.youtrack.fields import build_custom_field


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, NullValue()),
        (True, BoolValue(True)),
        (0, NumberValue(0)),
        (1.5, NumberValue(1.5)),
        ("x", TextValue("x")),
        ({"name": "a"}, ReferenceValue({"name": "a"})),
        (["x", 1], ListValue((TextValue("x"), NumberValue(1)))),
    ],
)
def test_parse_field_value(raw, expected):
    """Test each JSON shape maps to its variant."""
    assert parse_field_value(raw) == expected


def test_bool_is_not_a_number():
    """Test booleans are parsed before numbers."""
    assert isinstance(parse_field_value(False), BoolValue)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"name": "High", "login": "x"}, "High"),
        ({"login": "jdoe", "fullName": "John Doe"}, "jdoe"),
        ({"fullName": "John Doe", "idReadable": "WEB-1"}, "John Doe"),
        ({"idReadable": "WEB-1"}, "WEB-1"),
        ({"presentation": "1d 2h"}, {"presentation": "1d 2h"}),
        ({"name": None, "login": "jdoe"}, "jdoe"),
        ([{"name": "1.0"}, {"login": "jdoe"}, "raw"], ["1.0", "jdoe", "raw"]),
        (42, 42),
        (None, None),
    ],
)
def test_flatten_field_value(raw, expected):
    """Test references reduce to the first present display key."""
    assert flatten_field_value(parse_field_value(raw)) == expected


def test_string_value_round_trip():
    """Test a string written as a custom field reads back as the same string."""
    entry = build_custom_field("Priority", "Show-stopper")

    assert decode_custom_fields([entry]) == {"Priority": "Show-stopper"}


def test_decode_custom_fields_skips_unnamed_entries():
    """Test entries without a string name are dropped and order is kept."""
    data = [
        {"name": "B", "value": {"name": "b"}},
        {"value": {"name": "orphan"}},
        {"name": 7, "value": "x"},
        "junk",
        {"name": "A", "value": None},
    ]

    result = decode_custom_fields(data)

    assert list(result) == ["B", "A"]
    assert result == {"B": "b", "A": None}


def test_decode_custom_fields_absent():
    """Test a response without a custom field list decodes to None."""
    assert decode_custom_fields(None) is None
