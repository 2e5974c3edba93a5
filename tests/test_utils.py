"""Tests for utility functions."""

import pytest

from smart_json2md.errors import InvalidOptionError
from smart_json2md.formatters import get_preset, pretty_formatter
from smart_json2md.utils import inline_text, json_kind, scalar_text


@pytest.mark.parametrize(
    "value,expected",
    [
        ({"a": 1}, "object"),
        ([1, 2], "array"),
        ((1, 2), "array"),
        ("text", "string"),
        ("", "string"),
        (42, "number"),
        (3.5, "number"),
        (True, "boolean"),
        (False, "boolean"),
        (None, "null"),
    ],
)
def test_json_kind(value: object, expected: str) -> None:
    """Test classification of JSON values."""
    assert json_kind(value) == expected


def test_json_kind_rejects_non_json_values() -> None:
    """Test values that cannot come from a JSON document are rejected."""
    with pytest.raises(TypeError):
        json_kind({1, 2})


@pytest.mark.parametrize(
    "value,expected",
    [
        ("John", "John"),
        (30, "30"),
        (30.0, "30"),
        (-2.0, "-2"),
        (2.5, "2.5"),
        (1e22, "1e+22"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
    ],
)
def test_scalar_text(value: object, expected: str) -> None:
    """Test text forms of scalar values."""
    assert scalar_text(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ({"a": 1, "b": [True, None]}, '{"a":1,"b":[true,null]}'),
        ([1, "x"], '[1,"x"]'),
        ({"name": "café"}, '{"name":"café"}'),
        ("plain", "plain"),
        (None, "null"),
    ],
)
def test_inline_text(value: object, expected: str) -> None:
    """Test single-line text forms of any JSON value."""
    assert inline_text(value) == expected


def test_pretty_formatter() -> None:
    """Test pretty formatting of scalars and arrays."""
    assert pretty_formatter("world", "hello", 1) == "world\n"
    assert pretty_formatter(True, "flag", 1) == "true\n"
    assert pretty_formatter(["a", {"x": 1}], "items", 2) == (
        '- a\n\n- {\n  "x": 1\n}\n'
    )


def test_get_preset() -> None:
    """Test preset lookup by name."""
    assert get_preset("pretty") is pretty_formatter
    with pytest.raises(InvalidOptionError, match="Unknown value formatter preset"):
        get_preset("fancy")
