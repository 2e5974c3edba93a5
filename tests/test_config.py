"""Tests for render option parsing and validation."""

import logging

import pytest

from smart_json2md import formatters
from smart_json2md.config import RenderOptions, as_render_options
from smart_json2md.errors import InvalidOptionError


def test_default_options() -> None:
    """Test default option values."""
    options = RenderOptions()

    assert options.min_heading_level == 1
    assert options.max_heading_level == 6
    assert options.include_types is False
    assert options.process_array_objects is True
    assert options.use_ordered_lists is False
    assert options.value_formatter is None
    assert options.overflow == "list"


@pytest.mark.parametrize(
    "kwargs,option",
    [
        ({"min_heading_level": 0}, "min_heading_level"),
        ({"max_heading_level": 7}, "max_heading_level"),
        ({"min_heading_level": 4, "max_heading_level": 3}, "min_heading_level"),
        ({"max_heading_level": True}, "max_heading_level"),
        ({"overflow": "wrap"}, "overflow"),
        ({"max_depth": 0}, "max_depth"),
        ({"value_formatter": "pretty"}, "value_formatter"),
    ],
)
def test_invalid_options_fail_fast(kwargs: dict[str, object], option: str) -> None:
    """Test invalid options are rejected when constructed."""
    with pytest.raises(InvalidOptionError) as exc_info:
        RenderOptions(**kwargs)

    assert exc_info.value.option == option


def test_from_dict_accepts_camel_case_and_snake_case() -> None:
    """Test both key styles map to the same fields."""
    options = RenderOptions.from_dict(
        {
            "minHeadingLevel": 2,
            "max_heading_level": "4",
            "includeTypes": True,
            "processArrayObjects": False,
            "useOrderedLists": True,
            "overflow": "clamp",
        }
    )

    assert options == RenderOptions(
        min_heading_level=2,
        max_heading_level=4,
        include_types=True,
        process_array_objects=False,
        use_ordered_lists=True,
        overflow="clamp",
    )


def test_from_dict_ignores_none_values() -> None:
    """Test None values fall back to defaults."""
    options = RenderOptions.from_dict(
        {"minHeadingLevel": None, "maxHeadingLevel": None, "includeTypes": None}
    )

    assert options == RenderOptions()


def test_from_dict_resolves_formatter_preset() -> None:
    """Test formatter preset names are resolved."""
    options = RenderOptions.from_dict({"valueFormatter": "pretty"})

    assert options.value_formatter is formatters.pretty_formatter


def test_from_dict_validates_merged_options() -> None:
    """Test invalid merged values raise InvalidOptionError."""
    with pytest.raises(InvalidOptionError):
        RenderOptions.from_dict({"minHeadingLevel": 5, "maxHeadingLevel": 2})


def test_from_dict_warns_about_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Test unknown keys are ignored with a suggestion."""
    with caplog.at_level(logging.WARNING, logger="smart_json2md.config"):
        options = RenderOptions.from_dict({"maxHeadingLevle": 2})

    assert options == RenderOptions()
    assert "Unknown render option will be ignored: 'maxHeadingLevle'" in caplog.text
    assert "Did you mean 'maxHeadingLevel'?" in caplog.text


def test_from_dict_ignores_values_of_wrong_type(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test values of an unsupported type are skipped with a warning."""
    with caplog.at_level(logging.WARNING, logger="smart_json2md.config"):
        options = RenderOptions.from_dict({"includeTypes": "yes"})

    assert options.include_types is False
    assert "Ignoring render option 'includeTypes'" in caplog.text


def test_as_render_options() -> None:
    """Test the accepted option forms."""
    options = RenderOptions(max_heading_level=2)

    assert as_render_options(None) == RenderOptions()
    assert as_render_options(options) is options
    assert as_render_options({"maxHeadingLevel": 2}) == options
