"""Configuration settings and utilities for JSON to Markdown rendering."""

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from rapidfuzz import process

from smart_json2md import errors, formatters

ValueFormatter = Callable[[Any, str, int], str]

OVERFLOW_MODES = ("list", "clamp")

_OPTION_ALIASES = {
    "minHeadingLevel": "min_heading_level",
    "maxHeadingLevel": "max_heading_level",
    "includeTypes": "include_types",
    "processArrayObjects": "process_array_objects",
    "useOrderedLists": "use_ordered_lists",
    "valueFormatter": "value_formatter",
    "maxDepth": "max_depth",
}

_INT_OPTIONS = ("min_heading_level", "max_heading_level", "max_depth")
_BOOL_OPTIONS = ("include_types", "process_array_objects", "use_ordered_lists")
_STR_OPTIONS = ("overflow", "indent")


def get_logger(name: str) -> logging.Logger:
    """Returns a configured logger for the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured Logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def _check_heading_level(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 6:
        raise errors.InvalidOptionError(
            f"{name} must be an integer between 1 and 6, got {value!r}",
            option=name,
        )


@dataclasses.dataclass(frozen=True)
class RenderOptions:
    """Configuration for JSON to Markdown rendering.

    Attributes:
        min_heading_level: Smallest heading level ever emitted (1-6).
        max_heading_level: Deepest heading level (1-6). Keys nested deeper
            switch to list items, or stay clamped at this level when
            overflow is "clamp".
        include_types: Emit an italic type annotation before each scalar.
        process_array_objects: Render arrays whose first element is an object
            as labeled entries instead of a flat list.
        use_ordered_lists: Use numbered markers in list mode.
        value_formatter: Optional callable (value, key, depth) -> str that
            replaces the default rendering of scalars and arrays.
        overflow: "list" to switch to nested lists beyond max_heading_level,
            "clamp" to keep emitting headings at max_heading_level.
        max_depth: Maximum nesting depth, counted from the root keys.
        indent: Indent unit for nested list items.
    """

    min_heading_level: int = 1
    max_heading_level: int = 6
    include_types: bool = False
    process_array_objects: bool = True
    use_ordered_lists: bool = False
    value_formatter: ValueFormatter | None = None
    overflow: str = "list"
    max_depth: int = 100
    indent: str = "  "

    def __post_init__(self) -> None:
        """Validates option values before any rendering happens."""
        _check_heading_level("min_heading_level", self.min_heading_level)
        _check_heading_level("max_heading_level", self.max_heading_level)
        if self.min_heading_level > self.max_heading_level:
            raise errors.InvalidOptionError(
                f"min_heading_level ({self.min_heading_level}) cannot exceed "
                f"max_heading_level ({self.max_heading_level})",
                option="min_heading_level",
            )
        if self.overflow not in OVERFLOW_MODES:
            raise errors.InvalidOptionError(
                f"overflow must be one of {', '.join(OVERFLOW_MODES)}, "
                f"got {self.overflow!r}",
                option="overflow",
            )
        if (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise errors.InvalidOptionError(
                f"max_depth must be a positive integer, got {self.max_depth!r}",
                option="max_depth",
            )
        if self.value_formatter is not None and not callable(self.value_formatter):
            raise errors.InvalidOptionError(
                "value_formatter must be callable", option="value_formatter"
            )

    @classmethod
    def from_dict(cls, options_dict: dict[str, Any]) -> "RenderOptions":
        """Create RenderOptions from a dictionary with custom parameters.

        Args:
            options_dict: Dictionary with option values. Keys may be the field
                names (e.g. "max_heading_level") or their camelCase forms
                (e.g. "maxHeadingLevel"). None values fall back to defaults.
                "value_formatter" accepts a callable or a preset name such as
                "pretty".

        Returns:
            RenderOptions instance with custom parameters merged with defaults.

        Raises:
            InvalidOptionError: If the merged options are invalid.
        """
        logger = get_logger(__name__)
        valid_params = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}

        for raw_key, value in options_dict.items():
            key = _OPTION_ALIASES.get(raw_key, raw_key)
            if key not in valid_params:
                known = sorted(valid_params | set(_OPTION_ALIASES))
                suggestion = process.extractOne(raw_key, known, score_cutoff=70)
                hint = f" Did you mean '{suggestion[0]}'?" if suggestion else ""
                logger.warning(
                    f"Unknown render option will be ignored: '{raw_key}'.{hint}"
                )
                continue
            if value is None:
                continue

            if key in _INT_OPTIONS:
                if isinstance(value, str) and value.strip().lstrip("-").isdigit():
                    value = int(value)
                if isinstance(value, int) and not isinstance(value, bool):
                    kwargs[key] = value
                    continue
            elif key in _BOOL_OPTIONS:
                if isinstance(value, bool):
                    kwargs[key] = value
                    continue
            elif key in _STR_OPTIONS:
                if isinstance(value, str):
                    kwargs[key] = value
                    continue
            elif key == "value_formatter":
                if isinstance(value, str):
                    kwargs[key] = formatters.get_preset(value)
                    continue
                if callable(value):
                    kwargs[key] = value
                    continue

            logger.warning(
                f"Ignoring render option '{raw_key}' with unsupported value "
                f"{value!r}"
            )

        return cls(**kwargs)


def as_render_options(
    options: RenderOptions | dict[str, Any] | None,
) -> RenderOptions:
    """Normalizes the accepted option forms into a RenderOptions instance."""
    if options is None:
        return RenderOptions()
    if isinstance(options, dict):
        return RenderOptions.from_dict(options)
    return options
