"""Value formatter presets for the renderer."""

import json
from typing import Any

from smart_json2md import errors, utils


def pretty_formatter(value: Any, key: str, depth: int) -> str:
    """Formats scalars and arrays with extra spacing for readability.

    Arrays become bullet lines separated by blank lines, with objects
    pretty-printed as indented JSON. Every result ends with a newline so
    that the following entry is set apart.

    Args:
        value: The scalar or array value being rendered.
        key: The key the value belongs to.
        depth: The depth of the key.

    Returns:
        The formatted Markdown text.
    """
    if utils.json_kind(value) == "array":
        items = []
        for item in value:
            if utils.json_kind(item) == "object":
                items.append(f"- {json.dumps(item, indent=2, ensure_ascii=False)}")
            else:
                items.append(f"- {utils.inline_text(item)}")
        return "\n\n".join(items) + "\n"
    return f"{utils.scalar_text(value)}\n"


PRESETS = {
    "pretty": pretty_formatter,
}


def get_preset(name: str):
    """Returns the formatter preset registered under the given name.

    Raises:
        InvalidOptionError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise errors.InvalidOptionError(
            f"Unknown value formatter preset '{name}'. "
            f"Available presets: {', '.join(sorted(PRESETS))}",
            option="value_formatter",
        ) from None
