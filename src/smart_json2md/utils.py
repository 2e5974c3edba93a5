"""Utility functions shared across smart_json2md modules."""

import json
from typing import Any


def json_kind(value: Any) -> str:
    """Classify a Python value as one of the JSON value kinds.

    Args:
        value: A value produced by a JSON parser.

    Returns:
        One of: "object", "array", "string", "number", "boolean", "null"

    Raises:
        TypeError: If the value cannot come from a JSON document.
    """
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    raise TypeError(f"Unsupported JSON value of type {type(value).__name__}")


def scalar_text(value: Any) -> str:
    """Return the Markdown text form of a scalar JSON value.

    Args:
        value: A string, number, boolean or None.

    Returns:
        The text form: strings as is, "true"/"false", "null", and numbers
        without a trailing ".0" when they are integral.
    """
    kind = json_kind(value)
    if kind == "null":
        return "null"
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "number" and isinstance(value, float) and value.is_integer():
        if abs(value) < 1e21:
            return str(int(value))
    return str(value)


def inline_text(value: Any) -> str:
    """Return a single-line text form of any JSON value.

    Objects and arrays are serialized as compact JSON; scalars use
    scalar_text.
    """
    if json_kind(value) in ("object", "array"):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return scalar_text(value)
