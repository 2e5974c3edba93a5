"""Service adapter wrapping the converter in a request/response envelope."""

import dataclasses
import json
from typing import Any

from smart_json2md import api, errors, renderer
from smart_json2md import config as _config

logger = _config.get_logger(__name__)

SUCCESS_MESSAGE = "Conversion succeeded"


@dataclasses.dataclass(frozen=True)
class PluginResponse:
    """Response envelope returned to plugin callers.

    Attributes:
        code: 200 on success, 400 for bad input, 500 for rendering failures.
        data: The rendered Markdown, or None on failure.
        message: Human readable outcome.
    """

    code: int
    data: str | None
    message: str

    def to_dict(self) -> dict[str, object]:
        """Returns the response as a plain dictionary."""
        return dataclasses.asdict(self)


def _failure(code: int, message: str) -> dict[str, object]:
    return PluginResponse(code=code, data=None, message=message).to_dict()


def handle_request(request: str | dict[str, Any]) -> dict[str, object]:
    """Handles a conversion request.

    Args:
        request: A JSON-encoded or already decoded request of the form
            {"jsonData": <JSON string or parsed value>, "options": {...}}.
            Options use the camelCase names (e.g. "maxHeadingLevel").

    Returns:
        Dictionary with "code", "data" and "message". Code 400 means the
        request, the JSON data or the options could not be used; code 500
        means rendering failed; code 200 carries the Markdown in "data".
    """
    if isinstance(request, str):
        try:
            request = json.loads(request)
        except json.JSONDecodeError as e:
            logger.error(f"Request is not valid JSON: {e}")
            return _failure(400, f"Unable to parse request: {e}")

    if not isinstance(request, dict) or "jsonData" not in request:
        return _failure(400, "Request must be an object with a 'jsonData' field")

    options = request.get("options") or {}
    if not isinstance(options, dict):
        return _failure(400, "'options' must be an object")

    logger.info(f"Converting JSON to Markdown, options: {json.dumps(options)}")

    json_data = request["jsonData"]
    if isinstance(json_data, str):
        try:
            value = api.parse_json(json_data)
        except errors.InputParseError as e:
            logger.error(f"JSON parsing failed: {e.message}")
            return _failure(400, f"Unable to parse JSON string: {e.message}")
    else:
        value = json_data

    try:
        render_options = _config.RenderOptions.from_dict(options)
    except errors.InvalidOptionError as e:
        logger.error(f"Invalid options: {e.message}")
        return _failure(400, f"Invalid options: {e.message}")

    try:
        markdown = renderer.render(value, render_options)
    except errors.JsonToMarkdownError as e:
        logger.error(f"Conversion failed: {e.message}")
        return _failure(500, f"JSON to Markdown conversion failed: {e.message}")

    logger.info("Conversion succeeded, Markdown document generated")
    return PluginResponse(code=200, data=markdown, message=SUCCESS_MESSAGE).to_dict()
