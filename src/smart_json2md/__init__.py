""".. include:: ../../README.md"""  # noqa: D415

from smart_json2md.api import convert_batch_df, convert_file, convert_text
from smart_json2md.config import RenderOptions
from smart_json2md.errors import (
    InputParseError,
    InternalRenderError,
    InvalidOptionError,
    JsonToMarkdownError,
    RecursionLimitError,
)
from smart_json2md.models import ConvertedBatch, ConvertedDocument
from smart_json2md.plugin import handle_request
from smart_json2md.renderer import render

__all__ = [
    "render",
    "convert_text",
    "convert_file",
    "convert_batch_df",
    "handle_request",
    "RenderOptions",
    "ConvertedDocument",
    "ConvertedBatch",
    "JsonToMarkdownError",
    "InputParseError",
    "InvalidOptionError",
    "RecursionLimitError",
    "InternalRenderError",
]
