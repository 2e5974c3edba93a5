"""Rendering module for turning JSON values into hierarchical Markdown."""

import re
from typing import Any

from smart_json2md import config as _config
from smart_json2md import errors, models, utils

# Priority order for labeling elements of an array of objects.
IDENTIFIER_FIELDS: tuple[str, ...] = ("title", "name", "id", "key")

_BLANK_RUN = re.compile(r"\n{3,}")


def mode_for(depth: int, options: _config.RenderOptions) -> models.RenderMode:
    """Computes how keys at the given depth are rendered.

    Args:
        depth: The depth of the keys.
        options: The render options.

    Returns:
        HeadingMode with the clamped heading level while depth is within
        max_heading_level (or always, with clamp overflow), else ListMode with
        the number of indent units.
    """
    if depth <= options.max_heading_level or options.overflow == "clamp":
        level = max(options.min_heading_level, min(depth, options.max_heading_level))
        return models.HeadingMode(level=level)
    return models.ListMode(indent_depth=depth - options.max_heading_level - 1)


def find_identifier_field(items: list[Any]) -> str | None:
    """Finds the field used to label the elements of an array of objects.

    Args:
        items: The array elements.

    Returns:
        The first field of IDENTIFIER_FIELDS present in every element, or None
        if the array is empty, holds a non-object, or no field is shared.
    """
    if not items:
        return None
    for field in IDENTIFIER_FIELDS:
        if all(isinstance(item, dict) and field in item for item in items):
            return field
    return None


class MarkdownRenderer:
    """Renders JSON values as Markdown.

    Object keys become headings down to max_heading_level and list items
    below it. All state lives on the call stack, so one renderer can be
    shared between threads.

    Attributes:
        options: The render options.
    """

    def __init__(self, options: _config.RenderOptions) -> None:
        """Initializes the MarkdownRenderer.

        Args:
            options: Render options with heading bounds and value handling.
        """
        self.options = options

    def render(self, value: Any) -> str:
        """Renders a parsed JSON value.

        Args:
            value: The JSON value (dict, list, str, int, float, bool or None).

        Returns:
            The Markdown text, ending with a single newline, or an empty string
            when there is nothing to render.

        Raises:
            RecursionLimitError: If the value nests deeper than max_depth.
            InternalRenderError: On any other failure while rendering.
        """
        try:
            lines = self._render_root(value)
        except errors.JsonToMarkdownError:
            raise
        except RecursionError as e:
            raise errors.RecursionLimitError(
                self.options.max_depth, original_exception=e
            ) from e
        except Exception as e:
            raise errors.InternalRenderError(
                f"Unexpected error while rendering: {e}", original_exception=e
            ) from e

        text = _BLANK_RUN.sub("\n\n", "\n".join(lines)).strip("\n")
        return text + "\n" if text else ""

    def _render_root(self, value: Any) -> list[str]:
        depth = self.options.min_heading_level
        if utils.json_kind(value) == "object":
            return self._render_object(value, depth)
        # Anything else renders as the value of a key one level up.
        fragments, block = self._render_value(value, "", depth - 1)
        return self._heading_body(fragments, block)

    def _check_depth(self, depth: int) -> None:
        if depth - self.options.min_heading_level + 1 > self.options.max_depth:
            raise errors.RecursionLimitError(self.options.max_depth)

    def _render_object(self, obj: dict[str, Any], depth: int) -> list[str]:
        """Renders every key of an object at the given depth."""
        self._check_depth(depth)
        mode = mode_for(depth, self.options)
        entries = [
            self._render_entry(str(key), value, depth, mode, position)
            for position, (key, value) in enumerate(obj.items(), start=1)
        ]
        return self._join_entries(entries, mode)

    def _render_array_of_objects(self, items: list[Any], depth: int) -> list[str]:
        """Renders array elements as labeled entries at the given depth.

        Elements are labeled with the shared identifier field when there is
        one, with the rest of their fields nested beneath. Otherwise they are
        labeled "Item <n>" and rendered whole.
        """
        self._check_depth(depth)
        mode = mode_for(depth, self.options)
        field = find_identifier_field(items)

        entries: list[list[str]] = []
        for position, item in enumerate(items, start=1):
            if field is None:
                entries.append(
                    self._render_entry(f"Item {position}", item, depth, mode, position)
                )
                continue

            remainder = {k: v for k, v in item.items() if k != field}
            entries.append(
                self._render_entry(
                    utils.inline_text(item[field]),
                    remainder,
                    depth,
                    mode,
                    position,
                    omit_value=not remainder,
                )
            )

        return self._join_entries(entries, mode)

    def _render_entry(
        self,
        label: str,
        value: Any,
        depth: int,
        mode: models.RenderMode,
        position: int,
        omit_value: bool = False,
    ) -> list[str]:
        """Renders a labeled entry and its value.

        Args:
            label: The key or element label.
            value: The value rendered under the label.
            depth: The depth of the label.
            mode: The render mode for this depth.
            position: 1-based position among sibling entries.
            omit_value: Emit only the label line.

        Returns:
            The lines of the entry.
        """
        fragments: list[str] = []
        block: list[str] = []
        if not omit_value:
            fragments, block = self._render_value(value, label, depth)

        if isinstance(mode, models.HeadingMode):
            lines = [f"{'#' * mode.level} {label}"]
            body = self._heading_body(fragments, block)
            if body:
                lines += [""] + body
            return lines

        marker = f"{position}. " if self.options.use_ordered_lists else "- "
        head = f"{self.options.indent * mode.indent_depth}{marker}**{label}**:"
        if not fragments:
            return [head] + block

        first, *rest = " ".join(fragments).split("\n")
        continuation = self.options.indent * (mode.indent_depth + 1)
        lines = [f"{head} {first}"]
        lines += [f"{continuation}{line}" if line else "" for line in rest]
        return lines + block

    def _render_value(
        self, value: Any, key: str, depth: int
    ) -> tuple[list[str], list[str]]:
        """Renders the value of a key at the given depth.

        Returns:
            A tuple of (fragments, block). Fragments are leaf texts that go on
            their own lines in heading mode and after the colon in list mode.
            Block holds nested lines that are already fully indented.
        """
        kind = utils.json_kind(value)

        if kind == "null":
            return ["null"], []
        if kind == "object":
            return [], self._render_object(value, depth + 1)
        if self.options.value_formatter is not None:
            return [self.options.value_formatter(value, key, depth)], []
        if kind == "array":
            if (
                self.options.process_array_objects
                and value
                and isinstance(value[0], dict)
            ):
                return [], self._render_array_of_objects(value, depth + 1)
            return [], self._render_flat_array(value, depth)

        fragments = []
        if self.options.include_types:
            fragments.append(f"*Type: {kind}*")
        fragments.append(utils.scalar_text(value))
        return fragments, []

    def _render_flat_array(self, items: list[Any], depth: int) -> list[str]:
        """Renders array elements as one list line each."""
        mode = mode_for(depth, self.options)
        indent = ""
        ordered = False
        if isinstance(mode, models.ListMode):
            indent = self.options.indent * (mode.indent_depth + 1)
            ordered = self.options.use_ordered_lists

        lines = []
        for position, item in enumerate(items, start=1):
            marker = f"{position}. " if ordered else "- "
            lines.append(f"{indent}{marker}{utils.inline_text(item)}")
        return lines

    @staticmethod
    def _heading_body(fragments: list[str], block: list[str]) -> list[str]:
        body: list[str] = []
        for fragment in fragments:
            if body:
                body.append("")
            body.append(fragment)
        if block and body:
            body.append("")
        return body + block

    @staticmethod
    def _join_entries(
        entries: list[list[str]], mode: models.RenderMode
    ) -> list[str]:
        lines: list[str] = []
        for entry in entries:
            # Headings are separated by a blank line; list items stay tight.
            if lines and isinstance(mode, models.HeadingMode):
                lines.append("")
            lines.extend(entry)
        return lines


def render(
    value: Any,
    options: _config.RenderOptions | dict[str, Any] | None = None,
) -> str:
    """Renders a parsed JSON value as hierarchical Markdown.

    Args:
        value: The JSON value to render. Must already be parsed.
        options: Render options. Can be a RenderOptions object or a dictionary
            of option values. If None, uses default options.

    Returns:
        The Markdown text.

    Raises:
        InvalidOptionError: If the options are invalid.
        RecursionLimitError: If the value nests deeper than max_depth.
        InternalRenderError: On any other failure while rendering.
    """
    return MarkdownRenderer(_config.as_render_options(options)).render(value)
