"""Command line interface for converting JSON files to Markdown."""

from importlib import metadata
from pathlib import Path
from typing import Optional

import typer

from smart_json2md import api, errors, formatters
from smart_json2md import config as _config

app = typer.Typer(
    add_completion=False,
    help="Convert JSON files to Markdown with automatic hierarchy.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(metadata.version("smart-json2md"))
        raise typer.Exit()


@app.command()
def convert(
    input_path: Path = typer.Argument(..., help="Input JSON file path."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output Markdown file path."
    ),
    types: bool = typer.Option(False, "--types", "-t", help="Include type information."),
    min_level: int = typer.Option(
        1, "--min-level", min=1, max=6, help="Minimum heading level (1-6)."
    ),
    max_level: int = typer.Option(
        6, "--max-level", "-l", min=1, max=6, help="Maximum heading level (1-6)."
    ),
    process_arrays: bool = typer.Option(
        True,
        "--process-arrays/--no-process-arrays",
        " /-n",
        help="Enable or disable intelligent array-of-objects processing.",
    ),
    ordered_lists: bool = typer.Option(
        False, "--ordered-lists", help="Use numbered lists below the heading levels."
    ),
    pretty: bool = typer.Option(
        False, "--pretty", "-p", help="Make output more readable with extra spacing."
    ),
    clamp: bool = typer.Option(
        False,
        "--clamp",
        help="Keep emitting headings at the maximum level instead of lists.",
    ),
    max_depth: int = typer.Option(
        100, "--max-depth", min=1, help="Maximum JSON nesting depth."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert a JSON file to Markdown."""
    if min_level > max_level:
        raise typer.BadParameter(
            f"minimum level ({min_level}) cannot exceed maximum level ({max_level})",
            param_hint="'--min-level'",
        )

    if not input_path.exists():
        typer.echo(f"Error: Input file not found: {input_path}", err=True)
        raise typer.Exit(code=1)

    output_path = output if output is not None else input_path.with_suffix(".md")

    options = _config.RenderOptions(
        min_heading_level=min_level,
        max_heading_level=max_level,
        include_types=types,
        process_array_objects=process_arrays,
        use_ordered_lists=ordered_lists,
        value_formatter=formatters.pretty_formatter if pretty else None,
        overflow="clamp" if clamp else "list",
        max_depth=max_depth,
    )

    typer.echo(f"Converting {input_path} to {output_path}...")

    try:
        api.convert_file(input_path, output_path, options)
    except (OSError, errors.JsonToMarkdownError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo("Conversion completed successfully!")


def main() -> None:
    """Entry point for the smart-json2md console script."""
    app()


if __name__ == "__main__":
    main()
