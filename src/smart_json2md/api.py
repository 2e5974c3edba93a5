"""Public API for JSON to Markdown conversion and batch processing."""

import json
import pathlib
import traceback
from typing import Any

import pandas as pd
from tqdm.auto import tqdm

from smart_json2md import config as _config
from smart_json2md import errors, models, renderer

logger = _config.get_logger(__name__)


def parse_json(text: str) -> Any:
    """Parses JSON text.

    Args:
        text: The JSON document.

    Returns:
        The parsed JSON value.

    Raises:
        InputParseError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise errors.InputParseError(
            message=f"Invalid JSON: {e}",
            line_number=e.lineno,
            column=e.colno,
            original_exception=e,
        ) from e


def convert_text(
    text: str,
    options: _config.RenderOptions | dict[str, Any] | None = None,
    metadata: dict[str, object] | None = None,
) -> models.ConvertedDocument:
    """Converts a single JSON text to Markdown.

    Args:
        text: The JSON text to convert.
        options: Render options. Can be a RenderOptions object or a dictionary
            of option values. If None, uses default options.
        metadata: Optional metadata to attach to the converted document.

    Returns:
        ConvertedDocument holding the source, the Markdown and the options.

    Raises:
        InputParseError: If the text is not valid JSON.
        InvalidOptionError: If the options are invalid.
        RecursionLimitError: If the JSON nests deeper than max_depth.
        InternalRenderError: On any other failure while rendering.
    """
    options = _config.as_render_options(options)

    if metadata is None:
        metadata = {}

    try:
        value = parse_json(text)
        markdown = renderer.render(value, options)
    except errors.InputParseError as e:
        logger.error(f"Failed to parse JSON input: {e.message}")
        raise
    except errors.JsonToMarkdownError as e:
        logger.error(f"Failed to render Markdown: {e.message}")
        raise

    return models.ConvertedDocument(
        source=text,
        markdown=markdown,
        options=options,
        metadata=metadata,
    )


def convert_file(
    input_path: str | pathlib.Path,
    output_path: str | pathlib.Path | None = None,
    options: _config.RenderOptions | dict[str, Any] | None = None,
) -> str:
    """Reads a JSON file and converts it to Markdown.

    Args:
        input_path: Path to the JSON file.
        output_path: Optional path to write the Markdown to.
        options: Render options. Can be a RenderOptions object or a dictionary
            of option values. If None, uses default options.

    Returns:
        The Markdown text.

    Raises:
        OSError: If the input file cannot be read or the output file cannot
            be written.
        InputParseError: If the file is not valid JSON.
    """
    try:
        text = pathlib.Path(input_path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read JSON file {input_path}: {e}")
        raise

    document = convert_text(text, options=options, metadata={"source": str(input_path)})

    if output_path is not None:
        try:
            document.to_markdown_file(str(output_path))
        except OSError as e:
            logger.error(f"Cannot write Markdown file {output_path}: {e}")
            raise
        logger.info(f"Converted {input_path} to {output_path}")

    return document.markdown


def convert_batch_df(
    df: pd.DataFrame,
    content_column: str = "content",
    id_column: str | None = None,
    metadata_columns: list[str] | None = None,
    options: _config.RenderOptions | dict[str, Any] | None = None,
) -> models.ConvertedBatch:
    """Converts a batch of JSON documents from a DataFrame.

    Args:
        df: Input DataFrame with JSON content.
        content_column: Name of column containing JSON text. Defaults to
            'content'.
        id_column: Name of column to use as document ID. If None, generates hash
            from content. Defaults to None.
        metadata_columns: List of additional column names to include as document
            metadata. Defaults to None.
        options: Render options. Can be a RenderOptions object or a dictionary
            of option values. If None, uses default options.

    Returns:
        ConvertedBatch object containing successfully converted documents and
        any errors encountered. Use the object's methods to export:
        - batch.to_dataframe() for pandas DataFrame
        - batch.to_markdown(output_dir) for Markdown files

    Raises:
        ValueError: If required columns don't exist in DataFrame.
        InvalidOptionError: If the options are invalid.
    """
    if content_column not in df.columns:
        raise ValueError(
            f"Column '{content_column}' not found in dataframe. "
            f"Available columns: {list(df.columns)}"
        )

    if id_column is not None and id_column not in df.columns:
        raise ValueError(
            f"Column '{id_column}' not found in dataframe. "
            f"Available columns: {list(df.columns)}"
        )

    if metadata_columns is not None:
        missing_columns = [col for col in metadata_columns if col not in df.columns]
        if missing_columns:
            raise ValueError(
                f"Metadata columns {missing_columns} not found. "
                f"Available columns: {list(df.columns)}"
            )

    options = _config.as_render_options(options)

    logger.info(f"Starting batch conversion of {len(df)} documents")

    documents: list[models.ConvertedDocument] = []
    batch_errors: list[dict[str, object]] = []

    for idx, row in tqdm(df.iterrows(), total=len(df), desc="Converting documents"):
        doc_metadata: dict[str, object] = {"row_index": idx}
        if id_column is not None:
            doc_metadata["id"] = row[id_column]
        if metadata_columns is not None:
            for col in metadata_columns:
                doc_metadata[col] = row[col]

        doc_id = doc_metadata.get("id")
        try:
            documents.append(
                convert_text(
                    text=row[content_column],
                    options=options,
                    metadata=doc_metadata,
                )
            )

        except errors.JsonToMarkdownError as e:
            logger.warning(
                f"Conversion error for doc_id {doc_id} at row {idx}: {str(e)}"
            )
            batch_errors.append(
                {
                    "doc_id": doc_id,
                    "row_index": idx,
                    "error_type": type(e).__name__,
                    "message": str(e),
                    "traceback": traceback.format_exc(),
                }
            )

        except Exception as e:
            # Unexpected error - still collect it
            logger.error(f"Unexpected error for doc_id {doc_id} at row {idx}: {str(e)}")
            batch_errors.append(
                {
                    "doc_id": doc_id,
                    "row_index": idx,
                    "error_type": type(e).__name__,
                    "message": str(e),
                    "traceback": traceback.format_exc(),
                }
            )

    logger.info(
        f"Batch conversion complete: {len(documents)} successful, "
        f"{len(batch_errors)} errors"
    )

    return models.ConvertedBatch(
        documents=documents,
        options=options,
        errors=batch_errors,
        metadata_columns=metadata_columns,
    )
