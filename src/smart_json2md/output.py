"""Output functions for converted Markdown documents."""

import pathlib

import pandas as pd

from smart_json2md import config as _config
from smart_json2md import models

logger = _config.get_logger(__name__)

_BASE_COLUMNS = ["source_length", "markdown_length", "markdown"]


def write_markdown_file(markdown: str, filepath: str | pathlib.Path) -> str:
    """Writes Markdown text to a file.

    Args:
        markdown: The Markdown text.
        filepath: Path to output Markdown file.

    Returns:
        Path to the created file as a string.
    """
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(markdown)

    logger.debug(f"Exported Markdown to {filepath}")
    return str(filepath)


def _ensure_output_directory(output_dir: str | pathlib.Path) -> pathlib.Path:
    """Creates output directory if it doesn't exist.

    Args:
        output_dir: Directory path to create.

    Returns:
        Path object for the directory.
    """
    output_path = pathlib.Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def batch_to_markdown_files(
    documents: list[models.ConvertedDocument],
    output_dir: str | pathlib.Path,
) -> list[str]:
    """Exports each document to an individual Markdown file.

    Args:
        documents: List of ConvertedDocument objects.
        output_dir: Directory where Markdown files will be saved.

    Returns:
        List of created file paths.
    """
    output_path = _ensure_output_directory(output_dir)

    logger.debug(
        f"Exporting {len(documents)} documents to Markdown files in {output_dir}"
    )
    created_files: list[str] = []

    for doc in documents:
        doc_id = str(doc.metadata["id"])
        filepath = output_path / f"{doc_id}.md"
        created_files.append(write_markdown_file(doc.markdown, filepath))

    return created_files


def _to_dataframe_row(
    document: models.ConvertedDocument,
    metadata: dict[str, object] | None = None,
) -> dict[str, object]:
    """Builds the DataFrame row for one converted document.

    Args:
        document: The converted document.
        metadata: Optional metadata to include in the row.

    Returns:
        Dictionary with id, metadata fields, source_length, markdown_length
        and markdown.
    """
    row: dict[str, object] = {"id": str(document.metadata["id"])}
    if metadata:
        for key, value in metadata.items():
            row[key] = value
    row["source_length"] = len(document.source)
    row["markdown_length"] = len(document.markdown)
    row["markdown"] = document.markdown
    return row


def _create_empty_dataframe(metadata_columns: list[str] | None = None) -> pd.DataFrame:
    """Creates empty DataFrame with standard column structure.

    Args:
        metadata_columns: List of metadata column names.

    Returns:
        Empty DataFrame with proper column structure.
    """
    base_columns = ["id"]
    if metadata_columns:
        base_columns.extend(metadata_columns)
    base_columns.extend(_BASE_COLUMNS)
    logger.warning("Created empty DataFrame: no converted documents to export.")
    return pd.DataFrame(columns=base_columns)


def _order_dataframe_columns(
    df: pd.DataFrame,
    metadata_columns: list[str] | None = None,
) -> pd.DataFrame:
    """Orders DataFrame columns consistently.

    Args:
        df: DataFrame to reorder.
        metadata_columns: List of metadata column names.

    Returns:
        DataFrame with ordered columns.
    """
    column_order = ["id"]
    if metadata_columns:
        for col in metadata_columns:
            if col in df.columns:
                column_order.append(col)
    column_order.extend(_BASE_COLUMNS)

    column_order = [c for c in column_order if c in df.columns]
    return df[column_order]


def batch_to_dataframe(
    documents: list[models.ConvertedDocument],
    metadata_columns: list[str] | None = None,
) -> pd.DataFrame:
    """Converts batch of documents to single DataFrame.

    Args:
        documents: List of ConvertedDocument objects.
        metadata_columns: Optional list of metadata keys to include as
            columns in output DataFrame.

    Returns:
        DataFrame with one row per document.
    """
    if not documents:
        return _create_empty_dataframe(metadata_columns)

    logger.debug(f"Converting batch of {len(documents)} documents to DataFrame")
    rows: list[dict[str, object]] = []

    for doc in documents:
        metadata_dict = {}
        if metadata_columns:
            for col in metadata_columns:
                if col in doc.metadata:
                    metadata_dict[col] = doc.metadata[col]
        rows.append(_to_dataframe_row(doc, metadata_dict))

    return _order_dataframe_columns(pd.DataFrame(rows), metadata_columns)
