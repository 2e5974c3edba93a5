"""Data models for rendering state and conversion results."""

import dataclasses
import hashlib

import pandas as pd

from smart_json2md import config as _config

logger = _config.get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class HeadingMode:
    """Keys at this depth render as Markdown headings.

    Attributes:
        level: The heading level (number of '#' markers).
    """

    level: int


@dataclasses.dataclass(frozen=True)
class ListMode:
    """Keys at this depth render as list items.

    Attributes:
        indent_depth: Number of indent units before the list marker.
    """

    indent_depth: int


RenderMode = HeadingMode | ListMode


@dataclasses.dataclass(frozen=True)
class ConvertedDocument:
    """Immutable result of converting one JSON document to Markdown.

    Attributes:
        source: The original JSON text.
        markdown: The rendered Markdown.
        options: The render options used.
        metadata: Additional metadata for the document.
    """

    source: str
    markdown: str
    options: _config.RenderOptions
    metadata: dict[str, object]

    def __post_init__(self) -> None:
        """Auto-generate ID from content hash if not provided in metadata."""
        if self.metadata.get("id") is None:
            logger.warning("No document ID found. Generating one from content hash.")
            self.metadata["id"] = hashlib.sha256(
                self.source.encode("utf-8")
            ).hexdigest()

    def __repr__(self) -> str:
        """Return a readable string representation."""
        doc_id = self.metadata["id"]
        metadata = {k: v for k, v in self.metadata.items() if k != "id"}
        num_headings = sum(
            1 for line in self.markdown.splitlines() if line.startswith("#")
        )
        metadata_str = (
            "\n" + "".join(f"    {k}: {v}\n" for k, v in metadata.items())
            if metadata
            else "empty\n"
        )

        return (
            "ConvertedDocument(\n"
            + f"  id: {doc_id}\n"
            + f"  metadata: {metadata_str}"
            + f"  source length: {len(self.source)} characters\n"
            + f"  markdown length: {len(self.markdown)} characters\n"
            + f"  number of headings: {num_headings}\n"
            + ")"
        )

    def to_markdown_file(self, filepath: str) -> str:
        """Writes the Markdown to a file.

        Args:
            filepath: Path to the output Markdown file.

        Returns:
            Path to the created file.
        """
        from smart_json2md import output

        return output.write_markdown_file(self.markdown, filepath)


@dataclasses.dataclass(frozen=True)
class ConvertedBatch:
    """Immutable representation of a batch of converted JSON documents.

    Attributes:
        documents: List of successfully converted documents.
        options: The render options used.
        errors: List of error dictionaries for failed documents.
            Each error dict contains: doc_id, error_type, message,
            traceback, row_index.
        metadata_columns: List of metadata column names that were specified
            during batch processing. Used when converting to dataframe.
    """

    documents: list[ConvertedDocument]
    options: _config.RenderOptions
    errors: list[dict[str, object]]
    metadata_columns: list[str] | None = None

    def __repr__(self) -> str:
        """Return a readable string representation."""
        total = len(self.documents) + len(self.errors)
        success_rate = f"{len(self.documents) / total:.0%}" if total > 0 else "N/A"
        error_str = f"{len(self.errors)}" if self.errors else "none"

        return (
            "ConvertedBatch(\n"
            f"  total documents: {total}\n"
            f"  converted successfully: {len(self.documents)} ({success_rate})\n"
            f"  errors: {error_str}\n"
            ")"
        )

    def to_markdown(self, output_dir: str) -> list[str]:
        """Writes each document to a Markdown file in the output directory.

        Args:
            output_dir: Directory path where Markdown files will be saved.

        Returns:
            List of created file paths.
        """
        from smart_json2md import output

        return output.batch_to_markdown_files(self.documents, output_dir)

    def to_dataframe(self) -> pd.DataFrame:
        """Combines all documents into a single pandas DataFrame.

        Returns:
            DataFrame with one row per converted document, including any
            metadata columns specified during batch processing.
        """
        from smart_json2md import output

        return output.batch_to_dataframe(self.documents, self.metadata_columns)
