"""Exceptions raised while converting JSON to Markdown."""


class JsonToMarkdownError(Exception):
    """Base class for all conversion errors.

    Attributes:
        message: The error message.
        original_exception: The original exception that caused this
            error (if applicable).
    """

    def __init__(
        self,
        message: str,
        original_exception: Exception | None = None,
    ) -> None:
        """Initializes the JsonToMarkdownError.

        Args:
            message: The error message.
            original_exception: The original exception. Defaults to None.
        """
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)


class InputParseError(JsonToMarkdownError):
    """Raised when the supplied text is not valid JSON.

    Attributes:
        line_number: Line of the parse failure (if known).
        column: Column of the parse failure (if known).
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        column: int | None = None,
        original_exception: Exception | None = None,
    ) -> None:
        """Initializes the InputParseError.

        Args:
            message: The error message.
            line_number: Line of the parse failure. Defaults to None.
            column: Column of the parse failure. Defaults to None.
            original_exception: The original exception. Defaults to None.
        """
        self.line_number = line_number
        self.column = column
        super().__init__(message, original_exception)


class InvalidOptionError(JsonToMarkdownError):
    """Raised when render options are out of range or inconsistent."""

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initializes the InvalidOptionError.

        Args:
            message: The error message.
            option: Name of the offending option. Defaults to None.
        """
        self.option = option
        super().__init__(message)


class RecursionLimitError(JsonToMarkdownError):
    """Raised when a JSON value nests deeper than the configured ceiling."""

    def __init__(
        self,
        limit: int,
        original_exception: Exception | None = None,
    ) -> None:
        """Initializes the RecursionLimitError.

        Args:
            limit: The nesting ceiling that was exceeded.
            original_exception: The original exception. Defaults to None.
        """
        self.limit = limit
        super().__init__(
            f"JSON nesting exceeds the maximum depth of {limit}",
            original_exception,
        )


class InternalRenderError(JsonToMarkdownError):
    """Raised for unexpected failures during rendering."""
