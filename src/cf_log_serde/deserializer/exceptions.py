"""
Custom exceptions for the deserializer module.

Every failure the package reports funnels into one of these classes so the
host engine can decide per row whether to skip, abort or log and continue.
"""


class SerDeError(Exception):
    """
    Base exception for all deserializer errors.

    Catch this to handle anything raised by the package in one place.
    """

    pass


class ParseError(SerDeError):
    """
    Raised when a log line cannot be turned into a record.

    Covers lines that match neither grammar, numeric columns that are
    neither an integer nor the "-" sentinel, and any unexpected failure
    while extracting fields.

    Attributes:
        message: Detailed error message
        line_content: The offending line (optional)
        line_number: Position of the line in its source, when the caller tracks it
        cause: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        line_content: str | None = None,
        line_number: int | None = None,
        cause: BaseException | None = None,
    ):
        self.message = message
        self.line_content = line_content
        self.line_number = line_number
        self.cause = cause
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with line context."""
        parts = [self.message]
        if self.line_content is not None:
            # Truncate long lines for readability
            content = (
                self.line_content[:100] + "..."
                if len(self.line_content) > 100
                else self.line_content
            )
            if self.line_number is not None:
                parts.append(f"(line {self.line_number}: {content!r})")
            else:
                parts.append(f"(row: {content!r})")
        elif self.line_number is not None:
            parts.append(f"(line {self.line_number})")
        if self.cause is not None:
            parts.append(f"caused by {type(self.cause).__name__}: {self.cause}")
        return " ".join(parts)


class SerDeConfigError(SerDeError):
    """
    Raised when settings or table properties are invalid.

    Attributes:
        message: Detailed error message
        key: The offending setting or property name (optional)
        value: The invalid value (optional)
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        value: object | None = None,
    ):
        self.message = message
        self.key = key
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with key and value context."""
        if self.key and self.value is not None:
            return f"{self.message} (key='{self.key}', value={self.value!r})"
        elif self.key:
            return f"{self.message} (key='{self.key}')"
        return self.message
