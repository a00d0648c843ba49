"""Package-specific exception types."""

from __future__ import annotations

from collections.abc import Sequence


class Md2DocxError(Exception):
    """Base class for errors that abort a conversion or copy action."""


class InvalidFileTypeError(Md2DocxError, ValueError):
    """Raised when an input file name does not carry a Markdown suffix.

    Args:
        filename: Name of the rejected file.
        allowed: Accepted suffixes.
    """

    def __init__(self, filename: str, allowed: Sequence[str]):
        self.filename = filename
        self.allowed = tuple(allowed)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"{self.filename} is not a Markdown file.\n"
            f"Supported extensions are: {', '.join(self.allowed)}"
        )


class FileReadError(Md2DocxError, IOError):
    """Raised when an input file cannot be read or decoded."""


class EmptyInputError(Md2DocxError, ValueError):
    """Raised when there is no Markdown content to convert or copy."""

    def __init__(self, message: str = "Please enter or upload markdown content"):
        super().__init__(message)


class ConversionError(Md2DocxError):
    """Raised when assembling or packaging the output document fails."""


class OutputWriteError(Md2DocxError, IOError):
    """Raised when the plain-text result cannot be written out."""
