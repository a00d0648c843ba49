"""Convert and copy actions built on the parser, assembler and formatter."""

from __future__ import annotations

from pathlib import Path

from docx.document import Document as DocxDocument

from .config import FormattingOptions
from .document import build_document
from .email_format import format_for_email
from .exceptions import ConversionError, EmptyInputError, OutputWriteError
from .filesystem import normalize_filepath, output_filename, read_markdown, write_atomic
from .parser import parse_blocks
from .utils.logger import get_logger

logger = get_logger(__name__)


def ensure_content(markdown: str) -> None:
    """Raise `EmptyInputError` when there is nothing to convert or copy."""
    if not markdown.strip():
        raise EmptyInputError()


def convert_markdown(markdown: str, options: FormattingOptions | None = None) -> DocxDocument:
    """Parse Markdown and assemble it into a Word document.

    Raises:
        EmptyInputError: If `markdown` is blank.
        ConversionError: If document assembly fails.
    """
    ensure_content(markdown)
    blocks = parse_blocks(markdown, options)
    try:
        return build_document(blocks)
    except Exception as error:
        logger.exception("Document assembly failed")
        raise ConversionError(f"Error converting document: {error}") from error


def save_document(document: DocxDocument, filepath: Path) -> Path:
    """Package a document to `filepath` atomically.

    Raises:
        ConversionError: If packaging or writing fails.
    """
    try:
        write_atomic(filepath, document.save)
    except Exception as error:
        raise ConversionError(f"Error converting document: {error}") from error
    logger.info("Wrote %s", filepath)
    return filepath


def convert_file(
    source: str | Path,
    output: Path | None = None,
    options: FormattingOptions | None = None,
) -> Path:
    """Convert a Markdown file to `.docx`.

    Args:
        source: Path to a ``.md``, ``.markdown`` or ``.txt`` file.
        output: Destination path; defaults to the source name with a ``.docx``
            suffix in the source directory.
        options: Formatting switches.

    Returns:
        Path: Where the document was written.

    Raises:
        InvalidFileTypeError: If the source suffix is not accepted.
        FileReadError: If the source cannot be read.
        EmptyInputError: If the source has no content.
        ConversionError: If assembling or saving the document fails.

    Examples:
        convert_file("notes.md")  # Path(".../notes.docx")
    """
    filepath = normalize_filepath(str(source))
    markdown = read_markdown(filepath)
    document = convert_markdown(markdown, options)
    target = output if output is not None else filepath.with_name(output_filename(filepath.name))
    return save_document(document, target)


def email_text(markdown: str, options: FormattingOptions | None = None) -> str:
    """Format Markdown for an email body.

    Raises:
        EmptyInputError: If `markdown` is blank.
    """
    ensure_content(markdown)
    return format_for_email(markdown, options)


def write_text_output(text: str, filepath: Path) -> Path:
    """Write plain-text output atomically as UTF-8.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    try:
        write_atomic(filepath, lambda stream: stream.write(text.encode("utf-8")))
    except OSError as error:
        raise OutputWriteError(f"Error writing {filepath}: {error}") from error
    logger.info("Wrote %s", filepath)
    return filepath
