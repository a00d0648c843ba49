"""
md2docx: Markdown to Word document and email-ready text converter.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md2docx convert README.md
    md2docx email README.md --strip-bold --tables-as-text

Library Usage:
    from md2docx import FormattingOptions, build_document, parse_blocks

    options = FormattingOptions(render_tables_as_text=True)
    blocks = parse_blocks(Path("README.md").read_text(), options)
    build_document(blocks).save("README.docx")
"""

from .config import ConfigError, FormattingOptions
from .convert import convert_file, convert_markdown, email_text
from .document import build_document
from .email_format import format_for_email
from .exceptions import (
    ConversionError,
    EmptyInputError,
    FileReadError,
    InvalidFileTypeError,
    Md2DocxError,
    OutputWriteError,
)
from .inline import strip_inline_markers, tokenize
from .models import (
    BlankLine,
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    InlineRun,
    ListItem,
    Paragraph,
    Rule,
    RunStyle,
    Table,
    TaskItem,
)
from .parser import parse_blocks
from .preview import render_preview
from .tables import render_table

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "tokenize",
    "parse_blocks",
    "render_table",
    "format_for_email",
    "strip_inline_markers",
    "build_document",
    "render_preview",
    # Actions
    "convert_markdown",
    "convert_file",
    "email_text",
    # Data models
    "FormattingOptions",
    "InlineRun",
    "RunStyle",
    "Block",
    "Heading",
    "Paragraph",
    "ListItem",
    "TaskItem",
    "BlockQuote",
    "CodeBlock",
    "Rule",
    "BlankLine",
    "Table",
    # Exceptions
    "Md2DocxError",
    "InvalidFileTypeError",
    "FileReadError",
    "EmptyInputError",
    "ConversionError",
    "OutputWriteError",
    "ConfigError",
    # Version
    "__version__",
]
