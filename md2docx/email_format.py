"""Plain-text formatting for pasting Markdown into email."""

from __future__ import annotations

from .config import FormattingOptions
from .inline import strip_inline_markers
from .tables import is_separator_row, is_table_line, render_table, split_table_row
from .utils.logger import get_logger

logger = get_logger(__name__)


def tables_to_text(text: str) -> str:
    """Re-flow every pipe-delimited region of `text` as an aligned table.

    A region starts at any line containing ``|`` and ends at the first line
    without one. Separator rows and rows without cell text are dropped. Lines
    outside regions are kept verbatim and in place. A region read from CRLF
    text is written back with CRLF endings.

    Examples:
        tables_to_text("| a | bb |\\n|---|---|\\n| ccc | d |")
        # "a   | bb\\n----+---\\nccc | d "
    """
    output: list[str] = []
    region: list[str] = []

    def flush() -> None:
        rows = [
            cells
            for cells in (split_table_row(line) for line in region if not is_separator_row(line))
            if any(cells)
        ]
        if rows:
            logger.debug("Rendering text table with %d rows", len(rows))
            lines = render_table(rows).split("\n")
            inner_ending = "\r" if region[0].endswith("\r") else ""
            last_ending = "\r" if region[-1].endswith("\r") else ""
            output.extend(line + inner_ending for line in lines[:-1])
            output.append(lines[-1] + last_ending)
        region.clear()

    for line in text.split("\n"):
        if is_table_line(line):
            region.append(line)
            continue
        if region:
            flush()
        output.append(line)

    if region:
        flush()
    return "\n".join(output)


def format_for_email(markdown: str, options: FormattingOptions | None = None) -> str:
    """Prepare Markdown text for an email body.

    Applies, in order and only when enabled: bold marker stripping, italic
    marker stripping, inline code stripping, then table re-flow. Works on the
    raw text and does not share state with the block parser.

    Args:
        markdown: Raw Markdown text.
        options: Formatting switches; defaults to `FormattingOptions()`.

    Returns:
        str: The formatted text.

    Examples:
        format_for_email("**hi** there", FormattingOptions(strip_bold=True))  # "hi there"
    """
    options = options or FormattingOptions()
    text = strip_inline_markers(
        markdown,
        bold=options.strip_bold,
        italic=options.strip_italic,
        code=options.strip_code,
    )
    if options.render_tables_as_text:
        text = tables_to_text(text)
    return text
