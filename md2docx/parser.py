"""Markdown block parsing."""

from __future__ import annotations

from .config import FormattingOptions
from .constants import (
    BLOCKQUOTE_PREFIX,
    BULLET_ITEM_PATTERN,
    BULLET_MARKER,
    CODE_FENCE,
    HEADING_PATTERN,
    ORDERED_ITEM_PATTERN,
    RULE_PATTERN,
    TASK_ITEM_PATTERN,
)
from .inline import tokenize
from .models import (
    BlankLine,
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    ListItem,
    Paragraph,
    ParserContext,
    ParserState,
    Rule,
    Table,
    TaskItem,
)
from .tables import is_separator_row, is_table_line, split_table_row
from .utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(markdown: str) -> list[str]:
    """Split text on ``\\n`` only, dropping a trailing ``\\r`` from each line.

    Other Unicode line boundaries (form feed, ``\\u2028``, ...) stay inside
    their line. A final newline does not open an extra empty line.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b"]
    """
    lines = [line.removesuffix("\r") for line in markdown.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def _try_open_fence(ctx: ParserContext, line: str) -> bool:
    """Detect the start of a fenced code block.

    Args:
        ctx: Parser context to update when a fence opens.
        line: Current line being scanned.

    Returns:
        bool: True when the line opens a fence and the context is updated.

    Examples:
        _try_open_fence(ParserContext(), "```python")  # True
    """
    if ctx.state is not ParserState.NORMAL or not line.startswith(CODE_FENCE):
        return False

    ctx.transition(ParserState.IN_CODE_BLOCK)
    return True


def _try_close_fence(ctx: ParserContext, line: str) -> CodeBlock | None:
    """Close the open code block when `line` is a fence.

    Returns:
        CodeBlock | None: The finished block, or None when the line is code
            content (it is then appended to the buffer).
    """
    if ctx.state is not ParserState.IN_CODE_BLOCK:
        return None

    if not line.startswith(CODE_FENCE):
        ctx.code_lines.append(line)
        return None

    return _flush_code_block(ctx)


def _flush_code_block(ctx: ParserContext) -> CodeBlock:
    block = CodeBlock("\n".join(ctx.code_lines))
    ctx.transition(ParserState.NORMAL)
    return block


def _try_enter_table(ctx: ParserContext, line: str, options: FormattingOptions) -> bool:
    """Enter table state when tables are collected and the line has a pipe.

    Examples:
        _try_enter_table(ParserContext(), "| a |", FormattingOptions(render_tables_as_text=True))
    """
    if ctx.state is not ParserState.NORMAL:
        return False
    if not options.render_tables_as_text or not is_table_line(line):
        return False

    ctx.transition(ParserState.IN_TABLE)
    _try_collect_table_line(ctx, line)
    return True


def _try_collect_table_line(ctx: ParserContext, line: str) -> bool:
    """Buffer a table line while in table state.

    Separator rows and lines without any cell text are consumed without
    adding a row.

    Returns:
        bool: True when the line belongs to the table; False when it ends the
            region and must be handled as a normal line.
    """
    if ctx.state is not ParserState.IN_TABLE or not is_table_line(line):
        return False

    if is_separator_row(line):
        return True

    cells = split_table_row(line)
    if any(cells):
        ctx.table_rows.append(cells)
    return True


def _flush_table(ctx: ParserContext, options: FormattingOptions) -> Table | None:
    rows = ctx.table_rows
    ctx.transition(ParserState.NORMAL)
    if not rows:
        logger.debug("Dropping table region without data rows")
        return None

    logger.debug("Flushing table with %d rows", len(rows))
    return Table(
        tuple(tuple(tuple(tokenize(cell, options)) for cell in row) for row in rows)
    )


def parse_line(line: str, options: FormattingOptions | None = None) -> Block:
    """Classify a single line outside code blocks and tables.

    Rules are tried in order: heading, blockquote, horizontal rule, task item,
    bullet item, ordered item, paragraph, blank line. Heading text is kept
    literally; the other text-bearing blocks are tokenized.

    Examples:
        parse_line("# Title")  # Heading(level=1, text="Title")
        parse_line("3. third")  # ListItem(ordered=True, marker="3.", runs=...)
    """
    options = options or FormattingOptions()

    heading_match = HEADING_PATTERN.match(line)
    if heading_match:
        return Heading(len(heading_match.group(1)), heading_match.group(2))

    if line.startswith(BLOCKQUOTE_PREFIX):
        return BlockQuote(tuple(tokenize(line[len(BLOCKQUOTE_PREFIX) :], options)))

    if RULE_PATTERN.match(line.strip()):
        return Rule()

    task_match = TASK_ITEM_PATTERN.match(line)
    if task_match:
        checked = task_match.group(1).lower() == "x"
        return TaskItem(checked, tuple(tokenize(task_match.group(2), options)))

    bullet_match = BULLET_ITEM_PATTERN.match(line)
    if bullet_match:
        return ListItem(False, BULLET_MARKER, tuple(tokenize(bullet_match.group(1), options)))

    ordered_match = ORDERED_ITEM_PATTERN.match(line)
    if ordered_match:
        marker = f"{ordered_match.group(1)}."
        return ListItem(True, marker, tuple(tokenize(ordered_match.group(2), options)))

    if line.strip():
        return Paragraph(tuple(tokenize(line, options)))

    return BlankLine()


def parse_blocks(markdown: str, options: FormattingOptions | None = None) -> list[Block]:
    """Parse Markdown text into an ordered list of block elements.

    A single forward pass over the lines. Fenced code lines are kept verbatim
    until the closing fence. When `options.render_tables_as_text` is set,
    consecutive lines containing ``|`` fold into one `Table`. Every other line
    yields exactly one block.

    Never raises for malformed Markdown: unknown lines become paragraphs, and an
    unterminated code block or table is closed at the end of input.

    Args:
        markdown: The Markdown content to parse.
        options: Formatting switches; defaults to `FormattingOptions()`.

    Returns:
        list[Block]: Blocks in document order.

    Examples:
        parse_blocks("```\\nfoo\\nbar\\n```")  # [CodeBlock("foo\\nbar")]
    """
    options = options or FormattingOptions()
    blocks: list[Block] = []
    ctx = ParserContext()

    for line in split_lines(markdown):
        if ctx.state is ParserState.IN_CODE_BLOCK:
            code_block = _try_close_fence(ctx, line)
            if code_block is not None:
                blocks.append(code_block)
            continue

        if ctx.state is ParserState.IN_TABLE:
            if _try_collect_table_line(ctx, line):
                continue
            table = _flush_table(ctx, options)
            if table is not None:
                blocks.append(table)

        if _try_open_fence(ctx, line):
            continue

        if _try_enter_table(ctx, line, options):
            continue

        blocks.append(parse_line(line, options))

    if ctx.state is ParserState.IN_CODE_BLOCK:
        logger.debug("Closing unterminated code block at end of input")
        blocks.append(_flush_code_block(ctx))
    elif ctx.state is ParserState.IN_TABLE:
        table = _flush_table(ctx, options)
        if table is not None:
            blocks.append(table)

    logger.debug("Parsed %d blocks", len(blocks))
    return blocks
