from md2docx.config import FormattingOptions
from md2docx.models import CodeBlock, ParserContext, ParserState
from md2docx.parser import (
    _flush_table,
    _try_close_fence,
    _try_collect_table_line,
    _try_enter_table,
    _try_open_fence,
)

TABLES = FormattingOptions(render_tables_as_text=True)


def test_try_open_fence_switches_state():
    ctx = ParserContext()

    assert _try_open_fence(ctx, "```python") is True
    assert ctx.state is ParserState.IN_CODE_BLOCK
    assert ctx.code_lines == []


def test_try_open_fence_ignores_other_lines():
    ctx = ParserContext()

    assert _try_open_fence(ctx, "  ```") is False
    assert _try_open_fence(ctx, "``") is False
    assert ctx.state is ParserState.NORMAL


def test_try_close_fence_buffers_content_until_fence():
    ctx = ParserContext(state=ParserState.IN_CODE_BLOCK)

    assert _try_close_fence(ctx, "first") is None
    assert _try_close_fence(ctx, "# second") is None
    assert ctx.code_lines == ["first", "# second"]

    assert _try_close_fence(ctx, "```") == CodeBlock("first\n# second")
    assert ctx.state is ParserState.NORMAL
    assert ctx.code_lines == []


def test_try_close_fence_outside_code_block():
    ctx = ParserContext()

    assert _try_close_fence(ctx, "```") is None
    assert ctx.state is ParserState.NORMAL


def test_try_enter_table_requires_option():
    ctx = ParserContext()

    assert _try_enter_table(ctx, "| a |", FormattingOptions()) is False
    assert ctx.state is ParserState.NORMAL


def test_try_enter_table_collects_first_row():
    ctx = ParserContext()

    assert _try_enter_table(ctx, "| a | b |", TABLES) is True
    assert ctx.state is ParserState.IN_TABLE
    assert ctx.table_rows == [["a", "b"]]


def test_try_collect_table_line_skips_separators():
    ctx = ParserContext(state=ParserState.IN_TABLE, table_rows=[["a"]])

    assert _try_collect_table_line(ctx, "|:---|") is True
    assert _try_collect_table_line(ctx, "| 1 |") is True
    assert ctx.table_rows == [["a"], ["1"]]

    assert _try_collect_table_line(ctx, "plain") is False
    assert ctx.state is ParserState.IN_TABLE


def test_flush_table_resets_context():
    ctx = ParserContext(state=ParserState.IN_TABLE, table_rows=[["a"]])

    table = _flush_table(ctx, TABLES)

    assert table is not None
    assert len(table.rows) == 1
    assert ctx.state is ParserState.NORMAL
    assert ctx.table_rows == []


def test_transition_clears_buffers():
    ctx = ParserContext(code_lines=["x"], table_rows=[["y"]])

    ctx.transition(ParserState.IN_TABLE)

    assert ctx.code_lines == []
    assert ctx.table_rows == []
