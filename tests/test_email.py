from __future__ import annotations

import textwrap

from md2docx.config import FormattingOptions
from md2docx.email_format import format_for_email, tables_to_text
from md2docx.inline import tokenize

ALL = FormattingOptions(
    strip_bold=True, strip_italic=True, strip_code=True, render_tables_as_text=True
)


def test_no_options_returns_text_unchanged():
    text = "**bold** *it* `code`\n| a | b |"

    assert format_for_email(text) == text


def test_strip_bold():
    assert format_for_email("**hi** __there__", FormattingOptions(strip_bold=True)) == "hi there"


def test_strip_italic():
    assert format_for_email("*a* and _b_", FormattingOptions(strip_italic=True)) == "a and b"


def test_strip_bold_runs_before_italic():
    options = FormattingOptions(strip_bold=True, strip_italic=True)

    assert format_for_email("***x***", options) == "x"


def test_strip_code():
    assert format_for_email("use `pip`", FormattingOptions(strip_code=True)) == "use pip"


def test_strikethrough_is_left_alone():
    assert format_for_email("~~old~~", ALL) == "~~old~~"


def test_links_are_left_alone():
    assert format_for_email("[x](http://y)", ALL) == "[x](http://y)"


def test_tables_are_rendered_in_place():
    text = textwrap.dedent(
        """\
        Intro
        | a | bb |
        |---|----|
        | ccc | d |
        Outro"""
    )

    assert format_for_email(text, FormattingOptions(render_tables_as_text=True)) == (
        "Intro\na   | bb\n----+---\nccc | d \nOutro"
    )


def test_tables_untouched_when_disabled():
    text = "| a | b |\n|---|---|"

    assert format_for_email(text, FormattingOptions(strip_bold=True)) == text


def test_table_at_end_and_trailing_newline():
    assert tables_to_text("| a |\n") == "a\n-\n"


def test_separator_only_region_is_dropped():
    assert tables_to_text("before\n|---|\nafter") == "before\nafter"


def test_markers_are_stripped_inside_tables():
    assert format_for_email("| **a** | `b` |", ALL) == "a | b\n--+--"


def test_stripped_output_has_no_markers_left(strip_all):
    text = "**bold** and *it* with `code`\n__more__ _words_"

    formatted = format_for_email(text, strip_all)

    assert formatted == "bold and it with code\nmore words"
    for line in formatted.split("\n"):
        assert [run.text for run in tokenize(line, strip_all)] == [line]


def test_crlf_separator_row_is_dropped():
    text = "| a | bb |\r\n|---|----|\r\n| ccc | d |"

    assert format_for_email(text, FormattingOptions(render_tables_as_text=True)) == (
        "a   | bb\r\n----+---\r\nccc | d "
    )


def test_crlf_table_keeps_line_endings_in_place():
    text = "Intro\r\n| a | b |\r\n|:-:|---|\r\n| c | d |\r\nOutro"

    assert tables_to_text(text) == "Intro\r\na | b\r\n--+--\r\nc | d\r\nOutro"


def test_rows_without_cell_text_are_dropped():
    assert tables_to_text("| a |\n|\n| b |") == "a\n-\nb"


def test_region_of_bare_pipes_is_dropped():
    assert tables_to_text("x\n|\n||\ny") == "x\ny"
