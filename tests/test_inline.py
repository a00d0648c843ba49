from __future__ import annotations

from md2docx.config import FormattingOptions
from md2docx.inline import find_links, strip_inline_markers, tokenize
from md2docx.models import InlineRun, LinkSpan, RunStyle


def runs_to_text(runs: list[InlineRun]) -> str:
    return "".join(run.text for run in runs)


def test_bold_plain_and_italic_runs():
    assert tokenize("**bold** and *italic*") == [
        InlineRun("bold", RunStyle.BOLD),
        InlineRun(" and "),
        InlineRun("italic", RunStyle.ITALIC),
    ]


def test_underscore_markers():
    assert tokenize("__strong__ _soft_") == [
        InlineRun("strong", RunStyle.BOLD),
        InlineRun(" "),
        InlineRun("soft", RunStyle.ITALIC),
    ]


def test_code_and_trailing_text():
    assert tokenize("a `b` c") == [
        InlineRun("a "),
        InlineRun("b", RunStyle.CODE),
        InlineRun(" c"),
    ]


def test_strike_is_styled_even_when_stripping():
    options = FormattingOptions(strip_bold=True, strip_italic=True)
    assert tokenize("~~gone~~", options) == [InlineRun("gone", RunStyle.STRIKE)]


def test_strip_bold_only_keeps_italic():
    options = FormattingOptions(strip_bold=True)
    assert tokenize("**a** *b*", options) == [
        InlineRun("a"),
        InlineRun(" "),
        InlineRun("b", RunStyle.ITALIC),
    ]


def test_strip_code_falls_back_to_plain():
    options = FormattingOptions(strip_code=True)
    assert tokenize("run `make`", options) == [InlineRun("run "), InlineRun("make")]


def test_link_keeps_display_text_only():
    runs = tokenize("[click](http://x)")

    assert runs == [InlineRun("click", RunStyle.LINK)]
    assert all("http://x" not in run.text for run in runs)


def test_link_markers_are_not_read_as_emphasis():
    assert tokenize("see [a*b](http://x*y) now") == [
        InlineRun("see "),
        InlineRun("a*b", RunStyle.LINK),
        InlineRun(" now"),
    ]


def test_link_inside_bold_is_resolved():
    assert tokenize("**see [docs](https://example.com)**") == [
        InlineRun("see docs", RunStyle.BOLD)
    ]


def test_link_is_never_stripped():
    options = FormattingOptions(strip_bold=True, strip_code=True)
    assert tokenize("[x](y)", options) == [InlineRun("x", RunStyle.LINK)]


def test_strip_all_fast_path_returns_single_plain_run(strip_all):
    assert tokenize("**a** _b_ `c`", strip_all) == [InlineRun("a b c")]


def test_strip_all_fast_path_removes_strike_and_resolves_links(strip_all):
    assert tokenize("~~old~~ [new](http://x)", strip_all) == [InlineRun("old new")]


def test_nested_emphasis_keeps_outer_match_only():
    assert tokenize("**_x_**") == [InlineRun("_x_", RunStyle.BOLD)]


def test_unmatched_marker_is_plain():
    assert tokenize("2 * 3 = 6") == [InlineRun("2 * 3 = 6")]


def test_line_without_spans_is_one_plain_run():
    assert tokenize("just text") == [InlineRun("just text")]


def test_empty_line():
    assert tokenize("") == [InlineRun("")]


def test_placeholders_do_not_collide_with_private_use_text():
    line = "\ue0000\ue000 [a](b)"

    assert tokenize(line) == [InlineRun("\ue0000\ue000 "), InlineRun("a", RunStyle.LINK)]


def test_find_links_records_positions():
    assert find_links("see [docs](https://example.com)") == [
        LinkSpan(start=4, end=31, display_text="docs", url="https://example.com")
    ]


def test_strip_inline_markers_applies_bold_before_italic():
    assert strip_inline_markers("***x***", bold=True, italic=True) == "x"


def test_strip_inline_markers_leaves_disabled_markers():
    assert strip_inline_markers("`c` *b* ~~d~~", italic=True) == "`c` b ~~d~~"


def test_runs_concatenate_to_display_text():
    assert runs_to_text(tokenize("**a** b [c](d)")) == "a b c"
