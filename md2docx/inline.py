"""Inline tokenization and marker stripping."""

from __future__ import annotations

import re
from functools import lru_cache

from .config import FormattingOptions
from .constants import (
    BOLD_PATTERNS,
    CODE_PATTERNS,
    ITALIC_PATTERNS,
    LINK_PATTERN,
    PLACEHOLDER_SENTINEL_START,
    STRIKE_PATTERNS,
)
from .models import InlineRun, LinkSpan, RunStyle


def find_links(line: str) -> list[LinkSpan]:
    """Locate ``[text](url)`` links from left to right.

    Args:
        line: A single line of Markdown.

    Returns:
        list[LinkSpan]: One entry per link, in document order.

    Examples:
        find_links("see [docs](https://example.com)")
        # [LinkSpan(start=4, end=31, display_text="docs", url="https://example.com")]
    """
    return [
        LinkSpan(match.start(), match.end(), match.group(1), match.group(2))
        for match in LINK_PATTERN.finditer(line)
    ]


def _pick_sentinel(line: str) -> str:
    code_point = PLACEHOLDER_SENTINEL_START
    while chr(code_point) in line:
        code_point += 1
    return chr(code_point)


class _MaskedLine:
    """A line whose links are swapped for placeholders.

    Each placeholder is ``<sentinel><index><sentinel>`` where the sentinel is a
    character that never occurs in the original line, so placeholders cannot
    collide with user text. `links[index]` holds the span the placeholder
    replaced.
    """

    def __init__(self, line: str):
        self.sentinel = _pick_sentinel(line)
        self.links = find_links(line)

        parts = []
        offset = 0
        for index, link in enumerate(self.links):
            parts.append(line[offset : link.start])
            parts.append(f"{self.sentinel}{index}{self.sentinel}")
            offset = link.end
        parts.append(line[offset:])
        self.text = "".join(parts)
        self._placeholder = re.compile(
            rf"{re.escape(self.sentinel)}(\d+){re.escape(self.sentinel)}"
        )

    def link_for(self, placeholder: str) -> LinkSpan:
        return self.links[int(placeholder.strip(self.sentinel))]

    def restore(self, text: str) -> str:
        """Replace every placeholder in `text` with its link's display text."""
        if not self.links:
            return text
        return self._placeholder.sub(
            lambda match: self.links[int(match.group(1))].display_text, text
        )


def strip_markers(text: str, patterns: tuple[re.Pattern[str], ...]) -> str:
    for pattern in patterns:
        text = pattern.sub(r"\1", text)
    return text


def strip_inline_markers(
    text: str,
    *,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    strike: bool = False,
) -> str:
    """Remove the selected inline markers, keeping the wrapped text.

    Bold runs before italic because ``*`` and ``_`` are prefixes of the bold
    markers.

    Examples:
        strip_inline_markers("**a** *b*", bold=True)  # "a *b*"
    """
    if bold:
        text = strip_markers(text, BOLD_PATTERNS)
    if italic:
        text = strip_markers(text, ITALIC_PATTERNS)
    if code:
        text = strip_markers(text, CODE_PATTERNS)
    if strike:
        text = strip_markers(text, STRIKE_PATTERNS)
    return text


@lru_cache(maxsize=32)
def _span_pattern(sentinel: str) -> re.Pattern[str]:
    escaped = re.escape(sentinel)
    return re.compile(
        r"(?P<double>\*\*|__|~~)(?P<double_text>.+?)(?P=double)"
        r"|`(?P<code_text>.+?)`"
        r"|(?P<single>[*_])(?P<single_text>.+?)(?P=single)"
        rf"|(?P<link>{escaped}\d+{escaped})"
    )


def _styled_run(
    match: re.Match[str], masked: _MaskedLine, options: FormattingOptions
) -> InlineRun:
    if match.group("link"):
        return InlineRun(masked.link_for(match.group("link")).display_text, RunStyle.LINK)

    if match.group("double"):
        text = masked.restore(match.group("double_text"))
        if match.group("double") == "~~":
            return InlineRun(text, RunStyle.STRIKE)
        return InlineRun(text, RunStyle.PLAIN if options.strip_bold else RunStyle.BOLD)

    if match.group("code_text") is not None:
        text = masked.restore(match.group("code_text"))
        return InlineRun(text, RunStyle.PLAIN if options.strip_code else RunStyle.CODE)

    text = masked.restore(match.group("single_text"))
    return InlineRun(text, RunStyle.PLAIN if options.strip_italic else RunStyle.ITALIC)


def tokenize(line: str, options: FormattingOptions | None = None) -> list[InlineRun]:
    """Split one line of Markdown into styled inline runs.

    Links are extracted first so that marker characters inside link text or
    URLs are never read as emphasis. Spans do not nest: the earliest opening
    marker wins and its content is taken verbatim, so ``**_x_**`` yields a
    single bold run holding ``_x_``.

    When bold, italic and code stripping are all enabled the line is reduced
    to a single plain run with every marker (strikethrough included) removed.

    Args:
        line: Text of a single line, without block markers.
        options: Formatting switches; defaults to `FormattingOptions()`.

    Returns:
        list[InlineRun]: Runs in left-to-right order. Link runs carry only the
            display text.

    Examples:
        tokenize("**bold** and *italic*")
        # [InlineRun("bold", BOLD), InlineRun(" and ", PLAIN), InlineRun("italic", ITALIC)]
    """
    options = options or FormattingOptions()
    masked = _MaskedLine(line)

    if options.strips_all_markers:
        text = strip_inline_markers(masked.text, bold=True, italic=True, code=True, strike=True)
        return [InlineRun(masked.restore(text))]

    runs: list[InlineRun] = []
    position = 0
    for match in _span_pattern(masked.sentinel).finditer(masked.text):
        if match.start() > position:
            runs.append(InlineRun(masked.restore(masked.text[position : match.start()])))
        runs.append(_styled_run(match, masked, options))
        position = match.end()

    if not runs:
        return [InlineRun(masked.restore(masked.text))]

    if position < len(masked.text):
        runs.append(InlineRun(masked.restore(masked.text[position:])))
    return runs
