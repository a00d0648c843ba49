"""HTML preview rendering through markdown-it-py."""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt


@lru_cache(maxsize=1)
def _make_renderer() -> MarkdownIt:
    """Build a CommonMark renderer with raw HTML disabled."""
    return MarkdownIt("commonmark", options_update={"html": False}).enable(
        ["table", "strikethrough"]
    )


def render_preview(markdown: str) -> str:
    """Render Markdown to HTML for display.

    Raw HTML in the input is escaped rather than passed through.

    Examples:
        render_preview("# Title")  # "<h1>Title</h1>\\n"
    """
    return _make_renderer().render(markdown)
