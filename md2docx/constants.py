"""Constants used across the md2docx package."""

from __future__ import annotations

import re

# Block patterns
CODE_FENCE = "```"
HEADING_PATTERN = re.compile(r"^(#{1,6}) (.*)$")
BLOCKQUOTE_PREFIX = "> "
RULE_PATTERN = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
TASK_ITEM_PATTERN = re.compile(r"^\s*[-*] \[([ xX])\] (.*)$")
BULLET_ITEM_PATTERN = re.compile(r"^\s*[-*]\s+(.*)$")
ORDERED_ITEM_PATTERN = re.compile(r"^\s*(\d+)\.\s+(.*)$")
TABLE_SEPARATOR_CHARS = frozenset("-:|")
BULLET_MARKER = "•"

# Inline patterns
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_PATTERNS = (re.compile(r"\*\*(.+?)\*\*"), re.compile(r"__(.+?)__"))
ITALIC_PATTERNS = (re.compile(r"\*(.+?)\*"), re.compile(r"_(.+?)_"))
CODE_PATTERNS = (re.compile(r"`(.+?)`"),)
STRIKE_PATTERNS = (re.compile(r"~~(.+?)~~"),)
# First code point tried when picking a link placeholder sentinel (Unicode private use area).
PLACEHOLDER_SENTINEL_START = 0xE000

# Input
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".txt")
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
STDIN_PATH = "-"

# Output
DOCX_EXTENSION = ".docx"
DEFAULT_OUTPUT_NAME = "converted-document.docx"
CODE_FONT = "Courier New"
LINK_COLOR = (0x05, 0x63, 0xC1)
LIST_INDENT_INCHES = 0.5
TASK_CHECKED_PREFIX = "☑ "
TASK_UNCHECKED_PREFIX = "☐ "

# Paragraph spacing in points as (before, after)
HEADING_SPACING = {1: (12, 6), 2: (10, 5), 3: (9, 4.5), 4: (8, 4)}
PARAGRAPH_SPACING = (5, 5)
CODE_BLOCK_SPACING = (10, 10)
BLANK_LINE_SPACING = (6, 6)

# Plain-text tables
TABLE_CELL_SEPARATOR = " | "
TABLE_RULE_JOINER = "-+-"
