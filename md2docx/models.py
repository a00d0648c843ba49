"""Data models for md2docx."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class RunStyle(Enum):
    """Styles an inline run can carry.

    Attributes:
        PLAIN: Unstyled text.
        BOLD: Text wrapped in ``**`` or ``__``.
        ITALIC: Text wrapped in ``*`` or ``_``.
        STRIKE: Text wrapped in ``~~``.
        CODE: Text wrapped in single backticks.
        LINK: Display text of a ``[text](url)`` link; the target is dropped.
    """

    PLAIN = auto()
    BOLD = auto()
    ITALIC = auto()
    STRIKE = auto()
    CODE = auto()
    LINK = auto()


@dataclass(frozen=True)
class InlineRun:
    """A contiguous fragment of text with a single style."""

    text: str
    style: RunStyle = RunStyle.PLAIN


@dataclass(frozen=True)
class LinkSpan:
    """Position and parts of a link found in a single line.

    Attributes:
        start: Zero-based index of the opening ``[`` in the line.
        end: Index one past the closing ``)``.
        display_text: Text between the brackets.
        url: Target between the parentheses.
    """

    start: int
    end: int
    display_text: str
    url: str


Runs = tuple[InlineRun, ...]


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    def __post_init__(self):
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")


@dataclass(frozen=True)
class Paragraph:
    runs: Runs


@dataclass(frozen=True)
class ListItem:
    """A bullet or numbered list entry.

    Attributes:
        ordered: True for numbered items.
        marker: Bullet glyph, or the source number followed by a dot (``"3."``).
        runs: Tokenized item text.
    """

    ordered: bool
    marker: str
    runs: Runs


@dataclass(frozen=True)
class TaskItem:
    checked: bool
    runs: Runs


@dataclass(frozen=True)
class BlockQuote:
    runs: Runs


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code, rendered in a monospace font.

    Attributes:
        text: Raw lines between the fences joined with newlines.
    """

    text: str
    monospace: bool = True


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class Table:
    """Rows of cells collected from one contiguous pipe-delimited region.

    Attributes:
        rows: Each row is a tuple of cells; each cell is a tuple of inline runs.
            Rows may differ in length.
    """

    rows: tuple[tuple[Runs, ...], ...]

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


Block = Union[
    Heading,
    Paragraph,
    ListItem,
    TaskItem,
    BlockQuote,
    CodeBlock,
    Rule,
    BlankLine,
    Table,
]


class ParserState(Enum):
    """Parser states used while scanning Markdown content.

    Attributes:
        NORMAL: Default state for regular text.
        IN_CODE_BLOCK: Inside a fenced code block.
        IN_TABLE: Inside a contiguous run of pipe-delimited lines.
    """

    NORMAL = auto()
    IN_CODE_BLOCK = auto()
    IN_TABLE = auto()


@dataclass
class ParserContext:
    """Encapsulate parser state while walking Markdown text.

    The buffer belongs to the current state: code lines while in
    ``IN_CODE_BLOCK``, table rows while in ``IN_TABLE``. Every transition
    clears it.

    Attributes:
        state: Current parser state.
        code_lines: Raw lines collected for the open code block.
        table_rows: Cell texts collected for the open table region.
    """

    state: ParserState = ParserState.NORMAL
    code_lines: list[str] = field(default_factory=list)
    table_rows: list[list[str]] = field(default_factory=list)

    def transition(self, state: ParserState) -> None:
        self.state = state
        self.code_lines = []
        self.table_rows = []
