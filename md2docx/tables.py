"""Pipe-table helpers shared by the block parser and the email formatter."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import TABLE_CELL_SEPARATOR, TABLE_RULE_JOINER, TABLE_SEPARATOR_CHARS


def is_table_line(line: str) -> bool:
    return "|" in line


def is_separator_row(line: str) -> bool:
    """Return True for header/body separator lines such as ``|---|:--:|``.

    Examples:
        is_separator_row("| --- | :-: |")  # True
        is_separator_row("| : | |")  # False, no dash
    """
    return "-" in line and all(
        character in TABLE_SEPARATOR_CHARS or character.isspace() for character in line
    )


def split_table_row(line: str) -> list[str]:
    """Split a pipe-delimited line into trimmed cell texts.

    The empty cells produced by leading and trailing pipes are dropped; empty
    cells between pipes are kept.

    Examples:
        split_table_row("| a | b |")  # ["a", "b"]
        split_table_row("a || b")  # ["a", "", "b"]
    """
    cells = [cell.strip() for cell in line.split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Compute the widest cell per column index.

    Shorter rows do not contribute to columns they lack.
    """
    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            if index == len(widths):
                widths.append(len(cell))
            else:
                widths[index] = max(widths[index], len(cell))
    return widths


def render_table(rows: Sequence[Sequence[str]]) -> str:
    """Render rows of cell text as an aligned plain-text table.

    Cells are right-padded to their column width and joined with ``" | "``.
    A dashed rule, joined with ``"-+-"``, follows the first (header) row.
    Ragged rows are tolerated: a short row simply ends early.

    Args:
        rows: Cell texts, one sequence per row.

    Returns:
        str: Rendered lines joined with newlines; empty for no rows.

    Examples:
        render_table([["a", "bb"], ["ccc", "d"]])
        # "a   | bb\\n----+---\\nccc | d "
    """
    widths = column_widths(rows)
    lines = []
    for row_index, row in enumerate(rows):
        lines.append(
            TABLE_CELL_SEPARATOR.join(cell.ljust(widths[index]) for index, cell in enumerate(row))
        )
        if row_index == 0:
            lines.append(TABLE_RULE_JOINER.join("-" * width for width in widths))
    return "\n".join(lines)
