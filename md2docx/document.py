"""Assemble parsed blocks into a Word document with python-docx."""

from __future__ import annotations

from collections.abc import Iterable

from docx import Document
from docx.document import Document as DocxDocument
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor
from docx.text.paragraph import Paragraph as DocxParagraph

from .constants import (
    BLANK_LINE_SPACING,
    CODE_BLOCK_SPACING,
    CODE_FONT,
    HEADING_SPACING,
    LINK_COLOR,
    LIST_INDENT_INCHES,
    PARAGRAPH_SPACING,
    TASK_CHECKED_PREFIX,
    TASK_UNCHECKED_PREFIX,
)
from .models import (
    BlankLine,
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    InlineRun,
    ListItem,
    Paragraph,
    Rule,
    RunStyle,
    Table,
    TaskItem,
)
from .utils.logger import get_logger

logger = get_logger(__name__)


def _set_spacing(paragraph: DocxParagraph, spacing: tuple[float, float]) -> None:
    before, after = spacing
    paragraph.paragraph_format.space_before = Pt(before)
    paragraph.paragraph_format.space_after = Pt(after)


def add_runs(paragraph: DocxParagraph, runs: Iterable[InlineRun]) -> None:
    """Append inline runs to a paragraph, mapping each style to run formatting."""
    for inline_run in runs:
        if not inline_run.text:
            continue
        run = paragraph.add_run(inline_run.text)
        if inline_run.style is RunStyle.BOLD:
            run.bold = True
        elif inline_run.style is RunStyle.ITALIC:
            run.italic = True
        elif inline_run.style is RunStyle.STRIKE:
            run.font.strike = True
        elif inline_run.style is RunStyle.CODE:
            run.font.name = CODE_FONT
        elif inline_run.style is RunStyle.LINK:
            run.underline = True
            run.font.color.rgb = RGBColor(*LINK_COLOR)


def _add_bottom_border(paragraph: DocxParagraph) -> None:
    paragraph_properties = paragraph._p.get_or_add_pPr()
    borders = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "auto")
    borders.append(bottom)
    paragraph_properties.append(borders)


def _add_heading(document: DocxDocument, block: Heading) -> None:
    paragraph = document.add_heading(block.text, level=block.level)
    _set_spacing(paragraph, HEADING_SPACING.get(block.level, HEADING_SPACING[4]))


def _add_paragraph(document: DocxDocument, block: Paragraph) -> None:
    paragraph = document.add_paragraph()
    add_runs(paragraph, block.runs)
    _set_spacing(paragraph, PARAGRAPH_SPACING)


def _add_list_item(document: DocxDocument, block: ListItem) -> None:
    paragraph = document.add_paragraph(f"{block.marker} ")
    add_runs(paragraph, block.runs)
    _set_spacing(paragraph, PARAGRAPH_SPACING)
    paragraph.paragraph_format.left_indent = Inches(LIST_INDENT_INCHES)


def _add_task_item(document: DocxDocument, block: TaskItem) -> None:
    prefix = TASK_CHECKED_PREFIX if block.checked else TASK_UNCHECKED_PREFIX
    paragraph = document.add_paragraph(prefix)
    add_runs(paragraph, block.runs)
    _set_spacing(paragraph, PARAGRAPH_SPACING)
    paragraph.paragraph_format.left_indent = Inches(LIST_INDENT_INCHES)


def _add_block_quote(document: DocxDocument, block: BlockQuote) -> None:
    paragraph = document.add_paragraph(style="Quote")
    add_runs(paragraph, block.runs)


def _add_code_block(document: DocxDocument, block: CodeBlock) -> None:
    paragraph = document.add_paragraph()
    # Run.text turns "\n" into line breaks.
    run = paragraph.add_run(block.text)
    if block.monospace:
        run.font.name = CODE_FONT
    _set_spacing(paragraph, CODE_BLOCK_SPACING)


def _add_rule(document: DocxDocument, block: Rule) -> None:
    _add_bottom_border(document.add_paragraph())


def _add_blank_line(document: DocxDocument, block: BlankLine) -> None:
    _set_spacing(document.add_paragraph(""), BLANK_LINE_SPACING)


def _add_table(document: DocxDocument, block: Table) -> None:
    table = document.add_table(rows=len(block.rows), cols=block.column_count)
    table.style = "Table Grid"
    for row_index, row in enumerate(block.rows):
        for column_index, cell_runs in enumerate(row):
            paragraph = table.cell(row_index, column_index).paragraphs[0]
            add_runs(paragraph, cell_runs)
            if row_index == 0:
                for run in paragraph.runs:
                    run.bold = True


_BLOCK_WRITERS = {
    Heading: _add_heading,
    Paragraph: _add_paragraph,
    ListItem: _add_list_item,
    TaskItem: _add_task_item,
    BlockQuote: _add_block_quote,
    CodeBlock: _add_code_block,
    Rule: _add_rule,
    BlankLine: _add_blank_line,
    Table: _add_table,
}


def build_document(blocks: Iterable[Block], document: DocxDocument | None = None) -> DocxDocument:
    """Write block elements into a python-docx document.

    Args:
        blocks: Parsed blocks in document order.
        document: Document to append to; a new one from the default template
            when omitted.

    Returns:
        Document: The populated document, ready for `save`.

    Raises:
        TypeError: If a block is not one of the known element types.

    Examples:
        build_document(parse_blocks("# Title\\n\\nBody")).save("out.docx")
    """
    document = document if document is not None else Document()
    count = 0
    for block in blocks:
        writer = _BLOCK_WRITERS.get(type(block))
        if writer is None:
            raise TypeError(f"Unsupported block element: {type(block).__name__}")
        writer(document, block)
        count += 1
    logger.debug("Wrote %d blocks to document", count)
    return document
