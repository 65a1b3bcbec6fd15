"""Render assembled markdown blocks into Word paragraphs."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Iterable

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.text.paragraph import Paragraph as DocxTextParagraph

from .document_models import Block, Heading, InlineRun, ListBlock, Paragraph, Runs, Table
from .inline_format import runs_to_text, split_bold_first, strip_markdown
from .markdown_blocks import assemble

logger = logging.getLogger(__name__)

TITLE_PLACEHOLDER = "Untitled"

# (space before, space after) in points per heading level.
_HEADING_SPACING = {
    1: (20.0, 10.0),
    2: (15.0, 7.5),
    3: (10.0, 5.0),
    4: (10.0, 5.0),
}
_BORDER_SIZE = "4"


@dataclass(frozen=True, slots=True)
class DocxParagraph:
    """One paragraph of the Word export before it is packaged.

    Parameters
    ----------
    style:
        Built-in Word style name (``Heading 1``, ``List Bullet`` ...).
    runs:
        Text runs; a run is plain, bold or italic, never bold and italic.
    border_bottom:
        Draw a thin rule under the paragraph (used for flattened table rows).
    """

    style: str
    runs: Runs = ()
    space_before_pt: float | None = None
    space_after_pt: float | None = None
    border_bottom: bool = False

    @property
    def text(self) -> str:
        return runs_to_text(self.runs)


class DocxRenderer:
    """Word strategy over the block sequence.

    Every list item becomes its own bullet or numbered paragraph. Tables are
    flattened: one paragraph per row with the cells joined by ``" | "`` and
    the header row in bold.
    """

    def __init__(self, title: str = "") -> None:
        self.title = title

    def render(self, blocks: Iterable[Block]) -> list[DocxParagraph]:
        title = self.title if self.title and self.title.strip() else TITLE_PLACEHOLDER
        paragraphs = [DocxParagraph(style="Heading 1", runs=(InlineRun(title),), space_after_pt=20.0)]

        for block in blocks:
            if isinstance(block, Heading):
                before, after = _HEADING_SPACING[block.level]
                paragraphs.append(
                    DocxParagraph(
                        style=f"Heading {block.level}",
                        runs=(InlineRun(strip_markdown(block.text)),),
                        space_before_pt=before,
                        space_after_pt=after,
                    )
                )
            elif isinstance(block, ListBlock):
                for item in block.items:
                    paragraphs.append(
                        DocxParagraph(
                            style="List Number" if item.ordered else "List Bullet",
                            runs=(InlineRun(strip_markdown(item.text)),),
                            space_after_pt=5.0,
                        )
                    )
            elif isinstance(block, Table):
                paragraphs.extend(self._flatten_table(block))
            elif isinstance(block, Paragraph):
                paragraphs.append(
                    DocxParagraph(style="Normal", runs=self._paragraph_runs(block.text), space_after_pt=10.0)
                )
        return paragraphs

    @staticmethod
    def _flatten_table(table: Table) -> list[DocxParagraph]:
        paragraphs = [
            DocxParagraph(
                style="Normal",
                runs=(InlineRun(" | ".join(strip_markdown(cell) for cell in row.cells), bold=row.is_header),),
                space_after_pt=5.0,
                border_bottom=True,
            )
            for row in table.rows
        ]
        paragraphs.append(DocxParagraph(style="Normal", space_after_pt=10.0))
        return paragraphs

    @staticmethod
    def _paragraph_runs(text: str) -> Runs:
        try:
            runs = split_bold_first(text)
        except Exception as exc:
            logger.warning("Inline formatting failed, using plain text: %s", exc)
            runs = ()
        return runs or (InlineRun(strip_markdown(text)),)


def _remove_placeholder_paragraph(document) -> None:
    """Remove the placeholder paragraph a document template may start with."""

    if document.paragraphs:
        element = document.paragraphs[0]._element  # type: ignore[attr-defined]
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)


def _add_bottom_border(paragraph: DocxTextParagraph) -> None:
    properties = paragraph._p.get_or_add_pPr()  # type: ignore[attr-defined]
    borders = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), _BORDER_SIZE)
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "000000")
    borders.append(bottom)
    properties.append(borders)


def build_docx(paragraphs: Iterable[DocxParagraph]) -> bytes:
    """Package rendered paragraphs into a DOCX payload."""

    document = Document()
    _remove_placeholder_paragraph(document)

    for node in paragraphs:
        paragraph = document.add_paragraph(style=node.style)
        for run in node.runs:
            docx_run = paragraph.add_run(run.text)
            if run.bold:
                docx_run.bold = True
            if run.italic:
                docx_run.italic = True
            if run.code:
                docx_run.font.name = "Courier New"
        # pBdr precedes w:spacing inside w:pPr.
        if node.border_bottom:
            _add_bottom_border(paragraph)
        if node.space_before_pt is not None:
            paragraph.paragraph_format.space_before = Pt(node.space_before_pt)
        if node.space_after_pt is not None:
            paragraph.paragraph_format.space_after = Pt(node.space_after_pt)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def markdown_to_docx(markdown: str, title: str) -> bytes:
    """Convert markdown text to a DOCX payload titled ``title``."""

    return build_docx(DocxRenderer(title).render(assemble(markdown)))


__all__ = ["DocxParagraph", "DocxRenderer", "TITLE_PLACEHOLDER", "build_docx", "markdown_to_docx"]
