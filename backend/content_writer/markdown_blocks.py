"""Line classification and block assembly for generated markdown.

The assembler is a single forward pass. Open list/table context lives in an
immutable :class:`_ScanState` value that each step receives and returns.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Literal

from .document_models import Block, Heading, ListBlock, ListItem, Paragraph, Table, TableRow
from .inline_format import format_inline

LineKind = Literal["blank", "heading", "bullet", "numbered", "table_separator", "table_row", "text"]

# Longest prefix first so "####" is never read as "###".
_HEADING_PREFIXES = (("#### ", 4), ("### ", 3), ("## ", 2), ("# ", 1))
_BULLET_PREFIXES = ("* ", "- ")
_NUMBERED_RE = re.compile(r"^\d+\.\s")
_SEPARATOR_CELL_RE = re.compile(r"^[-:]+$")


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    kind: LineKind
    text: str = ""
    level: int = 0
    cells: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class _ScanState:
    list_items: tuple[ListItem, ...] = ()
    table_rows: tuple[tuple[str, ...], ...] = ()
    in_table: bool = False


def split_table_cells(line: str) -> tuple[str, ...]:
    """Split a pipe row into trimmed, non-empty cells."""

    return tuple(cell.strip() for cell in line.split("|") if cell.strip())


def classify_line(raw: str) -> ClassifiedLine:
    """Classify one markdown line. Unrecognised lines are paragraph text."""

    line = raw.strip()
    if not line:
        return ClassifiedLine("blank")

    if line.startswith("|"):
        cells = split_table_cells(line)
        if all(_SEPARATOR_CELL_RE.match(cell) for cell in cells):
            return ClassifiedLine("table_separator", cells=cells)
        return ClassifiedLine("table_row", cells=cells)

    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return ClassifiedLine("heading", text=line[len(prefix):].strip(), level=level)

    if line.startswith(_BULLET_PREFIXES):
        return ClassifiedLine("bullet", text=line[2:].strip())

    numbered = _NUMBERED_RE.match(line)
    if numbered:
        return ClassifiedLine("numbered", text=line[numbered.end():].strip())

    return ClassifiedLine("text", text=line)


def _close_list(state: _ScanState) -> tuple[_ScanState, list[Block]]:
    if not state.list_items:
        return state, []
    return replace(state, list_items=()), [ListBlock(items=state.list_items)]


def _build_table(rows: tuple[tuple[str, ...], ...]) -> Table:
    return Table(
        rows=tuple(
            TableRow(
                is_header=index == 0,
                cells=cells,
                runs=tuple(format_inline(cell) for cell in cells),
            )
            for index, cells in enumerate(rows)
        )
    )


def _close_table(state: _ScanState) -> tuple[_ScanState, list[Block]]:
    if not state.in_table:
        return state, []
    closed = replace(state, table_rows=(), in_table=False)
    # A header without data rows (or a lone separator) is dropped.
    if len(state.table_rows) < 2:
        return closed, []
    return closed, [_build_table(state.table_rows)]


def _step(state: _ScanState, line: ClassifiedLine) -> tuple[_ScanState, list[Block]]:
    emitted: list[Block] = []

    if line.kind == "blank":
        state, blocks = _close_list(state)
        emitted.extend(blocks)
        state, blocks = _close_table(state)
        emitted.extend(blocks)
        return state, emitted

    if line.kind in ("table_separator", "table_row"):
        state, blocks = _close_list(state)
        emitted.extend(blocks)
        state = replace(state, in_table=True)
        if line.kind == "table_separator":
            return state, emitted
        return replace(state, table_rows=state.table_rows + (line.cells,)), emitted

    state, blocks = _close_table(state)
    emitted.extend(blocks)

    if line.kind in ("bullet", "numbered"):
        item = ListItem(ordered=line.kind == "numbered", text=line.text, runs=format_inline(line.text))
        return replace(state, list_items=state.list_items + (item,)), emitted

    state, blocks = _close_list(state)
    emitted.extend(blocks)
    if line.kind == "heading":
        emitted.append(Heading(level=line.level, text=line.text, runs=format_inline(line.text)))
    else:
        emitted.append(Paragraph(text=line.text, runs=format_inline(line.text)))
    return state, emitted


def assemble(markdown: str) -> list[Block]:
    """Group markdown lines into headings, lists, tables and paragraphs."""

    blocks: list[Block] = []
    state = _ScanState()
    for raw in (markdown or "").splitlines():
        state, emitted = _step(state, classify_line(raw))
        blocks.extend(emitted)

    # End of input closes open context exactly like a blank line.
    state, emitted = _step(state, ClassifiedLine("blank"))
    blocks.extend(emitted)
    return blocks


__all__ = ["ClassifiedLine", "LineKind", "assemble", "classify_line", "split_table_cells"]
