"""Common document model definitions shared by the markdown converter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, TypeVar, Union

T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True, slots=True)
class InlineRun:
    """A contiguous span of text sharing one formatting style."""

    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False


Runs = tuple[InlineRun, ...]


@dataclass(frozen=True, slots=True)
class Heading:
    """Heading line.

    Parameters
    ----------
    level:
        Heading depth, ``1`` to ``4``.
    text:
        Raw inline markdown after the ``#`` prefix.
    runs:
        Canonical inline runs parsed from ``text``.
    """

    level: int
    text: str
    runs: Runs = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    ordered: bool
    text: str
    runs: Runs = ()


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Consecutive list lines; ordered and unordered items may be mixed."""

    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class TableRow:
    is_header: bool
    cells: tuple[str, ...]
    runs: tuple[Runs, ...] = ()


@dataclass(frozen=True, slots=True)
class Table:
    """A pipe table. The first row is the header, the rest are data rows."""

    rows: tuple[TableRow, ...]

    @property
    def header(self) -> TableRow | None:
        if self.rows and self.rows[0].is_header:
            return self.rows[0]
        return None

    @property
    def data_rows(self) -> tuple[TableRow, ...]:
        return tuple(row for row in self.rows if not row.is_header)


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str
    runs: Runs = ()


Block = Union[Heading, ListBlock, Table, Paragraph]


class BlockRenderer(Protocol[T_co]):
    """Turns an assembled block sequence into a target format."""

    def render(self, blocks: Iterable[Block]) -> T_co:
        ...


__all__ = [
    "Block",
    "BlockRenderer",
    "Heading",
    "InlineRun",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "Runs",
    "Table",
    "TableRow",
]
