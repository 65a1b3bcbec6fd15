"""Inline emphasis handling for the markdown converter.

Two tokenizers live here on purpose. :func:`format_inline` applies ordered
substitution passes (code, bold and italic, bold, italic) and is what the
HTML path renders; an outer span may wrap an earlier one, so runs can carry
bold and italic together. :func:`split_bold_first` is the Word path: it
splits on bold markers first and only recognises italics when a whole
remaining fragment is one italic span, so a fragment is never bold and
italic at the same time.
"""
from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, Literal

from .document_models import InlineRun, Runs

Style = Literal["code", "bold", "italic"]

# Order matters: earlier passes claim text before later ones see it.
_INLINE_PASSES: tuple[tuple[re.Pattern[str], tuple[Style, ...]], ...] = (
    (re.compile(r"`(.+?)`"), ("code",)),
    (re.compile(r"\*\*\*(.+?)\*\*\*"), ("bold", "italic")),
    (re.compile(r"___(.+?)___"), ("bold", "italic")),
    (re.compile(r"\*\*(.+?)\*\*"), ("bold",)),
    (re.compile(r"__(.+?)__"), ("bold",)),
    (re.compile(r"\*(.+?)\*"), ("italic",)),
    (re.compile(r"_(.+?)_"), ("italic",)),
)

# Stands in for a claimed run in the text a pass scans.
_OPAQUE = "\ufffc"

_BOLD_SPLIT_RE = re.compile(r"(\*\*|__)(.+?)\1")
_WHOLE_ITALIC_RE = re.compile(r"^(?:\*([^*]+)\*|_([^_]+)_)$", re.DOTALL)

_STRIP_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\[([^\]]+)\]\([^)]*\)"), r"\1"),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"__(.+?)__"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"_(.+?)_"), r"\1"),
)


def _is_claimed(run: InlineRun) -> bool:
    """Code and bold text is never re-scanned by lower-priority passes."""

    return run.code or run.bold


def _same_style(left: InlineRun, right: InlineRun) -> bool:
    return (left.bold, left.italic, left.code) == (right.bold, right.italic, right.code)


def _merge(runs: Iterable[InlineRun]) -> list[InlineRun]:
    merged: list[InlineRun] = []
    for run in runs:
        if merged and _same_style(merged[-1], run):
            merged[-1] = replace(merged[-1], text=merged[-1].text + run.text)
        else:
            merged.append(run)
    return merged


def _apply_pass(
    runs: Iterable[InlineRun],
    pattern: re.Pattern[str],
    styles: tuple[Style, ...],
) -> list[InlineRun]:
    """Run one substitution pass over ``runs``.

    Unclaimed text is split into one cell per character; a claimed run is a
    single opaque cell. Markers only ever match unclaimed characters, while
    the span between them may enclose claimed runs, which then pick up the
    pass's styles as a whole.
    """

    cells: list[InlineRun] = []
    for run in runs:
        if _is_claimed(run):
            cells.append(run)
        else:
            cells.extend(replace(run, text=char) for char in run.text)

    scanned = "".join(_OPAQUE if _is_claimed(cell) else cell.text for cell in cells)
    flags = {style: True for style in styles}
    markers: set[int] = set()
    for match in pattern.finditer(scanned):
        markers.update(range(match.start(), match.start(1)))
        markers.update(range(match.end(1), match.end()))
        for index in range(match.start(1), match.end(1)):
            cells[index] = replace(cells[index], **flags)

    return _merge(cell for index, cell in enumerate(cells) if index not in markers)


def format_inline(text: str) -> Runs:
    """Return the styled runs of ``text`` using code, bold, italic precedence."""

    if not text:
        return ()
    runs: list[InlineRun] = [InlineRun(text=text)]
    for pattern, styles in _INLINE_PASSES:
        runs = _apply_pass(runs, pattern, styles)
    return tuple(runs)


def _word_fragment(fragment: str) -> list[InlineRun]:
    if not fragment:
        return []
    italic = _WHOLE_ITALIC_RE.match(fragment)
    if italic:
        return [InlineRun(text=strip_markdown(italic.group(1) or italic.group(2)), italic=True)]
    return [InlineRun(text=strip_markdown(fragment))]


def split_bold_first(text: str) -> Runs:
    """Tokenize ``text`` for the Word export: plain, bold or italic fragments."""

    runs: list[InlineRun] = []
    cursor = 0
    for match in _BOLD_SPLIT_RE.finditer(text):
        runs.extend(_word_fragment(text[cursor:match.start()]))
        runs.append(InlineRun(text=strip_markdown(match.group(2)), bold=True))
        cursor = match.end()
    runs.extend(_word_fragment(text[cursor:]))
    return tuple(run for run in runs if run.text)


def strip_markdown(text: str) -> str:
    """Remove inline markdown syntax, keeping the visible text.

    Substitutions are repeated until nothing changes, so the result is stable
    under a second call. Surrounding whitespace is left untouched.
    """

    previous = None
    while previous != text:
        previous = text
        for pattern, replacement in _STRIP_PATTERNS:
            text = pattern.sub(replacement, text)
    return text


def runs_to_text(runs: Iterable[InlineRun]) -> str:
    return "".join(run.text for run in runs)


__all__ = ["format_inline", "runs_to_text", "split_bold_first", "strip_markdown"]
