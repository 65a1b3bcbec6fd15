"""Render assembled markdown blocks as HTML for the PDF export."""
from __future__ import annotations

from html import escape
from typing import Iterable

from .document_models import Block, Heading, ListBlock, Paragraph, Runs, Table
from .markdown_blocks import assemble

# Page look of the exported PDF: A4, Arial 14px, 40px padding.
EXPORT_CSS = """
@page {
    size: A4;
    margin: 0;
}

body {
    margin: 0;
    background: #ffffff;
}

.export-content {
    padding: 40px;
    color: #000000;
    font-family: Arial, sans-serif;
    font-size: 14px;
    line-height: 1.6;
}

.export-content h1,
.export-content h2,
.export-content h3,
.export-content h4 {
    font-weight: 700;
    margin: 1em 0 0.5em;
}

.export-content ul {
    margin: 0.5em 0 1em 1.5em;
    padding: 0;
}

.export-content table {
    border-collapse: collapse;
    width: 100%;
    margin: 20px 0;
}

.export-content th,
.export-content td {
    border: 1px solid #000000;
    padding: 4px 8px;
    text-align: left;
}

.export-content th {
    background: #f0f0f0;
}

.export-content code {
    font-family: 'Courier New', monospace;
    background: #f0f0f0;
    padding: 0 2px;
}
"""


# Outermost first.
_RUN_TAGS = (("bold", "strong"), ("italic", "em"), ("code", "code"))


def render_runs(runs: Runs) -> str:
    """Render runs as HTML, keeping a tag open across runs that share it."""

    parts: list[str] = []
    open_tags: list[str] = []
    for run in runs:
        wanted = [tag for flag, tag in _RUN_TAGS if getattr(run, flag)]
        while any(tag not in wanted for tag in open_tags):
            parts.append(f"</{open_tags.pop()}>")
        for tag in wanted:
            if tag not in open_tags:
                parts.append(f"<{tag}>")
                open_tags.append(tag)
        parts.append(escape(run.text, quote=False))
    parts.extend(f"</{tag}>" for tag in reversed(open_tags))
    return "".join(parts)


class HtmlRenderer:
    """HTML strategy over the block sequence.

    Ordered and unordered items of one list block share a single ``<ul>``;
    numbering is not preserved on this path.
    """

    def render(self, blocks: Iterable[Block]) -> str:
        parts: list[str] = []
        for block in blocks:
            if isinstance(block, Heading):
                parts.append(f"<h{block.level}>{render_runs(block.runs)}</h{block.level}>")
            elif isinstance(block, ListBlock):
                items = "".join(f"<li>{render_runs(item.runs)}</li>" for item in block.items)
                parts.append(f"<ul>{items}</ul>")
            elif isinstance(block, Table):
                parts.append(self._render_table(block))
            elif isinstance(block, Paragraph):
                parts.append(f"<p>{render_runs(block.runs)}</p>")
        return "\n".join(parts)

    @staticmethod
    def _render_table(table: Table) -> str:
        head = ""
        if table.header is not None:
            cells = "".join(f"<th>{render_runs(runs)}</th>" for runs in table.header.runs)
            head = f"<thead><tr>{cells}</tr></thead>"
        body_rows = "".join(
            "<tr>" + "".join(f"<td>{render_runs(runs)}</td>" for runs in row.runs) + "</tr>"
            for row in table.data_rows
        )
        return f"<table>{head}<tbody>{body_rows}</tbody></table>"


def markdown_to_html(markdown: str) -> str:
    """Convert markdown text to an HTML fragment."""

    return HtmlRenderer().render(assemble(markdown))


def build_html_document(fragment: str, title: str = "Document") -> str:
    """Wrap an HTML fragment into a standalone page ready for rasterization."""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{escape(title or "Document")}</title>
    <style>
{EXPORT_CSS}
    </style>
</head>
<body>
    <div class="export-content">
{_indent(fragment, 8)}
    </div>
</body>
</html>"""


def _indent(html: str, spaces: int = 4) -> str:
    if not html or not html.strip():
        return ""
    prefix = " " * spaces
    return "\n".join(prefix + line for line in html.strip().splitlines())


__all__ = ["EXPORT_CSS", "HtmlRenderer", "build_html_document", "markdown_to_html", "render_runs"]
