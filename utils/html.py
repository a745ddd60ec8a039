"""
Utility to render a TableData document into its persisted markup:

    <figure class="wp-block-...">
      <table class="has-fixed-layout">
        <thead><tr><th scope="col">…</th></tr></thead>
        <tbody><tr><td class="has-text-align-center" data-align="center">…</td></tr></tbody>
      </table>
      <figcaption>…</figcaption>
    </figure>

Cell content and the caption are rich text (see ``utils.rich_text``) and
are written verbatim; attribute values are escaped.
"""

from __future__ import annotations

from typing import List

from dto.cell_data import CellData
from dto.section import SECTION_NAMES
from dto.table_data import Section, TableData
from table.constants import BLOCK_CLASS_NAME, FIXED_LAYOUT_CLASS_NAME

_SECTION_TAGS = {"head": "thead", "body": "tbody"}


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _render_cell(cell: CellData) -> str:
    attrs: List[str] = []
    if cell.align:
        attrs.append(f'class="has-text-align-{cell.align}"')
        attrs.append(f'data-align="{cell.align}"')
    if cell.tag == "th" and cell.scope:
        attrs.append(f'scope="{_escape_html(cell.scope)}"')

    open_tag = " ".join([cell.tag, *attrs])
    return f"<{open_tag}>{cell.content}</{cell.tag}>"


def _render_section(section_tag: str, rows: Section) -> List[str]:
    if not rows:
        return []

    parts = [f"<{section_tag}>"]
    for row in rows:
        parts.append("<tr>" + "".join(_render_cell(c) for c in row.cells) + "</tr>")
    parts.append(f"</{section_tag}>")
    return parts


def render_table_html(document: TableData) -> str:
    """
    Render ``document`` as ``<figure><table>`` markup.

    A document with neither head nor body rows renders to an empty string.
    """
    if not document.head and not document.body:
        return ""

    table_open = (
        f'<table class="{FIXED_LAYOUT_CLASS_NAME}">'
        if document.has_fixed_layout
        else "<table>"
    )
    parts: List[str] = [f'<figure class="{_escape_html(BLOCK_CLASS_NAME)}">', table_open]

    for section_name in SECTION_NAMES:
        parts.extend(
            _render_section(
                _SECTION_TAGS[section_name.value], document.section(section_name)
            )
        )

    parts.append("</table>")
    if document.caption:
        parts.append(f"<figcaption>{document.caption}</figcaption>")
    parts.append("</figure>")
    return "".join(parts)
