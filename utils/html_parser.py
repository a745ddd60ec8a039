"""
Parse persisted table markup (see ``utils.html``) back into a TableData
document.

Inner HTML is serialised with ``RICH_TEXT_FORMATTER``, so content comes
back in the same canonical form the document stores it in.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from dto.cell_data import CellData
from dto.table_data import TableData, TableRow
from table.constants import FIXED_LAYOUT_CLASS_NAME
from utils.rich_text import RICH_TEXT_FORMATTER

logger = logging.getLogger(__name__)

_ALIGN_VALUES = ("left", "center", "right")
_ALIGN_CLASS_PREFIX = "has-text-align-"


def _cell_align(cell: Tag) -> Optional[str]:
    align = cell.get("data-align")
    if align in _ALIGN_VALUES:
        return align
    for class_name in cell.get("class") or []:
        if class_name.startswith(_ALIGN_CLASS_PREFIX):
            candidate = class_name[len(_ALIGN_CLASS_PREFIX):]
            if candidate in _ALIGN_VALUES:
                return candidate
    return None


def _parse_row(tr: Tag) -> TableRow:
    cells: List[CellData] = []
    for cell in tr.find_all(["th", "td"], recursive=False):
        cells.append(
            CellData(
                content=cell.decode_contents(formatter=RICH_TEXT_FORMATTER),
                tag=cell.name,
                scope=cell.get("scope") if cell.name == "th" else None,
                align=_cell_align(cell),
            )
        )
    return TableRow(cells=tuple(cells))


def _own_rows(container: Tag) -> List[Tag]:
    return container.find_all("tr", recursive=False)


def parse_table_html(markup: str) -> TableData:
    """
    Rebuild a document from ``<figure><table>`` markup.

    ``<thead>`` rows become the head, ``<tbody>`` rows (and rows placed
    directly in the table) the body.  Markup without a table yields an
    empty document.
    """
    soup = BeautifulSoup(markup or "", "html.parser")
    table = soup.find("table")
    if table is None:
        logger.debug("No <table> found in markup")
        return TableData()

    head: List[TableRow] = []
    body: List[TableRow] = []
    for child in table.find_all(["thead", "tbody", "tfoot", "tr"], recursive=False):
        if child.name == "thead":
            head.extend(_parse_row(tr) for tr in _own_rows(child))
        elif child.name == "tr":
            body.append(_parse_row(child))
        else:
            if child.name == "tfoot":
                logger.warning("Table footer rows are read into the body")
            body.extend(_parse_row(tr) for tr in _own_rows(child))

    caption = ""
    figure = table.find_parent("figure")
    figcaption = figure.find("figcaption") if figure is not None else None
    if figcaption is not None:
        caption = figcaption.decode_contents(formatter=RICH_TEXT_FORMATTER)

    return TableData(
        head=tuple(head),
        body=tuple(body),
        has_fixed_layout=FIXED_LAYOUT_CLASS_NAME in (table.get("class") or []),
        caption=caption,
    )
