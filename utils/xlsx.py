"""
Spreadsheet export / import for table documents.

Head rows are written first (bold), then body rows.  Rich-text content is
reduced to its plain text, and plain text is escaped back into rich text
on import.  Column alignment maps onto the cell's horizontal alignment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dto.cell_data import CellData
from dto.section import SectionName
from dto.table_data import TableData, TableRow
from utils.rich_text import escape_text

logger = logging.getLogger(__name__)

_ALIGN_VALUES = ("left", "center", "right")


def _coord(col: int, row: int) -> str:
    """Return an A1-style coordinate from 1-based col/row indices."""
    return f"{get_column_letter(col)}{row}"


def _plain_text(content: str) -> str:
    if not content:
        return ""
    return BeautifulSoup(content, "html.parser").get_text()


# -------------------------------------------------------------------
# Export
# -------------------------------------------------------------------


def write_table_sheet(
    document: TableData,
    ws: Worksheet,
    start_row: int = 1,
    start_col: int = 1,
) -> Optional[str]:
    """
    Write ``document`` into ``ws`` with its top-left cell at
    (``start_row``, ``start_col``).

    Returns the A1 range written (e.g. ``"A1:C4"``), or ``None`` when the
    document has no rows.
    """
    rows = list(document.head) + list(document.body)
    if not rows:
        return None

    width = max(len(row.cells) for row in rows)
    for row_offset, row in enumerate(rows):
        for col_offset, cell in enumerate(row.cells):
            ws_cell = ws.cell(
                row=start_row + row_offset,
                column=start_col + col_offset,
                value=_plain_text(cell.content) or None,
            )
            if cell.tag == "th":
                ws_cell.font = Font(bold=True)
            if cell.align:
                ws_cell.alignment = Alignment(horizontal=cell.align)

    end_row = start_row + len(rows) - 1
    end_col = start_col + max(width, 1) - 1
    cell_range = f"{_coord(start_col, start_row)}:{_coord(end_col, end_row)}"
    logger.debug("Wrote table to %s!%s", ws.title, cell_range)
    return cell_range


def export_table_xlsx(
    document: TableData, path: str | Path, sheet_name: str = "Table"
) -> None:
    """Write ``document`` to a new workbook file at ``path``."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    write_table_sheet(document, ws)
    wb.save(str(path))
    logger.info("Table exported to %s", path)


# -------------------------------------------------------------------
# Import
# -------------------------------------------------------------------


def read_table_sheet(ws: Worksheet, header_row_count: int = 0) -> TableData:
    """
    Read the used range of ``ws`` into a document.

    The first ``header_row_count`` rows become the head (``th`` cells);
    the remaining rows become the body.
    """
    grid = [
        list(row)
        for row in ws.iter_rows(
            min_row=ws.min_row,
            max_row=ws.max_row,
            min_col=ws.min_column,
            max_col=ws.max_column,
        )
    ]
    if all(cell.value is None for row in grid for cell in row):
        return TableData()

    head: List[TableRow] = []
    body: List[TableRow] = []
    for index, row in enumerate(grid):
        section = SectionName.HEAD if index < header_row_count else SectionName.BODY
        cells = []
        for ws_cell in row:
            horizontal = ws_cell.alignment.horizontal if ws_cell.alignment else None
            cells.append(
                CellData(
                    content="" if ws_cell.value is None else escape_text(str(ws_cell.value)),
                    tag=section.cell_tag,
                    align=horizontal if horizontal in _ALIGN_VALUES else None,
                )
            )
        (head if section is SectionName.HEAD else body).append(
            TableRow(cells=tuple(cells))
        )

    return TableData(head=tuple(head), body=tuple(body))
