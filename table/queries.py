"""
Read-only helpers over a table document: emptiness checks, the template
row, cell attribute lookup and selection matching.

None of these raise on a missing path; an absent section, row, cell or
attribute simply reads as empty / ``None``.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from dto.cell_data import CellData
from dto.coordinate import CellLocation
from dto.section import SECTION_NAMES, SectionName
from dto.selection import CellSelection, ColumnSelection
from dto.table_data import Section, TableData, TableRow


def is_empty_row(row: Optional[TableRow]) -> bool:
    return row is None or not row.cells


def is_empty_table_section(section: Optional[Iterable[TableRow]]) -> bool:
    """True if the section is absent, has no rows, or only empty rows."""
    if not section:
        return True
    return all(is_empty_row(row) for row in section)


def get_first_row(document: TableData) -> Optional[TableRow]:
    """
    Return the row new rows take their shape from: the first head row if
    the head has content, else the first body row, else ``None``.
    """
    if not is_empty_table_section(document.head):
        return document.head[0]
    if not is_empty_table_section(document.body):
        return document.body[0]
    return None


def get_row(section: Section, row_index: int) -> Optional[TableRow]:
    if 0 <= row_index < len(section):
        return section[row_index]
    return None


def get_cell(row: Optional[TableRow], column_index: int) -> Optional[CellData]:
    if row is not None and 0 <= column_index < len(row.cells):
        return row.cells[column_index]
    return None


def get_cell_attribute(
    document: TableData,
    cell_location: Optional[CellLocation],
    attribute_name: str,
) -> Any:
    if cell_location is None:
        return None
    try:
        section = document.section(cell_location.section_name)
    except ValueError:
        return None
    cell = get_cell(
        get_row(section, cell_location.row_index), cell_location.column_index
    )
    if cell is None or attribute_name not in CellData.model_fields:
        return None
    return getattr(cell, attribute_name)


def is_cell_selected(cell_location: Optional[CellLocation], selection) -> bool:
    """
    Match a cell location against a selection.

    Column selections match on ``column_index`` alone, cell selections on
    all three coordinates.  Anything else matches nothing.
    """
    if cell_location is None or selection is None:
        return False

    if isinstance(selection, ColumnSelection):
        return cell_location.column_index == selection.column_index
    if isinstance(selection, CellSelection):
        return (
            cell_location.section_name == selection.section_name
            and cell_location.row_index == selection.row_index
            and cell_location.column_index == selection.column_index
        )
    return False


def row_width(row: Optional[TableRow]) -> int:
    return 0 if row is None else len(row.cells)


def first_body_column_count(document: TableData, default: int = 1) -> int:
    """Cell count of the first body row, ``default`` if there is no body row."""
    if not document.body:
        return default
    return len(document.body[0].cells)


def section_names_with_rows(document: TableData) -> List[SectionName]:
    return [
        name
        for name in SECTION_NAMES
        if not is_empty_table_section(document.section(name))
    ]
