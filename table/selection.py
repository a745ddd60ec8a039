"""
Selection-scoped cell updates.

``update_selected_cell`` is the single mutation primitive for cell
attributes: a cell selection edits one cell's content, a column
selection applies e.g. an alignment to the whole column in both
sections.
"""

from __future__ import annotations

from typing import Callable, Optional

from dto.cell_data import CellData
from dto.coordinate import CellLocation
from dto.section import SECTION_NAMES
from dto.selection import CellSelection, ColumnSelection
from dto.table_data import TableData, TablePatch
from table.queries import is_cell_selected

CellUpdater = Callable[[CellData], CellData]


def update_selected_cell(
    document: TableData,
    selection: Optional[CellSelection | ColumnSelection],
    update_cell: CellUpdater,
) -> TablePatch:
    """
    Apply ``update_cell`` to every selected cell of both sections.

    Unselected cells, and rows without a selected cell, are reused as-is.
    Without a selection nothing is returned to merge.

    Cell selections filter on section and row by explicit equality, so a
    selection at row 0 touches row 0 only.
    """
    if selection is None:
        return TablePatch()

    sections = {}
    for section_name in SECTION_NAMES:
        section = document.section(section_name)
        if isinstance(selection, CellSelection) and selection.section_name != section_name:
            sections[section_name] = section
            continue

        new_rows = []
        for row_index, row in enumerate(section):
            if isinstance(selection, CellSelection) and selection.row_index != row_index:
                new_rows.append(row)
                continue

            changed = False
            cells = []
            for column_index, cell in enumerate(row.cells):
                location = CellLocation(
                    section_name=section_name,
                    row_index=row_index,
                    column_index=column_index,
                )
                if is_cell_selected(location, selection):
                    cell = update_cell(cell)
                    changed = True
                cells.append(cell)

            new_rows.append(row.model_copy(update={"cells": tuple(cells)}) if changed else row)

        sections[section_name] = tuple(new_rows)

    return TablePatch(sections=sections)
