"""
Column operations.  A column is not stored anywhere: it is the set of
cells sharing an index across every row of both sections, so inserting
or deleting one rewrites each row independently.
"""

from __future__ import annotations

import logging

from dto.cell_data import CellData
from dto.section import SECTION_NAMES
from dto.table_data import TableData, TablePatch, TableRow
from table.queries import is_empty_row, is_empty_table_section

logger = logging.getLogger(__name__)


def insert_column(document: TableData, column_index: int) -> TablePatch:
    """
    Insert an empty cell at ``column_index`` in every row of both sections.

    Empty rows and rows with fewer than ``column_index`` cells are left
    alone.
    """
    if column_index < 0:
        logger.debug("insert_column: negative index %d, skipping", column_index)
        return TablePatch(
            sections={name: document.section(name) for name in SECTION_NAMES}
        )

    sections = {}
    for section_name in SECTION_NAMES:
        section = document.section(section_name)
        if is_empty_table_section(section):
            sections[section_name] = section
            continue

        new_cell = CellData(content="", tag=section_name.cell_tag)
        sections[section_name] = tuple(
            row
            if is_empty_row(row) or len(row.cells) < column_index
            else TableRow(
                cells=row.cells[:column_index] + (new_cell,) + row.cells[column_index:]
            )
            for row in section
        )

    return TablePatch(sections=sections)


def delete_column(document: TableData, column_index: int) -> TablePatch:
    """
    Remove the cell at ``column_index`` from every row of both sections.
    Rows left without cells are dropped from their section.
    """
    sections = {}
    for section_name in SECTION_NAMES:
        section = document.section(section_name)
        if is_empty_table_section(section) or column_index < 0:
            sections[section_name] = section
            continue

        rows = (
            TableRow(cells=row.cells[:column_index] + row.cells[column_index + 1:])
            if column_index < len(row.cells)
            else row
            for row in section
        )
        sections[section_name] = tuple(row for row in rows if row.cells)

    return TablePatch(sections=sections)
