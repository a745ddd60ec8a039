"""
Row operations: insert, delete and move a row within one section.

Each operation returns a ``TablePatch`` holding only the section it
touched.  Out-of-range indices leave that section unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from dto.cell_data import CellData
from dto.section import SectionName
from dto.table_data import TableData, TablePatch, TableRow
from table.constants import INHERITED_COLUMN_ATTRIBUTES, STRUCTURAL_ATTRIBUTES
from table.queries import get_cell, get_first_row, row_width

logger = logging.getLogger(__name__)


def _unchanged(document: TableData, section_name: SectionName) -> TablePatch:
    return TablePatch(sections={section_name: document.section(section_name)})


def _inherited_attributes(
    template_cell: Optional[CellData], attribute_names: Sequence[str]
) -> dict:
    if template_cell is None:
        return {}
    return {
        name: getattr(template_cell, name)
        for name in attribute_names
        if name not in STRUCTURAL_ATTRIBUTES
        and getattr(template_cell, name, None) is not None
    }


def insert_row(
    document: TableData,
    section_name: SectionName | str,
    row_index: int,
    column_count: Optional[int] = None,
    inherited_attributes: Optional[Sequence[str]] = None,
) -> TablePatch:
    """
    Insert an empty row at ``row_index`` of the named section.

    The row is as wide as ``column_count`` or, if not given, as the
    template row (``get_first_row``).  Each new cell copies the column-level
    attributes (``INHERITED_COLUMN_ATTRIBUTES`` by default) from the
    template cell in the same column.
    """
    section_name = SectionName(section_name)
    section = document.section(section_name)
    template_row = get_first_row(document)
    cell_count = (
        row_width(template_row) if column_count is None else column_count
    )

    if not cell_count or cell_count < 1:
        logger.debug("insert_row: no column count for %s, skipping", section_name.value)
        return _unchanged(document, section_name)
    if not 0 <= row_index <= len(section):
        logger.debug(
            "insert_row: index %d out of range for %s (%d rows)",
            row_index, section_name.value, len(section),
        )
        return _unchanged(document, section_name)

    if inherited_attributes is None:
        inherited_attributes = INHERITED_COLUMN_ATTRIBUTES

    new_row = TableRow(
        cells=tuple(
            CellData(
                **_inherited_attributes(
                    get_cell(template_row, index), inherited_attributes
                ),
                content="",
                tag=section_name.cell_tag,
            )
            for index in range(cell_count)
        )
    )

    return TablePatch(
        sections={
            section_name: section[:row_index] + (new_row,) + section[row_index:]
        }
    )


def delete_row(
    document: TableData, section_name: SectionName | str, row_index: int
) -> TablePatch:
    section_name = SectionName(section_name)
    section = document.section(section_name)

    if not 0 <= row_index < len(section):
        logger.debug("delete_row: index %d out of range for %s", row_index, section_name.value)
        return _unchanged(document, section_name)

    return TablePatch(
        sections={section_name: section[:row_index] + section[row_index + 1:]}
    )


def move_row(
    document: TableData,
    section_name: SectionName | str,
    row_index: int,
    new_row_index: int,
) -> TablePatch:
    """
    Move the row at ``row_index`` so it ends up at ``new_row_index``.

    Rows between the two positions shift by one slot towards the old
    position; everything else keeps its place.  Moving between adjacent
    indices is a swap.
    """
    section_name = SectionName(section_name)
    section = document.section(section_name)

    if not row_width(get_first_row(document)):
        return _unchanged(document, section_name)
    if not (0 <= row_index < len(section) and 0 <= new_row_index < len(section)):
        logger.debug(
            "move_row: %d -> %d out of range for %s (%d rows)",
            row_index, new_row_index, section_name.value, len(section),
        )
        return _unchanged(document, section_name)

    moved = section[row_index]
    remaining = section[:row_index] + section[row_index + 1:]
    return TablePatch(
        sections={
            section_name: remaining[:new_row_index] + (moved,) + remaining[new_row_index:]
        }
    )
