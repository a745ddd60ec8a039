"""
Document construction and patch merging.
"""

from __future__ import annotations

from typing import Any

from dto.cell_data import CellData
from dto.section import SectionName
from dto.table_data import TableData, TablePatch, TableRow
from table.constants import DEFAULT_COLUMN_COUNT, DEFAULT_ROW_COUNT, normalize_count


def create_table(row_count: Any, column_count: Any) -> TableData:
    """Return a document whose body is a ``row_count`` x ``column_count`` grid."""
    rows = normalize_count(row_count, DEFAULT_ROW_COUNT)
    columns = normalize_count(column_count, DEFAULT_COLUMN_COUNT)
    tag = SectionName.BODY.cell_tag

    return TableData(
        body=tuple(
            TableRow(cells=tuple(CellData(content="", tag=tag) for _ in range(columns)))
            for _ in range(rows)
        )
    )


def apply_patch(document: TableData, patch: TablePatch | None) -> TableData:
    """Merge the sections of ``patch`` into a new snapshot of ``document``."""
    if patch is None or patch.is_empty:
        return document
    return document.model_copy(
        update={name.value: rows for name, rows in patch.sections.items()}
    )
