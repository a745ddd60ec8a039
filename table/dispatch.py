"""
Apply serialised operations (``dto.operations``) to a document snapshot.

Every handler takes the current snapshot and one operation and returns
the next snapshot; the input is never modified.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Type

from pydantic import BaseModel

from dto.cell_data import CellData
from dto.operations import (
    CreateTableOp,
    DeleteColumnOp,
    DeleteRowOp,
    InsertColumnOp,
    InsertRowOp,
    MoveRowOp,
    SetCaptionOp,
    SetFixedLayoutOp,
    ToggleSectionOp,
    UpdateCellOp,
)
from dto.table_data import TableData
from table.columns import delete_column, insert_column
from table.document import apply_patch, create_table
from table.rows import delete_row, insert_row, move_row
from table.sections import toggle_section
from table.selection import update_selected_cell

logger = logging.getLogger(__name__)


def _create_table(document: TableData, op: CreateTableOp) -> TableData:
    created = create_table(op.row_count, op.column_count)
    return document.model_copy(update={"head": (), "body": created.body})


def _update_cell(document: TableData, op: UpdateCellOp) -> TableData:
    changes = op.changes.model_dump(exclude_unset=True)

    def update(cell: CellData) -> CellData:
        return CellData.model_validate({**cell.model_dump(), **changes})

    return apply_patch(document, update_selected_cell(document, op.selection, update))


_HANDLERS: Dict[Type[BaseModel], Callable[[TableData, BaseModel], TableData]] = {
    CreateTableOp: _create_table,
    InsertRowOp: lambda doc, op: apply_patch(
        doc, insert_row(doc, op.section_name, op.row_index, column_count=op.column_count)
    ),
    DeleteRowOp: lambda doc, op: apply_patch(
        doc, delete_row(doc, op.section_name, op.row_index)
    ),
    MoveRowOp: lambda doc, op: apply_patch(
        doc, move_row(doc, op.section_name, op.row_index, op.new_row_index)
    ),
    InsertColumnOp: lambda doc, op: apply_patch(doc, insert_column(doc, op.column_index)),
    DeleteColumnOp: lambda doc, op: apply_patch(doc, delete_column(doc, op.column_index)),
    ToggleSectionOp: lambda doc, op: apply_patch(doc, toggle_section(doc, op.section_name)),
    UpdateCellOp: _update_cell,
    SetFixedLayoutOp: lambda doc, op: doc.model_copy(
        update={"has_fixed_layout": op.has_fixed_layout}
    ),
    SetCaptionOp: lambda doc, op: doc.model_copy(update={"caption": op.caption}),
}


def apply_operation(document: TableData, operation: BaseModel) -> TableData:
    handler = _HANDLERS.get(type(operation))
    if handler is None:
        raise ValueError(f"Unknown table operation: {operation!r}")
    logger.debug("Applying %s", operation)
    return handler(document, operation)


def apply_operations(document: TableData, operations: Iterable[BaseModel]) -> TableData:
    """Apply ``operations`` in order, returning the final snapshot."""
    for operation in operations:
        document = apply_operation(document, operation)
    return document
