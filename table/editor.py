"""
Headless editing session for a table block.

``TableEditor`` plays the part of the editing surface: it owns the
current document snapshot and the selected cell, and turns toolbar-style
commands ("insert row after", "align column center", ...) into table
operations.  Every command that needs a selected cell is a no-op
without one.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from dto.cell_data import CellAlign
from dto.coordinate import CellLocation
from dto.operations import (
    CellChanges,
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
from dto.section import SectionName
from dto.selection import CellSelection, ColumnSelection
from dto.table_data import TableData
from table.dispatch import apply_operation
from table.document import create_table
from table.queries import get_cell_attribute, section_names_with_rows

logger = logging.getLogger(__name__)

CENTERED_DOT = '<span class="centered-dot"></span>'


class TableEditor:

    def __init__(self, document: Optional[TableData] = None):
        self.document: TableData = document if document is not None else TableData()
        self.selected_cell: Optional[CellSelection] = None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_cell(
        self, section_name: SectionName | str, row_index: int, column_index: int
    ) -> None:
        self.selected_cell = CellSelection(
            section_name=SectionName(section_name),
            row_index=row_index,
            column_index=column_index,
        )

    def clear_selection(self) -> None:
        self.selected_cell = None

    def sections(self) -> List[SectionName]:
        """Sections that currently have rows, in render order."""
        return section_names_with_rows(self.document)

    # ------------------------------------------------------------------
    # Document-level commands
    # ------------------------------------------------------------------

    def create_table(self, row_count: Any, column_count: Any) -> None:
        created = create_table(row_count, column_count)
        self.document = self.document.model_copy(update={"head": (), "body": created.body})

    def toggle_fixed_layout(self) -> None:
        self._apply(SetFixedLayoutOp(has_fixed_layout=not self.document.has_fixed_layout))

    def set_caption(self, caption: str) -> None:
        self._apply(SetCaptionOp(caption=caption))

    def toggle_header_section(self) -> None:
        self._apply(ToggleSectionOp(section_name=SectionName.HEAD))

    # ------------------------------------------------------------------
    # Cell commands
    # ------------------------------------------------------------------

    def change_content(self, content: str) -> None:
        if self.selected_cell is None:
            return
        self._apply(
            UpdateCellOp(selection=self.selected_cell, changes=CellChanges(content=content))
        )

    def insert_centered_dot(self) -> None:
        self.change_content(CENTERED_DOT)

    def change_column_alignment(self, align: Optional[CellAlign]) -> None:
        if self.selected_cell is None:
            return
        self._apply(
            UpdateCellOp(
                selection=ColumnSelection(column_index=self.selected_cell.column_index),
                changes=CellChanges(align=align),
            )
        )

    def get_cell_alignment(self) -> Optional[CellAlign]:
        if self.selected_cell is None:
            return None
        location = CellLocation(
            section_name=self.selected_cell.section_name,
            row_index=self.selected_cell.row_index,
            column_index=self.selected_cell.column_index,
        )
        return get_cell_attribute(self.document, location, "align")

    # ------------------------------------------------------------------
    # Row commands
    # ------------------------------------------------------------------

    def insert_row_before(self) -> None:
        self._insert_row(0)

    def insert_row_after(self) -> None:
        self._insert_row(1)

    def _insert_row(self, delta: int) -> None:
        if self.selected_cell is None:
            return
        section_name = self.selected_cell.section_name
        new_row_index = self.selected_cell.row_index + delta
        before = len(self.document.section(section_name))

        self._apply(InsertRowOp(section_name=section_name, row_index=new_row_index))

        if len(self.document.section(section_name)) > before:
            self.select_cell(section_name, new_row_index, 0)

    def delete_row(self) -> None:
        if self.selected_cell is None:
            return
        op = DeleteRowOp(
            section_name=self.selected_cell.section_name,
            row_index=self.selected_cell.row_index,
        )
        self.clear_selection()
        self._apply(op)

    def move_row_up(self) -> None:
        self._move_row(-1)

    def move_row_down(self) -> None:
        self._move_row(1)

    def _move_row(self, delta: int) -> None:
        if self.selected_cell is None:
            return
        selected = self.selected_cell
        section = self.document.section(selected.section_name)
        new_row_index = selected.row_index + delta
        if not 0 <= new_row_index < len(section):
            return

        self._apply(
            MoveRowOp(
                section_name=selected.section_name,
                row_index=selected.row_index,
                new_row_index=new_row_index,
            )
        )
        self.select_cell(selected.section_name, new_row_index, selected.column_index)

    # ------------------------------------------------------------------
    # Column commands
    # ------------------------------------------------------------------

    def insert_column_before(self) -> None:
        self._insert_column(0)

    def insert_column_after(self) -> None:
        self._insert_column(1)

    def _insert_column(self, delta: int) -> None:
        if self.selected_cell is None:
            return
        new_column_index = self.selected_cell.column_index + delta
        self._apply(InsertColumnOp(column_index=new_column_index))
        self.select_cell(self.selected_cell.section_name, 0, new_column_index)

    def delete_column(self) -> None:
        if self.selected_cell is None:
            return
        op = DeleteColumnOp(column_index=self.selected_cell.column_index)
        self.clear_selection()
        self._apply(op)

    # ------------------------------------------------------------------

    def _apply(self, operation) -> None:
        logger.debug("Editor command: %s", operation.op)
        self.document = apply_operation(self.document, operation)
