"""
Operation DTOs: the serialisable vocabulary of table edits.

An operation script is a JSON list of objects discriminated by ``op``:

    [
      {"op": "create_table", "row_count": 2, "column_count": 3},
      {"op": "toggle_section", "section_name": "head"},
      {"op": "insert_row", "section_name": "body", "row_index": 1},
      {"op": "update_cell",
       "selection": {"type": "column", "column_index": 0},
       "changes": {"align": "center"}}
    ]

Each operation maps one-to-one onto a table model call (see
``table.dispatch``).
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dto.cell_data import CellAlign, RichText
from dto.section import SectionName
from dto.selection import Selection


class CellChanges(BaseModel):
    """Partial cell attributes; only the fields actually given are applied."""

    model_config = ConfigDict(frozen=True)

    content: Optional[RichText] = None
    scope: Optional[str] = None
    align: Optional[CellAlign] = None

    @field_validator("content", mode="before")
    @classmethod
    def content_is_text(cls, value):
        # A given content replaces the cell's; it cannot be cleared to null
        if value is None:
            raise ValueError("content must be a string")
        return value


# -------------------------------------------------------------------
# Concrete operation types
# -------------------------------------------------------------------

class CreateTableOp(BaseModel):
    op: Literal["create_table"] = "create_table"
    row_count: int = 2
    column_count: int = 2


class InsertRowOp(BaseModel):
    op: Literal["insert_row"] = "insert_row"
    section_name: SectionName
    row_index: int
    column_count: Optional[int] = None


class DeleteRowOp(BaseModel):
    op: Literal["delete_row"] = "delete_row"
    section_name: SectionName
    row_index: int


class MoveRowOp(BaseModel):
    op: Literal["move_row"] = "move_row"
    section_name: SectionName
    row_index: int
    new_row_index: int


class InsertColumnOp(BaseModel):
    op: Literal["insert_column"] = "insert_column"
    column_index: int


class DeleteColumnOp(BaseModel):
    op: Literal["delete_column"] = "delete_column"
    column_index: int


class ToggleSectionOp(BaseModel):
    op: Literal["toggle_section"] = "toggle_section"
    section_name: SectionName


class UpdateCellOp(BaseModel):
    op: Literal["update_cell"] = "update_cell"
    selection: Selection
    changes: CellChanges


class SetFixedLayoutOp(BaseModel):
    op: Literal["set_fixed_layout"] = "set_fixed_layout"
    has_fixed_layout: bool


class SetCaptionOp(BaseModel):
    op: Literal["set_caption"] = "set_caption"
    caption: RichText


# -------------------------------------------------------------------
# Discriminated union  (for serialisation / Pydantic parsing)
# -------------------------------------------------------------------

Operation = Annotated[
    Union[
        CreateTableOp,
        InsertRowOp,
        DeleteRowOp,
        MoveRowOp,
        InsertColumnOp,
        DeleteColumnOp,
        ToggleSectionOp,
        UpdateCellOp,
        SetFixedLayoutOp,
        SetCaptionOp,
    ],
    Field(discriminator="op"),
]


class OperationScript(BaseModel):
    """A sequence of operations applied in order to one document."""

    operations: List[Operation] = []
