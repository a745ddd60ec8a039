"""
Selection DTOs used to scope a batch cell update.

A selection either targets exactly one cell, or every cell sharing a
column index across both sections (alignment edits use the latter).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from dto.section import SectionName


class CellSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["cell"] = "cell"
    section_name: SectionName
    row_index: int
    column_index: int


class ColumnSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["column"] = "column"
    column_index: int


# -------------------------------------------------------------------
# Discriminated union  (for serialisation / Pydantic parsing)
# -------------------------------------------------------------------

Selection = Annotated[
    Union[CellSelection, ColumnSelection], Field(discriminator="type")
]
