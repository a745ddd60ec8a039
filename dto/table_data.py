"""
Table document DTOs.

    TableData
      ├─ head: Tuple[TableRow, ...]   (rendered as <thead>, th cells)
      ├─ body: Tuple[TableRow, ...]   (rendered as <tbody>, td cells)
      ├─ has_fixed_layout / caption   (block attributes)
      └─ TableRow.cells: Tuple[CellData, ...]

Every model is frozen and every sequence is a tuple, so a snapshot can be
handed around without anyone mutating it.  Operations build new tuples
and reuse untouched rows and cells as-is.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from dto.cell_data import CellData, RichText
from dto.section import SectionName


class TableRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    cells: Tuple[CellData, ...] = ()


Section = Tuple[TableRow, ...]


class TableData(BaseModel):
    """A complete table document snapshot."""

    model_config = ConfigDict(frozen=True)

    head: Section = ()
    body: Section = ()
    has_fixed_layout: bool = False
    caption: RichText = ""

    def section(self, section_name: SectionName | str) -> Section:
        return getattr(self, SectionName(section_name).value)


class TablePatch(BaseModel):
    """
    Partial document returned by every structural operation.

    Only the sections an operation produced are present in ``sections``;
    the caller merges them into its snapshot (see ``apply_patch``).
    """

    model_config = ConfigDict(frozen=True)

    sections: Dict[SectionName, Section] = {}

    @property
    def is_empty(self) -> bool:
        return not self.sections
