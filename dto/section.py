"""
Section identifiers for a table document.

A table has exactly two sections, rendered top to bottom as
``<thead>`` then ``<tbody>``.  The cell tag of every cell is decided by
the section its row belongs to, via ``SECTION_CELL_TAGS``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from dto.cell_data import CellTag


class SectionName(str, Enum):
    HEAD = "head"
    BODY = "body"

    @property
    def cell_tag(self) -> CellTag:
        return SECTION_CELL_TAGS[self]


SECTION_CELL_TAGS: Dict[SectionName, CellTag] = {
    SectionName.HEAD: "th",
    SectionName.BODY: "td",
}

# Render order
SECTION_NAMES = (SectionName.HEAD, SectionName.BODY)
