from pydantic import BaseModel, ConfigDict

from dto.section import SectionName


class CellLocation(BaseModel):
    """Address of a single cell: section, 0-based row, 0-based column."""

    model_config = ConfigDict(frozen=True)

    section_name: SectionName
    row_index: int
    column_index: int
