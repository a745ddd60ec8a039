from __future__ import annotations

import logging

from dto.section import SectionName
from dto.table_data import TableData, TablePatch
from table.queries import first_body_column_count, is_empty_table_section
from table.rows import insert_row

logger = logging.getLogger(__name__)


def toggle_section(document: TableData, section_name: SectionName | str) -> TablePatch:
    """
    Clear the named section if it has content, otherwise give it a single
    empty row as wide as the first body row (1 cell without a body).
    """
    section_name = SectionName(section_name)

    if not is_empty_table_section(document.section(section_name)):
        logger.debug("toggle_section: clearing %s", section_name.value)
        return TablePatch(sections={section_name: ()})

    return insert_row(
        document,
        section_name,
        0,
        column_count=first_body_column_count(document, default=1),
    )
