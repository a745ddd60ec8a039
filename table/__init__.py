"""
Table model: pure operations over an immutable table document.

Every structural operation takes a ``TableData`` snapshot and returns a
``TablePatch`` with the sections it replaced; ``apply_patch`` merges the
patch into the next snapshot.

  create_table / apply_patch             - document.py
  get_first_row, get_cell_attribute,
  is_cell_selected, is_empty_*           - queries.py
  update_selected_cell                   - selection.py
  insert_row / delete_row / move_row     - rows.py
  insert_column / delete_column          - columns.py
  toggle_section                         - sections.py
"""

from table.constants import normalize_count
from table.document import apply_patch, create_table
from table.queries import (
    get_cell_attribute,
    get_first_row,
    is_cell_selected,
    is_empty_row,
    is_empty_table_section,
)
from table.selection import update_selected_cell
from table.rows import delete_row, insert_row, move_row
from table.columns import delete_column, insert_column
from table.sections import toggle_section

__all__ = [
    "apply_patch",
    "create_table",
    "normalize_count",
    "get_cell_attribute",
    "get_first_row",
    "is_cell_selected",
    "is_empty_row",
    "is_empty_table_section",
    "update_selected_cell",
    "insert_row",
    "delete_row",
    "move_row",
    "insert_column",
    "delete_column",
    "toggle_section",
]
