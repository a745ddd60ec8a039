"""Unit tests for read-only table queries."""

from conftest import make_row

from dto.coordinate import CellLocation
from dto.section import SectionName
from dto.selection import CellSelection, ColumnSelection
from dto.table_data import TableData, TableRow
from table import (
    get_cell_attribute,
    get_first_row,
    is_cell_selected,
    is_empty_row,
    is_empty_table_section,
)


def _loc(section, row, column) -> CellLocation:
    return CellLocation(section_name=section, row_index=row, column_index=column)


class TestEmptiness:
    """Tests for is_empty_row / is_empty_table_section."""

    def test_row_without_cells_is_empty(self) -> None:
        assert is_empty_row(TableRow())
        assert is_empty_row(None)
        assert not is_empty_row(make_row("x"))

    def test_absent_or_zero_row_section_is_empty(self) -> None:
        assert is_empty_table_section(None)
        assert is_empty_table_section(())

    def test_section_of_empty_rows_is_empty(self) -> None:
        assert is_empty_table_section((TableRow(), TableRow()))
        assert not is_empty_table_section((TableRow(), make_row("x")))


class TestGetFirstRow:
    """Tests for the template row lookup."""

    def test_prefers_head(self, with_head) -> None:
        assert get_first_row(with_head) is with_head.head[0]

    def test_falls_back_to_body(self, body_only) -> None:
        assert get_first_row(body_only) is body_only.body[0]

    def test_empty_head_rows_are_skipped(self, body_only) -> None:
        document = body_only.model_copy(update={"head": (TableRow(),)})
        assert get_first_row(document) is body_only.body[0]

    def test_empty_document(self) -> None:
        assert get_first_row(TableData()) is None


class TestGetCellAttribute:
    """Tests for get_cell_attribute."""

    def test_reads_attribute(self, with_head) -> None:
        assert get_cell_attribute(with_head, _loc("head", 0, 1), "align") == "right"
        assert get_cell_attribute(with_head, _loc("body", 0, 0), "content") == "r0c0"

    def test_missing_path_is_none(self, with_head) -> None:
        assert get_cell_attribute(with_head, _loc("body", 5, 0), "content") is None
        assert get_cell_attribute(with_head, _loc("body", 0, 9), "content") is None
        assert get_cell_attribute(with_head, _loc("body", -1, 0), "content") is None
        assert get_cell_attribute(with_head, _loc("body", 1, 0), "align") is None

    def test_unknown_attribute_or_location(self, with_head) -> None:
        assert get_cell_attribute(with_head, _loc("body", 0, 0), "colspan") is None
        assert get_cell_attribute(with_head, None, "content") is None


class TestIsCellSelected:
    """Tests for selection matching."""

    def test_column_selection_ignores_section_and_row(self) -> None:
        selection = ColumnSelection(column_index=1)
        assert is_cell_selected(_loc("head", 0, 1), selection)
        assert is_cell_selected(_loc("body", 7, 1), selection)
        assert not is_cell_selected(_loc("body", 0, 0), selection)

    def test_cell_selection_matches_all_coordinates(self) -> None:
        selection = CellSelection(section_name=SectionName.BODY, row_index=0, column_index=0)
        assert is_cell_selected(_loc("body", 0, 0), selection)
        assert not is_cell_selected(_loc("head", 0, 0), selection)
        assert not is_cell_selected(_loc("body", 1, 0), selection)
        assert not is_cell_selected(_loc("body", 0, 1), selection)

    def test_missing_or_unknown_selection_matches_nothing(self) -> None:
        assert not is_cell_selected(_loc("body", 0, 0), None)
        assert not is_cell_selected(_loc("body", 0, 0), {"type": "cell"})
        assert not is_cell_selected(None, ColumnSelection(column_index=0))
