"""Tests for the editor.py command line entry point."""

import argparse
import json

import pytest

import editor
from dto.table_data import TableData
from utils.html import render_table_html
from utils.html_parser import parse_table_html
from table import create_table


class TestMain:
    """Tests for editor.main."""

    def test_create_and_apply_ops(self, tmp_path) -> None:
        ops = tmp_path / "ops.json"
        ops.write_text(
            json.dumps(
                [
                    {"op": "toggle_section", "section_name": "head"},
                    {"op": "delete_column", "column_index": 0},
                ]
            ),
            encoding="utf-8",
        )
        out_json = tmp_path / "out.json"
        out_html = tmp_path / "out.html"

        editor.main(
            ["--create", "2x3", "--ops", str(ops), "-o", str(out_json), "--html", str(out_html)]
        )

        document = TableData.model_validate_json(out_json.read_text(encoding="utf-8"))
        assert len(document.head) == 1
        assert [len(row.cells) for row in document.body] == [2, 2]
        assert parse_table_html(out_html.read_text(encoding="utf-8")) == document

    def test_html_input_and_xlsx_output(self, tmp_path) -> None:
        source = tmp_path / "table.html"
        source.write_text(render_table_html(create_table(1, 2)), encoding="utf-8")
        out_json = tmp_path / "result.json"
        out_xlsx = tmp_path / "result.xlsx"

        editor.main([str(source), "-o", str(out_json), "--xlsx", str(out_xlsx)])

        assert TableData.model_validate_json(out_json.read_text(encoding="utf-8")) == create_table(1, 2)
        assert out_xlsx.exists()

    def test_missing_input_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc:
            editor.main([str(tmp_path / "missing.json")])
        assert exc.value.code == 1

    def test_invalid_ops_exits(self, tmp_path) -> None:
        ops = tmp_path / "ops.json"
        ops.write_text(json.dumps([{"op": "explode"}]), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            editor.main(["--ops", str(ops), "-o", str(tmp_path / "o.json")])
        assert exc.value.code == 1

    def test_invalid_document_exits(self, tmp_path) -> None:
        source = tmp_path / "doc.json"
        source.write_text('{"body": "not rows"}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            editor.main([str(source), "-o", str(tmp_path / "o.json")])
        assert exc.value.code == 1


class TestParseDimensions:
    """Tests for the --create argument parser."""

    def test_valid(self) -> None:
        op = editor.parse_dimensions("3X4")
        assert (op.row_count, op.column_count) == (3, 4)

    @pytest.mark.parametrize("value", ["3", "axb", ""])
    def test_invalid(self, value) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            editor.parse_dimensions(value)
