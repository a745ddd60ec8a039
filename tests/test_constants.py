"""Unit tests for environment-driven table configuration."""

import importlib

import pytest

import table.constants as constants

from table.constants import (
    DEFAULT_COLUMN_COUNT,
    DEFAULT_ROW_COUNT,
    INHERITED_COLUMN_ATTRIBUTES,
    normalize_count,
    parse_inherited_attributes,
)


class TestInheritedAttributes:
    """Tests for parsing TABLE_INHERITED_COLUMN_ATTRIBUTES."""

    def test_default_is_alignment(self) -> None:
        assert INHERITED_COLUMN_ATTRIBUTES == ("align",)

    def test_parses_comma_separated_names(self) -> None:
        assert parse_inherited_attributes(" align , scope ") == ("align", "scope")

    def test_structural_and_unknown_names_ignored(self) -> None:
        assert parse_inherited_attributes("content,tag,colspan,align,") == ("align",)
        assert parse_inherited_attributes("") == ()


class TestDefaultCounts:
    """Tests for TABLE_DEFAULT_ROW_COUNT / TABLE_DEFAULT_COLUMN_COUNT parsing."""

    def test_defaults(self) -> None:
        assert (DEFAULT_ROW_COUNT, DEFAULT_COLUMN_COUNT) == (2, 2)

    def test_numeric_env_value(self) -> None:
        assert normalize_count(" 5 ", 2) == 5

    @pytest.mark.parametrize("raw", ["many", "", "0", "-4", "2.5"])
    def test_invalid_env_value_falls_back(self, raw) -> None:
        assert normalize_count(raw, 2) == 2

    def test_invalid_env_does_not_break_import(self, monkeypatch) -> None:
        monkeypatch.setenv("TABLE_DEFAULT_ROW_COUNT", "lots")
        monkeypatch.setenv("TABLE_DEFAULT_COLUMN_COUNT", "0")
        try:
            reloaded = importlib.reload(constants)
            assert (reloaded.DEFAULT_ROW_COUNT, reloaded.DEFAULT_COLUMN_COUNT) == (2, 2)
        finally:
            monkeypatch.undo()
            importlib.reload(constants)
