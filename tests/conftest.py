"""Pytest configuration for the table editor tests.

This file is automatically loaded by pytest and sets up:
1. PYTHONPATH to include the project root (for `dto.*` / `table.*` imports)
2. Loading of a .env file if one exists
3. Shared document fixtures
"""

import sys
from pathlib import Path

import pytest

# tests/conftest.py -> tests -> project_root
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from dotenv import load_dotenv

_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

from dto.cell_data import CellData
from dto.table_data import TableData, TableRow


def make_row(*contents, tag="td", aligns=None):
    aligns = aligns or [None] * len(contents)
    return TableRow(
        cells=tuple(
            CellData(content=content, tag=tag, align=align)
            for content, align in zip(contents, aligns)
        )
    )


def contents(section):
    return [[cell.content for cell in row.cells] for row in section]


@pytest.fixture
def body_only() -> TableData:
    """3 x 3 body, no head."""
    return TableData(
        body=(
            make_row("a0", "a1", "a2"),
            make_row("b0", "b1", "b2"),
            make_row("c0", "c1", "c2"),
        )
    )


@pytest.fixture
def with_head() -> TableData:
    """1 x 2 head over a 2 x 2 body; column 1 right-aligned in the head."""
    return TableData(
        head=(make_row("H0", "H1", tag="th", aligns=[None, "right"]),),
        body=(
            make_row("r0c0", "r0c1", aligns=["center", None]),
            make_row("r1c0", "r1c1"),
        ),
    )
