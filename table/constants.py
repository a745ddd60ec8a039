import logging
import os

from typing import Any, Tuple

from dto.cell_data import CellData

logger = logging.getLogger(__name__)

# Attributes that describe a cell's structural role, never inherited.
STRUCTURAL_ATTRIBUTES = frozenset({"content", "tag"})

FALLBACK_COUNT = 2


def parse_inherited_attributes(raw: str) -> Tuple[str, ...]:
    names = []
    for name in (part.strip() for part in raw.split(",")):
        if not name:
            continue
        if name not in CellData.model_fields or name in STRUCTURAL_ATTRIBUTES:
            logger.warning("Ignoring non-inheritable cell attribute %r", name)
            continue
        names.append(name)
    return tuple(names)


def normalize_count(value: Any, default: int) -> int:
    """
    Read a row / column count.  Anything that is not an integer >= 1
    (``None``, ``"abc"``, ``0``, ``-3``, ``True``) falls back to ``default``.
    """
    if isinstance(value, bool):
        count = None
    else:
        try:
            count = int(str(value).strip(), 10)
        except (TypeError, ValueError):
            count = None

    if count is None or count < 1:
        logger.warning("Invalid table count %r, using %d", value, default)
        return default
    return count


# Column-level attributes copied from the template row onto inserted rows.
INHERITED_COLUMN_ATTRIBUTES: Tuple[str, ...] = parse_inherited_attributes(
    os.getenv("TABLE_INHERITED_COLUMN_ATTRIBUTES", "align")
)

DEFAULT_ROW_COUNT: int = normalize_count(
    os.getenv("TABLE_DEFAULT_ROW_COUNT", str(FALLBACK_COUNT)), FALLBACK_COUNT
)
DEFAULT_COLUMN_COUNT: int = normalize_count(
    os.getenv("TABLE_DEFAULT_COLUMN_COUNT", str(FALLBACK_COUNT)), FALLBACK_COUNT
)

BLOCK_CLASS_NAME: str = os.getenv(
    "TABLE_BLOCK_CLASS_NAME", "wp-block-innocode-wp-block-custom-table"
)

FIXED_LAYOUT_CLASS_NAME = "has-fixed-layout"
