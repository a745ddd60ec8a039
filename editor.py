"""
Table editor - CLI entry point.

Usage:
    python editor.py [<input>] [--create <rows>x<cols>] [--ops <ops.json>]
                     [--output <output.json>] [--html <out.html>] [--xlsx <out.xlsx>]

Loads a table document (a JSON dump of ``TableData`` or persisted
``<figure><table>`` markup, chosen by file extension) or creates a fresh
one, applies an operation script in order, and writes the resulting
document as JSON.  Optionally also renders it to markup and / or
exports it to a spreadsheet.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import dotenv

# Load .env before table.constants reads the environment
dotenv.load_dotenv()

from pydantic import ValidationError

from dto.operations import CreateTableOp, OperationScript
from dto.table_data import TableData
from table.dispatch import apply_operations
from utils.html import render_table_html
from utils.html_parser import parse_table_html
from utils.xlsx import export_table_xlsx

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)

_HTML_SUFFIXES = {".html", ".htm"}


# -------------------------------------------------------------------
# Loading
# -------------------------------------------------------------------


def load_document(file_path: str) -> TableData:
    """Read a document from JSON or, for ``.html`` files, from markup."""
    text = Path(file_path).read_text(encoding="utf-8")
    if Path(file_path).suffix.lower() in _HTML_SUFFIXES:
        return parse_table_html(text)
    return TableData.model_validate_json(text)


def load_operations(file_path: str) -> OperationScript:
    """
    Read an operation script.  Accepts either ``{"operations": [...]}``
    or a bare JSON list of operations.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if isinstance(raw, list):
        raw = {"operations": raw}
    return OperationScript.model_validate(raw)


def parse_dimensions(value: str) -> CreateTableOp:
    """Parse ``"3x4"`` into a create-table operation (3 rows, 4 columns)."""
    rows, sep, cols = value.lower().partition("x")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected <rows>x<cols>, got {value!r}")
    try:
        return CreateTableOp(row_count=int(rows), column_count=int(cols))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected <rows>x<cols>, got {value!r}"
        ) from exc


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def run(
    input_path: Optional[str],
    operations: List,
) -> TableData:
    document = load_document(input_path) if input_path else TableData()
    logger.info(
        "Loaded document: %d head row(s), %d body row(s)",
        len(document.head),
        len(document.body),
    )

    document = apply_operations(document, operations)
    logger.info(
        "Applied %d operation(s) -> %d head row(s), %d body row(s)",
        len(operations),
        len(document.head),
        len(document.body),
    )
    return document


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Apply structural edits to a table document.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Document to edit (.json dump or .html markup)",
    )
    parser.add_argument(
        "--create",
        type=parse_dimensions,
        default=None,
        metavar="ROWSxCOLS",
        help="Start from a new table of the given size (applied before --ops)",
    )
    parser.add_argument(
        "--ops",
        default=None,
        help="JSON file with the operations to apply",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_output.json or table_output.json)",
    )
    parser.add_argument(
        "--html",
        default=None,
        help="Also write the rendered markup to this path",
    )
    parser.add_argument(
        "--xlsx",
        default=None,
        help="Also export the table to this .xlsx path",
    )
    args = parser.parse_args(argv)

    if args.input and not os.path.isfile(args.input):
        logger.error("File not found: %s", args.input)
        sys.exit(1)

    operations: List = [args.create] if args.create else []
    if args.ops:
        if not os.path.isfile(args.ops):
            logger.error("Operations file not found: %s", args.ops)
            sys.exit(1)
        try:
            operations.extend(load_operations(args.ops).operations)
        except (ValidationError, json.JSONDecodeError) as exc:
            logger.error("Invalid operations file %s: %s", args.ops, exc)
            sys.exit(1)

    try:
        document = run(args.input, operations)
    except ValidationError as exc:
        logger.error("Invalid document %s: %s", args.input, exc)
        sys.exit(1)

    # Determine output path
    if args.output:
        output_path = args.output
    elif args.input:
        output_path = f"{Path(args.input).stem}_output.json"
    else:
        output_path = "table_output.json"

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(document.model_dump_json(indent=2, exclude_none=True))
    logger.info("Output written to %s", output_path)

    if args.html:
        Path(args.html).write_text(render_table_html(document), encoding="utf-8")
        logger.info("Markup written to %s", args.html)

    if args.xlsx:
        export_table_xlsx(document, args.xlsx)


if __name__ == "__main__":
    main()
