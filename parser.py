"""
Workbook reader: CLI entry point.

Usage:
    python parser.py <excel_file> [--output <output.json>] [--sheet <sheet_name>] [--include-drawings]

Opens an .xlsx package, resolves every worksheet (populated cells with
their values and formatting, merged ranges, tables and, on request, the
drawing tree) and writes the result as a single JSON file.

If --sheet is provided, only that worksheet is processed.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import config
from dto.cell import EmptyValue
from dto.output import SheetResult, WorkbookResult
from errors import XlsxError
from excel import Excel
from resolvers.worksheet import Worksheet

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Pipeline
# -------------------------------------------------------------------


def _sheet_result(sheet: Worksheet, include_drawings: bool) -> SheetResult:
    cells = [cell for cell in sheet.cells() if not isinstance(cell.value, EmptyValue)]
    return SheetResult(
        sheet_name=sheet.name,
        sheet_id=sheet.sheet_id,
        dimension=sheet.dimension,
        merged_cells=sheet.merged_cells,
        cells=cells,
        tables=sheet.tables,
        drawings=sheet.drawings if include_drawings else None,
    )


def parse_workbook(
    file_path: str,
    sheet_name_filter: Optional[str] = None,
    include_drawings: bool = False,
) -> WorkbookResult:
    """
    Resolve the workbook at ``file_path`` into a ``WorkbookResult``.

    A sheet that fails to resolve is logged and reported with no cells so
    one corrupt sheet does not lose the rest of the workbook.
    """
    with Excel.from_path(file_path) as excel:
        if sheet_name_filter:
            infos = [excel.get_sheet_by_name(sheet_name_filter)]
        else:
            infos = excel.get_sheets()

        sheet_results = []
        for info in infos:
            logger.info("Processing sheet: %s", info.name)
            try:
                sheet = excel.get_worksheet(info, include_drawings=include_drawings)
                result = _sheet_result(sheet, include_drawings)
            except XlsxError:
                logger.exception("Failed to process sheet '%s', adding empty result", info.name)
                result = SheetResult(sheet_name=info.name, sheet_id=info.sheet_id)
            sheet_results.append(result)
            logger.info("  -> %d cell(s), %d table(s)", len(result.cells), len(result.tables))

        return WorkbookResult(
            file_name=Path(file_path).name,
            is_1904=excel.is_1904(),
            calculation_reference_mode=excel.calculation_reference_mode(),
            sheets=sheet_results,
        )


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, config.XLSX_LOG_LEVEL, logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Dump an .xlsx workbook as resolved JSON.",
    )
    parser.add_argument(
        "excel_file",
        help="Path to the .xlsx file to read",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_output.json)",
    )
    parser.add_argument(
        "-s",
        "--sheet",
        default=None,
        help="Name of a single worksheet to process (default: all sheets)",
    )
    parser.add_argument(
        "--include-drawings",
        action="store_true",
        help="Also resolve shapes, pictures and groups anchored on each sheet",
    )
    args = parser.parse_args()

    excel_path = args.excel_file
    if not os.path.isfile(excel_path):
        logger.error("File not found: %s", excel_path)
        sys.exit(1)

    if args.output:
        output_path = args.output
    else:
        stem = Path(excel_path).stem
        output_path = f"{stem}_output.json"

    try:
        result = parse_workbook(
            excel_path,
            sheet_name_filter=args.sheet,
            include_drawings=args.include_drawings,
        )
    except XlsxError as exc:
        logger.error("Cannot read %s: %s", excel_path, exc)
        sys.exit(1)

    json_str = result.model_dump_json(indent=2, exclude_none=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_str)

    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
