"""SpreadsheetML parts: workbook, worksheets, styles, shared strings and tables."""

from raw.spreadsheet.string_item import RawSharedStringTable, RawStringItem
from raw.spreadsheet.stylesheet import RawStyleSheet
from raw.spreadsheet.table import RawTable
from raw.spreadsheet.workbook import RawWorkbook
from raw.spreadsheet.worksheet import RawCell, RawWorksheet

__all__ = [
    "RawCell",
    "RawSharedStringTable",
    "RawStringItem",
    "RawStyleSheet",
    "RawTable",
    "RawWorkbook",
    "RawWorksheet",
]
