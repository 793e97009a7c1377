"""Size, visibility and formatting of one cell, merged from cell, row and column records."""

from __future__ import annotations

from typing import Optional

from dto.cell import DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH, DEFAULT_DY_DESCENT, CellProperty
from dto.hyperlink import Hyperlink
from raw.spreadsheet.worksheet import (
    RawCell,
    RawColumnInformation,
    RawRow,
    RawSheetFormatProperties,
)
from resolvers.styles import StyleResolver

# Excel pads ``baseColWidth`` by this many characters when no default width is set.
BASE_WIDTH_PADDING = 5


def cell_width(
    column: Optional[RawColumnInformation], sheet_format: Optional[RawSheetFormatProperties]
) -> float:
    if column is not None and column.width is not None:
        return column.width
    if sheet_format is not None:
        if sheet_format.default_col_width is not None:
            return sheet_format.default_col_width
        if sheet_format.base_col_width is not None:
            return float(sheet_format.base_col_width + BASE_WIDTH_PADDING)
    return DEFAULT_CELL_WIDTH


def cell_height(row: Optional[RawRow], sheet_format: Optional[RawSheetFormatProperties]) -> float:
    if row is not None and row.height is not None:
        return row.height
    if sheet_format is not None and sheet_format.default_row_height is not None:
        return sheet_format.default_row_height
    return DEFAULT_CELL_HEIGHT


def resolve_cell_property(
    cell: Optional[RawCell],
    row: Optional[RawRow],
    column: Optional[RawColumnInformation],
    sheet_format: Optional[RawSheetFormatProperties],
    styles: StyleResolver,
    hyperlink: Optional[Hyperlink] = None,
) -> CellProperty:
    """
    Resolve the properties of a cell.  Any of ``cell``, ``row`` and
    ``column`` may be missing; a position with none of them gets the
    sheet defaults.
    """
    style_ids = [
        cell.style if cell is not None else None,
        row.style if row is not None else None,
        column.style if column is not None else None,
    ]
    protection = styles.protection_for(style_ids)

    if protection.hidden:
        hidden = True
    elif row is not None and row.hidden is not None:
        hidden = row.hidden
    elif sheet_format is not None and sheet_format.zero_height:
        hidden = True
    elif column is not None and column.hidden is not None:
        hidden = column.hidden
    else:
        hidden = False

    show_phonetic = True
    for record in (cell, row, column):
        if record is not None and record.show_phonetic is not None:
            show_phonetic = record.show_phonetic
            break

    if row is not None and row.dy_descent is not None:
        dy_descent = row.dy_descent
    elif sheet_format is not None and sheet_format.dy_descent is not None:
        dy_descent = sheet_format.dy_descent
    else:
        dy_descent = DEFAULT_DY_DESCENT

    return CellProperty(
        width=cell_width(column, sheet_format),
        best_fit=bool(column.best_fit) if column is not None else False,
        height=cell_height(row, sheet_format),
        dy_descent=dy_descent,
        hidden=hidden,
        show_phonetic=show_phonetic,
        hyperlink=hyperlink,
        alignment=styles.alignment_for(style_ids),
        protection=protection,
        font=styles.font_for(style_ids),
        border=styles.border_for(style_ids),
        fill=styles.fill_for(style_ids),
        numbering_format=styles.numbering_format_for(style_ids),
    )
