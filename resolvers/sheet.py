"""
Workbook-level resolution: sheet descriptors, table parts and the
calculation settings a worksheet inherits from its workbook.
"""

from __future__ import annotations

from typing import List, Optional

from dto.sheet import (
    CalculationReferenceMode,
    SheetBasicInfo,
    SheetType,
    SheetVisibility,
    Table,
    TableStyle,
)
from errors import InvalidSheetError
from opc.relationships import Relationships
from raw.spreadsheet.table import RawTable
from raw.spreadsheet.workbook import RawSheet, RawWorkbook, ReferenceMode
from utils.coordinates import Dimension

# Folder under ``xl/`` that each sheet kind lives in.
SHEET_FOLDERS = {
    "worksheets": SheetType.WORKSHEET,
    "chartsheets": SheetType.CHARTSHEET,
    "dialogsheets": SheetType.DIALOGSHEET,
}

SHEET_STATES = {
    "visible": SheetVisibility.VISIBLE,
    "hidden": SheetVisibility.HIDDEN,
    "veryhidden": SheetVisibility.VERY_HIDDEN,
}


# ---- sheets ----


def resolve_sheet_info(sheet: RawSheet, relationships: Relationships) -> SheetBasicInfo:
    """
    Map a ``<sheet>`` entry to its descriptor.

    The sheet kind comes from the folder of the relationship target
    (``xl/worksheets/sheet1.xml`` is a worksheet).  Entries missing the
    id, name or sheet id, or pointing nowhere, are invalid.
    """
    if sheet.rel_id is None or sheet.name is None or sheet.sheet_id is None:
        raise InvalidSheetError(f"sheet entry is missing r:id, name or sheetId: {sheet!r}")
    path = relationships.zip_path_for_id(sheet.rel_id)
    if path is None:
        raise InvalidSheetError(f"sheet {sheet.name!r} has no part for relationship {sheet.rel_id!r}")

    segments = path.split("/")
    folder = segments[1] if len(segments) > 2 else ""
    sheet_type = SHEET_FOLDERS.get(folder)
    if sheet_type is None:
        raise InvalidSheetError(f"sheet {sheet.name!r} has unknown type folder {folder!r}")

    state = (sheet.state or "visible").lower()
    visibility = SHEET_STATES.get(state)
    if visibility is None:
        raise InvalidSheetError(f"sheet {sheet.name!r} has unknown state {sheet.state!r}")

    return SheetBasicInfo(
        rel_id=sheet.rel_id,
        name=sheet.name,
        sheet_id=sheet.sheet_id,
        visibility=visibility,
        sheet_type=sheet_type,
        path=path,
    )


def resolve_sheet_infos(workbook: RawWorkbook, relationships: Relationships) -> List[SheetBasicInfo]:
    return [resolve_sheet_info(sheet, relationships) for sheet in workbook.sheets]


# ---- workbook settings ----


def is_1904(workbook: RawWorkbook) -> bool:
    """The 1904 date system applies only when date compatibility is on."""
    properties = workbook.properties
    if properties is None:
        return False
    if properties.date_compatibility is False:
        return False
    return bool(properties.date1904)


def calculation_reference_mode(workbook: RawWorkbook) -> Optional[CalculationReferenceMode]:
    calc = workbook.calculation_properties
    if calc is None or calc.ref_mode is None:
        return None
    if calc.ref_mode == ReferenceMode.R1C1:
        return CalculationReferenceMode.R1C1
    return CalculationReferenceMode.A1


# ---- tables ----


def resolve_table(table: RawTable, default_style_name: Optional[str] = None) -> Table:
    info = table.style_info
    if info is None:
        style = TableStyle()
    else:
        style = TableStyle(
            name=info.name if info.name is not None else default_style_name,
            show_first_column=bool(info.show_first_column),
            show_last_column=bool(info.show_last_column),
            show_row_stripes=bool(info.show_row_stripes),
            show_column_stripes=bool(info.show_column_stripes),
        )
    return Table(
        display_name=table.display_name or "",
        table_id=table.table_id if table.table_id is not None else 1,
        dimension=table.ref or Dimension.default(),
        columns=[column.name or "" for column in table.columns],
        header_row_count=table.header_row_count if table.header_row_count is not None else 1,
        totals_row_count=table.totals_row_count if table.totals_row_count is not None else 1,
        table_style=style,
    )
