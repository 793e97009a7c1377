from __future__ import annotations

from enum import Enum
from typing import List, Optional

from dto.base import Entity
from utils.coordinates import Dimension


class SheetType(str, Enum):
    WORKSHEET = "worksheet"
    CHARTSHEET = "chartsheet"
    DIALOGSHEET = "dialogsheet"


class SheetVisibility(str, Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    VERY_HIDDEN = "veryHidden"


class CalculationReferenceMode(str, Enum):
    A1 = "A1"
    R1C1 = "R1C1"


class SheetBasicInfo(Entity):
    """A ``<sheet>`` entry of the workbook with its part path resolved."""

    rel_id: str
    name: str
    sheet_id: int
    visibility: SheetVisibility
    sheet_type: SheetType
    path: str


class TableStyle(Entity):
    name: Optional[str] = None
    show_first_column: bool = False
    show_last_column: bool = False
    show_row_stripes: bool = False
    show_column_stripes: bool = False


class Table(Entity):
    display_name: str = ""
    table_id: int = 1
    dimension: Dimension = Dimension.default()
    columns: List[str] = []
    header_row_count: int = 1
    totals_row_count: int = 1
    table_style: TableStyle = TableStyle()
