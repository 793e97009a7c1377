"""
Raw nodes for worksheet parts (``xl/worksheets/sheetN.xml``).
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, list_of, text_content, val_of
from raw.spreadsheet.filter import RawAutoFilter
from raw.spreadsheet.string_item import RawPhoneticProperties, RawStringItem
from utils.conversions import to_bool, to_float, to_int, to_str
from utils.coordinates import Coordinate, Dimension, to_coordinate, to_dimension


class FormulaType(XmlEnum):
    NORMAL = "normal"
    ARRAY = "array"
    DATA_TABLE = "dataTable"
    SHARED = "shared"


class RawCellFormula(RawNode):
    TAG = "f"
    ATTRIBUTES = {
        "t": ("formula_type", enum(FormulaType)),
        "aca": ("always_calculate_array", to_bool),
        "ref": ("ref", to_dimension),
        "dt2D": ("data_table_2d", to_bool),
        "dtr": ("data_table_row", to_bool),
        "del1": ("input_1_deleted", to_bool),
        "del2": ("input_2_deleted", to_bool),
        "r1": ("input_1", to_str),
        "r2": ("input_2", to_str),
        "ca": ("calculate_cell", to_bool),
        "si": ("shared_index", to_int),
        "bx": ("assigns_name", to_bool),
    }
    TEXT = "formula"

    formula_type: Optional[FormulaType] = None
    always_calculate_array: Optional[bool] = None
    ref: Optional[Dimension] = None
    data_table_2d: Optional[bool] = None
    data_table_row: Optional[bool] = None
    input_1_deleted: Optional[bool] = None
    input_2_deleted: Optional[bool] = None
    input_1: Optional[str] = None
    input_2: Optional[str] = None
    calculate_cell: Optional[bool] = None
    shared_index: Optional[int] = None
    assigns_name: Optional[bool] = None
    formula: Optional[str] = None


class RawCell(RawNode):
    """
    ``<c r="B2" s="6" t="s"><v>0</v></c>``.

    ``cell_type`` keeps the raw ``t`` token: unlike style enums, an unknown
    cell type is a hard error at resolution time.
    """

    TAG = "c"
    ATTRIBUTES = {
        "r": ("coordinate", to_coordinate),
        "s": ("style", to_int),
        "t": ("cell_type", to_str),
        "cm": ("cell_metadata", to_int),
        "vm": ("value_metadata", to_int),
        "ph": ("show_phonetic", to_bool),
    }
    CHILDREN = {
        "f": ("formula", RawCellFormula.load, False),
        "v": ("value", text_content, False),
        "is": ("inline_string", RawStringItem.load, False),
    }
    REQUIRED = ("r",)

    coordinate: Optional[Coordinate] = None
    style: Optional[int] = None
    cell_type: Optional[str] = None
    cell_metadata: Optional[int] = None
    value_metadata: Optional[int] = None
    show_phonetic: Optional[bool] = None
    formula: Optional[RawCellFormula] = None
    value: Optional[str] = None
    inline_string: Optional[RawStringItem] = None


class RawRow(RawNode):
    TAG = "row"
    ATTRIBUTES = {
        "r": ("index", to_int),
        "spans": ("spans", to_str),
        "s": ("style", to_int),
        "customFormat": ("custom_format", to_bool),
        "ht": ("height", to_float),
        "hidden": ("hidden", to_bool),
        "customHeight": ("custom_height", to_bool),
        "outlineLevel": ("outline_level", to_int),
        "collapsed": ("collapsed", to_bool),
        "thickTop": ("thick_top", to_bool),
        "thickBot": ("thick_bottom", to_bool),
        "ph": ("show_phonetic", to_bool),
        "dyDescent": ("dy_descent", to_float),
    }
    CHILDREN = {"c": ("cells", RawCell.load, True)}

    index: Optional[int] = None
    spans: Optional[str] = None
    style: Optional[int] = None
    custom_format: Optional[bool] = None
    height: Optional[float] = None
    hidden: Optional[bool] = None
    custom_height: Optional[bool] = None
    outline_level: Optional[int] = None
    collapsed: Optional[bool] = None
    thick_top: Optional[bool] = None
    thick_bottom: Optional[bool] = None
    show_phonetic: Optional[bool] = None
    dy_descent: Optional[float] = None
    cells: List[RawCell] = []


class RawColumnInformation(RawNode):
    """``<col min="1" max="3" width="12.5"/>``: applies to columns min..max."""

    TAG = "col"
    ATTRIBUTES = {
        "min": ("min_column", to_int),
        "max": ("max_column", to_int),
        "width": ("width", to_float),
        "style": ("style", to_int),
        "hidden": ("hidden", to_bool),
        "bestFit": ("best_fit", to_bool),
        "customWidth": ("custom_width", to_bool),
        "phonetic": ("show_phonetic", to_bool),
        "outlineLevel": ("outline_level", to_int),
        "collapsed": ("collapsed", to_bool),
    }

    min_column: Optional[int] = None
    max_column: Optional[int] = None
    width: Optional[float] = None
    style: Optional[int] = None
    hidden: Optional[bool] = None
    best_fit: Optional[bool] = None
    custom_width: Optional[bool] = None
    show_phonetic: Optional[bool] = None
    outline_level: Optional[int] = None
    collapsed: Optional[bool] = None

    def covers(self, column: int) -> bool:
        low = self.min_column if self.min_column is not None else 0
        high = self.max_column if self.max_column is not None else column
        return low <= column <= high


class RawSheetFormatProperties(RawNode):
    TAG = "sheetFormatPr"
    ATTRIBUTES = {
        "baseColWidth": ("base_col_width", to_int),
        "defaultColWidth": ("default_col_width", to_float),
        "defaultRowHeight": ("default_row_height", to_float),
        "customHeight": ("custom_height", to_bool),
        "zeroHeight": ("zero_height", to_bool),
        "thickTop": ("thick_top", to_bool),
        "thickBottom": ("thick_bottom", to_bool),
        "outlineLevelRow": ("outline_level_row", to_int),
        "outlineLevelCol": ("outline_level_col", to_int),
        "dyDescent": ("dy_descent", to_float),
    }

    base_col_width: Optional[int] = None
    default_col_width: Optional[float] = None
    default_row_height: Optional[float] = None
    custom_height: Optional[bool] = None
    zero_height: Optional[bool] = None
    thick_top: Optional[bool] = None
    thick_bottom: Optional[bool] = None
    outline_level_row: Optional[int] = None
    outline_level_col: Optional[int] = None
    dy_descent: Optional[float] = None


class RawHyperlink(RawNode):
    TAG = "hyperlink"
    ATTRIBUTES = {
        "ref": ("ref", to_dimension),
        "id": ("rel_id", to_str),
        "location": ("location", to_str),
        "tooltip": ("tooltip", to_str),
        "display": ("display", to_str),
    }

    ref: Optional[Dimension] = None
    rel_id: Optional[str] = None
    location: Optional[str] = None
    tooltip: Optional[str] = None
    display: Optional[str] = None


class RawWorksheet(RawNode):
    TAG = "worksheet"
    CHILDREN = {
        "dimension": ("dimension", val_of(to_dimension, attribute="ref"), False),
        "sheetFormatPr": ("sheet_format_properties", RawSheetFormatProperties.load, False),
        "cols": ("columns", list_of(RawColumnInformation.load, "col"), False),
        "sheetData": ("rows", list_of(RawRow.load, "row"), False),
        "mergeCells": ("merge_cells", list_of(val_of(to_dimension, attribute="ref"), "mergeCell"), False),
        "hyperlinks": ("hyperlinks", list_of(RawHyperlink.load, "hyperlink"), False),
        "autoFilter": ("auto_filter", RawAutoFilter.load, False),
        "drawing": ("drawing_rel_id", val_of(to_str, attribute="id"), False),
        "tableParts": ("table_part_rel_ids", list_of(val_of(to_str, attribute="id"), "tablePart"), False),
        "phoneticPr": ("phonetic_properties", RawPhoneticProperties.load, False),
    }

    dimension: Optional[Dimension] = None
    sheet_format_properties: Optional[RawSheetFormatProperties] = None
    columns: List[RawColumnInformation] = []
    rows: List[RawRow] = []
    merge_cells: List[Optional[Dimension]] = []
    hyperlinks: List[RawHyperlink] = []
    auto_filter: Optional[RawAutoFilter] = None
    drawing_rel_id: Optional[str] = None
    table_part_rel_ids: List[Optional[str]] = []
    phonetic_properties: Optional[RawPhoneticProperties] = None

    def get_column_information(self, column: int) -> Optional[RawColumnInformation]:
        for info in self.columns:
            if info.covers(column):
                return info
        return None
