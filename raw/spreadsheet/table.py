"""
Raw nodes for table parts (``xl/tables/tableN.xml``).
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, list_of
from raw.spreadsheet.filter import RawAutoFilter, RawSortState
from utils.conversions import to_bool, to_int, to_str
from utils.coordinates import Dimension, to_dimension


class TableType(XmlEnum):
    WORKSHEET = "worksheet"
    XML = "xml"
    QUERY_TABLE = "queryTable"


class TotalsRowFunction(XmlEnum):
    NONE = "none"
    SUM = "sum"
    MIN = "min"
    MAX = "max"
    AVERAGE = "average"
    COUNT = "count"
    COUNT_NUMS = "countNums"
    STD_DEV = "stdDev"
    VAR = "var"
    CUSTOM = "custom"


class RawTableFormula(RawNode):
    """``<calculatedColumnFormula>`` / ``<totalsRowFormula>``."""

    ATTRIBUTES = {"array": ("array", to_bool)}
    TEXT = "formula"

    array: Optional[bool] = None
    formula: Optional[str] = None


class RawXmlColumnProperties(RawNode):
    ATTRIBUTES = {
        "mapId": ("map_id", to_int),
        "xpath": ("xpath", to_str),
        "denormalized": ("denormalized", to_bool),
        "xmlDataType": ("xml_data_type", to_str),
    }

    map_id: Optional[int] = None
    xpath: Optional[str] = None
    denormalized: Optional[bool] = None
    xml_data_type: Optional[str] = None


class RawTableColumn(RawNode):
    TAG = "tableColumn"
    ATTRIBUTES = {
        "id": ("column_id", to_int),
        "name": ("name", to_str),
        "uniqueName": ("unique_name", to_str),
        "totalsRowFunction": ("totals_row_function", enum(TotalsRowFunction)),
        "totalsRowLabel": ("totals_row_label", to_str),
        "queryTableFieldId": ("query_table_field_id", to_int),
        "headerRowDxfId": ("header_row_dxf_id", to_int),
        "dataDxfId": ("data_dxf_id", to_int),
        "totalsRowDxfId": ("totals_row_dxf_id", to_int),
        "headerRowCellStyle": ("header_row_cell_style", to_str),
        "dataCellStyle": ("data_cell_style", to_str),
        "totalsRowCellStyle": ("totals_row_cell_style", to_str),
    }
    CHILDREN = {
        "calculatedColumnFormula": ("calculated_column_formula", RawTableFormula.load, False),
        "totalsRowFormula": ("totals_row_formula", RawTableFormula.load, False),
        "xmlColumnPr": ("xml_column_properties", RawXmlColumnProperties.load, False),
    }

    column_id: Optional[int] = None
    name: Optional[str] = None
    unique_name: Optional[str] = None
    totals_row_function: Optional[TotalsRowFunction] = None
    totals_row_label: Optional[str] = None
    query_table_field_id: Optional[int] = None
    header_row_dxf_id: Optional[int] = None
    data_dxf_id: Optional[int] = None
    totals_row_dxf_id: Optional[int] = None
    header_row_cell_style: Optional[str] = None
    data_cell_style: Optional[str] = None
    totals_row_cell_style: Optional[str] = None
    calculated_column_formula: Optional[RawTableFormula] = None
    totals_row_formula: Optional[RawTableFormula] = None
    xml_column_properties: Optional[RawXmlColumnProperties] = None


class RawTableStyleInfo(RawNode):
    ATTRIBUTES = {
        "name": ("name", to_str),
        "showFirstColumn": ("show_first_column", to_bool),
        "showLastColumn": ("show_last_column", to_bool),
        "showRowStripes": ("show_row_stripes", to_bool),
        "showColumnStripes": ("show_column_stripes", to_bool),
    }

    name: Optional[str] = None
    show_first_column: Optional[bool] = None
    show_last_column: Optional[bool] = None
    show_row_stripes: Optional[bool] = None
    show_column_stripes: Optional[bool] = None


class RawTable(RawNode):
    TAG = "table"
    ATTRIBUTES = {
        "id": ("table_id", to_int),
        "name": ("name", to_str),
        "displayName": ("display_name", to_str),
        "comment": ("comment", to_str),
        "ref": ("ref", to_dimension),
        "tableType": ("table_type", enum(TableType)),
        "headerRowCount": ("header_row_count", to_int),
        "insertRow": ("insert_row", to_bool),
        "insertRowShift": ("insert_row_shift", to_bool),
        "totalsRowCount": ("totals_row_count", to_int),
        "totalsRowShown": ("totals_row_shown", to_bool),
        "published": ("published", to_bool),
        "headerRowDxfId": ("header_row_dxf_id", to_int),
        "dataDxfId": ("data_dxf_id", to_int),
        "totalsRowDxfId": ("totals_row_dxf_id", to_int),
        "headerRowBorderDxfId": ("header_row_border_dxf_id", to_int),
        "tableBorderDxfId": ("table_border_dxf_id", to_int),
        "totalsRowBorderDxfId": ("totals_row_border_dxf_id", to_int),
        "headerRowCellStyle": ("header_row_cell_style", to_str),
        "dataCellStyle": ("data_cell_style", to_str),
        "totalsRowCellStyle": ("totals_row_cell_style", to_str),
        "connectionId": ("connection_id", to_int),
    }
    CHILDREN = {
        "autoFilter": ("auto_filter", RawAutoFilter.load, False),
        "sortState": ("sort_state", RawSortState.load, False),
        "tableColumns": ("columns", list_of(RawTableColumn.load, "tableColumn"), False),
        "tableStyleInfo": ("style_info", RawTableStyleInfo.load, False),
    }

    table_id: Optional[int] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    comment: Optional[str] = None
    ref: Optional[Dimension] = None
    table_type: Optional[TableType] = None
    header_row_count: Optional[int] = None
    insert_row: Optional[bool] = None
    insert_row_shift: Optional[bool] = None
    totals_row_count: Optional[int] = None
    totals_row_shown: Optional[bool] = None
    published: Optional[bool] = None
    header_row_dxf_id: Optional[int] = None
    data_dxf_id: Optional[int] = None
    totals_row_dxf_id: Optional[int] = None
    header_row_border_dxf_id: Optional[int] = None
    table_border_dxf_id: Optional[int] = None
    totals_row_border_dxf_id: Optional[int] = None
    header_row_cell_style: Optional[str] = None
    data_cell_style: Optional[str] = None
    totals_row_cell_style: Optional[str] = None
    connection_id: Optional[int] = None
    auto_filter: Optional[RawAutoFilter] = None
    sort_state: Optional[RawSortState] = None
    columns: List[RawTableColumn] = []
    style_info: Optional[RawTableStyleInfo] = None
