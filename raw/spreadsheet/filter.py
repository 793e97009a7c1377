"""
Raw ``<autoFilter>`` and ``<sortState>`` nodes, shared by worksheets and tables.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, list_of, val_of
from utils.conversions import to_bool, to_float, to_int, to_str
from utils.coordinates import Dimension, to_dimension


class FilterOperator(XmlEnum):
    EQUAL = "equal"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    NOT_EQUAL = "notEqual"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    GREATER_THAN = "greaterThan"


class SortBy(XmlEnum):
    VALUE = "value"
    CELL_COLOR = "cellColor"
    FONT_COLOR = "fontColor"
    ICON = "icon"


class SortMethod(XmlEnum):
    NONE = "none"
    STROKE = "stroke"
    PIN_YIN = "pinYin"


class DateTimeGrouping(XmlEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class RawDateGroupItem(RawNode):
    ATTRIBUTES = {
        "year": ("year", to_int),
        "month": ("month", to_int),
        "day": ("day", to_int),
        "hour": ("hour", to_int),
        "minute": ("minute", to_int),
        "second": ("second", to_int),
        "dateTimeGrouping": ("grouping", enum(DateTimeGrouping)),
    }

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    grouping: Optional[DateTimeGrouping] = None


class RawFilters(RawNode):
    ATTRIBUTES = {
        "blank": ("blank", to_bool),
        "calendarType": ("calendar_type", to_str),
    }
    CHILDREN = {
        "filter": ("values", val_of(to_str), True),
        "dateGroupItem": ("date_groups", RawDateGroupItem.load, True),
    }

    blank: Optional[bool] = None
    calendar_type: Optional[str] = None
    values: List[str] = []
    date_groups: List[RawDateGroupItem] = []


class RawCustomFilter(RawNode):
    ATTRIBUTES = {
        "operator": ("operator", enum(FilterOperator)),
        "val": ("value", to_str),
    }

    operator: Optional[FilterOperator] = None
    value: Optional[str] = None


class RawCustomFilters(RawNode):
    ATTRIBUTES = {"and": ("match_all", to_bool)}
    CHILDREN = {"customFilter": ("filters", RawCustomFilter.load, True)}

    match_all: Optional[bool] = None
    filters: List[RawCustomFilter] = []


class RawTopNFilter(RawNode):
    ATTRIBUTES = {
        "top": ("top", to_bool),
        "percent": ("percent", to_bool),
        "val": ("value", to_float),
        "filterVal": ("filter_value", to_float),
    }

    top: Optional[bool] = None
    percent: Optional[bool] = None
    value: Optional[float] = None
    filter_value: Optional[float] = None


class RawDynamicFilter(RawNode):
    ATTRIBUTES = {
        "type": ("filter_type", to_str),
        "val": ("value", to_float),
        "valIso": ("value_iso", to_str),
        "maxVal": ("max_value", to_float),
        "maxValIso": ("max_value_iso", to_str),
    }

    filter_type: Optional[str] = None
    value: Optional[float] = None
    value_iso: Optional[str] = None
    max_value: Optional[float] = None
    max_value_iso: Optional[str] = None


class RawColorFilter(RawNode):
    ATTRIBUTES = {
        "dxfId": ("dxf_id", to_int),
        "cellColor": ("cell_color", to_bool),
    }

    dxf_id: Optional[int] = None
    cell_color: Optional[bool] = None


class RawIconFilter(RawNode):
    ATTRIBUTES = {
        "iconSet": ("icon_set", to_str),
        "iconId": ("icon_id", to_int),
    }

    icon_set: Optional[str] = None
    icon_id: Optional[int] = None


class RawFilterColumn(RawNode):
    TAG = "filterColumn"
    ATTRIBUTES = {
        "colId": ("column_id", to_int),
        "hiddenButton": ("hidden_button", to_bool),
        "showButton": ("show_button", to_bool),
    }
    CHILDREN = {
        "filters": ("filters", RawFilters.load, False),
        "customFilters": ("custom_filters", RawCustomFilters.load, False),
        "top10": ("top10", RawTopNFilter.load, False),
        "dynamicFilter": ("dynamic_filter", RawDynamicFilter.load, False),
        "colorFilter": ("color_filter", RawColorFilter.load, False),
        "iconFilter": ("icon_filter", RawIconFilter.load, False),
    }

    column_id: Optional[int] = None
    hidden_button: Optional[bool] = None
    show_button: Optional[bool] = None
    filters: Optional[RawFilters] = None
    custom_filters: Optional[RawCustomFilters] = None
    top10: Optional[RawTopNFilter] = None
    dynamic_filter: Optional[RawDynamicFilter] = None
    color_filter: Optional[RawColorFilter] = None
    icon_filter: Optional[RawIconFilter] = None


class RawSortCondition(RawNode):
    ATTRIBUTES = {
        "descending": ("descending", to_bool),
        "sortBy": ("sort_by", enum(SortBy)),
        "ref": ("ref", to_dimension),
        "customList": ("custom_list", to_str),
        "dxfId": ("dxf_id", to_int),
        "iconSet": ("icon_set", to_str),
        "iconId": ("icon_id", to_int),
    }

    descending: Optional[bool] = None
    sort_by: Optional[SortBy] = None
    ref: Optional[Dimension] = None
    custom_list: Optional[str] = None
    dxf_id: Optional[int] = None
    icon_set: Optional[str] = None
    icon_id: Optional[int] = None


class RawSortState(RawNode):
    TAG = "sortState"
    ATTRIBUTES = {
        "columnSort": ("column_sort", to_bool),
        "caseSensitive": ("case_sensitive", to_bool),
        "sortMethod": ("sort_method", enum(SortMethod)),
        "ref": ("ref", to_dimension),
    }
    CHILDREN = {"sortCondition": ("conditions", RawSortCondition.load, True)}

    column_sort: Optional[bool] = None
    case_sensitive: Optional[bool] = None
    sort_method: Optional[SortMethod] = None
    ref: Optional[Dimension] = None
    conditions: List[RawSortCondition] = []


class RawAutoFilter(RawNode):
    TAG = "autoFilter"
    ATTRIBUTES = {"ref": ("ref", to_dimension)}
    CHILDREN = {
        "filterColumn": ("columns", RawFilterColumn.load, True),
        "sortState": ("sort_state", RawSortState.load, False),
    }

    ref: Optional[Dimension] = None
    columns: List[RawFilterColumn] = []
    sort_state: Optional[RawSortState] = None
