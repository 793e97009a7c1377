"""
Raw nodes for the workbook part (``xl/workbook.xml``).
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, list_of
from utils.conversions import to_bool, to_float, to_int, to_str


class CalculationMode(XmlEnum):
    AUTO = "auto"
    MANUAL = "manual"
    AUTO_NO_TABLE = "autoNoTable"


class ReferenceMode(XmlEnum):
    A1 = "A1"
    R1C1 = "R1C1"


class Visibility(XmlEnum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    VERY_HIDDEN = "veryHidden"


class RawWorkbookProperties(RawNode):
    TAG = "workbookPr"
    ATTRIBUTES = {
        "date1904": ("date1904", to_bool),
        "dateCompatibility": ("date_compatibility", to_bool),
        "codeName": ("code_name", to_str),
        "defaultThemeVersion": ("default_theme_version", to_int),
        "showObjects": ("show_objects", to_str),
        "filterPrivacy": ("filter_privacy", to_bool),
        "backupFile": ("backup_file", to_bool),
        "checkCompatibility": ("check_compatibility", to_bool),
        "hidePivotFieldList": ("hide_pivot_field_list", to_bool),
        "updateLinks": ("update_links", to_str),
        "autoCompressPictures": ("auto_compress_pictures", to_bool),
        "refreshAllConnections": ("refresh_all_connections", to_bool),
        "saveExternalLinkValues": ("save_external_link_values", to_bool),
    }

    date1904: Optional[bool] = None
    date_compatibility: Optional[bool] = None
    code_name: Optional[str] = None
    default_theme_version: Optional[int] = None
    show_objects: Optional[str] = None
    filter_privacy: Optional[bool] = None
    backup_file: Optional[bool] = None
    check_compatibility: Optional[bool] = None
    hide_pivot_field_list: Optional[bool] = None
    update_links: Optional[str] = None
    auto_compress_pictures: Optional[bool] = None
    refresh_all_connections: Optional[bool] = None
    save_external_link_values: Optional[bool] = None


class RawWorkbookView(RawNode):
    ATTRIBUTES = {
        "activeTab": ("active_tab", to_int),
        "firstSheet": ("first_sheet", to_int),
        "minimized": ("minimized", to_bool),
        "visibility": ("visibility", enum(Visibility)),
        "showSheetTabs": ("show_sheet_tabs", to_bool),
        "showHorizontalScroll": ("show_horizontal_scroll", to_bool),
        "showVerticalScroll": ("show_vertical_scroll", to_bool),
        "autoFilterDateGrouping": ("auto_filter_date_grouping", to_bool),
        "tabRatio": ("tab_ratio", to_int),
        "windowWidth": ("window_width", to_int),
        "windowHeight": ("window_height", to_int),
        "xWindow": ("x_window", to_int),
        "yWindow": ("y_window", to_int),
    }

    active_tab: Optional[int] = None
    first_sheet: Optional[int] = None
    minimized: Optional[bool] = None
    visibility: Optional[Visibility] = None
    show_sheet_tabs: Optional[bool] = None
    show_horizontal_scroll: Optional[bool] = None
    show_vertical_scroll: Optional[bool] = None
    auto_filter_date_grouping: Optional[bool] = None
    tab_ratio: Optional[int] = None
    window_width: Optional[int] = None
    window_height: Optional[int] = None
    x_window: Optional[int] = None
    y_window: Optional[int] = None


class RawSheet(RawNode):
    """
    ``<sheet name="Sheet1" sheetId="1" r:id="rId1"/>``.

    ``state`` stays a plain token here; an unknown state is rejected when
    the sheet descriptor is built.
    """

    TAG = "sheet"
    ATTRIBUTES = {
        "name": ("name", to_str),
        "sheetId": ("sheet_id", to_int),
        "id": ("rel_id", to_str),
        "state": ("state", to_str),
    }

    name: Optional[str] = None
    sheet_id: Optional[int] = None
    rel_id: Optional[str] = None
    state: Optional[str] = None


class RawDefinedName(RawNode):
    TAG = "definedName"
    ATTRIBUTES = {
        "name": ("name", to_str),
        "localSheetId": ("local_sheet_id", to_int),
        "hidden": ("hidden", to_bool),
        "comment": ("comment", to_str),
        "description": ("description", to_str),
        "function": ("function", to_bool),
        "vbProcedure": ("vb_procedure", to_bool),
        "xlm": ("xlm", to_bool),
        "functionGroupId": ("function_group_id", to_int),
        "shortcutKey": ("shortcut_key", to_str),
        "publishToServer": ("publish_to_server", to_bool),
        "workbookParameter": ("workbook_parameter", to_bool),
    }
    TEXT = "formula"

    name: Optional[str] = None
    local_sheet_id: Optional[int] = None
    hidden: Optional[bool] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    function: Optional[bool] = None
    vb_procedure: Optional[bool] = None
    xlm: Optional[bool] = None
    function_group_id: Optional[int] = None
    shortcut_key: Optional[str] = None
    publish_to_server: Optional[bool] = None
    workbook_parameter: Optional[bool] = None
    formula: Optional[str] = None


class RawCalculationProperties(RawNode):
    TAG = "calcPr"
    ATTRIBUTES = {
        "calcId": ("calc_id", to_int),
        "calcMode": ("calc_mode", enum(CalculationMode)),
        "fullCalcOnLoad": ("full_calc_on_load", to_bool),
        "refMode": ("ref_mode", enum(ReferenceMode)),
        "iterate": ("iterate", to_bool),
        "iterateCount": ("iterate_count", to_int),
        "iterateDelta": ("iterate_delta", to_float),
        "fullPrecision": ("full_precision", to_bool),
        "calcCompleted": ("calc_completed", to_bool),
        "calcOnSave": ("calc_on_save", to_bool),
        "concurrentCalc": ("concurrent_calc", to_bool),
        "concurrentManualCount": ("concurrent_manual_count", to_int),
        "forceFullCalc": ("force_full_calc", to_bool),
    }

    calc_id: Optional[int] = None
    calc_mode: Optional[CalculationMode] = None
    full_calc_on_load: Optional[bool] = None
    ref_mode: Optional[ReferenceMode] = None
    iterate: Optional[bool] = None
    iterate_count: Optional[int] = None
    iterate_delta: Optional[float] = None
    full_precision: Optional[bool] = None
    calc_completed: Optional[bool] = None
    calc_on_save: Optional[bool] = None
    concurrent_calc: Optional[bool] = None
    concurrent_manual_count: Optional[int] = None
    force_full_calc: Optional[bool] = None


class RawWorkbook(RawNode):
    TAG = "workbook"
    CHILDREN = {
        "workbookPr": ("properties", RawWorkbookProperties.load, False),
        "bookViews": ("views", list_of(RawWorkbookView.load, "workbookView"), False),
        "sheets": ("sheets", list_of(RawSheet.load, "sheet"), False),
        "definedNames": ("defined_names", list_of(RawDefinedName.load, "definedName"), False),
        "calcPr": ("calculation_properties", RawCalculationProperties.load, False),
    }

    properties: Optional[RawWorkbookProperties] = None
    views: List[RawWorkbookView] = []
    sheets: List[RawSheet] = []
    defined_names: List[RawDefinedName] = []
    calculation_properties: Optional[RawCalculationProperties] = None

    def get_defined_name(self, name: str, local_sheet_id: Optional[int] = None) -> Optional[RawDefinedName]:
        """
        Case-insensitive lookup; a sheet-local definition wins over the
        workbook-scoped one when ``local_sheet_id`` is given.
        """
        key = name.lower()
        candidates = [d for d in self.defined_names if (d.name or "").lower() == key]
        if local_sheet_id is not None:
            for defined in candidates:
                if defined.local_sheet_id == local_sheet_id:
                    return defined
        for defined in candidates:
            if defined.local_sheet_id is None:
                return defined
        return candidates[0] if candidates else None
