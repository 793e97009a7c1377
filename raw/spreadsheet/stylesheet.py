"""
Raw nodes for the stylesheet part (``xl/styles.xml``).

Cells refer to ``cellXfs`` by zero-based index; each ``xf`` record in turn
points into ``fonts``, ``fills``, ``borders`` and (by ``numFmtId``) into
``numFmts``.  The accessors below return ``None`` for anything out of
range so callers can fall back to their defaults.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, flag, list_of, val_of
from utils.conversions import to_bool, to_float, to_int, to_str


# ---- enums ----


class BorderStyle(XmlEnum):
    NONE = "none"
    THIN = "thin"
    MEDIUM = "medium"
    DASHED = "dashed"
    DOTTED = "dotted"
    THICK = "thick"
    DOUBLE = "double"
    HAIR = "hair"
    MEDIUM_DASHED = "mediumDashed"
    DASH_DOT = "dashDot"
    MEDIUM_DASH_DOT = "mediumDashDot"
    DASH_DOT_DOT = "dashDotDot"
    MEDIUM_DASH_DOT_DOT = "mediumDashDotDot"
    SLANT_DASH_DOT = "slantDashDot"


class PatternType(XmlEnum):
    NONE = "none"
    SOLID = "solid"
    MEDIUM_GRAY = "mediumGray"
    DARK_GRAY = "darkGray"
    LIGHT_GRAY = "lightGray"
    DARK_HORIZONTAL = "darkHorizontal"
    DARK_VERTICAL = "darkVertical"
    DARK_DOWN = "darkDown"
    DARK_UP = "darkUp"
    DARK_GRID = "darkGrid"
    DARK_TRELLIS = "darkTrellis"
    LIGHT_HORIZONTAL = "lightHorizontal"
    LIGHT_VERTICAL = "lightVertical"
    LIGHT_DOWN = "lightDown"
    LIGHT_UP = "lightUp"
    LIGHT_GRID = "lightGrid"
    LIGHT_TRELLIS = "lightTrellis"
    GRAY_125 = "gray125"
    GRAY_0625 = "gray0625"


class GradientType(XmlEnum):
    LINEAR = "linear"
    PATH = "path"


class HorizontalAlignment(XmlEnum):
    GENERAL = "general"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FILL = "fill"
    JUSTIFY = "justify"
    CENTER_CONTINUOUS = "centerContinuous"
    DISTRIBUTED = "distributed"


class VerticalAlignment(XmlEnum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    JUSTIFY = "justify"
    DISTRIBUTED = "distributed"

    @classmethod
    def default(cls) -> "VerticalAlignment":
        return cls.BOTTOM


class UnderlineStyle(XmlEnum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    SINGLE_ACCOUNTING = "singleAccounting"
    DOUBLE_ACCOUNTING = "doubleAccounting"


class VerticalAlignRun(XmlEnum):
    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class FontScheme(XmlEnum):
    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"


# ---- colors ----


class RawColor(RawNode):
    """``<color>``, ``<fgColor>``, ``<bgColor>`` and friends (CT_Color)."""

    ATTRIBUTES = {
        "auto": ("auto", to_bool),
        "indexed": ("indexed", to_int),
        "rgb": ("rgb", to_str),
        "theme": ("theme", to_int),
        "tint": ("tint", to_float),
    }

    auto: Optional[bool] = None
    indexed: Optional[int] = None
    rgb: Optional[str] = None
    theme: Optional[int] = None
    tint: Optional[float] = None


class RawStylesheetColors(RawNode):
    """``<colors>``: a custom indexed palette and most-recently-used colors."""

    TAG = "colors"
    CHILDREN = {
        "indexedColors": ("indexed_colors", list_of(val_of(to_str, attribute="rgb"), "rgbColor"), False),
        "mruColors": ("mru_colors", list_of(RawColor.load, "color"), False),
    }

    indexed_colors: Optional[List[Optional[str]]] = None
    mru_colors: Optional[List[RawColor]] = None


# ---- fonts ----


class RawFont(RawNode):
    """
    ``<font>`` in the stylesheet and ``<rPr>`` in rich text runs.

    The two share a content model; run properties spell the typeface
    element ``rFont`` instead of ``name``.
    """

    TAG = "font"
    CHILDREN = {
        "b": ("bold", flag, False),
        "i": ("italic", flag, False),
        "strike": ("strike", flag, False),
        "condense": ("condense", flag, False),
        "extend": ("extend", flag, False),
        "outline": ("outline", flag, False),
        "shadow": ("shadow", flag, False),
        "u": ("underline", val_of(enum(UnderlineStyle), UnderlineStyle.SINGLE), False),
        "vertAlign": ("vert_align", val_of(enum(VerticalAlignRun)), False),
        "sz": ("size", val_of(to_float), False),
        "color": ("color", RawColor.load, False),
        "name": ("name", val_of(to_str), False),
        "rFont": ("name", val_of(to_str), False),
        "family": ("family", val_of(to_int), False),
        "charset": ("charset", val_of(to_int), False),
        "scheme": ("scheme", val_of(enum(FontScheme)), False),
    }

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    condense: Optional[bool] = None
    extend: Optional[bool] = None
    outline: Optional[bool] = None
    shadow: Optional[bool] = None
    underline: Optional[UnderlineStyle] = None
    vert_align: Optional[VerticalAlignRun] = None
    size: Optional[float] = None
    color: Optional[RawColor] = None
    name: Optional[str] = None
    family: Optional[int] = None
    charset: Optional[int] = None
    scheme: Optional[FontScheme] = None


# ---- borders ----


class RawBorderSide(RawNode):
    ATTRIBUTES = {"style": ("style", enum(BorderStyle))}
    CHILDREN = {"color": ("color", RawColor.load, False)}

    style: Optional[BorderStyle] = None
    color: Optional[RawColor] = None


class RawBorder(RawNode):
    TAG = "border"
    ATTRIBUTES = {
        "diagonalUp": ("diagonal_up", to_bool),
        "diagonalDown": ("diagonal_down", to_bool),
        "outline": ("outline", to_bool),
    }
    CHILDREN = {
        "left": ("left", RawBorderSide.load, False),
        "start": ("left", RawBorderSide.load, False),
        "right": ("right", RawBorderSide.load, False),
        "end": ("right", RawBorderSide.load, False),
        "top": ("top", RawBorderSide.load, False),
        "bottom": ("bottom", RawBorderSide.load, False),
        "diagonal": ("diagonal", RawBorderSide.load, False),
        "vertical": ("vertical", RawBorderSide.load, False),
        "horizontal": ("horizontal", RawBorderSide.load, False),
    }

    diagonal_up: Optional[bool] = None
    diagonal_down: Optional[bool] = None
    outline: Optional[bool] = None
    left: Optional[RawBorderSide] = None
    right: Optional[RawBorderSide] = None
    top: Optional[RawBorderSide] = None
    bottom: Optional[RawBorderSide] = None
    diagonal: Optional[RawBorderSide] = None
    vertical: Optional[RawBorderSide] = None
    horizontal: Optional[RawBorderSide] = None


# ---- fills ----


class RawPatternFill(RawNode):
    ATTRIBUTES = {"patternType": ("pattern_type", enum(PatternType))}
    CHILDREN = {
        "fgColor": ("fg_color", RawColor.load, False),
        "bgColor": ("bg_color", RawColor.load, False),
    }

    pattern_type: Optional[PatternType] = None
    fg_color: Optional[RawColor] = None
    bg_color: Optional[RawColor] = None


class RawGradientStop(RawNode):
    ATTRIBUTES = {"position": ("position", to_float)}
    CHILDREN = {"color": ("color", RawColor.load, False)}

    position: Optional[float] = None
    color: Optional[RawColor] = None


class RawGradientFill(RawNode):
    ATTRIBUTES = {
        "type": ("gradient_type", enum(GradientType)),
        "degree": ("degree", to_float),
        "left": ("left", to_float),
        "right": ("right", to_float),
        "top": ("top", to_float),
        "bottom": ("bottom", to_float),
    }
    CHILDREN = {"stop": ("stops", RawGradientStop.load, True)}

    gradient_type: Optional[GradientType] = None
    degree: Optional[float] = None
    left: Optional[float] = None
    right: Optional[float] = None
    top: Optional[float] = None
    bottom: Optional[float] = None
    stops: List[RawGradientStop] = []


class RawFill(RawNode):
    TAG = "fill"
    CHILDREN = {
        "patternFill": ("pattern_fill", RawPatternFill.load, False),
        "gradientFill": ("gradient_fill", RawGradientFill.load, False),
    }

    pattern_fill: Optional[RawPatternFill] = None
    gradient_fill: Optional[RawGradientFill] = None


# ---- formats ----


class RawNumberingFormat(RawNode):
    TAG = "numFmt"
    ATTRIBUTES = {
        "numFmtId": ("num_fmt_id", to_int),
        "formatCode": ("format_code", to_str),
    }

    num_fmt_id: Optional[int] = None
    format_code: Optional[str] = None


class RawAlignment(RawNode):
    TAG = "alignment"
    ATTRIBUTES = {
        "horizontal": ("horizontal", enum(HorizontalAlignment)),
        "vertical": ("vertical", enum(VerticalAlignment)),
        "textRotation": ("text_rotation", to_int),
        "wrapText": ("wrap_text", to_bool),
        "indent": ("indent", to_int),
        "relativeIndent": ("relative_indent", to_int),
        "justifyLastLine": ("justify_last_line", to_bool),
        "shrinkToFit": ("shrink_to_fit", to_bool),
        "readingOrder": ("reading_order", to_int),
    }

    horizontal: Optional[HorizontalAlignment] = None
    vertical: Optional[VerticalAlignment] = None
    text_rotation: Optional[int] = None
    wrap_text: Optional[bool] = None
    indent: Optional[int] = None
    relative_indent: Optional[int] = None
    justify_last_line: Optional[bool] = None
    shrink_to_fit: Optional[bool] = None
    reading_order: Optional[int] = None


class RawProtection(RawNode):
    TAG = "protection"
    ATTRIBUTES = {
        "locked": ("locked", to_bool),
        "hidden": ("hidden", to_bool),
    }

    locked: Optional[bool] = None
    hidden: Optional[bool] = None


class RawCellFormat(RawNode):
    """An ``<xf>`` record from ``cellXfs`` or ``cellStyleXfs``."""

    TAG = "xf"
    ATTRIBUTES = {
        "numFmtId": ("num_fmt_id", to_int),
        "fontId": ("font_id", to_int),
        "fillId": ("fill_id", to_int),
        "borderId": ("border_id", to_int),
        "xfId": ("xf_id", to_int),
        "quotePrefix": ("quote_prefix", to_bool),
        "pivotButton": ("pivot_button", to_bool),
        "applyNumberFormat": ("apply_number_format", to_bool),
        "applyFont": ("apply_font", to_bool),
        "applyFill": ("apply_fill", to_bool),
        "applyBorder": ("apply_border", to_bool),
        "applyAlignment": ("apply_alignment", to_bool),
        "applyProtection": ("apply_protection", to_bool),
    }
    CHILDREN = {
        "alignment": ("alignment", RawAlignment.load, False),
        "protection": ("protection", RawProtection.load, False),
    }

    num_fmt_id: Optional[int] = None
    font_id: Optional[int] = None
    fill_id: Optional[int] = None
    border_id: Optional[int] = None
    xf_id: Optional[int] = None
    quote_prefix: Optional[bool] = None
    pivot_button: Optional[bool] = None
    apply_number_format: Optional[bool] = None
    apply_font: Optional[bool] = None
    apply_fill: Optional[bool] = None
    apply_border: Optional[bool] = None
    apply_alignment: Optional[bool] = None
    apply_protection: Optional[bool] = None
    alignment: Optional[RawAlignment] = None
    protection: Optional[RawProtection] = None


class RawCellStyle(RawNode):
    TAG = "cellStyle"
    ATTRIBUTES = {
        "name": ("name", to_str),
        "xfId": ("xf_id", to_int),
        "builtinId": ("builtin_id", to_int),
        "iLevel": ("i_level", to_int),
        "hidden": ("hidden", to_bool),
        "customBuiltin": ("custom_builtin", to_bool),
    }

    name: Optional[str] = None
    xf_id: Optional[int] = None
    builtin_id: Optional[int] = None
    i_level: Optional[int] = None
    hidden: Optional[bool] = None
    custom_builtin: Optional[bool] = None


class RawDifferentialFormat(RawNode):
    """``<dxf>``: partial formatting used by tables and conditional formats."""

    TAG = "dxf"
    CHILDREN = {
        "font": ("font", RawFont.load, False),
        "numFmt": ("num_fmt", RawNumberingFormat.load, False),
        "fill": ("fill", RawFill.load, False),
        "alignment": ("alignment", RawAlignment.load, False),
        "border": ("border", RawBorder.load, False),
        "protection": ("protection", RawProtection.load, False),
    }

    font: Optional[RawFont] = None
    num_fmt: Optional[RawNumberingFormat] = None
    fill: Optional[RawFill] = None
    alignment: Optional[RawAlignment] = None
    border: Optional[RawBorder] = None
    protection: Optional[RawProtection] = None


class RawTableStyleElement(RawNode):
    ATTRIBUTES = {
        "type": ("element_type", to_str),
        "size": ("size", to_int),
        "dxfId": ("dxf_id", to_int),
    }

    element_type: Optional[str] = None
    size: Optional[int] = None
    dxf_id: Optional[int] = None


class RawTableStyle(RawNode):
    ATTRIBUTES = {
        "name": ("name", to_str),
        "pivot": ("pivot", to_bool),
        "table": ("table", to_bool),
        "count": ("count", to_int),
    }
    CHILDREN = {"tableStyleElement": ("elements", RawTableStyleElement.load, True)}

    name: Optional[str] = None
    pivot: Optional[bool] = None
    table: Optional[bool] = None
    count: Optional[int] = None
    elements: List[RawTableStyleElement] = []


class RawTableStyles(RawNode):
    TAG = "tableStyles"
    ATTRIBUTES = {
        "count": ("count", to_int),
        "defaultTableStyle": ("default_table_style", to_str),
        "defaultPivotStyle": ("default_pivot_style", to_str),
    }
    CHILDREN = {"tableStyle": ("styles", RawTableStyle.load, True)}

    count: Optional[int] = None
    default_table_style: Optional[str] = None
    default_pivot_style: Optional[str] = None
    styles: List[RawTableStyle] = []


# ---- root ----


class RawStyleSheet(RawNode):
    TAG = "styleSheet"
    CHILDREN = {
        "numFmts": ("num_fmts", list_of(RawNumberingFormat.load, "numFmt"), False),
        "fonts": ("fonts", list_of(RawFont.load, "font"), False),
        "fills": ("fills", list_of(RawFill.load, "fill"), False),
        "borders": ("borders", list_of(RawBorder.load, "border"), False),
        "cellStyleXfs": ("cell_style_xfs", list_of(RawCellFormat.load, "xf"), False),
        "cellXfs": ("cell_xfs", list_of(RawCellFormat.load, "xf"), False),
        "cellStyles": ("cell_styles", list_of(RawCellStyle.load, "cellStyle"), False),
        "dxfs": ("dxfs", list_of(RawDifferentialFormat.load, "dxf"), False),
        "tableStyles": ("table_styles", RawTableStyles.load, False),
        "colors": ("colors", RawStylesheetColors.load, False),
    }

    num_fmts: List[RawNumberingFormat] = []
    fonts: List[RawFont] = []
    fills: List[RawFill] = []
    borders: List[RawBorder] = []
    cell_style_xfs: List[RawCellFormat] = []
    cell_xfs: List[RawCellFormat] = []
    cell_styles: List[RawCellStyle] = []
    dxfs: List[RawDifferentialFormat] = []
    table_styles: Optional[RawTableStyles] = None
    colors: Optional[RawStylesheetColors] = None

    @staticmethod
    def _at(items: list, index: Optional[int]):
        if index is None or index < 0 or index >= len(items):
            return None
        return items[index]

    def get_cell_format(self, xf_id: Optional[int]) -> Optional[RawCellFormat]:
        return self._at(self.cell_xfs, xf_id)

    def get_cell_style_format(self, xf_id: Optional[int]) -> Optional[RawCellFormat]:
        return self._at(self.cell_style_xfs, xf_id)

    def get_font(self, font_id: Optional[int]) -> Optional[RawFont]:
        return self._at(self.fonts, font_id)

    def get_fill(self, fill_id: Optional[int]) -> Optional[RawFill]:
        return self._at(self.fills, fill_id)

    def get_border(self, border_id: Optional[int]) -> Optional[RawBorder]:
        return self._at(self.borders, border_id)

    def get_differential_format(self, dxf_id: Optional[int]) -> Optional[RawDifferentialFormat]:
        return self._at(self.dxfs, dxf_id)

    def get_num_format(self, num_fmt_id: Optional[int]) -> Optional[RawNumberingFormat]:
        """Custom ``numFmt`` records are matched by ``numFmtId``, not position."""
        if num_fmt_id is None:
            return None
        for num_fmt in self.num_fmts:
            if num_fmt.num_fmt_id == num_fmt_id:
                return num_fmt
        return None

    @property
    def default_table_style(self) -> Optional[str]:
        if self.table_styles is None:
            return None
        return self.table_styles.default_table_style
