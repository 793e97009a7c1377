"""
Cell formatting resolution.

A cell's ``s`` attribute indexes ``cellXfs``.  Each format attribute (font,
fill, border, number format, alignment, protection) is taken from that
``xf`` when its ``applyX`` flag allows it, otherwise from the cell style
record (``cellStyleXfs[xfId]``) it derives from.  The lookup is tried for
the cell's style, then its row's, then its column's.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, TypeVar

from openpyxl.styles.numbers import BUILTIN_FORMATS

from dto.style import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_FONT_COLOR,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_PATTERN_BACKGROUND,
    Border,
    BorderSide,
    Fill,
    Font,
    FontFamily,
    GradientFill,
    GradientStop,
    NumberingFormat,
    PatternFill,
    Protection,
    ReadingOrder,
    TextAlignment,
)
from raw.drawing.theme import RawColorScheme
from raw.spreadsheet.stylesheet import (
    BorderStyle,
    GradientType,
    HorizontalAlignment,
    PatternType,
    RawAlignment,
    RawBorder,
    RawBorderSide,
    RawCellFormat,
    RawColor,
    RawFill,
    RawFont,
    RawProtection,
    RawStyleSheet,
    VerticalAlignment,
    VerticalAlignRun,
)
from resolvers.colors import stylesheet_color_to_hex

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StyleResolver:
    """Turns stylesheet records into resolved formatting entities."""

    def __init__(self, stylesheet: RawStyleSheet, color_scheme: Optional[RawColorScheme] = None):
        self.stylesheet = stylesheet
        self.color_scheme = color_scheme

    def color(self, color: Optional[RawColor]) -> Optional[str]:
        return stylesheet_color_to_hex(color, self.stylesheet.colors, self.color_scheme)

    # ---- style id chain ----

    def _pick(
        self,
        style_ids: Iterable[Optional[int]],
        value_of: Callable[[RawCellFormat], Optional[T]],
        apply_of: Callable[[RawCellFormat], Optional[bool]],
    ) -> Optional[T]:
        for style_id in style_ids:
            if style_id is None:
                continue
            value = self._pick_one(style_id, value_of, apply_of)
            if value is not None:
                return value
        return None

    def _pick_one(
        self,
        style_id: int,
        value_of: Callable[[RawCellFormat], Optional[T]],
        apply_of: Callable[[RawCellFormat], Optional[bool]],
    ) -> Optional[T]:
        xf = self.stylesheet.get_cell_format(style_id)
        if xf is None:
            return None
        value = value_of(xf)
        apply = apply_of(xf)
        if value is not None and apply is True:
            return value
        if xf.xf_id is None:
            return value if apply is None else None
        style_xf = self.stylesheet.get_cell_style_format(xf.xf_id)
        if style_xf is None:
            return None
        style_value = value_of(style_xf)
        if style_value is not None and apply_of(style_xf) in (True, None):
            return style_value
        return None

    # ---- per-attribute lookups ----

    def font_for(self, style_ids: Iterable[Optional[int]]) -> Font:
        raw = self._pick(
            style_ids,
            lambda xf: self.stylesheet.get_font(xf.font_id),
            lambda xf: xf.apply_font,
        )
        return self.font(raw)

    def fill_for(self, style_ids: Iterable[Optional[int]]) -> Fill:
        raw = self._pick(
            style_ids,
            lambda xf: self.stylesheet.get_fill(xf.fill_id),
            lambda xf: xf.apply_fill,
        )
        return self.fill(raw)

    def border_for(self, style_ids: Iterable[Optional[int]]) -> Border:
        raw = self._pick(
            style_ids,
            lambda xf: self.stylesheet.get_border(xf.border_id),
            lambda xf: xf.apply_border,
        )
        return self.border(raw)

    def numbering_format_for(self, style_ids: Iterable[Optional[int]]) -> NumberingFormat:
        num_fmt_id = self._pick(
            style_ids,
            lambda xf: xf.num_fmt_id,
            lambda xf: xf.apply_number_format,
        )
        return self.numbering_format(num_fmt_id)

    def alignment_for(self, style_ids: Iterable[Optional[int]]) -> TextAlignment:
        raw = self._pick(style_ids, lambda xf: xf.alignment, lambda xf: xf.apply_alignment)
        return alignment(raw)

    def protection_for(self, style_ids: Iterable[Optional[int]]) -> Protection:
        raw = self._pick(style_ids, lambda xf: xf.protection, lambda xf: xf.apply_protection)
        return protection(raw)

    # ---- record conversion ----

    def font(self, raw: Optional[RawFont]) -> Font:
        """Stylesheet ``<font>`` or rich-text ``<rPr>``; missing pieces take Calibri 11 black."""
        if raw is None:
            return Font()
        return Font(
            bold=bool(raw.bold),
            color=self.color(raw.color) or DEFAULT_FONT_COLOR,
            condense=bool(raw.condense),
            extend=bool(raw.extend),
            family=FontFamily.from_index(raw.family),
            italic=bool(raw.italic),
            name=raw.name or DEFAULT_FONT_NAME,
            outline=bool(raw.outline),
            scheme=raw.scheme,
            shadow=bool(raw.shadow),
            strike=bool(raw.strike),
            size=raw.size if raw.size is not None else DEFAULT_FONT_SIZE,
            underline=raw.underline,
            vertical_alignment=raw.vert_align or VerticalAlignRun.BASELINE,
        )

    def fill(self, raw: Optional[RawFill]) -> Fill:
        if raw is None:
            return PatternFill()
        if raw.gradient_fill is not None:
            gradient = raw.gradient_fill
            stops = [
                GradientStop(position=stop.position or 0.0, color=self.color(stop.color))
                for stop in gradient.stops
            ]
            return GradientFill(
                gradient_type=gradient.gradient_type or GradientType.LINEAR,
                degree=gradient.degree or 0.0,
                left=gradient.left or 0.0,
                right=gradient.right or 0.0,
                top=gradient.top or 0.0,
                bottom=gradient.bottom or 0.0,
                stops=stops or None,
            )
        if raw.pattern_fill is None:
            return PatternFill()
        pattern = raw.pattern_fill
        pattern_type = pattern.pattern_type or PatternType.NONE
        background = self.color(pattern.bg_color)
        if pattern_type != PatternType.NONE and background is None:
            background = DEFAULT_PATTERN_BACKGROUND
        return PatternFill(
            pattern_type=pattern_type,
            foreground_color=self.color(pattern.fg_color),
            background_color=background,
        )

    def border_side(self, raw: Optional[RawBorderSide]) -> BorderSide:
        if raw is None:
            return BorderSide()
        style = raw.style or BorderStyle.NONE
        color = self.color(raw.color)
        if style != BorderStyle.NONE and color is None:
            color = DEFAULT_BORDER_COLOR
        return BorderSide(style=style, color=color)

    def border(self, raw: Optional[RawBorder]) -> Border:
        if raw is None:
            return Border()
        diagonal = self.border_side(raw.diagonal)
        return Border(
            left=self.border_side(raw.left),
            right=self.border_side(raw.right),
            top=self.border_side(raw.top),
            bottom=self.border_side(raw.bottom),
            diagonal_down=diagonal if raw.diagonal_down else BorderSide(),
            diagonal_up=diagonal if raw.diagonal_up else BorderSide(),
            vertical=self.border_side(raw.vertical) if raw.vertical is not None else None,
            horizontal=self.border_side(raw.horizontal) if raw.horizontal is not None else None,
            outline=bool(raw.outline),
        )

    def numbering_format(self, num_fmt_id: Optional[int]) -> NumberingFormat:
        """Custom ``numFmt`` code first, then the built-in table for ids below 164."""
        if num_fmt_id is None:
            return NumberingFormat()
        custom = self.stylesheet.get_num_format(num_fmt_id)
        if custom is not None and custom.format_code is not None:
            return NumberingFormat(format_id=num_fmt_id, format_code=custom.format_code)
        code = BUILTIN_FORMATS.get(num_fmt_id)
        if code is None:
            logger.debug("No format code for numFmtId %d", num_fmt_id)
        return NumberingFormat(format_id=num_fmt_id, format_code=code)


def alignment(raw: Optional[RawAlignment]) -> TextAlignment:
    if raw is None:
        return TextAlignment()
    return TextAlignment(
        horizontal=raw.horizontal or HorizontalAlignment.GENERAL,
        vertical=raw.vertical or VerticalAlignment.BOTTOM,
        indent=raw.indent or 0,
        relative_indent=raw.relative_indent or 0,
        justify_last_line=bool(raw.justify_last_line),
        reading_order=ReadingOrder.from_index(raw.reading_order),
        shrink_to_fit=bool(raw.shrink_to_fit),
        text_rotation=raw.text_rotation or 0,
        wrap_text=bool(raw.wrap_text),
    )


def protection(raw: Optional[RawProtection]) -> Protection:
    if raw is None:
        return Protection()
    return Protection(
        locked=raw.locked if raw.locked is not None else True,
        hidden=bool(raw.hidden),
    )
