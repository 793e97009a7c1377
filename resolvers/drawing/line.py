from __future__ import annotations

from typing import Any, Dict, Optional

from dto.drawing.enums import CompoundLine, LineCap, LineEndSize, LineEndType, PenAlignment, PresetLineDash
from dto.drawing.fill import Fill, NoFill, SolidFill
from dto.drawing.line import (
    DEFAULT_LINE_COLOR,
    DEFAULT_LINE_WIDTH_EMU,
    DEFAULT_MITER_LIMIT,
    REFERENCED_LINE_WIDTH,
    DashStop,
    LineEnd,
    LineJoin,
    Outline,
)
from raw.drawing.line import RawLineEnd, RawOutline, RawStyleReference
from resolvers.drawing.context import DrawingContext
from resolvers.drawing.fill import resolve_gradient_fill, resolve_pattern_fill
from utils.conversions import emu_to_pt, percentage_to_float


def _line_end(raw: RawLineEnd) -> LineEnd:
    return LineEnd(
        end_type=LineEndType.from_string(raw.end_type),
        width=LineEndSize.from_string(raw.width),
        length=LineEndSize.from_string(raw.length),
    )


def _line_fill(raw: RawOutline, context: DrawingContext, ref_color: Optional[str]) -> Optional[Fill]:
    if raw.solid_fill is not None:
        return SolidFill(color=context.color(raw.solid_fill.color, ref_color) or DEFAULT_LINE_COLOR)
    if raw.gradient_fill is not None:
        return resolve_gradient_fill(raw.gradient_fill, context, ref_color)
    if raw.no_fill is not None:
        return NoFill()
    if raw.pattern_fill is not None:
        return resolve_pattern_fill(raw.pattern_fill, context, ref_color)
    return None


def _declared(raw: RawOutline, context: DrawingContext, ref_color: Optional[str]) -> Dict[str, Any]:
    """The ``Outline`` fields ``raw`` sets explicitly; width is handled by the callers."""
    declared: Dict[str, Any] = {}
    fill = _line_fill(raw, context, ref_color)
    if fill is not None:
        declared["fill"] = fill
    if raw.cap is not None:
        declared["cap"] = LineCap.from_string(raw.cap)
    if raw.compound is not None:
        declared["compound"] = CompoundLine.from_string(raw.compound)
    if raw.alignment is not None:
        declared["alignment"] = PenAlignment.from_string(raw.alignment)
    if raw.preset_dash is not None:
        declared["dash"] = PresetLineDash.from_string(raw.preset_dash)
    elif raw.custom_dash is not None:
        declared["dash"] = [
            DashStop(dash=percentage_to_float(stop.dash or 0), space=percentage_to_float(stop.space or 0))
            for stop in raw.custom_dash
        ]
    if raw.round_join:
        declared["join"] = LineJoin(kind="round")
    elif raw.bevel_join:
        declared["join"] = LineJoin(kind="bevel")
    elif raw.miter_join is not None:
        limit = raw.miter_join.limit
        declared["join"] = LineJoin(
            kind="miter",
            limit=percentage_to_float(limit) if limit is not None else DEFAULT_MITER_LIMIT,
        )
    if raw.head_end is not None:
        declared["head_end"] = _line_end(raw.head_end)
    if raw.tail_end is not None:
        declared["tail_end"] = _line_end(raw.tail_end)
    return declared


def _width(raw: RawOutline) -> float:
    return emu_to_pt(raw.width if raw.width is not None else DEFAULT_LINE_WIDTH_EMU)


def resolve_outline(raw: RawOutline, context: DrawingContext, ref_color: Optional[str] = None) -> Outline:
    """An ``<a:ln>`` on its own; attributes it leaves out take the schema defaults."""
    return Outline(width=_width(raw), **_declared(raw, context, ref_color))


def referenced_outline(reference: Optional[RawStyleReference], context: DrawingContext) -> Optional[Outline]:
    """The theme line an ``<a:lnRef>`` points at, drawn in the reference's color."""
    if reference is None or context.theme is None:
        return None
    raw = context.theme.get_line_from_ref(reference.index)
    if raw is None:
        return None
    ref_color = context.color(reference.color)
    return resolve_outline(raw, context, ref_color).model_copy(update={"width": REFERENCED_LINE_WIDTH})


def resolve_outline_with_reference(
    raw: Optional[RawOutline],
    reference: Optional[RawStyleReference],
    context: DrawingContext,
) -> Optional[Outline]:
    """
    A shape's outline: its own ``<a:ln>`` laid over the theme line of its style.

    Without an ``<a:ln>`` the referenced line is used as is.  Otherwise every
    attribute the ``<a:ln>`` omits comes from the referenced line; the fill
    falls back to the default line color when neither has one, and the
    width is always the shape's own.
    """
    referenced = referenced_outline(reference, context)
    if raw is None:
        return referenced
    values: Dict[str, Any] = {"fill": SolidFill(color=DEFAULT_LINE_COLOR)}
    if referenced is not None:
        values.update({name: getattr(referenced, name) for name in Outline.model_fields if name != "width"})
    values.update(_declared(raw, context, None))
    values["width"] = _width(raw)
    return Outline(**values)
