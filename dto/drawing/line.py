from __future__ import annotations

from typing import List, Literal, Optional, Union

from dto.base import Entity
from dto.drawing.enums import CompoundLine, LineCap, LineEndSize, LineEndType, PenAlignment, PresetLineDash
from dto.drawing.fill import Fill, SolidFill
from utils.conversions import EMU_PER_POINT

DEFAULT_LINE_WIDTH_EMU = 19050
# Width given to a line taken from the theme through ``lnRef``.
REFERENCED_LINE_WIDTH = 1.5
# accent1 of the default theme with a 15% shade.
DEFAULT_LINE_COLOR = "020b0fff"
DEFAULT_MITER_LIMIT = 8.0


class DashStop(Entity):
    """Dash and space lengths as fractions of the line width."""

    dash: float = 0.0
    space: float = 0.0


class LineJoin(Entity):
    kind: Literal["round", "bevel", "miter"] = "miter"
    # miter only
    limit: Optional[float] = None


class LineEnd(Entity):
    end_type: LineEndType = LineEndType.NONE
    width: LineEndSize = LineEndSize.MEDIUM
    length: LineEndSize = LineEndSize.MEDIUM


class Outline(Entity):
    width: float = DEFAULT_LINE_WIDTH_EMU / EMU_PER_POINT
    fill: Fill = SolidFill(color=DEFAULT_LINE_COLOR)
    cap: LineCap = LineCap.SQUARE
    compound: CompoundLine = CompoundLine.SINGLE
    alignment: PenAlignment = PenAlignment.CENTER
    dash: Union[PresetLineDash, List[DashStop]] = PresetLineDash.SOLID
    join: LineJoin = LineJoin(limit=DEFAULT_MITER_LIMIT)
    head_end: LineEnd = LineEnd()
    tail_end: LineEnd = LineEnd()
