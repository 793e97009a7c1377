"""
Worksheet drawing parts: anchors and the object each one holds.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dto.drawing.enums import EditAs
from dto.drawing.shape import Position, Size
from dto.drawing.worksheet_drawing import (
    AbsoluteAnchor,
    Anchor,
    DrawingAnchor,
    Marker,
    OneCellAnchor,
    TwoCellAnchor,
)
from raw.drawing.worksheet_drawing import (
    RawAbsoluteAnchor,
    RawAnchor,
    RawMarker,
    RawOneCellAnchor,
    RawTwoCellAnchor,
    RawWorksheetDrawing,
)
from resolvers.drawing.context import DrawingContext
from resolvers.drawing.shape import Placement, resolve_content, resolve_position, resolve_size
from utils.conversions import emu_to_pt

logger = logging.getLogger(__name__)


def resolve_marker(raw: Optional[RawMarker]) -> Marker:
    """Markers are zero-based in the file and one-based once resolved."""
    if raw is None:
        return Marker()
    return Marker(
        row=(raw.row or 0) + 1,
        col=(raw.column or 0) + 1,
        row_offset=emu_to_pt(raw.row_offset or 0),
        col_offset=emu_to_pt(raw.column_offset or 0),
    )


def resolve_anchor(raw: RawAnchor, context: DrawingContext) -> Optional[DrawingAnchor]:
    anchor: Anchor
    placement = Placement(client_data=raw.client_data)
    if isinstance(raw, RawTwoCellAnchor):
        anchor = TwoCellAnchor(
            edit_as=EditAs.from_string(raw.edit_as),
            start=resolve_marker(raw.start),
            end=resolve_marker(raw.end),
        )
    elif isinstance(raw, RawOneCellAnchor):
        extent = resolve_size(raw.extent)
        anchor = OneCellAnchor(start=resolve_marker(raw.start), extent=extent or Size())
        placement.extent = extent
    elif isinstance(raw, RawAbsoluteAnchor):
        extent = resolve_size(raw.extent)
        position = resolve_position(raw.position)
        anchor = AbsoluteAnchor(position=position or Position(), extent=extent or Size())
        placement.extent = extent
        placement.position = position
    else:
        return None
    content = resolve_content(raw.content, context, placement)
    if content is None:
        logger.debug("Skipping %s without resolvable content", anchor.kind)
        return None
    return DrawingAnchor(anchor=anchor, content=content)


def resolve_drawing(raw: RawWorksheetDrawing, context: DrawingContext) -> List[DrawingAnchor]:
    anchors = []
    for item in raw.anchors:
        anchor = resolve_anchor(item, context)
        if anchor is not None:
            anchors.append(anchor)
    return anchors
