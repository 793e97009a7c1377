from __future__ import annotations

from typing import Literal, Optional, Union

from dto.base import Entity
from dto.drawing.enums import EditAs
from dto.drawing.shape import DrawingContent, Position, Size


class Marker(Entity):
    """A cell corner: 1-based row and column plus an offset into the cell, in points."""

    row: int = 1
    col: int = 1
    row_offset: float = 0.0
    col_offset: float = 0.0


class TwoCellAnchor(Entity):
    kind: Literal["two_cell"] = "two_cell"
    edit_as: EditAs = EditAs.TWO_CELL
    start: Marker = Marker()
    end: Marker = Marker()


class OneCellAnchor(Entity):
    kind: Literal["one_cell"] = "one_cell"
    start: Marker = Marker()
    extent: Size = Size()


class AbsoluteAnchor(Entity):
    kind: Literal["absolute"] = "absolute"
    position: Position = Position()
    extent: Size = Size()


Anchor = Union[TwoCellAnchor, OneCellAnchor, AbsoluteAnchor]


class DrawingAnchor(Entity):
    anchor: Anchor
    content: Optional[DrawingContent] = None
