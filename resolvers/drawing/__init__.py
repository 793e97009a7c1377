"""Resolution of DrawingML parts into ``dto.drawing`` entities."""

from resolvers.drawing.context import DrawingContext
from resolvers.drawing.worksheet_drawing import resolve_drawing

__all__ = ["DrawingContext", "resolve_drawing"]
