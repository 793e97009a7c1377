"""DrawingML parts: themes and worksheet drawings with everything they contain."""

from raw.drawing.theme import RawTheme
from raw.drawing.worksheet_drawing import RawWorksheetDrawing

__all__ = ["RawTheme", "RawWorksheetDrawing"]
