"""
Resolved cell formatting: fonts, fills, borders, number formats, alignment
and protection.  Colors are ``rrggbbaa`` hex strings.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from dto.base import Entity
from raw.spreadsheet.stylesheet import (
    BorderStyle,
    FontScheme,
    GradientType,
    HorizontalAlignment,
    PatternType,
    UnderlineStyle,
    VerticalAlignRun,
    VerticalAlignment,
)

DEFAULT_FONT_NAME = "Calibri"
DEFAULT_FONT_SIZE = 11.0
DEFAULT_FONT_COLOR = "000000ff"
DEFAULT_BORDER_COLOR = "000000ff"
DEFAULT_PATTERN_BACKGROUND = "ffffffff"


class FontFamily(str, Enum):
    NOT_APPLICABLE = "NotApplicable"
    ROMAN = "Roman"
    SWISS = "Swiss"
    MODERN = "Modern"
    SCRIPT = "Script"
    DECORATIVE = "Decorative"

    @classmethod
    def from_index(cls, index: Optional[int]) -> "FontFamily":
        members = list(cls)
        if index is None or not 0 <= index < len(members):
            return cls.NOT_APPLICABLE
        return members[index]


class Font(Entity):
    bold: bool = False
    color: str = DEFAULT_FONT_COLOR
    condense: bool = False
    extend: bool = False
    family: FontFamily = FontFamily.NOT_APPLICABLE
    italic: bool = False
    name: str = DEFAULT_FONT_NAME
    outline: bool = False
    scheme: Optional[FontScheme] = None
    shadow: bool = False
    strike: bool = False
    size: float = DEFAULT_FONT_SIZE
    underline: Optional[UnderlineStyle] = None
    vertical_alignment: VerticalAlignRun = VerticalAlignRun.BASELINE


# ---- fills ----


class PatternFill(Entity):
    kind: Literal["pattern"] = "pattern"
    pattern_type: PatternType = PatternType.NONE
    foreground_color: Optional[str] = None
    background_color: Optional[str] = None


class GradientStop(Entity):
    position: float
    color: Optional[str] = None


class GradientFill(Entity):
    """Gradient between stops; ``left``..``bottom`` bound a path gradient's inner rectangle."""

    kind: Literal["gradient"] = "gradient"
    gradient_type: GradientType = GradientType.LINEAR
    degree: float = 0.0
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0
    stops: Optional[List[GradientStop]] = None


Fill = Union[PatternFill, GradientFill]


# ---- borders ----


class BorderSide(Entity):
    style: BorderStyle = BorderStyle.NONE
    color: Optional[str] = None


class Border(Entity):
    left: BorderSide = BorderSide()
    right: BorderSide = BorderSide()
    top: BorderSide = BorderSide()
    bottom: BorderSide = BorderSide()
    diagonal_down: BorderSide = BorderSide()
    diagonal_up: BorderSide = BorderSide()
    vertical: Optional[BorderSide] = None
    horizontal: Optional[BorderSide] = None
    outline: bool = False


# ---- formats ----


class NumberingFormat(Entity):
    format_id: int = 0
    format_code: Optional[str] = "General"


class ReadingOrder(str, Enum):
    CONTEXT_DEPENDENT = "ContextDependent"
    LEFT_TO_RIGHT = "LeftToRight"
    RIGHT_TO_LEFT = "RightToLeft"

    @classmethod
    def from_index(cls, index: Optional[int]) -> "ReadingOrder":
        if index == 0:
            return cls.CONTEXT_DEPENDENT
        if index == 2:
            return cls.RIGHT_TO_LEFT
        return cls.LEFT_TO_RIGHT


class TextAlignment(Entity):
    horizontal: HorizontalAlignment = HorizontalAlignment.GENERAL
    vertical: VerticalAlignment = VerticalAlignment.BOTTOM
    indent: int = 0
    relative_indent: int = 0
    justify_last_line: bool = False
    reading_order: ReadingOrder = ReadingOrder.LEFT_TO_RIGHT
    shrink_to_fit: bool = False
    text_rotation: int = 0
    wrap_text: bool = False


class Protection(Entity):
    locked: bool = True
    hidden: bool = False
