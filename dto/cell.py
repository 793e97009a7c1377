"""
Resolved cells.

    Cell
      ├─ coordinate
      ├─ value: one of Empty / Numeric / PlainText / RichText / Formula /
      │         Bool / DateTime / Error
      └─ property: CellProperty (size, visibility, formatting, hyperlink)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from dto.base import Entity
from dto.hyperlink import Hyperlink
from dto.style import Border, Fill, Font, NumberingFormat, PatternFill, Protection, TextAlignment
from raw.spreadsheet.string_item import PhoneticAlignment, PhoneticType
from utils.coordinates import Coordinate

DEFAULT_CELL_WIDTH = 8.43
DEFAULT_CELL_HEIGHT = 15.0
DEFAULT_DY_DESCENT = 0.2


class CellErrorType(str, Enum):
    """Error values a cell can cache; unlike style tokens this set is closed."""

    NULL = "#NULL!"
    DIV_ZERO = "#DIV/0!"
    VALUE = "#VALUE!"
    REF = "#REF!"
    NAME = "#NAME?"
    NUM = "#NUM!"
    NOT_AVAILABLE = "#N/A"
    GETTING_DATA = "#GETTING_DATA"
    SPILL = "#SPILL!"


# ---- strings ----


class PhoneticRun(Entity):
    text: str
    base_text_start_index: int
    base_text_end_index: int


class PhoneticProperties(Entity):
    alignment: PhoneticAlignment = PhoneticAlignment.NO_CONTROL
    font: Font = Font()
    phonetic_type: PhoneticType = PhoneticType.NO_CONVERSION


class RichTextRun(Entity):
    font: Font
    text: str


# ---- values ----


class EmptyValue(Entity):
    kind: Literal["empty"] = "empty"


class NumericValue(Entity):
    kind: Literal["numeric"] = "numeric"
    value: float


class PlainTextValue(Entity):
    kind: Literal["plain_text"] = "plain_text"
    text: str
    phonetic_runs: Optional[List[PhoneticRun]] = None
    phonetic_properties: Optional[PhoneticProperties] = None


class RichTextValue(Entity):
    kind: Literal["rich_text"] = "rich_text"
    runs: List[RichTextRun]
    phonetic_runs: Optional[List[PhoneticRun]] = None
    phonetic_properties: Optional[PhoneticProperties] = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


class FormulaValue(Entity):
    """Formula text plus the cached result as written, not reinterpreted."""

    kind: Literal["formula"] = "formula"
    formula: str
    last_calculated_value: Optional[str] = None


class BoolValue(Entity):
    kind: Literal["bool"] = "bool"
    value: bool


class DateTimeValue(Entity):
    """ISO-8601 text from a ``t="d"`` cell."""

    kind: Literal["date_time"] = "date_time"
    value: str


class ErrorValue(Entity):
    kind: Literal["error"] = "error"
    error: CellErrorType


CellValue = Union[
    EmptyValue,
    NumericValue,
    PlainTextValue,
    RichTextValue,
    FormulaValue,
    BoolValue,
    DateTimeValue,
    ErrorValue,
]


# ---- cell ----


class CellProperty(Entity):
    width: float = DEFAULT_CELL_WIDTH
    best_fit: bool = False
    height: float = DEFAULT_CELL_HEIGHT
    dy_descent: float = DEFAULT_DY_DESCENT
    hidden: bool = False
    show_phonetic: bool = True
    hyperlink: Optional[Hyperlink] = None
    alignment: TextAlignment = TextAlignment()
    protection: Protection = Protection()
    font: Font = Font()
    border: Border = Border()
    fill: Fill = PatternFill()
    numbering_format: NumberingFormat = NumberingFormat()


class Cell(Entity):
    coordinate: Coordinate
    value: CellValue = EmptyValue()
    property: CellProperty = CellProperty()
