"""
1-based cell coordinates and rectangular ranges.

A1 references are handled with openpyxl's reference helpers; R1C1 references
(used by workbooks saved in R1C1 reference mode) are parsed here.
"""

from __future__ import annotations

import re
from typing import Optional

from openpyxl.utils.cell import (
    column_index_from_string,
    coordinate_from_string,
    get_column_letter,
    range_boundaries,
)
from openpyxl.utils.exceptions import CellCoordinatesException
from pydantic import BaseModel

MAX_ROW = 1048576
MAX_COLUMN = 16384

_R1C1 = re.compile(r"^R(\d+)C(\d+)$", re.IGNORECASE)


class Coordinate(BaseModel):
    """A cell position; both axes are 1-based."""

    row: int
    col: int

    model_config = {"frozen": True}

    @classmethod
    def from_a1(cls, reference: str) -> Optional["Coordinate"]:
        """``"B2"`` -> ``Coordinate(row=2, col=2)``; ``None`` if unparseable."""
        try:
            letters, row = coordinate_from_string(reference.replace("$", "").strip())
            return cls(row=row, col=column_index_from_string(letters))
        except (CellCoordinatesException, ValueError):
            return None

    @classmethod
    def from_r1c1(cls, reference: str) -> Optional["Coordinate"]:
        match = _R1C1.match(reference.strip())
        if match is None:
            return None
        return cls(row=int(match.group(1)), col=int(match.group(2)))

    @classmethod
    def from_string(cls, reference: str) -> Optional["Coordinate"]:
        return cls.from_r1c1(reference) or cls.from_a1(reference)

    def to_a1(self) -> str:
        return f"{get_column_letter(self.col)}{self.row}"

    def __str__(self) -> str:
        return self.to_a1()


class Dimension(BaseModel):
    """An inclusive rectangular range between two coordinates."""

    start: Coordinate
    end: Coordinate

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> "Dimension":
        origin = Coordinate(row=1, col=1)
        return cls(start=origin, end=origin)

    @classmethod
    def from_a1(cls, reference: str) -> Optional["Dimension"]:
        """
        Parse ``"A1:C3"``, a single cell ``"B2"``, or whole rows/columns
        (``"A:C"``, ``"2:4"``), which expand to the sheet limits.
        """
        text = reference.replace("$", "").strip()
        if not text:
            return None
        try:
            min_col, min_row, max_col, max_row = range_boundaries(text)
        except (CellCoordinatesException, ValueError, TypeError):
            return None
        return cls(
            start=Coordinate(row=min_row or 1, col=min_col or 1),
            end=Coordinate(row=max_row or MAX_ROW, col=max_col or MAX_COLUMN),
        )

    @classmethod
    def from_r1c1(cls, reference: str) -> Optional["Dimension"]:
        parts = reference.strip().split(":")
        if len(parts) > 2:
            return None
        start = Coordinate.from_r1c1(parts[0])
        end = Coordinate.from_r1c1(parts[-1])
        if start is None or end is None:
            return None
        return cls(start=start, end=end)

    @classmethod
    def from_string(cls, reference: str) -> Optional["Dimension"]:
        return cls.from_r1c1(reference) or cls.from_a1(reference)

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.start.row <= coordinate.row <= self.end.row
            and self.start.col <= coordinate.col <= self.end.col
        )

    def to_a1(self) -> str:
        if self.start == self.end:
            return self.start.to_a1()
        return f"{self.start.to_a1()}:{self.end.to_a1()}"

    def __str__(self) -> str:
        return self.to_a1()


def to_coordinate(value: Optional[str]) -> Optional[Coordinate]:
    """Attribute converter for ``r="B2"`` style references."""
    if value is None:
        return None
    return Coordinate.from_string(value)


def to_dimension(value: Optional[str]) -> Optional[Dimension]:
    """Attribute converter for ``ref="A1:C3"`` style references."""
    if value is None:
        return None
    return Dimension.from_string(value)
