"""
Top-level output DTOs for the JSON dump written by the CLI.

    WorkbookResult
      └─ sheets: List[SheetResult]
           ├─ cells: List[Cell]          (populated cells only)
           ├─ merged_cells / tables
           └─ drawings: List[DrawingAnchor]   (with --include-drawings)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from dto.cell import Cell
from dto.drawing.worksheet_drawing import DrawingAnchor
from dto.sheet import CalculationReferenceMode, Table
from utils.coordinates import Dimension


class SheetResult(BaseModel):
    """Structured output for a single worksheet."""

    sheet_name: str
    sheet_id: int
    dimension: Optional[Dimension] = None
    merged_cells: List[Dimension] = []
    cells: List[Cell] = []
    tables: List[Table] = []
    drawings: Optional[List[DrawingAnchor]] = None


class WorkbookResult(BaseModel):
    """Top-level output for an entire workbook."""

    file_name: str
    is_1904: bool = False
    calculation_reference_mode: Optional[CalculationReferenceMode] = None
    sheets: List[SheetResult] = []
