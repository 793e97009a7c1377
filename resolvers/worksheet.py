"""
Resolved worksheet.

``Worksheet`` keeps the raw sheet together with the shared tables it needs
(shared strings, stylesheet, color scheme, relationships, defined names)
and resolves cells on request.  Rows are indexed once by their ``r``
attribute; nothing else is precomputed.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

from dto.cell import Cell, EmptyValue
from dto.drawing.worksheet_drawing import DrawingAnchor
from dto.hyperlink import Hyperlink
from dto.sheet import CalculationReferenceMode, Table
from opc.relationships import Relationships
from raw.spreadsheet.string_item import RawSharedStringTable
from raw.spreadsheet.workbook import RawWorkbook
from raw.spreadsheet.worksheet import RawCell, RawRow, RawWorksheet
from resolvers.cell_property import resolve_cell_property
from resolvers.cell_value import resolve_cell_value
from resolvers.hyperlink import resolve_sheet_hyperlink
from resolvers.styles import StyleResolver
from utils.coordinates import Coordinate, Dimension

logger = logging.getLogger(__name__)


class Worksheet:
    def __init__(
        self,
        name: str,
        sheet_id: int,
        raw: RawWorksheet,
        shared_strings: RawSharedStringTable,
        styles: StyleResolver,
        relationships: Optional[Relationships] = None,
        workbook: Optional[RawWorkbook] = None,
        tables: Optional[List[Table]] = None,
        drawings: Optional[List[DrawingAnchor]] = None,
        is_1904: bool = False,
        calculation_reference_mode: Optional[CalculationReferenceMode] = None,
        local_sheet_id: Optional[int] = None,
    ):
        self.name = name
        self.sheet_id = sheet_id
        self.raw = raw
        self.shared_strings = shared_strings
        self.styles = styles
        self.relationships = relationships or Relationships()
        self.workbook = workbook
        self.tables: List[Table] = tables or []
        self.drawings: List[DrawingAnchor] = drawings or []
        self.is_1904 = is_1904
        self.calculation_reference_mode = calculation_reference_mode
        self.local_sheet_id = local_sheet_id

        self._rows: Dict[int, RawRow] = {}
        next_index = 1
        for row in raw.rows:
            index = row.index if row.index is not None else next_index
            self._rows.setdefault(index, row)
            next_index = index + 1
        self._hyperlinks: Optional[List[Tuple[Dimension, Hyperlink]]] = None

    def __repr__(self) -> str:
        return f"Worksheet(name={self.name!r}, sheet_id={self.sheet_id})"

    # ---- sheet metadata ----

    @property
    def dimension(self) -> Optional[Dimension]:
        return self.raw.dimension

    @property
    def merged_cells(self) -> List[Dimension]:
        return [ref for ref in self.raw.merge_cells if ref is not None]

    # ---- cells ----

    def get_cell(self, coordinate: Union[Coordinate, str]) -> Cell:
        """
        Resolve the cell at ``coordinate`` (a ``Coordinate`` or ``"B2"``).

        A position with no ``<c>`` element is an empty cell that still
        inherits its row and column formatting.
        """
        if isinstance(coordinate, str):
            parsed = Coordinate.from_string(coordinate)
            if parsed is None:
                raise ValueError(f"not a cell reference: {coordinate!r}")
            coordinate = parsed
        row = self._rows.get(coordinate.row)
        raw_cell = self._find_cell(row, coordinate)
        return self._resolve(coordinate, raw_cell, row)

    def cells(self) -> Iterator[Cell]:
        """Every cell written in ``sheetData``, in document order."""
        for index, row in self._rows.items():
            for raw_cell in row.cells:
                coordinate = raw_cell.coordinate
                if coordinate is None or coordinate.row != index:
                    logger.debug("Skipping cell %r outside row %d", coordinate, index)
                    continue
                yield self._resolve(coordinate, raw_cell, row)

    @staticmethod
    def _find_cell(row: Optional[RawRow], coordinate: Coordinate) -> Optional[RawCell]:
        if row is None:
            return None
        for cell in row.cells:
            if cell.coordinate == coordinate:
                return cell
        return None

    def _resolve(self, coordinate: Coordinate, raw_cell: Optional[RawCell], row: Optional[RawRow]) -> Cell:
        column = self.raw.get_column_information(coordinate.col)
        if raw_cell is None:
            value = EmptyValue()
        else:
            value = resolve_cell_value(
                raw_cell, self.shared_strings, self.styles, self.raw.phonetic_properties
            )
        prop = resolve_cell_property(
            raw_cell,
            row,
            column,
            self.raw.sheet_format_properties,
            self.styles,
            hyperlink=self.hyperlink_at(coordinate),
        )
        return Cell(coordinate=coordinate, value=value, property=prop)

    # ---- hyperlinks ----

    def hyperlink_at(self, coordinate: Coordinate) -> Optional[Hyperlink]:
        if self._hyperlinks is None:
            self._hyperlinks = self._resolve_hyperlinks()
        for ref, link in self._hyperlinks:
            if ref.contains(coordinate):
                return link
        return None

    def _resolve_hyperlinks(self) -> List[Tuple[Dimension, Hyperlink]]:
        resolved = []
        for raw in self.raw.hyperlinks:
            if raw.ref is None:
                continue
            link = resolve_sheet_hyperlink(raw, self.relationships, self.workbook, self.local_sheet_id)
            if link is None:
                logger.debug("Hyperlink at %s has no target", raw.ref)
                continue
            resolved.append((raw.ref, link))
        return resolved
