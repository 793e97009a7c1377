"""
Workbook facade.

``Excel`` owns the opened package and loads each shared part (workbook,
stylesheet, shared strings, theme) at most once.  Worksheets, tables and
drawings are resolved on request:

    excel = Excel.from_path("book.xlsx")
    for sheet in excel.get_worksheets():
        print(sheet.name, sheet.get_cell("A1").value)
"""

from __future__ import annotations

import logging
from typing import IO, Dict, List, Optional

import config
from dto.drawing.worksheet_drawing import DrawingAnchor
from dto.sheet import CalculationReferenceMode, SheetBasicInfo, SheetType, Table
from errors import InvalidSheetError, SheetNotFoundError, XlsxError
from opc.archive import Archive, Source
from opc.relationships import (
    IMAGE,
    SHARED_STRINGS,
    STYLES,
    THEME,
    WORKBOOK_PART,
    WORKBOOK_RELS_PART,
    Relationships,
    rels_path_for,
)
from raw.drawing.theme import RawTheme
from raw.drawing.worksheet_drawing import RawWorksheetDrawing
from raw.spreadsheet.string_item import RawSharedStringTable
from raw.spreadsheet.stylesheet import RawStyleSheet
from raw.spreadsheet.table import RawTable
from raw.spreadsheet.workbook import RawWorkbook
from raw.spreadsheet.worksheet import RawWorksheet
from resolvers import sheet as sheet_resolver
from resolvers.drawing import DrawingContext, resolve_drawing
from resolvers.styles import StyleResolver
from resolvers.worksheet import Worksheet

logger = logging.getLogger(__name__)


class Excel:
    def __init__(self, archive: Archive):
        self.archive = archive

        self._workbook: Optional[RawWorkbook] = None
        self._relationships: Optional[Relationships] = None
        self._stylesheet: Optional[RawStyleSheet] = None
        self._shared_strings: Optional[RawSharedStringTable] = None
        self._theme: Optional[RawTheme] = None
        self._theme_loaded = False
        self._styles: Optional[StyleResolver] = None
        self._sheets: Optional[List[SheetBasicInfo]] = None
        self._worksheets: Dict[str, RawWorksheet] = {}
        self._sheet_relationships: Dict[str, Relationships] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_path(cls, path: Source) -> "Excel":
        logger.info("Opening workbook %s", path)
        return cls(Archive(path))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Excel":
        return cls(Archive(data))

    @classmethod
    def from_reader(cls, stream: IO[bytes]) -> "Excel":
        return cls(Archive(stream))

    def __enter__(self) -> "Excel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.archive.close()

    # ------------------------------------------------------------------
    # Shared parts
    # ------------------------------------------------------------------

    def get_workbook_relationships(self) -> Relationships:
        if self._relationships is None:
            data = self.archive.read_optional(WORKBOOK_RELS_PART)
            self._relationships = Relationships.from_xml(data, WORKBOOK_PART)
        return self._relationships

    def _workbook_part(self, rel_type: str) -> Optional[str]:
        """Archive path of the first workbook relationship whose type ends with ``rel_type``."""
        paths = self.get_workbook_relationships().zip_path_for_type(rel_type)
        return paths[0] if paths else None

    def get_raw_workbook(self) -> RawWorkbook:
        if self._workbook is None:
            logger.info("Loading %s", WORKBOOK_PART)
            self._workbook = RawWorkbook.from_xml(self.archive.read(WORKBOOK_PART), WORKBOOK_PART)
        return self._workbook

    def get_raw_stylesheet(self) -> RawStyleSheet:
        if self._stylesheet is None:
            path = self._workbook_part(STYLES)
            data = self.archive.read_optional(path)
            if data is None:
                logger.warning("Workbook has no stylesheet, using defaults")
                self._stylesheet = RawStyleSheet()
            else:
                logger.info("Loading %s", path)
                self._stylesheet = RawStyleSheet.from_xml(data, path)
        return self._stylesheet

    def get_raw_shared_strings(self) -> RawSharedStringTable:
        if self._shared_strings is None:
            path = self._workbook_part(SHARED_STRINGS)
            if path is None or not self.archive.has_part(path):
                logger.debug("Workbook has no shared strings part")
                self._shared_strings = RawSharedStringTable()
            else:
                logger.info("Loading %s", path)
                with self.archive.open(path) as stream:
                    self._shared_strings = RawSharedStringTable.from_xml(stream, path)
        return self._shared_strings

    def get_raw_theme(self) -> Optional[RawTheme]:
        if not self._theme_loaded:
            path = self._workbook_part(THEME)
            data = self.archive.read_optional(path)
            if data is None:
                logger.debug("Workbook has no theme part")
            else:
                logger.info("Loading %s", path)
                self._theme = RawTheme.from_xml(data, path)
            self._theme_loaded = True
        return self._theme

    def get_styles(self) -> StyleResolver:
        if self._styles is None:
            theme = self.get_raw_theme()
            self._styles = StyleResolver(self.get_raw_stylesheet(), theme.color_scheme if theme else None)
        return self._styles

    # ------------------------------------------------------------------
    # Workbook settings
    # ------------------------------------------------------------------

    def is_1904(self) -> bool:
        return sheet_resolver.is_1904(self.get_raw_workbook())

    def calculation_reference_mode(self) -> Optional[CalculationReferenceMode]:
        return sheet_resolver.calculation_reference_mode(self.get_raw_workbook())

    # ------------------------------------------------------------------
    # Sheets
    # ------------------------------------------------------------------

    def get_sheets(self) -> List[SheetBasicInfo]:
        if self._sheets is None:
            self._sheets = sheet_resolver.resolve_sheet_infos(
                self.get_raw_workbook(), self.get_workbook_relationships()
            )
        return self._sheets

    def get_sheet_by_name(self, name: str) -> SheetBasicInfo:
        key = name.lower()
        for info in self.get_sheets():
            if info.name.lower() == key:
                return info
        raise SheetNotFoundError(name)

    def get_sheet_by_id(self, sheet_id: int) -> SheetBasicInfo:
        for info in self.get_sheets():
            if info.sheet_id == sheet_id:
                return info
        raise SheetNotFoundError(str(sheet_id))

    def get_raw_worksheet(self, info: SheetBasicInfo) -> RawWorksheet:
        raw = self._worksheets.get(info.path)
        if raw is None:
            if info.sheet_type != SheetType.WORKSHEET:
                raise InvalidSheetError(f"sheet {info.name!r} is a {info.sheet_type.value}, not a worksheet")
            logger.info("Loading %s (%s)", info.path, info.name)
            with self.archive.open(info.path) as stream:
                raw = RawWorksheet.from_xml(stream, info.path)
            self._worksheets[info.path] = raw
        return raw

    def get_sheet_relationships(self, info: SheetBasicInfo) -> Relationships:
        rels = self._sheet_relationships.get(info.path)
        if rels is None:
            data = self.archive.read_optional(rels_path_for(info.path))
            rels = Relationships.from_xml(data, info.path)
            self._sheet_relationships[info.path] = rels
        return rels

    def _local_sheet_id(self, info: SheetBasicInfo) -> Optional[int]:
        """Position of the sheet in ``<sheets>``; ``localSheetId`` of defined names refers to it."""
        for index, sheet in enumerate(self.get_raw_workbook().sheets):
            if sheet.rel_id == info.rel_id:
                return index
        return None

    def get_worksheet(self, info: SheetBasicInfo, include_drawings: bool = True) -> Worksheet:
        raw = self.get_raw_worksheet(info)
        return Worksheet(
            name=info.name,
            sheet_id=info.sheet_id,
            raw=raw,
            shared_strings=self.get_raw_shared_strings(),
            styles=self.get_styles(),
            relationships=self.get_sheet_relationships(info),
            workbook=self.get_raw_workbook(),
            tables=self.get_tables(info),
            drawings=self.get_drawings(info) if include_drawings else [],
            is_1904=self.is_1904(),
            calculation_reference_mode=self.calculation_reference_mode(),
            local_sheet_id=self._local_sheet_id(info),
        )

    def get_worksheets(self, include_drawings: bool = True) -> List[Worksheet]:
        return [
            self.get_worksheet(info, include_drawings)
            for info in self.get_sheets()
            if info.sheet_type == SheetType.WORKSHEET
        ]

    # ------------------------------------------------------------------
    # Tables and drawings
    # ------------------------------------------------------------------

    def get_tables(self, info: SheetBasicInfo) -> List[Table]:
        """Tables of a sheet; parts that are missing or fail to load are skipped."""
        raw = self.get_raw_worksheet(info)
        rels = self.get_sheet_relationships(info)
        default_style = self.get_raw_stylesheet().default_table_style
        tables = []
        for rel_id in raw.table_part_rel_ids:
            path = rels.zip_path_for_id(rel_id)
            if path is None:
                logger.warning("Sheet %s: table relationship %r has no part", info.name, rel_id)
                continue
            try:
                raw_table = RawTable.from_xml(self.archive.read(path), path)
            except XlsxError as exc:
                logger.warning("Sheet %s: skipping table %s: %s", info.name, path, exc)
                continue
            tables.append(sheet_resolver.resolve_table(raw_table, default_style))
        return tables

    def _images(self, relationships: Relationships) -> Dict[str, bytes]:
        images = {}
        for rel in relationships:
            if rel.external or not rel.rel_type.lower().endswith(IMAGE.lower()):
                continue
            data = self.archive.read_optional(rel.target)
            if data is not None:
                images[rel.rel_id] = data
        return images

    def get_drawings(self, info: SheetBasicInfo) -> List[DrawingAnchor]:
        """The anchored objects of the sheet's drawing part, or nothing when it has none."""
        raw = self.get_raw_worksheet(info)
        if raw.drawing_rel_id is None:
            return []
        path = self.get_sheet_relationships(info).zip_path_for_id(raw.drawing_rel_id)
        if path is None:
            logger.warning("Sheet %s: drawing relationship %r has no part", info.name, raw.drawing_rel_id)
            return []
        try:
            drawing = RawWorksheetDrawing.from_xml(self.archive.read(path), path)
        except XlsxError as exc:
            logger.warning("Sheet %s: skipping drawing %s: %s", info.name, path, exc)
            return []

        relationships = Relationships.from_xml(self.archive.read_optional(rels_path_for(path)), path)
        context = DrawingContext(
            relationships=relationships,
            theme=self.get_raw_theme(),
            images=self._images(relationships) if config.XLSX_LOAD_IMAGES else None,
            workbook=self.get_raw_workbook(),
        )
        anchors = resolve_drawing(drawing, context)
        logger.info("Sheet %s: %d drawing anchor(s)", info.name, len(anchors))
        return anchors
