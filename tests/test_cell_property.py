import pytest

from dto.cell import DEFAULT_CELL_HEIGHT
from dto.style import PatternFill
from raw.spreadsheet.stylesheet import BorderStyle, HorizontalAlignment, PatternType, RawStyleSheet
from raw.spreadsheet.worksheet import (
    RawCell,
    RawColumnInformation,
    RawRow,
    RawSheetFormatProperties,
    RawWorksheet,
)
from resolvers.cell_property import resolve_cell_property
from resolvers.styles import StyleResolver
from tests.conftest import sheet_xml, styles_xml

STYLES = styles_xml(
    """
    <numFmts count="1"><numFmt numFmtId="164" formatCode="0.000"/></numFmts>
    <fonts count="3">
      <font><sz val="11"/><name val="Calibri"/></font>
      <font><b/><sz val="14"/><color rgb="FFFF0000"/><name val="Arial"/></font>
      <font><i/><name val="Courier"/></font>
    </fonts>
    <fills count="3">
      <fill><patternFill patternType="none"/></fill>
      <fill><patternFill patternType="gray125"/></fill>
      <fill><patternFill patternType="solid"><fgColor rgb="FF00FF00"/></patternFill></fill>
    </fills>
    <borders count="2">
      <border><left/><right/><top/><bottom/><diagonal/></border>
      <border><left style="thin"/><right/><top/><bottom style="double"><color indexed="2"/></bottom><diagonal/></border>
    </borders>
    <cellStyleXfs count="2">
      <xf numFmtId="0" fontId="0" fillId="0" borderId="0"/>
      <xf numFmtId="0" fontId="2" fillId="0" borderId="0"/>
    </cellStyleXfs>
    <cellXfs count="5">
      <xf numFmtId="0" fontId="0" fillId="0" borderId="0" xfId="0"/>
      <xf numFmtId="164" fontId="1" fillId="2" borderId="1" xfId="0" applyNumberFormat="1" applyFont="1" applyFill="1" applyBorder="1"/>
      <xf numFmtId="14" fontId="1" fillId="0" borderId="0" xfId="1" applyNumberFormat="1" applyFont="0"/>
      <xf numFmtId="0" fontId="0" fillId="0" borderId="0" xfId="0" applyAlignment="1" applyProtection="1">
        <alignment horizontal="center" wrapText="1"/>
        <protection locked="0" hidden="1"/>
      </xf>
      <xf numFmtId="0" fontId="0" fillId="1" borderId="0" xfId="0" applyFill="1"/>
    </cellXfs>
    """
)

SHEET = sheet_xml(
    """
    <sheetFormatPr defaultRowHeight="18" baseColWidth="10"/>
    <cols><col min="2" max="3" width="20.5" style="4" customWidth="1" bestFit="1"/></cols>
    <sheetData>
      <row r="1" ht="30" customHeight="1"><c r="A1" s="1"><v>1</v></c><c r="B1" s="2"><v>2</v></c></row>
      <row r="2" s="3" customFormat="1"><c r="A2"><v>3</v></c></row>
      <row r="3" hidden="1"><c r="B3"><v>4</v></c></row>
    </sheetData>
    """
)


@pytest.fixture
def styles():
    return StyleResolver(RawStyleSheet.from_xml(STYLES.encode()))


@pytest.fixture
def sheet():
    return RawWorksheet.from_xml(SHEET.encode())


def prop(sheet, styles, row_index, col):
    row = next((row for row in sheet.rows if row.index == row_index), None)
    cell = None
    if row is not None:
        cell = next((c for c in row.cells if c.coordinate.col == col), None)
    return resolve_cell_property(
        cell, row, sheet.get_column_information(col), sheet.sheet_format_properties, styles
    )


def test_applied_cell_format(sheet, styles):
    result = prop(sheet, styles, 1, 1)
    assert result.font.bold is True
    assert result.font.name == "Arial"
    assert result.font.color == "ff0000ff"
    assert result.fill == PatternFill(pattern_type=PatternType.SOLID, foreground_color="00ff00ff", background_color="ffffffff")
    assert result.border.left.style == BorderStyle.THIN
    assert result.border.left.color == "000000ff"
    assert result.border.bottom.color == "ff0000ff"
    assert result.numbering_format.format_id == 164
    assert result.numbering_format.format_code == "0.000"


def test_unapplied_font_falls_back_to_cell_style(sheet, styles):
    result = prop(sheet, styles, 1, 2)
    assert result.font.italic is True
    assert result.font.name == "Courier"
    assert result.numbering_format.format_code == "mm-dd-yy"


def test_row_style_applies_to_unstyled_cells(sheet, styles):
    result = prop(sheet, styles, 2, 1)
    assert result.alignment.horizontal == HorizontalAlignment.CENTER
    assert result.alignment.wrap_text is True
    assert result.protection.locked is False
    # hidden protection hides the cell
    assert result.hidden is True


def test_column_style_and_width(sheet, styles):
    result = prop(sheet, styles, 5, 2)
    assert result.width == 20.5
    assert result.best_fit is True
    assert result.fill.pattern_type == PatternType.GRAY_125
    assert result.height == 18.0


def test_sheet_defaults(sheet, styles):
    result = prop(sheet, styles, 1, 9)
    assert result.width == 15.0
    assert result.height == 30.0
    assert result.hidden is False


def test_hidden_row(sheet, styles):
    assert prop(sheet, styles, 3, 2).hidden is True


def test_no_records_at_all():
    empty = StyleResolver(RawStyleSheet())
    result = resolve_cell_property(None, None, None, None, empty)
    assert result.height == DEFAULT_CELL_HEIGHT
    assert result.font.name == "Calibri"
    assert result.numbering_format.format_code == "General"


# ---- fallback chains ----


@pytest.mark.parametrize(
    "cell, row, column, expected",
    [
        (RawCell(show_phonetic=False), RawRow(show_phonetic=True), RawColumnInformation(show_phonetic=True), False),
        (RawCell(), RawRow(show_phonetic=False), RawColumnInformation(show_phonetic=True), False),
        (RawCell(), RawRow(), RawColumnInformation(show_phonetic=False), False),
        (None, None, RawColumnInformation(show_phonetic=False), False),
        (RawCell(show_phonetic=True), RawRow(show_phonetic=False), None, True),
        (RawCell(), RawRow(), RawColumnInformation(), True),
    ],
)
def test_show_phonetic_takes_first_record_that_sets_it(cell, row, column, expected):
    result = resolve_cell_property(cell, row, column, None, StyleResolver(RawStyleSheet()))
    assert result.show_phonetic is expected


@pytest.mark.parametrize(
    "row, sheet_format, column, expected",
    [
        (None, RawSheetFormatProperties(zero_height=True), None, True),
        (RawRow(), RawSheetFormatProperties(zero_height=True), RawColumnInformation(hidden=False), True),
        (None, None, RawColumnInformation(hidden=True), True),
        (RawRow(), RawSheetFormatProperties(zero_height=False), RawColumnInformation(hidden=True), True),
        (RawRow(hidden=False), RawSheetFormatProperties(zero_height=True), RawColumnInformation(hidden=True), False),
        (RawRow(hidden=True), None, RawColumnInformation(hidden=False), True),
        (None, RawSheetFormatProperties(), RawColumnInformation(), False),
    ],
)
def test_hidden_takes_first_layer_that_decides(row, sheet_format, column, expected):
    result = resolve_cell_property(None, row, column, sheet_format, StyleResolver(RawStyleSheet()))
    assert result.hidden is expected


def test_hidden_protection_wins_over_visible_row(styles):
    result = resolve_cell_property(RawCell(style=3), RawRow(hidden=False), None, None, styles)
    assert result.hidden is True


def test_hidden_layers_from_xml(styles):
    sheet = RawWorksheet.from_xml(
        sheet_xml(
            """
            <sheetFormatPr defaultRowHeight="15" zeroHeight="1"/>
            <cols><col min="1" max="1" hidden="1" phonetic="1"/></cols>
            <sheetData><row r="2" hidden="0" ph="0"><c r="A2"><v>1</v></c></row></sheetData>
            """
        ).encode()
    )
    assert prop(sheet, styles, 1, 1).hidden is True
    shown = prop(sheet, styles, 2, 1)
    assert shown.hidden is False
    assert shown.show_phonetic is False
    assert prop(sheet, styles, 1, 1).show_phonetic is True


def test_cell_style_wins_over_row_and_column(styles):
    result = resolve_cell_property(RawCell(style=1), RawRow(style=4), RawColumnInformation(style=3), None, styles)
    assert result.font.name == "Arial"
    assert result.fill.pattern_type == PatternType.SOLID
    # neither the cell nor the row format sets an alignment
    assert result.alignment.horizontal == HorizontalAlignment.CENTER
