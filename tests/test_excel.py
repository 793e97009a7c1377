import pytest

from dto.cell import EmptyValue, NumericValue, PlainTextValue
from dto.hyperlink import UrlHyperlink
from dto.sheet import CalculationReferenceMode, SheetType, SheetVisibility
from errors import InvalidSheetError, PartNotFoundError, SheetNotFoundError, XlsxError
from excel import Excel
from tests.conftest import (
    MAIN_NS,
    REL_NS,
    build_package,
    relationships_xml,
    shared_strings_xml,
    sheet_xml,
    styles_xml,
    workbook_parts,
)
from utils.coordinates import Dimension

DATA_SHEET = sheet_xml(
    """
    <dimension ref="A1:C3"/>
    <cols><col min="3" max="3" width="30" style="1"/></cols>
    <sheetData>
      <row r="1"><c r="A1" t="s"><v>0</v></c><c r="B1" t="s"><v>1</v></c></row>
      <row r="2"><c r="A2" t="s"><v>2</v></c><c r="B2" s="1"><v>10.5</v></c></row>
      <row><c r="A3"><v>7</v></c></row>
    </sheetData>
    <mergeCells count="1"><mergeCell ref="A1:B1"/></mergeCells>
    <hyperlinks><hyperlink ref="A2" r:id="rId3"/></hyperlinks>
    <tableParts count="2"><tablePart r:id="rId1"/><tablePart r:id="rId2"/></tableParts>
    """
)

TABLE = f"""
<table xmlns="{MAIN_NS}" id="3" name="Sales" displayName="Sales" ref="A1:B2" totalsRowCount="0">
  <tableColumns count="2"><tableColumn id="1" name="Region"/><tableColumn id="2" name="Amount"/></tableColumns>
  <tableStyleInfo showRowStripes="1"/>
</table>
"""

STYLES = styles_xml(
    """
    <fonts count="2"><font><name val="Calibri"/></font><font><b/><name val="Calibri"/></font></fonts>
    <cellXfs count="2"><xf fontId="0"/><xf fontId="1" applyFont="1"/></cellXfs>
    <tableStyles count="0" defaultTableStyle="TableStyleMedium2"/>
    """
)


@pytest.fixture
def parts():
    parts = workbook_parts(
        [("Data", DATA_SHEET), ("Other", sheet_xml("<sheetData/>"))],
        styles=STYLES,
        shared_strings=shared_strings_xml(["<si><t>Region</t></si>", "<si><t>Amount</t></si>", "<si><t>North</t></si>"]),
        workbook_pr='<workbookPr date1904="1"/>',
        workbook_extra='<calcPr calcId="191029" refMode="R1C1"/>',
    )
    parts["xl/worksheets/_rels/sheet1.xml.rels"] = relationships_xml(
        [
            ("rId1", "table", "../tables/table1.xml"),
            ("rId2", "table", "../tables/missing.xml"),
            ("rId3", "hyperlink", "https://example.com/north"),
        ],
        external=("rId3",),
    )
    parts["xl/tables/table1.xml"] = TABLE
    return parts


@pytest.fixture
def excel(parts, make_excel):
    return make_excel(parts)


def test_sheet_descriptors(excel):
    sheets = excel.get_sheets()
    assert [(s.name, s.sheet_id, s.path) for s in sheets] == [
        ("Data", 1, "xl/worksheets/sheet1.xml"),
        ("Other", 2, "xl/worksheets/sheet2.xml"),
    ]
    assert sheets[0].sheet_type == SheetType.WORKSHEET
    assert sheets[0].visibility == SheetVisibility.VISIBLE


def test_sheet_lookup(excel):
    assert excel.get_sheet_by_name("data").sheet_id == 1
    assert excel.get_sheet_by_id(2).name == "Other"
    with pytest.raises(SheetNotFoundError):
        excel.get_sheet_by_name("Missing")
    with pytest.raises(SheetNotFoundError):
        excel.get_sheet_by_id(9)


def test_workbook_settings(excel):
    assert excel.is_1904() is True
    assert excel.calculation_reference_mode() == CalculationReferenceMode.R1C1


def test_raw_parts_are_cached(excel):
    assert excel.get_raw_workbook() is excel.get_raw_workbook()
    assert excel.get_raw_stylesheet() is excel.get_raw_stylesheet()
    info = excel.get_sheet_by_name("Data")
    assert excel.get_raw_worksheet(info) is excel.get_raw_worksheet(info)
    assert excel.get_raw_theme() is None


def test_worksheet_cells(excel):
    sheet = excel.get_worksheet(excel.get_sheet_by_name("Data"))
    assert sheet.dimension == Dimension.from_a1("A1:C3")
    assert sheet.merged_cells == [Dimension.from_a1("A1:B1")]
    assert sheet.get_cell("A1").value == PlainTextValue(text="Region")
    b2 = sheet.get_cell("B2")
    assert b2.value == NumericValue(value=10.5)
    assert b2.property.font.bold is True
    # a row without ``r`` follows the previous one
    assert sheet.get_cell("A3").value == NumericValue(value=7.0)
    assert [str(cell.coordinate) for cell in sheet.cells()] == ["A1", "B1", "A2", "B2", "A3"]


def test_missing_cell_inherits_column_format(excel):
    cell = excel.get_worksheet(excel.get_sheet_by_name("Data")).get_cell("C2")
    assert cell.value == EmptyValue()
    assert cell.property.width == 30.0
    assert cell.property.font.bold is True


def test_cell_hyperlink(excel):
    sheet = excel.get_worksheet(excel.get_sheet_by_name("Data"))
    assert sheet.get_cell("A2").property.hyperlink == UrlHyperlink(url="https://example.com/north")
    assert sheet.get_cell("A1").property.hyperlink is None


def test_tables_skip_missing_parts(excel):
    tables = excel.get_tables(excel.get_sheet_by_name("Data"))
    assert len(tables) == 1
    table = tables[0]
    assert table.display_name == "Sales"
    assert table.table_id == 3
    assert table.columns == ["Region", "Amount"]
    assert table.header_row_count == 1
    assert table.totals_row_count == 0
    assert table.table_style.name == "TableStyleMedium2"
    assert table.table_style.show_row_stripes is True


def test_worksheets_without_drawings(excel):
    sheets = excel.get_worksheets()
    assert [sheet.name for sheet in sheets] == ["Data", "Other"]
    assert all(sheet.drawings == [] for sheet in sheets)
    assert sheets[0].is_1904 is True


def test_optional_parts_may_be_missing(make_excel):
    excel = make_excel(workbook_parts([("Only", sheet_xml('<sheetData><row r="1"><c r="A1"><v>1</v></c></row></sheetData>'))]))
    sheet = excel.get_worksheet(excel.get_sheets()[0])
    assert sheet.get_cell("A1").property.font.name == "Calibri"
    assert excel.is_1904() is False
    assert excel.calculation_reference_mode() is None


def test_chartsheet_is_not_a_worksheet(make_excel):
    parts = workbook_parts([("Data", sheet_xml("<sheetData/>"))])
    parts["xl/workbook.xml"] = (
        f'<workbook xmlns="{MAIN_NS}" xmlns:r="{REL_NS}"><sheets>'
        '<sheet name="Data" sheetId="1" r:id="rId1"/><sheet name="Chart" sheetId="2" r:id="rId2"/>'
        "</sheets></workbook>"
    )
    parts["xl/_rels/workbook.xml.rels"] = relationships_xml(
        [("rId1", "worksheet", "worksheets/sheet1.xml"), ("rId2", "chartsheet", "chartsheets/sheet1.xml")]
    )
    excel = make_excel(parts)
    assert excel.get_sheet_by_name("Chart").sheet_type == SheetType.CHARTSHEET
    assert [sheet.name for sheet in excel.get_worksheets()] == ["Data"]
    with pytest.raises(InvalidSheetError):
        excel.get_worksheet(excel.get_sheet_by_name("Chart"))


def test_unknown_sheet_state_is_rejected(make_excel):
    parts = workbook_parts([("Data", sheet_xml("<sheetData/>"))])
    parts["xl/workbook.xml"] = parts["xl/workbook.xml"].replace('r:id="rId1"', 'r:id="rId1" state="bogus"')
    with pytest.raises(InvalidSheetError):
        make_excel(parts).get_sheets()


def test_missing_workbook_part(make_excel):
    with pytest.raises(PartNotFoundError):
        make_excel({"docProps/app.xml": "<Properties/>"}).get_raw_workbook()


def test_not_a_zip():
    with pytest.raises(XlsxError):
        Excel.from_bytes(b"definitely not a zip")


def test_from_reader(parts, tmp_path):
    path = tmp_path / "book.xlsx"
    path.write_bytes(build_package(parts))
    with open(path, "rb") as stream:
        with Excel.from_reader(stream) as excel:
            assert excel.get_sheet_by_name("Other").sheet_id == 2
    with Excel.from_path(str(path)) as excel:
        assert len(excel.get_sheets()) == 2


def test_styles_with_effects_is_not_the_stylesheet(make_excel):
    parts = workbook_parts([("Data", sheet_xml("<sheetData/>"))], styles=STYLES)
    parts["xl/_rels/workbook.xml.rels"] = relationships_xml(
        [
            ("rId1", "worksheet", "worksheets/sheet1.xml"),
            ("rId2", "stylesWithEffects", "stylesWithEffects.xml"),
            ("rId3", "styles", "styles.xml"),
        ]
    )
    parts["xl/stylesWithEffects.xml"] = styles_xml("")
    excel = make_excel(parts)
    assert len(excel.get_raw_stylesheet().fonts) == 2


def test_shared_string_cell_with_style_index(make_excel):
    styles = styles_xml(
        """
        <fonts count="3">
          <font><name val="Calibri"/></font>
          <font><i/><name val="Calibri"/></font>
          <font><b/><sz val="16"/><color rgb="FF0000FF"/><name val="Georgia"/></font>
        </fonts>
        <fills count="2">
          <fill><patternFill patternType="none"/></fill>
          <fill><patternFill patternType="solid"><fgColor rgb="FFFFFF00"/></patternFill></fill>
        </fills>
        <cellXfs count="7">
          <xf fontId="0"/><xf fontId="1" applyFont="1"/><xf fontId="0"/><xf fontId="0"/>
          <xf fontId="0"/><xf fontId="0"/>
          <xf fontId="2" fillId="1" applyFont="1" applyFill="1"/>
        </cellXfs>
        """
    )
    parts = workbook_parts(
        [("Sheet1", sheet_xml('<sheetData><row r="2"><c r="B2" t="s" s="6"><v>0</v></c></row></sheetData>'))],
        styles=styles,
        shared_strings=shared_strings_xml(["<si><t>Hello</t></si>"]),
    )
    excel = make_excel(parts)
    resolver = excel.get_styles()
    raw = excel.get_raw_stylesheet()

    cell = excel.get_worksheet(excel.get_sheets()[0]).get_cell("B2")
    assert cell.value == PlainTextValue(text="Hello")
    assert cell.property.font == resolver.font(raw.fonts[2])
    assert cell.property.font.name == "Georgia"
    assert cell.property.font.bold is True
    assert cell.property.font.color == "0000ffff"
    assert cell.property.fill == resolver.fill(raw.fills[1])
    assert cell.property.fill.foreground_color == "ffff00ff"
