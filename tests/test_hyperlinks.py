import pytest

from dto.hyperlink import EmailHyperlink, InternalHyperlink, UrlHyperlink
from opc.relationships import Relationships, normalize_target, rels_path_for
from raw.spreadsheet.workbook import RawWorkbook
from raw.spreadsheet.worksheet import RawHyperlink
from resolvers.hyperlink import parse_external, parse_location, resolve_sheet_hyperlink
from tests.conftest import MAIN_NS, relationships_xml
from utils.coordinates import Coordinate, Dimension


# ---- relationships ----


@pytest.mark.parametrize(
    "target, base, expected",
    [
        ("/xl/media/image1.png", "xl/drawings", "xl/media/image1.png"),
        ("/media/image1.png", "xl/drawings", "xl/media/image1.png"),
        ("worksheets/sheet1.xml", "xl", "xl/worksheets/sheet1.xml"),
        ("../drawings/drawing1.xml", "xl/worksheets", "xl/drawings/drawing1.xml"),
        ("#Sheet2!A1", "xl/worksheets", "#Sheet2!A1"),
    ],
)
def test_normalize_target(target, base, expected):
    assert normalize_target(target, base) == expected


def test_rels_path_for():
    assert rels_path_for("xl/worksheets/sheet1.xml") == "xl/worksheets/_rels/sheet1.xml.rels"
    assert rels_path_for("/xl/workbook.xml") == "xl/_rels/workbook.xml.rels"


def test_relationship_lookup_is_case_insensitive():
    xml = relationships_xml(
        [("rId1", "drawing", "../drawings/drawing1.xml"), ("rId2", "hyperlink", "https://example.com")],
        external=("rId2",),
    )
    rels = Relationships.from_xml(xml.encode(), "xl/worksheets/sheet1.xml")
    assert rels.zip_path_for_id("RID1") == "xl/drawings/drawing1.xml"
    assert rels.zip_path_for_id("rId2") is None
    assert rels.raw_target_for_id("rId2") == "https://example.com"
    assert rels.zip_path_for_type("/DRAWING") == ["xl/drawings/drawing1.xml"]
    assert rels.rel_for_id("rId9") is None


def test_missing_relationship_part_is_empty():
    assert len(Relationships.from_xml(None)) == 0


# ---- hyperlinks ----


def test_parse_mailto():
    assert parse_external("mailto:someone@example.com?subject=Quarterly%20report") == EmailHyperlink(
        mail_to="someone@example.com", subject="Quarterly report"
    )


def test_parse_url_is_percent_decoded():
    assert parse_external("https://example.com/a%20b") == UrlHyperlink(url="https://example.com/a b")


def test_parse_location_with_quoted_sheet():
    link = parse_location("'My Sheet'!$B$2:$C$4")
    assert link.sheet_name == "My Sheet"
    assert link.cell_range == Dimension(start=Coordinate(row=2, col=2), end=Coordinate(row=4, col=3))


def test_parse_location_without_range_points_at_a1():
    assert parse_location("Summary") == InternalHyperlink(sheet_name="Summary", cell_range=Dimension.default())


def test_parse_location_r1c1():
    link = parse_location("Data!R3C2")
    assert link.cell_range == Dimension(start=Coordinate(row=3, col=2), end=Coordinate(row=3, col=2))


WORKBOOK = f"""
<workbook xmlns="{MAIN_NS}">
  <definedNames>
    <definedName name="Totals">Sheet1!$D$10</definedName>
    <definedName name="Totals" localSheetId="1">Sheet2!$A$1:$A$3</definedName>
  </definedNames>
</workbook>
"""


@pytest.fixture
def workbook():
    return RawWorkbook.from_xml(WORKBOOK.encode())


def test_defined_name_location(workbook):
    raw = RawHyperlink(location="Totals")
    link = resolve_sheet_hyperlink(raw, Relationships(), workbook)
    assert link == InternalHyperlink(sheet_name="Sheet1", cell_range=Dimension.from_a1("D10"))


def test_sheet_local_defined_name_wins(workbook):
    raw = RawHyperlink(location="totals")
    link = resolve_sheet_hyperlink(raw, Relationships(), workbook, local_sheet_id=1)
    assert link.sheet_name == "Sheet2"
    assert link.cell_range == Dimension.from_a1("A1:A3")


def test_external_hyperlink_through_relationship():
    rels = Relationships.from_xml(
        relationships_xml([("rId1", "hyperlink", "mailto:a@b.c")], external=("rId1",)).encode(),
        "xl/worksheets/sheet1.xml",
    )
    link = resolve_sheet_hyperlink(RawHyperlink(rel_id="rId1"), rels)
    assert link == EmailHyperlink(mail_to="a@b.c")


def test_hyperlink_without_target():
    assert resolve_sheet_hyperlink(RawHyperlink(rel_id="rId5"), Relationships()) is None


def test_relationship_type_matches_suffix_only():
    xml = relationships_xml(
        [("rId1", "stylesWithEffects", "stylesWithEffects.xml"), ("rId2", "styles", "styles.xml")]
    )
    rels = Relationships.from_xml(xml.encode(), "xl/workbook.xml")
    assert rels.zip_path_for_type("/styles") == ["xl/styles.xml"]
    assert rels.zip_path_for_type("/stylesWithEffects") == ["xl/stylesWithEffects.xml"]
