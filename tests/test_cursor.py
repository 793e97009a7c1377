import pytest

from dto.drawing.enums import LightRigPreset, LineCap, PresetCamera, PresetShadowType
from errors import MissingAttributeError, UnexpectedEndOfFile, XmlSyntaxError
from raw.cursor import EOF, End, Start, Text, XmlCursor
from raw.node import XmlEnum
from raw.spreadsheet.stylesheet import BorderStyle, HorizontalAlignment, PatternType, VerticalAlignment
from raw.spreadsheet.worksheet import RawWorksheet
from raw.spreadsheet.workbook import RawWorkbook
from tests.conftest import MAIN_NS, sheet_xml


def test_events_strip_namespaces():
    xml = b'<a:root xmlns:a="urn:a" xmlns:r="urn:r" r:id="rId1"><a:t>hi</a:t></a:root>'
    events = list(XmlCursor(xml))
    assert events == [
        Start("root", {"id": "rId1"}),
        Start("t", {}),
        Text("hi"),
        End("t"),
        End("root"),
        EOF,
    ]


def test_small_chunks_give_the_same_events():
    xml = b"<root><child attr='1'>text</child><child/></root>"
    assert list(XmlCursor(xml, chunk_size=3)) == list(XmlCursor(xml))


def test_skip_subtree_stops_at_matching_end():
    cursor = XmlCursor(b"<root><skip><x><y/></x></skip><keep/></root>")
    cursor.next()
    assert cursor.next() == Start("skip", {})
    cursor.skip_subtree("skip")
    assert cursor.next() == Start("keep", {})


def test_skip_subtree_reports_truncation():
    cursor = XmlCursor(b"<root><skip><x>")
    cursor.next()
    cursor.next()
    with pytest.raises(UnexpectedEndOfFile) as info:
        cursor.skip_subtree("skip")
    assert info.value.tag == "skip"


def test_malformed_markup_raises_syntax_error():
    with pytest.raises(XmlSyntaxError):
        list(XmlCursor(b"<root><a></b></root>", part_name="xl/broken.xml"))


def test_truncated_part_names_the_open_element():
    xml = f'<worksheet xmlns="{MAIN_NS}"><sheetData><row r="1"><c r="A1"><v>1</v></c>'
    with pytest.raises(UnexpectedEndOfFile) as info:
        RawWorksheet.from_xml(xml.encode())
    assert info.value.tag == "row"
    assert str(info.value) == "unexpected end of file at `<row>`"


def test_missing_required_attribute():
    xml = sheet_xml('<sheetData><row r="1"><c t="n"><v>1</v></c></row></sheetData>')
    with pytest.raises(MissingAttributeError) as info:
        RawWorksheet.from_xml(xml.encode())
    assert info.value.tag == "c"
    assert info.value.attribute == "r"


def test_unknown_children_are_skipped():
    xml = f'<workbook xmlns="{MAIN_NS}"><fileVersion appName="xl"/><extLst><ext><x/></ext></extLst></workbook>'
    workbook = RawWorkbook.from_xml(xml.encode())
    assert workbook.sheets == []


class Mode(XmlEnum):
    FIRST = "first"
    SECOND = "second"


@pytest.mark.parametrize("token, expected", [("second", Mode.SECOND), ("bogus", Mode.FIRST), (None, Mode.FIRST)])
def test_enum_tokens_fall_back_to_default(token, expected):
    assert Mode.from_string(token) is expected


@pytest.mark.parametrize(
    "enum",
    [BorderStyle, PatternType, HorizontalAlignment, PresetShadowType, PresetCamera, LightRigPreset, LineCap],
    ids=lambda enum: enum.__name__,
)
def test_every_token_decodes_to_its_member(enum):
    for member in enum:
        assert enum.from_string(member.value) is member
    first = next(iter(enum))
    assert enum.default() is first
    assert enum.from_string("notAToken") is first
    assert enum.from_string(None) is first


def test_overridden_default():
    assert VerticalAlignment.from_string("sideways") is VerticalAlignment.BOTTOM
    assert VerticalAlignment.from_string("top") is VerticalAlignment.TOP
