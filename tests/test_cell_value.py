import pytest

from dto.cell import (
    BoolValue,
    CellErrorType,
    DateTimeValue,
    EmptyValue,
    ErrorValue,
    FormulaValue,
    NumericValue,
    PlainTextValue,
    RichTextValue,
)
from errors import InvalidCellValueError, SharedStringIndexError
from raw.spreadsheet.string_item import PhoneticType, RawSharedStringTable
from raw.spreadsheet.worksheet import RawCell
from resolvers.cell_value import resolve_cell_value
from tests.conftest import MAIN_NS, shared_strings_xml

SHARED = shared_strings_xml(
    [
        "<si><t>plain</t></si>",
        "<si><r><rPr><b/><sz val=\"14\"/></rPr><t>bold </t></r><r><t>normal</t></r></si>",
        "<si><t>漢字</t><rPh sb=\"0\" eb=\"2\"><t>かんじ</t></rPh><phoneticPr fontId=\"0\" type=\"Hiragana\"/></si>",
        "<si><r><rPr><b/></rPr></r></si>",
    ]
)


@pytest.fixture
def shared_strings():
    return RawSharedStringTable.from_xml(SHARED.encode())


def cell(xml: str) -> RawCell:
    return RawCell.from_xml(f'<c xmlns="{MAIN_NS}" {xml}'.encode())


def resolve(xml, shared_strings, styles):
    return resolve_cell_value(cell(xml), shared_strings, styles)


@pytest.mark.parametrize(
    "xml, expected",
    [
        ('r="A1"/>', EmptyValue()),
        ('r="A1"><v>42.5</v></c>', NumericValue(value=42.5)),
        ('r="A1" t="n"><v>1e3</v></c>', NumericValue(value=1000.0)),
        ('r="A1" t="b"><v>0</v></c>', BoolValue(value=False)),
        ('r="A1" t="b"><v>1</v></c>', BoolValue(value=True)),
        ('r="A1" t="d"><v>2024-01-31T00:00:00</v></c>', DateTimeValue(value="2024-01-31T00:00:00")),
        ('r="A1" t="e"><v>#DIV/0!</v></c>', ErrorValue(error=CellErrorType.DIV_ZERO)),
        ('r="A1" t="s"><v></v></c>', EmptyValue()),
    ],
)
def test_scalar_values(xml, expected, shared_strings, styles):
    assert resolve(xml, shared_strings, styles) == expected


@pytest.mark.parametrize("text", ["n/a", "1_000", "1,5", "0x10"])
def test_unparseable_number_stays_text(text, shared_strings, styles):
    assert resolve(f'r="A1"><v>{text}</v></c>', shared_strings, styles) == PlainTextValue(text=text)


def test_formula_keeps_cached_text(shared_strings, styles):
    value = resolve('r="B2" t="str"><f>A1&amp;"x"</f><v>1x</v></c>', shared_strings, styles)
    assert value == FormulaValue(formula='A1&"x"', last_calculated_value="1x")


def test_formula_without_cached_value(shared_strings, styles):
    value = resolve('r="B2"><f>SUM(A1:A3)</f></c>', shared_strings, styles)
    assert value == FormulaValue(formula="SUM(A1:A3)")


def test_inline_string(shared_strings, styles):
    value = resolve('r="A1" t="inlineStr"><is><t>inline</t></is></c>', shared_strings, styles)
    assert value == PlainTextValue(text="inline")


def test_shared_plain_string(shared_strings, styles):
    assert resolve('r="A1" t="s"><v>0</v></c>', shared_strings, styles) == PlainTextValue(text="plain")


def test_shared_rich_text_resolves_run_fonts(shared_strings, styles):
    value = resolve('r="A1" t="s"><v>1</v></c>', shared_strings, styles)
    assert isinstance(value, RichTextValue)
    assert value.text == "bold normal"
    assert value.runs[0].font.bold is True
    assert value.runs[0].font.size == 14.0
    assert value.runs[1].font.bold is False


def test_shared_string_with_phonetics(shared_strings, styles):
    value = resolve('r="A1" t="s"><v>2</v></c>', shared_strings, styles)
    assert value.text == "漢字"
    assert [(run.text, run.base_text_start_index, run.base_text_end_index) for run in value.phonetic_runs] == [
        ("かんじ", 0, 2)
    ]
    assert value.phonetic_properties.phonetic_type == PhoneticType.HIRAGANA


def test_rich_text_without_text_is_empty(shared_strings, styles):
    assert resolve('r="A1" t="s"><v>3</v></c>', shared_strings, styles) == EmptyValue()


def test_shared_string_index_out_of_range(shared_strings, styles):
    with pytest.raises(SharedStringIndexError) as info:
        resolve('r="C3" t="s"><v>4</v></c>', shared_strings, styles)
    assert info.value.index == 4
    assert info.value.length == 4
    assert info.value.coordinate == "C3"


@pytest.mark.parametrize(
    "xml",
    [
        'r="A1" t="s"><v>one</v></c>',
        'r="A1" t="s"><v>1_0</v></c>',
        'r="A1" t="s"><v>0%</v></c>',
        'r="A1" t="e"><v>#BOGUS</v></c>',
        'r="A1" t="str"><v>text</v></c>',
        'r="A1" t="zz"><v>1</v></c>',
    ],
)
def test_invalid_values_raise(xml, shared_strings, styles):
    with pytest.raises(InvalidCellValueError):
        resolve(xml, shared_strings, styles)
