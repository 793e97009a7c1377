"""
Cell value decoding.

``<c>`` overloads one element for every value kind: the ``t`` attribute,
the presence of ``<f>``/``<is>``/``<v>`` and the text of ``<v>`` together
decide what the cell holds.  ``resolve_cell_value`` walks that decision
tree; ``resolve_string_item`` decodes shared and inline strings.
"""

from __future__ import annotations

from typing import List, Optional

from dto.cell import (
    BoolValue,
    CellErrorType,
    CellValue,
    DateTimeValue,
    EmptyValue,
    ErrorValue,
    FormulaValue,
    NumericValue,
    PhoneticProperties,
    PhoneticRun,
    PlainTextValue,
    RichTextRun,
    RichTextValue,
)
from errors import InvalidCellValueError, SharedStringIndexError
from raw.spreadsheet.string_item import (
    PhoneticAlignment,
    PhoneticType,
    RawPhoneticProperties,
    RawSharedStringTable,
    RawStringItem,
)
from raw.spreadsheet.worksheet import RawCell
from resolvers.styles import StyleResolver
from utils.conversions import to_bool, to_float, to_int


# ---------------------------------------------------------------------------
# String items
# ---------------------------------------------------------------------------


def resolve_string_item(
    item: RawStringItem,
    styles: StyleResolver,
    phonetic_properties: Optional[RawPhoneticProperties] = None,
    coordinate: Optional[str] = None,
) -> CellValue:
    """
    Decode an ``<si>`` / ``<is>`` item.

    Plain ``<t>`` text wins over runs.  Runs without text are dropped and an
    item whose runs all lack text is empty.  Phonetic runs are kept only
    when complete, and phonetic properties only when there are runs to
    annotate.
    """
    runs = [
        PhoneticRun(text=run.text, base_text_start_index=run.base_start, base_text_end_index=run.base_end)
        for run in item.phonetic_runs
        if run.text is not None and run.base_start is not None and run.base_end is not None
    ]
    properties = item.phonetic_properties or phonetic_properties
    phonetic = _phonetic_properties(properties, styles) if runs else None
    phonetic_runs: Optional[List[PhoneticRun]] = runs or None

    if item.text is not None:
        return PlainTextValue(text=item.text, phonetic_runs=phonetic_runs, phonetic_properties=phonetic)

    if item.runs is not None:
        rich_runs = [
            RichTextRun(font=styles.font(run.properties), text=run.text)
            for run in item.runs
            if run.text is not None
        ]
        if not rich_runs:
            return EmptyValue()
        return RichTextValue(runs=rich_runs, phonetic_runs=phonetic_runs, phonetic_properties=phonetic)

    raise InvalidCellValueError(coordinate, "string item has neither text nor runs")


def _phonetic_properties(
    raw: Optional[RawPhoneticProperties], styles: StyleResolver
) -> Optional[PhoneticProperties]:
    if raw is None:
        return None
    font_id = raw.font_id if raw.font_id is not None else 0
    return PhoneticProperties(
        alignment=raw.alignment or PhoneticAlignment.NO_CONTROL,
        font=styles.font(styles.stylesheet.get_font(font_id)),
        phonetic_type=raw.phonetic_type or PhoneticType.NO_CONVERSION,
    )


# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------


def resolve_cell_value(
    cell: RawCell,
    shared_strings: RawSharedStringTable,
    styles: StyleResolver,
    phonetic_properties: Optional[RawPhoneticProperties] = None,
) -> CellValue:
    coordinate = cell.coordinate.to_a1() if cell.coordinate else None

    if cell.formula is None and cell.inline_string is None and cell.value is None:
        return EmptyValue()

    if cell.inline_string is not None:
        return resolve_string_item(cell.inline_string, styles, phonetic_properties, coordinate)

    if cell.formula is not None:
        return FormulaValue(formula=cell.formula.formula or "", last_calculated_value=cell.value)

    text = cell.value
    if not text:
        return EmptyValue()

    cell_type = cell.cell_type
    if cell_type is None or cell_type == "n":
        number = to_float(text)
        if number is None:
            return PlainTextValue(text=text)
        return NumericValue(value=number)
    if cell_type == "b":
        value = to_bool(text)
        return BoolValue(value=True if value is None else value)
    if cell_type == "d":
        return DateTimeValue(value=text)
    if cell_type == "e":
        try:
            return ErrorValue(error=CellErrorType(text))
        except ValueError:
            raise InvalidCellValueError(coordinate, f"unknown error value `{text}`") from None
    if cell_type == "s":
        return _shared_string(text, shared_strings, styles, phonetic_properties, coordinate)
    if cell_type in ("str", "is", "inlineStr"):
        raise InvalidCellValueError(coordinate, f"type `{cell_type}` without a formula or inline string")
    raise InvalidCellValueError(coordinate, f"unknown cell type `{cell_type}`")


def _shared_string(
    text: str,
    shared_strings: RawSharedStringTable,
    styles: StyleResolver,
    phonetic_properties: Optional[RawPhoneticProperties],
    coordinate: Optional[str],
) -> CellValue:
    # percent scaling applies to attributes only
    index = None if text.strip().endswith("%") else to_int(text)
    if index is None:
        raise InvalidCellValueError(coordinate, f"shared string index `{text}` is not an integer")
    item = shared_strings.get(index)
    if item is None:
        raise SharedStringIndexError(coordinate, index, len(shared_strings))
    return resolve_string_item(item, styles, phonetic_properties, coordinate)
