"""
Hyperlink resolution for worksheet ``<hyperlink>`` entries and drawing
``hlinkClick``/``hlinkHover`` actions.

External targets come from the owning part's relationships; ``mailto:``
targets become :class:`EmailHyperlink`.  Internal targets name a defined
name or a ``Sheet!Range`` reference.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import unquote

from dto.hyperlink import EmailHyperlink, Hyperlink, InternalHyperlink, UrlHyperlink
from opc.relationships import Relationships
from raw.drawing.non_visual import RawDrawingHyperlink
from raw.spreadsheet.workbook import RawWorkbook
from raw.spreadsheet.worksheet import RawHyperlink
from utils.coordinates import Coordinate, Dimension

MAILTO = "mailto:"

_LOCATION = re.compile(r"^('?)(?P<name>.+?)\1!(?P<ref>.*?)$")


def parse_external(target: str) -> Hyperlink:
    """``mailto:a@b.c?subject=Hi`` -> email, anything else -> URL (percent-decoded)."""
    if target.lower().startswith(MAILTO):
        address, _, query = target[len(MAILTO):].partition("?")
        subject = ""
        for pair in query.split("&"):
            key, _, value = pair.partition("=")
            if key.lower() == "subject":
                subject = unquote(value)
        return EmailHyperlink(mail_to=unquote(address), subject=subject)
    return UrlHyperlink(url=unquote(target))


def parse_location(location: str) -> InternalHyperlink:
    """
    ``'My Sheet'!$A$1:$B$2`` -> sheet ``My Sheet``, range ``A1:B2``.

    A location without ``!`` names the sheet alone and points at ``A1``.
    """
    text = location.strip().lstrip("#")
    match = _LOCATION.match(text)
    if match is None:
        return InternalHyperlink(sheet_name=text.strip("'"), cell_range=Dimension.default())
    reference = match.group("ref").replace("$", "")
    return InternalHyperlink(sheet_name=match.group("name"), cell_range=_parse_range(reference))


def _parse_range(reference: str) -> Dimension:
    dimension = Dimension.from_string(reference)
    if dimension is not None:
        return dimension
    coordinate = Coordinate.from_string(reference) or Coordinate(row=1, col=1)
    return Dimension(start=coordinate, end=coordinate)


def _defined_location(
    name: str, workbook: Optional[RawWorkbook], local_sheet_id: Optional[int]
) -> Optional[str]:
    if workbook is None:
        return None
    defined = workbook.get_defined_name(name, local_sheet_id)
    if defined is None or not defined.formula:
        return None
    return defined.formula


def resolve_internal(
    location: str,
    workbook: Optional[RawWorkbook] = None,
    local_sheet_id: Optional[int] = None,
) -> InternalHyperlink:
    """A location may be a defined name; its formula then supplies the range."""
    name = location.strip().lstrip("#")
    formula = _defined_location(name, workbook, local_sheet_id)
    return parse_location(formula if formula is not None else location)


def resolve_sheet_hyperlink(
    raw: RawHyperlink,
    relationships: Relationships,
    workbook: Optional[RawWorkbook] = None,
    local_sheet_id: Optional[int] = None,
) -> Optional[Hyperlink]:
    if raw.rel_id is not None:
        target = relationships.raw_target_for_id(raw.rel_id)
        if target is not None:
            if target.startswith("#"):
                return resolve_internal(target, workbook, local_sheet_id)
            return parse_external(target)
    if raw.location:
        return resolve_internal(raw.location, workbook, local_sheet_id)
    return None


def resolve_drawing_hyperlink(
    raw: Optional[RawDrawingHyperlink],
    relationships: Relationships,
    workbook: Optional[RawWorkbook] = None,
) -> Optional[Hyperlink]:
    if raw is None:
        return None
    relationship = relationships.rel_for_id(raw.rel_id)
    if relationship is None:
        return None
    if relationship.external:
        if raw.invalid_url:
            return UrlHyperlink(url=raw.invalid_url)
        return parse_external(relationship.target)
    return resolve_internal(relationship.target, workbook)

