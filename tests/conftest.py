"""
Fixtures building small .xlsx packages in memory.

``build_package`` writes the parts it is given into a zip; ``workbook_parts``
supplies a minimal workbook around one or more worksheets so each test only
spells out the XML it is about.
"""

from __future__ import annotations

import io
import zipfile
from typing import Dict, List, Optional, Tuple, Union

import pytest

from excel import Excel
from raw.spreadsheet.stylesheet import RawStyleSheet
from resolvers.styles import StyleResolver

MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
PKG_REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
DRAWING_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
XDR_NS = "http://schemas.openxmlformats.org/drawingml/2006/spreadsheetDrawing"

REL_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"


def build_package(parts: Dict[str, Union[str, bytes]]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def relationships_xml(entries: List[Tuple[str, str, str]], external: Tuple[str, ...] = ()) -> str:
    """``entries`` are ``(id, type suffix, target)``; ids in ``external`` get ``TargetMode="External"``."""
    items = []
    for rel_id, rel_type, target in entries:
        mode = ' TargetMode="External"' if rel_id in external else ""
        items.append(f'<Relationship Id="{rel_id}" Type="{REL_TYPE}/{rel_type}" Target="{target}"{mode}/>')
    return f'<?xml version="1.0" encoding="UTF-8"?><Relationships xmlns="{PKG_REL_NS}">{"".join(items)}</Relationships>'


def sheet_xml(body: str) -> str:
    return f'<worksheet xmlns="{MAIN_NS}" xmlns:r="{REL_NS}">{body}</worksheet>'


def styles_xml(body: str) -> str:
    return f'<styleSheet xmlns="{MAIN_NS}">{body}</styleSheet>'


def shared_strings_xml(items: List[str]) -> str:
    body = "".join(items)
    return f'<sst xmlns="{MAIN_NS}" count="{len(items)}" uniqueCount="{len(items)}">{body}</sst>'


def workbook_parts(
    sheets: List[Tuple[str, str]],
    styles: Optional[str] = None,
    shared_strings: Optional[str] = None,
    workbook_extra: str = "",
    workbook_pr: str = "",
) -> Dict[str, str]:
    """Parts for a workbook holding ``sheets`` (``(name, worksheet xml)``) in order."""
    sheet_entries = []
    rels = []
    parts: Dict[str, str] = {}
    for index, (name, xml) in enumerate(sheets, start=1):
        sheet_entries.append(f'<sheet name="{name}" sheetId="{index}" r:id="rId{index}"/>')
        rels.append((f"rId{index}", "worksheet", f"worksheets/sheet{index}.xml"))
        parts[f"xl/worksheets/sheet{index}.xml"] = xml
    if styles is not None:
        rels.append(("rIdStyles", "styles", "styles.xml"))
        parts["xl/styles.xml"] = styles
    if shared_strings is not None:
        rels.append(("rIdStrings", "sharedStrings", "sharedStrings.xml"))
        parts["xl/sharedStrings.xml"] = shared_strings
    parts["xl/workbook.xml"] = (
        f'<workbook xmlns="{MAIN_NS}" xmlns:r="{REL_NS}">{workbook_pr}'
        f'<sheets>{"".join(sheet_entries)}</sheets>{workbook_extra}</workbook>'
    )
    parts["xl/_rels/workbook.xml.rels"] = relationships_xml(rels)
    return parts


@pytest.fixture
def make_excel():
    """Build an ``Excel`` from a dict of parts."""

    def make(parts: Dict[str, str]) -> Excel:
        return Excel.from_bytes(build_package(parts))

    return make


@pytest.fixture
def styles():
    """A resolver over an empty stylesheet."""
    return StyleResolver(RawStyleSheet())
