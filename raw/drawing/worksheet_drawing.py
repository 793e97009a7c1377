"""
Worksheet drawing part (``xl/drawings/drawingN.xml``): ``<xdr:wsDr>`` and its
anchors, plus the drawing objects an anchor may hold.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, text_of, val_of
from raw.drawing.fill import RawBlipFill
from raw.drawing.non_visual import RawNonVisualProperties
from raw.drawing.shape import RawPoint, RawShapeProperties, RawShapeStyle, RawSize, RawTransform2D
from raw.drawing.text import RawTextBody
from utils.conversions import to_bool, to_int, to_str


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class RawSpreadsheetShape(RawNode):
    TAG = "sp"
    ATTRIBUTES = {
        "macro": ("macro", to_str),
        "textlink": ("text_link", to_str),
        "fLocksText": ("lock_text", to_bool),
        "fPublished": ("published", to_bool),
    }
    CHILDREN = {
        "nvSpPr": ("non_visual", RawNonVisualProperties.load, False),
        "spPr": ("properties", RawShapeProperties.load, False),
        "style": ("style", RawShapeStyle.load, False),
        "txBody": ("text_body", RawTextBody.load, False),
    }

    macro: Optional[str] = None
    text_link: Optional[str] = None
    lock_text: Optional[bool] = None
    published: Optional[bool] = None
    non_visual: Optional[RawNonVisualProperties] = None
    properties: Optional[RawShapeProperties] = None
    style: Optional[RawShapeStyle] = None
    text_body: Optional[RawTextBody] = None


class RawPicture(RawNode):
    TAG = "pic"
    ATTRIBUTES = {
        "macro": ("macro", to_str),
        "fPublished": ("published", to_bool),
    }
    CHILDREN = {
        "nvPicPr": ("non_visual", RawNonVisualProperties.load, False),
        "blipFill": ("blip_fill", RawBlipFill.load, False),
        "spPr": ("properties", RawShapeProperties.load, False),
        "style": ("style", RawShapeStyle.load, False),
    }

    macro: Optional[str] = None
    published: Optional[bool] = None
    non_visual: Optional[RawNonVisualProperties] = None
    blip_fill: Optional[RawBlipFill] = None
    properties: Optional[RawShapeProperties] = None
    style: Optional[RawShapeStyle] = None


class RawConnectionShape(RawNode):
    TAG = "cxnSp"
    ATTRIBUTES = {
        "macro": ("macro", to_str),
        "fPublished": ("published", to_bool),
    }
    CHILDREN = {
        "nvCxnSpPr": ("non_visual", RawNonVisualProperties.load, False),
        "spPr": ("properties", RawShapeProperties.load, False),
        "style": ("style", RawShapeStyle.load, False),
    }

    macro: Optional[str] = None
    published: Optional[bool] = None
    non_visual: Optional[RawNonVisualProperties] = None
    properties: Optional[RawShapeProperties] = None
    style: Optional[RawShapeStyle] = None


class RawGraphicData(RawNode):
    """
    ``<a:graphicData uri="...">``.

    Only the chart reference (``<c:chart r:id="rId1"/>``) is kept; chart
    content itself is not parsed.
    """

    TAG = "graphicData"
    ATTRIBUTES = {"uri": ("uri", to_str)}
    CHILDREN = {"chart": ("chart_rel_id", val_of(to_str, attribute="id"), False)}

    uri: Optional[str] = None
    chart_rel_id: Optional[str] = None


class RawGraphic(RawNode):
    TAG = "graphic"
    CHILDREN = {"graphicData": ("data", RawGraphicData.load, False)}

    data: Optional[RawGraphicData] = None


class RawGraphicFrame(RawNode):
    TAG = "graphicFrame"
    ATTRIBUTES = {
        "macro": ("macro", to_str),
        "fPublished": ("published", to_bool),
    }
    CHILDREN = {
        "nvGraphicFramePr": ("non_visual", RawNonVisualProperties.load, False),
        "xfrm": ("transform", RawTransform2D.load, False),
        "graphic": ("graphic", RawGraphic.load, False),
    }

    macro: Optional[str] = None
    published: Optional[bool] = None
    non_visual: Optional[RawNonVisualProperties] = None
    transform: Optional[RawTransform2D] = None
    graphic: Optional[RawGraphic] = None


class RawContentPart(RawNode):
    TAG = "contentPart"
    ATTRIBUTES = {"id": ("rel_id", to_str)}

    rel_id: Optional[str] = None


class RawGroupShape(RawNode):
    TAG = "grpSp"
    CHILDREN = {
        "nvGrpSpPr": ("non_visual", RawNonVisualProperties.load, False),
        "grpSpPr": ("properties", RawShapeProperties.load, False),
        "sp": ("shapes", RawSpreadsheetShape.load, True),
        "grpSp": ("shapes", lambda cursor, start: RawGroupShape.load(cursor, start), True),
        "graphicFrame": ("shapes", RawGraphicFrame.load, True),
        "cxnSp": ("shapes", RawConnectionShape.load, True),
        "pic": ("shapes", RawPicture.load, True),
    }

    non_visual: Optional[RawNonVisualProperties] = None
    properties: Optional[RawShapeProperties] = None
    shapes: List[RawNode] = []


CONTENT_CHILDREN = {
    "sp": ("content", RawSpreadsheetShape.load, False),
    "grpSp": ("content", RawGroupShape.load, False),
    "graphicFrame": ("content", RawGraphicFrame.load, False),
    "cxnSp": ("content", RawConnectionShape.load, False),
    "pic": ("content", RawPicture.load, False),
    "contentPart": ("content", RawContentPart.load, False),
}


# ---------------------------------------------------------------------------
# Anchors
# ---------------------------------------------------------------------------


class RawMarker(RawNode):
    """``<xdr:from>`` / ``<xdr:to>``: zero-based cell plus EMU offsets, stored as element text."""

    CHILDREN = {
        "col": ("column", text_of(to_int), False),
        "colOff": ("column_offset", text_of(to_int), False),
        "row": ("row", text_of(to_int), False),
        "rowOff": ("row_offset", text_of(to_int), False),
    }

    column: Optional[int] = None
    column_offset: Optional[int] = None
    row: Optional[int] = None
    row_offset: Optional[int] = None


class RawClientData(RawNode):
    TAG = "clientData"
    ATTRIBUTES = {
        "fLocksWithSheet": ("locks_with_sheet", to_bool),
        "fPrintsWithSheet": ("prints_with_sheet", to_bool),
    }

    locks_with_sheet: Optional[bool] = None
    prints_with_sheet: Optional[bool] = None


class RawAnchor(RawNode):
    """Fields shared by the three anchor kinds."""

    CHILDREN = {
        **CONTENT_CHILDREN,
        "clientData": ("client_data", RawClientData.load, False),
    }

    content: Optional[RawNode] = None
    client_data: Optional[RawClientData] = None


class RawTwoCellAnchor(RawAnchor):
    TAG = "twoCellAnchor"
    ATTRIBUTES = {"editAs": ("edit_as", to_str)}
    CHILDREN = {
        **RawAnchor.CHILDREN,
        "from": ("start", RawMarker.load, False),
        "to": ("end", RawMarker.load, False),
    }

    edit_as: Optional[str] = None
    start: Optional[RawMarker] = None
    end: Optional[RawMarker] = None


class RawOneCellAnchor(RawAnchor):
    TAG = "oneCellAnchor"
    CHILDREN = {
        **RawAnchor.CHILDREN,
        "from": ("start", RawMarker.load, False),
        "ext": ("extent", RawSize.load, False),
    }

    start: Optional[RawMarker] = None
    extent: Optional[RawSize] = None


class RawAbsoluteAnchor(RawAnchor):
    TAG = "absoluteAnchor"
    CHILDREN = {
        **RawAnchor.CHILDREN,
        "pos": ("position", RawPoint.load, False),
        "ext": ("extent", RawSize.load, False),
    }

    position: Optional[RawPoint] = None
    extent: Optional[RawSize] = None


class RawWorksheetDrawing(RawNode):
    TAG = "wsDr"
    CHILDREN = {
        "twoCellAnchor": ("anchors", RawTwoCellAnchor.load, True),
        "oneCellAnchor": ("anchors", RawOneCellAnchor.load, True),
        "absoluteAnchor": ("anchors", RawAbsoluteAnchor.load, True),
    }

    anchors: List[RawAnchor] = []
