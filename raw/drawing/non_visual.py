"""
Non-visual drawing properties: ``<cNvPr>``, the per-kind ``<cNv*Pr>``
elements and their locks, and the ``<hlinkClick>``/``<hlinkHover>`` actions.
"""

from __future__ import annotations

from typing import Optional

from raw.node import RawNode
from utils.conversions import to_bool, to_int, to_str


class RawDrawingHyperlink(RawNode):
    """``<hlinkClick r:id="rId1" tooltip="..."/>``; also used for ``hlinkHover`` and ``hlinkMouseOver``."""

    ATTRIBUTES = {
        "id": ("rel_id", to_str),
        "invalidUrl": ("invalid_url", to_str),
        "action": ("action", to_str),
        "tgtFrame": ("target_frame", to_str),
        "tooltip": ("tooltip", to_str),
        "history": ("history", to_bool),
        "highlightClick": ("highlight_click", to_bool),
        "endSnd": ("end_sound", to_bool),
    }

    rel_id: Optional[str] = None
    invalid_url: Optional[str] = None
    action: Optional[str] = None
    target_frame: Optional[str] = None
    tooltip: Optional[str] = None
    history: Optional[bool] = None
    highlight_click: Optional[bool] = None
    end_sound: Optional[bool] = None


class RawNonVisualDrawingProperties(RawNode):
    TAG = "cNvPr"
    ATTRIBUTES = {
        "id": ("drawing_id", to_int),
        "name": ("name", to_str),
        "descr": ("description", to_str),
        "hidden": ("hidden", to_bool),
        "title": ("title", to_str),
    }
    CHILDREN = {
        "hlinkClick": ("hyperlink_click", RawDrawingHyperlink.load, False),
        "hlinkHover": ("hyperlink_hover", RawDrawingHyperlink.load, False),
    }

    drawing_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    hidden: Optional[bool] = None
    title: Optional[str] = None
    hyperlink_click: Optional[RawDrawingHyperlink] = None
    hyperlink_hover: Optional[RawDrawingHyperlink] = None


class RawLocks(RawNode):
    """Every ``<*Locks>`` element; each kind uses a subset of the flags."""

    ATTRIBUTES = {
        "noGrp": ("no_grouping", to_bool),
        "noSelect": ("no_select", to_bool),
        "noRot": ("no_rotation", to_bool),
        "noChangeAspect": ("no_change_aspect", to_bool),
        "noMove": ("no_move", to_bool),
        "noResize": ("no_resize", to_bool),
        "noEditPoints": ("no_edit_points", to_bool),
        "noAdjustHandles": ("no_adjust_handles", to_bool),
        "noChangeArrowheads": ("no_change_arrowheads", to_bool),
        "noChangeShapeType": ("no_change_shape_type", to_bool),
        "noTextEdit": ("no_text_edit", to_bool),
        "noCrop": ("no_crop", to_bool),
        "noUngrp": ("no_ungroup", to_bool),
        "noDrilldown": ("no_drilldown", to_bool),
    }

    no_grouping: Optional[bool] = None
    no_select: Optional[bool] = None
    no_rotation: Optional[bool] = None
    no_change_aspect: Optional[bool] = None
    no_move: Optional[bool] = None
    no_resize: Optional[bool] = None
    no_edit_points: Optional[bool] = None
    no_adjust_handles: Optional[bool] = None
    no_change_arrowheads: Optional[bool] = None
    no_change_shape_type: Optional[bool] = None
    no_text_edit: Optional[bool] = None
    no_crop: Optional[bool] = None
    no_ungroup: Optional[bool] = None
    no_drilldown: Optional[bool] = None


class RawConnection(RawNode):
    """``<stCxn id idx>`` / ``<endCxn id idx>``."""

    ATTRIBUTES = {
        "id": ("shape_id", to_int),
        "idx": ("site_index", to_int),
    }

    shape_id: Optional[int] = None
    site_index: Optional[int] = None


class RawNonVisualKindProperties(RawNode):
    """``<cNvSpPr>``, ``<cNvPicPr>``, ``<cNvGrpSpPr>``, ``<cNvCxnSpPr>``, ``<cNvGraphicFramePr>``."""

    ATTRIBUTES = {
        "txBox": ("text_box", to_bool),
        "preferRelativeResize": ("prefer_relative_resize", to_bool),
    }
    CHILDREN = {
        "spLocks": ("locks", RawLocks.load, False),
        "picLocks": ("locks", RawLocks.load, False),
        "grpSpLocks": ("locks", RawLocks.load, False),
        "cxnSpLocks": ("locks", RawLocks.load, False),
        "graphicFrameLocks": ("locks", RawLocks.load, False),
        "stCxn": ("start_connection", RawConnection.load, False),
        "endCxn": ("end_connection", RawConnection.load, False),
    }

    text_box: Optional[bool] = None
    prefer_relative_resize: Optional[bool] = None
    locks: Optional[RawLocks] = None
    start_connection: Optional[RawConnection] = None
    end_connection: Optional[RawConnection] = None


class RawNonVisualProperties(RawNode):
    """``<nvSpPr>``, ``<nvPicPr>``, ``<nvGrpSpPr>``, ``<nvCxnSpPr>``, ``<nvGraphicFramePr>``, ``<nvContentPartPr>``."""

    CHILDREN = {
        "cNvPr": ("drawing", RawNonVisualDrawingProperties.load, False),
        "cNvSpPr": ("kind", RawNonVisualKindProperties.load, False),
        "cNvPicPr": ("kind", RawNonVisualKindProperties.load, False),
        "cNvGrpSpPr": ("kind", RawNonVisualKindProperties.load, False),
        "cNvCxnSpPr": ("kind", RawNonVisualKindProperties.load, False),
        "cNvGraphicFramePr": ("kind", RawNonVisualKindProperties.load, False),
        "cNvContentPartPr": ("kind", RawNonVisualKindProperties.load, False),
    }

    drawing: Optional[RawNonVisualDrawingProperties] = None
    kind: Optional[RawNonVisualKindProperties] = None
