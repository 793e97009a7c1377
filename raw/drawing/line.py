"""
DrawingML outline (``<a:ln>``) and the theme line-style reference.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, list_of, present, val_of
from raw.drawing.color import RawColorChoice, color_children
from raw.drawing.fill import FillFields, fill_children
from utils.conversions import to_int, to_str


class RawDashStop(RawNode):
    """``<ds d="..." sp="..."/>``: dash and space lengths as percentages of line width."""

    ATTRIBUTES = {
        "d": ("dash", to_int),
        "sp": ("space", to_int),
    }

    dash: Optional[int] = None
    space: Optional[int] = None


class RawMiter(RawNode):
    TAG = "miter"
    ATTRIBUTES = {"lim": ("limit", to_int)}

    limit: Optional[int] = None


class RawLineEnd(RawNode):
    """``<headEnd>`` / ``<tailEnd>``."""

    ATTRIBUTES = {
        "type": ("end_type", to_str),
        "w": ("width", to_str),
        "len": ("length", to_str),
    }

    end_type: Optional[str] = None
    width: Optional[str] = None
    length: Optional[str] = None


class RawOutline(FillFields):
    TAG = "ln"
    ATTRIBUTES = {
        "w": ("width", to_int),
        "cap": ("cap", to_str),
        "cmpd": ("compound", to_str),
        "algn": ("alignment", to_str),
    }
    CHILDREN = {
        **fill_children(include_group=False),
        "prstDash": ("preset_dash", val_of(to_str), False),
        "custDash": ("custom_dash", list_of(RawDashStop.load, "ds"), False),
        "round": ("round_join", present, False),
        "bevel": ("bevel_join", present, False),
        "miter": ("miter_join", RawMiter.load, False),
        "headEnd": ("head_end", RawLineEnd.load, False),
        "tailEnd": ("tail_end", RawLineEnd.load, False),
    }

    width: Optional[int] = None
    cap: Optional[str] = None
    compound: Optional[str] = None
    alignment: Optional[str] = None
    preset_dash: Optional[str] = None
    custom_dash: Optional[List[RawDashStop]] = None
    round_join: Optional[bool] = None
    bevel_join: Optional[bool] = None
    miter_join: Optional[RawMiter] = None
    head_end: Optional[RawLineEnd] = None
    tail_end: Optional[RawLineEnd] = None


class RawStyleReference(RawNode):
    """``<lnRef>``, ``<fillRef>``, ``<effectRef>``: an index into the theme's style lists plus a color."""

    ATTRIBUTES = {"idx": ("index", to_int)}
    CHILDREN = color_children()

    index: Optional[int] = None
    color: Optional[RawColorChoice] = None


class RawFontReference(RawNode):
    """``<fontRef idx="minor">``: picks the theme's major or minor font."""

    TAG = "fontRef"
    ATTRIBUTES = {"idx": ("index", to_str)}
    CHILDREN = color_children()

    index: Optional[str] = None
    color: Optional[RawColorChoice] = None
