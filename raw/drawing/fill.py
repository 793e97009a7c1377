"""
DrawingML fills (EG_FillProperties): noFill, solidFill, gradFill, pattFill,
blipFill and grpFill.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from raw.node import Loader, RawNode, list_of
from raw.drawing.color import RawColorChoice, color_children, color_of
from raw.drawing.image_effect import IMAGE_EFFECT_LOADERS
from utils.conversions import to_bool, to_int, to_str


class RawNoFill(RawNode):
    TAG = "noFill"


class RawGroupFill(RawNode):
    """``<grpFill/>``: take the fill of the parent group."""

    TAG = "grpFill"


class RawSolidFill(RawNode):
    TAG = "solidFill"
    CHILDREN = color_children()

    color: Optional[RawColorChoice] = None


class RawRelativeRect(RawNode):
    """``l``/``t``/``r``/``b`` insets as percentages (``fillToRect``, ``tileRect``, ``srcRect``...)."""

    ATTRIBUTES = {
        "l": ("left", to_int),
        "t": ("top", to_int),
        "r": ("right", to_int),
        "b": ("bottom", to_int),
    }

    left: Optional[int] = None
    top: Optional[int] = None
    right: Optional[int] = None
    bottom: Optional[int] = None


class RawGradientStop(RawNode):
    TAG = "gs"
    ATTRIBUTES = {"pos": ("position", to_int)}
    CHILDREN = color_children()

    position: Optional[int] = None
    color: Optional[RawColorChoice] = None


class RawLinearShade(RawNode):
    TAG = "lin"
    ATTRIBUTES = {
        "ang": ("angle", to_int),
        "scaled": ("scaled", to_bool),
    }

    angle: Optional[int] = None
    scaled: Optional[bool] = None


class RawPathShade(RawNode):
    TAG = "path"
    ATTRIBUTES = {"path": ("path", to_str)}
    CHILDREN = {"fillToRect": ("fill_to_rect", RawRelativeRect.load, False)}

    path: Optional[str] = None
    fill_to_rect: Optional[RawRelativeRect] = None


class RawGradientFill(RawNode):
    TAG = "gradFill"
    ATTRIBUTES = {
        "flip": ("flip", to_str),
        "rotWithShape": ("rotate_with_shape", to_bool),
    }
    CHILDREN = {
        "gsLst": ("stops", list_of(RawGradientStop.load, "gs"), False),
        "lin": ("linear", RawLinearShade.load, False),
        "path": ("path", RawPathShade.load, False),
        "tileRect": ("tile_rect", RawRelativeRect.load, False),
    }

    flip: Optional[str] = None
    rotate_with_shape: Optional[bool] = None
    stops: List[RawGradientStop] = []
    linear: Optional[RawLinearShade] = None
    path: Optional[RawPathShade] = None
    tile_rect: Optional[RawRelativeRect] = None


class RawPatternFill(RawNode):
    TAG = "pattFill"
    ATTRIBUTES = {"prst": ("preset", to_str)}
    CHILDREN = {
        "fgClr": ("foreground", color_of, False),
        "bgClr": ("background", color_of, False),
    }

    preset: Optional[str] = None
    foreground: Optional[RawColorChoice] = None
    background: Optional[RawColorChoice] = None


class RawBlip(RawNode):
    TAG = "blip"
    ATTRIBUTES = {
        "embed": ("embed", to_str),
        "link": ("link", to_str),
        "cstate": ("compression_state", to_str),
    }
    CHILDREN = {tag: ("effects", loader, True) for tag, loader in IMAGE_EFFECT_LOADERS.items()}

    embed: Optional[str] = None
    link: Optional[str] = None
    compression_state: Optional[str] = None
    effects: List[RawNode] = []


class RawTile(RawNode):
    TAG = "tile"
    ATTRIBUTES = {
        "tx": ("offset_x", to_int),
        "ty": ("offset_y", to_int),
        "sx": ("scale_x", to_int),
        "sy": ("scale_y", to_int),
        "flip": ("flip", to_str),
        "algn": ("alignment", to_str),
    }

    offset_x: Optional[int] = None
    offset_y: Optional[int] = None
    scale_x: Optional[int] = None
    scale_y: Optional[int] = None
    flip: Optional[str] = None
    alignment: Optional[str] = None


class RawStretch(RawNode):
    TAG = "stretch"
    CHILDREN = {"fillRect": ("fill_rect", RawRelativeRect.load, False)}

    fill_rect: Optional[RawRelativeRect] = None


class RawBlipFill(RawNode):
    TAG = "blipFill"
    ATTRIBUTES = {
        "dpi": ("dpi", to_int),
        "rotWithShape": ("rotate_with_shape", to_bool),
    }
    CHILDREN = {
        "blip": ("blip", RawBlip.load, False),
        "srcRect": ("source_rect", RawRelativeRect.load, False),
        "stretch": ("stretch", RawStretch.load, False),
        "tile": ("tile", RawTile.load, False),
    }

    dpi: Optional[int] = None
    rotate_with_shape: Optional[bool] = None
    blip: Optional[RawBlip] = None
    source_rect: Optional[RawRelativeRect] = None
    stretch: Optional[RawStretch] = None
    tile: Optional[RawTile] = None


RawFillChoice = Union[RawNoFill, RawSolidFill, RawGradientFill, RawPatternFill, RawBlipFill, RawGroupFill]

FILL_CLASSES = (RawNoFill, RawSolidFill, RawGradientFill, RawPatternFill, RawBlipFill, RawGroupFill)

FILL_LOADERS: Dict[str, Loader] = {cls.TAG: cls.load for cls in FILL_CLASSES}

FILL_FIELDS = {
    "noFill": "no_fill",
    "solidFill": "solid_fill",
    "gradFill": "gradient_fill",
    "pattFill": "pattern_fill",
    "blipFill": "blip_fill",
    "grpFill": "group_fill",
}


def fill_children(include_group: bool = True) -> Dict[str, Tuple[str, Loader, bool]]:
    """
    ``CHILDREN`` entries storing each fill kind in its own field
    (``solid_fill``, ``gradient_fill`` ...), since precedence between
    them is decided at resolution time.
    """
    entries = {tag: (FILL_FIELDS[tag], loader, False) for tag, loader in FILL_LOADERS.items()}
    if not include_group:
        entries.pop("grpFill")
    return entries


def fill_choice_children(field: str = "fill") -> Dict[str, Tuple[str, Loader, bool]]:
    """``CHILDREN`` entries storing whichever fill appears in a single field."""
    return {tag: (field, loader, False) for tag, loader in FILL_LOADERS.items()}


class FillFields(RawNode):
    """Mixin declaring the per-kind fill fields filled by :func:`fill_children`."""

    no_fill: Optional[RawNoFill] = None
    solid_fill: Optional[RawSolidFill] = None
    gradient_fill: Optional[RawGradientFill] = None
    pattern_fill: Optional[RawPatternFill] = None
    blip_fill: Optional[RawBlipFill] = None
    group_fill: Optional[RawGroupFill] = None
