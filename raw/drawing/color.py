"""
DrawingML color choices (EG_ColorChoice) and their transform lists.

A color element carries its base value plus an ordered list of transforms
(``<lumMod val="75000"/>``, ``<alpha val="50000"/>`` ...) that are applied
in document order when the color is resolved.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel

from raw.cursor import Start, XmlCursor
from raw.node import Loader, RawNode, children
from utils.conversions import to_int, to_str

TRANSFORM_TAGS = (
    "alpha", "alphaMod", "alphaOff",
    "red", "redMod", "redOff",
    "green", "greenMod", "greenOff",
    "blue", "blueMod", "blueOff",
    "hue", "hueMod", "hueOff",
    "sat", "satMod", "satOff",
    "lum", "lumMod", "lumOff",
    "comp", "inv", "gray", "gamma", "invGamma",
    "shade", "tint",
)


class RawColorTransform(BaseModel):
    name: str
    value: Optional[int] = None

    model_config = {"frozen": True}


def load_transform(cursor: XmlCursor, start: Start) -> RawColorTransform:
    cursor.skip_subtree(start.tag)
    return RawColorTransform(name=start.tag, value=to_int(start.attrs.get("val")))


TRANSFORM_CHILDREN: Dict[str, Tuple[str, Loader, bool]] = {
    tag: ("transforms", load_transform, True) for tag in TRANSFORM_TAGS
}


class RawColorBase(RawNode):
    CHILDREN = TRANSFORM_CHILDREN

    transforms: List[RawColorTransform] = []


class RawSrgbColor(RawColorBase):
    TAG = "srgbClr"
    ATTRIBUTES = {"val": ("val", to_str)}

    val: Optional[str] = None


class RawScrgbColor(RawColorBase):
    """Linear RGB, each channel a percentage."""

    TAG = "scrgbClr"
    ATTRIBUTES = {
        "r": ("red", to_int),
        "g": ("green", to_int),
        "b": ("blue", to_int),
    }

    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None


class RawHslColor(RawColorBase):
    TAG = "hslClr"
    ATTRIBUTES = {
        "hue": ("hue", to_int),
        "sat": ("sat", to_int),
        "lum": ("lum", to_int),
    }

    hue: Optional[int] = None
    sat: Optional[int] = None
    lum: Optional[int] = None


class RawSchemeColor(RawColorBase):
    TAG = "schemeClr"
    ATTRIBUTES = {"val": ("val", to_str)}

    val: Optional[str] = None


class RawSystemColor(RawColorBase):
    TAG = "sysClr"
    ATTRIBUTES = {
        "val": ("val", to_str),
        "lastClr": ("last_color", to_str),
    }

    val: Optional[str] = None
    last_color: Optional[str] = None


class RawPresetColor(RawColorBase):
    TAG = "prstClr"
    ATTRIBUTES = {"val": ("val", to_str)}

    val: Optional[str] = None


RawColorChoice = Union[
    RawSrgbColor, RawScrgbColor, RawHslColor, RawSchemeColor, RawSystemColor, RawPresetColor
]

COLOR_LOADERS: Dict[str, Loader] = {
    cls.TAG: cls.load
    for cls in (RawSrgbColor, RawScrgbColor, RawHslColor, RawSchemeColor, RawSystemColor, RawPresetColor)
}


def color_children(field: str = "color") -> Dict[str, Tuple[str, Loader, bool]]:
    """``CHILDREN`` entries for an element holding one color choice directly."""
    return {tag: (field, loader, False) for tag, loader in COLOR_LOADERS.items()}


def color_of(cursor: XmlCursor, start: Start) -> Optional[RawColorChoice]:
    """Loader for wrappers such as ``<fgClr>`` or ``<dk1>`` that hold one color choice."""
    color = None
    for event in children(cursor, start):
        loader = COLOR_LOADERS.get(event.tag)
        if loader is None or color is not None:
            cursor.skip_subtree(event.tag)
        else:
            color = loader(cursor, event)
    return color


def colors_of(cursor: XmlCursor, start: Start) -> List[RawColorChoice]:
    """Loader for wrappers holding several colors, e.g. ``<duotone>`` or ``<custClrLst>``."""
    colors = []
    for event in children(cursor, start):
        loader = COLOR_LOADERS.get(event.tag)
        if loader is None:
            cursor.skip_subtree(event.tag)
        else:
            colors.append(loader(cursor, event))
    return colors
