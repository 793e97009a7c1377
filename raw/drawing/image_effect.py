"""
Leaf DrawingML effects that need no fills or nested containers.

These may appear inside ``<blip>`` elements as well as in effect DAGs.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from raw.node import Loader, RawNode
from raw.drawing.color import RawColorChoice, color_children, color_of, colors_of
from utils.conversions import to_bool, to_int


class RawAlphaBiLevel(RawNode):
    TAG = "alphaBiLevel"
    ATTRIBUTES = {"thresh": ("threshold", to_int)}

    threshold: Optional[int] = None


class RawAlphaCeiling(RawNode):
    TAG = "alphaCeiling"


class RawAlphaFloor(RawNode):
    TAG = "alphaFloor"


class RawAlphaInverse(RawNode):
    TAG = "alphaInv"
    CHILDREN = color_children()

    color: Optional[RawColorChoice] = None


class RawAlphaModulationFixed(RawNode):
    TAG = "alphaModFix"
    ATTRIBUTES = {"amt": ("amount", to_int)}

    amount: Optional[int] = None


class RawAlphaReplace(RawNode):
    TAG = "alphaRepl"
    ATTRIBUTES = {"a": ("alpha", to_int)}

    alpha: Optional[int] = None


class RawBiLevel(RawNode):
    TAG = "biLevel"
    ATTRIBUTES = {"thresh": ("threshold", to_int)}

    threshold: Optional[int] = None


class RawBlur(RawNode):
    TAG = "blur"
    ATTRIBUTES = {
        "rad": ("radius", to_int),
        "grow": ("grow", to_bool),
    }

    radius: Optional[int] = None
    grow: Optional[bool] = None


class RawColorChange(RawNode):
    TAG = "clrChange"
    ATTRIBUTES = {"useA": ("use_alpha", to_bool)}
    CHILDREN = {
        "clrFrom": ("color_from", color_of, False),
        "clrTo": ("color_to", color_of, False),
    }

    use_alpha: Optional[bool] = None
    color_from: Optional[RawColorChoice] = None
    color_to: Optional[RawColorChoice] = None


class RawColorReplacement(RawNode):
    TAG = "clrRepl"
    CHILDREN = color_children()

    color: Optional[RawColorChoice] = None


class RawDuotone(RawNode):
    TAG = "duotone"

    colors: List[RawColorChoice] = []

    @classmethod
    def load(cls, cursor, start):
        return cls.model_construct(colors=colors_of(cursor, start))


class RawGrayscale(RawNode):
    TAG = "grayscl"


class RawHueSaturationLuminance(RawNode):
    TAG = "hsl"
    ATTRIBUTES = {
        "hue": ("hue", to_int),
        "sat": ("saturation", to_int),
        "lum": ("luminance", to_int),
    }

    hue: Optional[int] = None
    saturation: Optional[int] = None
    luminance: Optional[int] = None


class RawLuminance(RawNode):
    TAG = "lum"
    ATTRIBUTES = {
        "bright": ("brightness", to_int),
        "contrast": ("contrast", to_int),
    }

    brightness: Optional[int] = None
    contrast: Optional[int] = None


class RawTintEffect(RawNode):
    TAG = "tint"
    ATTRIBUTES = {
        "hue": ("hue", to_int),
        "amt": ("amount", to_int),
    }

    hue: Optional[int] = None
    amount: Optional[int] = None


IMAGE_EFFECTS = (
    RawAlphaBiLevel,
    RawAlphaCeiling,
    RawAlphaFloor,
    RawAlphaInverse,
    RawAlphaModulationFixed,
    RawAlphaReplace,
    RawBiLevel,
    RawBlur,
    RawColorChange,
    RawColorReplacement,
    RawDuotone,
    RawGrayscale,
    RawHueSaturationLuminance,
    RawLuminance,
    RawTintEffect,
)

IMAGE_EFFECT_LOADERS: Dict[str, Loader] = {cls.TAG: cls.load for cls in IMAGE_EFFECTS}
