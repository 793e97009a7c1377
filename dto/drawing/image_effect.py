"""
Leaf effects shared by ``<blip>`` elements and effect containers.

Percentages are fractions (``50000`` -> ``0.5``), radii are points and
colors are ``rrggbbaa`` hex strings.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from dto.base import Entity


class AlphaBiLevel(Entity):
    kind: Literal["alpha_bi_level"] = "alpha_bi_level"
    threshold: float = 0.0


class AlphaCeiling(Entity):
    kind: Literal["alpha_ceiling"] = "alpha_ceiling"


class AlphaFloor(Entity):
    kind: Literal["alpha_floor"] = "alpha_floor"


class AlphaInverse(Entity):
    kind: Literal["alpha_inverse"] = "alpha_inverse"
    color: Optional[str] = None


class AlphaModulationFixed(Entity):
    kind: Literal["alpha_modulation_fixed"] = "alpha_modulation_fixed"
    amount: float = 1.0


class AlphaReplace(Entity):
    kind: Literal["alpha_replace"] = "alpha_replace"
    alpha: float = 0.0


class BiLevel(Entity):
    kind: Literal["bi_level"] = "bi_level"
    threshold: float = 0.0


class Blur(Entity):
    kind: Literal["blur"] = "blur"
    radius: float = 0.0
    grow: bool = True


class ColorChange(Entity):
    """Replace ``color_from`` by ``color_to``."""

    kind: Literal["color_change"] = "color_change"
    color_from: str
    color_to: str
    use_alpha: bool = True


class ColorReplacement(Entity):
    kind: Literal["color_replacement"] = "color_replacement"
    color: str


class Duotone(Entity):
    kind: Literal["duotone"] = "duotone"
    colors: List[str] = []


class Grayscale(Entity):
    kind: Literal["grayscale"] = "grayscale"


class HueSaturationLuminance(Entity):
    kind: Literal["hsl"] = "hsl"
    hue: float = 0.0
    saturation: float = 0.0
    luminance: float = 0.0


class Luminance(Entity):
    kind: Literal["luminance"] = "luminance"
    brightness: float = 0.0
    contrast: float = 0.0


class Tint(Entity):
    kind: Literal["tint"] = "tint"
    hue: float = 0.0
    amount: float = 0.0


ImageEffect = Union[
    AlphaBiLevel,
    AlphaCeiling,
    AlphaFloor,
    AlphaInverse,
    AlphaModulationFixed,
    AlphaReplace,
    BiLevel,
    Blur,
    ColorChange,
    ColorReplacement,
    Duotone,
    Grayscale,
    HueSaturationLuminance,
    Luminance,
    Tint,
]
