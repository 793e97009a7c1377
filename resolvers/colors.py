"""
Color resolution for both sub-schemas.

* Stylesheet colors (CT_Color: ``theme``/``rgb``/``indexed`` plus ``tint``).
* DrawingML color choices (``srgbClr``, ``schemeClr`` ...) with their
  transform lists applied in document order.

Both return ``rrggbbaa`` hex or ``None``; neither raises.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from raw.drawing.color import (
    RawColorChoice,
    RawColorTransform,
    RawHslColor,
    RawPresetColor,
    RawSchemeColor,
    RawScrgbColor,
    RawSrgbColor,
    RawSystemColor,
)
from raw.drawing.theme import RawColorScheme
from raw.spreadsheet.stylesheet import RawColor, RawStylesheetColors
from utils.colors import (
    DEFAULT_INDEXED_COLORS,
    DEFAULT_SCHEME_COLORS,
    PRESET_COLORS,
    SCHEME_ALIASES,
    SYSTEM_COLORS,
    Rgba,
    apply_tint,
    argb_to_rgba_hex,
    hex_to_rgba,
    hsl_to_rgba,
    normalize_hex,
    rgba_to_hex,
    rgba_to_hsl,
    to_linear,
    to_srgb,
)
from utils.conversions import angle_to_degree, percentage_to_float

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = "phClr"


# ---------------------------------------------------------------------------
# Stylesheet colors
# ---------------------------------------------------------------------------


def stylesheet_color_to_hex(
    color: Optional[RawColor],
    stylesheet_colors: Optional[RawStylesheetColors] = None,
    color_scheme: Optional[RawColorScheme] = None,
) -> Optional[str]:
    """
    Resolve a stylesheet color.

    Precedence: theme slot (only with a color scheme; an empty slot gives
    ``None``), then ``rgb``, then the workbook's custom indexed palette when
    it holds the entry, then the built-in palette.
    """
    if color is None:
        return None
    value = _stylesheet_base_color(color, stylesheet_colors, color_scheme)
    if value is None:
        return None
    if color.tint:
        value = apply_tint(value, color.tint)
    return value


def _stylesheet_base_color(
    color: RawColor,
    stylesheet_colors: Optional[RawStylesheetColors],
    color_scheme: Optional[RawColorScheme],
) -> Optional[str]:
    if color.theme is not None and color_scheme is not None:
        # an empty scheme slot does not fall through to rgb or indexed
        return drawing_color_to_hex(color_scheme.get_indexed(color.theme))
    if color.rgb is not None:
        value = argb_to_rgba_hex(color.rgb)
        if value is not None:
            return value
    if color.indexed is not None:
        custom = (stylesheet_colors.indexed_colors if stylesheet_colors else None) or []
        if 0 <= color.indexed < len(custom):
            value = argb_to_rgba_hex(custom[color.indexed])
            if value is not None:
                return value
        if 0 <= color.indexed < len(DEFAULT_INDEXED_COLORS):
            return DEFAULT_INDEXED_COLORS[color.indexed]
    return None


# ---------------------------------------------------------------------------
# DrawingML colors
# ---------------------------------------------------------------------------


def drawing_color_to_hex(
    color: Optional[RawColorChoice],
    color_scheme: Optional[RawColorScheme] = None,
    ref_color: Optional[str] = None,
) -> Optional[str]:
    """
    Resolve a DrawingML color choice and apply its transforms.

    ``ref_color`` stands in for ``phClr``, the placeholder used by theme
    styles that are applied relative to the referencing shape's color.
    Without a color scheme, scheme tokens fall back to the Office defaults.
    """
    if color is None:
        return None
    base = _drawing_base_color(color, color_scheme, ref_color)
    if base is None:
        return None
    if not color.transforms:
        return base
    return rgba_to_hex(apply_transforms(hex_to_rgba(base), color.transforms))


def _drawing_base_color(
    color: RawColorChoice,
    color_scheme: Optional[RawColorScheme],
    ref_color: Optional[str],
) -> Optional[str]:
    if isinstance(color, RawSrgbColor):
        return normalize_hex(color.val)
    if isinstance(color, RawSchemeColor):
        return _scheme_color(color.val, color_scheme, ref_color)
    if isinstance(color, RawSystemColor):
        return normalize_hex(color.last_color) or SYSTEM_COLORS.get(color.val or "")
    if isinstance(color, RawPresetColor):
        return PRESET_COLORS.get(color.val or "")
    if isinstance(color, RawScrgbColor):
        channels = [
            to_srgb(percentage_to_float(value or 0))
            for value in (color.red, color.green, color.blue)
        ]
        return rgba_to_hex((channels[0], channels[1], channels[2], 1.0))
    if isinstance(color, RawHslColor):
        rgba = hsl_to_rgba(
            angle_to_degree(color.hue or 0),
            percentage_to_float(color.sat or 0),
            percentage_to_float(color.lum or 0),
        )
        return rgba_to_hex(rgba)
    return None


def _scheme_color(
    token: Optional[str],
    color_scheme: Optional[RawColorScheme],
    ref_color: Optional[str],
) -> Optional[str]:
    if token is None:
        return None
    if token == PLACEHOLDER_COLOR:
        return ref_color
    if color_scheme is not None:
        slot = color_scheme.get_slot(token)
        if slot is not None and not isinstance(slot, RawSchemeColor):
            value = drawing_color_to_hex(slot)
            if value is not None:
                return value
    value = DEFAULT_SCHEME_COLORS.get(SCHEME_ALIASES.get(token, token))
    if value is None:
        logger.debug("Unknown scheme color token %r", token)
    return value


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _set_channel(index: int, convert: Callable[[float, float], float]) -> Callable[[Rgba, float], Rgba]:
    def apply(rgba: Rgba, amount: float) -> Rgba:
        channels = list(rgba)
        channels[index] = _clamp(convert(channels[index], amount))
        return channels[0], channels[1], channels[2], channels[3]

    return apply


def _set_hsl(index: int, convert: Callable[[float, float], float]) -> Callable[[Rgba, float], Rgba]:
    """Adjust hue (0, as a 0..1 turn), saturation (1) or luminance (2)."""

    def apply(rgba: Rgba, amount: float) -> Rgba:
        hue, sat, lum, alpha = rgba_to_hsl(rgba)
        values = [hue / 360.0, sat, lum]
        updated = convert(values[index], amount)
        values[index] = updated % 1.0 if index == 0 else _clamp(updated)
        return hsl_to_rgba(values[0] * 360.0, values[1], values[2], alpha)

    return apply


def _replace(_: float, amount: float) -> float:
    return amount


def _modulate(value: float, amount: float) -> float:
    return value * amount


def _offset(value: float, amount: float) -> float:
    return value + amount


def _complement(rgba: Rgba) -> Rgba:
    hue, sat, lum, alpha = rgba_to_hsl(rgba)
    return hsl_to_rgba(hue + 180.0, sat, lum, alpha)


def _inverse(rgba: Rgba) -> Rgba:
    r, g, b, a = rgba
    return 1.0 - r, 1.0 - g, 1.0 - b, a


def _gray(rgba: Rgba) -> Rgba:
    r, g, b, a = rgba
    value = 0.299 * r + 0.587 * g + 0.114 * b
    return value, value, value, a


def _gamma(rgba: Rgba) -> Rgba:
    r, g, b, a = rgba
    return to_srgb(r), to_srgb(g), to_srgb(b), a


def _inverse_gamma(rgba: Rgba) -> Rgba:
    r, g, b, a = rgba
    return to_linear(r), to_linear(g), to_linear(b), a


def _shade(rgba: Rgba, amount: float) -> Rgba:
    # shade keeps ``amount`` of the luminance
    return hex_to_rgba(apply_tint(rgba_to_hex(rgba), amount - 1.0))


def _tint(rgba: Rgba, amount: float) -> Rgba:
    # tint moves toward white, keeping ``amount`` of the color
    return hex_to_rgba(apply_tint(rgba_to_hex(rgba), 1.0 - amount))


VALUE_TRANSFORMS: Dict[str, Callable[[Rgba, float], Rgba]] = {
    "red": _set_channel(0, _replace),
    "redMod": _set_channel(0, _modulate),
    "redOff": _set_channel(0, _offset),
    "green": _set_channel(1, _replace),
    "greenMod": _set_channel(1, _modulate),
    "greenOff": _set_channel(1, _offset),
    "blue": _set_channel(2, _replace),
    "blueMod": _set_channel(2, _modulate),
    "blueOff": _set_channel(2, _offset),
    "alpha": _set_channel(3, _replace),
    "alphaMod": _set_channel(3, _modulate),
    "alphaOff": _set_channel(3, _offset),
    "hue": _set_hsl(0, _replace),
    "hueMod": _set_hsl(0, _modulate),
    "hueOff": _set_hsl(0, _offset),
    "sat": _set_hsl(1, _replace),
    "satMod": _set_hsl(1, _modulate),
    "satOff": _set_hsl(1, _offset),
    "lum": _set_hsl(2, _replace),
    "lumMod": _set_hsl(2, _modulate),
    "lumOff": _set_hsl(2, _offset),
    "shade": _shade,
    "tint": _tint,
}

FLAG_TRANSFORMS: Dict[str, Callable[[Rgba], Rgba]] = {
    "comp": _complement,
    "inv": _inverse,
    "gray": _gray,
    "gamma": _gamma,
    "invGamma": _inverse_gamma,
}

# Hue values are angles; everything else is a percentage.
ANGLE_TRANSFORMS = ("hue", "hueOff")


def apply_transforms(rgba: Rgba, transforms: List[RawColorTransform]) -> Rgba:
    for transform in transforms:
        flag = FLAG_TRANSFORMS.get(transform.name)
        if flag is not None:
            rgba = flag(rgba)
            continue
        apply = VALUE_TRANSFORMS.get(transform.name)
        if apply is None or transform.value is None:
            continue
        if transform.name in ANGLE_TRANSFORMS:
            amount = angle_to_degree(transform.value) / 360.0
        else:
            amount = percentage_to_float(transform.value)
        rgba = apply(rgba, amount)
    return rgba
