"""
Color math shared by the stylesheet and DrawingML color resolvers.

Every resolved color is a lowercase 8-digit ``rrggbbaa`` hex string with no
leading ``#``.  Intermediate math works on ``(r, g, b, a)`` float tuples in
the 0..1 range.
"""

from __future__ import annotations

import colorsys
import re
from typing import Dict, List, Optional, Tuple

HEX_COLOR = re.compile(r"[0-9a-f]{8}")

Rgba = Tuple[float, float, float, float]


# ---------------------------------------------------------------------------
# Hex <-> RGBA
# ---------------------------------------------------------------------------


def normalize_hex(value: Optional[str]) -> Optional[str]:
    """``"FF0000"`` -> ``"ff0000ff"``; ``None`` for anything that is not hex."""
    if value is None:
        return None
    text = value.strip().lstrip("#").lower()
    if len(text) == 6:
        text += "ff"
    if not HEX_COLOR.fullmatch(text):
        return None
    return text


def argb_to_rgba_hex(value: Optional[str]) -> Optional[str]:
    """Stylesheet colors are written ``AARRGGBB``; move alpha to the end."""
    if value is None:
        return None
    text = value.strip().lstrip("#")
    if len(text) == 8:
        text = text[2:] + text[:2]
    return normalize_hex(text)


def hex_to_rgba(value: str) -> Rgba:
    text = normalize_hex(value) or "000000ff"
    r, g, b, a = (int(text[i:i + 2], 16) / 255 for i in range(0, 8, 2))
    return r, g, b, a


def rgba_to_hex(rgba: Rgba) -> str:
    return "".join(f"{round(_clamp(channel) * 255):02x}" for channel in rgba)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Tint / HSL
# ---------------------------------------------------------------------------


def apply_tint(value: str, tint: float) -> str:
    """
    Lighten (positive) or darken (negative) a color by ``tint`` in -1..1,
    adjusting HLS lightness the way spreadsheet applications do.
    """
    if not tint:
        return value
    r, g, b, a = hex_to_rgba(value)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    tint = _clamp(tint, -1.0, 1.0)
    if tint < 0:
        l = l * (1 + tint)
    else:
        l = l * (1 - tint) + tint
    r, g, b = colorsys.hls_to_rgb(h, _clamp(l), s)
    return rgba_to_hex((r, g, b, a))


def rgba_to_hsl(rgba: Rgba) -> Tuple[float, float, float, float]:
    """Returns ``(hue in degrees, saturation, luminance, alpha)``."""
    r, g, b, a = rgba
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0, s, l, a


def hsl_to_rgba(hue: float, sat: float, lum: float, alpha: float = 1.0) -> Rgba:
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, _clamp(lum), _clamp(sat))
    return r, g, b, _clamp(alpha)


def to_linear(channel: float) -> float:
    """sRGB gamma expansion."""
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def to_srgb(channel: float) -> float:
    """Inverse of :func:`to_linear`."""
    if channel <= 0.0031308:
        return channel * 12.92
    return 1.055 * channel ** (1 / 2.4) - 0.055


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------

# Legacy indexed palette; 64 and 65 are the system foreground/background.
DEFAULT_INDEXED_COLORS: List[str] = [
    "000000ff", "ffffffff", "ff0000ff", "00ff00ff", "0000ffff", "ffff00ff", "ff00ffff", "00ffffff",
    "000000ff", "ffffffff", "ff0000ff", "00ff00ff", "0000ffff", "ffff00ff", "ff00ffff", "00ffffff",
    "800000ff", "008000ff", "000080ff", "808000ff", "800080ff", "008080ff", "c0c0c0ff", "808080ff",
    "9999ffff", "993366ff", "ffffccff", "ccffffff", "660066ff", "ff8080ff", "0066ccff", "ccccffff",
    "000080ff", "ff00ffff", "ffff00ff", "00ffffff", "800080ff", "800000ff", "008080ff", "0000ffff",
    "00ccffff", "ccffffff", "ccffccff", "ffff99ff", "99ccffff", "ff99ccff", "cc99ffff", "ffcc99ff",
    "3366ffff", "33ccccff", "99cc00ff", "ffcc00ff", "ff9900ff", "ff6600ff", "666699ff", "969696ff",
    "003366ff", "339966ff", "003300ff", "333300ff", "993300ff", "993366ff", "333399ff", "333333ff",
    "000000ff", "ffffffff",
]

# Office default theme, used when a workbook ships no theme part.
DEFAULT_SCHEME_COLORS: Dict[str, str] = {
    "dk1": "000000ff",
    "lt1": "ffffffff",
    "dk2": "44546aff",
    "lt2": "e7e6e6ff",
    "accent1": "4472c4ff",
    "accent2": "ed7d31ff",
    "accent3": "a5a5a5ff",
    "accent4": "ffc000ff",
    "accent5": "5b9bd5ff",
    "accent6": "70ad47ff",
    "hlink": "0563c1ff",
    "folHlink": "954f72ff",
}

# Index order used by stylesheet ``theme="n"`` references.
SCHEME_SLOT_ORDER: List[str] = [
    "lt1", "dk1", "lt2", "dk2",
    "accent1", "accent2", "accent3", "accent4", "accent5", "accent6",
    "hlink", "folHlink",
]

SCHEME_ALIASES: Dict[str, str] = {
    "bg1": "lt1",
    "tx1": "dk1",
    "bg2": "lt2",
    "tx2": "dk2",
}

SYSTEM_COLORS: Dict[str, str] = {
    "windowText": "000000ff",
    "window": "ffffffff",
    "btnFace": "f0f0f0ff",
    "btnText": "000000ff",
    "highlight": "0078d7ff",
    "highlightText": "ffffffff",
    "grayText": "6d6d6dff",
    "menu": "f0f0f0ff",
    "menuText": "000000ff",
    "captionText": "000000ff",
    "infoBk": "ffffe1ff",
    "infoText": "000000ff",
    "3dDkShadow": "696969ff",
    "3dLight": "e3e3e3ff",
    "btnShadow": "a0a0a0ff",
    "btnHighlight": "ffffffff",
    "windowFrame": "646464ff",
}

_NAMED_COLORS: Dict[str, str] = {
    "aliceBlue": "f0f8ff", "antiqueWhite": "faebd7", "aqua": "00ffff",
    "aquamarine": "7fffd4", "azure": "f0ffff", "beige": "f5f5dc",
    "bisque": "ffe4c4", "black": "000000", "blanchedAlmond": "ffebcd",
    "blue": "0000ff", "blueViolet": "8a2be2", "brown": "a52a2a",
    "burlyWood": "deb887", "cadetBlue": "5f9ea0", "chartreuse": "7fff00",
    "chocolate": "d2691e", "coral": "ff7f50", "cornflowerBlue": "6495ed",
    "cornsilk": "fff8dc", "crimson": "dc143c", "cyan": "00ffff",
    "darkBlue": "00008b", "darkCyan": "008b8b", "darkGoldenrod": "b8860b",
    "darkGray": "a9a9a9", "darkGrey": "a9a9a9", "darkGreen": "006400",
    "darkKhaki": "bdb76b", "darkMagenta": "8b008b", "darkOliveGreen": "556b2f",
    "darkOrange": "ff8c00", "darkOrchid": "9932cc", "darkRed": "8b0000",
    "darkSalmon": "e9967a", "darkSeaGreen": "8fbc8f", "darkSlateBlue": "483d8b",
    "darkSlateGray": "2f4f4f", "darkSlateGrey": "2f4f4f", "darkTurquoise": "00ced1",
    "darkViolet": "9400d3", "deepPink": "ff1493", "deepSkyBlue": "00bfff",
    "dimGray": "696969", "dimGrey": "696969", "dodgerBlue": "1e90ff",
    "firebrick": "b22222", "floralWhite": "fffaf0", "forestGreen": "228b22",
    "fuchsia": "ff00ff", "gainsboro": "dcdcdc", "ghostWhite": "f8f8ff",
    "gold": "ffd700", "goldenrod": "daa520", "gray": "808080", "grey": "808080",
    "green": "008000", "greenYellow": "adff2f", "honeydew": "f0fff0",
    "hotPink": "ff69b4", "indianRed": "cd5c5c", "indigo": "4b0082",
    "ivory": "fffff0", "khaki": "f0e68c", "lavender": "e6e6fa",
    "lavenderBlush": "fff0f5", "lawnGreen": "7cfc00", "lemonChiffon": "fffacd",
    "lightBlue": "add8e6", "lightCoral": "f08080", "lightCyan": "e0ffff",
    "lightGoldenrodYellow": "fafad2", "lightGray": "d3d3d3", "lightGrey": "d3d3d3",
    "lightGreen": "90ee90", "lightPink": "ffb6c1", "lightSalmon": "ffa07a",
    "lightSeaGreen": "20b2aa", "lightSkyBlue": "87cefa", "lightSlateGray": "778899",
    "lightSlateGrey": "778899", "lightSteelBlue": "b0c4de", "lightYellow": "ffffe0",
    "lime": "00ff00", "limeGreen": "32cd32", "linen": "faf0e6",
    "magenta": "ff00ff", "maroon": "800000", "mediumAquamarine": "66cdaa",
    "mediumBlue": "0000cd", "mediumOrchid": "ba55d3", "mediumPurple": "9370db",
    "mediumSeaGreen": "3cb371", "mediumSlateBlue": "7b68ee",
    "mediumSpringGreen": "00fa9a", "mediumTurquoise": "48d1cc",
    "mediumVioletRed": "c71585", "midnightBlue": "191970", "mintCream": "f5fffa",
    "mistyRose": "ffe4e1", "moccasin": "ffe4b5", "navajoWhite": "ffdead",
    "navy": "000080", "oldLace": "fdf5e6", "olive": "808000",
    "oliveDrab": "6b8e23", "orange": "ffa500", "orangeRed": "ff4500",
    "orchid": "da70d6", "paleGoldenrod": "eee8aa", "paleGreen": "98fb98",
    "paleTurquoise": "afeeee", "paleVioletRed": "db7093", "papayaWhip": "ffefd5",
    "peachPuff": "ffdab9", "peru": "cd853f", "pink": "ffc0cb", "plum": "dda0dd",
    "powderBlue": "b0e0e6", "purple": "800080", "red": "ff0000",
    "rosyBrown": "bc8f8f", "royalBlue": "4169e1", "saddleBrown": "8b4513",
    "salmon": "fa8072", "sandyBrown": "f4a460", "seaGreen": "2e8b57",
    "seaShell": "fff5ee", "sienna": "a0522d", "silver": "c0c0c0",
    "skyBlue": "87ceeb", "slateBlue": "6a5acd", "slateGray": "708090",
    "slateGrey": "708090", "snow": "fffafa", "springGreen": "00ff7f",
    "steelBlue": "4682b4", "tan": "d2b48c", "teal": "008080",
    "thistle": "d8bfd8", "tomato": "ff6347", "turquoise": "40e0d0",
    "violet": "ee82ee", "wheat": "f5deb3", "white": "ffffff",
    "whiteSmoke": "f5f5f5", "yellow": "ffff00", "yellowGreen": "9acd32",
}


def _preset_table() -> Dict[str, str]:
    table = {name: value + "ff" for name, value in _NAMED_COLORS.items()}
    # ST_PresetColorVal also spells the dark/light/medium families short.
    for name, value in list(table.items()):
        for long, short in (("dark", "dk"), ("light", "lt"), ("medium", "med")):
            if name.startswith(long):
                table[short + name[len(long):]] = value
    table["transparent"] = "00000000"
    return table


PRESET_COLORS: Dict[str, str] = _preset_table()
