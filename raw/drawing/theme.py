"""
Theme part (``xl/theme/theme1.xml``): color scheme, font scheme and the
format scheme whose style lists ``lnRef``/``fillRef``/``effectRef`` index into.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, list_of, sequence_of
from raw.drawing.color import RawColorChoice, color_of
from raw.drawing.effect import RawEffectStyle
from raw.drawing.fill import FILL_LOADERS, RawFillChoice, RawNoFill
from raw.drawing.line import RawOutline
from raw.drawing.text import RawTextFont
from utils.colors import SCHEME_ALIASES, SCHEME_SLOT_ORDER
from utils.conversions import to_str

# scheme tokens whose field name differs from the element name
SLOT_FIELDS = {"folHlink": "followed_hlink"}


class RawColorScheme(RawNode):
    TAG = "clrScheme"
    ATTRIBUTES = {"name": ("name", to_str)}
    CHILDREN = {slot: (SLOT_FIELDS.get(slot, slot), color_of, False) for slot in SCHEME_SLOT_ORDER}

    name: Optional[str] = None
    dk1: Optional[RawColorChoice] = None
    lt1: Optional[RawColorChoice] = None
    dk2: Optional[RawColorChoice] = None
    lt2: Optional[RawColorChoice] = None
    accent1: Optional[RawColorChoice] = None
    accent2: Optional[RawColorChoice] = None
    accent3: Optional[RawColorChoice] = None
    accent4: Optional[RawColorChoice] = None
    accent5: Optional[RawColorChoice] = None
    accent6: Optional[RawColorChoice] = None
    hlink: Optional[RawColorChoice] = None
    followed_hlink: Optional[RawColorChoice] = None

    def get_slot(self, name: str) -> Optional[RawColorChoice]:
        """Color for a scheme token; ``bg1``/``tx1``/``bg2``/``tx2`` alias the light/dark slots."""
        slot = SCHEME_ALIASES.get(name, name)
        if slot not in SCHEME_SLOT_ORDER:
            return None
        return getattr(self, SLOT_FIELDS.get(slot, slot))

    def get_indexed(self, index: int) -> Optional[RawColorChoice]:
        """Color for a stylesheet ``theme="n"`` reference."""
        if 0 <= index < len(SCHEME_SLOT_ORDER):
            return self.get_slot(SCHEME_SLOT_ORDER[index])
        return None


class RawSupplementalFont(RawNode):
    TAG = "font"
    ATTRIBUTES = {
        "script": ("script", to_str),
        "typeface": ("typeface", to_str),
    }

    script: Optional[str] = None
    typeface: Optional[str] = None


class RawFontCollection(RawNode):
    """``<majorFont>`` / ``<minorFont>``."""

    CHILDREN = {
        "latin": ("latin", RawTextFont.load, False),
        "ea": ("east_asian", RawTextFont.load, False),
        "cs": ("complex_script", RawTextFont.load, False),
        "font": ("supplemental", RawSupplementalFont.load, True),
    }

    latin: Optional[RawTextFont] = None
    east_asian: Optional[RawTextFont] = None
    complex_script: Optional[RawTextFont] = None
    supplemental: List[RawSupplementalFont] = []


class RawFontScheme(RawNode):
    TAG = "fontScheme"
    ATTRIBUTES = {"name": ("name", to_str)}
    CHILDREN = {
        "majorFont": ("major", RawFontCollection.load, False),
        "minorFont": ("minor", RawFontCollection.load, False),
    }

    name: Optional[str] = None
    major: Optional[RawFontCollection] = None
    minor: Optional[RawFontCollection] = None


class RawFormatScheme(RawNode):
    TAG = "fmtScheme"
    ATTRIBUTES = {"name": ("name", to_str)}
    CHILDREN = {
        "fillStyleLst": ("fill_styles", sequence_of(FILL_LOADERS), False),
        "lnStyleLst": ("line_styles", list_of(RawOutline.load, "ln"), False),
        "effectStyleLst": ("effect_styles", list_of(RawEffectStyle.load, "effectStyle"), False),
        "bgFillStyleLst": ("background_fill_styles", sequence_of(FILL_LOADERS), False),
    }

    name: Optional[str] = None
    fill_styles: List[RawFillChoice] = []
    line_styles: List[RawOutline] = []
    effect_styles: List[RawEffectStyle] = []
    background_fill_styles: List[RawFillChoice] = []


class RawThemeElements(RawNode):
    TAG = "themeElements"
    CHILDREN = {
        "clrScheme": ("color_scheme", RawColorScheme.load, False),
        "fontScheme": ("font_scheme", RawFontScheme.load, False),
        "fmtScheme": ("format_scheme", RawFormatScheme.load, False),
    }

    color_scheme: Optional[RawColorScheme] = None
    font_scheme: Optional[RawFontScheme] = None
    format_scheme: Optional[RawFormatScheme] = None


def _one_based(items: list, index: Optional[int]):
    if index is None or index < 1 or index > len(items):
        return None
    return items[index - 1]


class RawTheme(RawNode):
    TAG = "theme"
    ATTRIBUTES = {"name": ("name", to_str)}
    CHILDREN = {"themeElements": ("elements", RawThemeElements.load, False)}

    name: Optional[str] = None
    elements: Optional[RawThemeElements] = None

    @property
    def color_scheme(self) -> Optional[RawColorScheme]:
        return self.elements.color_scheme if self.elements else None

    @property
    def font_scheme(self) -> Optional[RawFontScheme]:
        return self.elements.font_scheme if self.elements else None

    @property
    def format_scheme(self) -> RawFormatScheme:
        if self.elements and self.elements.format_scheme:
            return self.elements.format_scheme
        return RawFormatScheme()

    # ---- style references ------------------------------------------------

    def get_fill_from_ref(self, index: Optional[int]) -> Optional[RawFillChoice]:
        """
        ``fillRef idx``: 0 and 1000 mean no fill, 1-999 index ``fillStyleLst``
        and 1001 and above index ``bgFillStyleLst`` (both 1-based).
        """
        if index is None:
            return None
        if index in (0, 1000):
            return RawNoFill()
        if index < 1000:
            return _one_based(self.format_scheme.fill_styles, index)
        return _one_based(self.format_scheme.background_fill_styles, index - 1000)

    def get_line_from_ref(self, index: Optional[int]) -> Optional[RawOutline]:
        return _one_based(self.format_scheme.line_styles, index)

    def get_effect_from_ref(self, index: Optional[int]) -> Optional[RawEffectStyle]:
        return _one_based(self.format_scheme.effect_styles, index)

    def get_font_from_ref(self, index: Optional[str]) -> Optional[RawFontCollection]:
        """``fontRef idx`` is ``major``, ``minor`` or ``none``."""
        scheme = self.font_scheme
        if scheme is None:
            return None
        if index == "major":
            return scheme.major
        if index == "minor":
            return scheme.minor
        return None
