"""
Raw string items (CT_Rst): shared-string ``<si>`` entries and inline ``<is>`` strings.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, XmlEnum, enum, text_content
from raw.spreadsheet.stylesheet import RawFont
from utils.conversions import to_int


class PhoneticType(XmlEnum):
    FULLWIDTH_KATAKANA = "fullwidthKatakana"
    HALFWIDTH_KATAKANA = "halfwidthKatakana"
    HIRAGANA = "Hiragana"
    NO_CONVERSION = "noConversion"


class PhoneticAlignment(XmlEnum):
    NO_CONTROL = "noControl"
    LEFT = "left"
    CENTER = "center"
    DISTRIBUTED = "distributed"

    @classmethod
    def default(cls) -> "PhoneticAlignment":
        return cls.LEFT


class RawPhoneticProperties(RawNode):
    TAG = "phoneticPr"
    ATTRIBUTES = {
        "fontId": ("font_id", to_int),
        "type": ("phonetic_type", enum(PhoneticType)),
        "alignment": ("alignment", enum(PhoneticAlignment)),
    }

    font_id: Optional[int] = None
    phonetic_type: Optional[PhoneticType] = None
    alignment: Optional[PhoneticAlignment] = None


class RawPhoneticRun(RawNode):
    """``<rPh sb="0" eb="1"><t>...</t></rPh>``: reading for base characters sb..eb."""

    TAG = "rPh"
    ATTRIBUTES = {
        "sb": ("base_start", to_int),
        "eb": ("base_end", to_int),
    }
    CHILDREN = {"t": ("text", text_content, False)}

    base_start: Optional[int] = None
    base_end: Optional[int] = None
    text: Optional[str] = None


class RawRichTextRun(RawNode):
    TAG = "r"
    CHILDREN = {
        "rPr": ("properties", RawFont.load, False),
        "t": ("text", text_content, False),
    }

    properties: Optional[RawFont] = None
    text: Optional[str] = None


class RawStringItem(RawNode):
    TAG = "si"
    CHILDREN = {
        "t": ("text", text_content, False),
        "r": ("runs", RawRichTextRun.load, True),
        "rPh": ("phonetic_runs", RawPhoneticRun.load, True),
        "phoneticPr": ("phonetic_properties", RawPhoneticProperties.load, False),
    }

    text: Optional[str] = None
    runs: Optional[List[RawRichTextRun]] = None
    phonetic_runs: List[RawPhoneticRun] = []
    phonetic_properties: Optional[RawPhoneticProperties] = None


class RawSharedStringTable(RawNode):
    TAG = "sst"
    ATTRIBUTES = {
        "count": ("count", to_int),
        "uniqueCount": ("unique_count", to_int),
    }
    CHILDREN = {"si": ("items", RawStringItem.load, True)}

    count: Optional[int] = None
    unique_count: Optional[int] = None
    items: List[RawStringItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def get(self, index: int) -> Optional[RawStringItem]:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None
