"""
DrawingML text: ``<txBody>`` with its body properties, list styles,
paragraphs and runs.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, flag, list_of, present, text_content, val_of
from raw.drawing.color import RawColorChoice, color_of
from raw.drawing.effect import RawEffectContainer, RawEffectList
from raw.drawing.fill import FillFields, RawBlip, fill_children
from raw.drawing.line import RawOutline
from raw.drawing.non_visual import RawDrawingHyperlink
from raw.drawing.scene import RawFlatText, RawScene3D, RawShape3D
from utils.conversions import to_bool, to_int, to_str


class RawTextFont(RawNode):
    """``<latin>``, ``<ea>``, ``<cs>``, ``<sym>``, ``<buFont>``."""

    ATTRIBUTES = {
        "typeface": ("typeface", to_str),
        "panose": ("panose", to_str),
        "pitchFamily": ("pitch_family", to_int),
        "charset": ("charset", to_int),
    }

    typeface: Optional[str] = None
    panose: Optional[str] = None
    pitch_family: Optional[int] = None
    charset: Optional[int] = None


class RawUnderlineFill(FillFields):
    """``<uFill>``: fill choice for the underline."""

    TAG = "uFill"
    CHILDREN = fill_children(include_group=False)


class RawTextRunProperties(FillFields):
    """``<rPr>``, ``<defRPr>`` and ``<endParaRPr>``."""

    TAG = "rPr"
    ATTRIBUTES = {
        "kumimoji": ("kumimoji", to_bool),
        "lang": ("language", to_str),
        "altLang": ("alternative_language", to_str),
        "sz": ("font_size", to_int),
        "b": ("bold", to_bool),
        "i": ("italic", to_bool),
        "u": ("underline", to_str),
        "strike": ("strike", to_str),
        "kern": ("kerning", to_int),
        "cap": ("capital", to_str),
        "spc": ("spacing", to_int),
        "normalizeH": ("normalize_height", to_bool),
        "baseline": ("baseline", to_int),
        "noProof": ("no_proof", to_bool),
        "dirty": ("dirty", to_bool),
        "err": ("spelling_error", to_bool),
        "smtClean": ("smart_tag_clean", to_bool),
        "smtId": ("smart_tag_id", to_int),
        "bmk": ("bookmark", to_str),
    }
    CHILDREN = {
        **fill_children(),
        "ln": ("outline", RawOutline.load, False),
        "effectLst": ("effect_list", RawEffectList.load, False),
        "effectDag": ("effect_dag", RawEffectContainer.load, False),
        "highlight": ("highlight", color_of, False),
        "uLnTx": ("underline_line_follows_text", present, False),
        "uLn": ("underline_line", RawOutline.load, False),
        "uFillTx": ("underline_fill_follows_text", present, False),
        "uFill": ("underline_fill", RawUnderlineFill.load, False),
        "latin": ("latin", RawTextFont.load, False),
        "ea": ("east_asian", RawTextFont.load, False),
        "cs": ("complex_script", RawTextFont.load, False),
        "sym": ("symbol", RawTextFont.load, False),
        "hlinkClick": ("hyperlink_click", RawDrawingHyperlink.load, False),
        "hlinkMouseOver": ("hyperlink_mouse_over", RawDrawingHyperlink.load, False),
        "rtl": ("right_to_left", flag, False),
    }

    kumimoji: Optional[bool] = None
    language: Optional[str] = None
    alternative_language: Optional[str] = None
    font_size: Optional[int] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[str] = None
    strike: Optional[str] = None
    kerning: Optional[int] = None
    capital: Optional[str] = None
    spacing: Optional[int] = None
    normalize_height: Optional[bool] = None
    baseline: Optional[int] = None
    no_proof: Optional[bool] = None
    dirty: Optional[bool] = None
    spelling_error: Optional[bool] = None
    smart_tag_clean: Optional[bool] = None
    smart_tag_id: Optional[int] = None
    bookmark: Optional[str] = None
    outline: Optional[RawOutline] = None
    effect_list: Optional[RawEffectList] = None
    effect_dag: Optional[RawEffectContainer] = None
    highlight: Optional[RawColorChoice] = None
    underline_line_follows_text: Optional[bool] = None
    underline_line: Optional[RawOutline] = None
    underline_fill_follows_text: Optional[bool] = None
    underline_fill: Optional[RawUnderlineFill] = None
    latin: Optional[RawTextFont] = None
    east_asian: Optional[RawTextFont] = None
    complex_script: Optional[RawTextFont] = None
    symbol: Optional[RawTextFont] = None
    hyperlink_click: Optional[RawDrawingHyperlink] = None
    hyperlink_mouse_over: Optional[RawDrawingHyperlink] = None
    right_to_left: Optional[bool] = None


# ---------------------------------------------------------------------------
# Paragraph properties
# ---------------------------------------------------------------------------


class RawTextSpacing(RawNode):
    """``<lnSpc>``, ``<spcBef>``, ``<spcAft>``: either a percentage or points."""

    CHILDREN = {
        "spcPct": ("percent", val_of(to_int), False),
        "spcPts": ("points", val_of(to_int), False),
    }

    percent: Optional[int] = None
    points: Optional[int] = None


class RawAutoNumberedBullet(RawNode):
    TAG = "buAutoNum"
    ATTRIBUTES = {
        "type": ("scheme", to_str),
        "startAt": ("start_at", to_int),
    }

    scheme: Optional[str] = None
    start_at: Optional[int] = None


class RawPictureBullet(RawNode):
    TAG = "buBlip"
    CHILDREN = {"blip": ("blip", RawBlip.load, False)}

    blip: Optional[RawBlip] = None


class RawTabStop(RawNode):
    TAG = "tab"
    ATTRIBUTES = {
        "pos": ("position", to_int),
        "algn": ("alignment", to_str),
    }

    position: Optional[int] = None
    alignment: Optional[str] = None


class RawParagraphProperties(RawNode):
    """``<pPr>`` and the ``<lvlNpPr>``/``<defPPr>`` entries of a list style."""

    TAG = "pPr"
    ATTRIBUTES = {
        "marL": ("left_margin", to_int),
        "marR": ("right_margin", to_int),
        "lvl": ("level", to_int),
        "indent": ("indent", to_int),
        "algn": ("alignment", to_str),
        "defTabSz": ("default_tab_size", to_int),
        "rtl": ("right_to_left", to_bool),
        "eaLnBrk": ("east_asian_line_break", to_bool),
        "fontAlgn": ("font_alignment", to_str),
        "latinLnBrk": ("latin_line_break", to_bool),
        "hangingPunct": ("hanging_punctuation", to_bool),
    }
    CHILDREN = {
        "lnSpc": ("line_spacing", RawTextSpacing.load, False),
        "spcBef": ("space_before", RawTextSpacing.load, False),
        "spcAft": ("space_after", RawTextSpacing.load, False),
        "buClrTx": ("bullet_color_follows_text", present, False),
        "buClr": ("bullet_color", color_of, False),
        "buSzTx": ("bullet_size_follows_text", present, False),
        "buSzPct": ("bullet_size_percent", val_of(to_int), False),
        "buSzPts": ("bullet_size_points", val_of(to_int), False),
        "buFontTx": ("bullet_font_follows_text", present, False),
        "buFont": ("bullet_font", RawTextFont.load, False),
        "buNone": ("no_bullet", present, False),
        "buAutoNum": ("auto_numbered_bullet", RawAutoNumberedBullet.load, False),
        "buChar": ("character_bullet", val_of(to_str, attribute="char"), False),
        "buBlip": ("picture_bullet", RawPictureBullet.load, False),
        "tabLst": ("tab_stops", list_of(RawTabStop.load, "tab"), False),
        "defRPr": ("default_run_properties", RawTextRunProperties.load, False),
    }

    left_margin: Optional[int] = None
    right_margin: Optional[int] = None
    level: Optional[int] = None
    indent: Optional[int] = None
    alignment: Optional[str] = None
    default_tab_size: Optional[int] = None
    right_to_left: Optional[bool] = None
    east_asian_line_break: Optional[bool] = None
    font_alignment: Optional[str] = None
    latin_line_break: Optional[bool] = None
    hanging_punctuation: Optional[bool] = None
    line_spacing: Optional[RawTextSpacing] = None
    space_before: Optional[RawTextSpacing] = None
    space_after: Optional[RawTextSpacing] = None
    bullet_color_follows_text: Optional[bool] = None
    bullet_color: Optional[RawColorChoice] = None
    bullet_size_follows_text: Optional[bool] = None
    bullet_size_percent: Optional[int] = None
    bullet_size_points: Optional[int] = None
    bullet_font_follows_text: Optional[bool] = None
    bullet_font: Optional[RawTextFont] = None
    no_bullet: Optional[bool] = None
    auto_numbered_bullet: Optional[RawAutoNumberedBullet] = None
    character_bullet: Optional[str] = None
    picture_bullet: Optional[RawPictureBullet] = None
    tab_stops: Optional[List[RawTabStop]] = None
    default_run_properties: Optional[RawTextRunProperties] = None


class RawListStyle(RawNode):
    TAG = "lstStyle"
    CHILDREN = {
        "defPPr": ("default", RawParagraphProperties.load, False),
        **{
            f"lvl{level}pPr": (f"level_{level}", RawParagraphProperties.load, False)
            for level in range(1, 10)
        },
    }

    default: Optional[RawParagraphProperties] = None
    level_1: Optional[RawParagraphProperties] = None
    level_2: Optional[RawParagraphProperties] = None
    level_3: Optional[RawParagraphProperties] = None
    level_4: Optional[RawParagraphProperties] = None
    level_5: Optional[RawParagraphProperties] = None
    level_6: Optional[RawParagraphProperties] = None
    level_7: Optional[RawParagraphProperties] = None
    level_8: Optional[RawParagraphProperties] = None
    level_9: Optional[RawParagraphProperties] = None

    def for_level(self, level: int) -> Optional[RawParagraphProperties]:
        """Paragraph defaults for a 0-based ``lvl``; falls back to ``defPPr``."""
        properties = getattr(self, f"level_{level + 1}", None) if 0 <= level < 9 else None
        return properties or self.default


# ---------------------------------------------------------------------------
# Runs and paragraphs
# ---------------------------------------------------------------------------


class RawTextRun(RawNode):
    """``<r>``: a run of text."""

    TAG = "r"
    CHILDREN = {
        "rPr": ("properties", RawTextRunProperties.load, False),
        "t": ("text", text_content, False),
    }

    properties: Optional[RawTextRunProperties] = None
    text: Optional[str] = None


class RawLineBreak(RawNode):
    TAG = "br"
    CHILDREN = {"rPr": ("properties", RawTextRunProperties.load, False)}

    properties: Optional[RawTextRunProperties] = None


class RawTextField(RawNode):
    """``<fld id="{...}" type="slidenum">``: text computed by the host application."""

    TAG = "fld"
    ATTRIBUTES = {
        "id": ("field_id", to_str),
        "type": ("field_type", to_str),
    }
    CHILDREN = {
        "rPr": ("properties", RawTextRunProperties.load, False),
        "pPr": ("paragraph_properties", RawParagraphProperties.load, False),
        "t": ("text", text_content, False),
    }

    field_id: Optional[str] = None
    field_type: Optional[str] = None
    properties: Optional[RawTextRunProperties] = None
    paragraph_properties: Optional[RawParagraphProperties] = None
    text: Optional[str] = None


class RawParagraph(RawNode):
    TAG = "p"
    CHILDREN = {
        "pPr": ("properties", RawParagraphProperties.load, False),
        "r": ("runs", RawTextRun.load, True),
        "br": ("runs", RawLineBreak.load, True),
        "fld": ("runs", RawTextField.load, True),
        "endParaRPr": ("end_run_properties", RawTextRunProperties.load, False),
    }

    properties: Optional[RawParagraphProperties] = None
    runs: List[RawNode] = []
    end_run_properties: Optional[RawTextRunProperties] = None


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------


class RawNormalAutoFit(RawNode):
    TAG = "normAutofit"
    ATTRIBUTES = {
        "fontScale": ("font_scale", to_int),
        "lnSpcReduction": ("line_spacing_reduction", to_int),
    }

    font_scale: Optional[int] = None
    line_spacing_reduction: Optional[int] = None


class RawPresetTextWarp(RawNode):
    TAG = "prstTxWarp"
    ATTRIBUTES = {"prst": ("preset", to_str)}

    preset: Optional[str] = None


class RawBodyProperties(RawNode):
    TAG = "bodyPr"
    ATTRIBUTES = {
        "rot": ("rotation", to_int),
        "spcFirstLastPara": ("space_first_last_paragraph", to_bool),
        "vertOverflow": ("vertical_overflow", to_str),
        "horzOverflow": ("horizontal_overflow", to_str),
        "vert": ("vertical", to_str),
        "wrap": ("wrap", to_str),
        "lIns": ("left_inset", to_int),
        "tIns": ("top_inset", to_int),
        "rIns": ("right_inset", to_int),
        "bIns": ("bottom_inset", to_int),
        "numCol": ("column_count", to_int),
        "spcCol": ("column_spacing", to_int),
        "rtlCol": ("right_to_left_columns", to_bool),
        "fromWordArt": ("from_word_art", to_bool),
        "anchor": ("anchor", to_str),
        "anchorCtr": ("anchor_center", to_bool),
        "forceAA": ("force_anti_alias", to_bool),
        "upright": ("upright", to_bool),
        "compatLnSpc": ("compatible_line_spacing", to_bool),
    }
    CHILDREN = {
        "prstTxWarp": ("preset_text_warp", RawPresetTextWarp.load, False),
        "noAutofit": ("no_auto_fit", present, False),
        "normAutofit": ("normal_auto_fit", RawNormalAutoFit.load, False),
        "spAutoFit": ("shape_auto_fit", present, False),
        "scene3d": ("scene3d", RawScene3D.load, False),
        "sp3d": ("shape3d", RawShape3D.load, False),
        "flatTx": ("flat_text", RawFlatText.load, False),
    }

    rotation: Optional[int] = None
    space_first_last_paragraph: Optional[bool] = None
    vertical_overflow: Optional[str] = None
    horizontal_overflow: Optional[str] = None
    vertical: Optional[str] = None
    wrap: Optional[str] = None
    left_inset: Optional[int] = None
    top_inset: Optional[int] = None
    right_inset: Optional[int] = None
    bottom_inset: Optional[int] = None
    column_count: Optional[int] = None
    column_spacing: Optional[int] = None
    right_to_left_columns: Optional[bool] = None
    from_word_art: Optional[bool] = None
    anchor: Optional[str] = None
    anchor_center: Optional[bool] = None
    force_anti_alias: Optional[bool] = None
    upright: Optional[bool] = None
    compatible_line_spacing: Optional[bool] = None
    preset_text_warp: Optional[RawPresetTextWarp] = None
    no_auto_fit: Optional[bool] = None
    normal_auto_fit: Optional[RawNormalAutoFit] = None
    shape_auto_fit: Optional[bool] = None
    scene3d: Optional[RawScene3D] = None
    shape3d: Optional[RawShape3D] = None
    flat_text: Optional[RawFlatText] = None


class RawTextBody(RawNode):
    TAG = "txBody"
    CHILDREN = {
        "bodyPr": ("body_properties", RawBodyProperties.load, False),
        "lstStyle": ("list_style", RawListStyle.load, False),
        "p": ("paragraphs", RawParagraph.load, True),
    }

    body_properties: Optional[RawBodyProperties] = None
    list_style: Optional[RawListStyle] = None
    paragraphs: List[RawParagraph] = []
