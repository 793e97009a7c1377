"""
Resolved DrawingML text bodies.

Run properties are fully inherited: each run carries the merge of its own
``rPr``, the paragraph's default run properties and the shape's
``fontRef``, so consumers never walk the chain themselves.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from dto.base import Entity
from dto.drawing.effect import EffectContainer
from dto.drawing.enums import (
    AutoNumberScheme,
    FontAlignment,
    HorizontalOverflow,
    ParagraphAlignment,
    PresetTextShape,
    TabAlignment,
    TextAnchoring,
    TextCaps,
    TextStrike,
    TextUnderline,
    TextVertical,
    TextWrapping,
    VerticalOverflow,
)
from dto.drawing.fill import Blip, Fill, SolidFill
from dto.drawing.line import Outline
from dto.drawing.scene import Scene3D, Shape3D
from dto.hyperlink import Hyperlink

DEFAULT_TYPEFACE = "Aptos Display"
DEFAULT_THEME_TYPEFACE = "Arial"
DEFAULT_FONT_SIZE = 11.0
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TEXT_COLOR = "000000ff"


class TextFont(Entity):
    latin: str = DEFAULT_TYPEFACE
    east_asian: str = DEFAULT_TYPEFACE
    complex_script: str = DEFAULT_TYPEFACE
    # script -> typeface, from the theme font collection
    supplemental: Dict[str, str] = {}


class Underline(Entity):
    underline_type: TextUnderline = TextUnderline.NONE
    fill: Fill = SolidFill(color=DEFAULT_TEXT_COLOR)
    outline: Optional[Outline] = None


class TextRunProperties(Entity):
    font: TextFont = TextFont()
    font_size: float = DEFAULT_FONT_SIZE
    language: str = DEFAULT_LANGUAGE
    fill: Fill = SolidFill(color=DEFAULT_TEXT_COLOR)
    underline: Underline = Underline()
    strike: TextStrike = TextStrike.NO_STRIKE
    bold: bool = False
    italic: bool = False
    right_to_left: bool = False
    # superscript / subscript offset as a fraction of the font size
    baseline: float = 0.0
    capitalization: TextCaps = TextCaps.NONE
    spacing: float = 0.0
    outline: Optional[Outline] = None
    effects: Optional[EffectContainer] = None
    hyperlink_on_click: Optional[Hyperlink] = None
    hyperlink_on_hover: Optional[Hyperlink] = None
    highlight_color: Optional[str] = None
    symbol_font: Optional[str] = None
    alternative_language: Optional[str] = None
    bookmark: Optional[str] = None
    kerning: Optional[float] = None
    kumimoji: Optional[bool] = None
    no_proof: Optional[bool] = None
    normalize_height: Optional[bool] = None
    dirty: Optional[bool] = None
    spelling_error: Optional[bool] = None
    smart_tag_clean: Optional[bool] = None
    smart_tag_id: Optional[int] = None


# ---- paragraphs ----


class Spacing(Entity):
    """Either a fraction of the line (``percent``) or an absolute ``points`` value."""

    percent: Optional[float] = None
    points: Optional[float] = None


class TabStop(Entity):
    alignment: TabAlignment = TabAlignment.LEFT
    position: float = 72.0


class BulletSize(Entity):
    follows_text: bool = True
    percent: Optional[float] = None
    points: Optional[float] = None


class NoBullet(Entity):
    kind: Literal["none"] = "none"


class AutoNumberedBullet(Entity):
    kind: Literal["auto_numbered"] = "auto_numbered"
    scheme: AutoNumberScheme = AutoNumberScheme.default()
    start_at: int = 1


class CharacterBullet(Entity):
    kind: Literal["character"] = "character"
    character: str


class PictureBullet(Entity):
    kind: Literal["picture"] = "picture"
    blip: Blip


class Bullet(Entity):
    bullet_type: Union[NoBullet, AutoNumberedBullet, CharacterBullet, PictureBullet] = NoBullet()
    # None: follows the text
    color: Optional[str] = None
    font: Optional[str] = None
    size: BulletSize = BulletSize()


class ParagraphProperties(Entity):
    bullet: Bullet = Bullet()
    line_spacing: Spacing = Spacing()
    space_before: Spacing = Spacing()
    space_after: Spacing = Spacing()
    alignment: ParagraphAlignment = ParagraphAlignment.LEFT
    font_alignment: FontAlignment = FontAlignment.AUTO
    indent: float = 0.0
    level: int = 0
    left_margin: float = 0.0
    right_margin: float = 0.0
    default_tab_size: float = 72.0
    tab_stops: List[TabStop] = []
    east_asian_line_break: bool = True
    latin_line_break: bool = False
    hanging_punctuation: bool = True
    right_to_left: bool = False


# ---- runs ----


class TextRun(Entity):
    kind: Literal["run"] = "run"
    text: str = ""
    properties: TextRunProperties = TextRunProperties()


class LineBreak(Entity):
    kind: Literal["line_break"] = "line_break"
    properties: TextRunProperties = TextRunProperties()


class TextField(Entity):
    """Text the host application computes (slide number, date ...); ``text`` is the cached value."""

    kind: Literal["field"] = "field"
    field_id: str = ""
    field_type: str = ""
    text: str = ""
    properties: TextRunProperties = TextRunProperties()
    paragraph_properties: Optional[ParagraphProperties] = None


Run = Union[TextRun, LineBreak, TextField]


class Paragraph(Entity):
    properties: ParagraphProperties = ParagraphProperties()
    runs: List[Run] = []
    end_run_properties: Optional[TextRunProperties] = None

    @property
    def text(self) -> str:
        parts = []
        for run in self.runs:
            parts.append("\n" if run.kind == "line_break" else run.text)
        return "".join(parts)


# ---- body ----


class NoAutoFit(Entity):
    kind: Literal["none"] = "none"


class NormalAutoFit(Entity):
    kind: Literal["normal"] = "normal"
    font_scale: float = 1.0
    line_spacing_reduction: float = 0.0


class ShapeAutoFit(Entity):
    kind: Literal["shape"] = "shape"


class Insets(Entity):
    left: float = 7.2
    right: float = 7.2
    top: float = 3.6
    bottom: float = 3.6


class BodyProperties(Entity):
    auto_fit: Union[NoAutoFit, NormalAutoFit, ShapeAutoFit] = NoAutoFit()
    preset_text_warp: PresetTextShape = PresetTextShape.default()
    anchor: TextAnchoring = TextAnchoring.TOP
    anchor_center: bool = False
    insets: Insets = Insets()
    vertical: TextVertical = TextVertical.HORIZONTAL
    wrap: TextWrapping = TextWrapping.SQUARE
    horizontal_overflow: HorizontalOverflow = HorizontalOverflow.OVERFLOW
    vertical_overflow: VerticalOverflow = VerticalOverflow.OVERFLOW
    column_count: int = 1
    column_spacing: float = 0.0
    rotation: float = 0.0
    flat_text_z: float = 0.0
    compatible_line_spacing: bool = False
    force_anti_alias: bool = False
    from_word_art: bool = False
    right_to_left_columns: bool = False
    space_first_last_paragraph: bool = False
    upright: bool = False
    scene3d: Optional[Scene3D] = None
    shape3d: Optional[Shape3D] = None


class TextBody(Entity):
    body_properties: BodyProperties = BodyProperties()
    paragraphs: List[Paragraph] = []

    @property
    def text(self) -> str:
        return "\n".join(paragraph.text for paragraph in self.paragraphs)
