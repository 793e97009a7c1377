"""
Text bodies of drawing shapes.

Run properties inherit, from weakest to strongest: the shape's ``fontRef``,
the list style entry for the paragraph's level, the paragraph's ``defRPr``
and the run's own ``rPr``.  Paragraph properties inherit from the list
style entry for their level.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

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
from dto.drawing.fill import SolidFill
from dto.drawing.text import (
    DEFAULT_TEXT_COLOR,
    DEFAULT_THEME_TYPEFACE,
    AutoNumberedBullet,
    BodyProperties,
    Bullet,
    BulletSize,
    CharacterBullet,
    Insets,
    LineBreak,
    NoAutoFit,
    NoBullet,
    NormalAutoFit,
    Paragraph,
    ParagraphProperties,
    PictureBullet,
    Run,
    ShapeAutoFit,
    Spacing,
    TabStop,
    TextBody,
    TextField,
    TextFont,
    TextRun,
    TextRunProperties,
    Underline,
)
from raw.drawing.line import RawFontReference
from raw.drawing.text import (
    RawBodyProperties,
    RawLineBreak,
    RawParagraph,
    RawParagraphProperties,
    RawTextBody,
    RawTextField,
    RawTextRun,
    RawTextRunProperties,
    RawTextSpacing,
)
from raw.drawing.theme import RawFontCollection
from resolvers.drawing.context import DrawingContext
from resolvers.drawing.effect import resolve_effects
from resolvers.drawing.fill import resolve_blip, resolve_fill
from resolvers.drawing.line import resolve_outline
from resolvers.drawing.scene import resolve_scene3d, resolve_shape3d
from resolvers.hyperlink import resolve_drawing_hyperlink
from utils.conversions import angle_to_degree, emu_to_pt, percentage_to_float, text_point_to_pt

logger = logging.getLogger(__name__)

DEFAULT_TAB_SIZE_EMU = 914400
MAX_COLUMNS = 16

# ``+mn-lt`` style typefaces: (font collection, script)
THEME_TYPEFACES = {
    "mj-lt": ("major", "latin"),
    "mj-ea": ("major", "east_asian"),
    "mj-cs": ("major", "complex_script"),
    "mn-lt": ("minor", "latin"),
    "mn-ea": ("minor", "east_asian"),
    "mn-cs": ("minor", "complex_script"),
}


def _theme_typeface(typeface: str, context: DrawingContext) -> str:
    """Replace a ``+mn-lt``-like placeholder by the theme's typeface."""
    if not typeface.startswith("+"):
        return typeface
    entry = THEME_TYPEFACES.get(typeface[1:])
    if entry is None or context.theme is None:
        return DEFAULT_THEME_TYPEFACE
    collection_name, script = entry
    collection = context.theme.get_font_from_ref(collection_name)
    font = getattr(collection, script, None) if collection else None
    if font is None or not font.typeface:
        return DEFAULT_THEME_TYPEFACE
    return font.typeface


class TextResolver:
    """Resolves the text body of one shape, carrying its ``fontRef`` defaults."""

    def __init__(self, context: DrawingContext, font_reference: Optional[RawFontReference] = None):
        self.context = context
        collection: Optional[RawFontCollection] = None
        color: Optional[str] = None
        if font_reference is not None:
            if context.theme is not None:
                collection = context.theme.get_font_from_ref(font_reference.index)
            color = context.color(font_reference.color)
        self.base = TextRunProperties(
            font=self._font_from_collection(collection),
            fill=SolidFill(color=color or DEFAULT_TEXT_COLOR),
        )

    def _font_from_collection(self, collection: Optional[RawFontCollection]) -> TextFont:
        if collection is None:
            return TextFont()
        default = TextFont()
        return TextFont(
            latin=self._typeface(collection.latin, default.latin),
            east_asian=self._typeface(collection.east_asian, default.east_asian),
            complex_script=self._typeface(collection.complex_script, default.complex_script),
            supplemental={
                font.script: font.typeface
                for font in collection.supplemental
                if font.script and font.typeface
            },
        )

    def _typeface(self, font, fallback: str) -> str:
        if font is None or not font.typeface:
            return fallback
        return _theme_typeface(font.typeface, self.context)

    # ---- runs ----

    def run_properties(self, layers: List[Optional[RawTextRunProperties]]) -> TextRunProperties:
        """Merge ``layers`` (weakest first) over the ``fontRef`` defaults."""
        values: Dict[str, Any] = {name: getattr(self.base, name) for name in TextRunProperties.model_fields}
        # None while the underline follows the text
        underline_fill = None
        underline_outline = None
        underline_type = TextUnderline.NONE
        for raw in layers:
            if raw is None:
                continue
            self._apply_run_layer(raw, values)
            if raw.underline is not None:
                underline_type = TextUnderline.from_string(raw.underline)
            if raw.underline_fill_follows_text:
                underline_fill = None
            elif raw.underline_fill is not None:
                underline_fill = resolve_fill(raw.underline_fill, self.context) or underline_fill
            if raw.underline_line_follows_text:
                underline_outline = None
            elif raw.underline_line is not None:
                underline_outline = resolve_outline(raw.underline_line, self.context)
        values["underline"] = Underline(
            underline_type=underline_type,
            fill=underline_fill or values["fill"],
            outline=underline_outline or values["outline"],
        )
        return TextRunProperties(**values)

    def _apply_run_layer(self, raw: RawTextRunProperties, values: Dict[str, Any]) -> None:
        context = self.context
        font: TextFont = values["font"]
        font_update = {}
        if raw.latin is not None and raw.latin.typeface:
            font_update["latin"] = _theme_typeface(raw.latin.typeface, context)
        if raw.east_asian is not None and raw.east_asian.typeface:
            font_update["east_asian"] = _theme_typeface(raw.east_asian.typeface, context)
        if raw.complex_script is not None and raw.complex_script.typeface:
            font_update["complex_script"] = _theme_typeface(raw.complex_script.typeface, context)
        if font_update:
            values["font"] = font.model_copy(update=font_update)
        if raw.symbol is not None and raw.symbol.typeface:
            values["symbol_font"] = raw.symbol.typeface

        if raw.font_size is not None:
            values["font_size"] = text_point_to_pt(raw.font_size)
        if raw.kerning is not None:
            values["kerning"] = text_point_to_pt(raw.kerning)
        if raw.spacing is not None:
            values["spacing"] = text_point_to_pt(raw.spacing)
        if raw.baseline is not None:
            values["baseline"] = percentage_to_float(raw.baseline)
        if raw.strike is not None:
            values["strike"] = TextStrike.from_string(raw.strike)
        if raw.capital is not None:
            values["capitalization"] = TextCaps.from_string(raw.capital)

        fill = resolve_fill(raw, context)
        if fill is not None:
            values["fill"] = fill
        if raw.outline is not None:
            values["outline"] = resolve_outline(raw.outline, context)
        effects = resolve_effects(raw.effect_list, raw.effect_dag, context)
        if effects is not None:
            values["effects"] = effects
        if raw.highlight is not None:
            values["highlight_color"] = context.color(raw.highlight)
        if raw.hyperlink_click is not None:
            values["hyperlink_on_click"] = resolve_drawing_hyperlink(
                raw.hyperlink_click, context.relationships, context.workbook
            )
        if raw.hyperlink_mouse_over is not None:
            values["hyperlink_on_hover"] = resolve_drawing_hyperlink(
                raw.hyperlink_mouse_over, context.relationships, context.workbook
            )

        for name in (
            "language",
            "alternative_language",
            "bold",
            "italic",
            "right_to_left",
            "bookmark",
            "kumimoji",
            "no_proof",
            "normalize_height",
            "dirty",
            "spelling_error",
            "smart_tag_clean",
            "smart_tag_id",
        ):
            value = getattr(raw, name)
            if value is not None:
                values[name] = value

    # ---- paragraphs ----

    def paragraph_properties(self, layers: List[Optional[RawParagraphProperties]]) -> ParagraphProperties:
        values: Dict[str, Any] = {}
        bullet_type = NoBullet()
        bullet_color: Optional[str] = None
        bullet_font: Optional[str] = None
        bullet_size = BulletSize()
        for raw in layers:
            if raw is None:
                continue
            for name in ("left_margin", "right_margin", "indent"):
                value = getattr(raw, name)
                if value is not None:
                    values[name] = emu_to_pt(value)
            if raw.default_tab_size is not None:
                values["default_tab_size"] = emu_to_pt(raw.default_tab_size)
            if raw.level is not None:
                values["level"] = raw.level
            if raw.alignment is not None:
                values["alignment"] = ParagraphAlignment.from_string(raw.alignment)
            if raw.font_alignment is not None:
                values["font_alignment"] = FontAlignment.from_string(raw.font_alignment)
            for name in ("right_to_left", "east_asian_line_break", "latin_line_break", "hanging_punctuation"):
                value = getattr(raw, name)
                if value is not None:
                    values[name] = value
            for name in ("line_spacing", "space_before", "space_after"):
                spacing = getattr(raw, name)
                if spacing is not None:
                    values[name] = _spacing(spacing)
            if raw.tab_stops is not None:
                values["tab_stops"] = [
                    TabStop(
                        alignment=TabAlignment.from_string(tab.alignment),
                        position=emu_to_pt(tab.position if tab.position is not None else DEFAULT_TAB_SIZE_EMU),
                    )
                    for tab in raw.tab_stops
                ]

            if raw.no_bullet:
                bullet_type = NoBullet()
            elif raw.auto_numbered_bullet is not None:
                bullet_type = AutoNumberedBullet(
                    scheme=AutoNumberScheme.from_string(raw.auto_numbered_bullet.scheme),
                    start_at=raw.auto_numbered_bullet.start_at or 1,
                )
            elif raw.character_bullet is not None:
                bullet_type = CharacterBullet(character=raw.character_bullet)
            elif raw.picture_bullet is not None:
                blip = resolve_blip(raw.picture_bullet.blip, self.context)
                if blip is not None:
                    bullet_type = PictureBullet(blip=blip)

            if raw.bullet_color_follows_text:
                bullet_color = None
            elif raw.bullet_color is not None:
                bullet_color = self.context.color(raw.bullet_color)
            if raw.bullet_font_follows_text:
                bullet_font = None
            elif raw.bullet_font is not None and raw.bullet_font.typeface:
                bullet_font = _theme_typeface(raw.bullet_font.typeface, self.context)
            if raw.bullet_size_follows_text:
                bullet_size = BulletSize()
            elif raw.bullet_size_percent is not None:
                bullet_size = BulletSize(follows_text=False, percent=percentage_to_float(raw.bullet_size_percent))
            elif raw.bullet_size_points is not None:
                bullet_size = BulletSize(follows_text=False, points=text_point_to_pt(raw.bullet_size_points))

        values["bullet"] = Bullet(bullet_type=bullet_type, color=bullet_color, font=bullet_font, size=bullet_size)
        return ParagraphProperties(**values)

    def paragraph(self, raw: RawParagraph, body: RawTextBody) -> Paragraph:
        level = raw.properties.level if raw.properties and raw.properties.level is not None else 0
        inherited = body.list_style.for_level(level) if body.list_style else None
        properties = self.paragraph_properties([inherited, raw.properties])
        defaults = [
            inherited.default_run_properties if inherited else None,
            raw.properties.default_run_properties if raw.properties else None,
        ]
        runs: List[Run] = []
        for item in raw.runs:
            run = self._run(item, defaults)
            if run is not None:
                runs.append(run)
        end_run_properties = None
        if raw.end_run_properties is not None:
            end_run_properties = self.run_properties(defaults + [raw.end_run_properties])
        return Paragraph(properties=properties, runs=runs, end_run_properties=end_run_properties)

    def _run(self, raw, defaults: List[Optional[RawTextRunProperties]]) -> Optional[Run]:
        if isinstance(raw, RawTextRun):
            return TextRun(text=raw.text or "", properties=self.run_properties(defaults + [raw.properties]))
        if isinstance(raw, RawLineBreak):
            return LineBreak(properties=self.run_properties(defaults + [raw.properties]))
        if isinstance(raw, RawTextField):
            paragraph_properties = None
            if raw.paragraph_properties is not None:
                paragraph_properties = self.paragraph_properties([raw.paragraph_properties])
            return TextField(
                field_id=raw.field_id or "",
                field_type=raw.field_type or "",
                text=raw.text or "",
                properties=self.run_properties(defaults + [raw.properties]),
                paragraph_properties=paragraph_properties,
            )
        logger.debug("Skipping unsupported text run %r", raw)
        return None

    def text_body(self, raw: RawTextBody) -> TextBody:
        return TextBody(
            body_properties=resolve_body_properties(raw.body_properties, self.context),
            paragraphs=[self.paragraph(paragraph, raw) for paragraph in raw.paragraphs],
        )


def _spacing(raw: RawTextSpacing) -> Spacing:
    if raw.percent is not None:
        return Spacing(percent=percentage_to_float(raw.percent))
    if raw.points is not None:
        return Spacing(points=text_point_to_pt(raw.points))
    return Spacing()


def resolve_body_properties(raw: Optional[RawBodyProperties], context: DrawingContext) -> BodyProperties:
    if raw is None:
        return BodyProperties()
    insets = Insets()
    if raw.normal_auto_fit is not None:
        auto_fit = NormalAutoFit(
            font_scale=percentage_to_float(raw.normal_auto_fit.font_scale)
            if raw.normal_auto_fit.font_scale is not None
            else 1.0,
            line_spacing_reduction=percentage_to_float(raw.normal_auto_fit.line_spacing_reduction or 0),
        )
    elif raw.shape_auto_fit:
        auto_fit = ShapeAutoFit()
    else:
        auto_fit = NoAutoFit()
    column_count = raw.column_count if raw.column_count and 1 <= raw.column_count <= MAX_COLUMNS else 1
    return BodyProperties(
        auto_fit=auto_fit,
        preset_text_warp=PresetTextShape.from_string(raw.preset_text_warp.preset if raw.preset_text_warp else None),
        anchor=TextAnchoring.from_string(raw.anchor),
        anchor_center=bool(raw.anchor_center),
        insets=Insets(
            left=emu_to_pt(raw.left_inset) if raw.left_inset is not None else insets.left,
            right=emu_to_pt(raw.right_inset) if raw.right_inset is not None else insets.right,
            top=emu_to_pt(raw.top_inset) if raw.top_inset is not None else insets.top,
            bottom=emu_to_pt(raw.bottom_inset) if raw.bottom_inset is not None else insets.bottom,
        ),
        vertical=TextVertical.from_string(raw.vertical),
        wrap=TextWrapping.from_string(raw.wrap),
        horizontal_overflow=HorizontalOverflow.from_string(raw.horizontal_overflow),
        vertical_overflow=VerticalOverflow.from_string(raw.vertical_overflow),
        column_count=column_count,
        column_spacing=emu_to_pt(raw.column_spacing or 0),
        rotation=angle_to_degree(raw.rotation or 0),
        flat_text_z=emu_to_pt(raw.flat_text.z or 0) if raw.flat_text else 0.0,
        compatible_line_spacing=bool(raw.compatible_line_spacing),
        force_anti_alias=bool(raw.force_anti_alias),
        from_word_art=bool(raw.from_word_art),
        right_to_left_columns=bool(raw.right_to_left_columns),
        space_first_last_paragraph=bool(raw.space_first_last_paragraph),
        upright=bool(raw.upright),
        scene3d=resolve_scene3d(raw.scene3d),
        shape3d=resolve_shape3d(raw.shape3d, context),
    )


def resolve_text_body(
    raw: Optional[RawTextBody],
    context: DrawingContext,
    font_reference: Optional[RawFontReference] = None,
) -> Optional[TextBody]:
    if raw is None:
        return None
    return TextResolver(context, font_reference).text_body(raw)
