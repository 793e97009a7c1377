"""
DrawingML fills and the picture effects carried by ``<blip>``.
"""

from __future__ import annotations

from typing import List, Optional

from dto.drawing.enums import BlipCompression, PathShade, PresetPattern, RectangleAlignment, TileFlip
from dto.drawing.fill import (
    DEFAULT_PATTERN_BACKGROUND,
    DEFAULT_PATTERN_FOREGROUND,
    DEFAULT_STOP_COLOR,
    Blip,
    BlipFill,
    ExternalImage,
    Fill,
    FillRectangle,
    GradientFill,
    GradientStop,
    LinearShade,
    NoFill,
    PathGradientShade,
    PatternFill,
    SolidFill,
    Tile,
)
from dto.drawing.image_effect import (
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
    ImageEffect,
    Luminance,
    Tint,
)
from raw.drawing.fill import (
    FillFields,
    RawBlip,
    RawBlipFill,
    RawFillChoice,
    RawGradientFill,
    RawGroupFill,
    RawNoFill,
    RawPatternFill,
    RawRelativeRect,
    RawSolidFill,
    RawTile,
)
from raw.drawing.image_effect import (
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
from raw.node import RawNode
from resolvers.drawing.context import DrawingContext
from utils.conversions import angle_to_degree, emu_to_pt, percentage_to_float


def _percent(value: Optional[int], default: float = 0.0) -> float:
    return percentage_to_float(value) if value is not None else default


def _points(value: Optional[int], default: float = 0.0) -> float:
    return emu_to_pt(value) if value is not None else default


def _degrees(value: Optional[int], default: float = 0.0) -> float:
    return angle_to_degree(value) if value is not None else default


def resolve_rectangle(raw: Optional[RawRelativeRect]) -> FillRectangle:
    if raw is None:
        return FillRectangle()
    return FillRectangle(
        left=_percent(raw.left),
        top=_percent(raw.top),
        right=_percent(raw.right),
        bottom=_percent(raw.bottom),
    )


# ---------------------------------------------------------------------------
# Fill kinds
# ---------------------------------------------------------------------------


def resolve_solid_fill(raw: RawSolidFill, context: DrawingContext, ref_color: Optional[str] = None) -> Optional[SolidFill]:
    color = context.color(raw.color, ref_color)
    if color is None:
        return None
    return SolidFill(color=color)


def resolve_gradient_fill(
    raw: RawGradientFill, context: DrawingContext, ref_color: Optional[str] = None
) -> GradientFill:
    stops = [
        GradientStop(
            position=_percent(stop.position),
            color=context.color(stop.color, ref_color) or DEFAULT_STOP_COLOR,
        )
        for stop in raw.stops
    ]
    linear = None
    if raw.linear is not None:
        linear = LinearShade(angle=_degrees(raw.linear.angle), scale_with_fill=bool(raw.linear.scaled))
    path = None
    if raw.path is not None:
        path = PathGradientShade(
            path=PathShade.from_string(raw.path.path),
            fill_to_rect=resolve_rectangle(raw.path.fill_to_rect),
        )
    return GradientFill(
        stops=stops,
        linear=linear,
        path=path,
        tile_rect=resolve_rectangle(raw.tile_rect),
        flip=TileFlip.from_string(raw.flip),
        rotate_with_shape=bool(raw.rotate_with_shape),
    )


def resolve_pattern_fill(raw: RawPatternFill, context: DrawingContext, ref_color: Optional[str] = None) -> PatternFill:
    return PatternFill(
        preset=PresetPattern.from_string(raw.preset),
        foreground_color=context.color(raw.foreground, ref_color) or DEFAULT_PATTERN_FOREGROUND,
        background_color=context.color(raw.background, ref_color) or DEFAULT_PATTERN_BACKGROUND,
    )


def resolve_blip(raw: Optional[RawBlip], context: DrawingContext) -> Optional[Blip]:
    """
    Locate the picture a ``<blip>`` points at.

    ``r:embed`` wins over ``r:link``; a link id that is not a relationship
    is taken as the URL itself.
    """
    if raw is None:
        return None
    source = context.image(raw.embed) if raw.embed else None
    if source is None and raw.link:
        source = context.image(raw.link)
        if source is None and context.relationships.rel_for_id(raw.link) is None:
            source = ExternalImage(url=raw.link)
    if source is None:
        return None
    effects = [effect for effect in (resolve_image_effect(item, context) for item in raw.effects) if effect]
    return Blip(
        source=source,
        compression_state=BlipCompression.from_string(raw.compression_state),
        effects=effects,
    )


def resolve_tile(raw: RawTile) -> Tile:
    return Tile(
        alignment=RectangleAlignment.from_string(raw.alignment),
        flip=TileFlip.from_string(raw.flip),
        horizontal_ratio=_percent(raw.scale_x, 1.0),
        vertical_ratio=_percent(raw.scale_y, 1.0),
        horizontal_offset=_points(raw.offset_x),
        vertical_offset=_points(raw.offset_y),
    )


def resolve_blip_fill(raw: RawBlipFill, context: DrawingContext) -> BlipFill:
    stretch = None
    tile = None
    if raw.stretch is not None:
        stretch = resolve_rectangle(raw.stretch.fill_rect)
    elif raw.tile is not None:
        tile = resolve_tile(raw.tile)
    else:
        stretch = FillRectangle()
    return BlipFill(
        blip=resolve_blip(raw.blip, context),
        source_rect=resolve_rectangle(raw.source_rect),
        stretch=stretch,
        tile=tile,
        dpi=raw.dpi or 0,
        rotate_with_shape=bool(raw.rotate_with_shape),
    )


# ---------------------------------------------------------------------------
# Fill selection
# ---------------------------------------------------------------------------


def resolve_fill(
    fields: Optional[FillFields],
    context: DrawingContext,
    group_fill: Optional[Fill] = None,
    ref_color: Optional[str] = None,
) -> Optional[Fill]:
    """
    The fill an element declares, or ``None`` if it declares none.

    Elements carry each fill kind in its own field; when several are set
    the first of solid, gradient, group, none, pattern and picture wins.
    ``grpFill`` stands for ``group_fill``, the fill of the parent group.
    """
    if fields is None:
        return None
    if fields.solid_fill is not None:
        solid = resolve_solid_fill(fields.solid_fill, context, ref_color)
        if solid is not None:
            return solid
    if fields.gradient_fill is not None:
        return resolve_gradient_fill(fields.gradient_fill, context, ref_color)
    if fields.group_fill is not None and group_fill is not None:
        return group_fill
    if fields.no_fill is not None:
        return NoFill()
    if fields.pattern_fill is not None:
        return resolve_pattern_fill(fields.pattern_fill, context, ref_color)
    if fields.blip_fill is not None:
        return resolve_blip_fill(fields.blip_fill, context)
    return None


def resolve_fill_choice(
    choice: Optional[RawFillChoice],
    context: DrawingContext,
    group_fill: Optional[Fill] = None,
    ref_color: Optional[str] = None,
) -> Optional[Fill]:
    """Same as :func:`resolve_fill` for elements holding a single fill (theme styles, overlays)."""
    if choice is None:
        return None
    if isinstance(choice, RawSolidFill):
        return resolve_solid_fill(choice, context, ref_color)
    if isinstance(choice, RawGradientFill):
        return resolve_gradient_fill(choice, context, ref_color)
    if isinstance(choice, RawGroupFill):
        return group_fill
    if isinstance(choice, RawNoFill):
        return NoFill()
    if isinstance(choice, RawPatternFill):
        return resolve_pattern_fill(choice, context, ref_color)
    if isinstance(choice, RawBlipFill):
        return resolve_blip_fill(choice, context)
    return None


# ---------------------------------------------------------------------------
# Picture effects
# ---------------------------------------------------------------------------


def resolve_image_effect(raw: RawNode, context: DrawingContext) -> Optional[ImageEffect]:
    if isinstance(raw, RawAlphaBiLevel):
        return AlphaBiLevel(threshold=_percent(raw.threshold))
    if isinstance(raw, RawAlphaCeiling):
        return AlphaCeiling()
    if isinstance(raw, RawAlphaFloor):
        return AlphaFloor()
    if isinstance(raw, RawAlphaInverse):
        return AlphaInverse(color=context.color(raw.color))
    if isinstance(raw, RawAlphaModulationFixed):
        return AlphaModulationFixed(amount=_percent(raw.amount, 1.0))
    if isinstance(raw, RawAlphaReplace):
        return AlphaReplace(alpha=_percent(raw.alpha))
    if isinstance(raw, RawBiLevel):
        return BiLevel(threshold=_percent(raw.threshold))
    if isinstance(raw, RawBlur):
        return resolve_blur(raw)
    if isinstance(raw, RawColorChange):
        color_from = context.color(raw.color_from)
        color_to = context.color(raw.color_to)
        if color_from is None or color_to is None:
            return None
        use_alpha = True if raw.use_alpha is None else raw.use_alpha
        return ColorChange(color_from=color_from, color_to=color_to, use_alpha=use_alpha)
    if isinstance(raw, RawColorReplacement):
        color = context.color(raw.color)
        return ColorReplacement(color=color) if color else None
    if isinstance(raw, RawDuotone):
        colors: List[str] = [c for c in (context.color(color) for color in raw.colors) if c]
        return Duotone(colors=colors)
    if isinstance(raw, RawGrayscale):
        return Grayscale()
    if isinstance(raw, RawHueSaturationLuminance):
        return HueSaturationLuminance(
            hue=_degrees(raw.hue),
            saturation=_percent(raw.saturation),
            luminance=_percent(raw.luminance),
        )
    if isinstance(raw, RawLuminance):
        return Luminance(brightness=_percent(raw.brightness), contrast=_percent(raw.contrast))
    if isinstance(raw, RawTintEffect):
        return Tint(hue=_degrees(raw.hue), amount=_percent(raw.amount))
    return None


def resolve_blur(raw: RawBlur) -> Blur:
    return Blur(radius=_points(raw.radius), grow=True if raw.grow is None else raw.grow)
