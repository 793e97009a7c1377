"""
Effect lists, effect DAGs and the theme effect styles that ``<a:effectRef>``
points at.

Shadows and glows are dropped when their color cannot be resolved: an
effect without a color has nothing to draw.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dto.drawing.effect import (
    AlphaModulation,
    AlphaOutset,
    Blend,
    Effect,
    EffectContainer,
    EffectReferenceEntry,
    FillEffect,
    FillOverlay,
    Glow,
    InnerShadow,
    OuterShadow,
    PresetShadow,
    Reflection,
    RelativeOffset,
    SoftEdge,
    TransformEffect,
)
from dto.drawing.enums import BlendMode, EffectContainerType, PresetShadowType, RectangleAlignment
from dto.drawing.fill import NoFill
from dto.drawing.shape import EffectStyle
from raw.drawing.effect import (
    RawAlphaModulation,
    RawAlphaOutset,
    RawBlend,
    RawEffectContainer,
    RawEffectList,
    RawEffectReference,
    RawEffectStyle,
    RawFillEffect,
    RawFillOverlay,
    RawGlow,
    RawInnerShadow,
    RawOuterShadow,
    RawPresetShadow,
    RawReflection,
    RawRelativeOffset,
    RawSoftEdge,
    RawTransformEffect,
)
from raw.drawing.line import RawStyleReference
from raw.drawing.scene import RawScene3D, RawShape3D
from raw.node import RawNode
from resolvers.drawing.context import DrawingContext
from resolvers.drawing.fill import resolve_blur, resolve_fill_choice, resolve_image_effect
from resolvers.drawing.scene import resolve_scene3d, resolve_shape3d
from utils.conversions import angle_to_degree, emu_to_pt, percentage_to_float

logger = logging.getLogger(__name__)


def _pt(value: Optional[int]) -> float:
    return emu_to_pt(value) if value is not None else 0.0


def _deg(value: Optional[int], default: float = 0.0) -> float:
    return angle_to_degree(value) if value is not None else default


def _ratio(value: Optional[int], default: float) -> float:
    return percentage_to_float(value) if value is not None else default


# ---------------------------------------------------------------------------
# Individual effects
# ---------------------------------------------------------------------------


def resolve_outer_shadow(
    raw: RawOuterShadow, context: DrawingContext, ref_color: Optional[str] = None
) -> Optional[OuterShadow]:
    color = context.color(raw.color, ref_color)
    if color is None:
        return None
    return OuterShadow(
        color=color,
        blur_radius=_pt(raw.blur_radius),
        distance=_pt(raw.distance),
        direction=_deg(raw.direction),
        horizontal_scale=_ratio(raw.scale_x, 1.0),
        vertical_scale=_ratio(raw.scale_y, 1.0),
        horizontal_skew=_deg(raw.skew_x),
        vertical_skew=_deg(raw.skew_y),
        alignment=RectangleAlignment.from_string(raw.alignment) if raw.alignment else RectangleAlignment.BOTTOM,
        rotate_with_shape=True if raw.rotate_with_shape is None else raw.rotate_with_shape,
    )


def resolve_inner_shadow(
    raw: RawInnerShadow, context: DrawingContext, ref_color: Optional[str] = None
) -> Optional[InnerShadow]:
    color = context.color(raw.color, ref_color)
    if color is None:
        return None
    return InnerShadow(
        color=color,
        blur_radius=_pt(raw.blur_radius),
        distance=_pt(raw.distance),
        direction=_deg(raw.direction),
    )


def resolve_preset_shadow(
    raw: RawPresetShadow, context: DrawingContext, ref_color: Optional[str] = None
) -> Optional[PresetShadow]:
    color = context.color(raw.color, ref_color)
    if color is None or raw.preset is None:
        return None
    try:
        preset = PresetShadowType(raw.preset)
    except ValueError:
        logger.debug("Unknown preset shadow %r", raw.preset)
        return None
    return PresetShadow(preset=preset, color=color, distance=_pt(raw.distance), direction=_deg(raw.direction))


def resolve_glow(raw: RawGlow, context: DrawingContext, ref_color: Optional[str] = None) -> Optional[Glow]:
    color = context.color(raw.color, ref_color)
    if color is None:
        return None
    return Glow(color=color, radius=_pt(raw.radius))


def resolve_reflection(raw: RawReflection) -> Reflection:
    return Reflection(
        blur_radius=_pt(raw.blur_radius),
        start_opacity=_ratio(raw.start_alpha, 1.0),
        start_position=_ratio(raw.start_position, 0.0),
        end_opacity=_ratio(raw.end_alpha, 0.0),
        end_position=_ratio(raw.end_position, 1.0),
        distance=_pt(raw.distance),
        direction=_deg(raw.direction),
        fade_direction=_deg(raw.fade_direction, 90.0),
        horizontal_scale=_ratio(raw.scale_x, 1.0),
        vertical_scale=_ratio(raw.scale_y, 1.0),
        horizontal_skew=_deg(raw.skew_x),
        vertical_skew=_deg(raw.skew_y),
        alignment=RectangleAlignment.from_string(raw.alignment) if raw.alignment else RectangleAlignment.BOTTOM,
        rotate_with_shape=True if raw.rotate_with_shape is None else raw.rotate_with_shape,
    )


def resolve_fill_overlay(
    raw: RawFillOverlay, context: DrawingContext, ref_color: Optional[str] = None
) -> FillOverlay:
    return FillOverlay(
        blend=BlendMode.from_string(raw.blend),
        fill=resolve_fill_choice(raw.fill, context, ref_color=ref_color) or NoFill(),
    )


def resolve_effect(raw: RawNode, context: DrawingContext, ref_color: Optional[str] = None) -> Optional[Effect]:
    """One child of an effect DAG."""
    if isinstance(raw, RawEffectContainer):
        return resolve_effect_container(raw, context, ref_color)
    if isinstance(raw, RawOuterShadow):
        return resolve_outer_shadow(raw, context, ref_color)
    if isinstance(raw, RawInnerShadow):
        return resolve_inner_shadow(raw, context, ref_color)
    if isinstance(raw, RawPresetShadow):
        return resolve_preset_shadow(raw, context, ref_color)
    if isinstance(raw, RawGlow):
        return resolve_glow(raw, context, ref_color)
    if isinstance(raw, RawReflection):
        return resolve_reflection(raw)
    if isinstance(raw, RawSoftEdge):
        return SoftEdge(radius=_pt(raw.radius))
    if isinstance(raw, RawFillOverlay):
        return resolve_fill_overlay(raw, context, ref_color)
    if isinstance(raw, RawFillEffect):
        return FillEffect(fill=resolve_fill_choice(raw.fill, context, ref_color=ref_color) or NoFill())
    if isinstance(raw, RawAlphaOutset):
        return AlphaOutset(radius=_pt(raw.radius))
    if isinstance(raw, RawRelativeOffset):
        return RelativeOffset(offset_x=_ratio(raw.offset_x, 0.0), offset_y=_ratio(raw.offset_y, 0.0))
    if isinstance(raw, RawTransformEffect):
        return TransformEffect(
            horizontal_scale=_ratio(raw.scale_x, 1.0),
            vertical_scale=_ratio(raw.scale_y, 1.0),
            horizontal_skew=_deg(raw.skew_x),
            vertical_skew=_deg(raw.skew_y),
            horizontal_shift=_pt(raw.shift_x),
            vertical_shift=_pt(raw.shift_y),
        )
    if isinstance(raw, RawEffectReference):
        return EffectReferenceEntry(ref=raw.ref or "")
    if isinstance(raw, RawAlphaModulation):
        return AlphaModulation(container=resolve_effect_container(raw.container, context, ref_color))
    if isinstance(raw, RawBlend):
        return Blend(
            blend=BlendMode.from_string(raw.blend),
            container=resolve_effect_container(raw.container, context, ref_color),
        )
    return resolve_image_effect(raw, context)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


def resolve_effect_container(
    raw: Optional[RawEffectContainer], context: DrawingContext, ref_color: Optional[str] = None
) -> Optional[EffectContainer]:
    if raw is None:
        return None
    effects = [effect for effect in (resolve_effect(item, context, ref_color) for item in raw.effects) if effect]
    return EffectContainer(
        container_type=EffectContainerType.from_string(raw.container_type),
        name=raw.name,
        effects=effects,
    )


def resolve_effect_list(
    raw: Optional[RawEffectList], context: DrawingContext, ref_color: Optional[str] = None
) -> Optional[EffectContainer]:
    """An ``<a:effectLst>`` as a sibling container holding its effects in schema order."""
    if raw is None:
        return None
    candidates: List[Optional[Effect]] = [
        resolve_blur(raw.blur) if raw.blur else None,
        resolve_fill_overlay(raw.fill_overlay, context, ref_color) if raw.fill_overlay else None,
        resolve_glow(raw.glow, context, ref_color) if raw.glow else None,
        resolve_inner_shadow(raw.inner_shadow, context, ref_color) if raw.inner_shadow else None,
        resolve_outer_shadow(raw.outer_shadow, context, ref_color) if raw.outer_shadow else None,
        resolve_preset_shadow(raw.preset_shadow, context, ref_color) if raw.preset_shadow else None,
        resolve_reflection(raw.reflection) if raw.reflection else None,
        SoftEdge(radius=_pt(raw.soft_edge.radius)) if raw.soft_edge else None,
    ]
    return EffectContainer(
        container_type=EffectContainerType.SIBLING,
        effects=[effect for effect in candidates if effect is not None],
    )


def resolve_effects(
    effect_list: Optional[RawEffectList],
    effect_dag: Optional[RawEffectContainer],
    context: DrawingContext,
    ref_color: Optional[str] = None,
) -> Optional[EffectContainer]:
    if effect_list is not None:
        return resolve_effect_list(effect_list, context, ref_color)
    return resolve_effect_container(effect_dag, context, ref_color)


# ---------------------------------------------------------------------------
# Effect styles
# ---------------------------------------------------------------------------


def referenced_effect_style(reference: Optional[RawStyleReference], context: DrawingContext) -> Optional[EffectStyle]:
    """The theme effect style an ``<a:effectRef>`` points at."""
    if reference is None or context.theme is None:
        return None
    raw: Optional[RawEffectStyle] = context.theme.get_effect_from_ref(reference.index)
    if raw is None:
        return None
    ref_color = context.color(reference.color)
    return EffectStyle(
        scene3d=resolve_scene3d(raw.scene3d),
        shape3d=resolve_shape3d(raw.shape3d, context),
        effects=resolve_effects(raw.effect_list, raw.effect_dag, context, ref_color),
    )


def resolve_effect_style(
    effect_list: Optional[RawEffectList],
    effect_dag: Optional[RawEffectContainer],
    scene3d: Optional[RawScene3D],
    shape3d: Optional[RawShape3D],
    reference: Optional[RawStyleReference],
    context: DrawingContext,
) -> EffectStyle:
    """Each part is the shape's own when it declares one, else the referenced style's."""
    referenced = referenced_effect_style(reference, context) or EffectStyle()
    effects = resolve_effects(effect_list, effect_dag, context)
    resolved_scene = resolve_scene3d(scene3d)
    resolved_shape = resolve_shape3d(shape3d, context)
    return EffectStyle(
        scene3d=resolved_scene if resolved_scene is not None else referenced.scene3d,
        shape3d=resolved_shape if resolved_shape is not None else referenced.shape3d,
        effects=effects if effects is not None else referenced.effects,
    )
