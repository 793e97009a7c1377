"""
Resolved effects.

Both ``<effectLst>`` and ``<effectDag>`` resolve to an ``EffectContainer``
whose ``effects`` keep document order; for an effect list that is the
schema order of its children.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from dto.base import Entity
from dto.drawing.enums import BlendMode, EffectContainerType, PresetShadowType, RectangleAlignment
from dto.drawing.fill import Fill
from dto.drawing.image_effect import ImageEffect


class OuterShadow(Entity):
    kind: Literal["outer_shadow"] = "outer_shadow"
    color: str
    blur_radius: float = 0.0
    distance: float = 0.0
    direction: float = 0.0
    horizontal_scale: float = 1.0
    vertical_scale: float = 1.0
    horizontal_skew: float = 0.0
    vertical_skew: float = 0.0
    alignment: RectangleAlignment = RectangleAlignment.BOTTOM
    rotate_with_shape: bool = True


class InnerShadow(Entity):
    kind: Literal["inner_shadow"] = "inner_shadow"
    color: str
    blur_radius: float = 0.0
    distance: float = 0.0
    direction: float = 0.0


class PresetShadow(Entity):
    kind: Literal["preset_shadow"] = "preset_shadow"
    preset: PresetShadowType
    color: str
    distance: float = 0.0
    direction: float = 0.0


class Glow(Entity):
    kind: Literal["glow"] = "glow"
    color: str
    radius: float = 0.0


class Reflection(Entity):
    kind: Literal["reflection"] = "reflection"
    blur_radius: float = 0.0
    start_opacity: float = 1.0
    start_position: float = 0.0
    end_opacity: float = 0.0
    end_position: float = 1.0
    distance: float = 0.0
    direction: float = 0.0
    fade_direction: float = 90.0
    horizontal_scale: float = 1.0
    vertical_scale: float = 1.0
    horizontal_skew: float = 0.0
    vertical_skew: float = 0.0
    alignment: RectangleAlignment = RectangleAlignment.BOTTOM
    rotate_with_shape: bool = True


class SoftEdge(Entity):
    kind: Literal["soft_edge"] = "soft_edge"
    radius: float = 0.0


class FillOverlay(Entity):
    kind: Literal["fill_overlay"] = "fill_overlay"
    blend: BlendMode = BlendMode.OVER
    fill: Fill


class FillEffect(Entity):
    kind: Literal["fill"] = "fill"
    fill: Fill


class AlphaOutset(Entity):
    kind: Literal["alpha_outset"] = "alpha_outset"
    radius: float = 0.0


class RelativeOffset(Entity):
    """Offset as fractions of the shape size."""

    kind: Literal["relative_offset"] = "relative_offset"
    offset_x: float = 0.0
    offset_y: float = 0.0


class TransformEffect(Entity):
    kind: Literal["transform"] = "transform"
    horizontal_scale: float = 1.0
    vertical_scale: float = 1.0
    horizontal_skew: float = 0.0
    vertical_skew: float = 0.0
    horizontal_shift: float = 0.0
    vertical_shift: float = 0.0


class EffectReferenceEntry(Entity):
    """``<effect ref>``: ``fill``, ``line``, ``fillLine``, ``children`` or a container name."""

    kind: Literal["reference"] = "reference"
    ref: str


class AlphaModulation(Entity):
    kind: Literal["alpha_modulation"] = "alpha_modulation"
    container: Optional["EffectContainer"] = None


class Blend(Entity):
    kind: Literal["blend"] = "blend"
    blend: BlendMode = BlendMode.OVER
    container: Optional["EffectContainer"] = None


Effect = Union[
    ImageEffect,
    OuterShadow,
    InnerShadow,
    PresetShadow,
    Glow,
    Reflection,
    SoftEdge,
    FillOverlay,
    FillEffect,
    AlphaOutset,
    RelativeOffset,
    TransformEffect,
    EffectReferenceEntry,
    AlphaModulation,
    Blend,
    "EffectContainer",
]


class EffectContainer(Entity):
    kind: Literal["container"] = "container"
    container_type: EffectContainerType = EffectContainerType.TREE
    name: Optional[str] = None
    effects: List[Effect] = []

    def first(self, kind: str) -> Optional[Entity]:
        for effect in self.effects:
            if effect.kind == kind:
                return effect
        return None


AlphaModulation.model_rebuild()
Blend.model_rebuild()
EffectContainer.model_rebuild()
