"""
DrawingML effects: ``<effectLst>``, ``<effectDag>`` containers and the
effects they hold.

An effect list is a fixed bag of at most one of each visual effect; an
effect DAG (and its nested ``<cont>``) keeps its effects in document order.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from raw.node import Loader, RawNode
from raw.drawing.color import RawColorChoice, color_children
from raw.drawing.fill import RawFillChoice, fill_choice_children
from raw.drawing.image_effect import IMAGE_EFFECT_LOADERS, RawBlur
from raw.drawing.scene import RawScene3D, RawShape3D
from utils.conversions import to_bool, to_int, to_str


class RawOuterShadow(RawNode):
    TAG = "outerShdw"
    ATTRIBUTES = {
        "blurRad": ("blur_radius", to_int),
        "dist": ("distance", to_int),
        "dir": ("direction", to_int),
        "sx": ("scale_x", to_int),
        "sy": ("scale_y", to_int),
        "kx": ("skew_x", to_int),
        "ky": ("skew_y", to_int),
        "algn": ("alignment", to_str),
        "rotWithShape": ("rotate_with_shape", to_bool),
    }
    CHILDREN = color_children()

    blur_radius: Optional[int] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    scale_x: Optional[int] = None
    scale_y: Optional[int] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None
    alignment: Optional[str] = None
    rotate_with_shape: Optional[bool] = None
    color: Optional[RawColorChoice] = None


class RawInnerShadow(RawNode):
    TAG = "innerShdw"
    ATTRIBUTES = {
        "blurRad": ("blur_radius", to_int),
        "dist": ("distance", to_int),
        "dir": ("direction", to_int),
    }
    CHILDREN = color_children()

    blur_radius: Optional[int] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    color: Optional[RawColorChoice] = None


class RawPresetShadow(RawNode):
    TAG = "prstShdw"
    ATTRIBUTES = {
        "prst": ("preset", to_str),
        "dist": ("distance", to_int),
        "dir": ("direction", to_int),
    }
    CHILDREN = color_children()

    preset: Optional[str] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    color: Optional[RawColorChoice] = None


class RawGlow(RawNode):
    TAG = "glow"
    ATTRIBUTES = {"rad": ("radius", to_int)}
    CHILDREN = color_children()

    radius: Optional[int] = None
    color: Optional[RawColorChoice] = None


class RawReflection(RawNode):
    TAG = "reflection"
    ATTRIBUTES = {
        "blurRad": ("blur_radius", to_int),
        "stA": ("start_alpha", to_int),
        "stPos": ("start_position", to_int),
        "endA": ("end_alpha", to_int),
        "endPos": ("end_position", to_int),
        "dist": ("distance", to_int),
        "dir": ("direction", to_int),
        "fadeDir": ("fade_direction", to_int),
        "sx": ("scale_x", to_int),
        "sy": ("scale_y", to_int),
        "kx": ("skew_x", to_int),
        "ky": ("skew_y", to_int),
        "algn": ("alignment", to_str),
        "rotWithShape": ("rotate_with_shape", to_bool),
    }

    blur_radius: Optional[int] = None
    start_alpha: Optional[int] = None
    start_position: Optional[int] = None
    end_alpha: Optional[int] = None
    end_position: Optional[int] = None
    distance: Optional[int] = None
    direction: Optional[int] = None
    fade_direction: Optional[int] = None
    scale_x: Optional[int] = None
    scale_y: Optional[int] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None
    alignment: Optional[str] = None
    rotate_with_shape: Optional[bool] = None


class RawSoftEdge(RawNode):
    TAG = "softEdge"
    ATTRIBUTES = {"rad": ("radius", to_int)}

    radius: Optional[int] = None


class RawFillOverlay(RawNode):
    TAG = "fillOverlay"
    ATTRIBUTES = {"blend": ("blend", to_str)}
    CHILDREN = fill_choice_children()

    blend: Optional[str] = None
    fill: Optional[RawFillChoice] = None


class RawFillEffect(RawNode):
    """``<fill>`` inside an effect DAG."""

    TAG = "fill"
    CHILDREN = fill_choice_children()

    fill: Optional[RawFillChoice] = None


class RawAlphaOutset(RawNode):
    TAG = "alphaOutset"
    ATTRIBUTES = {"rad": ("radius", to_int)}

    radius: Optional[int] = None


class RawRelativeOffset(RawNode):
    TAG = "relOff"
    ATTRIBUTES = {
        "tx": ("offset_x", to_int),
        "ty": ("offset_y", to_int),
    }

    offset_x: Optional[int] = None
    offset_y: Optional[int] = None


class RawTransformEffect(RawNode):
    TAG = "xfrm"
    ATTRIBUTES = {
        "sx": ("scale_x", to_int),
        "sy": ("scale_y", to_int),
        "kx": ("skew_x", to_int),
        "ky": ("skew_y", to_int),
        "tx": ("shift_x", to_int),
        "ty": ("shift_y", to_int),
    }

    scale_x: Optional[int] = None
    scale_y: Optional[int] = None
    skew_x: Optional[int] = None
    skew_y: Optional[int] = None
    shift_x: Optional[int] = None
    shift_y: Optional[int] = None


class RawEffectReference(RawNode):
    """``<effect ref="..."/>``: reuse another effect by name (``fill``, ``line``, ``fillLine``, ``children`` or a container name)."""

    TAG = "effect"
    ATTRIBUTES = {"ref": ("ref", to_str)}

    ref: Optional[str] = None


class RawAlphaModulation(RawNode):
    TAG = "alphaMod"
    CHILDREN = {"cont": ("container", lambda cursor, start: RawEffectContainer.load(cursor, start), False)}

    container: Optional[RawEffectContainer] = None


class RawBlend(RawNode):
    TAG = "blend"
    ATTRIBUTES = {"blend": ("blend", to_str)}
    CHILDREN = {"cont": ("container", lambda cursor, start: RawEffectContainer.load(cursor, start), False)}

    blend: Optional[str] = None
    container: Optional[RawEffectContainer] = None


class RawEffectList(RawNode):
    TAG = "effectLst"
    CHILDREN = {
        "blur": ("blur", RawBlur.load, False),
        "fillOverlay": ("fill_overlay", RawFillOverlay.load, False),
        "glow": ("glow", RawGlow.load, False),
        "innerShdw": ("inner_shadow", RawInnerShadow.load, False),
        "outerShdw": ("outer_shadow", RawOuterShadow.load, False),
        "prstShdw": ("preset_shadow", RawPresetShadow.load, False),
        "reflection": ("reflection", RawReflection.load, False),
        "softEdge": ("soft_edge", RawSoftEdge.load, False),
    }

    blur: Optional[RawBlur] = None
    fill_overlay: Optional[RawFillOverlay] = None
    glow: Optional[RawGlow] = None
    inner_shadow: Optional[RawInnerShadow] = None
    outer_shadow: Optional[RawOuterShadow] = None
    preset_shadow: Optional[RawPresetShadow] = None
    reflection: Optional[RawReflection] = None
    soft_edge: Optional[RawSoftEdge] = None


DAG_EFFECT_CLASSES = (
    RawAlphaModulation,
    RawAlphaOutset,
    RawBlend,
    RawEffectReference,
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


def _dag_children() -> Dict[str, tuple]:
    loaders: Dict[str, Loader] = dict(IMAGE_EFFECT_LOADERS)
    loaders.update({cls.TAG: cls.load for cls in DAG_EFFECT_CLASSES})
    loaders["cont"] = lambda cursor, start: RawEffectContainer.load(cursor, start)
    return {tag: ("effects", loader, True) for tag, loader in loaders.items()}


class RawEffectContainer(RawNode):
    """``<effectDag>`` and ``<cont>``."""

    TAG = "effectDag"
    ATTRIBUTES = {
        "type": ("container_type", to_str),
        "name": ("name", to_str),
    }
    CHILDREN = _dag_children()

    container_type: Optional[str] = None
    name: Optional[str] = None
    effects: List[RawNode] = []


class RawEffectStyle(RawNode):
    """An ``<effectStyle>`` from the theme's ``effectStyleLst``."""

    TAG = "effectStyle"
    CHILDREN = {
        "effectLst": ("effect_list", RawEffectList.load, False),
        "effectDag": ("effect_dag", RawEffectContainer.load, False),
        "scene3d": ("scene3d", RawScene3D.load, False),
        "sp3d": ("shape3d", RawShape3D.load, False),
    }

    effect_list: Optional[RawEffectList] = None
    effect_dag: Optional[RawEffectContainer] = None
    scene3d: Optional[RawScene3D] = None
    shape3d: Optional[RawShape3D] = None


RawAlphaModulation.model_rebuild()
RawBlend.model_rebuild()
