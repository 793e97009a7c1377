"""
Shape properties (``<spPr>``, ``<grpSpPr>``), geometry and ``<style>``.
"""

from __future__ import annotations

from typing import List, Optional

from raw.node import RawNode, list_of, sequence_of
from raw.drawing.effect import RawEffectContainer, RawEffectList
from raw.drawing.fill import FillFields, fill_children
from raw.drawing.line import RawFontReference, RawOutline, RawStyleReference
from raw.drawing.scene import RawScene3D, RawShape3D
from utils.conversions import to_bool, to_int, to_str


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------


class RawPoint(RawNode):
    """``<off x y>``, ``<chOff x y>``, ``<pos x y>`` in EMU."""

    ATTRIBUTES = {
        "x": ("x", to_int),
        "y": ("y", to_int),
    }

    x: Optional[int] = None
    y: Optional[int] = None


class RawSize(RawNode):
    """``<ext cx cy>``, ``<chExt cx cy>`` in EMU."""

    ATTRIBUTES = {
        "cx": ("width", to_int),
        "cy": ("height", to_int),
    }

    width: Optional[int] = None
    height: Optional[int] = None


class RawTransform2D(RawNode):
    TAG = "xfrm"
    ATTRIBUTES = {
        "rot": ("rotation", to_int),
        "flipH": ("flip_horizontal", to_bool),
        "flipV": ("flip_vertical", to_bool),
    }
    CHILDREN = {
        "off": ("offset", RawPoint.load, False),
        "ext": ("extent", RawSize.load, False),
        "chOff": ("child_offset", RawPoint.load, False),
        "chExt": ("child_extent", RawSize.load, False),
    }

    rotation: Optional[int] = None
    flip_horizontal: Optional[bool] = None
    flip_vertical: Optional[bool] = None
    offset: Optional[RawPoint] = None
    extent: Optional[RawSize] = None
    child_offset: Optional[RawPoint] = None
    child_extent: Optional[RawSize] = None


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class RawShapeGuide(RawNode):
    """``<gd name="adj" fmla="val 50000"/>``."""

    TAG = "gd"
    ATTRIBUTES = {
        "name": ("name", to_str),
        "fmla": ("formula", to_str),
    }

    name: Optional[str] = None
    formula: Optional[str] = None


class RawPresetGeometry(RawNode):
    TAG = "prstGeom"
    ATTRIBUTES = {"prst": ("preset", to_str)}
    CHILDREN = {"avLst": ("adjust_values", list_of(RawShapeGuide.load, "gd"), False)}

    preset: Optional[str] = None
    adjust_values: List[RawShapeGuide] = []


class RawPathPoint(RawNode):
    """``<pt x y>``; coordinates may be guide names, so they stay strings."""

    TAG = "pt"
    ATTRIBUTES = {
        "x": ("x", to_str),
        "y": ("y", to_str),
    }

    x: Optional[str] = None
    y: Optional[str] = None


class RawPathCommand(RawNode):
    """``moveTo``, ``lnTo``, ``quadBezTo``, ``cubicBezTo``: a tagged list of points."""

    command: str = ""
    points: List[RawPathPoint] = []

    @classmethod
    def load(cls, cursor, start):
        points = list_of(RawPathPoint.load, "pt")(cursor, start)
        return cls.model_construct(command=start.tag, points=points)


class RawArcTo(RawNode):
    TAG = "arcTo"
    ATTRIBUTES = {
        "wR": ("width_radius", to_str),
        "hR": ("height_radius", to_str),
        "stAng": ("start_angle", to_str),
        "swAng": ("swing_angle", to_str),
    }

    width_radius: Optional[str] = None
    height_radius: Optional[str] = None
    start_angle: Optional[str] = None
    swing_angle: Optional[str] = None


class RawClosePath(RawNode):
    TAG = "close"


class RawPath(RawNode):
    TAG = "path"
    ATTRIBUTES = {
        "w": ("width", to_int),
        "h": ("height", to_int),
        "fill": ("fill_mode", to_str),
        "stroke": ("stroke", to_bool),
        "extrusionOk": ("extrusion_ok", to_bool),
    }
    CHILDREN = {
        "moveTo": ("commands", RawPathCommand.load, True),
        "lnTo": ("commands", RawPathCommand.load, True),
        "quadBezTo": ("commands", RawPathCommand.load, True),
        "cubicBezTo": ("commands", RawPathCommand.load, True),
        "arcTo": ("commands", RawArcTo.load, True),
        "close": ("commands", RawClosePath.load, True),
    }

    width: Optional[int] = None
    height: Optional[int] = None
    fill_mode: Optional[str] = None
    stroke: Optional[bool] = None
    extrusion_ok: Optional[bool] = None
    commands: List[RawNode] = []


class RawAdjustHandleXY(RawNode):
    TAG = "ahXY"
    ATTRIBUTES = {
        "gdRefX": ("guide_x", to_str),
        "gdRefY": ("guide_y", to_str),
        "minX": ("min_x", to_str),
        "maxX": ("max_x", to_str),
        "minY": ("min_y", to_str),
        "maxY": ("max_y", to_str),
    }
    CHILDREN = {"pos": ("position", RawPathPoint.load, False)}

    guide_x: Optional[str] = None
    guide_y: Optional[str] = None
    min_x: Optional[str] = None
    max_x: Optional[str] = None
    min_y: Optional[str] = None
    max_y: Optional[str] = None
    position: Optional[RawPathPoint] = None


class RawAdjustHandlePolar(RawNode):
    TAG = "ahPolar"
    ATTRIBUTES = {
        "gdRefR": ("guide_radius", to_str),
        "gdRefAng": ("guide_angle", to_str),
        "minR": ("min_radius", to_str),
        "maxR": ("max_radius", to_str),
        "minAng": ("min_angle", to_str),
        "maxAng": ("max_angle", to_str),
    }
    CHILDREN = {"pos": ("position", RawPathPoint.load, False)}

    guide_radius: Optional[str] = None
    guide_angle: Optional[str] = None
    min_radius: Optional[str] = None
    max_radius: Optional[str] = None
    min_angle: Optional[str] = None
    max_angle: Optional[str] = None
    position: Optional[RawPathPoint] = None


class RawConnectionSite(RawNode):
    TAG = "cxn"
    ATTRIBUTES = {"ang": ("angle", to_str)}
    CHILDREN = {"pos": ("position", RawPathPoint.load, False)}

    angle: Optional[str] = None
    position: Optional[RawPathPoint] = None


class RawGeometryRect(RawNode):
    """``<rect l t r b>`` text rectangle; each side may be a guide name."""

    TAG = "rect"
    ATTRIBUTES = {
        "l": ("left", to_str),
        "t": ("top", to_str),
        "r": ("right", to_str),
        "b": ("bottom", to_str),
    }

    left: Optional[str] = None
    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None


class RawCustomGeometry(RawNode):
    TAG = "custGeom"
    CHILDREN = {
        "avLst": ("adjust_values", list_of(RawShapeGuide.load, "gd"), False),
        "gdLst": ("guides", list_of(RawShapeGuide.load, "gd"), False),
        "ahLst": (
            "adjust_handles",
            sequence_of({"ahXY": RawAdjustHandleXY.load, "ahPolar": RawAdjustHandlePolar.load}),
            False,
        ),
        "cxnLst": ("connection_sites", list_of(RawConnectionSite.load, "cxn"), False),
        "rect": ("rect", RawGeometryRect.load, False),
        "pathLst": ("paths", list_of(RawPath.load, "path"), False),
    }

    adjust_values: List[RawShapeGuide] = []
    guides: List[RawShapeGuide] = []
    adjust_handles: List[RawNode] = []
    connection_sites: List[RawConnectionSite] = []
    rect: Optional[RawGeometryRect] = None
    paths: List[RawPath] = []


# ---------------------------------------------------------------------------
# Shape properties
# ---------------------------------------------------------------------------


class RawShapeProperties(FillFields):
    """``<spPr>`` (and ``<grpSpPr>``, which shares its content model)."""

    TAG = "spPr"
    ATTRIBUTES = {"bwMode": ("black_white_mode", to_str)}
    CHILDREN = {
        **fill_children(),
        "xfrm": ("transform", RawTransform2D.load, False),
        "prstGeom": ("preset_geometry", RawPresetGeometry.load, False),
        "custGeom": ("custom_geometry", RawCustomGeometry.load, False),
        "ln": ("outline", RawOutline.load, False),
        "effectLst": ("effect_list", RawEffectList.load, False),
        "effectDag": ("effect_dag", RawEffectContainer.load, False),
        "scene3d": ("scene3d", RawScene3D.load, False),
        "sp3d": ("shape3d", RawShape3D.load, False),
    }

    black_white_mode: Optional[str] = None
    transform: Optional[RawTransform2D] = None
    preset_geometry: Optional[RawPresetGeometry] = None
    custom_geometry: Optional[RawCustomGeometry] = None
    outline: Optional[RawOutline] = None
    effect_list: Optional[RawEffectList] = None
    effect_dag: Optional[RawEffectContainer] = None
    scene3d: Optional[RawScene3D] = None
    shape3d: Optional[RawShape3D] = None


class RawShapeStyle(RawNode):
    """``<style>``: references into the theme's format scheme."""

    TAG = "style"
    CHILDREN = {
        "lnRef": ("line_reference", RawStyleReference.load, False),
        "fillRef": ("fill_reference", RawStyleReference.load, False),
        "effectRef": ("effect_reference", RawStyleReference.load, False),
        "fontRef": ("font_reference", RawFontReference.load, False),
    }

    line_reference: Optional[RawStyleReference] = None
    fill_reference: Optional[RawStyleReference] = None
    effect_reference: Optional[RawStyleReference] = None
    font_reference: Optional[RawFontReference] = None
