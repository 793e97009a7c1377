"""
3-D scene (``<scene3d>``) and shape extrusion (``<sp3d>``) properties.
"""

from __future__ import annotations

from typing import Optional

from raw.node import RawNode
from raw.drawing.color import RawColorChoice, color_of
from utils.conversions import to_int, to_str


class RawSphereCoordinates(RawNode):
    """``<rot lat="..." lon="..." rev="..."/>`` in 60,000ths of a degree."""

    TAG = "rot"
    ATTRIBUTES = {
        "lat": ("latitude", to_int),
        "lon": ("longitude", to_int),
        "rev": ("revolution", to_int),
    }

    latitude: Optional[int] = None
    longitude: Optional[int] = None
    revolution: Optional[int] = None


class RawCamera(RawNode):
    TAG = "camera"
    ATTRIBUTES = {
        "prst": ("preset", to_str),
        "fov": ("field_of_view", to_int),
        "zoom": ("zoom", to_int),
    }
    CHILDREN = {"rot": ("rotation", RawSphereCoordinates.load, False)}

    preset: Optional[str] = None
    field_of_view: Optional[int] = None
    zoom: Optional[int] = None
    rotation: Optional[RawSphereCoordinates] = None


class RawLightRig(RawNode):
    TAG = "lightRig"
    ATTRIBUTES = {
        "rig": ("rig", to_str),
        "dir": ("direction", to_str),
    }
    CHILDREN = {"rot": ("rotation", RawSphereCoordinates.load, False)}

    rig: Optional[str] = None
    direction: Optional[str] = None
    rotation: Optional[RawSphereCoordinates] = None


class RawPoint3D(RawNode):
    ATTRIBUTES = {
        "x": ("x", to_int),
        "y": ("y", to_int),
        "z": ("z", to_int),
    }

    x: Optional[int] = None
    y: Optional[int] = None
    z: Optional[int] = None


class RawVector3D(RawNode):
    ATTRIBUTES = {
        "dx": ("dx", to_int),
        "dy": ("dy", to_int),
        "dz": ("dz", to_int),
    }

    dx: Optional[int] = None
    dy: Optional[int] = None
    dz: Optional[int] = None


class RawBackdrop(RawNode):
    TAG = "backdrop"
    CHILDREN = {
        "anchor": ("anchor", RawPoint3D.load, False),
        "norm": ("normal", RawVector3D.load, False),
        "up": ("up", RawVector3D.load, False),
    }

    anchor: Optional[RawPoint3D] = None
    normal: Optional[RawVector3D] = None
    up: Optional[RawVector3D] = None


class RawScene3D(RawNode):
    TAG = "scene3d"
    CHILDREN = {
        "camera": ("camera", RawCamera.load, False),
        "lightRig": ("light_rig", RawLightRig.load, False),
        "backdrop": ("backdrop", RawBackdrop.load, False),
    }

    camera: Optional[RawCamera] = None
    light_rig: Optional[RawLightRig] = None
    backdrop: Optional[RawBackdrop] = None


class RawBevel(RawNode):
    """``<bevelT>`` / ``<bevelB>``."""

    ATTRIBUTES = {
        "w": ("width", to_int),
        "h": ("height", to_int),
        "prst": ("preset", to_str),
    }

    width: Optional[int] = None
    height: Optional[int] = None
    preset: Optional[str] = None


class RawShape3D(RawNode):
    TAG = "sp3d"
    ATTRIBUTES = {
        "z": ("z", to_int),
        "extrusionH": ("extrusion_height", to_int),
        "contourW": ("contour_width", to_int),
        "prstMaterial": ("preset_material", to_str),
    }
    CHILDREN = {
        "bevelT": ("bevel_top", RawBevel.load, False),
        "bevelB": ("bevel_bottom", RawBevel.load, False),
        "extrusionClr": ("extrusion_color", color_of, False),
        "contourClr": ("contour_color", color_of, False),
    }

    z: Optional[int] = None
    extrusion_height: Optional[int] = None
    contour_width: Optional[int] = None
    preset_material: Optional[str] = None
    bevel_top: Optional[RawBevel] = None
    bevel_bottom: Optional[RawBevel] = None
    extrusion_color: Optional[RawColorChoice] = None
    contour_color: Optional[RawColorChoice] = None


class RawFlatText(RawNode):
    TAG = "flatTx"
    ATTRIBUTES = {"z": ("z", to_int)}

    z: Optional[int] = None
