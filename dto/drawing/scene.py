"""
3-D scene (camera, light rig, backdrop) and shape extrusion.

Angles are degrees, lengths points.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from dto.base import Entity
from dto.drawing.enums import BevelPreset, LightRigDirection, LightRigPreset, PresetCamera, PresetMaterial

DEFAULT_CONTOUR_COLOR = "020b0fff"
DEFAULT_EXTRUSION_COLOR = "00000000"

# Field of view implied by perspective camera presets; every other preset is 0.
PRESET_PERSPECTIVE: Dict[str, float] = {
    **{
        token: 45.0
        for token in (
            "legacyPerspectiveBottom", "legacyPerspectiveFront", "legacyPerspectiveLeft",
            "legacyPerspectiveRight", "legacyPerspectiveTop", "perspectiveAbove",
            "perspectiveBelow", "perspectiveContrastingLeftFacing",
            "perspectiveContrastingRightFacing", "perspectiveFront", "perspectiveLeft",
            "perspectiveRelaxed", "perspectiveRelaxedModerately", "perspectiveRight",
        )
    },
    "perspectiveHeroicExtremeLeftFacing": 80.0,
    "perspectiveHeroicExtremeRightFacing": 80.0,
}

# (x, y, z) rotation implied by camera presets that have one.
PRESET_ROTATION: Dict[str, Tuple[float, float, float]] = {
    "isometricBottomDown": (314.7, 35.4, 299.8),
    "isometricLeftDown": (45.0, 35.0, 0.0),
    "isometricOffAxis1Left": (64.0, 18.0, 0.0),
    "isometricOffAxis1Right": (334.0, 18.0, 0.0),
    "isometricOffAxis1Top": (306.5, 301.3, 57.6),
    "isometricOffAxis2Left": (26.0, 18.0, 0.0),
    "isometricOffAxis2Right": (296.0, 18.0, 0.0),
    "isometricOffAxis2Top": (53.5, 301.3, 302.4),
    "isometricRightUp": (315.0, 35.0, 0.0),
    "isometricTopUp": (314.7, 324.6, 60.2),
    **{
        token: (0.0, 0.0, 0.0)
        for token in (
            "legacyObliqueBottom", "legacyObliqueBottomLeft", "legacyObliqueBottomRight",
            "legacyObliqueFront", "legacyObliqueLeft", "legacyObliqueRight",
            "legacyObliqueTop", "legacyObliqueTopLeft", "legacyObliqueTopRight",
            "obliqueBottom", "obliqueBottomLeft", "obliqueBottomRight", "obliqueLeft",
            "obliqueRight", "obliqueTop", "obliqueTopLeft", "obliqueTopRight",
            "legacyPerspectiveFront", "perspectiveFront",
        )
    },
    "legacyPerspectiveBottom": (0.0, 20.0, 0.0),
    "legacyPerspectiveLeft": (20.0, 0.0, 0.0),
    "legacyPerspectiveRight": (340.0, 0.0, 0.0),
    "legacyPerspectiveTop": (0.0, 340.0, 0.0),
    "perspectiveAbove": (0.0, 340.0, 0.0),
    "perspectiveBelow": (0.0, 20.0, 0.0),
    "perspectiveContrastingLeftFacing": (43.9, 10.4, 356.4),
    "perspectiveContrastingRightFacing": (316.1, 10.4, 3.6),
    "perspectiveHeroicExtremeLeftFacing": (34.5, 8.1, 357.1),
    "perspectiveHeroicExtremeRightFacing": (325.5, 8.1, 2.9),
    "perspectiveLeft": (20.0, 0.0, 0.0),
    "perspectiveRelaxed": (0.0, 309.6, 0.0),
    "perspectiveRelaxedModerately": (0.0, 324.8, 0.0),
    "perspectiveRight": (340.0, 0.0, 0.0),
}

# (width, height) of a bevel preset when ``w``/``h`` are not given.
BEVEL_SIZES: Dict[str, Tuple[float, float]] = {
    "angle": (6.0, 6.0),
    "artDeco": (9.0, 6.0),
    "circle": (6.0, 6.0),
    "convex": (6.0, 6.0),
    "coolSlant": (13.0, 6.0),
    "cross": (11.0, 6.0),
    "divot": (11.0, 11.0),
    "hardEdge": (9.0, 6.0),
    "relaxedInset": (6.0, 6.0),
    "riblet": (8.0, 6.0),
    "slope": (6.0, 6.0),
    "softRound": (12.0, 4.0),
}


class Rotation(Entity):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def for_preset(cls, preset: PresetCamera) -> Optional["Rotation"]:
        angles = PRESET_ROTATION.get(preset.value)
        if angles is None:
            return None
        x, y, z = angles
        return cls(x=x, y=y, z=z)


class Camera(Entity):
    preset: PresetCamera = PresetCamera.default()
    rotation: Optional[Rotation] = None
    # field of view in degrees
    perspective: float = 0.0


class LightRig(Entity):
    preset: LightRigPreset = LightRigPreset.default()
    direction: LightRigDirection = LightRigDirection.TOP
    rotation: Rotation = Rotation()


class Point3D(Entity):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Vector3D(Entity):
    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0


class Backdrop(Entity):
    anchor: Point3D = Point3D()
    normal: Vector3D = Vector3D()
    up: Vector3D = Vector3D()


class Scene3D(Entity):
    camera: Optional[Camera] = None
    light_rig: Optional[LightRig] = None
    backdrop: Optional[Backdrop] = None


class Bevel(Entity):
    preset: BevelPreset = BevelPreset.CIRCLE
    width: float = 6.0
    height: float = 6.0


class Shape3D(Entity):
    contour_color: str = DEFAULT_CONTOUR_COLOR
    contour_width: float = 0.0
    extrusion_color: str = DEFAULT_EXTRUSION_COLOR
    extrusion_height: float = 0.0
    depth: float = 0.0
    top_bevel: Optional[Bevel] = None
    bottom_bevel: Optional[Bevel] = None
    preset_material: PresetMaterial = PresetMaterial.default()
