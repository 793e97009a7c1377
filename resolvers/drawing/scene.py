from __future__ import annotations

from typing import Optional

from dto.drawing.enums import BevelPreset, LightRigDirection, LightRigPreset, PresetCamera, PresetMaterial
from dto.drawing.scene import (
    BEVEL_SIZES,
    DEFAULT_CONTOUR_COLOR,
    DEFAULT_EXTRUSION_COLOR,
    PRESET_PERSPECTIVE,
    Backdrop,
    Bevel,
    Camera,
    LightRig,
    Point3D,
    Rotation,
    Scene3D,
    Shape3D,
    Vector3D,
)
from raw.drawing.scene import (
    RawBackdrop,
    RawBevel,
    RawCamera,
    RawLightRig,
    RawPoint3D,
    RawScene3D,
    RawShape3D,
    RawSphereCoordinates,
    RawVector3D,
)
from resolvers.drawing.context import DrawingContext
from utils.conversions import angle_to_degree, emu_to_pt


def _rotation(raw: RawSphereCoordinates) -> Rotation:
    # lon -> x, lat -> y, rev -> z
    return Rotation(
        x=angle_to_degree(raw.longitude or 0),
        y=angle_to_degree(raw.latitude or 0),
        z=angle_to_degree(raw.revolution or 0),
    )


def resolve_camera(raw: Optional[RawCamera]) -> Optional[Camera]:
    if raw is None or (raw.preset is None and raw.rotation is None):
        return None
    preset = PresetCamera.from_string(raw.preset)
    if raw.field_of_view is not None:
        perspective = angle_to_degree(raw.field_of_view)
    else:
        perspective = PRESET_PERSPECTIVE.get(preset.value, 0.0)
    rotation = _rotation(raw.rotation) if raw.rotation is not None else Rotation.for_preset(preset)
    return Camera(preset=preset, rotation=rotation, perspective=perspective)


def resolve_light_rig(raw: Optional[RawLightRig]) -> Optional[LightRig]:
    if raw is None:
        return None
    return LightRig(
        preset=LightRigPreset.from_string(raw.rig),
        direction=LightRigDirection.from_string(raw.direction),
        rotation=_rotation(raw.rotation) if raw.rotation is not None else Rotation(),
    )


def _point(raw: Optional[RawPoint3D]) -> Point3D:
    if raw is None:
        return Point3D()
    return Point3D(x=emu_to_pt(raw.x or 0), y=emu_to_pt(raw.y or 0), z=emu_to_pt(raw.z or 0))


def _vector(raw: Optional[RawVector3D]) -> Vector3D:
    if raw is None:
        return Vector3D()
    return Vector3D(dx=emu_to_pt(raw.dx or 0), dy=emu_to_pt(raw.dy or 0), dz=emu_to_pt(raw.dz or 0))


def resolve_backdrop(raw: Optional[RawBackdrop]) -> Optional[Backdrop]:
    if raw is None:
        return None
    return Backdrop(anchor=_point(raw.anchor), normal=_vector(raw.normal), up=_vector(raw.up))


def resolve_scene3d(raw: Optional[RawScene3D]) -> Optional[Scene3D]:
    if raw is None:
        return None
    return Scene3D(
        camera=resolve_camera(raw.camera),
        light_rig=resolve_light_rig(raw.light_rig),
        backdrop=resolve_backdrop(raw.backdrop),
    )


def resolve_bevel(raw: Optional[RawBevel]) -> Optional[Bevel]:
    """A bevel with no size or preset at all is treated as absent."""
    if raw is None or (raw.width is None and raw.height is None and raw.preset is None):
        return None
    preset = BevelPreset.from_string(raw.preset)
    width, height = BEVEL_SIZES.get(preset.value, (6.0, 6.0))
    if raw.width is not None:
        width = emu_to_pt(raw.width)
    if raw.height is not None:
        height = emu_to_pt(raw.height)
    return Bevel(preset=preset, width=width, height=height)


def resolve_shape3d(raw: Optional[RawShape3D], context: DrawingContext) -> Optional[Shape3D]:
    if raw is None:
        return None
    return Shape3D(
        contour_color=context.color(raw.contour_color) or DEFAULT_CONTOUR_COLOR,
        contour_width=emu_to_pt(raw.contour_width or 0),
        extrusion_color=context.color(raw.extrusion_color) or DEFAULT_EXTRUSION_COLOR,
        extrusion_height=emu_to_pt(raw.extrusion_height or 0),
        depth=emu_to_pt(raw.z or 0),
        top_bevel=resolve_bevel(raw.bevel_top),
        bottom_bevel=resolve_bevel(raw.bevel_bottom),
        preset_material=PresetMaterial.from_string(raw.preset_material),
    )
