"""
Resolved drawing objects: the content an anchor (or a group) holds.

Lengths are points and angles degrees.  Geometry coordinates stay as
guide formulas when the document names a guide instead of a number.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from dto.base import Entity
from dto.drawing.effect import EffectContainer
from dto.drawing.enums import BlackWhiteMode, PathFillMode, PresetShapeType
from dto.drawing.fill import BlipFill, Fill, NoFill
from dto.drawing.line import Outline
from dto.drawing.scene import Scene3D, Shape3D
from dto.drawing.text import TextBody
from dto.hyperlink import Hyperlink

# A number of points, or the formula of the guide it refers to.
Coordinate = Union[float, str]


# ---- placement ----


class Position(Entity):
    x: float = 0.0
    y: float = 0.0


class Size(Entity):
    width: float = 0.0
    height: float = 0.0


class Transform2D(Entity):
    rotation: float = 0.0
    flip_horizontal: bool = False
    flip_vertical: bool = False


# ---- geometry ----


class AdjustValue(Entity):
    name: str = ""
    formula: str = ""


class PathPoint(Entity):
    x: Coordinate = 0.0
    y: Coordinate = 0.0


class PathCommand(Entity):
    """``move_to``, ``line_to``, ``quadratic_bezier_to`` or ``cubic_bezier_to``."""

    kind: Literal["move_to", "line_to", "quadratic_bezier_to", "cubic_bezier_to"]
    points: List[PathPoint] = []


class ArcTo(Entity):
    kind: Literal["arc_to"] = "arc_to"
    width_radius: Coordinate = 0.0
    height_radius: Coordinate = 0.0
    start_angle: Coordinate = 0.0
    swing_angle: Coordinate = 0.0


class ClosePath(Entity):
    kind: Literal["close"] = "close"


class GeometryPath(Entity):
    width: float = 0.0
    height: float = 0.0
    fill_mode: PathFillMode = PathFillMode.NORM
    stroke: bool = True
    extrusion_ok: bool = True
    commands: List[Union[PathCommand, ArcTo, ClosePath]] = []


class AdjustHandleXY(Entity):
    kind: Literal["xy"] = "xy"
    guide_x: Optional[str] = None
    guide_y: Optional[str] = None
    min_x: Optional[Coordinate] = None
    max_x: Optional[Coordinate] = None
    min_y: Optional[Coordinate] = None
    max_y: Optional[Coordinate] = None
    position: PathPoint = PathPoint()


class AdjustHandlePolar(Entity):
    kind: Literal["polar"] = "polar"
    guide_radius: Optional[str] = None
    guide_angle: Optional[str] = None
    min_radius: Optional[Coordinate] = None
    max_radius: Optional[Coordinate] = None
    min_angle: Optional[Coordinate] = None
    max_angle: Optional[Coordinate] = None
    position: PathPoint = PathPoint()


class ConnectionSite(Entity):
    angle: Coordinate = 0.0
    position: PathPoint = PathPoint()


class TextRectangle(Entity):
    left: Coordinate = 0.0
    top: Coordinate = 0.0
    right: Coordinate = 0.0
    bottom: Coordinate = 0.0


class PresetGeometry(Entity):
    kind: Literal["preset"] = "preset"
    shape_type: PresetShapeType = PresetShapeType.default()
    adjust_values: List[AdjustValue] = []


class CustomGeometry(Entity):
    kind: Literal["custom"] = "custom"
    adjust_values: List[AdjustValue] = []
    guides: List[AdjustValue] = []
    adjust_handles: List[Union[AdjustHandleXY, AdjustHandlePolar]] = []
    connection_sites: List[ConnectionSite] = []
    text_rectangle: Optional[TextRectangle] = None
    paths: List[GeometryPath] = []


Geometry = Union[PresetGeometry, CustomGeometry]


# ---- non visual ----


class NonVisualProperties(Entity):
    id: int = 0
    name: str = ""
    description: str = ""
    title: Optional[str] = None
    hidden: bool = False
    hyperlink_on_click: Optional[Hyperlink] = None
    hyperlink_on_hover: Optional[Hyperlink] = None
    lock_with_sheet: bool = True
    print_with_sheet: bool = True
    # names of the lock flags that are set (``no_move``, ``no_resize`` ...)
    locks: List[str] = []


# ---- style ----


class EffectStyle(Entity):
    scene3d: Optional[Scene3D] = None
    shape3d: Optional[Shape3D] = None
    effects: Optional[EffectContainer] = None


class ShapeStyle(Entity):
    fill: Fill = NoFill()
    outline: Optional[Outline] = None
    effect: EffectStyle = EffectStyle()


class ShapeProperties(Entity):
    """
    Placement and appearance shared by every drawing object.

    ``size`` and ``position`` come from the object's ``xfrm``, else from the
    anchor's extent and position.  ``child_size``/``child_position`` only
    matter for groups: they define the coordinate space of the children.
    """

    size: Optional[Size] = None
    position: Optional[Position] = None
    child_size: Optional[Size] = None
    child_position: Optional[Position] = None
    transform: Transform2D = Transform2D()
    geometry: Geometry = PresetGeometry()
    style: ShapeStyle = ShapeStyle()
    black_white_mode: BlackWhiteMode = BlackWhiteMode.AUTO


# ---- content ----


class Shape(Entity):
    kind: Literal["shape"] = "shape"
    non_visual: NonVisualProperties = NonVisualProperties()
    properties: ShapeProperties = ShapeProperties()
    text: Optional[TextBody] = None
    text_box: bool = False
    text_link: str = ""
    lock_text: bool = True
    macro: str = ""
    published: bool = False


class Picture(Entity):
    kind: Literal["picture"] = "picture"
    non_visual: NonVisualProperties = NonVisualProperties()
    properties: ShapeProperties = ShapeProperties()
    blip_fill: BlipFill
    prefer_relative_resize: bool = False
    macro: str = ""
    published: bool = False


class ConnectionPoint(Entity):
    shape_id: int
    site_index: int = 0


class ConnectionShape(Entity):
    kind: Literal["connection_shape"] = "connection_shape"
    non_visual: NonVisualProperties = NonVisualProperties()
    properties: ShapeProperties = ShapeProperties()
    start_connection: Optional[ConnectionPoint] = None
    end_connection: Optional[ConnectionPoint] = None
    macro: str = ""
    published: bool = False


class GraphicFrame(Entity):
    """A frame around foreign content, typically a chart; the content itself is not parsed."""

    kind: Literal["graphic_frame"] = "graphic_frame"
    non_visual: NonVisualProperties = NonVisualProperties()
    properties: ShapeProperties = ShapeProperties()
    type_uri: str = ""
    # archive path of the chart part, when the frame holds a chart
    chart_path: Optional[str] = None
    macro: str = ""
    published: bool = False


class ContentPart(Entity):
    kind: Literal["content_part"] = "content_part"
    rel_id: str = ""


class GroupShape(Entity):
    kind: Literal["group"] = "group"
    non_visual: NonVisualProperties = NonVisualProperties()
    properties: ShapeProperties = ShapeProperties()
    contents: List["GroupContent"] = []

    def walk(self):
        """Yield every object in the group, depth first."""
        for content in self.contents:
            yield content
            if isinstance(content, GroupShape):
                yield from content.walk()


GroupContent = Union[Shape, Picture, GroupShape, ConnectionShape, GraphicFrame]

DrawingContent = Union[Shape, Picture, GroupShape, ConnectionShape, GraphicFrame, ContentPart]

GroupShape.model_rebuild()
