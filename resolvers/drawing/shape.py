"""
Drawing objects: shapes, pictures, connectors, graphic frames and groups.

Each object resolves its placement, geometry and style on its own.  What a
parent hands down is limited to the group fill (``grpFill``), which only
the group's direct children see, and the anchor's extent and position,
used when an object has no ``xfrm``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from dto.drawing.enums import BlackWhiteMode, PathFillMode, PresetShapeType
from dto.drawing.fill import Fill, NoFill
from dto.drawing.shape import (
    AdjustHandlePolar,
    AdjustHandleXY,
    AdjustValue,
    ArcTo,
    ClosePath,
    ConnectionPoint,
    ConnectionShape,
    ConnectionSite,
    ContentPart,
    Coordinate,
    CustomGeometry,
    Geometry,
    GeometryPath,
    GraphicFrame,
    GroupContent,
    GroupShape,
    NonVisualProperties,
    PathCommand,
    PathPoint,
    Picture,
    Position,
    PresetGeometry,
    Shape,
    ShapeProperties,
    ShapeStyle,
    Size,
    TextRectangle,
    Transform2D,
)
from raw.drawing.line import RawStyleReference
from raw.drawing.non_visual import RawConnection, RawLocks, RawNonVisualProperties
from raw.drawing.shape import (
    RawAdjustHandlePolar,
    RawAdjustHandleXY,
    RawArcTo,
    RawClosePath,
    RawCustomGeometry,
    RawPath,
    RawPathCommand,
    RawPathPoint,
    RawPoint,
    RawShapeGuide,
    RawShapeProperties,
    RawShapeStyle,
    RawSize,
    RawTransform2D,
)
from raw.drawing.worksheet_drawing import (
    RawClientData,
    RawConnectionShape,
    RawContentPart,
    RawGraphicFrame,
    RawGroupShape,
    RawPicture,
    RawSpreadsheetShape,
)
from raw.node import RawNode
from resolvers.drawing.context import DrawingContext
from resolvers.drawing.effect import resolve_effect_style
from resolvers.drawing.fill import resolve_blip_fill, resolve_fill, resolve_fill_choice
from resolvers.drawing.line import resolve_outline_with_reference
from resolvers.drawing.text import resolve_text_body
from resolvers.hyperlink import resolve_drawing_hyperlink
from utils.conversions import angle_to_degree, emu_to_pt, to_int

logger = logging.getLogger(__name__)

PATH_COMMANDS = {
    "moveTo": "move_to",
    "lnTo": "line_to",
    "quadBezTo": "quadratic_bezier_to",
    "cubicBezTo": "cubic_bezier_to",
}


class Placement:
    """What the enclosing anchor or group hands down to an object."""

    def __init__(
        self,
        extent: Optional[Size] = None,
        position: Optional[Position] = None,
        client_data: Optional[RawClientData] = None,
        group_fill: Optional[Fill] = None,
    ) -> None:
        self.extent = extent
        self.position = position
        self.client_data = client_data
        self.group_fill = group_fill


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class _Guides:
    """Turns geometry coordinates into points, or into the formula of the guide they name."""

    def __init__(self, *guide_lists: List[RawShapeGuide]) -> None:
        self.formulas: Dict[str, str] = {}
        for guides in guide_lists:
            for guide in guides:
                if guide.name:
                    self.formulas[guide.name] = guide.formula or ""

    def _lookup(self, value: str) -> Coordinate:
        formula = self.formulas.get(value)
        return formula if formula is not None else 0.0

    def length(self, value: Optional[str]) -> Coordinate:
        if value is None:
            return 0.0
        number = to_int(value)
        return emu_to_pt(number) if number is not None else self._lookup(value)

    def angle(self, value: Optional[str]) -> Coordinate:
        if value is None:
            return 0.0
        number = to_int(value)
        return angle_to_degree(number) if number is not None else self._lookup(value)

    def optional_length(self, value: Optional[str]) -> Optional[Coordinate]:
        return self.length(value) if value is not None else None

    def optional_angle(self, value: Optional[str]) -> Optional[Coordinate]:
        return self.angle(value) if value is not None else None

    def point(self, raw: Optional[RawPathPoint]) -> PathPoint:
        if raw is None:
            return PathPoint()
        return PathPoint(x=self.length(raw.x), y=self.length(raw.y))


def _adjust_values(guides: List[RawShapeGuide]) -> List[AdjustValue]:
    return [AdjustValue(name=guide.name or "", formula=guide.formula or "") for guide in guides]


def _path_command(raw: RawNode, guides: _Guides) -> Optional[Union[PathCommand, ArcTo, ClosePath]]:
    if isinstance(raw, RawPathCommand):
        kind = PATH_COMMANDS.get(raw.command)
        if kind is None:
            return None
        return PathCommand(kind=kind, points=[guides.point(point) for point in raw.points])
    if isinstance(raw, RawArcTo):
        return ArcTo(
            width_radius=guides.length(raw.width_radius),
            height_radius=guides.length(raw.height_radius),
            start_angle=guides.angle(raw.start_angle),
            swing_angle=guides.angle(raw.swing_angle),
        )
    if isinstance(raw, RawClosePath):
        return ClosePath()
    return None


def _path(raw: RawPath, guides: _Guides) -> GeometryPath:
    commands = [command for command in (_path_command(item, guides) for item in raw.commands) if command]
    return GeometryPath(
        width=emu_to_pt(raw.width or 0),
        height=emu_to_pt(raw.height or 0),
        fill_mode=PathFillMode.from_string(raw.fill_mode),
        stroke=True if raw.stroke is None else raw.stroke,
        extrusion_ok=True if raw.extrusion_ok is None else raw.extrusion_ok,
        commands=commands,
    )


def _adjust_handle(raw: RawNode, guides: _Guides) -> Optional[Union[AdjustHandleXY, AdjustHandlePolar]]:
    if isinstance(raw, RawAdjustHandleXY):
        return AdjustHandleXY(
            guide_x=raw.guide_x,
            guide_y=raw.guide_y,
            min_x=guides.optional_length(raw.min_x),
            max_x=guides.optional_length(raw.max_x),
            min_y=guides.optional_length(raw.min_y),
            max_y=guides.optional_length(raw.max_y),
            position=guides.point(raw.position),
        )
    if isinstance(raw, RawAdjustHandlePolar):
        return AdjustHandlePolar(
            guide_radius=raw.guide_radius,
            guide_angle=raw.guide_angle,
            min_radius=guides.optional_length(raw.min_radius),
            max_radius=guides.optional_length(raw.max_radius),
            min_angle=guides.optional_angle(raw.min_angle),
            max_angle=guides.optional_angle(raw.max_angle),
            position=guides.point(raw.position),
        )
    return None


def resolve_custom_geometry(raw: RawCustomGeometry) -> CustomGeometry:
    guides = _Guides(raw.adjust_values, raw.guides)
    text_rectangle = None
    if raw.rect is not None:
        text_rectangle = TextRectangle(
            left=guides.length(raw.rect.left),
            top=guides.length(raw.rect.top),
            right=guides.length(raw.rect.right),
            bottom=guides.length(raw.rect.bottom),
        )
    return CustomGeometry(
        adjust_values=_adjust_values(raw.adjust_values),
        guides=_adjust_values(raw.guides),
        adjust_handles=[h for h in (_adjust_handle(item, guides) for item in raw.adjust_handles) if h],
        connection_sites=[
            ConnectionSite(angle=guides.angle(site.angle), position=guides.point(site.position))
            for site in raw.connection_sites
        ],
        text_rectangle=text_rectangle,
        paths=[_path(path, guides) for path in raw.paths],
    )


def resolve_geometry(properties: Optional[RawShapeProperties]) -> Geometry:
    if properties is not None and properties.preset_geometry is not None:
        preset = properties.preset_geometry
        return PresetGeometry(
            shape_type=PresetShapeType.from_string(preset.preset),
            adjust_values=_adjust_values(preset.adjust_values),
        )
    if properties is not None and properties.custom_geometry is not None:
        return resolve_custom_geometry(properties.custom_geometry)
    return PresetGeometry()


# ---------------------------------------------------------------------------
# Non visual properties
# ---------------------------------------------------------------------------


def _lock_names(locks: Optional[RawLocks]) -> List[str]:
    if locks is None:
        return []
    return [name for name in RawLocks.model_fields if getattr(locks, name)]


def resolve_non_visual(
    raw: Optional[RawNonVisualProperties],
    context: DrawingContext,
    client_data: Optional[RawClientData] = None,
) -> NonVisualProperties:
    values = {}
    if client_data is not None:
        if client_data.locks_with_sheet is not None:
            values["lock_with_sheet"] = client_data.locks_with_sheet
        if client_data.prints_with_sheet is not None:
            values["print_with_sheet"] = client_data.prints_with_sheet
    if raw is None:
        return NonVisualProperties(**values)
    drawing = raw.drawing
    if drawing is not None:
        values.update(
            id=drawing.drawing_id or 0,
            name=drawing.name or "",
            description=drawing.description or "",
            title=drawing.title,
            hidden=bool(drawing.hidden),
            hyperlink_on_click=resolve_drawing_hyperlink(
                drawing.hyperlink_click, context.relationships, context.workbook
            ),
            hyperlink_on_hover=resolve_drawing_hyperlink(
                drawing.hyperlink_hover, context.relationships, context.workbook
            ),
        )
    if raw.kind is not None:
        values["locks"] = _lock_names(raw.kind.locks)
    return NonVisualProperties(**values)


# ---------------------------------------------------------------------------
# Shape properties
# ---------------------------------------------------------------------------


def resolve_position(raw: Optional[RawPoint]) -> Optional[Position]:
    if raw is None:
        return None
    return Position(x=emu_to_pt(raw.x or 0), y=emu_to_pt(raw.y or 0))


def resolve_size(raw: Optional[RawSize]) -> Optional[Size]:
    if raw is None:
        return None
    return Size(width=emu_to_pt(raw.width or 0), height=emu_to_pt(raw.height or 0))


def _transform(raw: Optional[RawTransform2D]) -> Transform2D:
    if raw is None:
        return Transform2D()
    return Transform2D(
        rotation=angle_to_degree(raw.rotation or 0),
        flip_horizontal=bool(raw.flip_horizontal),
        flip_vertical=bool(raw.flip_vertical),
    )


def referenced_fill(reference: Optional[RawStyleReference], context: DrawingContext) -> Optional[Fill]:
    """The theme fill an ``<a:fillRef>`` points at, drawn in the reference's color."""
    if reference is None or context.theme is None:
        return None
    raw = context.theme.get_fill_from_ref(reference.index)
    return resolve_fill_choice(raw, context, ref_color=context.color(reference.color))


def resolve_shape_style(
    properties: Optional[RawShapeProperties],
    style: Optional[RawShapeStyle],
    context: DrawingContext,
    group_fill: Optional[Fill] = None,
) -> ShapeStyle:
    """
    Fill, outline and effects of an object.

    Each one is the object's own when ``spPr`` declares it, else the theme
    style its ``<style>`` references, else the default (no fill, no
    outline, no effects).
    """
    properties = properties or RawShapeProperties()
    fill = resolve_fill(properties, context, group_fill)
    if fill is None:
        fill = referenced_fill(style.fill_reference if style else None, context)
    return ShapeStyle(
        fill=fill or NoFill(),
        outline=resolve_outline_with_reference(
            properties.outline, style.line_reference if style else None, context
        ),
        effect=resolve_effect_style(
            properties.effect_list,
            properties.effect_dag,
            properties.scene3d,
            properties.shape3d,
            style.effect_reference if style else None,
            context,
        ),
    )


def resolve_shape_properties(
    properties: Optional[RawShapeProperties],
    style: Optional[RawShapeStyle],
    context: DrawingContext,
    placement: Placement,
    transform: Optional[RawTransform2D] = None,
) -> ShapeProperties:
    """``transform`` overrides the ``xfrm`` of ``properties`` (graphic frames keep theirs outside ``spPr``)."""
    if transform is None and properties is not None:
        transform = properties.transform
    size = resolve_size(transform.extent) if transform else None
    position = resolve_position(transform.offset) if transform else None
    return ShapeProperties(
        size=size or placement.extent,
        position=position or placement.position,
        child_size=resolve_size(transform.child_extent) if transform else None,
        child_position=resolve_position(transform.child_offset) if transform else None,
        transform=_transform(transform),
        geometry=resolve_geometry(properties),
        style=resolve_shape_style(properties, style, context, placement.group_fill),
        black_white_mode=BlackWhiteMode.from_string(properties.black_white_mode if properties else None),
    )


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


def resolve_shape(raw: RawSpreadsheetShape, context: DrawingContext, placement: Placement) -> Shape:
    kind = raw.non_visual.kind if raw.non_visual else None
    return Shape(
        non_visual=resolve_non_visual(raw.non_visual, context, placement.client_data),
        properties=resolve_shape_properties(raw.properties, raw.style, context, placement),
        text=resolve_text_body(raw.text_body, context, raw.style.font_reference if raw.style else None),
        text_box=bool(kind.text_box) if kind else False,
        text_link=raw.text_link or "",
        lock_text=True if raw.lock_text is None else raw.lock_text,
        macro=raw.macro or "",
        published=bool(raw.published),
    )


def resolve_picture(raw: RawPicture, context: DrawingContext, placement: Placement) -> Optional[Picture]:
    """A picture whose image cannot be located is dropped."""
    if raw.blip_fill is None:
        return None
    blip_fill = resolve_blip_fill(raw.blip_fill, context)
    if blip_fill.blip is None:
        logger.debug("Dropping picture without a resolvable image")
        return None
    kind = raw.non_visual.kind if raw.non_visual else None
    return Picture(
        non_visual=resolve_non_visual(raw.non_visual, context, placement.client_data),
        properties=resolve_shape_properties(raw.properties, raw.style, context, placement),
        blip_fill=blip_fill,
        prefer_relative_resize=bool(kind.prefer_relative_resize) if kind else False,
        macro=raw.macro or "",
        published=bool(raw.published),
    )


def _connection(raw: Optional[RawConnection]) -> Optional[ConnectionPoint]:
    if raw is None or raw.shape_id is None:
        return None
    return ConnectionPoint(shape_id=raw.shape_id, site_index=raw.site_index or 0)


def resolve_connection_shape(
    raw: RawConnectionShape, context: DrawingContext, placement: Placement
) -> ConnectionShape:
    kind = raw.non_visual.kind if raw.non_visual else None
    return ConnectionShape(
        non_visual=resolve_non_visual(raw.non_visual, context, placement.client_data),
        properties=resolve_shape_properties(raw.properties, raw.style, context, placement),
        start_connection=_connection(kind.start_connection) if kind else None,
        end_connection=_connection(kind.end_connection) if kind else None,
        macro=raw.macro or "",
        published=bool(raw.published),
    )


def resolve_graphic_frame(raw: RawGraphicFrame, context: DrawingContext, placement: Placement) -> GraphicFrame:
    data = raw.graphic.data if raw.graphic else None
    chart_path = None
    if data is not None and data.chart_rel_id:
        chart_path = context.relationships.zip_path_for_id(data.chart_rel_id)
    return GraphicFrame(
        non_visual=resolve_non_visual(raw.non_visual, context, placement.client_data),
        properties=resolve_shape_properties(None, None, context, placement, transform=raw.transform),
        type_uri=(data.uri if data else None) or "",
        chart_path=chart_path,
        macro=raw.macro or "",
        published=bool(raw.published),
    )


def resolve_content_part(raw: RawContentPart) -> ContentPart:
    return ContentPart(rel_id=raw.rel_id or "")


def resolve_group(raw: RawGroupShape, context: DrawingContext, placement: Placement) -> GroupShape:
    """
    A group and its children.

    The group's own fill never comes from an enclosing group; its children
    see it as their ``grpFill``.  Children take their placement from their
    own ``xfrm`` in the group's child coordinate space.
    """
    own = Placement(
        extent=placement.extent,
        position=placement.position,
        client_data=placement.client_data,
    )
    # groups keep their scene and effects but no extrusion
    properties = (raw.properties or RawShapeProperties()).model_copy(update={"shape3d": None})
    resolved = resolve_shape_properties(properties, None, context, own)
    children = Placement(client_data=placement.client_data, group_fill=resolve_fill(properties, context))
    contents: List[GroupContent] = []
    for item in raw.shapes:
        content = resolve_content(item, context, children)
        if content is not None and not isinstance(content, ContentPart):
            contents.append(content)
    return GroupShape(
        non_visual=resolve_non_visual(raw.non_visual, context, placement.client_data),
        properties=resolved,
        contents=contents,
    )


def resolve_content(raw: Optional[RawNode], context: DrawingContext, placement: Placement):
    if isinstance(raw, RawSpreadsheetShape):
        return resolve_shape(raw, context, placement)
    if isinstance(raw, RawPicture):
        return resolve_picture(raw, context, placement)
    if isinstance(raw, RawGroupShape):
        return resolve_group(raw, context, placement)
    if isinstance(raw, RawConnectionShape):
        return resolve_connection_shape(raw, context, placement)
    if isinstance(raw, RawGraphicFrame):
        return resolve_graphic_frame(raw, context, placement)
    if isinstance(raw, RawContentPart):
        return resolve_content_part(raw)
    return None
