import pytest

from dto.drawing.enums import EditAs, PresetCamera
from dto.drawing.fill import ExternalImage, InternalImage, NoFill, SolidFill
from dto.drawing.line import DEFAULT_LINE_COLOR
from dto.drawing.shape import GroupShape, Picture, PresetGeometry, Shape
from dto.drawing.worksheet_drawing import AbsoluteAnchor, Marker, OneCellAnchor, TwoCellAnchor
from opc.relationships import Relationships
from raw.drawing.color import RawSrgbColor
from raw.drawing.effect import RawOuterShadow
from raw.drawing.scene import RawCamera
from raw.drawing.worksheet_drawing import RawWorksheetDrawing
from resolvers.drawing import DrawingContext, resolve_drawing
from resolvers.drawing.effect import resolve_outer_shadow
from resolvers.drawing.scene import resolve_camera
from tests.conftest import (
    DRAWING_NS,
    REL_NS,
    XDR_NS,
    relationships_xml,
    sheet_xml,
    workbook_parts,
)

DRAWING = f"""
<xdr:wsDr xmlns:xdr="{XDR_NS}" xmlns:a="{DRAWING_NS}" xmlns:r="{REL_NS}">
  <xdr:twoCellAnchor editAs="oneCell">
    <xdr:from><xdr:col>1</xdr:col><xdr:colOff>12700</xdr:colOff><xdr:row>2</xdr:row><xdr:rowOff>25400</xdr:rowOff></xdr:from>
    <xdr:to><xdr:col>4</xdr:col><xdr:colOff>0</xdr:colOff><xdr:row>8</xdr:row><xdr:rowOff>0</xdr:rowOff></xdr:to>
    <xdr:grpSp>
      <xdr:nvGrpSpPr><xdr:cNvPr id="2" name="Group 1"/><xdr:cNvGrpSpPr/></xdr:nvGrpSpPr>
      <xdr:grpSpPr>
        <a:xfrm><a:off x="0" y="0"/><a:ext cx="127000" cy="254000"/><a:chOff x="0" y="0"/><a:chExt cx="127000" cy="254000"/></a:xfrm>
        <a:solidFill><a:srgbClr val="00FF00"/></a:solidFill>
      </xdr:grpSpPr>
      <xdr:sp>
        <xdr:nvSpPr><xdr:cNvPr id="3" name="Child"/><xdr:cNvSpPr/></xdr:nvSpPr>
        <xdr:spPr>
          <a:xfrm><a:off x="12700" y="25400"/><a:ext cx="63500" cy="63500"/></a:xfrm>
          <a:prstGeom prst="ellipse"><a:avLst/></a:prstGeom>
          <a:grpFill/>
        </xdr:spPr>
      </xdr:sp>
      <xdr:grpSp>
        <xdr:nvGrpSpPr><xdr:cNvPr id="4" name="Inner"/><xdr:cNvGrpSpPr/></xdr:nvGrpSpPr>
        <xdr:grpSpPr/>
        <xdr:sp>
          <xdr:nvSpPr><xdr:cNvPr id="5" name="Grandchild"/><xdr:cNvSpPr/></xdr:nvSpPr>
          <xdr:spPr><a:grpFill/></xdr:spPr>
        </xdr:sp>
      </xdr:grpSp>
    </xdr:grpSp>
    <xdr:clientData fPrintsWithSheet="0"/>
  </xdr:twoCellAnchor>
  <xdr:oneCellAnchor>
    <xdr:from><xdr:col>0</xdr:col><xdr:colOff>0</xdr:colOff><xdr:row>0</xdr:row><xdr:rowOff>0</xdr:rowOff></xdr:from>
    <xdr:ext cx="254000" cy="127000"/>
    <xdr:sp>
      <xdr:nvSpPr><xdr:cNvPr id="6" name="Label" descr="a label"/><xdr:cNvSpPr txBox="1"/></xdr:nvSpPr>
      <xdr:spPr>
        <a:solidFill><a:schemeClr val="accent1"/></a:solidFill>
        <a:ln w="25400"/>
        <a:effectLst>
          <a:glow rad="63500"><a:srgbClr val="FF0000"/></a:glow>
          <a:outerShdw blurRad="50800" dist="38100" dir="2700000"/>
        </a:effectLst>
      </xdr:spPr>
      <xdr:txBody>
        <a:bodyPr/><a:lstStyle/>
        <a:p><a:r><a:rPr lang="en-US" sz="1200" b="1"/><a:t>Hello</a:t></a:r></a:p>
      </xdr:txBody>
    </xdr:sp>
    <xdr:clientData/>
  </xdr:oneCellAnchor>
  <xdr:absoluteAnchor>
    <xdr:pos x="127000" y="254000"/>
    <xdr:ext cx="12700" cy="12700"/>
    <xdr:pic>
      <xdr:nvPicPr><xdr:cNvPr id="7" name="Picture 1" descr="logo"/><xdr:cNvPicPr/></xdr:nvPicPr>
      <xdr:blipFill><a:blip r:embed="rId1"/><a:stretch><a:fillRect/></a:stretch></xdr:blipFill>
      <xdr:spPr/>
    </xdr:pic>
    <xdr:clientData/>
  </xdr:absoluteAnchor>
  <xdr:absoluteAnchor>
    <xdr:pos x="0" y="0"/>
    <xdr:ext cx="12700" cy="12700"/>
    <xdr:pic>
      <xdr:nvPicPr><xdr:cNvPr id="8" name="Linked"/><xdr:cNvPicPr/></xdr:nvPicPr>
      <xdr:blipFill><a:blip r:link="rId2"/></xdr:blipFill>
      <xdr:spPr/>
    </xdr:pic>
    <xdr:clientData/>
  </xdr:absoluteAnchor>
</xdr:wsDr>
"""

DRAWING_RELS = relationships_xml(
    [("rId1", "image", "../media/image1.png"), ("rId2", "image", "https://example.com/remote.png")],
    external=("rId2",),
)

PNG = b"\x89PNG\r\n\x1a\nfake"


@pytest.fixture
def raw_drawing():
    return RawWorksheetDrawing.from_xml(DRAWING.encode())


@pytest.fixture
def relationships():
    return Relationships.from_xml(DRAWING_RELS.encode(), "xl/drawings/drawing1.xml")


@pytest.fixture
def anchors(raw_drawing, relationships):
    context = DrawingContext(relationships=relationships, images={"rId1": PNG})
    return resolve_drawing(raw_drawing, context)


def test_anchor_kinds(anchors):
    assert [type(a.anchor) for a in anchors] == [TwoCellAnchor, OneCellAnchor, AbsoluteAnchor, AbsoluteAnchor]
    two_cell = anchors[0].anchor
    assert two_cell.edit_as == EditAs.ONE_CELL
    assert two_cell.start == Marker(row=3, col=2, row_offset=2.0, col_offset=1.0)
    assert two_cell.end == Marker(row=9, col=5)


def test_group_fill_reaches_direct_children_only(anchors):
    group = anchors[0].content
    assert isinstance(group, GroupShape)
    assert group.non_visual.name == "Group 1"
    assert group.non_visual.print_with_sheet is False
    assert group.properties.style.fill == SolidFill(color="00ff00ff")

    child, inner = group.contents
    assert child.properties.style.fill == SolidFill(color="00ff00ff")
    assert child.properties.geometry == PresetGeometry(shape_type="ellipse")
    assert child.properties.size.width == 5.0
    assert child.properties.position.y == 2.0

    assert isinstance(inner, GroupShape)
    assert inner.contents[0].properties.style.fill == NoFill()
    assert [c.non_visual.name for c in group.walk()] == ["Child", "Inner", "Grandchild"]


def test_shape_takes_anchor_extent_and_style(anchors):
    shape = anchors[1].content
    assert isinstance(shape, Shape)
    assert shape.text_box is True
    assert shape.non_visual.description == "a label"
    assert shape.properties.size.width == 20.0
    assert shape.properties.size.height == 10.0
    assert shape.properties.style.fill == SolidFill(color="4472c4ff")

    outline = shape.properties.style.outline
    assert outline.width == 2.0
    assert outline.fill == SolidFill(color=DEFAULT_LINE_COLOR)


def test_effects_without_color_are_dropped(anchors):
    effects = anchors[1].content.properties.style.effect.effects
    assert [effect.kind for effect in effects.effects] == ["glow"]
    assert effects.effects[0].color == "ff0000ff"
    assert effects.effects[0].radius == 5.0


def test_text_body(anchors):
    text = anchors[1].content.text
    assert text.text == "Hello"
    run = text.paragraphs[0].runs[0]
    assert run.properties.font_size == 12.0
    assert run.properties.bold is True


def test_embedded_and_linked_pictures(anchors):
    picture = anchors[2].content
    assert isinstance(picture, Picture)
    assert picture.blip_fill.blip.source == InternalImage(name="image1.png", data=PNG)
    assert picture.properties.position.x == 10.0

    linked = anchors[3].content
    assert linked.blip_fill.blip.source == ExternalImage(url="https://example.com/remote.png")


def test_pictures_without_loaded_images_keep_their_name(raw_drawing, relationships):
    anchors = resolve_drawing(raw_drawing, DrawingContext(relationships=relationships))
    assert anchors[2].content.blip_fill.blip.source == InternalImage(name="image1.png")


def test_picture_with_missing_image_part_is_skipped(raw_drawing, relationships):
    anchors = resolve_drawing(raw_drawing, DrawingContext(relationships=relationships, images={}))
    assert len(anchors) == 3
    assert all(not isinstance(anchor.content, Picture) or anchor.content.non_visual.name == "Linked" for anchor in anchors)


def test_outer_shadow_requires_color():
    context = DrawingContext()
    assert resolve_outer_shadow(RawOuterShadow(distance=12700), context) is None
    shadow = resolve_outer_shadow(RawOuterShadow(distance=12700, color=RawSrgbColor(val="000000")), context)
    assert shadow.distance == 1.0
    assert shadow.horizontal_scale == 1.0
    assert shadow.rotate_with_shape is True


def test_camera_preset_rotation_and_perspective():
    camera = resolve_camera(RawCamera(preset="isometricLeftDown"))
    assert camera.preset == PresetCamera.from_string("isometricLeftDown")
    assert (camera.rotation.x, camera.rotation.y, camera.rotation.z) == (45.0, 35.0, 0.0)
    assert camera.perspective == 0.0

    perspective = resolve_camera(RawCamera(preset="perspectiveHeroicExtremeLeftFacing"))
    assert perspective.perspective == 80.0
    assert resolve_camera(RawCamera()) is None


def test_unknown_camera_preset_uses_default():
    assert resolve_camera(RawCamera(preset="notACamera")).preset == PresetCamera.default()


def test_facade_resolves_sheet_drawings(make_excel):
    parts = workbook_parts([("Pictures", sheet_xml('<sheetData/><drawing r:id="rId1"/>'))])
    parts["xl/worksheets/_rels/sheet1.xml.rels"] = relationships_xml([("rId1", "drawing", "../drawings/drawing1.xml")])
    parts["xl/drawings/drawing1.xml"] = DRAWING
    parts["xl/drawings/_rels/drawing1.xml.rels"] = DRAWING_RELS
    parts["xl/media/image1.png"] = PNG

    excel = make_excel(parts)
    anchors = excel.get_drawings(excel.get_sheet_by_name("Pictures"))
    assert len(anchors) == 4
    assert anchors[2].content.blip_fill.blip.source == InternalImage(name="image1.png", data=PNG)

    sheet = excel.get_worksheet(excel.get_sheet_by_name("Pictures"), include_drawings=False)
    assert sheet.drawings == []


def test_facade_skips_image_bytes_when_disabled(make_excel, monkeypatch):
    monkeypatch.setattr("config.XLSX_LOAD_IMAGES", False)
    parts = workbook_parts([("Pictures", sheet_xml('<sheetData/><drawing r:id="rId1"/>'))])
    parts["xl/worksheets/_rels/sheet1.xml.rels"] = relationships_xml([("rId1", "drawing", "../drawings/drawing1.xml")])
    parts["xl/drawings/drawing1.xml"] = DRAWING
    parts["xl/drawings/_rels/drawing1.xml.rels"] = DRAWING_RELS

    excel = make_excel(parts)
    anchors = excel.get_drawings(excel.get_sheet_by_name("Pictures"))
    assert anchors[2].content.blip_fill.blip.source == InternalImage(name="image1.png")
