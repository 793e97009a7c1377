"""
Resolved DrawingML fills.

``grpFill`` never survives resolution: it is replaced by the parent
group's fill, so ``Fill`` only holds concrete kinds.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import ConfigDict

from dto.base import Entity
from dto.drawing.enums import BlipCompression, PathShade, PresetPattern, RectangleAlignment, TileFlip
from dto.drawing.image_effect import ImageEffect

DEFAULT_PATTERN_FOREGROUND = "a02b93ff"
DEFAULT_PATTERN_BACKGROUND = "ffffffff"
DEFAULT_STOP_COLOR = "00000000"


class FillRectangle(Entity):
    """Insets from each edge as fractions of the bounding box."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


class NoFill(Entity):
    kind: Literal["no_fill"] = "no_fill"


class SolidFill(Entity):
    kind: Literal["solid"] = "solid"
    color: str


# ---- gradients ----


class GradientStop(Entity):
    position: float
    color: str = DEFAULT_STOP_COLOR


class LinearShade(Entity):
    angle: float = 0.0
    scale_with_fill: bool = False


class PathGradientShade(Entity):
    path: PathShade = PathShade.SHAPE
    fill_to_rect: FillRectangle = FillRectangle()


class GradientFill(Entity):
    kind: Literal["gradient"] = "gradient"
    stops: List[GradientStop] = []
    linear: Optional[LinearShade] = None
    path: Optional[PathGradientShade] = None
    tile_rect: FillRectangle = FillRectangle()
    flip: TileFlip = TileFlip.NONE
    rotate_with_shape: bool = False


# ---- patterns ----


class PatternFill(Entity):
    kind: Literal["pattern"] = "pattern"
    preset: PresetPattern = PresetPattern.default()
    foreground_color: str = DEFAULT_PATTERN_FOREGROUND
    background_color: str = DEFAULT_PATTERN_BACKGROUND


# ---- pictures ----


class InternalImage(Entity):
    """Image stored in the package; ``name`` is the part's file name."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    kind: Literal["internal"] = "internal"
    name: str
    data: bytes = b""


class ExternalImage(Entity):
    kind: Literal["external"] = "external"
    url: str


class Blip(Entity):
    source: Union[InternalImage, ExternalImage]
    compression_state: BlipCompression = BlipCompression.NONE
    effects: List[ImageEffect] = []


class Tile(Entity):
    alignment: RectangleAlignment = RectangleAlignment.CENTER
    flip: TileFlip = TileFlip.NONE
    horizontal_ratio: float = 1.0
    vertical_ratio: float = 1.0
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0


class BlipFill(Entity):
    """
    Picture fill.  Exactly one of ``stretch`` and ``tile`` is set; a
    ``<blipFill>`` naming neither stretches over the whole box.
    """

    kind: Literal["blip"] = "blip"
    blip: Optional[Blip] = None
    source_rect: FillRectangle = FillRectangle()
    stretch: Optional[FillRectangle] = None
    tile: Optional[Tile] = None
    dpi: int = 0
    rotate_with_shape: bool = False


Fill = Union[NoFill, SolidFill, GradientFill, PatternFill, BlipFill]
