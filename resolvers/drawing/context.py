from __future__ import annotations

import logging
import posixpath
from typing import Dict, Optional, Union

from dto.drawing.fill import ExternalImage, InternalImage
from opc.relationships import Relationships
from raw.drawing.color import RawColorChoice
from raw.drawing.theme import RawColorScheme, RawTheme
from raw.spreadsheet.workbook import RawWorkbook
from resolvers.colors import drawing_color_to_hex

logger = logging.getLogger(__name__)


class DrawingContext:
    """
    Read-only tables shared by every node of one drawing part.

    ``images`` maps relationship ids to the bytes of the image parts they
    target.  ``None`` means images were not loaded: internal pictures then
    resolve with empty data instead of being dropped.
    """

    def __init__(
        self,
        relationships: Optional[Relationships] = None,
        theme: Optional[RawTheme] = None,
        images: Optional[Dict[str, bytes]] = None,
        workbook: Optional[RawWorkbook] = None,
    ) -> None:
        self.relationships = relationships or Relationships()
        self.theme = theme
        self.images = {key.lower(): value for key, value in images.items()} if images is not None else None
        self.workbook = workbook

    @property
    def color_scheme(self) -> Optional[RawColorScheme]:
        return self.theme.color_scheme if self.theme else None

    def color(self, color: Optional[RawColorChoice], ref_color: Optional[str] = None) -> Optional[str]:
        return drawing_color_to_hex(color, self.color_scheme, ref_color)

    def image(self, rel_id: Optional[str]) -> Optional[Union[InternalImage, ExternalImage]]:
        relationship = self.relationships.rel_for_id(rel_id)
        if relationship is None:
            logger.debug("Unresolvable image relationship %r", rel_id)
            return None
        if relationship.external:
            return ExternalImage(url=relationship.target)
        name = posixpath.basename(relationship.target)
        if self.images is None:
            return InternalImage(name=name)
        data = self.images.get(relationship.rel_id.lower())
        if data is None:
            logger.debug("Image part %s is missing from the package", relationship.target)
            return None
        return InternalImage(name=name, data=data)
