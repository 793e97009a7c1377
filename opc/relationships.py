"""
Relationship parts (``_rels/*.rels``) and target resolution.

Targets are normalized to archive paths on load:

    /xl/media/image1.png  -> xl/media/image1.png
    /media/image1.png     -> xl/media/image1.png
    worksheets/sheet1.xml -> xl/worksheets/sheet1.xml   (workbook rels)
    ../drawings/d1.xml    -> xl/drawings/d1.xml         (xl/worksheets/_rels/sheet1.xml.rels)
"""

from __future__ import annotations

import logging
import posixpath
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from raw.node import RawNode
from utils.conversions import to_str

logger = logging.getLogger(__name__)

WORKBOOK_PART = "xl/workbook.xml"
WORKBOOK_RELS_PART = "xl/_rels/workbook.xml.rels"

# Relationship type suffixes; a relationship type matches when it ends with one, ignoring case.
SHARED_STRINGS = "/sharedStrings"
STYLES = "/styles"
THEME = "/theme"
DRAWING = "/drawing"
IMAGE = "/image"
HYPERLINK = "/hyperlink"
TABLE = "/table"
CHART = "/chart"


class RawRelationship(RawNode):
    TAG = "Relationship"
    ATTRIBUTES = {
        "Id": ("rel_id", to_str),
        "Type": ("rel_type", to_str),
        "Target": ("target", to_str),
        "TargetMode": ("target_mode", to_str),
    }

    rel_id: Optional[str] = None
    rel_type: Optional[str] = None
    target: Optional[str] = None
    target_mode: Optional[str] = None

    @property
    def is_external(self) -> bool:
        return (self.target_mode or "").lower() == "external"


class RawRelationships(RawNode):
    TAG = "Relationships"
    CHILDREN = {"Relationship": ("items", RawRelationship.load, True)}

    items: List[RawRelationship] = []


def rels_path_for(part_path: str) -> str:
    """``xl/worksheets/sheet1.xml`` -> ``xl/worksheets/_rels/sheet1.xml.rels``."""
    folder, _, name = part_path.lstrip("/").rpartition("/")
    return f"{folder}/_rels/{name}.rels" if folder else f"_rels/{name}.rels"


def normalize_target(target: str, base_folder: str = "xl") -> str:
    if target.startswith("#"):
        # in-workbook location, not a part
        return target
    if target.startswith("/xl/"):
        return target[1:]
    if target.startswith("xl/"):
        return target
    if target.startswith("/"):
        return "xl" + target
    return posixpath.normpath(posixpath.join(base_folder, target))


class Relationship(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel_id: str
    rel_type: str
    target: str
    external: bool = False


class Relationships:
    """Relationships declared by one part, with targets already normalized."""

    def __init__(self, items: Optional[List[Relationship]] = None) -> None:
        self.items: List[Relationship] = items or []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @classmethod
    def from_xml(cls, data: Optional[bytes], part_path: str = WORKBOOK_PART) -> "Relationships":
        """
        Load a ``.rels`` part belonging to ``part_path``.

        Missing data yields an empty set; entries lacking an id, type or
        target are dropped.
        """
        if data is None:
            return cls()
        base_folder = posixpath.dirname(part_path.lstrip("/")) or "xl"
        raw = RawRelationships.from_xml(data, rels_path_for(part_path))
        items = []
        for rel in raw.items:
            if rel.rel_id is None or rel.rel_type is None or rel.target is None:
                logger.debug("Dropping incomplete relationship in %s: %r", part_path, rel)
                continue
            target = rel.target if rel.is_external else normalize_target(rel.target, base_folder)
            items.append(
                Relationship(rel_id=rel.rel_id, rel_type=rel.rel_type, target=target, external=rel.is_external)
            )
        return cls(items)

    # ------------------------------------------------------------------

    def rel_for_id(self, rel_id: Optional[str]) -> Optional[Relationship]:
        if rel_id is None:
            return None
        key = rel_id.lower()
        for rel in self.items:
            if rel.rel_id.lower() == key:
                return rel
        return None

    def raw_target_for_id(self, rel_id: Optional[str]) -> Optional[str]:
        """Target for ``rel_id`` whether internal (archive path) or external (URL)."""
        rel = self.rel_for_id(rel_id)
        return rel.target if rel else None

    def zip_path_for_id(self, rel_id: Optional[str]) -> Optional[str]:
        """Archive path for ``rel_id``; ``None`` when unknown or external."""
        rel = self.rel_for_id(rel_id)
        if rel is None:
            return None
        if rel.external:
            return None
        return rel.target

    def zip_path_for_type(self, rel_type: str) -> List[str]:
        """Archive paths of the internal relationships whose type ends with ``rel_type``."""
        suffix = rel_type.lower()
        return [rel.target for rel in self.items if not rel.external and rel.rel_type.lower().endswith(suffix)]
