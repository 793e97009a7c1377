"""Open Packaging Conventions: zip part access and relationship parts."""

from opc.archive import Archive
from opc.relationships import Relationship, Relationships

__all__ = ["Archive", "Relationship", "Relationships"]
