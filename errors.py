"""
Exceptions raised for hard parse failures.

Everything here means the package is corrupt or breaks a structural
rule of the schema, so there is no safe default to substitute.
Cosmetic gaps (unknown enum tokens, missing style ids, unparseable
attributes) never raise; callers get the documented default instead.
"""

from __future__ import annotations

from typing import Optional


class XlsxError(Exception):
    """Base class for every error raised while reading a workbook."""


class XmlSyntaxError(XlsxError):
    """Malformed markup or an undecodable byte sequence inside a part."""

    def __init__(self, part: str, detail: str) -> None:
        self.part = part
        self.detail = detail
        super().__init__(f"malformed xml in `{part}`: {detail}")


class UnexpectedEndOfFile(XlsxError):
    """The event stream ended before the closing tag of ``tag``."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"unexpected end of file at `<{tag}>`")


class MissingAttributeError(XlsxError):
    def __init__(self, tag: str, attribute: str) -> None:
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"`<{tag}>` is missing required attribute `{attribute}`")


class InvalidCellValueError(XlsxError):
    """A ``<c>`` element whose value cannot be interpreted."""

    def __init__(self, coordinate: Optional[str], reason: str) -> None:
        self.coordinate = coordinate
        self.reason = reason
        super().__init__(f"invalid value in cell `{coordinate or '?'}` at `<c>`: {reason}")


class SharedStringIndexError(InvalidCellValueError):
    def __init__(self, coordinate: Optional[str], index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            coordinate,
            f"shared string index {index} out of range (table has {length} items)",
        )


class PartNotFoundError(XlsxError):
    """A part the caller explicitly asked for is not in the archive."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"part `{path}` not found in package")


class SheetNotFoundError(XlsxError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"sheet {key!r} not found in workbook")


class InvalidSheetError(XlsxError):
    """A ``<sheet>`` entry that cannot be mapped to a sheet descriptor."""
