"""
Declarative raw loaders.

Every raw node is a frozen pydantic model that describes how it maps onto
its XML element::

    class RawFont(RawNode):
        TAG = "font"
        ATTRIBUTES = {"name": ("name", to_str)}
        CHILDREN = {"sz": ("size", val_of(to_float), False)}

        name: Optional[str] = None
        size: Optional[float] = None

``RawNode.load`` runs the shared control loop: convert known attributes,
dispatch child start tags to their loaders, skip anything unknown
(``extLst`` most of all) and stop at the element's own end tag.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import IO, Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from errors import MissingAttributeError, UnexpectedEndOfFile
from raw.cursor import EOF, End, Start, Text, XmlCursor
from utils.conversions import to_bool

logger = logging.getLogger(__name__)

Loader = Callable[[XmlCursor, Start], Any]
Converter = Callable[[str], Any]

T = TypeVar("T", bound="RawNode")
E = TypeVar("E", bound="XmlEnum")


class XmlEnum(str, Enum):
    """
    Closed set of OOXML string tokens.

    Unknown tokens decode to ``default()`` instead of failing.
    """

    @classmethod
    def default(cls: Type[E]) -> E:
        return next(iter(cls))

    @classmethod
    def from_string(cls: Type[E], token: Optional[str]) -> E:
        if token is None:
            return cls.default()
        try:
            return cls(token)
        except ValueError:
            return cls.default()


class RawNode(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    TAG: ClassVar[str] = ""
    # xml attribute name -> (field name, converter)
    ATTRIBUTES: ClassVar[Dict[str, Tuple[str, Converter]]] = {}
    # child tag -> (field name, loader, repeated)
    CHILDREN: ClassVar[Dict[str, Tuple[str, Loader, bool]]] = {}
    TEXT: ClassVar[Optional[str]] = None
    REQUIRED: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def load(cls: Type[T], cursor: XmlCursor, start: Start) -> T:
        values: Dict[str, Any] = {}
        for name, raw in start.attrs.items():
            spec = cls.ATTRIBUTES.get(name)
            if spec is None:
                continue
            field, convert = spec
            value = convert(raw)
            if value is not None:
                values[field] = value
        for name in cls.REQUIRED:
            if name not in start.attrs:
                raise MissingAttributeError(start.tag, name)

        text: List[str] = []
        while True:
            event = cursor.next()
            if isinstance(event, Start):
                child = cls.CHILDREN.get(event.tag)
                if child is None:
                    logger.debug("Skipping <%s> inside <%s>", event.tag, start.tag)
                    cursor.skip_subtree(event.tag)
                    continue
                field, loader, repeated = child
                value = loader(cursor, event)
                if repeated:
                    values.setdefault(field, []).append(value)
                elif value is not None:
                    values[field] = value
            elif isinstance(event, Text):
                if cls.TEXT is not None:
                    text.append(event.text)
            elif isinstance(event, End):
                break
            else:
                raise UnexpectedEndOfFile(start.tag)

        if cls.TEXT is not None and text:
            values[cls.TEXT] = "".join(text)
        return cls.model_construct(**values)

    @classmethod
    def from_xml(cls: Type[T], source: Union[bytes, IO[bytes]], part_name: str = "<memory>") -> T:
        """Load the part's root element."""
        cursor = XmlCursor(source, part_name)
        while True:
            event = cursor.next()
            if isinstance(event, Start):
                if cls.TAG and event.tag != cls.TAG:
                    logger.warning(
                        "Part %s has root <%s>, expected <%s>", part_name, event.tag, cls.TAG
                    )
                return cls.load(cursor, event)
            if event is EOF:
                raise UnexpectedEndOfFile(cls.TAG or part_name)

    @classmethod
    def as_child(cls, repeated: bool = False, field: Optional[str] = None) -> Tuple[str, Loader, bool]:
        """``CHILDREN`` entry for this node, named after ``TAG`` unless ``field`` is given."""
        return field or cls.TAG, cls.load, repeated


# ---------------------------------------------------------------------------
# Loader helpers
# ---------------------------------------------------------------------------


def children(cursor: XmlCursor, start: Start) -> Iterator[Start]:
    """
    Yield the direct child start tags of ``start``.

    The consumer must load or skip each yielded child before resuming.
    """
    while True:
        event = cursor.next()
        if isinstance(event, Start):
            yield event
        elif isinstance(event, End):
            return
        elif event is EOF:
            raise UnexpectedEndOfFile(start.tag)


def text_content(cursor: XmlCursor, start: Start) -> str:
    """Loader returning the element's text (``""`` for an empty element)."""
    parts: List[str] = []
    while True:
        event = cursor.next()
        if isinstance(event, Text):
            parts.append(event.text)
        elif isinstance(event, Start):
            cursor.skip_subtree(event.tag)
        elif isinstance(event, End):
            return "".join(parts)
        else:
            raise UnexpectedEndOfFile(start.tag)


def list_of(loader: Loader, tag: str) -> Loader:
    """Loader for wrapper elements such as ``<fonts>`` holding repeated ``<font>``."""

    def load(cursor: XmlCursor, start: Start) -> List[Any]:
        items: List[Any] = []
        for event in children(cursor, start):
            if event.tag == tag:
                items.append(loader(cursor, event))
            else:
                cursor.skip_subtree(event.tag)
        return items

    return load


def sequence_of(loaders: Dict[str, Loader]) -> Loader:
    """Like :func:`list_of` for wrappers whose items come in several kinds, kept in document order."""

    def load(cursor: XmlCursor, start: Start) -> List[Any]:
        items: List[Any] = []
        for event in children(cursor, start):
            loader = loaders.get(event.tag)
            if loader is None:
                cursor.skip_subtree(event.tag)
            else:
                items.append(loader(cursor, event))
        return items

    return load


def val_of(convert: Converter, default: Any = None, attribute: str = "val") -> Loader:
    """
    Loader for single-attribute elements like ``<sz val="11"/>``.

    ``default`` is returned when the attribute is missing, which is how
    toggles such as ``<b/>`` mean "on".
    """

    def load(cursor: XmlCursor, start: Start) -> Any:
        raw = start.attrs.get(attribute)
        cursor.skip_subtree(start.tag)
        if raw is None:
            return default
        value = convert(raw)
        return default if value is None else value

    return load


def flag(cursor: XmlCursor, start: Start) -> bool:
    """Loader for toggles: ``<b/>`` and ``<b val="1"/>`` are on, ``<b val="0"/>`` is off."""
    return val_of(to_bool, default=True)(cursor, start)


def present(cursor: XmlCursor, start: Start) -> bool:
    """Loader for marker elements whose presence is all that matters (``<stretch/>``, ``<noFill/>``)."""
    cursor.skip_subtree(start.tag)
    return True


def enum(enum_cls: Type[E]) -> Converter:
    return enum_cls.from_string


def text_of(convert: Converter) -> Loader:
    """Loader for elements carrying a scalar as text, e.g. ``<xdr:col>3</xdr:col>``."""

    def load(cursor: XmlCursor, start: Start) -> Any:
        return convert(text_content(cursor, start))

    return load
