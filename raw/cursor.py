"""
Forward-only XML event stream over a single package part.

Built on ``lxml.etree.XMLPullParser``: bytes are fed in chunks and each
parsed element is released as soon as its end tag has been reported, so a
large ``sheetData`` never has to sit in memory as a tree.

Events::

    Start(tag, attrs)   opening tag, namespace prefixes stripped
    Text(text)          character data of the element about to close
    End(tag)            closing tag
    EOF                 the stream is exhausted

Text is reported once per element, right before its ``End``.  OOXML text
elements (``<t>``, ``<v>``, ``<f>``) carry no mixed content, so tail text
between sibling elements is not reported.
"""

from __future__ import annotations

import io
import logging
from collections import deque
from typing import IO, Deque, Dict, Iterator, NamedTuple, Union

from lxml import etree

from config import XLSX_READ_CHUNK_SIZE
from errors import UnexpectedEndOfFile, XmlSyntaxError

logger = logging.getLogger(__name__)


class Start(NamedTuple):
    tag: str
    attrs: Dict[str, str]


class Text(NamedTuple):
    text: str


class End(NamedTuple):
    tag: str


class _Eof:
    def __repr__(self) -> str:
        return "EOF"


EOF = _Eof()

Event = Union[Start, Text, End, _Eof]


def local_name(name: str) -> str:
    """``"{http://...}sheetData"`` -> ``"sheetData"``."""
    return name.rpartition("}")[2]


class XmlCursor:
    """
    Pull-based cursor over one part.

    ``source`` is either the part's bytes or a binary file-like object.  The
    cursor is owned by a single load call and is never shared.
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, IO[bytes]],
        part_name: str = "<memory>",
        chunk_size: int = XLSX_READ_CHUNK_SIZE,
    ) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        self.part_name = part_name
        self._stream = source
        self._chunk_size = max(1, chunk_size)
        self._parser = etree.XMLPullParser(
            events=("start", "end"),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            huge_tree=True,
        )
        self._pending: Deque[Event] = deque()
        self._finished = False

    def __iter__(self) -> Iterator[Event]:
        while True:
            event = self.next()
            yield event
            if event is EOF:
                return

    def next(self) -> Event:
        while not self._pending:
            if self._finished:
                return EOF
            self._pump()
        return self._pending.popleft()

    def skip_subtree(self, tag: str) -> None:
        """Discard everything up to the ``End`` matching an already consumed ``Start(tag)``."""
        depth = 1
        while True:
            event = self.next()
            if event is EOF:
                raise UnexpectedEndOfFile(tag)
            if isinstance(event, Start):
                depth += 1
            elif isinstance(event, End):
                depth -= 1
                if depth == 0:
                    return

    # ---- internals ----

    def _pump(self) -> None:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._finished = True
            try:
                self._parser.close()
            except etree.XMLSyntaxError as exc:
                # Truncated input: the loader that is still open reports
                # the tag it was reading once it sees EOF.
                logger.debug("Part %s ended early: %s", self.part_name, exc)
            self._drain()
            return
        try:
            self._parser.feed(chunk)
        except etree.XMLSyntaxError as exc:
            raise XmlSyntaxError(self.part_name, str(exc)) from exc
        self._drain()

    def _drain(self) -> None:
        for action, element in self._parser.read_events():
            if action == "start":
                attrs = {local_name(key): value for key, value in element.attrib.items()}
                self._pending.append(Start(local_name(element.tag), attrs))
                continue
            if element.text:
                self._pending.append(Text(element.text))
            self._pending.append(End(local_name(element.tag)))
            element.clear(keep_tail=True)
            parent = element.getparent()
            if parent is not None:
                while element.getprevious() is not None:
                    del parent[0]
