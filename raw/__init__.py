"""
Raw OOXML nodes.

A raw node mirrors one XML element: attributes become optional typed
fields, child elements become nested raw nodes.  Nothing is resolved at
this layer; see ``resolvers`` for that.
"""

from raw.cursor import EOF, End, Start, Text, XmlCursor
from raw.node import RawNode, XmlEnum

__all__ = [
    "EOF",
    "End",
    "RawNode",
    "Start",
    "Text",
    "XmlCursor",
    "XmlEnum",
]
