"""
Scalar coercion for attribute values and DrawingML unit conversions.

All parsers are lenient: a value that does not parse returns ``None`` so the
caller treats the attribute as absent.
"""

from __future__ import annotations

import math
import re
from typing import Optional

INTEGER = re.compile(r"[+-]?[0-9]+")
DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

EMU_PER_POINT = 12700
ANGLE_UNITS_PER_DEGREE = 60000
PERCENTAGE_UNITS = 100000
TEXT_POINT_UNITS = 100


def to_bool(value: Optional[str]) -> Optional[bool]:
    """``"1"``/``"true"`` and ``"0"``/``"false"``; anything else is ``None``."""
    if value is None:
        return None
    token = value.strip().lower()
    if token in ("1", "true", "on"):
        return True
    if token in ("0", "false", "off"):
        return False
    return None


def to_int(value: Optional[str]) -> Optional[int]:
    """
    Locale-free integer parse.

    DrawingML percentages are occasionally written as ``"50%"`` instead of
    thousandths of a percent; those are scaled to the integer form
    (``"50%"`` -> ``50000``).
    """
    if value is None:
        return None
    text = value.strip()
    if text.endswith("%"):
        percent = to_float(text[:-1])
        if percent is None or not math.isfinite(percent):
            return None
        return int(round(percent * 1000))
    if not INTEGER.fullmatch(text):
        return None
    return int(text)


def to_float(value: Optional[str]) -> Optional[float]:
    """Plain decimal or exponent notation, or ``inf``/``nan``; no digit separators."""
    if value is None:
        return None
    text = value.strip()
    if not DECIMAL.fullmatch(text):
        return None
    return float(text)


def to_str(value: Optional[str]) -> Optional[str]:
    return value


# ---- DrawingML units --------------------------------------------------------


def emu_to_pt(emu: int) -> float:
    return emu / EMU_PER_POINT


def angle_to_degree(angle: int) -> float:
    """ST_Angle is expressed in 60,000ths of a degree."""
    return angle / ANGLE_UNITS_PER_DEGREE


def percentage_to_float(percentage: int) -> float:
    """ST_Percentage (thousandths of a percent) to a 0..1 ratio."""
    return percentage / PERCENTAGE_UNITS


def text_point_to_pt(value: int) -> float:
    """ST_TextPoint is expressed in hundredths of a point."""
    return value / TEXT_POINT_UNITS
