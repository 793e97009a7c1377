import math

import pytest

from utils.conversions import to_bool, to_float, to_int


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-7", -7), ("+3", 3), (" 12 ", 12), ("50%", 50000), ("12.5%", 12500)],
)
def test_to_int_accepts_decimal_integers(text, expected):
    assert to_int(text) == expected


@pytest.mark.parametrize("text", ["1_000", "1.5", "0x1f", "１２", "", "--1", "inf%", "1_0%", None])
def test_to_int_rejects_everything_else(text):
    assert to_int(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [("1", 1.0), ("-2.5", -2.5), ("1.", 1.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-1", 0.25), ("+4", 4.0)],
)
def test_to_float_accepts_plain_notation(text, expected):
    assert to_float(text) == expected


def test_to_float_special_values():
    assert to_float("inf") == math.inf
    assert to_float("-Infinity") == -math.inf
    assert math.isnan(to_float("NaN"))


@pytest.mark.parametrize("text", ["1_000", "1,5", "0x10", "1e", "e5", ".", "١٢", "12abc", None])
def test_to_float_rejects_everything_else(text):
    assert to_float(text) is None


@pytest.mark.parametrize("text, expected", [("1", True), ("true", True), ("0", False), ("False", False), ("yes", None)])
def test_to_bool(text, expected):
    assert to_bool(text) is expected
