import pytest

from raw.drawing.color import RawColorTransform, RawSchemeColor, RawSrgbColor, RawSystemColor
from raw.drawing.theme import RawTheme
from raw.spreadsheet.stylesheet import RawColor, RawStyleSheet, RawStylesheetColors
from resolvers.colors import drawing_color_to_hex, stylesheet_color_to_hex
from tests.conftest import DRAWING_NS, styles_xml
from utils.colors import apply_tint, argb_to_rgba_hex, normalize_hex

THEME = f"""
<a:theme xmlns:a="{DRAWING_NS}" name="Test">
  <a:themeElements>
    <a:clrScheme name="Test">
      <a:dk1><a:sysClr val="windowText" lastClr="111111"/></a:dk1>
      <a:lt1><a:srgbClr val="FEFEFE"/></a:lt1>
      <a:dk2><a:srgbClr val="222222"/></a:dk2>
      <a:lt2><a:srgbClr val="EEEEEE"/></a:lt2>
      <a:accent1><a:srgbClr val="FF0000"/></a:accent1>
      <a:accent2><a:srgbClr val="00FF00"/></a:accent2>
      <a:accent3><a:srgbClr val="0000FF"/></a:accent3>
      <a:accent4><a:srgbClr val="FFFF00"/></a:accent4>
      <a:accent5><a:srgbClr val="00FFFF"/></a:accent5>
      <a:accent6><a:srgbClr val="FF00FF"/></a:accent6>
      <a:hlink><a:srgbClr val="0563C1"/></a:hlink>
      <a:folHlink><a:srgbClr val="954F72"/></a:folHlink>
    </a:clrScheme>
  </a:themeElements>
</a:theme>
"""


@pytest.fixture
def color_scheme():
    return RawTheme.from_xml(THEME.encode()).color_scheme


# ---- hex helpers ----


def test_normalize_hex():
    assert normalize_hex("#FF0000") == "ff0000ff"
    assert normalize_hex("12345678") == "12345678"
    assert normalize_hex("12_45678") is None
    assert normalize_hex("red") is None


def test_argb_moves_alpha_last():
    assert argb_to_rgba_hex("80FF0000") == "ff000080"


def test_tint_lightens_and_darkens():
    assert apply_tint("000000ff", 0.5) == "808080ff"
    assert apply_tint("ffffffff", -0.5) == "808080ff"
    assert apply_tint("123456ff", 0.0) == "123456ff"


# ---- stylesheet colors ----


def test_stylesheet_rgb():
    assert stylesheet_color_to_hex(RawColor(rgb="FFFF0000")) == "ff0000ff"


def test_stylesheet_default_palette():
    assert stylesheet_color_to_hex(RawColor(indexed=2)) == "ff0000ff"
    assert stylesheet_color_to_hex(RawColor(indexed=500)) is None


def test_stylesheet_custom_palette_replaces_default():
    palette = RawStylesheetColors(indexed_colors=["FF123456", "FFABCDEF"])
    assert stylesheet_color_to_hex(RawColor(indexed=1), palette) == "abcdefff"


@pytest.mark.parametrize(
    "indexed_colors, index, expected",
    [
        (["FF123456"], 2, "ff0000ff"),
        (["FF123456"], 64, "000000ff"),
        (["FF123456", None], 1, "ffffffff"),
        (["FF123456", "not a color"], 1, "ffffffff"),
        (["FF123456"], 500, None),
    ],
)
def test_stylesheet_short_custom_palette_falls_back_to_default(indexed_colors, index, expected):
    palette = RawStylesheetColors(indexed_colors=indexed_colors)
    assert stylesheet_color_to_hex(RawColor(indexed=index), palette) == expected


def test_stylesheet_custom_palette_from_xml():
    styles = RawStyleSheet.from_xml(
        styles_xml('<colors><indexedColors><rgbColor rgb="FF123456"/></indexedColors></colors>').encode()
    )
    assert stylesheet_color_to_hex(RawColor(indexed=0), styles.colors) == "123456ff"
    assert stylesheet_color_to_hex(RawColor(indexed=2), styles.colors) == "ff0000ff"


def test_stylesheet_empty_theme_slot_does_not_fall_through():
    scheme = RawTheme.from_xml(
        f'<a:theme xmlns:a="{DRAWING_NS}"><a:themeElements><a:clrScheme name="Bare"/></a:themeElements></a:theme>'.encode()
    ).color_scheme
    color = RawColor(theme=4, rgb="FF00FF00")
    assert stylesheet_color_to_hex(color, None, scheme) is None


def test_stylesheet_theme_wins_over_rgb(color_scheme):
    color = RawColor(theme=4, rgb="FF000000")
    assert stylesheet_color_to_hex(color, None, color_scheme) == "ff0000ff"


def test_stylesheet_theme_without_scheme_uses_rgb():
    assert stylesheet_color_to_hex(RawColor(theme=4, rgb="FF00FF00")) == "00ff00ff"


def test_stylesheet_tint_applies_after_lookup(color_scheme):
    color = RawColor(theme=0, tint=-0.5)
    assert stylesheet_color_to_hex(color, None, color_scheme) == apply_tint("fefefeff", -0.5)


# ---- drawing colors ----


def test_srgb_with_alpha():
    color = RawSrgbColor(val="FF0000", transforms=[RawColorTransform(name="alpha", value=50000)])
    assert drawing_color_to_hex(color) == "ff000080"


def test_transforms_apply_in_order():
    first = RawSrgbColor(
        val="808080",
        transforms=[RawColorTransform(name="inv"), RawColorTransform(name="red", value=0)],
    )
    assert drawing_color_to_hex(first) == "007f7fff"


def test_system_color_prefers_last_color():
    assert drawing_color_to_hex(RawSystemColor(val="window", last_color="ABCDEF")) == "abcdefff"


def test_scheme_aliases(color_scheme):
    assert drawing_color_to_hex(RawSchemeColor(val="tx1"), color_scheme) == "111111ff"
    assert drawing_color_to_hex(RawSchemeColor(val="bg1"), color_scheme) == "fefefeff"


def test_scheme_without_theme_uses_office_defaults():
    assert drawing_color_to_hex(RawSchemeColor(val="accent1")) == "4472c4ff"


def test_placeholder_takes_reference_color():
    assert drawing_color_to_hex(RawSchemeColor(val="phClr"), None, "336699ff") == "336699ff"
    assert drawing_color_to_hex(RawSchemeColor(val="phClr")) is None


def test_followed_hyperlink_slot(color_scheme):
    assert drawing_color_to_hex(RawSchemeColor(val="folHlink"), color_scheme) == "954f72ff"
    assert stylesheet_color_to_hex(RawColor(theme=11), None, color_scheme) == "954f72ff"
