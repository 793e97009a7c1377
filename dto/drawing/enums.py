"""
Closed DrawingML token sets.

Raw drawing nodes keep tokens as plain strings; resolvers decode them here
with ``XmlEnum.from_string``.  The first member of every enum is the value
an unknown or missing token decodes to.  Large sets are generated from
their token lists, member names being the upper snake case of the token
(``flowChartOr`` -> ``FLOW_CHART_OR``).
"""

from __future__ import annotations

import re
from typing import Sequence

from raw.node import XmlEnum

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _token_enum(name: str, tokens: Sequence[str]):
    """Build an ``XmlEnum`` from ``tokens``; ``tokens[0]`` is the default."""
    return XmlEnum(name, [(_CAMEL_BOUNDARY.sub("_", token).upper(), token) for token in tokens])


# ---------------------------------------------------------------------------
# Anchors and shapes
# ---------------------------------------------------------------------------


class EditAs(XmlEnum):
    """How a two-cell anchor follows the cells underneath it."""

    TWO_CELL = "twoCell"
    ONE_CELL = "oneCell"
    ABSOLUTE = "absolute"


class BlackWhiteMode(XmlEnum):
    AUTO = "auto"
    BLACK = "black"
    BLACK_GRAY = "blackGray"
    BLACK_WHITE = "blackWhite"
    CLR = "clr"
    GRAY = "gray"
    GRAY_WHITE = "grayWhite"
    HIDDEN = "hidden"
    INV_GRAY = "invGray"
    LT_GRAY = "ltGray"
    WHITE = "white"


class PathFillMode(XmlEnum):
    NORM = "norm"
    DARKEN = "darken"
    DARKEN_LESS = "darkenLess"
    LIGHTEN = "lighten"
    LIGHTEN_LESS = "lightenLess"
    NONE = "none"


PresetShapeType = _token_enum(
    "PresetShapeType",
    (
        "rect",
        "accentBorderCallout1", "accentBorderCallout2", "accentBorderCallout3",
        "accentCallout1", "accentCallout2", "accentCallout3",
        "actionButtonBackPrevious", "actionButtonBeginning", "actionButtonBlank",
        "actionButtonDocument", "actionButtonEnd", "actionButtonForwardNext",
        "actionButtonHelp", "actionButtonHome", "actionButtonInformation",
        "actionButtonMovie", "actionButtonReturn", "actionButtonSound",
        "arc", "bentArrow", "bentConnector2", "bentConnector3", "bentConnector4",
        "bentConnector5", "bentUpArrow", "bevel", "blockArc", "borderCallout1",
        "borderCallout2", "borderCallout3", "bracePair", "bracketPair", "callout1",
        "callout2", "callout3", "can", "chartPlus", "chartStar", "chartX", "chevron",
        "chord", "circularArrow", "cloud", "cloudCallout", "corner", "cornerTabs",
        "cube", "curvedConnector2", "curvedConnector3", "curvedConnector4",
        "curvedConnector5", "curvedDownArrow", "curvedLeftArrow", "curvedRightArrow",
        "curvedUpArrow", "decagon", "diagStripe", "diamond", "dodecagon", "donut",
        "doubleWave", "downArrow", "downArrowCallout", "ellipse", "ellipseRibbon",
        "ellipseRibbon2", "flowChartAlternateProcess", "flowChartCollate",
        "flowChartConnector", "flowChartDecision", "flowChartDelay",
        "flowChartDisplay", "flowChartDocument", "flowChartExtract",
        "flowChartInputOutput", "flowChartInternalStorage", "flowChartMagneticDisk",
        "flowChartMagneticDrum", "flowChartMagneticTape", "flowChartManualInput",
        "flowChartManualOperation", "flowChartMerge", "flowChartMultidocument",
        "flowChartOfflineStorage", "flowChartOffpageConnector",
        "flowChartOnlineStorage", "flowChartOr", "flowChartPredefinedProcess",
        "flowChartPreparation", "flowChartProcess", "flowChartPunchedCard",
        "flowChartPunchedTape", "flowChartSort", "flowChartSummingJunction",
        "flowChartTerminator", "foldedCorner", "frame", "funnel", "gear6", "gear9",
        "halfFrame", "heart", "heptagon", "hexagon", "homePlate", "horizontalScroll",
        "irregularSeal1", "irregularSeal2", "leftArrow", "leftArrowCallout",
        "leftBrace", "leftBracket", "leftCircularArrow", "leftRightArrow",
        "leftRightArrowCallout", "leftRightCircularArrow", "leftRightRibbon",
        "leftRightUpArrow", "leftUpArrow", "lightningBolt", "line", "lineInv",
        "mathDivide", "mathEqual", "mathMinus", "mathMultiply", "mathNotEqual",
        "mathPlus", "moon", "nonIsoscelesTrapezoid", "noSmoking", "notchedRightArrow",
        "octagon", "parallelogram", "pentagon", "pie", "pieWedge", "plaque",
        "plaqueTabs", "plus", "quadArrow", "quadArrowCallout", "ribbon", "ribbon2",
        "rightArrow", "rightArrowCallout", "rightBrace", "rightBracket", "rtTriangle",
        "round1Rect", "round2DiagRect", "round2SameRect", "roundRect", "smileyFace",
        "snip1Rect", "snip2DiagRect", "snip2SameRect", "snipRoundRect", "squareTabs",
        "star10", "star12", "star16", "star24", "star32", "star4", "star5", "star6",
        "star7", "star8", "straightConnector1", "stripedRightArrow", "sun",
        "swooshArrow", "teardrop", "trapezoid", "triangle", "upArrow",
        "upArrowCallout", "upDownArrow", "upDownArrowCallout", "uturnArrow",
        "verticalScroll", "wave", "wedgeEllipseCallout", "wedgeRectCallout",
        "wedgeRoundRectCallout",
    ),
)


# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------


class RectangleAlignment(XmlEnum):
    CENTER = "ctr"
    BOTTOM = "b"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"


class TileFlip(XmlEnum):
    NONE = "none"
    X = "x"
    Y = "y"
    XY = "xy"


class PathShade(XmlEnum):
    SHAPE = "shape"
    CIRCLE = "circle"
    RECT = "rect"


class BlipCompression(XmlEnum):
    NONE = "none"
    EMAIL = "email"
    HQPRINT = "hqprint"
    PRINT = "print"
    SCREEN = "screen"


PresetPattern = _token_enum(
    "PresetPattern",
    (
        "pct5", "pct10", "pct20", "pct25", "pct30", "pct40", "pct50", "pct60",
        "pct70", "pct75", "pct80", "pct90", "cross", "dkDnDiag", "dkHorz",
        "dkUpDiag", "dkVert", "dashDnDiag", "dashHorz", "dashUpDiag", "dashVert",
        "diagBrick", "diagCross", "divot", "dotGrid", "dotDmnd", "dnDiag", "horz",
        "horzBrick", "lgCheck", "lgConfetti", "lgGrid", "ltDnDiag", "ltHorz",
        "ltUpDiag", "ltVert", "narHorz", "narVert", "openDmnd", "plaid", "shingle",
        "smCheck", "smConfetti", "smGrid", "solidDmnd", "sphere", "trellis",
        "upDiag", "vert", "wave", "weave", "wdDnDiag", "wdUpDiag", "zigZag",
    ),
)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


class PenAlignment(XmlEnum):
    CENTER = "ctr"
    INSET = "in"


class CompoundLine(XmlEnum):
    SINGLE = "sng"
    DOUBLE = "dbl"
    THICK_THIN = "thickThin"
    THIN_THICK = "thinThick"
    TRIPLE = "tri"


class LineCap(XmlEnum):
    SQUARE = "sq"
    FLAT = "flat"
    ROUND = "rnd"


class LineEndType(XmlEnum):
    NONE = "none"
    ARROW = "arrow"
    DIAMOND = "diamond"
    OVAL = "oval"
    STEALTH = "stealth"
    TRIANGLE = "triangle"


class LineEndSize(XmlEnum):
    """Width or length of a line end decoration."""

    MEDIUM = "med"
    LARGE = "lg"
    SMALL = "sm"


class PresetLineDash(XmlEnum):
    SOLID = "solid"
    DASH = "dash"
    DASH_DOT = "dashDot"
    DOT = "dot"
    LG_DASH = "lgDash"
    LG_DASH_DOT = "lgDashDot"
    LG_DASH_DOT_DOT = "lgDashDotDot"
    SYS_DASH = "sysDash"
    SYS_DASH_DOT = "sysDashDot"
    SYS_DASH_DOT_DOT = "sysDashDotDot"
    SYS_DOT = "sysDot"


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


class BlendMode(XmlEnum):
    OVER = "over"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    MULTIPLY = "mult"
    SCREEN = "screen"


class EffectContainerType(XmlEnum):
    TREE = "tree"
    SIBLING = "sib"


class EffectReference(XmlEnum):
    """``<effect ref>`` names that are not a container name."""

    FILL = "fill"
    LINE = "line"
    FILL_LINE = "fillLine"
    CHILDREN = "children"


# ``prstShdw prst`` token -> preset name.
PresetShadowType = XmlEnum(
    "PresetShadowType",
    [
        ("TOP_LEFT_DROP_SHADOW", "shdw1"),
        ("TOP_RIGHT_DROP_SHADOW", "shdw2"),
        ("BACK_LEFT_PERSPECTIVE_SHADOW", "shdw3"),
        ("BACK_RIGHT_PERSPECTIVE_SHADOW", "shdw4"),
        ("BOTTOM_LEFT_DROP_SHADOW", "shdw5"),
        ("BOTTOM_RIGHT_DROP_SHADOW", "shdw6"),
        ("FRONT_LEFT_PERSPECTIVE_SHADOW", "shdw7"),
        ("FRONT_RIGHT_PERSPECTIVE_SHADOW", "shdw8"),
        ("TOP_LEFT_SMALL_DROP_SHADOW", "shdw9"),
        ("TOP_LEFT_LARGE_DROP_SHADOW", "shdw10"),
        ("BACK_LEFT_LONG_PERSPECTIVE_SHADOW", "shdw11"),
        ("BACK_RIGHT_LONG_PERSPECTIVE_SHADOW", "shdw12"),
        ("TOP_LEFT_DOUBLE_DROP_SHADOW", "shdw13"),
        ("BOTTOM_RIGHT_SMALL_DROP_SHADOW", "shdw14"),
        ("FRONT_LEFT_LONG_PERSPECTIVE_SHADOW", "shdw15"),
        ("FRONT_RIGHT_LONG_PERSPECTIVE_SHADOW", "shdw16"),
        ("THREE_DIMENSIONAL_OUTER_BOX_SHADOW", "shdw17"),
        ("THREE_DIMENSIONAL_INNER_BOX_SHADOW", "shdw18"),
        ("BACK_CENTER_PERSPECTIVE_SHADOW", "shdw19"),
        ("FRONT_BOTTOM_SHADOW", "shdw20"),
    ],
)


# ---------------------------------------------------------------------------
# Scene and 3-D
# ---------------------------------------------------------------------------


PresetCamera = _token_enum(
    "PresetCamera",
    (
        "orthographicFront",
        "isometricBottomDown", "isometricBottomUp", "isometricLeftDown",
        "isometricLeftUp", "isometricOffAxis1Left", "isometricOffAxis1Right",
        "isometricOffAxis1Top", "isometricOffAxis2Left", "isometricOffAxis2Right",
        "isometricOffAxis2Top", "isometricOffAxis3Bottom", "isometricOffAxis3Left",
        "isometricOffAxis3Right", "isometricOffAxis4Bottom", "isometricOffAxis4Left",
        "isometricOffAxis4Right", "isometricRightDown", "isometricRightUp",
        "isometricTopDown", "isometricTopUp", "legacyObliqueBottom",
        "legacyObliqueBottomLeft", "legacyObliqueBottomRight", "legacyObliqueFront",
        "legacyObliqueLeft", "legacyObliqueRight", "legacyObliqueTop",
        "legacyObliqueTopLeft", "legacyObliqueTopRight", "legacyPerspectiveBottom",
        "legacyPerspectiveBottomLeft", "legacyPerspectiveBottomRight",
        "legacyPerspectiveFront", "legacyPerspectiveLeft", "legacyPerspectiveRight",
        "legacyPerspectiveTop", "legacyPerspectiveTopLeft",
        "legacyPerspectiveTopRight", "obliqueBottom", "obliqueBottomLeft",
        "obliqueBottomRight", "obliqueLeft", "obliqueRight", "obliqueTop",
        "obliqueTopLeft", "obliqueTopRight", "perspectiveAbove",
        "perspectiveAboveLeftFacing", "perspectiveAboveRightFacing",
        "perspectiveBelow", "perspectiveContrastingLeftFacing",
        "perspectiveContrastingRightFacing", "perspectiveFront",
        "perspectiveHeroicExtremeLeftFacing", "perspectiveHeroicExtremeRightFacing",
        "perspectiveHeroicLeftFacing", "perspectiveHeroicRightFacing",
        "perspectiveLeft", "perspectiveRelaxed", "perspectiveRelaxedModerately",
        "perspectiveRight",
    ),
)

LightRigPreset = _token_enum(
    "LightRigPreset",
    (
        "threePt", "balanced", "brightRoom", "chilly", "contrasting", "flat",
        "flood", "freezing", "glow", "harsh", "legacyFlat1", "legacyFlat2",
        "legacyFlat3", "legacyFlat4", "legacyHarsh1", "legacyHarsh2",
        "legacyHarsh3", "legacyHarsh4", "legacyNormal1", "legacyNormal2",
        "legacyNormal3", "legacyNormal4", "morning", "soft", "sunrise", "sunset",
        "twoPt",
    ),
)


class LightRigDirection(XmlEnum):
    TOP = "t"
    BOTTOM = "b"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"
    LEFT = "l"
    RIGHT = "r"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"


class BevelPreset(XmlEnum):
    CIRCLE = "circle"
    ANGLE = "angle"
    ART_DECO = "artDeco"
    CONVEX = "convex"
    COOL_SLANT = "coolSlant"
    CROSS = "cross"
    DIVOT = "divot"
    HARD_EDGE = "hardEdge"
    RELAXED_INSET = "relaxedInset"
    RIBLET = "riblet"
    SLOPE = "slope"
    SOFT_ROUND = "softRound"


PresetMaterial = _token_enum(
    "PresetMaterial",
    (
        "warmMatte", "clear", "dkEdge", "flat", "legacyMatte", "legacyMetal",
        "legacyPlastic", "legacyWireframe", "matte", "metal", "plastic", "powder",
        "softEdge", "softmetal", "translucentPowder",
    ),
)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class FontAlignment(XmlEnum):
    AUTO = "auto"
    BASELINE = "base"
    BOTTOM = "b"
    CENTER = "ctr"
    TOP = "t"


class HorizontalOverflow(XmlEnum):
    OVERFLOW = "overflow"
    CLIP = "clip"


class VerticalOverflow(XmlEnum):
    OVERFLOW = "overflow"
    CLIP = "clip"
    ELLIPSIS = "ellipsis"


class TabAlignment(XmlEnum):
    LEFT = "l"
    CENTER = "ctr"
    DECIMAL = "dec"
    RIGHT = "r"


class ParagraphAlignment(XmlEnum):
    LEFT = "l"
    CENTER = "ctr"
    DISTRIBUTED = "dist"
    JUSTIFIED = "just"
    JUSTIFIED_LOW = "justLow"
    RIGHT = "r"
    THAI_DISTRIBUTED = "thaiDist"


class TextAnchoring(XmlEnum):
    TOP = "t"
    CENTER = "ctr"
    BOTTOM = "b"


class TextCaps(XmlEnum):
    NONE = "none"
    ALL = "all"
    SMALL = "small"


class TextStrike(XmlEnum):
    NO_STRIKE = "noStrike"
    SINGLE = "sngStrike"
    DOUBLE = "dblStrike"


class TextUnderline(XmlEnum):
    NONE = "none"
    DASH = "dash"
    DASH_HEAVY = "dashHeavy"
    DASH_LONG = "dashLong"
    DASH_LONG_HEAVY = "dashLongHeavy"
    DOT_DASH = "dotDash"
    DOT_DASH_HEAVY = "dotDashHeavy"
    DOT_DOT_DASH = "dotDotDash"
    DOT_DOT_DASH_HEAVY = "dotDotDashHeavy"
    DOTTED = "dotted"
    DOTTED_HEAVY = "dottedHeavy"
    DOUBLE = "dbl"
    HEAVY = "heavy"
    SINGLE = "sng"
    WAVY = "wavy"
    WAVY_DOUBLE = "wavyDbl"
    WAVY_HEAVY = "wavyHeavy"
    WORDS = "words"


class TextVertical(XmlEnum):
    HORIZONTAL = "horz"
    EAST_ASIAN_VERTICAL = "eaVert"
    MONGOLIAN_VERTICAL = "mongolianVert"
    VERTICAL = "vert"
    VERTICAL_270 = "vert270"
    WORD_ART_VERTICAL = "wordArtVert"
    WORD_ART_VERTICAL_RTL = "wordArtVertRtl"


class TextWrapping(XmlEnum):
    SQUARE = "square"
    NONE = "none"


AutoNumberScheme = _token_enum(
    "AutoNumberScheme",
    (
        "arabicPeriod", "alphaLcParenBoth", "alphaLcParenR", "alphaLcPeriod",
        "alphaUcParenBoth", "alphaUcParenR", "alphaUcPeriod", "arabic1Minus",
        "arabic2Minus", "arabicDbPeriod", "arabicDbPlain", "arabicParenBoth",
        "arabicParenR", "arabicPlain", "circleNumDbPlain", "circleNumWdBlackPlain",
        "circleNumWdWhitePlain", "ea1JpnChsDbPeriod", "ea1JpnKorPeriod",
        "ea1JpnKorPlain", "ea1ChsPeriod", "ea1ChsPlain", "ea1ChtPeriod",
        "ea1ChtPlain", "hebrew2Minus", "hindiAlpha1Period", "hindiAlphaPeriod",
        "hindiNumParenR", "hindiNumPeriod", "romanLcParenBoth", "romanLcParenR",
        "romanLcPeriod", "romanUcParenBoth", "romanUcParenR", "romanUcPeriod",
        "thaiAlphaParenBoth", "thaiAlphaParenR", "thaiAlphaPeriod",
        "thaiNumParenBoth", "thaiNumParenR", "thaiNumPeriod",
    ),
)

PresetTextShape = _token_enum(
    "PresetTextShape",
    (
        "textPlain", "textArchDown", "textArchDownPour", "textArchUp",
        "textArchUpPour", "textButton", "textButtonPour", "textCanDown",
        "textCanUp", "textCascadeDown", "textCascadeUp", "textChevron",
        "textChevronInverted", "textCircle", "textCirclePour", "textCurveDown",
        "textCurveUp", "textDeflate", "textDeflateBottom", "textDeflateInflate",
        "textDeflateTop", "textDoubleWave1", "textFadeDown", "textFadeLeft",
        "textFadeRight", "textFadeUp", "textInflate", "textInflateBottom",
        "textInflateTop", "textNoShape", "textRingInside", "textRingOutside",
        "textSlantDown", "textSlantUp", "textStop", "textTriangle",
        "textTriangleInverted", "textWave1", "textWave2", "textWave4",
    ),
)
