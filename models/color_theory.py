"""Color classification and lightweight harmony tables for outfit selection."""
from __future__ import annotations

import colorsys
import logging
import re
from typing import Dict, FrozenSet, NamedTuple, Optional

from models.taxonomy import ColorFamily, ToneGroup

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")
_EDGE_PUNCTUATION = re.compile(r"^[^0-9A-Za-z]+|[^0-9A-Za-z]+$")


class RGB(NamedTuple):
    """An sRGB color with channels in ``[0, 1]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(1.0, 1.0, 1.0)
GRAY = RGB(0.5, 0.5, 0.5)

# Neutral thresholds on the HSB saturation / brightness axes.
_NEUTRAL_SATURATION = 0.08
_WHITE_BRIGHTNESS = 0.92
_BLACK_BRIGHTNESS = 0.14

# (lower inclusive, upper exclusive, family); red also owns [0.97, 1.0].
_HUE_BUCKETS = (
    (0.00, 0.03, ColorFamily.RED),
    (0.03, 0.07, ColorFamily.PINK),
    (0.07, 0.10, ColorFamily.ORANGE),
    (0.10, 0.17, ColorFamily.YELLOW),
    (0.17, 0.40, ColorFamily.GREEN),
    (0.40, 0.52, ColorFamily.TEAL),
    (0.52, 0.62, ColorFamily.BLUE),
    (0.62, 0.70, ColorFamily.NAVY),
    (0.70, 0.86, ColorFamily.PURPLE),
)

NEUTRAL_FAMILIES: FrozenSet[ColorFamily] = frozenset(
    {ColorFamily.WHITE, ColorFamily.GRAY, ColorFamily.BLACK, ColorFamily.BEIGE}
)

_COMPLEMENTARY: Dict[ColorFamily, tuple] = {
    ColorFamily.BLUE: (ColorFamily.ORANGE, ColorFamily.YELLOW, ColorFamily.BEIGE),
    ColorFamily.NAVY: (ColorFamily.ORANGE, ColorFamily.YELLOW, ColorFamily.BEIGE),
    ColorFamily.RED: (ColorFamily.GREEN,),
    ColorFamily.PINK: (ColorFamily.GREEN,),
    ColorFamily.YELLOW: (ColorFamily.PURPLE,),
}
_COMPLEMENTARY_DEFAULT = (ColorFamily.BEIGE, ColorFamily.GRAY, ColorFamily.BLACK)

_ANALOGOUS: Dict[ColorFamily, tuple] = {
    ColorFamily.PINK: (ColorFamily.PINK, ColorFamily.RED),
    ColorFamily.RED: (ColorFamily.PINK, ColorFamily.RED),
    ColorFamily.BLUE: (ColorFamily.TEAL, ColorFamily.BLUE, ColorFamily.NAVY),
    ColorFamily.NAVY: (ColorFamily.TEAL, ColorFamily.BLUE, ColorFamily.NAVY),
}

_COMPLEMENTARY_LABELS: Dict[ColorFamily, str] = {
    ColorFamily.BLUE: "blue + beige",
    ColorFamily.NAVY: "blue + beige",
    ColorFamily.RED: "red + green",
    ColorFamily.PINK: "red + green",
    ColorFamily.YELLOW: "yellow + purple",
}

_ANALOGOUS_LABELS: Dict[ColorFamily, str] = {
    ColorFamily.PINK: "pink + red",
    ColorFamily.RED: "pink + red",
    ColorFamily.BLUE: "blue + teal",
    ColorFamily.NAVY: "blue + teal",
}


def hsb(color: RGB) -> tuple[float, float, float]:
    """Return hue (on a ``[0, 1)`` cycle), saturation and brightness."""

    return colorsys.rgb_to_hsv(color.red, color.green, color.blue)


def classify_family(color: Optional[RGB]) -> ColorFamily:
    """Map a color to its coarse family; absent colors are ``UNKNOWN``."""

    if color is None:
        return ColorFamily.UNKNOWN
    hue, saturation, brightness = hsb(color)

    if saturation < _NEUTRAL_SATURATION:
        if brightness > _WHITE_BRIGHTNESS:
            return ColorFamily.WHITE
        if brightness < _BLACK_BRIGHTNESS:
            return ColorFamily.BLACK
        return ColorFamily.GRAY
    if saturation < 0.28 and brightness > 0.6 and 0.09 < hue < 0.17:
        return ColorFamily.BEIGE
    if 0.05 < hue < 0.12 and brightness < 0.6:
        return ColorFamily.BROWN
    if hue >= 0.97:
        return ColorFamily.RED
    for lower, upper, family in _HUE_BUCKETS:
        if lower <= hue < upper:
            return family
    logger.debug("hue %.3f outside named buckets", hue)
    return ColorFamily.UNKNOWN


def classify_tone(color: Optional[RGB]) -> ToneGroup:
    """Bucket a color into dark / neutral / bright by luminance and saturation."""

    if color is None:
        return ToneGroup.NEUTRAL
    luminance = 0.2126 * color.red + 0.7152 * color.green + 0.0722 * color.blue
    max_channel = max(color.red, color.green, color.blue)
    min_channel = min(color.red, color.green, color.blue)
    saturation = 0.0 if max_channel == 0 else (max_channel - min_channel) / max_channel
    if luminance < 0.28:
        return ToneGroup.DARK
    if saturation > 0.45:
        return ToneGroup.BRIGHT
    return ToneGroup.NEUTRAL


def color_name(color: Optional[RGB]) -> str:
    """Rough display name from channel thresholds, independent of families."""

    if color is None:
        return ""
    r, g, b = color.red, color.green, color.blue
    if r > 0.8 and g > 0.8 and b > 0.8:
        return "white"
    if r < 0.2 and g < 0.2 and b < 0.2:
        return "black"
    if r > g and r > 0.6:
        return "red"
    if g > 0.6:
        return "green"
    if b > 0.6:
        return "blue"
    return "neutral"


def hex_to_rgb(value: str) -> RGB:
    """Decode 3, 6 or 8 (alpha first) digit hex; malformed input is opaque black."""

    digits = _EDGE_PUNCTUATION.sub("", value or "")
    if not _HEX_DIGITS.match(digits):
        logger.debug("malformed hex color %r", value)
        return BLACK
    number = int(digits, 16)
    if len(digits) == 3:
        a, r, g, b = 255, (number >> 8) * 17, (number >> 4 & 0xF) * 17, (number & 0xF) * 17
    elif len(digits) == 6:
        a, r, g, b = 255, number >> 16, number >> 8 & 0xFF, number & 0xFF
    elif len(digits) == 8:
        a, r, g, b = number >> 24, number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF
    else:
        logger.debug("unsupported hex length %s for %r", len(digits), value)
        return BLACK
    return RGB(r / 255, g / 255, b / 255, a / 255)


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(channel * 255 + 0.5)))


def rgb_to_hex(color: RGB) -> str:
    """Encode a color as ``RRGGBB`` (upper case, alpha dropped)."""

    return "%02X%02X%02X" % (_to_byte(color.red), _to_byte(color.green), _to_byte(color.blue))


def complementary_families(family: ColorFamily) -> tuple:
    return _COMPLEMENTARY.get(family, _COMPLEMENTARY_DEFAULT)


def analogous_families(family: ColorFamily) -> tuple:
    return _ANALOGOUS.get(family, (family,))


def complementary_label(family: ColorFamily) -> str:
    return _COMPLEMENTARY_LABELS.get(family, "balanced contrast")


def analogous_label(family: ColorFamily) -> str:
    return _ANALOGOUS_LABELS.get(family, "close tones")


__all__ = [
    "RGB",
    "BLACK",
    "WHITE",
    "GRAY",
    "NEUTRAL_FAMILIES",
    "hsb",
    "classify_family",
    "classify_tone",
    "color_name",
    "hex_to_rgb",
    "rgb_to_hex",
    "complementary_families",
    "analogous_families",
    "complementary_label",
    "analogous_label",
]
