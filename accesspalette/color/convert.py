"""Hex, sRGB and OKLCH conversions.

Hex strings are the boundary representation: six hex digits, case
insensitive, optionally prefixed with ``#``.  Internally colors move through
linear sRGB and OKLab (Björn Ottosson's matrices) into the cylindrical OKLCH
form used by every generator.
"""

from __future__ import annotations

import math
import re

from accesspalette.models import PerceptualColor

_HEX_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")

# Below this chroma the hue is undefined and reported as 0.
ACHROMATIC_CHROMA = 1e-4


class InvalidColorError(ValueError):
    """Raised when a color string is not a 6-digit hex value."""


def normalize_hex(text: str) -> str:
    """Validate *text* and return it as lowercase ``#rrggbb``."""
    if not isinstance(text, str) or not _HEX_PATTERN.fullmatch(text):
        raise InvalidColorError(f"Invalid hex color: {text!r}")
    return "#" + text.lstrip("#").lower()


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse a hex color into (R, G, B) 0-255."""
    value = normalize_hex(hex_color)
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def _clamp_byte(v: float) -> int:
    return max(0, min(255, round(v)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return f"#{_clamp_byte(r):02x}{_clamp_byte(g):02x}{_clamp_byte(b):02x}"


def srgb_to_linear(v: float) -> float:
    """Convert an encoded sRGB channel (0-1) to linear light."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(v: float) -> float:
    """Convert a linear-light channel (0-1) back to sRGB encoding."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


def hex_to_linear(hex_color: str) -> tuple[float, float, float]:
    r, g, b = hex_to_rgb(hex_color)
    return srgb_to_linear(r / 255.0), srgb_to_linear(g / 255.0), srgb_to_linear(b / 255.0)


def linear_to_hex(r: float, g: float, b: float) -> str:
    """Gamma-encode linear RGB, clamp each channel to [0, 1] and format."""
    channels = [max(0.0, min(1.0, linear_to_srgb(max(0.0, v)))) for v in (r, g, b)]
    return rgb_to_hex(*(c * 255 for c in channels))


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def linear_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_linear(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    l_ = lightness + 0.3963377774 * a + 0.2158037573 * b
    m_ = lightness - 0.1055613458 * a - 0.0638541728 * b
    s_ = lightness - 0.0894841775 * a - 1.2914855480 * b
    l3, m3, s3 = l_ ** 3, m_ ** 3, s_ ** 3
    return (
        4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3,
        -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3,
        -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3,
    )


def to_perceptual(hex_color: str) -> PerceptualColor:
    """Convert a hex color to OKLCH.

    Raises ``InvalidColorError`` for malformed input.
    """
    lightness, a, b = linear_to_oklab(*hex_to_linear(hex_color))
    chroma = math.hypot(a, b)
    if chroma < ACHROMATIC_CHROMA:
        return PerceptualColor(l=lightness, c=0.0, h=0.0)
    hue = math.degrees(math.atan2(b, a)) % 360.0
    return PerceptualColor(l=lightness, c=chroma, h=hue)


def to_hex(color: PerceptualColor) -> str:
    """Convert OKLCH to hex, clamping out-of-gamut channels into sRGB."""
    rad = math.radians(color.h)
    a = color.c * math.cos(rad)
    b = color.c * math.sin(rad)
    return linear_to_hex(*oklab_to_linear(color.l, a, b))


def from_lch(lightness: float, chroma: float, hue: float) -> str:
    return to_hex(PerceptualColor(l=lightness, c=chroma, h=hue % 360.0))
