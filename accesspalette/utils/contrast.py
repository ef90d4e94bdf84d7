"""WCAG 2.1 ratio contrast and APCA perceptual contrast.

The ratio metric implements relative luminance and contrast ratio as defined
in WCAG 2.1 Success Criterion 1.4.3 (Contrast, Minimum).  The perceptual
metric implements APCA 0.0.98G-4g (SAPC), which is polarity aware and
predicts text legibility better than a plain luminance ratio.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from accesspalette.color.convert import hex_to_rgb, srgb_to_linear


def relative_luminance(r: int, g: int, b: int) -> float:
    """Compute relative luminance for an sRGB color (0-255 per channel).

    Per WCAG 2.1: L = 0.2126*R + 0.7152*G + 0.0722*B
    where R, G, B are linearized sRGB values.
    """
    rl = srgb_to_linear(r / 255.0)
    gl = srgb_to_linear(g / 255.0)
    bl = srgb_to_linear(b / 255.0)
    return 0.2126 * rl + 0.7152 * gl + 0.0722 * bl


def contrast_ratio(color1: tuple[int, int, int], color2: tuple[int, int, int]) -> float:
    """Compute the WCAG contrast ratio between two sRGB colors.

    Returns a value between 1.0 (identical) and 21.0 (black on white).
    """
    l1 = relative_luminance(*color1)
    l2 = relative_luminance(*color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def ratio_contrast(background: str, foreground: str) -> float:
    """WCAG contrast ratio between two hex colors (order does not matter)."""
    return contrast_ratio(hex_to_rgb(background), hex_to_rgb(foreground))


def passes_aa(ratio: float, *, large_text: bool = False) -> bool:
    """Check whether a contrast ratio meets WCAG AA.

    Normal text: 4.5:1 minimum.
    Large text (>=18pt or >=14pt bold): 3:1 minimum.
    """
    threshold = 3.0 if large_text else 4.5
    return ratio >= threshold


def passes_aaa(ratio: float, *, large_text: bool = False) -> bool:
    """Check whether a contrast ratio meets WCAG AAA (7:1, or 4.5:1 large)."""
    threshold = 4.5 if large_text else 7.0
    return ratio >= threshold


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    aa: bool
    aaa: bool
    aa_large: bool
    aaa_large: bool


def contrast_result(background: str, foreground: str) -> ContrastResult:
    ratio = ratio_contrast(background, foreground)
    return ContrastResult(
        ratio=ratio,
        aa=passes_aa(ratio),
        aaa=passes_aaa(ratio),
        aa_large=passes_aa(ratio, large_text=True),
        aaa_large=passes_aaa(ratio, large_text=True),
    )


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}"


# APCA 0.0.98G-4g constants
_MAIN_TRC = 2.4
_R_CO, _G_CO, _B_CO = 0.2126729, 0.7151522, 0.0721750
_NORM_BG, _NORM_TXT = 0.56, 0.57
_REV_TXT, _REV_BG = 0.62, 0.65
_BLK_THRS, _BLK_CLMP = 0.022, 1.414
_SCALE = 1.14
_LO_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005


def _apca_luminance(hex_color: str) -> float:
    r, g, b = hex_to_rgb(hex_color)
    y = (
        _R_CO * (r / 255.0) ** _MAIN_TRC
        + _G_CO * (g / 255.0) ** _MAIN_TRC
        + _B_CO * (b / 255.0) ** _MAIN_TRC
    )
    # soft clamp near black
    if y < _BLK_THRS:
        y += (_BLK_THRS - y) ** _BLK_CLMP
    return y


def perceptual_contrast(background: str, foreground: str) -> float:
    """APCA lightness contrast (Lc) of *foreground* text on *background*.

    Positive values mean light text on a dark background (up to ~108),
    negative values dark text on a light background (down to ~-106).
    Only the magnitude matters for pass/fail decisions.
    """
    y_bg = _apca_luminance(background)
    y_txt = _apca_luminance(foreground)

    if abs(y_bg - y_txt) < _DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        # dark text on light background
        sapc = (y_bg ** _NORM_BG - y_txt ** _NORM_TXT) * _SCALE
        lc = 0.0 if sapc < _LO_CLIP else sapc - _LO_OFFSET
        return -lc * 100.0

    # light text on dark background
    sapc = (y_bg ** _REV_BG - y_txt ** _REV_TXT) * _SCALE
    lc = 0.0 if sapc > -_LO_CLIP else sapc + _LO_OFFSET
    return -lc * 100.0


class ApcaLevel(str, enum.Enum):
    """Usage bands for an absolute Lc value, strongest first."""

    PREFERRED_BODY = "preferred-body"
    BODY = "body"
    LARGE_TEXT = "large-text"
    HEADERS = "headers"
    SPOT_TEXT = "spot-text"
    FAIL = "fail"


_APCA_BANDS: tuple[tuple[float, ApcaLevel], ...] = (
    (90.0, ApcaLevel.PREFERRED_BODY),
    (75.0, ApcaLevel.BODY),
    (60.0, ApcaLevel.LARGE_TEXT),
    (45.0, ApcaLevel.HEADERS),
    (30.0, ApcaLevel.SPOT_TEXT),
)


def classify_perceptual(lc: float) -> ApcaLevel:
    magnitude = abs(lc)
    for threshold, level in _APCA_BANDS:
        if magnitude >= threshold:
            return level
    return ApcaLevel.FAIL
