"""Contrast-safe lightness adjustment and on-color selection.

All searches here are bounded and deterministic.  When no lightness clears
the target the functions fall back to a documented best-effort value
instead of raising, since a palette must always render something.
"""

from __future__ import annotations

import logging

from accesspalette.color.convert import from_lch, to_hex, to_perceptual
from accesspalette.config import PaletteConfig, default_config
from accesspalette.models import PURE_BLACK, PURE_WHITE, LightnessRange, PerceptualColor
from accesspalette.utils.contrast import perceptual_contrast

logger = logging.getLogger(__name__)

_WHITE = to_perceptual(PURE_WHITE)
_BLACK = to_perceptual(PURE_BLACK)


def _pairing_scores(color: PerceptualColor) -> tuple[float, float]:
    """Return (|Lc| with white text, |Lc| with black text) on *color*."""
    hex_color = to_hex(color)
    return (
        abs(perceptual_contrast(hex_color, PURE_WHITE)),
        abs(perceptual_contrast(hex_color, PURE_BLACK)),
    )


def ensure_contrast(
    color: PerceptualColor,
    target_lc: float | None = None,
    *,
    config: PaletteConfig | None = None,
) -> PerceptualColor:
    """Shift lightness until *color* pairs with white or black at *target_lc*.

    A color that already clears the target is returned unchanged.  Otherwise
    the search keeps going the way the color already leans: lighter when
    black text wins, darker when white text wins.  Returns the original
    color if no in-bounds value within the iteration cap clears the target.
    """
    cfg = (config or default_config()).contrast
    target = cfg.min_lc if target_lc is None else target_lc

    white_score, black_score = _pairing_scores(color)
    if max(white_score, black_score) >= target:
        return color

    step = cfg.step if black_score > white_score else -cfg.step
    lightness = color.l
    for _ in range(cfg.max_iterations):
        lightness = round(lightness + step, 6)
        if lightness < 0.0 or lightness > 1.0:
            break
        candidate = color.with_lightness(lightness)
        if max(_pairing_scores(candidate)) >= target:
            return candidate

    logger.debug(
        "No lightness near %.3f reaches Lc %.1f (c=%.3f h=%.1f); keeping original",
        color.l, target, color.c, color.h,
    )
    return color


def accessible_lightness_range(
    background: str,
    min_lc: float,
    chroma: float,
    hue: float,
    *,
    config: PaletteConfig | None = None,
) -> LightnessRange:
    """Scan lightness for colors of (*chroma*, *hue*) readable on *background*.

    Returns the min/max of every passing lightness.  If none pass, the full
    [0, 1] range is returned with ``satisfiable=False``.
    """
    cfg = (config or default_config()).contrast
    steps = round(1.0 / cfg.range_step)
    passing: list[float] = []
    for i in range(steps + 1):
        lightness = min(1.0, round(i * cfg.range_step, 6))
        candidate = from_lch(lightness, chroma, hue)
        if abs(perceptual_contrast(background, candidate)) >= min_lc:
            passing.append(lightness)

    if not passing:
        logger.debug("No lightness on %s reaches Lc %.1f; using full range", background, min_lc)
        return LightnessRange(0.0, 1.0, satisfiable=False)
    return LightnessRange(min(passing), max(passing))


def pick_on_color(background: str | PerceptualColor) -> tuple[str, PerceptualColor]:
    """Choose pure white or pure black, whichever contrasts more with *background*.

    White is evaluated first and wins an exact tie.
    """
    bg_hex = background if isinstance(background, str) else to_hex(background)
    white = abs(perceptual_contrast(bg_hex, PURE_WHITE))
    black = abs(perceptual_contrast(bg_hex, PURE_BLACK))
    if white >= black:
        return PURE_WHITE, _WHITE
    return PURE_BLACK, _BLACK


def on_color_contrast(background: str, on_color: str) -> float:
    return abs(perceptual_contrast(background, on_color))
