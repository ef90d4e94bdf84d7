"""Random harmonious palettes.

The only non-deterministic generator.  Pass a seeded ``random.Random`` as
*rng* to make results reproducible.
"""

from __future__ import annotations

import logging
import random

from accesspalette.color.adjust import accessible_lightness_range
from accesspalette.color.convert import from_lch, normalize_hex
from accesspalette.config import PaletteConfig, default_config
from accesspalette.models import Harmony, LightnessRange, RandomPalette

logger = logging.getLogger(__name__)

# (secondary offset, tertiary offset) in degrees from the primary hue
HARMONY_OFFSETS: dict[Harmony, tuple[float, float]] = {
    Harmony.TRIADIC: (120.0, -120.0),
    Harmony.SPLIT_COMPLEMENTARY: (150.0, 210.0),
    Harmony.ANALOGOUS: (40.0, -40.0),
}


def generate_random_palette(
    background_hex: str | None = None,
    *,
    rng: random.Random | None = None,
    config: PaletteConfig | None = None,
) -> RandomPalette:
    """Pick a primary hue and two harmonious companions.

    Lightness is kept inside the band that stays readable on
    *background_hex*, further clamped away from near-black and near-white.
    """
    rng = rng or random.Random()
    cfg = config or default_config()
    rcfg = cfg.random

    primary_hue = rng.uniform(0.0, 360.0)
    harmony = rng.choice(list(Harmony))
    chroma = rng.uniform(rcfg.chroma_min, rcfg.chroma_max)

    band = _lightness_band(background_hex, chroma, primary_hue, cfg)
    base_lightness = rng.uniform(band.min, band.max)

    second, third = HARMONY_OFFSETS[harmony]
    colors = [
        _jittered(primary_hue + offset, base_lightness, chroma, band, rng, cfg)
        for offset in (0.0, second, third)
    ]
    logger.debug("Random %s palette around hue %.1f: %s", harmony.value, primary_hue, colors)

    return RandomPalette(
        primary=colors[0],
        secondary=colors[1],
        tertiary=colors[2],
        harmony=harmony,
        lightness_range=band,
    )


def _lightness_band(
    background_hex: str | None, chroma: float, hue: float, cfg: PaletteConfig
) -> LightnessRange:
    rcfg = cfg.random
    floor, ceiling = rcfg.lightness_floor, rcfg.lightness_ceiling
    if background_hex is None:
        return LightnessRange(floor, ceiling)

    found = accessible_lightness_range(
        normalize_hex(background_hex), rcfg.min_lc, chroma, hue, config=cfg
    )
    return found.clamp(floor, ceiling)


def _jittered(
    hue: float,
    lightness: float,
    chroma: float,
    band: LightnessRange,
    rng: random.Random,
    cfg: PaletteConfig,
) -> str:
    rcfg = cfg.random
    jittered_l = lightness + rng.uniform(-rcfg.lightness_jitter, rcfg.lightness_jitter)
    jittered_c = chroma + rng.uniform(-rcfg.chroma_jitter, rcfg.chroma_jitter)
    return from_lch(
        max(band.min, min(band.max, jittered_l)),
        max(0.0, jittered_c),
        hue % 360.0,
    )
