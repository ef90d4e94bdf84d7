"""Opposite-mode mirrors of layer scales and brand variants.

Mirrors are always recomputed from the active records, so edits to the
active mode can never leave a stale opposite behind.
"""

from __future__ import annotations

from typing import Sequence

from accesspalette.config import PaletteConfig, default_config
from accesspalette.generators._helpers import build_variant, lerp
from accesspalette.generators.layers import build_layer
from accesspalette.models import ColorVariant, LayerStep


def mirror_layer_scale(
    scale: Sequence[LayerStep],
    *,
    config: PaletteConfig | None = None,
) -> list[LayerStep]:
    """Map *scale* onto the opposite mode's lightness band.

    A light scale (first step lighter than 0.5) lands on the dark band, a
    dark scale on the light band, interpolated linearly over the same number
    of steps.  Hue, chroma, names and keys are kept; on-colors are re-derived.
    """
    if not scale:
        return []

    cfg = (config or default_config()).mirror
    start, end = cfg.dark_band if scale[0].perceptual.l > 0.5 else cfg.light_band
    count = len(scale)

    mirrored: list[LayerStep] = []
    for i, step in enumerate(scale):
        t = i / (count - 1) if count > 1 else 0.0
        mirrored.append(build_layer(step.index, step.perceptual.with_lightness(lerp(start, end, t))))
    return mirrored


def mirror_variants(
    variants: Sequence[ColorVariant],
    *,
    config: PaletteConfig | None = None,
) -> list[ColorVariant]:
    """Invert lightness (1 - L, clamped) of every variant and re-pair it."""
    cfg = config or default_config()
    lo, hi = cfg.mirror.variant_min, cfg.mirror.variant_max

    out: list[ColorVariant] = []
    for variant in variants:
        flipped = variant.perceptual.with_lightness(max(lo, min(hi, 1.0 - variant.perceptual.l)))
        out.append(
            build_variant(
                variant.name,
                flipped,
                variant.background_variable_key,
                variant.on_variable_key,
                cfg.contrast.min_lc,
            )
        )
    return out
