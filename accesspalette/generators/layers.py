"""Neutral background layer scale (depth stack).

Step 1 is always the page background; every further step is a surface.
The default lightness curve is a power curve so the first steps separate
faster than the last ones, where differences are harder to see.
"""

from __future__ import annotations

import logging
from typing import Sequence

from accesspalette.color.adjust import pick_on_color
from accesspalette.color.convert import from_lch, to_hex
from accesspalette.config import PaletteConfig, default_config
from accesspalette.generators._helpers import lerp
from accesspalette.models import LayerDirection, LayerStep, PerceptualColor, ThemeMode

logger = logging.getLogger(__name__)


def default_lightness(
    count: int,
    mode: ThemeMode,
    direction: LayerDirection = "normal",
    *,
    config: PaletteConfig | None = None,
) -> list[float]:
    """Lightness values for *count* layers, rounded to 3 decimals.

    ``direction="inverted"`` returns the exact reverse of the normal curve;
    the endpoints stay the same.
    """
    if count < 1:
        raise ValueError(f"Layer count must be at least 1, got {count}")
    if direction not in ("normal", "inverted"):
        raise ValueError(f"Unknown layer direction: {direction!r}")

    cfg = (config or default_config()).layers
    if mode == "dark":
        start, end, exponent = cfg.dark_start, cfg.dark_end, cfg.dark_exponent
    elif mode == "light":
        start, end, exponent = cfg.light_start, cfg.light_end, cfg.light_exponent
    else:
        raise ValueError(f"Unknown mode: {mode!r}")

    values: list[float] = []
    for i in range(count):
        t = i / (count - 1) if count > 1 else 0.0
        values.append(round(lerp(start, end, t ** exponent), 3))

    if direction == "inverted":
        values.reverse()
    return values


def layer_name(index: int) -> str:
    return "background" if index == 1 else f"surface-{index - 1}"


def layer_keys(index: int) -> tuple[str, str]:
    """(background key, on-color key) for the 1-based layer *index*."""
    name = layer_name(index)
    return f"--color-{name}", f"--color-on-{name}"


def build_layer(index: int, color: PerceptualColor) -> LayerStep:
    color_hex = to_hex(color)
    on_hex, _ = pick_on_color(color_hex)
    background_key, on_key = layer_keys(index)
    return LayerStep(
        index=index,
        name=layer_name(index),
        color=color_hex,
        perceptual=color,
        on_color=on_hex,
        background_variable_key=background_key,
        on_variable_key=on_key,
    )


def generate_layer_scale(
    hue: float,
    chroma: float,
    count: int,
    mode: ThemeMode,
    direction: LayerDirection = "normal",
    custom_lightness: Sequence[float] | None = None,
    *,
    config: PaletteConfig | None = None,
) -> list[LayerStep]:
    """Generate *count* tinted neutral layers.

    *custom_lightness* replaces the default curve only when its length
    matches *count*; otherwise it is ignored.
    """
    lightnesses = default_lightness(count, mode, direction, config=config)
    if custom_lightness is not None:
        if len(custom_lightness) == count:
            lightnesses = [max(0.0, min(1.0, float(v))) for v in custom_lightness]
        else:
            logger.debug(
                "Ignoring custom lightness of length %d for %d layers",
                len(custom_lightness), count,
            )

    hue = hue % 360.0
    return [
        build_layer(i + 1, PerceptualColor(l=lightness, c=chroma, h=hue))
        for i, lightness in enumerate(lightnesses)
    ]


def background_hex(
    hue: float,
    chroma: float,
    mode: ThemeMode,
    direction: LayerDirection = "normal",
    *,
    config: PaletteConfig | None = None,
) -> str:
    """Page background color matching the start of the layer stack."""
    cfg = (config or default_config()).layers
    if direction == "inverted":
        lightness = cfg.light_inverted_background if mode == "light" else cfg.dark_inverted_background
    else:
        lightness = cfg.light_background if mode == "light" else cfg.dark_background
    return from_lch(lightness, chroma, hue)
