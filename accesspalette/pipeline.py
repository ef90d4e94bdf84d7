"""Palette pipeline that derives every palette structure from a state.

Each call recomputes everything from the seed inputs; nothing is cached
between calls and no input is mutated.
"""

from __future__ import annotations

import logging

from accesspalette.config import PaletteConfig, default_config
from accesspalette.generators.brand import generate_brand_variants
from accesspalette.generators.chroma import generate_chroma_group
from accesspalette.generators.layers import background_hex, generate_layer_scale
from accesspalette.generators.mirror import mirror_layer_scale, mirror_variants
from accesspalette.generators.semantic import generate_semantic_colors
from accesspalette.models import ColorVariant, PaletteResult
from accesspalette.state import PaletteState

logger = logging.getLogger(__name__)


def run_pipeline(state: PaletteState, *, config: PaletteConfig | None = None) -> PaletteResult:
    """Generate the full palette for *state*.

    1. Brand variants per visible role, plus their mirrors.
    2. Effective background hue/chroma (synced to primary or custom).
    3. Semantic colors for both modes.
    4. Layer scale and its opposite-mode mirror.
    5. Chroma groups.
    """
    cfg = config or default_config()
    mode = state.base_mode
    opposite = "dark" if mode == "light" else "light"

    brand: dict[str, list[ColorVariant]] = {}
    brand_opposite: dict[str, list[ColorVariant]] = {}
    for role, seed in state.seeds.items():
        variants = generate_brand_variants(seed, role, mode, config=cfg)
        brand[role] = variants
        brand_opposite[role] = mirror_variants(variants, config=cfg)

    hue, chroma = effective_background(state, brand["primary"], cfg)
    bg = background_hex(hue, chroma, mode, state.layer_direction, config=cfg)

    layers = generate_layer_scale(
        hue,
        chroma,
        state.layer_count,
        mode,
        state.layer_direction,
        state.custom_lightness,
        config=cfg,
    )

    result = PaletteResult(
        mode=mode,
        background=bg,
        background_hue=hue,
        background_chroma=chroma,
        brand=brand,
        brand_opposite=brand_opposite,
        layers=layers,
        layers_opposite=mirror_layer_scale(layers, config=cfg),
        semantic=generate_semantic_colors(mode, config=cfg),
        semantic_opposite=generate_semantic_colors(opposite, config=cfg),
        chroma_groups=[
            generate_chroma_group(group.chroma, group.lightness, group.count, group.name, config=cfg)
            for group in state.chroma_groups
        ],
    )

    logger.info(
        "Generated %s palette: %d role(s), %d layer(s), %d chroma group(s), %d best-effort",
        mode, len(brand), len(layers), len(result.chroma_groups), result.best_effort_count,
    )
    return result


def effective_background(
    state: PaletteState,
    primary_variants: list[ColorVariant],
    cfg: PaletteConfig,
) -> tuple[float, float]:
    """Hue and chroma used to tint the layer stack.

    In sync mode the background follows the primary hue, staying neutral
    when the primary itself is achromatic.
    """
    primary = primary_variants[0].perceptual
    if state.bg_mode == "custom":
        hue = state.custom_bg_hue if state.custom_bg_hue is not None else primary.h
        chroma = (
            state.custom_bg_chroma if state.custom_bg_chroma is not None else cfg.layers.sync_chroma
        )
        return hue, chroma

    if primary.c < cfg.layers.achromatic_threshold:
        return primary.h, 0.0
    return primary.h, cfg.layers.sync_chroma
