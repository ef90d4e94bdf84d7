"""Brand role variants.

A seed picked for a light interface is usually mid-to-dark and saturated,
while one picked for a dark interface is usually light and pastel.  The
opposite main is therefore derived by resetting lightness to a fixed target
rather than inverting it, then re-checked for contrast.
"""

from __future__ import annotations

from accesspalette.color.adjust import ensure_contrast
from accesspalette.color.convert import normalize_hex, to_perceptual
from accesspalette.config import PaletteConfig, default_config
from accesspalette.generators._helpers import build_variant
from accesspalette.models import ColorVariant, PerceptualColor, ThemeMode

VARIANT_NAMES = ("light", "light-variant", "dark", "dark-variant")


def generate_brand_variants(
    seed_hex: str,
    role: str,
    base_mode: ThemeMode,
    *,
    config: PaletteConfig | None = None,
) -> list[ColorVariant]:
    """Return the light, light-variant, dark and dark-variant colors for *role*.

    *seed_hex* is taken as the main color of *base_mode*.  Raises
    ``InvalidColorError`` for a malformed seed and ``ValueError`` for an
    unknown mode.
    """
    if base_mode not in ("light", "dark"):
        raise ValueError(f"Unknown mode: {base_mode!r}")

    cfg = config or default_config()
    min_lc = cfg.contrast.min_lc
    seed = normalize_hex(seed_hex)
    seed_color = to_perceptual(seed)

    seed_main = ensure_contrast(seed_color, min_lc, config=cfg)
    seed_main_hex = seed if seed_main == seed_color else None

    if base_mode == "light":
        light_main, light_hex = seed_main, seed_main_hex
        dark_main = ensure_contrast(
            seed_color.with_lightness(cfg.brand.dark_main_lightness), min_lc, config=cfg
        )
        dark_hex = None
    else:
        dark_main, dark_hex = seed_main, seed_main_hex
        light_main = ensure_contrast(
            seed_color.with_lightness(cfg.brand.light_main_lightness), min_lc, config=cfg
        )
        light_hex = None

    light_variant = _variant_of(light_main, cfg)
    dark_variant = _variant_of(dark_main, cfg)

    main_key = f"--color-{role}"
    on_main_key = f"--color-on-{role}"
    variant_key = f"--color-{role}-variant"
    on_variant_key = f"--color-on-{role}-variant"

    return [
        build_variant("light", light_main, main_key, on_main_key, min_lc, hex_color=light_hex),
        build_variant("light-variant", light_variant, variant_key, on_variant_key, min_lc),
        build_variant("dark", dark_main, main_key, on_main_key, min_lc, hex_color=dark_hex),
        build_variant("dark-variant", dark_variant, variant_key, on_variant_key, min_lc),
    ]


def _variant_of(main: PerceptualColor, cfg: PaletteConfig) -> PerceptualColor:
    shifted = main.with_lightness(main.l - cfg.brand.variant_offset)
    return ensure_contrast(shifted, cfg.contrast.min_lc, config=cfg)


def variants_for_mode(variants: list[ColorVariant], mode: ThemeMode) -> list[ColorVariant]:
    """The main and variant entries belonging to *mode*."""
    return [v for v in variants if v.mode == mode]
