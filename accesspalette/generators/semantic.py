"""Semantic status colors (success, warning, error, info)."""

from __future__ import annotations

from accesspalette.color.adjust import ensure_contrast
from accesspalette.config import PaletteConfig, default_config
from accesspalette.generators._helpers import build_variant
from accesspalette.models import PerceptualColor, SemanticPalette, ThemeMode

SEMANTIC_ROLES = ("success", "warning", "error", "info")


def generate_semantic_colors(
    mode: ThemeMode,
    *,
    config: PaletteConfig | None = None,
) -> SemanticPalette:
    """Fixed-hue status colors, contrast-corrected for *mode*.

    Yellow fails contrast at high lightness long before green or blue do,
    so warning gets its own, darker target in light mode.
    """
    if mode not in ("light", "dark"):
        raise ValueError(f"Unknown mode: {mode!r}")

    cfg = config or default_config()
    sem = cfg.semantic
    target = sem.light_lightness if mode == "light" else sem.dark_lightness

    variants = {}
    for role in SEMANTIC_ROLES:
        lightness = target
        if role == "warning" and mode == "light":
            lightness = sem.warning_light_lightness

        base = PerceptualColor(l=lightness, c=sem.chroma, h=sem.hues[role])
        safe = ensure_contrast(base, sem.min_lc, config=cfg)
        variants[role] = build_variant(
            role, safe, f"--color-{role}", f"--color-on-{role}", sem.min_lc
        )

    return SemanticPalette(**variants)
