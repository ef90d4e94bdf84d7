"""AccessPalette: accessibility-verified color palettes from brand seeds."""

from accesspalette.color.adjust import accessible_lightness_range, ensure_contrast, pick_on_color
from accesspalette.color.convert import InvalidColorError, to_hex, to_perceptual
from accesspalette.color.distance import perceptual_distance
from accesspalette.generators import (
    generate_brand_variants,
    generate_chroma_group,
    generate_layer_scale,
    generate_random_palette,
    generate_semantic_colors,
    mirror_layer_scale,
    mirror_variants,
)
from accesspalette.simulation import SimulationType, is_distinguishable, simulate_cvd
from accesspalette.utils.contrast import perceptual_contrast, ratio_contrast

__version__ = "0.1.0"

__all__ = [
    "InvalidColorError",
    "SimulationType",
    "accessible_lightness_range",
    "ensure_contrast",
    "generate_brand_variants",
    "generate_chroma_group",
    "generate_layer_scale",
    "generate_random_palette",
    "generate_semantic_colors",
    "is_distinguishable",
    "mirror_layer_scale",
    "mirror_variants",
    "perceptual_contrast",
    "perceptual_distance",
    "pick_on_color",
    "ratio_contrast",
    "simulate_cvd",
    "to_hex",
    "to_perceptual",
]
