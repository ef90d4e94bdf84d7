"""Palette generators built on the contrast-safe adjustment layer."""

from accesspalette.generators.brand import generate_brand_variants
from accesspalette.generators.chroma import generate_chroma_group
from accesspalette.generators.harmony import generate_random_palette
from accesspalette.generators.layers import generate_layer_scale
from accesspalette.generators.mirror import mirror_layer_scale, mirror_variants
from accesspalette.generators.semantic import generate_semantic_colors

__all__ = [
    "generate_brand_variants",
    "generate_chroma_group",
    "generate_layer_scale",
    "generate_random_palette",
    "generate_semantic_colors",
    "mirror_layer_scale",
    "mirror_variants",
]
