"""Chroma groups: brand variant sets spread evenly around the hue circle."""

from __future__ import annotations

import uuid

from accesspalette.color.convert import from_lch
from accesspalette.config import PaletteConfig
from accesspalette.generators.brand import generate_brand_variants
from accesspalette.models import ChromaEntry, ChromaGroup


def generate_chroma_group(
    chroma: float,
    lightness: float,
    count: int,
    name: str,
    *,
    config: PaletteConfig | None = None,
) -> ChromaGroup:
    """Build *count* hues 360/count degrees apart, each with 4 brand variants.

    Variant keys are derived from ``{name}-{n}`` (1-based) so the group can
    be exported next to the primary/secondary/tertiary roles.
    """
    if count < 1:
        raise ValueError(f"Chroma group needs at least one hue, got {count}")

    hue_step = 360.0 / count
    entries: list[ChromaEntry] = []
    for i in range(count):
        hue = i * hue_step
        seed = from_lch(lightness, chroma, hue)
        variants = generate_brand_variants(seed, f"{name}-{i + 1}", "light", config=config)
        entries.append(ChromaEntry(hue=hue, variants=variants))

    return ChromaGroup(
        id=uuid.uuid4().hex,
        name=name,
        chroma=chroma,
        lightness=lightness,
        entries=entries,
    )
