"""Shared helpers for building variant records."""

from __future__ import annotations

from accesspalette.color.adjust import on_color_contrast, pick_on_color
from accesspalette.color.convert import to_hex
from accesspalette.models import ColorVariant, PerceptualColor


def build_variant(
    name: str,
    color: PerceptualColor,
    background_key: str,
    on_key: str,
    min_lc: float,
    *,
    hex_color: str | None = None,
) -> ColorVariant:
    """Pair *color* with its on-color and flag it when the pairing misses *min_lc*.

    *hex_color* keeps a caller-supplied encoding (e.g. an untouched seed)
    instead of re-encoding the perceptual value.
    """
    color_hex = hex_color or to_hex(color)
    on_hex, _ = pick_on_color(color_hex)
    return ColorVariant(
        name=name,
        color=color_hex,
        perceptual=color,
        background_variable_key=background_key,
        on_color=on_hex,
        on_variable_key=on_key,
        best_effort=on_color_contrast(color_hex, on_hex) < min_lc,
    )


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t
