"""Tests for opposite-mode mirrors."""

from __future__ import annotations

import pytest

from accesspalette.generators.brand import generate_brand_variants
from accesspalette.generators.mirror import mirror_layer_scale, mirror_variants
from accesspalette.models import LayerStep


class TestMirrorLayerScale:
    def test_light_scale_goes_dark(self, light_scale: list[LayerStep]) -> None:
        mirrored = mirror_layer_scale(light_scale)
        lightness = [s.perceptual.l for s in mirrored]
        assert lightness[0] == pytest.approx(0.10)
        assert lightness[-1] == pytest.approx(0.25)
        assert all(v < 0.30 for v in lightness)

    def test_dark_scale_goes_light(self, dark_scale: list[LayerStep]) -> None:
        mirrored = mirror_layer_scale(dark_scale)
        lightness = [s.perceptual.l for s in mirrored]
        assert lightness[0] == pytest.approx(0.98)
        assert lightness[-1] == pytest.approx(0.90)
        assert all(v > 0.85 for v in lightness)

    def test_keeps_identity_and_tint(self, light_scale: list[LayerStep]) -> None:
        mirrored = mirror_layer_scale(light_scale)
        for original, mirror in zip(light_scale, mirrored):
            assert mirror.index == original.index
            assert mirror.name == original.name
            assert mirror.background_variable_key == original.background_variable_key
            assert mirror.perceptual.h == original.perceptual.h
            assert mirror.perceptual.c == original.perceptual.c

    def test_on_colors_rederived(self, light_scale: list[LayerStep]) -> None:
        assert all(s.on_color == "#ffffff" for s in mirror_layer_scale(light_scale))

    def test_empty(self) -> None:
        assert mirror_layer_scale([]) == []

    def test_input_untouched(self, light_scale: list[LayerStep]) -> None:
        before = list(light_scale)
        mirror_layer_scale(light_scale)
        assert light_scale == before


class TestMirrorVariants:
    def test_lightness_inverted(self) -> None:
        variants = generate_brand_variants("#3b82f6", "primary", "light")
        for original, mirror in zip(variants, mirror_variants(variants)):
            expected = max(0.05, min(0.98, 1.0 - original.perceptual.l))
            assert mirror.perceptual.l == pytest.approx(expected)

    def test_keeps_names_and_keys(self) -> None:
        variants = generate_brand_variants("#059669", "secondary", "dark")
        mirrored = mirror_variants(variants)
        assert [v.name for v in mirrored] == [v.name for v in variants]
        assert [v.background_variable_key for v in mirrored] == [
            v.background_variable_key for v in variants
        ]

    def test_extremes_are_clamped(self) -> None:
        variants = generate_brand_variants("#ffffff", "primary", "light")
        white = mirror_variants(variants)[0]
        assert white.perceptual.l == pytest.approx(0.05)
