"""Tests for brand role variants."""

from __future__ import annotations

import pytest

from accesspalette.color.adjust import on_color_contrast
from accesspalette.color.convert import InvalidColorError
from accesspalette.config import PaletteConfig
from accesspalette.generators.brand import (
    VARIANT_NAMES,
    generate_brand_variants,
    variants_for_mode,
)


class TestGenerateBrandVariants:
    def test_names_and_order(self) -> None:
        variants = generate_brand_variants("#3b82f6", "primary", "light")
        assert [v.name for v in variants] == list(VARIANT_NAMES)

    def test_passing_seed_kept_exactly(self) -> None:
        variants = generate_brand_variants("#3B82F6", "primary", "light")
        assert variants[0].color == "#3b82f6"

    def test_dark_seed_kept_in_dark_mode(self) -> None:
        variants = generate_brand_variants("#93c5fd", "primary", "dark")
        dark = next(v for v in variants if v.name == "dark")
        assert dark.color == "#93c5fd"

    def test_variant_is_darker_than_main(self) -> None:
        light, light_variant, dark, dark_variant = generate_brand_variants("#3b82f6", "primary", "light")
        assert light_variant.perceptual.l <= light.perceptual.l

    def test_variable_keys(self) -> None:
        light, light_variant, dark, dark_variant = generate_brand_variants("#059669", "secondary", "light")
        assert light.background_variable_key == "--color-secondary"
        assert light.on_variable_key == "--color-on-secondary"
        assert dark.background_variable_key == "--color-secondary"
        assert light_variant.background_variable_key == "--color-secondary-variant"
        assert dark_variant.on_variable_key == "--color-on-secondary-variant"

    def test_on_colors_are_pure(self) -> None:
        for v in generate_brand_variants("#8b5cf6", "tertiary", "light"):
            assert v.on_color in ("#ffffff", "#000000")

    def test_best_effort_flag_matches_contrast(self) -> None:
        for seed in ("#3b82f6", "#fde047", "#777777"):
            for v in generate_brand_variants(seed, "primary", "light"):
                assert v.best_effort == (on_color_contrast(v.color, v.on_color) < 60.0)

    def test_light_side_reaches_target(self) -> None:
        light, light_variant, _, _ = generate_brand_variants("#3b82f6", "primary", "light")
        assert on_color_contrast(light.color, light.on_color) >= 60.0
        assert on_color_contrast(light_variant.color, light_variant.on_color) >= 60.0
        assert not light.best_effort

    def test_impossible_target_is_best_effort(self, strict_config: PaletteConfig) -> None:
        variants = generate_brand_variants("#3b82f6", "primary", "light", config=strict_config)
        assert all(v.best_effort for v in variants)

    def test_invalid_seed_raises(self) -> None:
        with pytest.raises(InvalidColorError):
            generate_brand_variants("#12345", "primary", "light")

    def test_invalid_mode_raises(self) -> None:
        with pytest.raises(ValueError):
            generate_brand_variants("#3b82f6", "primary", "dim")  # type: ignore[arg-type]

    def test_deterministic(self) -> None:
        first = generate_brand_variants("#8b5cf6", "tertiary", "dark")
        second = generate_brand_variants("#8b5cf6", "tertiary", "dark")
        assert first == second


class TestVariantsForMode:
    def test_split_by_mode(self) -> None:
        variants = generate_brand_variants("#3b82f6", "primary", "light")
        assert [v.name for v in variants_for_mode(variants, "light")] == ["light", "light-variant"]
        assert [v.name for v in variants_for_mode(variants, "dark")] == ["dark", "dark-variant"]
