"""Tests for chroma groups."""

from __future__ import annotations

import pytest

from accesspalette.generators.chroma import generate_chroma_group


class TestGenerateChromaGroup:
    def test_even_hues(self) -> None:
        group = generate_chroma_group(0.12, 0.7, 6, "tag")
        assert [e.hue for e in group.entries] == [0.0, 60.0, 120.0, 180.0, 240.0, 300.0]

    def test_four_variants_per_hue(self) -> None:
        group = generate_chroma_group(0.12, 0.7, 4, "tag")
        for entry in group.entries:
            assert [v.name for v in entry.variants] == ["light", "light-variant", "dark", "dark-variant"]

    def test_keys_are_numbered(self) -> None:
        group = generate_chroma_group(0.12, 0.7, 3, "tag")
        assert group.entries[0].variants[0].background_variable_key == "--color-tag-1"
        assert group.entries[2].variants[1].background_variable_key == "--color-tag-3-variant"

    def test_metadata(self) -> None:
        group = generate_chroma_group(0.1, 0.65, 2, "chart")
        assert group.name == "chart"
        assert group.chroma == 0.1
        assert group.lightness == 0.65

    def test_single_hue(self) -> None:
        group = generate_chroma_group(0.12, 0.7, 1, "solo")
        assert [e.hue for e in group.entries] == [0.0]

    def test_ids_are_unique(self) -> None:
        first = generate_chroma_group(0.12, 0.7, 2, "tag")
        second = generate_chroma_group(0.12, 0.7, 2, "tag")
        assert first.id != second.id
        assert first.entries == second.entries

    def test_zero_count_raises(self) -> None:
        with pytest.raises(ValueError):
            generate_chroma_group(0.12, 0.7, 0, "tag")
