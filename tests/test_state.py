"""Tests for the palette state file."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from accesspalette.state import PaletteState


class TestPaletteState:
    def test_defaults(self, default_state: PaletteState) -> None:
        assert default_state.primary == "#3b82f6"
        assert default_state.layer_count == 6
        assert default_state.base_mode == "light"
        assert list(default_state.seeds) == ["primary", "secondary", "tertiary"]

    def test_hex_normalized(self) -> None:
        assert PaletteState(primary="ABCDEF").primary == "#abcdef"

    def test_invalid_hex_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PaletteState(secondary="#abc")

    def test_layer_count_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PaletteState(layer_count=0)

    def test_hidden_roles_excluded(self) -> None:
        state = PaletteState(show_secondary=False, show_tertiary=False)
        assert state.seeds == {"primary": "#3b82f6"}

    def test_stale_custom_lightness_dropped(self) -> None:
        state = PaletteState(layer_count=3, custom_lightness=[0.9, 0.8])
        assert state.custom_lightness is None

    def test_matching_custom_lightness_kept(self) -> None:
        state = PaletteState(layer_count=2, custom_lightness=[0.9, 0.8])
        assert state.custom_lightness == [0.9, 0.8]

    def test_custom_lightness_range(self) -> None:
        with pytest.raises(ValidationError):
            PaletteState(layer_count=2, custom_lightness=[1.2, 0.8])

    def test_custom_bg_chroma_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PaletteState(custom_bg_chroma=0.1)


class TestStateFile:
    def test_load(self, sample_state_yaml: Path) -> None:
        state = PaletteState.load(sample_state_yaml)
        assert state.primary == "#3b82f6"
        assert state.base_mode == "dark"
        assert state.layer_direction == "inverted"
        assert state.bg_mode == "custom"
        assert list(state.seeds) == ["primary", "secondary"]
        assert state.chroma_groups[0].name == "accent"
        assert state.chroma_groups[0].count == 3

    def test_round_trip(self, sample_state_yaml: Path, tmp_path: Path) -> None:
        state = PaletteState.load(sample_state_yaml)
        out = tmp_path / "saved.yaml"
        state.save(out)
        assert PaletteState.load(out) == state

    def test_save_omits_unset_optionals(self, tmp_path: Path) -> None:
        out = tmp_path / "palette.yaml"
        PaletteState().save(out)
        text = out.read_text(encoding="utf-8")
        assert "primary: '#3b82f6'" in text
        assert "custom_bg_hue" not in text

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="empty"):
            PaletteState.load(path)

    def test_invalid_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("layer_count: lots\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            PaletteState.load(path)
