"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from accesspalette.config import PaletteConfig
from accesspalette.generators.layers import generate_layer_scale
from accesspalette.models import LayerStep, PaletteResult
from accesspalette.pipeline import run_pipeline
from accesspalette.state import PaletteState


@pytest.fixture
def default_state() -> PaletteState:
    return PaletteState()


@pytest.fixture
def palette_result(default_state: PaletteState) -> PaletteResult:
    return run_pipeline(default_state)


@pytest.fixture
def light_scale() -> list[LayerStep]:
    return generate_layer_scale(250.0, 0.012, 5, "light")


@pytest.fixture
def dark_scale() -> list[LayerStep]:
    return generate_layer_scale(250.0, 0.012, 5, "dark")


@pytest.fixture
def strict_config() -> PaletteConfig:
    """Config whose contrast target no color can reach."""
    return PaletteConfig.model_validate({"contrast": {"min_lc": 200.0}})


@pytest.fixture
def sample_state_yaml(tmp_path: Path) -> Path:
    """Write a sample palette state YAML and return its path."""
    content = """\
primary: '#3B82F6'
secondary: '#059669'
show_tertiary: false
layer_count: 4
base_mode: dark
layer_direction: inverted
bg_mode: custom
custom_bg_hue: 30
custom_bg_chroma: 0.02
chroma_groups:
- name: accent
  chroma: 0.12
  lightness: 0.7
  count: 3
"""
    path = tmp_path / "palette.yaml"
    path.write_text(content, encoding="utf-8")
    return path
