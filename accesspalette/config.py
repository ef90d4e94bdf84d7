"""Pydantic configuration model with YAML loading.

Every tunable constant of the engine (contrast targets, curve exponents,
offsets, bands) lives here so callers can override them per call or per
project through ``accesspalette.yaml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_CONFIG_NAME = "accesspalette.yaml"


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContrastConfig(_Section):
    """Perceptual contrast targets and search bounds."""

    min_lc: float = 60.0
    step: float = 0.01
    max_iterations: int = 50
    range_step: float = 0.02


class BrandConfig(_Section):
    """Derivation of the opposite main and the variants of a brand role."""

    dark_main_lightness: float = 0.75  # dark main derived from a light seed
    light_main_lightness: float = 0.55  # light main derived from a dark seed
    variant_offset: float = 0.1


class LayerConfig(_Section):
    """Default lightness curve of the background depth stack."""

    light_start: float = 0.99
    light_end: float = 0.92
    light_exponent: float = 0.85
    dark_start: float = 0.15
    dark_end: float = 0.35
    dark_exponent: float = 0.8
    light_background: float = 0.98
    dark_background: float = 0.15
    light_inverted_background: float = 0.92
    dark_inverted_background: float = 0.35
    sync_chroma: float = 0.012
    achromatic_threshold: float = 0.02
    chroma_warning: float = 0.01
    min_delta_e: float = 1.0


class MirrorConfig(_Section):
    """Target bands for opposite-mode layer scales and variants."""

    dark_band: tuple[float, float] = (0.10, 0.25)
    light_band: tuple[float, float] = (0.98, 0.90)
    variant_min: float = 0.05
    variant_max: float = 0.98


class SemanticConfig(_Section):
    """Fixed-hue status colors."""

    hues: dict[str, float] = Field(
        default_factory=lambda: {"success": 145.0, "warning": 95.0, "error": 29.0, "info": 245.0}
    )
    chroma: float = 0.15
    light_lightness: float = 0.55
    dark_lightness: float = 0.75
    warning_light_lightness: float = 0.60
    min_lc: float = 60.0


class RandomConfig(_Section):
    """Bounds for the random harmonious palette."""

    min_lc: float = 60.0
    lightness_floor: float = 0.3
    lightness_ceiling: float = 0.9
    chroma_min: float = 0.12
    chroma_max: float = 0.2
    lightness_jitter: float = 0.05
    chroma_jitter: float = 0.02


class SimulationConfig(_Section):
    """Distinguishability thresholds for the CVD checks."""

    delta_e_threshold: float = 2.0
    contrast_threshold: float = 3.0


class OutputConfig(_Section):
    """Report settings."""

    report_format: Literal["json", "markdown"] = "markdown"


class PaletteConfig(_Section):
    """Top-level configuration for AccessPalette."""

    contrast: ContrastConfig = Field(default_factory=ContrastConfig)
    brand: BrandConfig = Field(default_factory=BrandConfig)
    layers: LayerConfig = Field(default_factory=LayerConfig)
    mirror: MirrorConfig = Field(default_factory=MirrorConfig)
    semantic: SemanticConfig = Field(default_factory=SemanticConfig)
    random: RandomConfig = Field(default_factory=RandomConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> PaletteConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./accesspalette.yaml
          2. ~/.config/accesspalette/accesspalette.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "accesspalette" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> PaletteConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)


_DEFAULT = PaletteConfig()


def default_config() -> PaletteConfig:
    """Shared frozen default instance."""
    return _DEFAULT
