"""The minimal reproducible input set for a palette.

A ``PaletteState`` holds everything needed to regenerate a palette: seed
colors, layer structure, mode and background settings.  It is validated by
pydantic and stored as YAML (``palette.yaml``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from accesspalette.color.convert import InvalidColorError, normalize_hex


class ChromaGroupSpec(BaseModel):
    """Parameters of one chroma group."""

    name: str
    chroma: float = Field(0.15, ge=0.0, le=0.4)
    lightness: float = Field(0.7, ge=0.0, le=1.0)
    count: int = Field(6, ge=1, le=36)


class PaletteState(BaseModel):
    """Seed inputs of a palette; every derived value is recomputed from these."""

    primary: str = "#3b82f6"
    secondary: str = "#059669"
    tertiary: str = "#8b5cf6"
    show_secondary: bool = True
    show_tertiary: bool = True
    layer_count: int = Field(6, ge=1, le=20)
    base_mode: Literal["light", "dark"] = "light"
    layer_direction: Literal["normal", "inverted"] = "normal"
    bg_mode: Literal["sync", "custom"] = "sync"
    custom_bg_hue: Optional[float] = Field(None, ge=0.0, le=360.0)  # noqa: UP007
    custom_bg_chroma: Optional[float] = Field(None, ge=0.0, le=0.04)  # noqa: UP007
    custom_lightness: Optional[list[float]] = None  # noqa: UP007
    chroma_groups: list[ChromaGroupSpec] = Field(default_factory=list)

    @field_validator("primary", "secondary", "tertiary")
    @classmethod
    def _valid_hex(cls, value: str) -> str:
        try:
            return normalize_hex(value)
        except InvalidColorError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("custom_lightness")
    @classmethod
    def _lightness_in_range(cls, value: list[float] | None) -> list[float] | None:
        if value is not None and any(not 0.0 <= v <= 1.0 for v in value):
            raise ValueError("custom lightness values must lie in [0, 1]")
        return value

    @model_validator(mode="after")
    def _drop_stale_lightness(self) -> PaletteState:
        # A lightness list authored for another layer count no longer applies.
        if self.custom_lightness is not None and len(self.custom_lightness) != self.layer_count:
            self.custom_lightness = None
        return self

    @property
    def seeds(self) -> dict[str, str]:
        """Role -> seed color for every visible brand role."""
        roles = {"primary": self.primary}
        if self.show_secondary:
            roles["secondary"] = self.secondary
        if self.show_tertiary:
            roles["tertiary"] = self.tertiary
        return roles

    @classmethod
    def load(cls, path: Path) -> PaletteState:
        """Load a state file from disk."""
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if raw is None:
            raise ValueError(f"State file is empty: {path}")
        return cls.model_validate(raw)

    def save(self, path: Path) -> None:
        """Write the state to disk as YAML."""
        yaml_str = yaml.dump(
            self.model_dump(mode="json", exclude_none=True),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        path.write_text(yaml_str, encoding="utf-8")
