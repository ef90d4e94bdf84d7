"""Shared data models used across the AccessPalette engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Iterator, Literal

ThemeMode = Literal["light", "dark"]
LayerDirection = Literal["normal", "inverted"]

PURE_WHITE = "#ffffff"
PURE_BLACK = "#000000"


class Severity(str, enum.Enum):
    """Severity level for accessibility issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Harmony(str, enum.Enum):
    """Hue relationships used by the random palette generator."""

    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    ANALOGOUS = "analogous"


@dataclass(frozen=True)
class PerceptualColor:
    """A color in OKLCH space.

    ``h`` carries no information when ``c`` is ~0; conversions report 0.0
    for achromatic colors so they round-trip stably.
    """

    l: float  # noqa: E741
    c: float
    h: float

    def with_lightness(self, lightness: float) -> PerceptualColor:
        """Copy with lightness clamped to [0, 1]."""
        return replace(self, l=max(0.0, min(1.0, lightness)))


@dataclass(frozen=True)
class ColorVariant:
    """A background color paired with its readable on-color."""

    name: str  # light, light-variant, dark, dark-variant, or a semantic role
    color: str
    perceptual: PerceptualColor
    background_variable_key: str
    on_color: str
    on_variable_key: str
    best_effort: bool = False  # on-color misses the minimum contrast

    @property
    def mode(self) -> ThemeMode:
        """Theme mode a brand variant belongs to."""
        return "dark" if self.name.startswith("dark") else "light"


@dataclass(frozen=True)
class LayerStep:
    """One tone of the background depth stack."""

    index: int  # 1-based; 1 is the page background
    name: str
    color: str
    perceptual: PerceptualColor
    on_color: str
    background_variable_key: str
    on_variable_key: str


@dataclass(frozen=True)
class ChromaEntry:
    hue: float
    variants: list[ColorVariant]


@dataclass(frozen=True)
class ChromaGroup:
    """A family of brand-style variants spread evenly around the hue circle."""

    id: str
    name: str
    chroma: float
    lightness: float
    entries: list[ChromaEntry] = field(default_factory=list)


@dataclass(frozen=True)
class SemanticPalette:
    success: ColorVariant
    warning: ColorVariant
    error: ColorVariant
    info: ColorVariant

    def __iter__(self) -> Iterator[ColorVariant]:
        yield from (self.success, self.warning, self.error, self.info)


@dataclass(frozen=True)
class LightnessRange:
    """Band of lightness values that clear a contrast target.

    ``satisfiable`` is False when nothing passed and the full [0, 1] range
    was returned as a fallback.
    """

    min: float
    max: float
    satisfiable: bool = True

    def clamp(self, lower: float, upper: float) -> LightnessRange:
        """Intersect with [lower, upper]; an empty intersection yields the bounds."""
        lo = max(self.min, lower)
        hi = min(self.max, upper)
        if lo > hi:
            return LightnessRange(lower, upper, satisfiable=False)
        return LightnessRange(lo, hi, satisfiable=self.satisfiable)


@dataclass(frozen=True)
class RandomPalette:
    primary: str
    secondary: str
    tertiary: str
    harmony: Harmony
    lightness_range: LightnessRange


@dataclass
class AccessibilityIssue:
    """A single accessibility issue found in a generated palette."""

    rule: str
    severity: Severity
    message: str
    variable_key: str | None = None


@dataclass
class PaletteResult:
    """Everything derived from one palette state."""

    mode: ThemeMode
    background: str
    background_hue: float
    background_chroma: float
    brand: dict[str, list[ColorVariant]] = field(default_factory=dict)
    brand_opposite: dict[str, list[ColorVariant]] = field(default_factory=dict)
    layers: list[LayerStep] = field(default_factory=list)
    layers_opposite: list[LayerStep] = field(default_factory=list)
    semantic: SemanticPalette | None = None
    semantic_opposite: SemanticPalette | None = None
    chroma_groups: list[ChromaGroup] = field(default_factory=list)

    @property
    def opposite_mode(self) -> ThemeMode:
        return "dark" if self.mode == "light" else "light"

    @property
    def all_variants(self) -> list[ColorVariant]:
        """Brand, semantic and chroma-group variants of the active mode."""
        out: list[ColorVariant] = []
        for variants in self.brand.values():
            out.extend(variants)
        if self.semantic is not None:
            out.extend(self.semantic)
        for group in self.chroma_groups:
            for entry in group.entries:
                out.extend(entry.variants)
        return out

    @property
    def best_effort_count(self) -> int:
        return sum(1 for v in self.all_variants if v.best_effort)
