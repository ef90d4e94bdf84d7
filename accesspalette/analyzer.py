"""Palette accessibility analyzer.

Reads a generated ``PaletteResult`` and reports contrast fallbacks, weak
layer separation, tinted backgrounds, and colors that collapse into each
other under simulated color vision deficiencies.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Sequence

from accesspalette.color.adjust import on_color_contrast
from accesspalette.color.distance import perceptual_distance
from accesspalette.config import PaletteConfig, default_config
from accesspalette.models import (
    AccessibilityIssue,
    ColorVariant,
    LayerStep,
    PaletteResult,
    Severity,
)
from accesspalette.simulation import DICHROMACIES, SimulationType, is_distinguishable, simulate_cvd

logger = logging.getLogger(__name__)


class PaletteAnalyzer:
    """Audits a generated palette.

    Usage::

        analyzer = PaletteAnalyzer()
        issues = analyzer.analyze(run_pipeline(state))
    """

    def __init__(self, config: PaletteConfig | None = None) -> None:
        self.config = config or default_config()

    def analyze(
        self,
        result: PaletteResult,
        *,
        simulation: SimulationType | str | None = None,
    ) -> list[AccessibilityIssue]:
        """Run every check; *simulation* limits the CVD checks to one type."""
        issues: list[AccessibilityIssue] = []

        self._check_variants(result.all_variants, issues)
        self._check_layers(result.layers, issues)
        self._check_background(result, issues)

        if simulation is None:
            sim_types: Sequence[SimulationType] = (*DICHROMACIES, SimulationType.ACHROMATOPSIA)
        else:
            sim_types = (SimulationType(simulation),)
        sim_types = [s for s in sim_types if s is not SimulationType.NONE]

        mains = [v for variants in result.brand.values() for v in variants if v.name == result.mode]
        self._check_cvd(mains, sim_types, "cvd-indistinguishable", issues)
        if result.semantic is not None:
            self._check_cvd(list(result.semantic), sim_types, "semantic-indistinguishable", issues)

        logger.debug("Palette audit found %d issue(s)", len(issues))
        return issues

    # ------------------------------------------------------------------
    # Contrast
    # ------------------------------------------------------------------

    def _check_variants(self, variants: Iterable[ColorVariant], issues: list[AccessibilityIssue]) -> None:
        for variant in variants:
            if not variant.best_effort:
                continue
            lc = on_color_contrast(variant.color, variant.on_color)
            issues.append(
                AccessibilityIssue(
                    rule="contrast-best-effort",
                    severity=Severity.ERROR,
                    message=(
                        f"{variant.background_variable_key} ({variant.name}) {variant.color} "
                        f"reaches only Lc {lc:.1f} with {variant.on_color}."
                    ),
                    variable_key=variant.background_variable_key,
                )
            )

    def _check_layers(self, layers: Sequence[LayerStep], issues: list[AccessibilityIssue]) -> None:
        min_lc = self.config.contrast.min_lc
        for step in layers:
            lc = on_color_contrast(step.color, step.on_color)
            if lc < min_lc:
                issues.append(
                    AccessibilityIssue(
                        rule="contrast-best-effort",
                        severity=Severity.ERROR,
                        message=f"{step.background_variable_key} {step.color} reaches only Lc {lc:.1f}.",
                        variable_key=step.background_variable_key,
                    )
                )

        min_delta = self.config.layers.min_delta_e
        for prev, step in zip(layers, layers[1:]):
            delta = perceptual_distance(prev.color, step.color)
            if delta < min_delta:
                issues.append(
                    AccessibilityIssue(
                        rule="layer-separation",
                        severity=Severity.WARNING,
                        message=(
                            f"{prev.name} and {step.name} differ by only ΔE {delta:.2f}; "
                            "the depth step may be invisible."
                        ),
                        variable_key=step.background_variable_key,
                    )
                )

    def _check_background(self, result: PaletteResult, issues: list[AccessibilityIssue]) -> None:
        if result.background_chroma > self.config.layers.chroma_warning:
            issues.append(
                AccessibilityIssue(
                    rule="background-chroma",
                    severity=Severity.WARNING,
                    message=(
                        f"Background chroma {result.background_chroma:.3f} is high; "
                        "text readability might be affected."
                    ),
                )
            )

    # ------------------------------------------------------------------
    # Color vision deficiency
    # ------------------------------------------------------------------

    def _check_cvd(
        self,
        variants: Sequence[ColorVariant],
        sim_types: Sequence[SimulationType],
        rule: str,
        issues: list[AccessibilityIssue],
    ) -> None:
        sim = self.config.simulation
        for sim_type in sim_types:
            for a, b in itertools.combinations(variants, 2):
                sa = simulate_cvd(a.color, sim_type)
                sb = simulate_cvd(b.color, sim_type)
                if not is_distinguishable(
                    sa, sb, sim.delta_e_threshold, sim.contrast_threshold, config=self.config
                ):
                    issues.append(
                        AccessibilityIssue(
                            rule=rule,
                            severity=Severity.WARNING,
                            message=(
                                f"{a.background_variable_key} and {b.background_variable_key} "
                                f"look alike under {sim_type.value} ({sa} vs {sb})."
                            ),
                            variable_key=b.background_variable_key,
                        )
                    )
