"""Tests for the palette accessibility analyzer."""

from __future__ import annotations

import pytest

from accesspalette.analyzer import PaletteAnalyzer
from accesspalette.config import PaletteConfig
from accesspalette.models import PaletteResult, Severity
from accesspalette.pipeline import run_pipeline
from accesspalette.state import PaletteState


def _rules(issues: list) -> list[str]:
    return [i.rule for i in issues]


class TestContrastChecks:
    def test_best_effort_reported(self, strict_config: PaletteConfig) -> None:
        result = run_pipeline(PaletteState(show_secondary=False, show_tertiary=False), config=strict_config)
        issues = PaletteAnalyzer(strict_config).analyze(result, simulation="none")
        errors = [i for i in issues if i.rule == "contrast-best-effort"]
        assert errors
        assert all(i.severity == Severity.ERROR for i in errors)
        assert any(i.variable_key == "--color-primary" for i in errors)
        assert any(i.variable_key == "--color-background" for i in errors)

    def test_default_palette_has_no_errors(self, palette_result: PaletteResult) -> None:
        issues = PaletteAnalyzer().analyze(palette_result)
        brand_errors = [
            i for i in issues
            if i.rule == "contrast-best-effort" and i.variable_key == "--color-primary"
            and "(light)" in i.message
        ]
        assert brand_errors == []


class TestLayerChecks:
    def test_identical_layers_warned(self) -> None:
        state = PaletteState(layer_count=3, custom_lightness=[0.95, 0.95, 0.95])
        issues = PaletteAnalyzer().analyze(run_pipeline(state), simulation="none")
        separation = [i for i in issues if i.rule == "layer-separation"]
        assert len(separation) == 2
        assert all(i.severity == Severity.WARNING for i in separation)

    def test_background_chroma_warned(self, palette_result: PaletteResult) -> None:
        issues = PaletteAnalyzer().analyze(palette_result)
        assert "background-chroma" in _rules(issues)

    def test_neutral_background_not_warned(self) -> None:
        result = run_pipeline(PaletteState(primary="#777777"))
        issues = PaletteAnalyzer().analyze(result, simulation="none")
        assert "background-chroma" not in _rules(issues)


class TestCvdChecks:
    def test_identical_brand_colors(self) -> None:
        state = PaletteState(primary="#3b82f6", secondary="#3b82f6", show_tertiary=False)
        issues = PaletteAnalyzer().analyze(run_pipeline(state))
        cvd = [i for i in issues if i.rule == "cvd-indistinguishable"]
        # one per simulation type
        assert len(cvd) == 4

    def test_simulation_filter(self) -> None:
        state = PaletteState(primary="#3b82f6", secondary="#3b82f6", show_tertiary=False)
        issues = PaletteAnalyzer().analyze(run_pipeline(state), simulation="protanopia")
        cvd = [i for i in issues if i.rule == "cvd-indistinguishable"]
        assert len(cvd) == 1
        assert "protanopia" in cvd[0].message

    def test_none_skips_cvd(self) -> None:
        state = PaletteState(primary="#3b82f6", secondary="#3b82f6", show_tertiary=False)
        issues = PaletteAnalyzer().analyze(run_pipeline(state), simulation="none")
        assert "cvd-indistinguishable" not in _rules(issues)

    def test_invalid_simulation(self, palette_result: PaletteResult) -> None:
        with pytest.raises(ValueError):
            PaletteAnalyzer().analyze(palette_result, simulation="x-ray")
