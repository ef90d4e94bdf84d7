"""Tests for JSON and Markdown reports."""

from __future__ import annotations

import json
from pathlib import Path

from accesspalette.models import AccessibilityIssue, PaletteResult, Severity
from accesspalette.reporter import format_summary, write_json_report, write_markdown_report

ISSUES = [
    AccessibilityIssue(
        rule="contrast-best-effort", severity=Severity.ERROR, message="too weak",
        variable_key="--color-primary",
    ),
    AccessibilityIssue(rule="background-chroma", severity=Severity.WARNING, message="tinted"),
    AccessibilityIssue(rule="note", severity=Severity.INFO, message="fyi"),
]


class TestJsonReport:
    def test_structure(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.json"
        write_json_report(palette_result, ISSUES, out)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["palette"]["mode"] == "light"
        assert data["palette"]["brand"]["primary"][0]["color"] == "#3b82f6"
        assert len(data["palette"]["layers"]) == 6
        assert data["issues"][0]["severity"] == "error"
        assert data["issues"][0]["variable_key"] == "--color-primary"


class TestMarkdownReport:
    def test_sections(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.md"
        write_markdown_report(palette_result, ISSUES, out)
        text = out.read_text(encoding="utf-8")
        assert text.startswith("# Palette Report (light mode)")
        assert "## Colors" in text
        assert "## Issues (1 errors, 1 warnings)" in text
        assert "- **[ERROR]** `contrast-best-effort`: too weak" in text
        assert "- **[WARN]** `background-chroma`: tinted" in text
        assert "- **[INFO]** `note`: fyi" in text

    def test_only_active_mode_rows(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.md"
        write_markdown_report(palette_result, [], out)
        text = out.read_text(encoding="utf-8")
        # light + light-variant per role
        assert text.count("| `--color-primary` |") == 1
        assert text.count("| `--color-primary-variant` |") == 1
        assert "| `--color-background` |" in text
        assert "| `--color-success` |" in text
        assert "## Issues (0 errors, 0 warnings)" in text


class TestFormatSummary:
    def test_summary(self, palette_result: PaletteResult) -> None:
        summary = format_summary(palette_result, ISSUES)
        assert "Palette: light mode" in summary
        assert "[ERROR] contrast-best-effort: too weak" in summary
        assert "[WARNING] background-chroma: tinted" in summary
