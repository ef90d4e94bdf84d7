"""JSON and Markdown palette reports."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from accesspalette.models import AccessibilityIssue, PaletteResult, Severity
from accesspalette.utils.contrast import classify_perceptual, perceptual_contrast


def write_json_report(result: PaletteResult, issues: list[AccessibilityIssue], output: Path) -> None:
    """Write a palette and its audit as a JSON report."""
    data = {
        "palette": asdict(result),
        "issues": [asdict(i) for i in issues],
    }
    output.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")


def _row(key: str, color: str, on_color: str) -> str:
    lc = perceptual_contrast(color, on_color)
    return f"| `{key}` | {color} | {on_color} | {abs(lc):.1f} | {classify_perceptual(lc).value} |"


def write_markdown_report(result: PaletteResult, issues: list[AccessibilityIssue], output: Path) -> None:
    """Write a palette and its audit as a Markdown report."""
    errors = sum(1 for i in issues if i.severity == Severity.ERROR)
    warnings = sum(1 for i in issues if i.severity == Severity.WARNING)

    lines: list[str] = [
        f"# Palette Report ({result.mode} mode)",
        "",
        f"- **Background:** {result.background}",
        f"- **Background tint:** hue {result.background_hue:.1f}, chroma {result.background_chroma:.3f}",
        f"- **Roles:** {', '.join(result.brand) or 'none'}",
        f"- **Layers:** {len(result.layers)}",
        f"- **Chroma groups:** {len(result.chroma_groups)}",
        "",
        "## Colors",
        "",
        "| Variable | Color | On-color | Lc | Level |",
        "|---|---|---|---|---|",
    ]
    for variants in result.brand.values():
        for v in variants:
            if v.mode == result.mode:
                lines.append(_row(v.background_variable_key, v.color, v.on_color))
    if result.semantic is not None:
        for v in result.semantic:
            lines.append(_row(v.background_variable_key, v.color, v.on_color))
    for step in result.layers:
        lines.append(_row(step.background_variable_key, step.color, step.on_color))

    lines += ["", f"## Issues ({errors} errors, {warnings} warnings)", ""]
    for issue in issues:
        marker = "ERROR" if issue.severity == Severity.ERROR else "WARN"
        if issue.severity == Severity.INFO:
            marker = "INFO"
        lines.append(f"- **[{marker}]** `{issue.rule}`: {issue.message}")

    lines.append("")
    output.write_text("\n".join(lines), encoding="utf-8")


def format_summary(result: PaletteResult, issues: list[AccessibilityIssue]) -> str:
    """Return a human-readable summary of a palette run."""
    lines = [
        f"Palette: {result.mode} mode, background {result.background}",
        f"Best-effort colors: {result.best_effort_count}",
    ]
    for issue in issues:
        lines.append(f"  [{issue.severity.value.upper()}] {issue.rule}: {issue.message}")
    return "\n".join(lines)
