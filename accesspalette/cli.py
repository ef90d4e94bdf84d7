"""Command line interface for the palette engine."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from accesspalette import __version__
from accesspalette.color.convert import InvalidColorError, normalize_hex

app = typer.Typer(
    name="accesspalette",
    help="Accessible color palette generator.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"accesspalette {__version__}")
        raise typer.Exit()


def _swatch(hex_color: str) -> str:
    return f"[on {hex_color}]    [/] {hex_color}"


def _load_config(config: Optional[Path]):  # noqa: UP007
    from accesspalette.config import PaletteConfig

    if config is not None and not config.is_file():
        console.print(f"[red]File not found:[/red] {config}")
        raise typer.Exit(code=1)
    return PaletteConfig.load(config)


def _parse_hex(value: str) -> str:
    try:
        return normalize_hex(value)
    except InvalidColorError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """AccessPalette: accessible color palettes from brand seeds."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_state(
    state_file: Optional[Path],  # noqa: UP007
    seeds: Optional[List[str]],  # noqa: UP006, UP007
    mode: Optional[str],  # noqa: UP007
    layers: Optional[int],  # noqa: UP007
    direction: Optional[str],  # noqa: UP007
):
    from pydantic import ValidationError

    from accesspalette.state import PaletteState

    try:
        state = PaletteState.load(state_file) if state_file is not None else PaletteState()
        updates: dict = {}
        if seeds:
            for role, seed in zip(("primary", "secondary", "tertiary"), seeds):
                updates[role] = seed
            updates["show_secondary"] = len(seeds) > 1
            updates["show_tertiary"] = len(seeds) > 2
        if mode is not None:
            updates["base_mode"] = mode
        if layers is not None:
            updates["layer_count"] = layers
        if direction is not None:
            updates["layer_direction"] = direction
        if updates:
            state = PaletteState.model_validate({**state.model_dump(), **updates})
    except (ValidationError, ValueError) as exc:
        console.print(f"[red]Invalid palette input:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    return state


@app.command()
def generate(
    seeds: Optional[List[str]] = typer.Argument(  # noqa: UP006, UP007
        None, help="Up to three brand seeds: primary [secondary [tertiary]].",
    ),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="light or dark."),  # noqa: UP007
    layers: Optional[int] = typer.Option(None, "--layers", "-l", help="Number of layers."),  # noqa: UP007
    direction: Optional[str] = typer.Option(  # noqa: UP007
        None, "--direction", "-d", help="normal or inverted.",
    ),
    state_file: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--state", "-s", help="Palette state YAML to start from.",
    ),
    report: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--report", "-r", help="Write a report (format from config).",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Config YAML."),  # noqa: UP007
) -> None:
    """Generate brand, semantic and layer colors."""
    if state_file is not None and not state_file.is_file():
        console.print(f"[red]File not found:[/red] {state_file}")
        raise typer.Exit(code=1)

    cfg = _load_config(config)
    state = _load_state(state_file, seeds, mode, layers, direction)

    from accesspalette.pipeline import run_pipeline
    from accesspalette.utils.contrast import perceptual_contrast

    result = run_pipeline(state, config=cfg)

    table = Table(title=f"Palette ({result.mode} mode)")
    table.add_column("Variable", style="bold")
    table.add_column("Color")
    table.add_column("On-color")
    table.add_column("Lc", justify="right")
    table.add_column("Opposite")

    def add(key: str, color: str, on_color: str, opposite: str, best_effort: bool = False) -> None:
        lc = abs(perceptual_contrast(color, on_color))
        lc_text = f"[yellow]{lc:.1f}[/yellow]" if best_effort else f"{lc:.1f}"
        table.add_row(key, _swatch(color), on_color, lc_text, _swatch(opposite))

    for role, variants in result.brand.items():
        opposite = result.brand_opposite[role]
        for v, o in zip(variants, opposite):
            add(f"{v.background_variable_key} ({v.name})", v.color, v.on_color, o.color, v.best_effort)
    if result.semantic is not None and result.semantic_opposite is not None:
        for v, o in zip(result.semantic, result.semantic_opposite):
            add(v.background_variable_key, v.color, v.on_color, o.color, v.best_effort)
    for step, o in zip(result.layers, result.layers_opposite):
        add(step.background_variable_key, step.color, step.on_color, o.color)

    console.print(table)

    for group in result.chroma_groups:
        group_table = Table(title=f"Chroma group: {group.name}")
        group_table.add_column("Hue", justify="right")
        for name in ("light", "light-variant", "dark", "dark-variant"):
            group_table.add_column(name)
        for entry in group.entries:
            group_table.add_row(f"{entry.hue:.0f}", *(_swatch(v.color) for v in entry.variants))
        console.print(group_table)

    if report is not None:
        from accesspalette.analyzer import PaletteAnalyzer
        from accesspalette.reporter import write_json_report, write_markdown_report

        issues = PaletteAnalyzer(cfg).analyze(result)
        if cfg.output.report_format == "json":
            write_json_report(result, issues, report)
        else:
            write_markdown_report(result, issues, report)
        console.print(f"[green]OK[/green] Report written to {report}")


@app.command()
def check(
    background: str = typer.Argument(..., help="Background color (hex)."),
    foreground: str = typer.Argument(..., help="Text color (hex)."),
) -> None:
    """Show WCAG ratio and APCA contrast for a color pair."""
    from accesspalette.utils.contrast import (
        classify_perceptual,
        contrast_result,
        format_ratio,
        perceptual_contrast,
    )

    bg = _parse_hex(background)
    fg = _parse_hex(foreground)
    result = contrast_result(bg, fg)
    lc = perceptual_contrast(bg, fg)

    def yes_no(value: bool) -> str:
        return "[green]Pass[/green]" if value else "[red]Fail[/red]"

    table = Table(title=f"Contrast: {fg} on {bg}")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Ratio", format_ratio(result.ratio))
    table.add_row("AA", yes_no(result.aa))
    table.add_row("AAA", yes_no(result.aaa))
    table.add_row("AA large", yes_no(result.aa_large))
    table.add_row("AAA large", yes_no(result.aaa_large))
    table.add_row("APCA Lc", f"{lc:.1f}")
    table.add_row("APCA level", classify_perceptual(lc).value)
    console.print(table)


@app.command(name="range")
def lightness_range(
    background: str = typer.Argument(..., help="Background color (hex)."),
    min_lc: float = typer.Option(60.0, "--min-lc", help="Minimum APCA Lc."),
    chroma: float = typer.Option(0.15, "--chroma", "-c", help="OKLCH chroma."),
    hue: float = typer.Option(250.0, "--hue", help="OKLCH hue."),
    config: Optional[Path] = typer.Option(None, "--config", help="Config YAML."),  # noqa: UP007
) -> None:
    """Find the lightness band readable on a background."""
    from accesspalette.color.adjust import accessible_lightness_range

    bg = _parse_hex(background)
    found = accessible_lightness_range(bg, min_lc, chroma, hue, config=_load_config(config))
    if found.satisfiable:
        console.print(f"Lightness {found.min:.2f} - {found.max:.2f} reaches Lc {min_lc:g} on {bg}")
    else:
        console.print(f"[yellow]![/yellow] Nothing reaches Lc {min_lc:g} on {bg}; full range returned.")


@app.command()
def simulate(
    colors: List[str] = typer.Argument(..., help="Colors to simulate (hex)."),  # noqa: UP006
    sim_type: Optional[str] = typer.Option(  # noqa: UP007
        None, "--type", "-t", help="protanopia, deuteranopia, tritanopia or achromatopsia.",
    ),
) -> None:
    """Show colors as seen with color vision deficiencies."""
    from accesspalette.simulation import DICHROMACIES, SimulationType, simulate_cvd

    parsed = [_parse_hex(c) for c in colors]
    if sim_type is None:
        kinds = [*DICHROMACIES, SimulationType.ACHROMATOPSIA]
    else:
        try:
            kinds = [SimulationType(sim_type)]
        except ValueError:
            console.print(f"[red]Unknown simulation type:[/red] {sim_type}")
            raise typer.Exit(code=1)

    table = Table(title="CVD simulation")
    table.add_column("Color", style="bold")
    for kind in kinds:
        table.add_column(kind.value)
    for color in parsed:
        table.add_row(_swatch(color), *(_swatch(simulate_cvd(color, k)) for k in kinds))
    console.print(table)


@app.command(name="random")
def random_palette(
    background: Optional[str] = typer.Option(  # noqa: UP007
        None, "--background", "-b", help="Keep colors readable on this background.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),  # noqa: UP007
) -> None:
    """Generate a random harmonious palette."""
    from accesspalette.generators.harmony import generate_random_palette

    bg = _parse_hex(background) if background is not None else None
    palette = generate_random_palette(bg, rng=random.Random(seed))

    table = Table(title=f"Random palette ({palette.harmony.value})")
    table.add_column("Role", style="bold")
    table.add_column("Color")
    table.add_row("primary", _swatch(palette.primary))
    table.add_row("secondary", _swatch(palette.secondary))
    table.add_row("tertiary", _swatch(palette.tertiary))
    console.print(table)
    console.print(
        f"[dim]Lightness band {palette.lightness_range.min:.2f} - {palette.lightness_range.max:.2f}[/dim]"
    )


@app.command()
def audit(
    state_file: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--state", "-s", help="Palette state YAML.",
    ),
    simulation: Optional[str] = typer.Option(  # noqa: UP007
        None, "--simulation", help="Limit CVD checks to one type.",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Config YAML."),  # noqa: UP007
) -> None:
    """Audit a palette for contrast and color vision issues."""
    if state_file is not None and not state_file.is_file():
        console.print(f"[red]File not found:[/red] {state_file}")
        raise typer.Exit(code=1)

    from accesspalette.analyzer import PaletteAnalyzer
    from accesspalette.pipeline import run_pipeline

    cfg = _load_config(config)
    state = _load_state(state_file, None, None, None, None)
    result = run_pipeline(state, config=cfg)
    try:
        issues = PaletteAnalyzer(cfg).analyze(result, simulation=simulation)
    except ValueError:
        console.print(f"[red]Unknown simulation type:[/red] {simulation}")
        raise typer.Exit(code=1)

    if not issues:
        console.print("[green]OK[/green] No accessibility issues found.")
        return

    severity_icon = {
        "error": "[red]X[/red]",
        "warning": "[yellow]![/yellow]",
        "info": "[blue]i[/blue]",
    }
    for issue in issues:
        icon = severity_icon.get(issue.severity.value, " ")
        console.print(f"  {icon} {escape(f'[{issue.rule}]')} {issue.message}")
