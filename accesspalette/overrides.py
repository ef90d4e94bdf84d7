"""Per-variable color overrides applied as a read-time overlay.

The override map is owned by the caller and keyed by ``(mode, variable
key)`` so light and dark edits never leak into each other.  Generators never
see it; it is applied only where records are read for display or export.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping, TypeVar

from accesspalette.color.convert import normalize_hex, to_perceptual
from accesspalette.models import ColorVariant, LayerStep, ThemeMode

OverrideMap = Mapping[tuple[str, str], str]
Record = TypeVar("Record", ColorVariant, LayerStep)


def resolve(record: Record, overrides: OverrideMap, mode: ThemeMode) -> Record:
    """Return *record* with any overridden background/on-color substituted.

    The input record is never mutated; without matching overrides it is
    returned as is.
    """
    color = overrides.get((mode, record.background_variable_key))
    on_color = overrides.get((mode, record.on_variable_key))
    if color is None and on_color is None:
        return record

    changes: dict[str, object] = {}
    if color is not None:
        changes["color"] = normalize_hex(color)
        changes["perceptual"] = to_perceptual(changes["color"])
    if on_color is not None:
        changes["on_color"] = normalize_hex(on_color)
    return replace(record, **changes)


def resolve_all(records: Iterable[Record], overrides: OverrideMap, mode: ThemeMode) -> list[Record]:
    return [resolve(r, overrides, mode) for r in records]


def scoped_overrides(overrides: OverrideMap, mode: ThemeMode) -> dict[str, str]:
    """Flatten the overrides of one mode into a variable key -> hex dict."""
    return {key: value for (m, key), value in overrides.items() if m == mode}


def with_override(
    overrides: OverrideMap, mode: ThemeMode, variable_key: str, hex_color: str
) -> dict[tuple[str, str], str]:
    """Copy of *overrides* with one entry added or replaced."""
    updated = dict(overrides)
    updated[(mode, variable_key)] = normalize_hex(hex_color)
    return updated
