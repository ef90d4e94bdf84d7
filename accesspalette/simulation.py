"""Color vision deficiency (CVD) simulation.

Matrix approximations in the spirit of Brettel et al. (1997) and Viénot
et al. (1999), applied in linear sRGB.  Good enough to warn that two UI
colors collapse for a dichromat; not a diagnostic-grade renderer.

Pipeline for the dichromacies::

    hex -> linear RGB -> LMS -> deficiency matrix -> LMS -> linear RGB -> hex

Achromatopsia skips LMS and replaces linear RGB with its Rec. 709
luminance.
"""

from __future__ import annotations

import enum
from typing import Mapping, Sequence

from accesspalette.color.convert import hex_to_linear, linear_to_hex, normalize_hex
from accesspalette.color.distance import perceptual_distance
from accesspalette.config import PaletteConfig, default_config
from accesspalette.utils.contrast import ratio_contrast

Matrix = Sequence[Sequence[float]]


class SimulationType(str, enum.Enum):
    NONE = "none"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"


RGB_TO_LMS: Matrix = (
    (17.8824, 43.5161, 4.11935),
    (3.45565, 27.1554, 3.86714),
    (0.0299566, 0.184309, 1.46709),
)

LMS_TO_RGB: Matrix = (
    (0.0809444479, -0.130504409, 0.116721066),
    (-0.0102485335, 0.0540193266, -0.113614708),
    (-0.000365296938, -0.00412161469, 0.693511405),
)

_DEFICIENCY_MATRICES: dict[SimulationType, Matrix] = {
    SimulationType.PROTANOPIA: (
        (0.0, 2.02344, -2.52581),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    ),
    SimulationType.DEUTERANOPIA: (
        (1.0, 0.0, 0.0),
        (0.494207, 0.0, 1.24827),
        (0.0, 0.0, 1.0),
    ),
    SimulationType.TRITANOPIA: (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (-0.395913, 0.801109, 0.0),
    ),
}

DICHROMACIES = tuple(_DEFICIENCY_MATRICES)


def _multiply(matrix: Matrix, vector: Sequence[float]) -> tuple[float, float, float]:
    return (
        matrix[0][0] * vector[0] + matrix[0][1] * vector[1] + matrix[0][2] * vector[2],
        matrix[1][0] * vector[0] + matrix[1][1] * vector[1] + matrix[1][2] * vector[2],
        matrix[2][0] * vector[0] + matrix[2][1] * vector[1] + matrix[2][2] * vector[2],
    )


def simulate_cvd(hex_color: str, sim_type: SimulationType | str) -> str:
    """Return how *hex_color* appears under *sim_type*.

    Raises ``InvalidColorError`` for malformed colors and ``ValueError`` for
    an unknown simulation type.
    """
    kind = SimulationType(sim_type)
    color = normalize_hex(hex_color)
    if kind is SimulationType.NONE:
        return color

    linear = hex_to_linear(color)
    if kind is SimulationType.ACHROMATOPSIA:
        luminance = 0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2]
        return linear_to_hex(luminance, luminance, luminance)

    lms = _multiply(RGB_TO_LMS, linear)
    simulated = _multiply(_DEFICIENCY_MATRICES[kind], lms)
    return linear_to_hex(*_multiply(LMS_TO_RGB, simulated))


def simulate_palette(colors: Mapping[str, str], sim_type: SimulationType | str) -> dict[str, str]:
    """Apply :func:`simulate_cvd` to every value of a token -> hex mapping."""
    return {key: simulate_cvd(value, sim_type) for key, value in colors.items()}


def is_distinguishable(
    color1: str,
    color2: str,
    delta_e_threshold: float | None = None,
    contrast_threshold: float | None = None,
    *,
    config: PaletteConfig | None = None,
) -> bool:
    """True if the colors differ enough in ΔE OR in contrast ratio.

    Either signal alone is sufficient.  Identical colors never qualify.
    """
    cfg = (config or default_config()).simulation
    de_limit = cfg.delta_e_threshold if delta_e_threshold is None else delta_e_threshold
    ratio_limit = cfg.contrast_threshold if contrast_threshold is None else contrast_threshold

    if perceptual_distance(color1, color2) > de_limit:
        return True
    return ratio_contrast(color1, color2) > ratio_limit
