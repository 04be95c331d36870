# src/Colourblind_camera/color/neutral.py
"""
Neutral (grayscale) detection and the gray-scale naming bands.

Chroma is measured on corrected linear RGB; HSL saturation alone is unreliable
near black, so both gates must pass.
"""

from __future__ import annotations

from typing import Tuple

NEUTRAL_CHROMA_MAX = 0.12
NEUTRAL_SAT_PCT_MAX = 15.0

# (lightness % strictly above, name), evaluated top-down; Black is the floor.
GRAYSCALE_BANDS: Tuple[Tuple[float, str], ...] = (
    (92.0, "White"),
    (78.0, "Off-White"),
    (65.0, "Light Gray"),
    (45.0, "Gray"),
    (28.0, "Dark Gray"),
    (12.0, "Charcoal"),
)
GRAYSCALE_FLOOR = "Black"

# darkest first
GRAYSCALE_ORDER: Tuple[str, ...] = (GRAYSCALE_FLOOR,) + tuple(name for _, name in reversed(GRAYSCALE_BANDS))


def is_neutral(
    chroma: float,
    sat_pct: float,
    *,
    chroma_max: float = NEUTRAL_CHROMA_MAX,
    sat_pct_max: float = NEUTRAL_SAT_PCT_MAX,
) -> bool:
    return chroma < chroma_max and sat_pct < sat_pct_max


def grayscale_band(light_pct: float) -> str:
    for cut, name in GRAYSCALE_BANDS:
        if light_pct > cut:
            return name
    return GRAYSCALE_FLOOR


def grayscale_band_index(light_pct: float) -> int:
    """
    Does:
        Ordinal of the band for light_pct, Black = 0 ... White = 6.
    """
    return GRAYSCALE_ORDER.index(grayscale_band(light_pct))
