# src/Colourblind_camera/color/hsl.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

# Below this max-min spread a sample is treated as fully achromatic.
HUE_EPSILON = 0.001


def clamp01(x: float) -> float:
    """
    Does:
        Map any float into [0, 1]. NaN becomes 0, infinities saturate.
    """
    x = float(x)
    if math.isnan(x):
        return 0.0
    return min(1.0, max(0.0, x))


@dataclass(frozen=True, slots=True)
class RGB:
    """
    Does:
        One averaged colour sample, channels in [0, 1].
    """
    r: float
    g: float
    b: float

    def clamped(self) -> "RGB":
        return RGB(clamp01(self.r), clamp01(self.g), clamp01(self.b))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class HSL:
    h: float  # [0, 1)
    s: float  # [0, 1]
    l: float  # [0, 1]

    @property
    def hue_deg(self) -> float:
        return self.h * 360.0

    @property
    def sat_pct(self) -> float:
        return self.s * 100.0

    @property
    def light_pct(self) -> float:
        return self.l * 100.0


def chroma(rgb: RGB) -> float:
    return max(rgb.r, rgb.g, rgb.b) - min(rgb.r, rgb.g, rgb.b)


def rgb_to_hsl(rgb: RGB, *, eps: float = HUE_EPSILON) -> HSL:
    """
    Does:
        Convert RGB in [0,1] to HSL. Hue is keyed on the max channel and wrapped
        into [0, 1); spreads at or below eps yield (0, 0, l).
    """
    r, g, b = float(rgb.r), float(rgb.g), float(rgb.b)
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    l = (mx + mn) / 2.0
    if delta <= eps:
        return HSL(0.0, 0.0, l)

    denom = 1.0 - abs(2.0 * l - 1.0)
    s = delta / denom if denom > 0.0 else 1.0
    s = min(1.0, max(0.0, s))

    if mx == r:
        h = math.fmod((g - b) / delta, 6.0)
    elif mx == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    h /= 6.0
    if h < 0.0:
        h += 1.0
    # fmod can land exactly on 1.0 after the wrap for tiny negative values
    if h >= 1.0:
        h -= 1.0

    return HSL(h, s, l)
