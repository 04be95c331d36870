# src/Colourblind_camera/color/adapters.py
from __future__ import annotations

import string
from typing import TYPE_CHECKING, Sequence, Union

from Colourblind_camera.color.hsl import RGB

if TYPE_CHECKING:
    from Colourblind_camera.engine.classifier import AdaptiveColorClassifier

ColorLike = Union[RGB, str, Sequence[float]]


def hex_to_rgb01(hx: str) -> RGB:
    s = str(hx).strip().lstrip("#")
    # int(.., 16) alone would accept signs and inner whitespace
    if len(s) != 6 or any(ch not in string.hexdigits for ch in s):
        raise ValueError(f"Invalid hex color: {hx!r}")
    r = int(s[0:2], 16) / 255.0
    g = int(s[2:4], 16) / 255.0
    b = int(s[4:6], 16) / 255.0
    return RGB(r, g, b)


def rgb255_to_rgb01(r: int, g: int, b: int) -> RGB:
    return RGB(float(r) / 255.0, float(g) / 255.0, float(b) / 255.0)


def to_rgb(value: ColorLike) -> RGB:
    """
    Does:
        Accept a UI-side colour (RGB, "#RRGGBB", or an (r, g, b[, a]) sequence in
        [0, 1]) and return an RGB sample. Alpha is dropped.
    """
    if isinstance(value, RGB):
        return value
    if isinstance(value, str):
        return hex_to_rgb01(value)
    vals = list(value)
    if len(vals) not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels, got {len(vals)}")
    return RGB(float(vals[0]), float(vals[1]), float(vals[2]))


def name_for(value: ColorLike, classifier: "AdaptiveColorClassifier") -> str:
    return classifier.classify(to_rgb(value))
