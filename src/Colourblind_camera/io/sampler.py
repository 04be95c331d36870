# src/Colourblind_camera/io/sampler.py
"""
Frame sampling.

Reduces a pixel buffer (H x W x C numpy array) to one averaged RGB sample. Byte
order is handled here so the engine only ever sees (r, g, b) in [0, 1].
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np

from Colourblind_camera.color.hsl import RGB

# channel order -> (r, g, b) indices, minimum channel count
_CHANNEL_INDEX: Dict[str, Tuple[Tuple[int, int, int], int]] = {
    "RGB": ((0, 1, 2), 3),
    "BGR": ((2, 1, 0), 3),
    "RGBA": ((0, 1, 2), 4),
    "BGRA": ((2, 1, 0), 4),
}


def _rgb_planes(frame: np.ndarray, channel_order: str) -> np.ndarray:
    """
    Does:
        Validate the frame and return a float64 H x W x 3 view in RGB order,
        scaled into [0, 1].

    Raises:
        ValueError on unknown channel order or incompatible shape.
    """
    order = str(channel_order).strip().upper()
    if order not in _CHANNEL_INDEX:
        raise ValueError(f"Unknown channel order: {channel_order!r} (expected one of {sorted(_CHANNEL_INDEX)})")
    idx, min_c = _CHANNEL_INDEX[order]

    arr = np.asarray(frame)
    if arr.ndim != 3:
        raise ValueError(f"Expected an H x W x C frame, got shape {arr.shape}")
    if arr.shape[2] < min_c:
        raise ValueError(f"{order} frame needs {min_c} channels, got {arr.shape[2]}")

    rgb = arr[:, :, list(idx)]
    if np.issubdtype(rgb.dtype, np.integer):
        # full-scale of the integer type (255 for uint8, 65535 for uint16)
        return rgb.astype(np.float64) / float(np.iinfo(rgb.dtype).max)
    return rgb.astype(np.float64)


def _mean_rgb(pixels: np.ndarray) -> Optional[RGB]:
    flat = pixels.reshape(-1, 3)
    if flat.shape[0] == 0:
        return None
    m = flat.mean(axis=0)
    return RGB(float(m[0]), float(m[1]), float(m[2]))


def sample_center_region(
    frame: np.ndarray,
    *,
    radius: int = 80,
    stride: int = 8,
    channel_order: str = "BGRA",
) -> Optional[RGB]:
    """
    Does:
        Average a strided lattice of points in the square [c - radius, c + radius)
        around the frame centre. Points outside the frame are skipped; returns None
        when none remain.
    """
    if radius < 1 or stride < 1:
        raise ValueError(f"radius and stride must be >= 1, got radius={radius}, stride={stride}")

    rgb = _rgb_planes(frame, channel_order)
    h, w = rgb.shape[:2]
    cy, cx = h // 2, w // 2

    offsets = np.arange(-radius, radius, stride)
    ys = cy + offsets
    xs = cx + offsets
    ys = ys[(ys >= 0) & (ys < h)]
    xs = xs[(xs >= 0) & (xs < w)]
    if ys.size == 0 or xs.size == 0:
        return None

    return _mean_rgb(rgb[np.ix_(ys, xs)])


def sample_grid(image: np.ndarray, *, grid: int = 10, channel_order: str = "RGBA") -> Optional[RGB]:
    """
    Does:
        Still-image sampling: average a grid x grid lattice at
        ((col * w) // grid, (row * h) // grid).
    """
    if grid < 1:
        raise ValueError(f"grid must be >= 1, got {grid}")

    rgb = _rgb_planes(image, channel_order)
    h, w = rgb.shape[:2]
    if h == 0 or w == 0:
        return None

    steps = np.arange(grid)
    ys = (steps * h) // grid
    xs = (steps * w) // grid
    return _mean_rgb(rgb[np.ix_(ys, xs)])


def average_color(image: np.ndarray, *, channel_order: str = "RGBA") -> Optional[RGB]:
    return _mean_rgb(_rgb_planes(image, channel_order))
