# src/Colourblind_camera/engine/white_balance.py
"""
Gray-world white balance over a rolling sample history.

The time-averaged scene is assumed neutral gray; the per-channel correction that
would make it so is blended into the current balance with a small smoothing
weight, so a single saturated object crossing the frame cannot swing calibration.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional, Tuple

import numpy as np

from Colourblind_camera.color.hsl import RGB
from Colourblind_camera.engine.params import EngineParams

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WhiteBalance:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def apply(self, rgb: RGB) -> RGB:
        return RGB(
            min(1.0, rgb.r * self.r),
            min(1.0, rgb.g * self.g),
            min(1.0, rgb.b * self.b),
        )


NEUTRAL_BALANCE = WhiteBalance()


class SampleHistory:
    """
    Does:
        Fixed-capacity FIFO of RGB samples, oldest evicted first.
    """

    def __init__(self, capacity: int = 30) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._buf: Deque[Tuple[float, float, float]] = deque(maxlen=int(capacity))

    def append(self, rgb: RGB) -> None:
        self._buf.append(rgb.as_tuple())

    def clear(self) -> None:
        self._buf.clear()

    def __len__(self) -> int:
        return len(self._buf)

    def __iter__(self) -> Iterator[RGB]:
        return (RGB(*t) for t in self._buf)

    def channel_means(self) -> Optional[Tuple[float, float, float]]:
        if not self._buf:
            return None
        m = np.asarray(self._buf, dtype=np.float64).mean(axis=0)
        return (float(m[0]), float(m[1]), float(m[2]))


class WhiteBalanceAdapter:
    """
    Does:
        Own the sample history and the smoothed balance; record samples, recompute
        the balance when eligible, and apply it to new samples.
    """

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()
        self.history = SampleHistory(self.params.history_capacity)
        self._balance = NEUTRAL_BALANCE

    @property
    def balance(self) -> WhiteBalance:
        return self._balance

    def reset(self) -> None:
        self.history.clear()
        self._balance = NEUTRAL_BALANCE

    def record_sample(self, rgb: RGB) -> None:
        self.history.append(rgb)

    def recompute(self) -> bool:
        """
        Does:
            One smoothing step toward the gray-world ideal. Returns True if the
            balance changed; history below min_history or a near-black average
            leaves it untouched.
        """
        p = self.params
        if len(self.history) < p.min_history:
            return False

        means = self.history.channel_means()
        if means is None:
            return False

        gray = sum(means) / 3.0
        if not gray > p.gray_floor:
            log.debug("white balance held: gray=%.4f below floor %.4f", gray, p.gray_floor)
            return False

        old = np.asarray(self._balance.as_tuple(), dtype=np.float64)
        ideal = gray / np.maximum(np.asarray(means, dtype=np.float64), p.channel_floor)
        new = old * (1.0 - p.smoothing) + ideal * p.smoothing
        new = np.clip(new, p.balance_min, p.balance_max)

        self._balance = WhiteBalance(float(new[0]), float(new[1]), float(new[2]))
        log.debug(
            "white balance r=%.4f g=%.4f b=%.4f (gray=%.4f, n=%d)",
            self._balance.r, self._balance.g, self._balance.b, gray, len(self.history),
        )
        return bool(np.any(new != old))

    def apply(self, rgb: RGB) -> RGB:
        return self._balance.apply(rgb)
