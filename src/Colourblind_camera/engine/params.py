# src/Colourblind_camera/engine/params.py
"""
Engine parameters.

All tuning constants of the adaptive classifier live here and can be overridden
from the environment (CBC_* variables) without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from Colourblind_camera.color.hsl import HUE_EPSILON
from Colourblind_camera.color.neutral import NEUTRAL_CHROMA_MAX, NEUTRAL_SAT_PCT_MAX


@dataclass(frozen=True, slots=True)
class EngineParams:
    # Sample history
    history_capacity: int = 30
    min_history: int = 10

    # Gray-world white balance
    gray_floor: float = 0.05     # skip updates on near-black scenes
    smoothing: float = 0.1       # weight of the ideal correction per update
    channel_floor: float = 0.01  # floor on channel means before dividing
    balance_min: float = 0.5
    balance_max: float = 2.0
    adaptive: bool = True

    # Neutral gate
    neutral_chroma_max: float = NEUTRAL_CHROMA_MAX
    neutral_sat_pct_max: float = NEUTRAL_SAT_PCT_MAX
    hue_epsilon: float = HUE_EPSILON

    def __post_init__(self) -> None:
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be >= 1, got {self.history_capacity}")
        if self.min_history < 1:
            raise ValueError(f"min_history must be >= 1, got {self.min_history}")
        if self.min_history > self.history_capacity:
            raise ValueError(
                f"min_history ({self.min_history}) exceeds history_capacity ({self.history_capacity}); "
                "white balance would never update"
            )
        if not 0.0 < self.smoothing <= 1.0:
            raise ValueError(f"smoothing must be in (0, 1], got {self.smoothing}")
        if not 0.0 < self.balance_min <= 1.0 <= self.balance_max:
            raise ValueError(
                f"balance bounds must satisfy 0 < min <= 1 <= max, got [{self.balance_min}, {self.balance_max}]"
            )
        if self.channel_floor <= 0.0:
            raise ValueError(f"channel_floor must be > 0, got {self.channel_floor}")


def _flag(name: str, default: bool) -> bool:
    v = os.environ.get(name, "1" if default else "0")
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}


def params_from_env() -> EngineParams:
    def _f(name: str, default: float) -> float:
        try:
            return float(os.environ.get(name, default))
        except Exception:
            return float(default)

    def _i(name: str, default: int) -> int:
        try:
            return int(os.environ.get(name, default))
        except Exception:
            return int(default)

    return EngineParams(
        history_capacity=_i("CBC_WB_HISTORY_CAPACITY", 30),
        min_history=_i("CBC_WB_MIN_HISTORY", 10),
        gray_floor=_f("CBC_WB_GRAY_FLOOR", 0.05),
        smoothing=_f("CBC_WB_SMOOTHING", 0.1),
        balance_min=_f("CBC_WB_MIN", 0.5),
        balance_max=_f("CBC_WB_MAX", 2.0),
        adaptive=_flag("CBC_WB_ADAPTIVE", True),
        neutral_chroma_max=_f("CBC_NEUTRAL_CHROMA_MAX", NEUTRAL_CHROMA_MAX),
        neutral_sat_pct_max=_f("CBC_NEUTRAL_SAT_MAX", NEUTRAL_SAT_PCT_MAX),
    )
