# src/Colourblind_camera/io/replay.py
"""
Replay of recorded sample streams.

A recording is a CSV with one averaged sample per row (columns r, g, b; any extra
columns such as a timestamp are carried through). Rows are fed in order through a
single engine so the white-balance adaptation behaves as it did live.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from Colourblind_camera.color.hsl import RGB
from Colourblind_camera.engine.classifier import AdaptiveColorClassifier

REQUIRED_COLUMNS = ("r", "g", "b")

OUTPUT_COLUMNS = (
    "name",
    "neutral",
    "hue_deg",
    "sat_pct",
    "light_pct",
    "chroma",
    "wb_r",
    "wb_g",
    "wb_b",
)


def validate_samples(df: pd.DataFrame) -> pd.DataFrame:
    """
    Raises:
        KeyError if any of r, g, b is missing.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"samples missing required columns: {missing}")
    out = df.copy()
    for c in REQUIRED_COLUMNS:
        out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_samples(path: str | Path) -> pd.DataFrame:
    return validate_samples(pd.read_csv(Path(path)))


def replay_samples(
    df: pd.DataFrame,
    *,
    classifier: Optional[AdaptiveColorClassifier] = None,
    scale: float = 1.0,
) -> pd.DataFrame:
    """
    Does:
        Classify every row in order and return a copy of df with OUTPUT_COLUMNS
        appended. scale divides the raw channels first (255 for 8-bit recordings).
        Unparseable cells become NaN and are clamped by the engine.
    """
    if scale <= 0:
        raise ValueError(f"scale must be > 0, got {scale}")

    src = validate_samples(df)
    clf = classifier or AdaptiveColorClassifier()

    vals = src[list(REQUIRED_COLUMNS)].to_numpy(dtype=np.float64) / float(scale)

    rows = []
    for r, g, b in vals:
        c = clf.classify_detailed(RGB(float(r), float(g), float(b)))
        rows.append(
            (
                c.name,
                c.neutral,
                c.hsl.hue_deg,
                c.hsl.sat_pct,
                c.hsl.light_pct,
                c.chroma,
                c.balance.r,
                c.balance.g,
                c.balance.b,
            )
        )

    res = pd.DataFrame(rows, columns=list(OUTPUT_COLUMNS), index=src.index)
    out = src.copy()
    for col in OUTPUT_COLUMNS:
        out[col] = res[col]
    return out
