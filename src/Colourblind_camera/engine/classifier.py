# src/Colourblind_camera/engine/classifier.py
from __future__ import annotations

from dataclasses import dataclass

from Colourblind_camera.color.adapters import ColorLike, to_rgb
from Colourblind_camera.color.hsl import HSL, RGB, chroma, rgb_to_hsl
from Colourblind_camera.color.neutral import grayscale_band, is_neutral
from Colourblind_camera.color.taxonomy import resolve_chromatic
from Colourblind_camera.engine.params import EngineParams
from Colourblind_camera.engine.white_balance import WhiteBalance, WhiteBalanceAdapter


@dataclass(frozen=True, slots=True)
class Classification:
    """
    Does:
        A colour name plus the intermediate values that produced it.
    """
    name: str
    raw: RGB
    corrected: RGB
    hsl: HSL
    chroma: float
    neutral: bool
    balance: WhiteBalance


class AdaptiveColorClassifier:
    """
    Does:
        Name the colour of successive samples, compensating for ambient lighting
        drift with a gray-world white balance learned from recent samples.

    Not thread-safe: history and balance are read-modify-write. Callers that feed
    it from a worker must serialize calls (see io.session.ColorSession).
    """

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()
        self._wb = WhiteBalanceAdapter(self.params)

    @property
    def balance(self) -> WhiteBalance:
        return self._wb.balance

    @property
    def history_size(self) -> int:
        return len(self._wb.history)

    def reset(self) -> None:
        self._wb.reset()

    def classify(self, rgb: ColorLike) -> str:
        return self.classify_detailed(rgb).name

    def classify_detailed(self, rgb: ColorLike) -> Classification:
        """
        Does:
            Classify one sample. Accepts an RGB, an (r, g, b[, a]) sequence in
            [0, 1], or a "#RRGGBB" string.
        """
        p = self.params
        raw = to_rgb(rgb).clamped()

        self._wb.record_sample(raw)
        if p.adaptive:
            self._wb.recompute()

        balance = self._wb.balance
        corrected = self._wb.apply(raw)
        hsl = rgb_to_hsl(corrected, eps=p.hue_epsilon)
        c = chroma(corrected)

        neutral = is_neutral(
            c,
            hsl.sat_pct,
            chroma_max=p.neutral_chroma_max,
            sat_pct_max=p.neutral_sat_pct_max,
        )
        if neutral:
            name = grayscale_band(hsl.light_pct)
        else:
            name = resolve_chromatic(hsl.hue_deg, hsl.sat_pct, hsl.light_pct, c)

        return Classification(
            name=name,
            raw=raw,
            corrected=corrected,
            hsl=hsl,
            chroma=c,
            neutral=neutral,
            balance=balance,
        )
