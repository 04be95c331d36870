# src/Colourblind_camera/io/session.py
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional

import numpy as np

from Colourblind_camera.color.hsl import RGB
from Colourblind_camera.engine.classifier import AdaptiveColorClassifier
from Colourblind_camera.engine.params import EngineParams
from Colourblind_camera.io.sampler import sample_center_region, sample_grid

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSettings:
    """
    Does:
        The user-facing switches that gate the engine.

    advanced_recognition:
        When off, frames are not classified at all.
    auto_white_balance:
        When off, the engine names raw samples without learning a correction.
    """
    advanced_recognition: bool = True
    auto_white_balance: bool = True
    radius: int = 80
    stride: int = 8
    channel_order: str = "BGRA"


class ColorSession:
    """
    Does:
        Drive one classifier from a frame producer. Classification is serialized
        with a lock; the latest name is published on last_name and passed to the
        on_name callback.
    """

    def __init__(
        self,
        settings: SessionSettings | None = None,
        *,
        params: EngineParams | None = None,
        on_name: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.settings = settings or SessionSettings()
        base = params or EngineParams()
        if base.adaptive != self.settings.auto_white_balance:
            base = replace(base, adaptive=self.settings.auto_white_balance)
        self.classifier = AdaptiveColorClassifier(base)
        self.on_name = on_name
        self._lock = threading.Lock()
        self._last_name: Optional[str] = None

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    def reset(self) -> None:
        with self._lock:
            self.classifier.reset()
            self._last_name = None

    def process_sample(self, rgb: RGB) -> Optional[str]:
        if not self.settings.advanced_recognition:
            return None
        with self._lock:
            name = self.classifier.classify(rgb)
            self._last_name = name
        if self.on_name is not None:
            self.on_name(name)
        return name

    def process_frame(self, frame: np.ndarray) -> Optional[str]:
        if not self.settings.advanced_recognition:
            return None
        s = self.settings
        rgb = sample_center_region(frame, radius=s.radius, stride=s.stride, channel_order=s.channel_order)
        if rgb is None:
            log.debug("frame skipped: no sample points inside %s", getattr(frame, "shape", None))
            return None
        return self.process_sample(rgb)

    def classify_still(self, image: np.ndarray, *, channel_order: str = "RGBA", grid: int = 10) -> Optional[str]:
        rgb = sample_grid(image, grid=grid, channel_order=channel_order)
        if rgb is None:
            return None
        return self.process_sample(rgb)
