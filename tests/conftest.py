# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from Colourblind_camera.engine.classifier import AdaptiveColorClassifier
from Colourblind_camera.engine.params import EngineParams


@pytest.fixture
def classifier() -> AdaptiveColorClassifier:
    return AdaptiveColorClassifier()


@pytest.fixture
def fixed_classifier() -> AdaptiveColorClassifier:
    # adaptation off: balance stays (1, 1, 1)
    return AdaptiveColorClassifier(EngineParams(adaptive=False))
