# src/Colourblind_camera/engine/__init__.py
from __future__ import annotations

# Stable re-exports (keep this list SHORT).
from Colourblind_camera.engine.classifier import AdaptiveColorClassifier, Classification
from Colourblind_camera.engine.params import EngineParams, params_from_env
from Colourblind_camera.engine.white_balance import WhiteBalance

__all__ = [
    "AdaptiveColorClassifier",
    "Classification",
    "EngineParams",
    "params_from_env",
    "WhiteBalance",
]
