__all__ = [
    "AdaptiveColorClassifier",
    "ColorSession",
    "EngineParams",
    "RGB",
]

def __getattr__(name: str):
    if name in ("AdaptiveColorClassifier", "EngineParams"):
        from . import engine
        return getattr(engine, name)
    if name == "ColorSession":
        from .io.session import ColorSession
        return ColorSession
    if name == "RGB":
        from .color.hsl import RGB
        return RGB
    raise AttributeError(name)
