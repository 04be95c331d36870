import threading

import numpy as np

from Colourblind_camera.color.hsl import RGB
from Colourblind_camera.io.session import ColorSession, SessionSettings


def _green_frame() -> np.ndarray:
    frame = np.zeros((480, 640, 4), dtype=np.uint8)
    frame[:, :] = (0, 128, 0, 255)  # BGRA
    return frame


def test_frame_is_sampled_and_named():
    seen = []
    session = ColorSession(on_name=seen.append)
    name = session.process_frame(_green_frame())
    assert name == "Hunter Green"
    assert session.last_name == "Hunter Green"
    assert seen == ["Hunter Green"]


def test_recognition_off_never_touches_engine():
    session = ColorSession(SessionSettings(advanced_recognition=False))
    assert session.process_frame(_green_frame()) is None
    assert session.process_sample(RGB(0.5, 0.5, 0.5)) is None
    assert session.classifier.history_size == 0
    assert session.last_name is None


def test_auto_white_balance_switch_reaches_engine():
    session = ColorSession(SessionSettings(auto_white_balance=False))
    assert session.classifier.params.adaptive is False
    for _ in range(40):
        session.process_sample(RGB(0.9, 0.5, 0.5))
    assert session.classifier.balance.as_tuple() == (1.0, 1.0, 1.0)


def test_empty_sample_region_keeps_last_name():
    session = ColorSession(SessionSettings(radius=5, stride=8))
    session.process_sample(RGB(1.0, 1.0, 1.0))
    assert session.process_frame(np.zeros((1, 1, 4), dtype=np.uint8)) is None
    assert session.last_name == "White"


def test_still_image_uses_grid_sampling():
    session = ColorSession()
    img = np.full((64, 64, 4), 255, dtype=np.uint8)
    assert session.classify_still(img) == "White"


def test_reset_clears_engine_and_last_name():
    session = ColorSession()
    for _ in range(20):
        session.process_sample(RGB(0.9, 0.5, 0.5))
    session.reset()
    assert session.last_name is None
    assert session.classifier.history_size == 0


def test_concurrent_producers_are_serialized():
    session = ColorSession()
    errors = []

    def worker(seed: int) -> None:
        rng = np.random.default_rng(seed)
        try:
            for v in rng.uniform(0.0, 1.0, size=(50, 3)):
                session.process_sample(RGB(*map(float, v)))
        except Exception as e:  # pragma: no cover
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert session.classifier.history_size == 30
    for f in session.classifier.balance.as_tuple():
        assert 0.5 <= f <= 2.0
