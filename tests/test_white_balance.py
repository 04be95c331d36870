import pytest

from Colourblind_camera.color.hsl import RGB
from Colourblind_camera.engine.params import EngineParams
from Colourblind_camera.engine.white_balance import (
    NEUTRAL_BALANCE,
    SampleHistory,
    WhiteBalance,
    WhiteBalanceAdapter,
)


def _fill(wb: WhiteBalanceAdapter, rgb: RGB, n: int) -> None:
    for _ in range(n):
        wb.record_sample(rgb)


def test_history_evicts_oldest_first():
    h = SampleHistory(capacity=30)
    for i in range(35):
        h.append(RGB(i / 100.0, 0.0, 0.0))
    assert len(h) == 30
    reds = [s.r for s in h]
    assert reds[0] == pytest.approx(0.05)
    assert reds[-1] == pytest.approx(0.34)
    assert reds == sorted(reds)


def test_eviction_is_visible_in_balance_computation():
    # five outliers followed by thirty samples: only the thirty may count
    with_outliers = WhiteBalanceAdapter()
    _fill(with_outliers, RGB(1.0, 0.0, 0.0), 5)
    _fill(with_outliers, RGB(0.2, 0.4, 0.6), 30)

    clean = WhiteBalanceAdapter()
    _fill(clean, RGB(0.2, 0.4, 0.6), 30)

    assert len(with_outliers.history) == 30
    assert with_outliers.history.channel_means() == pytest.approx((0.2, 0.4, 0.6))

    assert with_outliers.recompute()
    assert clean.recompute()
    assert with_outliers.balance.as_tuple() == pytest.approx(clean.balance.as_tuple())


def test_no_update_below_min_history():
    wb = WhiteBalanceAdapter()
    _fill(wb, RGB(0.9, 0.5, 0.5), 9)
    assert not wb.recompute()
    assert wb.balance == NEUTRAL_BALANCE

    wb.record_sample(RGB(0.9, 0.5, 0.5))
    assert wb.recompute()
    assert wb.balance != NEUTRAL_BALANCE


def test_near_black_scene_holds_balance():
    wb = WhiteBalanceAdapter()
    _fill(wb, RGB(0.04, 0.02, 0.01), 20)
    assert not wb.recompute()
    assert wb.balance == NEUTRAL_BALANCE


def test_single_update_is_a_smoothing_step():
    wb = WhiteBalanceAdapter()
    _fill(wb, RGB(0.9, 0.5, 0.5), 10)
    wb.recompute()

    gray = (0.9 + 0.5 + 0.5) / 3.0
    expected = (
        0.9 * 1.0 + 0.1 * (gray / 0.9),
        0.9 * 1.0 + 0.1 * (gray / 0.5),
        0.9 * 1.0 + 0.1 * (gray / 0.5),
    )
    assert wb.balance.as_tuple() == pytest.approx(expected)


def test_zero_channel_mean_is_floored():
    wb = WhiteBalanceAdapter(EngineParams(balance_max=10.0))
    _fill(wb, RGB(0.6, 0.6, 0.0), 10)
    wb.recompute()
    gray = 0.4
    assert wb.balance.b == pytest.approx(0.9 + 0.1 * (gray / 0.01))

    # with default bounds the same scene pins blue at the cap
    capped = WhiteBalanceAdapter()
    _fill(capped, RGB(0.6, 0.6, 0.0), 10)
    capped.recompute()
    assert capped.balance.b == 2.0


def test_custom_bounds_are_respected():
    wb = WhiteBalanceAdapter(EngineParams(balance_min=0.8, balance_max=1.25, smoothing=1.0))
    _fill(wb, RGB(1.0, 0.1, 0.1), 10)
    wb.recompute()
    assert wb.balance.r == pytest.approx(0.8)
    assert wb.balance.g == pytest.approx(1.25)


def test_apply_caps_at_one():
    bal = WhiteBalance(2.0, 1.0, 0.5)
    assert bal.apply(RGB(0.8, 0.3, 0.6)).as_tuple() == pytest.approx((1.0, 0.3, 0.3))


def test_reset_clears_history_and_balance():
    wb = WhiteBalanceAdapter()
    _fill(wb, RGB(0.9, 0.5, 0.5), 12)
    wb.recompute()
    wb.reset()
    assert len(wb.history) == 0
    assert wb.history.channel_means() is None
    assert wb.balance == NEUTRAL_BALANCE


def test_history_rejects_zero_capacity():
    with pytest.raises(ValueError):
        SampleHistory(capacity=0)


def test_adapter_apply_uses_current_balance():
    wb = WhiteBalanceAdapter()
    assert wb.apply(RGB(0.9, 0.5, 0.5)) == RGB(0.9, 0.5, 0.5)
    _fill(wb, RGB(0.9, 0.5, 0.5), 10)
    assert wb.recompute()
    assert wb.apply(RGB(0.9, 0.5, 0.5)) == wb.balance.apply(RGB(0.9, 0.5, 0.5))
    assert wb.apply(RGB(0.9, 0.5, 0.5)).r < 0.9


def test_full_history_at_min_history_updates():
    wb = WhiteBalanceAdapter(EngineParams(history_capacity=10, min_history=10))
    _fill(wb, RGB(0.9, 0.5, 0.5), 25)
    assert len(wb.history) == 10
    assert wb.recompute()
