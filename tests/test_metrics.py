# tests/test_metrics.py
import pytest

from fit.metrics import EMA, WindowedStat, squared_error


def test_ema_starts_at_first_value():
    ema = EMA(0.5)
    assert ema.update(4.0) == 4.0
    assert ema.update(0.0) == 2.0

def test_ema_rejects_bad_alpha():
    with pytest.raises(ValueError):
        EMA(0.0)

def test_ema_ignores_diverged_losses():
    ema = EMA(0.5)
    assert ema.update(float("nan")) is None
    ema.update(2.0)
    assert ema.update(float("inf")) == 2.0
    assert (ema.seen, ema.skipped) == (3, 2)
    ema.reset()
    assert ema.value is None and ema.seen == 0

def test_windowed_stat_drops_old_values():
    w = WindowedStat(2)
    assert w.summary()["mean"] == 0.0
    for v in (10.0, 1.0, 3.0):
        w.add(v)
    s = w.summary()
    assert (s["mean"], s["min"], s["max"], s["last"]) == (2.0, 1.0, 3.0, 3.0)
    assert s["std"] == pytest.approx(1.0)
    assert w.full()

def test_windowed_stat_rejects_empty_window():
    with pytest.raises(ValueError):
        WindowedStat(0)

def test_squared_error_is_half_sum_of_squares():
    assert squared_error([1.0, 2.0], [0.0, 0.0]) == pytest.approx(2.5)
    assert squared_error([], []) == 0.0
