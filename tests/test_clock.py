import pytest

from trigrun.clock import Clock


def _timer(*values):
    it = iter(values)
    return lambda: next(it)


def test_starts_at_zero():
    clock = Clock(_timer(5.0))
    assert clock.time == 0.0
    assert clock.delta_time == 0.0


def test_tick_measures_time_and_delta():
    start, first, second = 10.0, 10.5, 11.25
    clock = Clock(_timer(start, first, second))
    clock.tick()
    assert clock.time == pytest.approx(first - start)
    assert clock.delta_time == pytest.approx(first - start)
    clock.tick()
    assert clock.time == pytest.approx(second - start)
    assert clock.delta_time == pytest.approx(second - first)


def test_reset_restarts_time_but_not_delta():
    start, first, reset_at, third = 1.0, 2.0, 4.0, 4.5
    clock = Clock(_timer(start, first, reset_at, third))
    clock.tick()
    clock.reset()
    clock.tick()
    assert clock.time == pytest.approx(third - reset_at)
    assert clock.delta_time == pytest.approx(third - first)


def test_real_timer_is_monotonic():
    clock = Clock()
    clock.tick()
    clock.tick()
    assert clock.time >= clock.delta_time >= 0.0