"""
Tests for the deterministic timer clock
"""

import pytest

from game.dodge.clock import Clock


def test_repeating_timer_fires_each_interval():
    clock = Clock()
    fired = []
    clock.schedule(100, lambda: fired.append(clock.now_ms))
    clock.advance(350)
    assert fired == [100, 200, 300]
    assert clock.now_ms == 350


def test_one_shot_fires_once_and_is_dropped():
    clock = Clock()
    fired = []
    handle = clock.schedule(50, lambda: fired.append("x"), repeating=False)
    clock.advance(49)
    assert fired == []
    clock.advance(1)
    clock.advance(500)
    assert fired == ["x"]
    assert not handle.active
    assert clock.pending == 0


def test_cancelled_timer_never_fires():
    clock = Clock()
    fired = []
    handle = clock.schedule(100, lambda: fired.append("x"))
    clock.advance(150)
    handle.cancel()
    clock.advance(1000)
    assert fired == ["x"]


def test_timers_fire_in_time_order():
    clock = Clock()
    fired = []
    clock.schedule(30, lambda: fired.append("slow"))
    clock.schedule(20, lambda: fired.append("fast"))
    clock.advance(60)
    # Ties at 60ms keep schedule order
    assert fired == ["fast", "slow", "fast", "slow", "fast"]


def test_callback_can_cancel_another_timer():
    clock = Clock()
    fired = []
    other = clock.schedule(20, lambda: fired.append("other"))
    clock.schedule(10, lambda: other.cancel(), repeating=False)
    clock.advance(100)
    assert fired == []


def test_clear_cancels_everything():
    clock = Clock()
    handles = [clock.schedule(10, lambda: None) for _ in range(3)]
    clock.clear()
    assert clock.pending == 0
    assert not any(h.active for h in handles)


def test_invalid_delays_rejected():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.schedule(-1, lambda: None)
    with pytest.raises(ValueError):
        clock.schedule(0, lambda: None, repeating=True)
