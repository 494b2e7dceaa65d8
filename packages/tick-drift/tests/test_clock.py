"""Tests for clock advancement and ideal/drift arithmetic."""

from tick_drift.clock import Clock
from tick_drift.types import MIN_INTERVAL


def test_clock_initialization():
    """Test clock initializes at tick 0 with origin 0."""
    clock = Clock(interval=50)
    assert clock.interval == 50
    assert clock.tick_number == 0
    assert clock.start_time == 0.0
    assert clock.ideal == 0


def test_clock_default_interval_is_floor():
    clock = Clock()
    assert clock.interval == MIN_INTERVAL


def test_advance_returns_new_tick_number():
    """Test advance() returns the new tick number."""
    clock = Clock(interval=50)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.advance() == 3
    assert clock.tick_number == 3


def test_multiple_advances_monotonic():
    clock = Clock(interval=50)
    prev = 0
    for _ in range(100):
        current = clock.advance()
        assert current == prev + 1
        prev = current


def test_ideal_is_interval_times_ticks():
    """Test ideal elapsed is calculated as tick_number * interval."""
    clock = Clock(interval=50)
    for i in range(1, 11):
        clock.advance()
        assert clock.ideal == i * 50


def test_ideal_uses_current_interval():
    """Changing the interval rescales the whole ideal schedule."""
    clock = Clock(interval=50)
    clock.advance()
    clock.advance()
    clock.interval = 100
    assert clock.ideal == 200


def test_drift_on_schedule_is_zero():
    clock = Clock(interval=50)
    clock.reset(1000.0)
    clock.advance()
    assert clock.drift(1050.0) == 0


def test_drift_sign():
    """Test positive drift when late, negative when early."""
    clock = Clock(interval=50)
    clock.reset(1000.0)
    clock.advance()
    assert clock.drift(1055.0) == 5
    assert clock.drift(1048.0) == -2


def test_reset_sets_origin_and_zeroes_ticks():
    clock = Clock(interval=50)
    for _ in range(10):
        clock.advance()
    clock.reset(250.0)
    assert clock.tick_number == 0
    assert clock.start_time == 250.0
    assert clock.interval == 50


def test_reset_and_advance_again():
    clock = Clock(interval=50)
    clock.advance()
    clock.advance()
    clock.reset(0.0)
    assert clock.advance() == 1


def test_rebase_moves_origin_forward():
    clock = Clock(interval=50)
    clock.reset(100.0)
    clock.advance()
    clock.rebase(250.0)
    assert clock.start_time == 350.0
    assert clock.tick_number == 1
    assert clock.drift(400.0) == 0


def test_ideal_precision_over_many_ticks():
    clock = Clock(interval=16.6)
    for _ in range(1000):
        clock.advance()
    assert abs(clock.ideal - 16600.0) < 1e-6
