"""Tests for the fall controller."""

from wordfall.fall import FallController
from wordfall.models import FallEvent, PositionUpdated


def _controller(**kwargs):
    params = dict(start_speed=10.0, max_speed=30.0, floor_y=100.0, tolerance=2.0)
    params.update(kwargs)
    return FallController(**params)


def test_tick_moves_by_speed():
    fall = _controller()
    fall.reset(0.0)
    assert fall.tick() == FallEvent.AIRBORNE
    assert fall.position_y == 10.0


def test_floor_reached_within_tolerance():
    fall = _controller(start_speed=7.0)
    fall.reset(0.0)
    events = [fall.tick() for _ in range(14)]
    # 14 * 7 = 98, which is within 2 of the floor
    assert events[-1] == FallEvent.FLOOR_REACHED
    assert events.count(FallEvent.FLOOR_REACHED) == 1


def test_floor_reported_once_per_word():
    fall = _controller()
    fall.reset(0.0)
    events = [fall.tick() for _ in range(20)]
    assert events.count(FallEvent.FLOOR_REACHED) == 1
    assert events[-1] == FallEvent.GROUNDED
    landed_at = fall.position_y

    fall.reset(-40.0)
    assert fall.position_y == -40.0
    assert not fall.landed
    events = [fall.tick() for _ in range(20)]
    assert events.count(FallEvent.FLOOR_REACHED) == 1
    assert landed_at == 100.0


def test_reset_keeps_speed():
    fall = _controller()
    fall.increase_speed(5.0)
    fall.reset(0.0)
    assert fall.speed == 15.0


def test_speed_never_exceeds_max():
    fall = _controller(start_speed=1.3, max_speed=8.0)
    for n in range(200):
        fall.increase_speed(0.15)
        assert 1.3 <= fall.speed <= 8.0
    assert fall.speed == 8.0


def test_negative_increment_does_not_slow_down():
    fall = _controller()
    fall.increase_speed(4.0)
    fall.increase_speed(-10.0)
    assert fall.speed == 14.0


def test_emits_positions():
    events = []
    fall = _controller(emit=events.append)
    fall.reset(-5.0)
    fall.tick()
    assert events == [PositionUpdated(y=-5.0), PositionUpdated(y=5.0)]
