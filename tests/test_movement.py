import random

import pytest

from tacotrader.config import HEIGHT, IDLE_TIME, MOVEMENT_TIME, TRADER_MAX_VELOCITY, WIDTH
from tacotrader.geometry import Transform, Vec2
from tacotrader.movement import EdgeBehavior, RandomMovement, apply_velocity, y_sort
from tacotrader.timing import Timer


def test_wraparound_x():
    t = Transform(x=WIDTH - 1.0)
    assert apply_velocity(t, Vec2(2.0, 0.0), EdgeBehavior.WRAPAROUND) is True
    assert -WIDTH <= t.x <= WIDTH
    assert t.x == pytest.approx(WIDTH + 1.0 - 2 * WIDTH)


def test_wraparound_y_negative():
    t = Transform(y=-HEIGHT + 1.0)
    apply_velocity(t, Vec2(0.0, -2.0), EdgeBehavior.WRAPAROUND)
    assert t.y == pytest.approx(-HEIGHT - 1.0 + 2 * HEIGHT)


def test_destroy_outside_bounds():
    t = Transform(y=HEIGHT)
    assert apply_velocity(t, Vec2(0.0, 1.0), EdgeBehavior.DESTROY) is False
    inside = Transform()
    assert apply_velocity(inside, Vec2(1.0, 1.0), EdgeBehavior.DESTROY) is True


def test_no_edge_just_moves():
    t = Transform(x=WIDTH)
    assert apply_velocity(t, Vec2(5.0, 0.0), None) is True
    assert t.x == WIDTH + 5.0


def test_y_sort():
    t = Transform(y=12.5)
    y_sort(t)
    assert t.z == -12.5


def test_moving_becomes_idle_and_stops():
    m = RandomMovement(True, Timer(1.0))
    assert m.tick(0.5) is None
    assert m.tick(0.5) == Vec2(0.0, 0.0)
    assert not m.moving
    assert m.timer.duration == IDLE_TIME


def test_idle_becomes_moving_with_velocity():
    m = RandomMovement(False, Timer(0.2))
    v = m.tick(0.3, random.Random(4))
    assert m.moving
    assert m.timer.duration == MOVEMENT_TIME
    assert 0.5 * TRADER_MAX_VELOCITY - 1e-9 <= v.length() <= TRADER_MAX_VELOCITY + 1e-9


def test_random_start_timer_bounds():
    rng = random.Random(9)
    states = [RandomMovement.random(rng) for _ in range(200)]
    for s in states:
        limit = MOVEMENT_TIME if s.moving else IDLE_TIME
        assert 0.0 <= s.timer.duration <= limit
    assert any(s.moving for s in states)
    assert any(not s.moving for s in states)