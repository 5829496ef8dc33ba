import random

import pytest

from tacotrader import config


@pytest.mark.parametrize("seed", range(20))
def test_random_velocity_speed_in_range(seed):
    v = config.get_trader_random_velocity(random.Random(seed))
    speed = v.length()
    assert 0.5 * config.TRADER_MAX_VELOCITY - 1e-9 <= speed
    assert speed <= config.TRADER_MAX_VELOCITY + 1e-9


def test_random_velocity_is_deterministic_for_seed():
    a = config.get_trader_random_velocity(random.Random(7))
    b = config.get_trader_random_velocity(random.Random(7))
    assert a == b


def test_random_velocity_covers_directions():
    rng = random.Random(3)
    vs = [config.get_trader_random_velocity(rng) for _ in range(200)]
    assert any(v.x < 0 for v in vs)
    assert any(v.y < 0 for v in vs)
    assert any(v.x > 0 for v in vs)
    assert any(v.y > 0 for v in vs)