import math
import random

import pytest

from tacotrader.config import MAX_TACOS, TACO_CHARGE_TIME
from tacotrader.geometry import Vec2
from tacotrader.shooting import (
    DonnieShootingLogic,
    PlayerShootingLogic,
    Rumor,
    SpawnProjectile,
    aim_direction,
    donnie_target_direction,
    projectile_texture,
    uniform_pattern,
)


def test_uniform_pattern_first_is_reference():
    ref = Vec2(0.6, 0.8)
    dirs = list(uniform_pattern(ref, 3))
    assert len(dirs) == 3
    assert dirs[0].x == pytest.approx(ref.x)
    assert dirs[0].y == pytest.approx(ref.y)


def test_uniform_pattern_is_balanced_and_unit():
    dirs = list(uniform_pattern(Vec2(1.0, 0.0), 5))
    total = sum(dirs, Vec2())
    assert total.length() == pytest.approx(0.0, abs=1e-9)
    assert all(d.length() == pytest.approx(1.0) for d in dirs)


def test_uniform_pattern_empty():
    assert list(uniform_pattern(Vec2(1.0, 0.0), 0)) == []


def test_aim_direction_is_unit_and_parallel():
    d = aim_direction(Vec2(1.0, 1.0), Vec2(4.0, 5.0))
    assert d.length() == pytest.approx(1.0)
    assert d.x * 4.0 == pytest.approx(d.y * 3.0)


def test_donnie_without_traders_shoots_down():
    assert donnie_target_direction(Vec2(0.0, 0.0), []) == Vec2(0.0, -1.0)


def test_donnie_targets_a_trader():
    rng = random.Random(1)
    d = donnie_target_direction(Vec2(0.0, 0.0), [Vec2(10.0, 0.0)], rng)
    assert d.x == pytest.approx(1.0)
    assert d.y == pytest.approx(0.0)


def test_player_fires_until_empty():
    logic = PlayerShootingLogic()
    assert logic.tacos_left == MAX_TACOS
    shots = [logic.try_fire() for _ in range(MAX_TACOS + 1)]
    assert shots == [True] * MAX_TACOS + [False]
    assert logic.tacos_left == 0


def test_player_charge_full_does_nothing():
    logic = PlayerShootingLogic()
    assert logic.charge(TACO_CHARGE_TIME * 5) is False
    assert logic.tacos_left == MAX_TACOS


def test_player_charge_adds_one_taco():
    logic = PlayerShootingLogic()
    logic.try_fire()
    logic.try_fire()
    assert logic.charge(TACO_CHARGE_TIME / 2) is False
    assert logic.charge(TACO_CHARGE_TIME / 2) is True
    assert logic.tacos_left == MAX_TACOS - 1


def test_player_charge_never_exceeds_max():
    logic = PlayerShootingLogic()
    logic.try_fire()
    for _ in range(10):
        logic.charge(TACO_CHARGE_TIME)
    assert logic.tacos_left == logic.max_tacos


def test_donnie_shoots_every_two_seconds():
    logic = DonnieShootingLogic()
    assert logic.tick(1.0) is False
    assert logic.tick(1.0) is True
    assert logic.tick(1.0) is False


def test_projectile_textures():
    assert projectile_texture(Rumor.TARIFF) == "pile-of-poo-svgrepo-com.png"
    assert projectile_texture(Rumor.TACO) == "taco_man3/taco.png"


def test_spawn_projectile_fields():
    ev = SpawnProjectile(Rumor.TACO, Vec2(1.0, 2.0), Vec2(0.0, 7.0))
    assert ev.owner is None
    assert ev.projectile_type is Rumor.TACO
    assert math.isclose(ev.direction.y, 7.0)