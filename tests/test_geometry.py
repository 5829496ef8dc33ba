import math

import pytest

from tacotrader.geometry import Transform, Vec2


def test_length_of_pythagorean_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("v", [Vec2(3, 4), Vec2(-2, 0.5), Vec2(0.001, -9)])
def test_normalize_has_unit_length(v):
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.to_angle() == pytest.approx(v.to_angle())


def test_normalize_zero_stays_zero():
    assert Vec2(0, 0).normalize() == Vec2(0, 0)


def test_rotate_quarter_turn():
    r = Vec2.from_angle(math.pi / 2).rotate(Vec2(1.0, 0.0))
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.0, 0.5, -1.2, 3.0])
def test_from_angle_to_angle_round_trip(angle):
    assert Vec2.from_angle(angle).to_angle() == pytest.approx(angle)


def test_arithmetic():
    a = Vec2(1, 2)
    b = Vec2(3, 5)
    assert a + b - b == a
    assert a * 2 == 2 * a == Vec2(2, 4)
    assert -a == Vec2(-1, -2)


def test_transform_rotate_and_xy():
    t = Transform(x=1.0, y=2.0)
    t.rotate_z(0.25)
    t.rotate_z(0.25)
    assert t.rotation == pytest.approx(0.5)
    t.xy = Vec2(5.0, 6.0)
    assert t.xy == Vec2(5.0, 6.0)