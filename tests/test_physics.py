from dataclasses import dataclass, field

import pytest

from tacotrader.geometry import Transform, Vec2
from tacotrader.physics import Collider, CollisionEvent, check_collisions


@dataclass(eq=False)
class Thing:
    transform: Transform
    collider: Collider | None = field(default_factory=lambda: Collider(radius=25.0))
    trigger: bool = False


def distance(a, b):
    return (a.transform.xy - b.transform.xy).length()


def test_overlap_reports_and_separates():
    a = Thing(Transform(x=0.0))
    b = Thing(Transform(x=10.0))
    events = check_collisions([a, b])
    assert events == [CollisionEvent(a, b)]
    assert distance(a, b) == pytest.approx(a.collider.radius + b.collider.radius)
    assert a.transform.x < 0.0 < b.transform.x


def test_trigger_reports_without_displacement():
    a = Thing(Transform(x=0.0), trigger=True)
    b = Thing(Transform(x=10.0))
    events = check_collisions([a, b])
    assert events == [CollisionEvent(a, b)]
    assert a.transform.x == 0.0
    assert b.transform.x == 10.0


def test_far_apart_no_event():
    a = Thing(Transform(x=0.0))
    b = Thing(Transform(x=100.0))
    assert check_collisions([a, b]) == []
    assert b.transform.x == 100.0


def test_offset_is_used():
    a = Thing(Transform(x=0.0), Collider(radius=5.0, offset=Vec2(100.0, 0.0)))
    b = Thing(Transform(x=100.0), Collider(radius=5.0))
    assert len(check_collisions([a, b])) == 1


def test_entities_without_collider_ignored():
    a = Thing(Transform(), collider=None)
    b = Thing(Transform())
    assert check_collisions([a, b]) == []