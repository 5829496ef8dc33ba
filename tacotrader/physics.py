"""Circle colliders and overlap resolution."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Iterable

from tacotrader.geometry import Vec2


@dataclass
class Collider:
    radius: float = 0.0
    offset: Vec2 = field(default_factory=Vec2)


@dataclass
class PhysicsBody:
    velocity: Vec2 = field(default_factory=Vec2)


@dataclass(frozen=True)
class CollisionEvent:
    entity1: Any
    entity2: Any


def check_collisions(entities: Iterable[Any]) -> list[CollisionEvent]:
    """Report overlapping pairs and push non-trigger pairs apart.

    Each entity needs ``transform``, ``collider`` and ``trigger`` attributes;
    entities whose collider is None are ignored.
    """
    bodies = [e for e in entities if e.collider is not None]
    events: list[CollisionEvent] = []
    for e1, e2 in itertools.combinations(bodies, 2):
        axis = (e1.transform.xy + e1.collider.offset) - (e2.transform.xy + e2.collider.offset)
        radii = e1.collider.radius + e2.collider.radius
        distance = axis.length()
        if distance >= radii:
            continue
        events.append(CollisionEvent(e1, e2))
        if e1.trigger or e2.trigger:
            continue
        half = axis.normalize() * ((radii - distance) * 0.5)
        e1.transform.xy = e1.transform.xy + half
        e2.transform.xy = e2.transform.xy - half
    return events