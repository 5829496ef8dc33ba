"""Wandering movement and play-field edge handling."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from tacotrader.config import HEIGHT, IDLE_TIME, MOVEMENT_TIME, WIDTH, get_trader_random_velocity
from tacotrader.geometry import ZERO, Transform, Vec2
from tacotrader.timing import Timer


class EdgeBehavior(enum.Enum):
    WRAPAROUND = "wraparound"
    DESTROY = "destroy"


@dataclass
class RandomMovement:
    """Alternates between moving in a random direction and standing still."""

    moving: bool
    timer: Timer

    @classmethod
    def random(cls, rng: random.Random | None = None) -> RandomMovement:
        rng = rng if rng is not None else random
        if rng.random() < IDLE_TIME / MOVEMENT_TIME:
            return cls(False, Timer(rng.uniform(0.0, IDLE_TIME)))
        return cls(True, Timer(rng.uniform(0.0, MOVEMENT_TIME)))

    def tick(self, delta: float, rng: random.Random | None = None) -> Vec2 | None:
        """Advance the phase; returns a new velocity when the phase changes."""
        if not self.timer.tick(delta).just_finished:
            return None
        if self.moving:
            self.moving = False
            self.timer = Timer(IDLE_TIME)
            return ZERO
        self.moving = True
        self.timer = Timer(MOVEMENT_TIME)
        return get_trader_random_velocity(rng)


def apply_velocity(transform: Transform, velocity: Vec2, edge: EdgeBehavior | None) -> bool:
    """Move by ``velocity`` and apply ``edge``; returns False if the object must go."""
    transform.x += velocity.x
    transform.y += velocity.y
    if edge is EdgeBehavior.WRAPAROUND:
        if transform.x > WIDTH:
            transform.x -= WIDTH * 2.0
        if transform.x < -WIDTH:
            transform.x += WIDTH * 2.0
        if transform.y > HEIGHT:
            transform.y -= HEIGHT * 2.0
        if transform.y < -HEIGHT:
            transform.y += HEIGHT * 2.0
    elif edge is EdgeBehavior.DESTROY:
        if abs(transform.x) > WIDTH or abs(transform.y) > HEIGHT:
            return False
    return True


def y_sort(transform: Transform) -> None:
    """Draw lower objects in front of higher ones."""
    transform.z = -transform.y