"""Simple procedural animations applied as deltas to a target."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from tacotrader.geometry import Transform

T = TypeVar("T")


@dataclass
class AnimValue(Generic[T]):
    """A value curve over progress and a setter receiving old and new values."""

    setter: Callable[[T, float, float], None]
    value: Callable[[float], float]


@dataclass
class Animation(Generic[T]):
    progress: float = 0.0
    animation_speed: float = 1.0
    animations: list[AnimValue[T]] = field(default_factory=list)

    def tick(self, delta: float, target: T) -> None:
        """Advance progress and apply every curve's change to ``target``."""
        step = delta * self.animation_speed
        for anim in self.animations:
            anim.setter(target, anim.value(self.progress), anim.value(self.progress + step))
        self.progress += step


def _set_scale_y(t: Transform, _old: float, new: float) -> None:
    t.scale_y = new


def _rotate_by_change(t: Transform, old: float, new: float) -> None:
    t.rotate_z(new - old)


def _shift_y(t: Transform, old: float, new: float) -> None:
    t.y += new - old


def _rotate_by_value(t: Transform, _old: float, new: float) -> None:
    t.rotate_z(new)


def wobble_animation(rng: random.Random | None = None) -> Animation[Transform]:
    """The idle squash, tilt and bounce used by characters."""
    rng = rng if rng is not None else random
    return Animation(
        progress=rng.uniform(0.0, 1.0),
        animation_speed=10.0,
        animations=[
            AnimValue(_set_scale_y, lambda p: math.cos(-p * 2.0) / 2.0 * 0.1 + 1.0),
            AnimValue(_rotate_by_change, lambda p: math.sin(p) * 0.075),
            AnimValue(_shift_y, lambda p: math.cos(-p * 2.0) * 5.0),
        ],
    )


def spin_animation() -> Animation[Transform]:
    """A constant spin applied every tick, used by projectiles."""
    return Animation(
        progress=0.0,
        animation_speed=1.0,
        animations=[AnimValue(_rotate_by_value, lambda _p: 0.1)],
    )