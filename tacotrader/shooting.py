"""Projectiles, bullet patterns and the shooting logic of both sides."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from tacotrader.config import MAX_TACOS, TACO_CHARGE_TIME
from tacotrader.geometry import Vec2
from tacotrader.timing import Timer, TimerMode

DONNIE_SHOOTING_INTERVAL = 2.0
CHAIN_REACTION_BULLETS = 3
PROJECTILE_RADIUS = 20.0
DEFAULT_DONNIE_DIRECTION = Vec2(0.0, -1.0)


class Rumor(enum.Enum):
    TARIFF = "tariff"
    TACO = "taco"


@dataclass(frozen=True)
class SpawnProjectile:
    projectile_type: Rumor
    position: Vec2
    direction: Vec2
    owner: Any = None


@dataclass
class PlayerShootingLogic:
    """The player's taco supply, recharged one at a time."""

    timer: Timer = field(default_factory=lambda: Timer(TACO_CHARGE_TIME, TimerMode.REPEATING))
    tacos_left: int = MAX_TACOS
    max_tacos: int = MAX_TACOS

    def charge(self, delta: float) -> bool:
        """Advance the recharge timer; True when a taco was added."""
        if self.tacos_left >= self.max_tacos:
            return False
        if self.timer.tick(delta).just_finished:
            self.tacos_left = min(self.tacos_left + 1, self.max_tacos)
            return True
        return False

    def try_fire(self) -> bool:
        """Use up one taco if any is left; True when a shot may be fired."""
        if self.tacos_left == 0:
            return False
        self.tacos_left -= 1
        return True


@dataclass
class DonnieShootingLogic:
    shooting_timer: Timer = field(
        default_factory=lambda: Timer(DONNIE_SHOOTING_INTERVAL, TimerMode.REPEATING)
    )

    def tick(self, delta: float) -> bool:
        """Advance the timer; True when it is time to shoot."""
        return self.shooting_timer.tick(delta).just_finished


def uniform_pattern(reference_dir: Vec2, bullet_count: int) -> Iterator[Vec2]:
    """Directions spread evenly round the circle, starting at ``reference_dir``."""
    if bullet_count <= 0:
        return
    angle_step = math.pi * 2.0 / bullet_count
    for i in range(bullet_count):
        yield Vec2.from_angle(i * angle_step).rotate(reference_dir)


def aim_direction(start: Vec2, target: Vec2) -> Vec2:
    return (target - start).normalize()


def donnie_target_direction(
    donnie_pos: Vec2,
    trader_positions: Iterable[Vec2],
    rng: random.Random | None = None,
) -> Vec2:
    """Direction towards a random trader, or straight down when there is none."""
    positions = list(trader_positions)
    if not positions:
        return DEFAULT_DONNIE_DIRECTION
    rng = rng if rng is not None else random
    return aim_direction(donnie_pos, rng.choice(positions))


def projectile_texture(rumor: Rumor) -> str:
    if rumor is Rumor.TARIFF:
        return "pile-of-poo-svgrepo-com.png"
    return "taco_man3/taco.png"