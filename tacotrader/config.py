"""Game-wide tuning constants."""

from __future__ import annotations

import math
import random

from tacotrader.geometry import Vec2

GAME_NAME = "Donnie's Tacos"
WIDTH = 600.0
HEIGHT = 350.0

STONKS_PER_BEARISH = 3
STONKS_PER_NEUTRAL = 5
STONKS_PER_BULLISH = 7
STONKS_DATA_POINTS = 300
STONKS_PER_BUY_ACTION = 300

TRADER_COUNT = 15
PROJECTILE_SPEED = 7.0
MOVEMENT_TIME = 5.0
IDLE_TIME = 1.0

MAX_TACOS = 3
TACO_CHARGE_TIME = 1.0

TRADER_MAX_VELOCITY = 2.0

PRICE_LOWEST = float(STONKS_PER_BEARISH * TRADER_COUNT)
PRICE_HIGHEST = float(STONKS_PER_BULLISH * TRADER_COUNT)


def get_trader_random_velocity(rng: random.Random | None = None) -> Vec2:
    """A velocity in a random direction, with speed between half and full maximum."""
    rng = rng if rng is not None else random
    angle = rng.uniform(0.0, math.pi) * 2.0
    speed = rng.uniform(0.5, 1.0) * TRADER_MAX_VELOCITY
    return Vec2(math.cos(angle), math.sin(angle)) * speed