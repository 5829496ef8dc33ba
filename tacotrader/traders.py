"""Traders whose mood moves the stock price."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Any

from tacotrader.assets import bearish_texture_path, bullish_texture_path, investor_texture_path
from tacotrader.dialogue import BEARISH, BULLISH, random_string
from tacotrader.timing import Timer

STATUS_DURATION = 5.0
REST_DURATION = 0.5
TEXT_CHANCE = 0.5
REACTION_TEXT_SECS = 1.2


class TraderStatus(enum.Enum):
    NEUTRAL = 0
    BULLISH = 1
    BEARISH = 2


@dataclass(frozen=True)
class TraderChange:
    entity: Any
    prev: TraderStatus
    new: TraderStatus


@dataclass(eq=False)
class Trader:
    """A trader's mood, the timer that resets it and a short rest after a hit."""

    status: TraderStatus = TraderStatus.NEUTRAL
    status_timer: Timer | None = None
    rest_timer: Timer | None = None

    def set_status(self, status: TraderStatus) -> TraderChange:
        """Change mood after being hit; starts the reset and rest timers."""
        change = TraderChange(self, self.status, status)
        self.status = status
        self.status_timer = Timer(STATUS_DURATION)
        self.rest_timer = Timer(REST_DURATION)
        return change

    def tick_timers(self, delta: float) -> TraderChange | None:
        """Advance timers; returns a change when the mood falls back to neutral."""
        change = None
        if self.status_timer is not None and self.status_timer.tick(delta).just_finished:
            change = TraderChange(self, self.status, TraderStatus.NEUTRAL)
            self.status = TraderStatus.NEUTRAL
            self.status_timer = None
        if self.rest_timer is not None and self.rest_timer.tick(delta).just_finished:
            self.rest_timer = None
        return change

    def is_resting(self) -> bool:
        return self.rest_timer is not None


def trader_texture_path(status: TraderStatus, rng: random.Random | None = None) -> str:
    if status is TraderStatus.BEARISH:
        return bearish_texture_path(rng)
    if status is TraderStatus.BULLISH:
        return bullish_texture_path(rng)
    return investor_texture_path(rng)


def trader_reaction_text(status: TraderStatus, rng: random.Random | None = None) -> str | None:
    """A line the trader may shout on a mood change, or None."""
    if status is TraderStatus.NEUTRAL:
        return None
    rng = rng if rng is not None else random
    if rng.random() >= TEXT_CHANCE:
        return None
    return random_string(BEARISH if status is TraderStatus.BEARISH else BULLISH, rng)