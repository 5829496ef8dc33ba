"""In-game overlay: stock chart geometry, labels and floating text effects."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable

from tacotrader.config import HEIGHT, PRICE_HIGHEST, PRICE_LOWEST, STONKS_DATA_POINTS, WIDTH
from tacotrader.game_states import GameStats
from tacotrader.geometry import Vec2
from tacotrader.stonks import StonksTrading, TextEffectRequest, TradePhase
from tacotrader.timing import Timer

CHART_SIZE = Vec2(WIDTH / 2.0, 100.0)
CHART_OFFSET = Vec2(-WIDTH, HEIGHT)
CHART_BORDER_CENTER = Vec2(-WIDTH + CHART_SIZE.x / 2.0, HEIGHT + 70.0)
LEVEL_BORDER_SIZE = Vec2(WIDTH * 2.0, HEIGHT * 2.0)
HUE_MAX = 123.0
EFFECT_ROTATION = 0.2
EFFECT_DEFAULT_SECS = 0.5

Hsla = tuple[float, float, float, float]


def separated_number(n: int) -> str:
    """Digits grouped in threes with dots, keeping a leading minus."""
    digits = str(abs(n))
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    text = ".".join(groups)
    return f"-{text}" if n < 0 else text


def price_ratio(v: float) -> float:
    """Where a price sits between the lowest and highest possible prices."""
    return (v - PRICE_LOWEST) / (PRICE_HIGHEST - PRICE_LOWEST)


def chart_points(history: Iterable[int]) -> list[tuple[Vec2, Hsla]]:
    """Line points of the price chart with a red-to-green colour per price."""
    x_step = CHART_SIZE.x / STONKS_DATA_POINTS
    return [
        (
            CHART_OFFSET + Vec2(i * x_step, float(v)),
            (price_ratio(v) * HUE_MAX, 0.7, 0.5, 1.0),
        )
        for i, v in enumerate(history)
    ]


def buy_price_line(stonks: StonksTrading) -> tuple[Vec2, Vec2] | None:
    """The chart line marking the average buy price, if anything is owned."""
    buy_price = stonks.avg_buy_price()
    if buy_price is None:
        return None
    start = CHART_OFFSET + Vec2(0.0, float(buy_price))
    return start, start + Vec2(CHART_SIZE.x, 0.0)


def stonks_phase_label(phase: TradePhase) -> str:
    return "Buy" if phase is TradePhase.BUY else "Sell"


def time_label(stats: GameStats) -> str:
    return str(max(0, int(stats.time_remaining.remaining_secs())))


def gameover_lines(stonks: StonksTrading) -> list[str]:
    return [
        "Congratulations!\nYou are now richer by",
        f"${separated_number(stonks.returns_total)}",
    ]


@dataclass
class TextEffect:
    """A short-lived tilted text popping up beside the chart."""

    text: str = ""
    timer: Timer = field(default_factory=lambda: Timer(EFFECT_DEFAULT_SECS))
    position: Vec2 = field(
        default_factory=lambda: Vec2(-WIDTH / 2.0 + 100.0, HEIGHT + CHART_SIZE.y / 2.0)
    )
    rotation: float = 0.0

    @classmethod
    def from_request(
        cls, request: TextEffectRequest, rng: random.Random | None = None
    ) -> TextEffect:
        rng = rng if rng is not None else random
        return cls(
            text=request.text,
            timer=Timer(request.duration_sec),
            rotation=rng.uniform(-EFFECT_ROTATION, EFFECT_ROTATION),
        )

    def tick(self, delta: float) -> bool:
        """Advance the effect; True once it has expired."""
        return self.timer.tick(delta).just_finished