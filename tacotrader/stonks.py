"""The stock price driven by trader moods, and the buy/dump cycle."""

from __future__ import annotations

import enum
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Iterable

from tacotrader.config import (
    PRICE_HIGHEST,
    PRICE_LOWEST,
    STONKS_DATA_POINTS,
    STONKS_PER_BEARISH,
    STONKS_PER_BULLISH,
    STONKS_PER_BUY_ACTION,
    STONKS_PER_NEUTRAL,
)
from tacotrader.traders import TraderStatus

NOTIF_THRESHOLD = 0.7
EFFECT_SECS = 1.0


class TradePhase(enum.Enum):
    BUY = "buy"
    DUMP = "dump"


class StonksPriceNotification(enum.Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class TextEffectRequest:
    text: str
    duration_sec: float


_PRICE_PER_STATUS = {
    TraderStatus.NEUTRAL: STONKS_PER_NEUTRAL,
    TraderStatus.BEARISH: STONKS_PER_BEARISH,
    TraderStatus.BULLISH: STONKS_PER_BULLISH,
}


def price_for(statuses: Iterable[TraderStatus]) -> int:
    counts = Counter(statuses)
    return sum(_PRICE_PER_STATUS[status] * n for status, n in counts.items())


def notif_thresholds() -> tuple[int, int]:
    """Prices at or past which low and high notifications fire."""
    diff = PRICE_HIGHEST - PRICE_LOWEST
    return (
        int(diff * (1.0 - NOTIF_THRESHOLD) + PRICE_LOWEST),
        int(diff * NOTIF_THRESHOLD + PRICE_LOWEST),
    )


def format_money(money: int) -> str:
    return f"-${-money}" if money < 0 else f"+${money}"


@dataclass
class StonksTrading:
    price_current: int = 0
    owned: int = 0
    spent: int = 0
    returns_total: int = 0
    price_history: deque[int] = field(default_factory=deque)
    phase: TradePhase = TradePhase.BUY

    def avg_buy_price(self) -> int | None:
        return self.spent // self.owned if self.owned else None

    def update_price(
        self, statuses: Iterable[TraderStatus]
    ) -> StonksPriceNotification | None:
        """Recompute the price and record it; returns a notification on a threshold crossing."""
        price = price_for(statuses)
        self.price_current = price
        if len(self.price_history) > STONKS_DATA_POINTS:
            self.price_history.popleft()
        price_prev = self.price_history[-1] if self.price_history else 0
        self.price_history.append(price)

        low, high = notif_thresholds()
        if price <= low < price_prev:
            return StonksPriceNotification.LOW
        if price >= high > price_prev:
            return StonksPriceNotification.HIGH
        return None

    def invest(self) -> TextEffectRequest:
        """Buy a block at the current price, or dump everything owned."""
        if self.phase is TradePhase.BUY:
            self.owned += STONKS_PER_BUY_ACTION
            self.spent += self.price_current * STONKS_PER_BUY_ACTION
            self.phase = TradePhase.DUMP
            return TextEffectRequest("BOUGHT", EFFECT_SECS)
        profit = self.owned * self.price_current - self.spent
        self.returns_total += profit
        self.owned = 0
        self.spent = 0
        self.phase = TradePhase.BUY
        return TextEffectRequest(format_money(profit), EFFECT_SECS)