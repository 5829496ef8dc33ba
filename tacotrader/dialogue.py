"""Speech lines, tariff announcements and overhead text bubbles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Sequence

from tacotrader.timing import Timer

BULLISH = (
    "PHEW",
    "YAY",
    "STONKS UP",
    "FART OF\nTHE DEAL",
    "TACOed",
    "LIBERATED",
    "PAUSED LOL",
    "CHICKEN",
    "BOK BOK",
    "CRINGE",
    "LIBS GOT\nOWNED",
)

BEARISH = (
    "O NO",
    "LAME",
    "MEIN GOTT",
    "O NEIN",
    "MA CHE SCEMO",
    "CE TAMPIT",
    "STONKS DOWN",
    "WTF",
    "MARKET CRASH\nLOL",
    "RECIPROCATED",
    "MY 401K",
)

TARIFF_VALUES = (
    "20",
    "42",
    "69",
    "100",
    "200",
    "420",
    "9001",
    "GAJILLION",
    "BAZMILLION",
    "INFINITY",
)

TARIFF_TARGETS = (
    "STEEL",
    "ELECTRONICS",
    "NAZI CARS",
    "THIS GAME",
    "ORANGE TAN",
    "PENGUINS",
    "CHINA",
    "EUROPE",
    "ATLANTIS",
    "BEVY",
    "AI SLOP",
    "ITCH.IO",
)

DEFAULT_DISPLAY_SECS = 1.0


def random_string(options: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one of ``options``; raises ValueError when there are none."""
    if not options:
        raise ValueError("cannot pick from an empty sequence")
    rng = rng if rng is not None else random
    return rng.choice(options)


def random_tariff(rng: random.Random | None = None) -> str:
    value = random_string(TARIFF_VALUES, rng)
    target = random_string(TARIFF_TARGETS, rng)
    return f"{value}% TARIFFS\nON {target}"


@dataclass
class OverheadTextRequest:
    attached_to: Any
    text: str | None = None
    duration_sec: float | None = None


@dataclass
class OverheadText:
    """A text bubble above a character that hides itself after a while."""

    text: str = ""
    visible: bool = True
    display_timer: Timer = field(default_factory=lambda: Timer(0.1))

    def show(self, text: str | None = None, duration_sec: float | None = None) -> None:
        self.visible = True
        self.display_timer = Timer(
            duration_sec if duration_sec is not None else DEFAULT_DISPLAY_SECS
        )
        if text is not None:
            self.text = text

    def update(self, delta: float) -> bool:
        """Advance the display timer; returns whether the text is still visible."""
        if self.display_timer.tick(delta).just_finished:
            self.visible = False
        return self.visible