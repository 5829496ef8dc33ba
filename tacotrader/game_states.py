"""Game screens and the round clock."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tacotrader.timing import Timer

ROUND_SECS = 60.0


class GameState(enum.Enum):
    MENU = "menu"
    PLAY_SETUP = "play_setup"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    TUTORIAL = "tutorial"
    OPTIONS = "options"
    SCREENSAVER = "screensaver"


@dataclass
class GameStats:
    total_projectiles_launched: int = 0
    time_remaining: Timer = field(default_factory=lambda: Timer(ROUND_SECS))

    def tick(self, delta: float) -> bool:
        """Advance the round clock; True on the tick the round ends."""
        return self.time_remaining.tick(delta).just_finished


def toggle_pause(state: GameState) -> GameState | None:
    """The state Escape leads to, or None when it does nothing."""
    if state is GameState.PAUSED:
        return GameState.PLAYING
    if state is GameState.PLAYING:
        return GameState.PAUSED
    return None