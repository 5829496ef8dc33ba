"""Countdown timers driven by frame deltas."""

from __future__ import annotations

import enum


class TimerMode(enum.Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A timer that finishes once, or repeatedly, after ``duration`` seconds."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> Timer:
        """Advance by ``delta`` seconds and return the timer."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")
        if self.finished and self.mode is TimerMode.ONCE:
            self.times_finished_this_tick = 0
            return self
        self.elapsed += delta
        if self.elapsed >= self.duration:
            if self.mode is TimerMode.REPEATING:
                if self.duration == 0.0:
                    self.times_finished_this_tick = 1
                    self.elapsed = 0.0
                else:
                    times, rest = divmod(self.elapsed, self.duration)
                    self.times_finished_this_tick = int(times)
                    self.elapsed = rest
            else:
                self.times_finished_this_tick = 1
                self.elapsed = self.duration
            self.finished = True
        else:
            self.times_finished_this_tick = 0
            self.finished = False
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def remaining_secs(self) -> float:
        return self.duration - self.elapsed

    def __repr__(self) -> str:
        return f"Timer({self.elapsed}/{self.duration}, {self.mode.name})"