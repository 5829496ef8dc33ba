"""Paths of the game's image and font assets."""

from __future__ import annotations

import random

FONT_MAIN = "fonts/Funicorn.ttf"


def _numbered(prefix: str, count: int, rng: random.Random | None) -> str:
    rng = rng if rng is not None else random
    return f"taco_man3/{prefix}{rng.randint(1, count)}.PNG"


def donnie_texture_path(rng: random.Random | None = None) -> str:
    return _numbered("donnie", 6, rng)


def investor_texture_path(rng: random.Random | None = None) -> str:
    return _numbered("investor", 2, rng)


def bullish_texture_path(rng: random.Random | None = None) -> str:
    return _numbered("bullish", 3, rng)


def bearish_texture_path(rng: random.Random | None = None) -> str:
    return _numbered("bearish", 2, rng)