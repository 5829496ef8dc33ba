import random

import pytest

from tacotrader.config import PRICE_HIGHEST, PRICE_LOWEST
from tacotrader.game_states import GameStats
from tacotrader.stonks import StonksTrading, TextEffectRequest, TradePhase
from tacotrader.ui import (
    CHART_OFFSET,
    CHART_SIZE,
    EFFECT_ROTATION,
    TextEffect,
    buy_price_line,
    chart_points,
    gameover_lines,
    price_ratio,
    separated_number,
    stonks_phase_label,
    time_label,
)


def test_separated_number_examples():
    assert separated_number(1234567) == "1.234.567"
    assert separated_number(-1000) == "-1.000"


@pytest.mark.parametrize("n", [0, 7, 12, 123, 1234, 99999, -45678, 10**12])
def test_separated_number_round_trip(n):
    text = separated_number(n)
    assert int(text.replace(".", "")) == n
    groups = text.lstrip("-").split(".")
    assert all(len(g) == 3 for g in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_price_ratio_bounds():
    assert price_ratio(PRICE_LOWEST) == pytest.approx(0.0)
    assert price_ratio(PRICE_HIGHEST) == pytest.approx(1.0)


def test_chart_points_follow_history():
    history = [45, 75, 105, 60]
    points = chart_points(history)
    assert len(points) == len(history)
    xs = [p.x for p, _ in points]
    assert xs == sorted(xs)
    assert points[0][0].x == CHART_OFFSET.x
    assert [p.y - CHART_OFFSET.y for p, _ in points] == [float(v) for v in history]
    assert points[0][1][0] == pytest.approx(0.0)


def test_buy_price_line():
    stonks = StonksTrading()
    assert buy_price_line(stonks) is None
    stonks.price_current = 70
    stonks.invest()
    start, end = buy_price_line(stonks)
    assert start.y == CHART_OFFSET.y + stonks.avg_buy_price()
    assert end.x - start.x == pytest.approx(CHART_SIZE.x)
    assert end.y == start.y


def test_phase_labels():
    assert stonks_phase_label(TradePhase.BUY) == "Buy"
    assert stonks_phase_label(TradePhase.DUMP) == "Sell"


def test_time_label_fresh_round():
    stats = GameStats()
    assert time_label(stats) == "60"
    stats.tick(100.0)
    assert time_label(stats) == "0"


def test_gameover_lines():
    stonks = StonksTrading(returns_total=1234567)
    lines = gameover_lines(stonks)
    assert lines[0] == "Congratulations!\nYou are now richer by"
    assert lines[1] == "$" + separated_number(1234567)


def test_text_effect_from_request():
    effect = TextEffect.from_request(TextEffectRequest("BOUGHT", 1.0), random.Random(5))
    assert effect.text == "BOUGHT"
    assert -EFFECT_ROTATION <= effect.rotation <= EFFECT_ROTATION
    assert effect.tick(0.5) is False
    assert effect.tick(0.5) is True


def test_text_effect_default_expires():
    effect = TextEffect(text="x")
    assert effect.tick(0.4) is False
    assert effect.tick(0.1) is True