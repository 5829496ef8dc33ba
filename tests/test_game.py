import random

from tacotrader.config import MAX_TACOS, TRADER_COUNT
from tacotrader.game import Entity, EntityKind, World
from tacotrader.game_states import GameState
from tacotrader.geometry import Transform, Vec2
from tacotrader.physics import Collider, CollisionEvent
from tacotrader.shooting import Rumor
from tacotrader.stonks import TradePhase
from tacotrader.traders import Trader, TraderStatus


def make_world():
    world = World(rng=random.Random(7))
    world.setup_entities()
    return world


def trader_at(x, y):
    return Entity(
        EntityKind.TRADER,
        transform=Transform(x, y),
        collider=Collider(25.0, Vec2(0.0, 14.0)),
        trader=Trader(),
    )


def rumor_at(x, y, rumor, owner=None):
    return Entity(
        EntityKind.PROJECTILE,
        transform=Transform(x, y),
        collider=Collider(20.0, Vec2()),
        rumor=rumor,
        owner=owner,
        trigger=True,
    )


def test_setup_entities_counts():
    world = make_world()
    assert len(world.traders) == TRADER_COUNT
    assert world.donnie is not None
    assert world.player is not None
    assert world.donnie.overhead.text == "TARIFFS!"


def test_player_shoot_spawns_projectile():
    world = make_world()
    assert world.player_shoot(Vec2(100.0, 0.0))
    assert world.player_logic.tacos_left == MAX_TACOS - 1
    spawned = world.spawn_projectiles()
    assert len(spawned) == 1
    assert spawned[0].rumor is Rumor.TACO
    assert world.stats.total_projectiles_launched == 1


def test_player_runs_out_of_tacos():
    world = make_world()
    shots = [world.player_shoot(Vec2(1.0, 1.0)) for _ in range(MAX_TACOS + 1)]
    assert shots == [True] * MAX_TACOS + [False]


def test_taco_makes_trader_bullish_and_chains():
    world = World(rng=random.Random(1))
    trader = trader_at(0.0, 0.0)
    taco = rumor_at(10.0, 0.0, Rumor.TACO)
    world.entities += [trader, taco]
    changes = world.handle_collisions([CollisionEvent(taco, trader)])
    assert trader.trader.status is TraderStatus.BULLISH
    assert changes[0].prev is TraderStatus.NEUTRAL
    assert not taco.alive
    assert len(world.pending_spawns) == 3
    assert all(s.owner is trader for s in world.pending_spawns)


def test_trader_first_order_also_handled():
    world = World(rng=random.Random(1))
    trader = trader_at(0.0, 0.0)
    tariff = rumor_at(5.0, 0.0, Rumor.TARIFF)
    world.handle_collisions([CollisionEvent(trader, tariff)])
    assert trader.trader.status is TraderStatus.BEARISH


def test_own_rumor_is_ignored():
    world = World(rng=random.Random(1))
    trader = trader_at(0.0, 0.0)
    taco = rumor_at(0.0, 0.0, Rumor.TACO, owner=trader)
    assert world.handle_collisions([CollisionEvent(taco, trader)]) == []
    assert trader.trader.status is TraderStatus.NEUTRAL


def test_resting_trader_is_ignored():
    world = World(rng=random.Random(1))
    trader = trader_at(0.0, 0.0)
    trader.trader.set_status(TraderStatus.BEARISH)
    taco = rumor_at(0.0, 0.0, Rumor.TACO)
    assert world.handle_collisions([CollisionEvent(taco, trader)]) == []
    assert trader.trader.status is TraderStatus.BEARISH


def test_paused_update_freezes_world():
    world = make_world()
    before = [(e.transform.x, e.transform.y) for e in world.entities]
    assert world.update(0.1, GameState.PAUSED) is None
    assert [(e.transform.x, e.transform.y) for e in world.entities] == before


def test_playing_update_records_price():
    world = make_world()
    world.update(0.01, GameState.PLAYING)
    assert len(world.stonks.price_history) == 1


def test_round_ends():
    world = make_world()
    assert world.update(60.0, GameState.PLAYING) is GameState.GAME_OVER


def test_invest_creates_text_effect():
    world = make_world()
    request = world.invest()
    assert request.text == "BOUGHT"
    assert world.stonks.phase is TradePhase.DUMP
    world.update(0.0, GameState.PLAYING)
    assert [t.text for t in world.text_effects] == ["BOUGHT"]


def test_setup_play_resets():
    world = make_world()
    world.player_shoot(Vec2(50.0, 50.0))
    world.spawn_projectiles()
    world.player_shoot(Vec2(50.0, 50.0))
    world.invest()
    world.setup_play()
    assert world.projectiles == []
    assert world.pending_spawns == []
    assert world.stats.total_projectiles_launched == 0
    assert world.stonks.phase is TradePhase.BUY