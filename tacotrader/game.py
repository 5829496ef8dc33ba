"""The game world: characters, projectiles and the rules tying them together."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Iterable

from tacotrader.animations import Animation, spin_animation, wobble_animation
from tacotrader.assets import donnie_texture_path, investor_texture_path
from tacotrader.audio import AudioDirector, SoundRequest
from tacotrader.config import HEIGHT, PROJECTILE_SPEED, TRADER_COUNT, WIDTH, get_trader_random_velocity
from tacotrader.dialogue import OverheadText, random_tariff
from tacotrader.game_states import GameState, GameStats
from tacotrader.geometry import Transform, Vec2
from tacotrader.movement import EdgeBehavior, RandomMovement, apply_velocity, y_sort
from tacotrader.physics import Collider, CollisionEvent, PhysicsBody, check_collisions
from tacotrader.shooting import (
    CHAIN_REACTION_BULLETS,
    PROJECTILE_RADIUS,
    DonnieShootingLogic,
    PlayerShootingLogic,
    Rumor,
    SpawnProjectile,
    aim_direction,
    donnie_target_direction,
    projectile_texture,
    uniform_pattern,
)
from tacotrader.stonks import StonksTrading, TextEffectRequest
from tacotrader.traders import Trader, TraderChange, TraderStatus, trader_reaction_text, trader_texture_path
from tacotrader.ui import TextEffect

TARIFF_TEXT_SECS = 1.5
REACTION_TEXT_SECS = 1.2
CHARACTER_OFFSET = Vec2(0.0, 14.0)
CHARACTER_RADIUS = 25.0
TRUCK_TEXTURE = "taco_man3/taco-truck.png"


class EntityKind(enum.Enum):
    TRADER = "trader"
    DONNIE = "donnie"
    PLAYER = "player"
    PROJECTILE = "projectile"


@dataclass(eq=False)
class Entity:
    """Anything that lives in the play field."""

    kind: EntityKind
    transform: Transform = field(default_factory=Transform)
    texture: str = ""
    size: float = 50.0
    collider: Collider | None = None
    body: PhysicsBody | None = None
    edge: EdgeBehavior | None = None
    movement: RandomMovement | None = None
    animation: Animation | None = None
    trader: Trader | None = None
    rumor: Rumor | None = None
    owner: Entity | None = None
    overhead: OverheadText | None = None
    trigger: bool = False
    flip_x: bool = False
    alive: bool = True


class World:
    """All game entities and the per-frame rules acting on them."""

    def __init__(self, rng: random.Random | None = None, audio: AudioDirector | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.audio = audio if audio is not None else AudioDirector(rng=self.rng)
        self.entities: list[Entity] = []
        self.stonks = StonksTrading()
        self.stats = GameStats()
        self.donnie_logic = DonnieShootingLogic()
        self.player_logic = PlayerShootingLogic()
        self.pending_spawns: list[SpawnProjectile] = []
        self.trader_changes: list[TraderChange] = []
        self.effect_requests: list[TextEffectRequest] = []
        self.text_effects: list[TextEffect] = []
        self.sounds: list[SoundRequest] = []

    def _of_kind(self, kind: EntityKind) -> list[Entity]:
        return [e for e in self.entities if e.kind is kind]

    @property
    def traders(self) -> list[Entity]:
        return self._of_kind(EntityKind.TRADER)

    @property
    def projectiles(self) -> list[Entity]:
        return self._of_kind(EntityKind.PROJECTILE)

    @property
    def donnie(self) -> Entity | None:
        return next(iter(self._of_kind(EntityKind.DONNIE)), None)

    @property
    def player(self) -> Entity | None:
        return next(iter(self._of_kind(EntityKind.PLAYER)), None)

    def _sound(self, request: SoundRequest | None) -> None:
        if request is not None:
            self.sounds.append(request)

    def _character(self, kind: EntityKind, position: Vec2, texture: str, size: float) -> Entity:
        return Entity(
            kind,
            transform=Transform(position.x, position.y),
            texture=texture,
            size=size,
            collider=Collider(CHARACTER_RADIUS, CHARACTER_OFFSET),
            body=PhysicsBody(get_trader_random_velocity(self.rng)),
            edge=EdgeBehavior.WRAPAROUND,
            movement=RandomMovement.random(self.rng),
            animation=wobble_animation(self.rng),
        )

    def setup_entities(self) -> None:
        """Spawn the traders, Donnie and the player's taco truck."""
        for _ in range(TRADER_COUNT):
            pos = Vec2(self.rng.uniform(-WIDTH, WIDTH), self.rng.uniform(-HEIGHT, HEIGHT))
            trader = self._character(EntityKind.TRADER, pos, investor_texture_path(self.rng), 50.0)
            trader.trader = Trader()
            trader.overhead = OverheadText("")
            self.entities.append(trader)
        donnie = self._character(
            EntityKind.DONNIE, Vec2(0.0, HEIGHT), donnie_texture_path(self.rng), 70.0
        )
        donnie.overhead = OverheadText("TARIFFS!")
        self.entities.append(donnie)
        self.entities.append(self._character(EntityKind.PLAYER, Vec2(), TRUCK_TEXTURE, 70.0))

    def setup_play(self) -> None:
        """Reset the round: market, shooting clock, stats and projectiles."""
        self.stonks = StonksTrading()
        self.donnie_logic = DonnieShootingLogic()
        self.stats = GameStats()
        self.entities = [e for e in self.entities if e.kind is not EntityKind.PROJECTILE]
        self.pending_spawns.clear()

    def update(self, delta: float, state: GameState) -> GameState | None:
        """Advance one frame; returns the next game state when it changes."""
        next_state = None
        playing = state is GameState.PLAYING
        active = state is not GameState.PAUSED
        if playing:
            if self.stats.tick(delta):
                next_state = GameState.GAME_OVER
            self.player_logic.charge(delta)
        if active:
            self._donnie_shooting(delta)
            self.spawn_projectiles()
            for entity in self.entities:
                if entity.overhead is not None:
                    entity.overhead.update(delta)
            self._move(delta)
            self._prune()
            self.handle_collisions(check_collisions(self.entities))
            self._prune()
            self._tick_traders(delta)
            self._update_trader_status()
        if playing:
            self._update_price()
            self.text_effects = [t for t in self.text_effects if not t.tick(delta)]
        if active:
            self.text_effects.extend(
                TextEffect.from_request(r, self.rng) for r in self.effect_requests
            )
            self.effect_requests.clear()
        return next_state

    def _prune(self) -> None:
        self.entities = [e for e in self.entities if e.alive]

    def _donnie_shooting(self, delta: float) -> None:
        if not self.donnie_logic.tick(delta):
            return
        donnie = self.donnie
        if donnie is None:
            return
        start = donnie.transform.xy
        direction = donnie_target_direction(
            start, (t.transform.xy for t in self.traders), self.rng
        )
        self.pending_spawns.append(
            SpawnProjectile(Rumor.TARIFF, start, direction * PROJECTILE_SPEED, donnie)
        )
        if donnie.overhead is not None:
            donnie.overhead.show(random_tariff(self.rng), TARIFF_TEXT_SECS)
        donnie.texture = donnie_texture_path(self.rng)
        self._sound(self.audio.on_donnie_shot())

    def _move(self, delta: float) -> None:
        for entity in self.entities:
            if entity.movement is not None and entity.body is not None:
                velocity = entity.movement.tick(delta, self.rng)
                if velocity is not None:
                    entity.body.velocity = velocity
        for entity in self.entities:
            if entity.body is None:
                continue
            if not apply_velocity(entity.transform, entity.body.velocity, entity.edge):
                entity.alive = False
            entity.flip_x = entity.body.velocity.x < 0.0
        for entity in self.entities:
            if entity.animation is not None:
                entity.animation.tick(delta, entity.transform)
            y_sort(entity.transform)

    def spawn_projectiles(self) -> list[Entity]:
        """Turn queued spawn requests into projectile entities."""
        spawned = []
        for event in self.pending_spawns:
            projectile = Entity(
                EntityKind.PROJECTILE,
                transform=Transform(event.position.x, event.position.y),
                texture=projectile_texture(event.projectile_type),
                collider=Collider(PROJECTILE_RADIUS, Vec2()),
                body=PhysicsBody(event.direction),
                edge=EdgeBehavior.DESTROY,
                animation=spin_animation(),
                rumor=event.projectile_type,
                owner=event.owner,
                trigger=True,
            )
            spawned.append(projectile)
            self.stats.total_projectiles_launched += 1
        self.pending_spawns.clear()
        self.entities.extend(spawned)
        return spawned

    def handle_collisions(self, events: Iterable[CollisionEvent]) -> list[TraderChange]:
        """Let rumours sway the traders they hit, each hit scattering new rumours."""
        changes = []
        for event in events:
            a, b = event.entity1, event.entity2
            if a.rumor is not None and b.trader is not None:
                change = self._rumor_hits_trader(a, b)
            elif a.trader is not None and b.rumor is not None:
                change = self._rumor_hits_trader(b, a)
            else:
                change = None
            if change is not None:
                changes.append(change)
        self.trader_changes.extend(changes)
        return changes

    def _rumor_hits_trader(self, rumor: Entity, target: Entity) -> TraderChange | None:
        trader = target.trader
        if (
            rumor.owner is target
            or (rumor.rumor is Rumor.TACO and trader.status is TraderStatus.BULLISH)
            or (rumor.rumor is Rumor.TARIFF and trader.status is TraderStatus.BEARISH)
            or trader.is_resting()
        ):
            return None
        new_status = TraderStatus.BEARISH if rumor.rumor is Rumor.TARIFF else TraderStatus.BULLISH
        change = trader.set_status(new_status)
        rumor.alive = False
        position = rumor.transform.xy
        hit_direction = (target.transform.xy - position).normalize()
        for direction in uniform_pattern(hit_direction, CHAIN_REACTION_BULLETS):
            self.pending_spawns.append(
                SpawnProjectile(rumor.rumor, position, direction * PROJECTILE_SPEED, target)
            )
        return change

    def _tick_traders(self, delta: float) -> None:
        for entity in self.traders:
            change = entity.trader.tick_timers(delta)
            if change is not None:
                self.trader_changes.append(change)

    def _update_trader_status(self) -> None:
        for change in self.trader_changes:
            entity = next((e for e in self.entities if e.trader is change.entity), None)
            if entity is None:
                continue
            status = entity.trader.status
            entity.texture = trader_texture_path(status, self.rng)
            if status is TraderStatus.NEUTRAL:
                continue
            self._sound(self.audio.on_trader_status_change(change.new))
            text = trader_reaction_text(status, self.rng)
            if text is not None and entity.overhead is not None:
                entity.overhead.show(text, REACTION_TEXT_SECS)
        self.trader_changes.clear()

    def _update_price(self) -> None:
        notification = self.stonks.update_price(e.trader.status for e in self.traders)
        if notification is not None:
            self._sound(self.audio.on_stonks_notification(notification))

    def player_shoot(self, cursor: Vec2) -> bool:
        """Throw a taco from the truck towards ``cursor``; False when none is left."""
        player = self.player
        if player is None or not self.player_logic.try_fire():
            return False
        start = player.transform.xy
        self.pending_spawns.append(
            SpawnProjectile(Rumor.TACO, start, aim_direction(start, cursor) * PROJECTILE_SPEED)
        )
        self._sound(self.audio.on_projectile_shot())
        return True

    def invest(self) -> TextEffectRequest:
        """Buy or dump stock and queue the resulting text effect."""
        request = self.stonks.invest()
        self.effect_requests.append(request)
        return request