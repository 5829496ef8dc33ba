"""The pygame front end: window, input, drawing and sound playback."""

from __future__ import annotations

import argparse
import math
import os
import random

import pygame

from tacotrader.audio import PlaybackMode, SoundRequest
from tacotrader.config import GAME_NAME, HEIGHT, WIDTH
from tacotrader.game import Entity, EntityKind, World
from tacotrader.game_states import GameState, toggle_pause
from tacotrader.geometry import Vec2
from tacotrader.menu import BUTTON_TEXT, LABEL_WIDTH, TITLE_HEIGHT, Button, Interaction, button_colors, menu_for_state
from tacotrader.shooting import Rumor
from tacotrader.stonks import format_money
from tacotrader.traders import TraderStatus
from tacotrader.ui import (
    CHART_BORDER_CENTER,
    CHART_SIZE,
    LEVEL_BORDER_SIZE,
    buy_price_line,
    chart_points,
    gameover_lines,
    stonks_phase_label,
    time_label,
)

BACKGROUND = pygame.Color("#6b6a7b")
LEVEL_BORDER = pygame.Color("#85849b")
CHART_BORDER = pygame.Color("#849b85")
SHADOW = (40, 40, 45)
VIEW_WIDTH = 2.0 * WIDTH + 40.0
VIEW_HEIGHT = 840.0
CAMERA = Vec2(0.0, 50.0)
FIXED_STEP = 1.0 / 64.0
BACKGROUND_TEXTURE = "taco_man3/background.png"

_FALLBACK = {
    EntityKind.DONNIE: (240, 150, 40),
    EntityKind.PLAYER: (240, 220, 60),
}
_STATUS_FALLBACK = {
    TraderStatus.NEUTRAL: (180, 180, 180),
    TraderStatus.BULLISH: (60, 200, 80),
    TraderStatus.BEARISH: (210, 60, 60),
}


class GameApp:
    """Runs the world and menus in a pygame window or on any surface."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        seed: int | None = None,
        assets_dir: str = "assets",
        audio: bool = True,
    ) -> None:
        pygame.init()
        self._owns_display = surface is None
        if surface is None:
            surface = pygame.display.set_mode((int(WIDTH), int(HEIGHT)), pygame.RESIZABLE)
            pygame.display.set_caption(GAME_NAME)
        self.surface = surface
        self.assets_dir = assets_dir
        self.world = World(rng=random.Random(seed))
        self.world.setup_entities()
        self.state = GameState.MENU
        self.menu = menu_for_state(self.state)
        self.running = True
        self._hover: Button | None = None
        self._pressed: Button | None = None
        self._images: dict[tuple[str, int], pygame.Surface | None] = {}
        self._fonts: dict[int, pygame.font.Font] = {}
        self._channels: list[tuple[SoundRequest, pygame.mixer.Channel | None]] = []
        self._mixer = False
        if audio:
            try:
                pygame.mixer.init()
                self._mixer = True
            except pygame.error:
                self._mixer = False
        self.world._sound(self.world.audio.soundtrack())
        self._process_audio()

    # coordinates

    def _scale(self) -> float:
        w, h = self.surface.get_size()
        return min(w / VIEW_WIDTH, h / VIEW_HEIGHT)

    def _to_screen(self, p: Vec2) -> tuple[float, float]:
        w, h = self.surface.get_size()
        s = self._scale()
        return w / 2 + (p.x - CAMERA.x) * s, h / 2 - (p.y - CAMERA.y) * s

    def _to_world(self, pos: tuple[float, float]) -> Vec2:
        w, h = self.surface.get_size()
        s = self._scale()
        return Vec2((pos[0] - w / 2) / s + CAMERA.x, (h / 2 - pos[1]) / s + CAMERA.y)

    # state and input

    def _set_state(self, state: GameState) -> None:
        if state is GameState.PLAY_SETUP:
            self.world.setup_play()
            state = GameState.PLAYING
        self.state = state
        self.menu = menu_for_state(state)
        self._hover = self._pressed = None

    def _activate(self, button: Button) -> None:
        if button.volume is not None:
            audio, volume = button.volume
            self.world.audio.set_channel_volume(audio, volume)
            for request, channel in self._channels:
                if channel is not None and request.audio_type is audio:
                    channel.set_volume(volume)
        if button.target is not None:
            self._set_state(button.target)

    def handle_event(self, event: pygame.event.Event) -> None:
        size = self.surface.get_size()
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                target = toggle_pause(self.state)
                if target is not None:
                    self._set_state(target)
            elif event.key == pygame.K_SPACE and self.state is GameState.PLAYING:
                self.world.invest()
        elif event.type == pygame.MOUSEMOTION:
            if self.menu is not None:
                self._hover = self.menu.button_at(event.pos, *size)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.menu is not None:
                self._pressed = self.menu.button_at(event.pos, *size)
            elif self.state is GameState.PLAYING:
                self.world.player_shoot(self._to_world(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.menu is not None:
                button = self.menu.button_at(event.pos, *size)
                pressed, self._pressed = self._pressed, None
                if button is not None and button is pressed:
                    self._activate(button)

    def step(self, delta: float) -> None:
        next_state = self.world.update(delta, self.state)
        if next_state is not None:
            self._set_state(next_state)
        self._process_audio()

    # sound

    def _process_audio(self) -> None:
        director = self.world.audio
        for request in self.world.sounds:
            channel = None
            if self._mixer:
                try:
                    sound = pygame.mixer.Sound(os.path.join(self.assets_dir, request.path))
                    loops = -1 if request.mode is PlaybackMode.LOOP else 0
                    channel = sound.play(loops=loops)
                    if channel is not None:
                        channel.set_volume(request.volume)
                except (pygame.error, FileNotFoundError):
                    channel = None
            self._channels.append((request, channel))
        self.world.sounds.clear()
        still = []
        for request, channel in self._channels:
            if channel is None or not channel.get_busy():
                director.finished(request)
            else:
                still.append((request, channel))
        self._channels = still

    # drawing

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _image(self, path: str, size: int) -> pygame.Surface | None:
        key = (path, size)
        if key not in self._images:
            try:
                image = pygame.image.load(os.path.join(self.assets_dir, path))
                self._images[key] = pygame.transform.smoothscale(image, (size, size))
            except (pygame.error, FileNotFoundError):
                self._images[key] = None
        return self._images[key]

    def _text(self, text: str, size: int, center: tuple[float, float], color=(255, 255, 255),
              angle: float = 0.0) -> None:
        font = self._font(size)
        lines = text.split("\n")
        height = font.get_linesize()
        top = center[1] - height * len(lines) / 2
        for n, line in enumerate(lines):
            rendered = font.render(line, True, color)
            if angle:
                rendered = pygame.transform.rotate(rendered, math.degrees(angle))
            rect = rendered.get_rect(center=(center[0], top + height * n + height / 2))
            self.surface.blit(rendered, rect)

    def _fallback_color(self, entity: Entity) -> tuple[int, int, int]:
        if entity.trader is not None:
            return _STATUS_FALLBACK[entity.trader.status]
        if entity.rumor is Rumor.TARIFF:
            return (120, 80, 40)
        if entity.rumor is Rumor.TACO:
            return (250, 200, 90)
        return _FALLBACK.get(entity.kind, (200, 200, 200))

    def _draw_entity(self, entity: Entity) -> None:
        s = self._scale()
        size = max(1, int(entity.size * s))
        x, y = self._to_screen(entity.transform.xy)
        projectile = entity.kind is EntityKind.PROJECTILE
        if not projectile:
            shadow = pygame.Rect(0, 0, int(50 * s), int(25 * s))
            shadow.center = (int(x), int(y))
            pygame.draw.ellipse(self.surface, SHADOW, shadow)
        image = self._image(entity.texture, size)
        if image is None:
            image = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(image, self._fallback_color(entity), (size // 2, size // 2), size // 2)
        if entity.flip_x:
            image = pygame.transform.flip(image, True, False)
        height = max(1, int(size * entity.transform.scale_y))
        image = pygame.transform.scale(image, (size, height))
        image = pygame.transform.rotate(image, math.degrees(entity.transform.rotation))
        rect = image.get_rect(center=(x, y)) if projectile else image.get_rect(midbottom=(x, y))
        self.surface.blit(image, rect)
        if entity.overhead is not None and entity.overhead.visible and entity.overhead.text:
            self._text(entity.overhead.text, max(8, int(17 * s * 2)), (x, y + 25 * s))

    def _draw_world(self) -> None:
        s = self._scale()
        background = self._image(BACKGROUND_TEXTURE, 0) if False else None
        tl = self._to_screen(Vec2(-LEVEL_BORDER_SIZE.x / 2, LEVEL_BORDER_SIZE.y / 2))
        bg = pygame.Rect(int(tl[0]), int(tl[1]), int(LEVEL_BORDER_SIZE.x * s), int(LEVEL_BORDER_SIZE.y * s))
        if background is not None:
            self.surface.blit(background, bg)
        pygame.draw.rect(self.surface, LEVEL_BORDER, bg, 2)
        for entity in sorted(self.world.entities, key=lambda e: e.transform.z):
            self._draw_entity(entity)

    def _draw_hud(self) -> None:
        s = self._scale()
        w, h = self.surface.get_size()
        stonks = self.world.stonks
        center = self._to_screen(CHART_BORDER_CENTER)
        border = pygame.Rect(0, 0, int(CHART_SIZE.x * s), int(CHART_SIZE.y * s))
        border.center = (int(center[0]), int(center[1]))
        pygame.draw.rect(self.surface, CHART_BORDER, border, 2)
        line = buy_price_line(stonks)
        if line is not None:
            pygame.draw.line(self.surface, (255, 255, 255), self._to_screen(line[0]),
                             self._to_screen(line[1]))
        points = chart_points(stonks.price_history)
        for (a, _), (b, hsla) in zip(points, points[1:]):
            color = pygame.Color(0)
            hue = min(max(hsla[0], 0.0), 360.0)
            color.hsla = (hue, hsla[1] * 100, hsla[2] * 100, hsla[3] * 100)
            pygame.draw.line(self.surface, color, self._to_screen(a), self._to_screen(b), 2)
        size = max(10, int(h * 0.08))
        self._text(format_money(stonks.returns_total), size, (w * 0.7, h * 0.07))
        self._text(time_label(self.world.stats), size, (w * 0.9, h * 0.07))
        self._text(stonks_phase_label(stonks.phase), max(8, size // 3),
                   (border.centerx, border.bottom + size // 3))
        for effect in self.world.text_effects:
            self._text(effect.text, max(10, int(35 * s * 2)), self._to_screen(effect.position),
                       angle=effect.rotation)

    def _interaction(self, button: Button) -> Interaction:
        if button is self._pressed:
            return Interaction.PRESSED
        if button is self._hover:
            return Interaction.HOVERED
        return Interaction.NONE

    def _draw_menu(self) -> None:
        w, h = self.surface.get_size()
        placed = dict((id(b), r) for b, r in self.menu.layout(w, h))
        if self.menu.title is not None and self.menu.rows:
            first = placed[id(self.menu.rows[0].buttons[0])]
            self._text(self.menu.title, TITLE_HEIGHT, (w / 2, first[1] - TITLE_HEIGHT / 2 - 10))
        if self.state is GameState.GAME_OVER:
            lines = gameover_lines(self.world.stonks)
            self._text(lines[0], 24, (w / 2, h * 0.1))
            self._text(lines[1], 48, (w / 2, h * 0.22))
        for row in self.menu.rows:
            if row.label is not None:
                x, y, _, bh = placed[id(row.buttons[0])]
                self._text(row.label, 24, (x - LABEL_WIDTH / 2, y + bh / 2))
        for button, rect in self.menu.layout(w, h):
            background, border = button_colors(self._interaction(button))
            r = pygame.Rect(rect)
            pygame.draw.rect(self.surface, background, r, border_radius=r.height // 2)
            pygame.draw.rect(self.surface, border, r, 3, border_radius=r.height // 2)
            self._text(button.label, 20 if button.small else 33, r.center, BUTTON_TEXT)

    def draw(self) -> pygame.Surface:
        self.surface.fill(BACKGROUND)
        self._draw_world()
        if self.state is GameState.PLAYING:
            self._draw_hud()
        if self.menu is not None:
            self._draw_menu()
        return self.surface

    def run(self, max_frames: int | None = None) -> int:
        """Run the main loop; returns the number of frames shown."""
        clock = pygame.time.Clock()
        frames = 0
        accumulator = 0.0
        while self.running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                self.handle_event(event)
            accumulator += clock.tick(60) / 1000.0
            while accumulator >= FIXED_STEP:
                self.step(FIXED_STEP)
                accumulator -= FIXED_STEP
            self.draw()
            if self._owns_display:
                pygame.display.flip()
            frames += 1
        return frames


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=GAME_NAME)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    parser.add_argument("--mute", action="store_true")
    args = parser.parse_args(argv)
    app = GameApp(seed=args.seed, assets_dir=args.assets, audio=not args.mute)
    try:
        app.run(args.frames)
    finally:
        pygame.quit()
    return 0