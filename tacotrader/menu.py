"""Menu screens: which buttons each screen shows and where they sit."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tacotrader.audio import AudioType
from tacotrader.config import GAME_NAME
from tacotrader.game_states import GameState

Color = tuple[int, int, int]
Rect = tuple[int, int, int, int]


def _rgb(r: float, g: float, b: float) -> Color:
    return (round(r * 255), round(g * 255), round(b * 255))


NORMAL_BUTTON = _rgb(0.15, 0.15, 0.15)
HOVERED_BUTTON = _rgb(0.25, 0.25, 0.25)
PRESSED_BUTTON = _rgb(0.35, 0.75, 0.35)
BUTTON_TEXT = _rgb(0.9, 0.9, 0.9)
BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)

ROW_GAP = 20
BUTTON_GAP = 10
TITLE_HEIGHT = 60
LABEL_WIDTH = 100
TOP_PADDING = 50
LEFT_PADDING = 10

VOLUME_STEPS = (("0", 0.0), ("25", 0.25), ("50", 0.5), ("75", 0.75), ("100", 1.0))


class Interaction(enum.Enum):
    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(eq=False)
class Button:
    """A clickable button that changes the game state or a channel volume."""

    label: str
    target: GameState | None = None
    volume: tuple[AudioType, float] | None = None
    small: bool = False

    @property
    def width(self) -> int:
        return 80 if self.small else 250

    @property
    def height(self) -> int:
        return 50 if self.small else 65


@dataclass
class MenuRow:
    buttons: list[Button]
    label: str | None = None

    @property
    def height(self) -> int:
        return max(b.height for b in self.buttons)

    @property
    def width(self) -> int:
        label = LABEL_WIDTH if self.label is not None else 0
        return label + sum(b.width for b in self.buttons) + BUTTON_GAP * (len(self.buttons) - 1)


@dataclass
class MenuScreen:
    """A screen of button rows, centred or pinned to the top left."""

    state: GameState
    rows: list[MenuRow] = field(default_factory=list)
    title: str | None = None
    top_left: bool = False

    @property
    def buttons(self) -> list[Button]:
        return [b for row in self.rows for b in row.buttons]

    def layout(self, width: int, height: int) -> list[tuple[Button, Rect]]:
        """Screen rectangles (x, y, w, h) of every button."""
        title_h = TITLE_HEIGHT + ROW_GAP if self.title is not None else 0
        total = title_h + sum(r.height for r in self.rows) + ROW_GAP * max(len(self.rows) - 1, 0)
        y = TOP_PADDING if self.top_left else (height - total) // 2
        y += title_h
        placed: list[tuple[Button, Rect]] = []
        for row in self.rows:
            x = LEFT_PADDING if self.top_left else (width - row.width) // 2
            if row.label is not None:
                x += LABEL_WIDTH
            for button in row.buttons:
                top = y + (row.height - button.height) // 2
                placed.append((button, (x, top, button.width, button.height)))
                x += button.width + BUTTON_GAP
            y += row.height + ROW_GAP
        return placed

    def button_at(self, pos: tuple[float, float], width: int, height: int) -> Button | None:
        px, py = pos
        for button, (x, y, w, h) in self.layout(width, height):
            if x <= px < x + w and y <= py < y + h:
                return button
        return None


def _single(label: str, target: GameState, small: bool = False) -> MenuRow:
    return MenuRow([Button(label, target=target, small=small)])


def _volume_row(label: str, audio: AudioType) -> MenuRow:
    return MenuRow(
        [Button(text, volume=(audio, value), small=True) for text, value in VOLUME_STEPS],
        label=label,
    )


def menu_for_state(state: GameState) -> MenuScreen | None:
    """The menu shown in ``state``, or None when the state has no menu."""
    if state is GameState.MENU:
        return MenuScreen(
            state,
            [
                _single("Play", GameState.PLAY_SETUP),
                _single("Options", GameState.OPTIONS),
                _single("Screensaver", GameState.SCREENSAVER),
            ],
            title=GAME_NAME,
        )
    if state is GameState.PAUSED:
        return MenuScreen(
            state,
            [
                _single("Resume", GameState.PLAYING),
                _single("Restart", GameState.PLAY_SETUP),
                _single("Menu", GameState.MENU),
            ],
        )
    if state is GameState.OPTIONS:
        return MenuScreen(
            state,
            [
                _volume_row("Donnie", AudioType.DONNIE_VOICE),
                _volume_row("Music", AudioType.MUSIC),
                _volume_row("Effects", AudioType.TRADER_STATUS_CHANGE),
                _single("Back", GameState.MENU),
            ],
            title="Volume",
        )
    if state is GameState.SCREENSAVER:
        return MenuScreen(state, [_single("Back", GameState.MENU, small=True)], top_left=True)
    if state is GameState.GAME_OVER:
        return MenuScreen(
            state,
            [_single("Restart", GameState.PLAY_SETUP), _single("Main Menu", GameState.MENU)],
        )
    return None


def button_colors(interaction: Interaction) -> tuple[Color, Color]:
    """Background and border colour of a button."""
    if interaction is Interaction.PRESSED:
        return PRESSED_BUTTON, RED
    if interaction is Interaction.HOVERED:
        return HOVERED_BUTTON, WHITE
    return NORMAL_BUTTON, BLACK