# tacotrader

Donnie's Tacos is a small arcade game about a market that moves on rumours.

Fifteen traders wander around the field. Every two seconds Donnie fires a
tariff rumour at one of them, which turns it bearish; you drive the taco truck
and throw tacos, which turn traders bullish. A trader that gets hit passes the
rumour on in a burst of three, so one good shot can swing the whole crowd.
Moods wear off after five seconds. The stock price follows the mood of the
traders: buy low, dump high, and end the minute richer than you started.

## Installing

```
pip install .
```

The game draws with pygame, which is installed as a dependency.

## Playing

```
tacotrader
```

Options:

- `--seed N` — seed the random number generator for a repeatable game.
- `--frames N` — stop after this many frames.
- `--assets DIR` — directory to load images and sounds from (default `assets`).
- `--mute` — do not start the sound mixer.

Controls while playing:

- **Left click** — throw a taco from the truck towards the mouse pointer. You
  hold at most three; a new one charges every second.
- **Space** — buy a block of 300 shares at the current price, then press again
  to dump them. Your profit or loss pops up beside the price chart.
- **Escape** — pause and resume.

The main menu offers Play, Options and Screensaver. Options sets the volume
(0, 25, 50, 75 or 100 %) for Donnie's voice, the music and the trader
effects. In Screensaver mode the field keeps running on its own, without the
price chart. The pause menu offers Resume, Restart and Menu. A round lasts
sixty seconds; the game-over screen shows your total returns with Restart and
Main Menu buttons.

## What is not included

The package ships no images, sounds or fonts. Pictures and sounds are looked
up by their relative paths (for example `taco_man3/taco.png` or
`audio/fx/245645__unfa__cartoon-pop-clean.flac`) under the `--assets`
directory. Where an image is missing, characters and projectiles are drawn as
coloured circles; where a sound is missing, nothing is played. Text uses
pygame's built-in font.

## Using the pieces

The game logic needs no window. `tacotrader.game.World` holds the traders,
Donnie, the taco truck and the projectiles, and `World.update(delta, state)`
advances one step and returns the next `GameState` when the round ends:

```python
import random

from tacotrader.game import World
from tacotrader.game_states import GameState
from tacotrader.geometry import Vec2

world = World(rng=random.Random(1))
world.setup_entities()
world.setup_play()
world.player_shoot(Vec2(100.0, 0.0))
for _ in range(600):
    world.update(1 / 60, GameState.PLAYING)
print(world.stonks.price_current)
print(world.invest().text)
```

Smaller parts can be used on their own:

- `tacotrader.stonks.StonksTrading` — price history, average buy price and the
  buy/dump cycle; `update_price` returns a `StonksPriceNotification` when the
  price crosses the low or high threshold.
- `tacotrader.stonks.format_money` and `tacotrader.ui.separated_number` —
  format amounts as `+$120` / `-$45` and `1.234.567`.
- `tacotrader.shooting.uniform_pattern` — directions spread evenly round the
  circle starting from a given direction.
- `tacotrader.timing.Timer` — one-shot and repeating countdown timers.
- `tacotrader.audio.AudioDirector` — chooses which sound to play for each game
  event, with per-channel volume and limits on sounds playing at once.
- `tacotrader.menu.menu_for_state` — the buttons of each menu screen and their
  layout.

## Running the tests

```
pip install .[test]
pytest
```