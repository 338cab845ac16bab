# pocketarcade

Eight small arcade games made for a 128×64 one-bit screen and four
buttons (up, down, left, right):

- Snake
- Tetris
- Flappy Bird
- 2048
- Breakout
- Frogger
- Helicopter
- Pac-Man

Each game draws into an in-memory `Display` and reads a `ButtonState`.
You pass in a clock and a random-number source, and the game takes its
time and randomness from them. Nothing depends on particular hardware, so
the same games can sit behind any front end you write, or run inside a
test.

## The pieces

- `pocketarcade.config` holds the screen size (`SCREEN_WIDTH`,
  `SCREEN_HEIGHT`), the `GameID` enum (`SNAKE` … `PACMAN`) and the
  manager's `GameState` enum (`MENU`, `PLAYING`, `GAME_OVER`, `GAME_WON`).
- `pocketarcade.display.Display` is a monochrome frame buffer. It offers
  `draw_pixel`, `get_pixel`, `fill_rect`, `draw_rect`, `draw_line` and
  `fill_circle` with the colours `Color.BLACK`, `Color.WHITE` and
  `Color.INVERSE`, plus a text cursor (`set_cursor`, `set_text_size`,
  `set_text_color`, `write`, `text_bounds`). `render()` returns the frame
  as rows of `#` and `.`. `draw_centered_text` and `draw_highlight_box`
  are helpers built on top of it.
- `pocketarcade.input.ButtonState` holds which buttons are held. Call
  `update(up, down, left, right)` once per frame with the raw state. It
  sets `up_pressed`, `down_pressed`, `left_pressed` and `right_pressed`
  only on the first frame a button is down. `is_held` and
  `was_just_pressed` take a `Button`.
- `pocketarcade.highscore.HighscoreManager` keeps one best score per game
  in a small binary file, protected by a magic number and a 16-bit
  checksum (`calculate_checksum`). If the file is missing or fails those
  checks, it is reset to zeros and written back. `save_highscore` stores a
  score only when it beats the current best.
- `pocketarcade.manager.GameManager` runs the menu and starts games. It
  shows the game-over and you-won screens and records new high scores.
- Each game class (`SnakeGame`, `TetrisGame`, `FlappyGame`, `Game2048`,
  `BreakoutGame`, `FroggerGame`, `HelicopterGame`, `PacManGame`) is built
  as `Game(display, buttons, clock, rng)`. Each one has `init()`,
  `update()`, `draw()` and `handle_input()`, plus `score` and `game_over`
  attributes. `draw()` returns the rendered frame.

The clock is any callable that returns milliseconds as an integer. The
random source needs a `randrange` method, so `random.Random` works.

## Running the arcade

Create one `Display`, one `ButtonState` and one `HighscoreManager`. Pass
them to a `GameManager` together with a clock and a random source. Then
repeat these steps every frame:

1. Read your buttons into the `ButtonState`.
2. Call `update()` on the manager.
3. Show `display.render()`.

```python
import random
import time

from pocketarcade.display import Display
from pocketarcade.highscore import HighscoreManager
from pocketarcade.input import ButtonState
from pocketarcade.manager import GameManager

display = Display(128, 64)
buttons = ButtonState()
highscores = HighscoreManager("highscores.bin")

manager = GameManager(
    display,
    buttons,
    highscores,
    lambda: int(time.monotonic() * 1000),
    random.Random(),
)

while True:
    up, down, left, right = read_buttons()  # your own input source
    buttons.update(up, down, left, right)
    manager.update()
    show(display.render())                  # your own output
```

In the menu, up and down move the selection and right starts the chosen
game. On the game-over and you-won screens, up goes back to the menu and
right starts a new round.

## Playing a single game

You can drive any game on its own with the same pieces:

```python
import random

from pocketarcade.display import Display
from pocketarcade.game2048 import Game2048
from pocketarcade.input import ButtonState

display = Display(128, 64)
buttons = ButtonState()
game = Game2048(display, buttons, lambda: 0, random.Random(1))

buttons.update(False, False, True, False)  # press left
game.update()
frame = game.draw()
```

With a seeded `random.Random` and a fixed clock, a game plays out exactly
the same way every time. That makes runs repeatable, which is useful for
tests and replays.

## What it does not do

- There is no command to run and no window or terminal front end. You
  supply the loop that reads real buttons and shows the frames.
- Text is not drawn into pixels. `Display.write` records each string, with
  its position, size and colour, in `Display.texts`. The output of
  `render()` therefore holds only the graphics.