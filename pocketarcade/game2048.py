"""The 2048 sliding-tile puzzle on a 4x4 board."""

from __future__ import annotations

from typing import NamedTuple

from .display import Color

GRID_SIZE_2048 = 4
TILE_SIZE = 14
TILE_MARGIN = 2
BOARD_OFFSET_X = 32
BOARD_OFFSET_Y = 0
WIN_TILE = 2048

_RANGE = range(GRID_SIZE_2048)


class LineMerge(NamedTuple):
    cells: list
    points: int
    won: bool


def merge_line(line):
    """Slide a line towards its start, merging equal neighbours once."""
    cells = []
    points = 0
    won = False
    pending = None
    for value in (v for v in line if v):
        if pending == value:
            merged = value * 2
            cells.append(merged)
            points += merged
            won = won or merged == WIN_TILE
            pending = None
        else:
            if pending is not None:
                cells.append(pending)
            pending = value
    if pending is not None:
        cells.append(pending)
    cells.extend([0] * (len(line) - len(cells)))
    return LineMerge(cells, points, won)


def tile_text_width(value):
    """Pixel width of a tile's label."""
    if value < 10:
        return 6
    if value < 100:
        return 12
    if value < 1000:
        return 18
    return 12


class Game2048:
    name = "2048"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self.grid = [[0] * GRID_SIZE_2048 for _ in _RANGE]
        self.score = 0
        self.game_over = False
        self.has_won = False
        self.moved = False
        self._add_random_tile()
        self._add_random_tile()

    def update(self):
        self.handle_input()
        if self.moved:
            self._add_random_tile()
            self.moved = False
            if not self.can_move():
                self.game_over = True

    def draw(self):
        d = self.display
        d.clear()
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(0, 0)
        d.write("Score:")
        d.set_cursor(0, 10)
        d.write(str(self.score))
        for y, row in enumerate(self.grid):
            for x, value in enumerate(row):
                self._draw_tile(x, y, value)
        if self.has_won:
            d.set_text_color(Color.WHITE)
            d.set_cursor(0, 25)
            d.write("WIN!")
        return d.render()

    def handle_input(self):
        b = self.buttons
        if b.left_pressed:
            self.move_left()
        elif b.right_pressed:
            self.move_right()
        elif b.up_pressed:
            self.move_up()
        elif b.down_pressed:
            self.move_down()

    def can_move(self):
        g = self.grid
        if any(0 in row for row in g):
            return True
        for y in _RANGE:
            for x in _RANGE:
                value = g[y][x]
                if x < GRID_SIZE_2048 - 1 and g[y][x + 1] == value:
                    return True
                if y < GRID_SIZE_2048 - 1 and g[y + 1][x] == value:
                    return True
        return False

    def move_left(self):
        self._shift([[(x, y) for x in _RANGE] for y in _RANGE])

    def move_right(self):
        self._shift([[(x, y) for x in reversed(_RANGE)] for y in _RANGE])

    def move_up(self):
        self._shift([[(x, y) for y in _RANGE] for x in _RANGE])

    def move_down(self):
        self._shift([[(x, y) for y in reversed(_RANGE)] for x in _RANGE])

    def _shift(self, lines):
        moved = False
        for coords in lines:
            values = [self.grid[y][x] for x, y in coords]
            result = merge_line(values)
            if result.cells != values:
                moved = True
                for (x, y), value in zip(coords, result.cells):
                    self.grid[y][x] = value
            self.score += result.points
            self.has_won = self.has_won or result.won
        self.moved = moved

    def _add_random_tile(self):
        empty = [(x, y) for y in _RANGE for x in _RANGE if self.grid[y][x] == 0]
        if not empty:
            return
        x, y = empty[self.rng.randrange(0, len(empty))]
        self.grid[y][x] = 2 if self.rng.randrange(0, 10) < 9 else 4

    def _draw_tile(self, x, y, value):
        d = self.display
        screen_x = BOARD_OFFSET_X + x * (TILE_SIZE + TILE_MARGIN)
        screen_y = BOARD_OFFSET_Y + y * (TILE_SIZE + TILE_MARGIN)
        if value == 0:
            d.draw_rect(screen_x, screen_y, TILE_SIZE, TILE_SIZE, Color.WHITE)
            return
        d.fill_rect(screen_x, screen_y, TILE_SIZE, TILE_SIZE, Color.WHITE)
        d.set_text_size(1)
        d.set_text_color(Color.BLACK)
        text_x = screen_x + (TILE_SIZE - tile_text_width(value)) // 2
        text_y = screen_y + (TILE_SIZE - 8) // 2
        d.set_cursor(text_x, text_y)
        d.write(f"{value // 1000}k" if value >= 1000 else str(value))