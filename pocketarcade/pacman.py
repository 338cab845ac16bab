"""Pac-Man in a small maze with chasing ghosts."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT
from .display import Color

MAZE_WIDTH = 16
MAZE_HEIGHT = 8
CELL_SIZE = 8
MAX_GHOSTS = 2
TOTAL_DOTS = 66

WALL, DOT, EMPTY, PACMAN_START, GHOST_START = range(5)

MAZE_LAYOUT = tuple(
    tuple(int(ch) for ch in row)
    for row in (
        "0000000000000000",
        "0111111111111110",
        "0101001001001010",
        "0111111111111110",
        "0111411311111110",
        "0101001001001010",
        "0111111111111110",
        "0000000000000000",
    )
)

# 0=right, 1=down, 2=left, 3=up
_STEPS = {0: (1, 0), 1: (0, 1), 2: (-1, 0), 3: (0, -1)}

_MOUTHS = {
    0: ((2, -1), (2, 1)),
    1: ((-1, 2), (1, 2)),
    2: ((-2, -1), (-2, 1)),
    3: ((-1, -2), (1, -2)),
}


def _step(x, y, direction):
    dx, dy = _STEPS[direction]
    return x + dx, y + dy


@dataclass
class PacMan:
    x: int = 0
    y: int = 0
    direction: int = 0
    next_direction: int = 0


@dataclass
class Ghost:
    x: int = 0
    y: int = 0
    direction: int = 0
    active: bool = False
    last_move: int = 0


class PacManGame:
    name = "PAC-MAN"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self._generate_maze()
        self.pacman = PacMan()
        for y, row in enumerate(MAZE_LAYOUT):
            for x, cell in enumerate(row):
                if cell == PACMAN_START:
                    self.pacman = PacMan(x, y)
                    self.maze[y][x] = EMPTY
                elif cell == GHOST_START:
                    ghost = next((g for g in self.ghosts if not g.active), None)
                    if ghost is not None:
                        ghost.x, ghost.y = x, y
                        ghost.direction = self.rng.randrange(0, 4)
                        ghost.active = True
                        ghost.last_move = 0
                        self.maze[y][x] = EMPTY
        self.score = 0
        self.dots_eaten = 0
        self.game_over = False
        self.game_won = False
        self.last_move = 0
        self.last_ghost_move = 0
        self.move_delay = 300

    def update(self):
        self.handle_input()
        now = self.clock()
        if now - self.last_move > self.move_delay:
            self._update_pacman()
            self.last_move = now
        if now - self.last_ghost_move > self.move_delay + 100:
            self._update_ghosts()
            self.last_ghost_move = now
        if self._check_ghost_collision():
            self.game_over = True
        if self.dots_eaten >= TOTAL_DOTS:
            self.game_won = True
            self.game_over = True

    def draw(self):
        d = self.display
        d.clear()
        self._draw_maze()
        self._draw_ghosts()
        self._draw_pacman()
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(0, SCREEN_HEIGHT - 8)
        d.write(f"Score: {self.score}")
        d.set_cursor(70, SCREEN_HEIGHT - 8)
        d.write(f"Dots: {TOTAL_DOTS - self.dots_eaten}")
        return d.render()

    def handle_input(self):
        b = self.buttons
        if b.up_pressed:
            self.pacman.next_direction = 3
        elif b.down_pressed:
            self.pacman.next_direction = 1
        elif b.left_pressed:
            self.pacman.next_direction = 2
        elif b.right_pressed:
            self.pacman.next_direction = 0

    def is_valid_move(self, x, y):
        if not (0 <= x < MAZE_WIDTH and 0 <= y < MAZE_HEIGHT):
            return False
        return self.maze[y][x] != WALL

    def _generate_maze(self):
        self.dots_eaten = 0
        self.maze = [
            [EMPTY if cell == GHOST_START else cell for cell in row]
            for row in MAZE_LAYOUT
        ]
        self.ghosts = [Ghost() for _ in range(MAX_GHOSTS)]

    def _update_pacman(self):
        p = self.pacman
        if self.is_valid_move(*_step(p.x, p.y, p.next_direction)):
            p.direction = p.next_direction
        nx, ny = _step(p.x, p.y, p.direction)
        if self.is_valid_move(nx, ny):
            p.x, p.y = nx, ny
            if self.maze[ny][nx] == DOT:
                self.maze[ny][nx] = EMPTY
                self.score += 10
                self.dots_eaten += 1

    def _update_ghosts(self):
        p = self.pacman
        for ghost in self.ghosts:
            if not ghost.active:
                continue
            if self.rng.randrange(0, 4) == 0:
                best = self.rng.randrange(0, 4)
            else:
                dx, dy = p.x - ghost.x, p.y - ghost.y
                if abs(dx) > abs(dy):
                    best = 0 if dx > 0 else 2
                else:
                    best = 1 if dy > 0 else 3
            for direction in (best, 0, 1, 2, 3):
                nx, ny = _step(ghost.x, ghost.y, direction)
                if self.is_valid_move(nx, ny):
                    ghost.x, ghost.y = nx, ny
                    ghost.direction = direction
                    break

    def _check_ghost_collision(self):
        p = self.pacman
        return any(g.active and g.x == p.x and g.y == p.y for g in self.ghosts)

    def _draw_maze(self):
        d = self.display
        for y, row in enumerate(self.maze):
            for x, cell in enumerate(row):
                sx, sy = x * CELL_SIZE, y * CELL_SIZE
                if cell == WALL:
                    d.fill_rect(sx, sy, CELL_SIZE, CELL_SIZE, Color.WHITE)
                elif cell == DOT:
                    d.fill_circle(sx + CELL_SIZE // 2, sy + CELL_SIZE // 2, 1, Color.WHITE)

    def _draw_pacman(self):
        d = self.display
        p = self.pacman
        sx = p.x * CELL_SIZE + CELL_SIZE // 2
        sy = p.y * CELL_SIZE + CELL_SIZE // 2
        d.fill_circle(sx, sy, 3, Color.WHITE)
        for mx, my in _MOUTHS.get(p.direction, ()):
            d.draw_line(sx, sy, sx + mx, sy + my, Color.BLACK)

    def _draw_ghosts(self):
        d = self.display
        for ghost in self.ghosts:
            if not ghost.active:
                continue
            sx = ghost.x * CELL_SIZE + CELL_SIZE // 2
            sy = ghost.y * CELL_SIZE + CELL_SIZE // 2
            d.fill_circle(sx, sy - 1, 3, Color.WHITE)
            d.fill_rect(sx - 3, sy, 6, 3, Color.WHITE)
            d.draw_pixel(sx - 2, sy + 3, Color.WHITE)
            d.draw_pixel(sx, sy + 2, Color.WHITE)
            d.draw_pixel(sx + 2, sy + 3, Color.WHITE)
            d.draw_pixel(sx - 1, sy - 2, Color.BLACK)
            d.draw_pixel(sx + 1, sy - 2, Color.BLACK)