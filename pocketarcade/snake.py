"""Snake on a 32x16 grid."""

from __future__ import annotations

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color

GRID_SIZE = 4
GRID_WIDTH = SCREEN_WIDTH // GRID_SIZE
GRID_HEIGHT = SCREEN_HEIGHT // GRID_SIZE

# 0=right, 1=down, 2=left, 3=up
_STEPS = {0: (1, 0), 1: (0, 1), 2: (-1, 0), 3: (0, -1)}


class SnakeGame:
    name = "SNAKE"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        cx, cy = GRID_WIDTH // 2, GRID_HEIGHT // 2
        self.snake = [(cx, cy), (cx - 1, cy), (cx - 2, cy)]
        self._last_tail = self.snake[-1]
        self.direction = 0
        self.next_direction = 0
        self.direction_changed = False
        self.score = 0
        self.game_speed = 300
        self.game_over = False
        self.last_move_time = 0
        self._generate_food()

    def update(self):
        self.handle_input()
        if self.clock() - self.last_move_time > self.game_speed:
            self.direction = self.next_direction
            self.direction_changed = False
            self._move_snake()
            if self._check_collisions():
                self.game_over = True
            self.last_move_time = self.clock()

    def draw(self):
        d = self.display
        d.clear()
        for i, (x, y) in enumerate(self.snake):
            draw = d.fill_rect if i == 0 else d.draw_rect
            draw(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE, Color.WHITE)
        fx, fy = self.food
        d.fill_circle(
            fx * GRID_SIZE + GRID_SIZE // 2,
            fy * GRID_SIZE + GRID_SIZE // 2,
            GRID_SIZE // 2 - 1,
            Color.WHITE,
        )
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        if fy <= 1 and fx <= 10:
            d.set_cursor(SCREEN_WIDTH - 60, 0)
        else:
            d.set_cursor(0, 0)
        d.write(f"Score: {self.score}")
        return d.render()

    def handle_input(self):
        if self.direction_changed:
            return
        b = self.buttons
        current = self.next_direction
        for pressed, new, opposite in (
            (b.up_pressed, 3, 1),
            (b.down_pressed, 1, 3),
            (b.left_pressed, 2, 0),
            (b.right_pressed, 0, 2),
        ):
            if pressed:
                if current != opposite:
                    self.next_direction = new
                    self.direction_changed = True
                    return
                if new in (3, 1) and b.up_pressed and new == 3:
                    continue

    def _generate_food(self):
        while True:
            food = (self.rng.randrange(0, GRID_WIDTH), self.rng.randrange(0, GRID_HEIGHT))
            if food not in self.snake:
                self.food = food
                return

    def _move_snake(self):
        dx, dy = _STEPS[self.direction]
        hx, hy = self.snake[0]
        self.snake.insert(0, (hx + dx, hy + dy))
        self._last_tail = self.snake.pop()

    def _check_collisions(self):
        head = self.snake[0]
        x, y = head
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            return True
        if head in self.snake[1:]:
            return True
        if head == self.food:
            self.score += 1
            self.snake.append(self._last_tail)
            if self.game_speed > 100:
                self.game_speed -= 10
            self._generate_food()
        return False