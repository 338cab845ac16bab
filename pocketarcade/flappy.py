"""Flappy bird: flap between scrolling pipes."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color

BIRD_SIZE = 3
PIPE_WIDTH = 8
PIPE_GAP = 20
MAX_PIPES = 3
GROUND_Y = SCREEN_HEIGHT - 5


@dataclass
class Bird:
    x: float
    y: float
    velocity: float = 0.0


@dataclass
class Pipe:
    x: int = -1
    gap_y: int = 0
    passed: bool = False

    @property
    def active(self):
        return self.x >= 0


class FlappyGame:
    name = "FLAPPY BIRD"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self.bird = Bird(20.0, float(SCREEN_HEIGHT // 2))
        self.pipes = [Pipe() for _ in range(MAX_PIPES)]
        self.score = 0
        self.game_over = False
        now = self.clock()
        self.last_update = now
        self.last_pipe_spawn = now
        self.pipe_spawn_interval = 2000
        self.gravity = 0.25
        self.jump_strength = -2.5
        self.game_speed = 1.3
        self._spawn_pipe()

    def update(self):
        if self.game_over:
            return
        now = self.clock()
        self.last_update = now
        self.handle_input()
        self._update_bird()
        self._update_pipes()
        if self._check_collisions():
            self.game_over = True
        if now - self.last_pipe_spawn > self.pipe_spawn_interval:
            self._spawn_pipe()
            self.last_pipe_spawn = now

    def draw(self):
        d = self.display
        d.clear()
        self._draw_ground()
        self._draw_pipes()
        bx, by = int(self.bird.x), int(self.bird.y)
        d.fill_circle(int(self.bird.x + BIRD_SIZE // 2), int(self.bird.y + BIRD_SIZE // 2),
                      BIRD_SIZE // 2, Color.WHITE)
        d.draw_pixel(bx + 1, by + 1, Color.BLACK)
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(SCREEN_WIDTH - 30, 5)
        d.write(str(self.score))
        return d.render()

    def handle_input(self):
        if self.buttons.up_pressed or self.buttons.right_pressed:
            self.bird.velocity = self.jump_strength

    def _spawn_pipe(self):
        for pipe in self.pipes:
            if not pipe.active:
                pipe.x = SCREEN_WIDTH
                pipe.gap_y = self.rng.randrange(15, SCREEN_HEIGHT - PIPE_GAP - 10)
                pipe.passed = False
                return

    def _update_bird(self):
        self.bird.velocity += self.gravity
        self.bird.y += self.bird.velocity
        if self.bird.y < 0:
            self.bird.y = 0.0
            self.bird.velocity = 0.0

    def _update_pipes(self):
        for pipe in self.pipes:
            if not pipe.active:
                continue
            pipe.x = int(pipe.x - self.game_speed)
            if not pipe.passed and pipe.x + PIPE_WIDTH < self.bird.x:
                pipe.passed = True
                self.score += 1
                if self.game_speed < 3.0:
                    self.game_speed += 0.1
            if pipe.x < -PIPE_WIDTH:
                pipe.x = -1

    def _check_collisions(self):
        bird = self.bird
        if bird.y >= GROUND_Y:
            return True
        for pipe in self.pipes:
            if not pipe.active:
                continue
            if bird.x + BIRD_SIZE > pipe.x and bird.x < pipe.x + PIPE_WIDTH:
                if bird.y < pipe.gap_y or bird.y + BIRD_SIZE > pipe.gap_y + PIPE_GAP:
                    return True
        return False

    def _draw_pipes(self):
        d = self.display
        for p in self.pipes:
            if not p.active:
                continue
            d.fill_rect(p.x, 0, PIPE_WIDTH, p.gap_y, Color.WHITE)
            d.fill_rect(p.x, p.gap_y + PIPE_GAP, PIPE_WIDTH,
                        SCREEN_HEIGHT - p.gap_y - PIPE_GAP - 5, Color.WHITE)
            d.fill_rect(p.x - 1, p.gap_y - 3, PIPE_WIDTH + 2, 3, Color.WHITE)
            d.fill_rect(p.x - 1, p.gap_y + PIPE_GAP, PIPE_WIDTH + 2, 3, Color.WHITE)

    def _draw_ground(self):
        d = self.display
        d.draw_line(0, GROUND_Y, SCREEN_WIDTH, GROUND_Y, Color.WHITE)
        for x in range(0, SCREEN_WIDTH, 4):
            d.draw_pixel(x, SCREEN_HEIGHT - 4, Color.WHITE)
            d.draw_pixel(x + 2, SCREEN_HEIGHT - 3, Color.WHITE)