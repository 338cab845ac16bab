"""Helicopter: keep a falling craft inside a scrolling cave."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color

HELI_SIZE = 4
CAVE_SEGMENTS = 32
HELI_X = 15
SEGMENT_WIDTH = 4
TICK_INTERVAL = 30

MIN_GAP = 18
MAX_GAP = 35
MIN_TOP = 5
WALL_MARGIN = 5
MAX_GAME_SPEED = 3.0


def _constrain(value, low, high):
    return max(low, min(high, value))


@dataclass
class Helicopter:
    y: float
    velocity: float = 0.0


@dataclass(frozen=True)
class CaveSegment:
    top_height: int
    bottom_height: int
    gap_height: int


class HelicopterGame:
    name = "HELICOPTER"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self.heli = Helicopter(float(SCREEN_HEIGHT // 2))
        self.score = 0
        self.game_over = False
        self.last_update = self.clock()
        self.game_speed = 1.5
        self.gravity = 0.15
        self.lift = -1.0
        self.cave_offset = 0
        self._generate_cave()

    def update(self):
        self.handle_input()
        now = self.clock()
        if now - self.last_update > TICK_INTERVAL:
            self._update_helicopter()
            self._update_cave()
            if self._check_collisions():
                self.game_over = True
            self.score += 1
            if self.score % 500 == 0 and self.game_speed < MAX_GAME_SPEED:
                self.game_speed += 0.2
            self.last_update = now

    def draw(self):
        d = self.display
        d.clear()
        self._draw_cave()
        self._draw_helicopter()
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(SCREEN_WIDTH - 30, 0)
        d.write(str(self.score // 10))
        return d.render()

    def handle_input(self):
        if self.buttons.up or self.buttons.right:
            self.heli.velocity = self.lift

    def _next_segment(self, prev_gap, prev_top):
        gap = _constrain(prev_gap + self.rng.randrange(-3, 4), MIN_GAP, MAX_GAP)
        top = _constrain(prev_top + self.rng.randrange(-2, 3), MIN_TOP,
                         SCREEN_HEIGHT - gap - WALL_MARGIN)
        return CaveSegment(top, SCREEN_HEIGHT - top - gap, gap)

    def _generate_cave(self):
        gap, top = 25, 15
        self.cave = []
        for _ in range(CAVE_SEGMENTS):
            segment = self._next_segment(gap, top)
            self.cave.append(segment)
            gap, top = segment.gap_height, segment.top_height

    def _update_helicopter(self):
        heli = self.heli
        heli.velocity += self.gravity
        heli.y += heli.velocity
        if heli.y < 0:
            heli.y = 0.0
            heli.velocity = 0.0
        if heli.y > SCREEN_HEIGHT - HELI_SIZE:
            heli.y = float(SCREEN_HEIGHT - HELI_SIZE)
            heli.velocity = 0.0

    def _update_cave(self):
        self.cave_offset = int(self.cave_offset + self.game_speed)
        if self.cave_offset >= SEGMENT_WIDTH:
            self.cave_offset = 0
            last = self.cave[-1]
            self.cave = self.cave[1:] + [
                self._next_segment(last.gap_height, last.top_height)
            ]

    def _check_collisions(self):
        index = min(HELI_X // SEGMENT_WIDTH, CAVE_SEGMENTS - 1)
        segment = self.cave[index]
        if self.heli.y < segment.top_height:
            return True
        return self.heli.y + HELI_SIZE > segment.top_height + segment.gap_height

    def _draw_helicopter(self):
        d = self.display
        y = int(self.heli.y)
        d.fill_rect(HELI_X, y, HELI_SIZE, HELI_SIZE, Color.WHITE)
        d.draw_line(HELI_X - 1, y - 1, HELI_X + HELI_SIZE + 1, y - 1, Color.WHITE)
        d.draw_pixel(HELI_X + HELI_SIZE, y + 2, Color.WHITE)

    def _draw_cave(self):
        d = self.display
        for i, segment in enumerate(self.cave):
            x = i * SEGMENT_WIDTH - self.cave_offset
            if -SEGMENT_WIDTH <= x < SCREEN_WIDTH:
                d.fill_rect(x, 0, SEGMENT_WIDTH, segment.top_height, Color.WHITE)
                bottom_y = segment.top_height + segment.gap_height
                d.fill_rect(x, bottom_y, SEGMENT_WIDTH, segment.bottom_height,
                            Color.WHITE)