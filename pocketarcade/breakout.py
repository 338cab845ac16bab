"""Breakout: bounce a ball off a paddle to clear a wall of bricks."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color, draw_centered_text

PADDLE_WIDTH = 16
PADDLE_HEIGHT = 3
PADDLE_Y = SCREEN_HEIGHT - 8
BALL_SIZE = 2
BRICK_WIDTH = 12
BRICK_HEIGHT = 4
BRICK_ROWS = 5
BRICK_COLS = 10
BRICK_OFFSET_Y = 10
MAX_BALL_SPEED_X = 2.5

_BRICK_MARGIN_X = (SCREEN_WIDTH - BRICK_COLS * BRICK_WIDTH) // 2


def _brick_origin(row, col):
    return (col * BRICK_WIDTH + _BRICK_MARGIN_X,
            BRICK_OFFSET_Y + row * (BRICK_HEIGHT + 1))


def _constrain(value, low, high):
    return max(low, min(high, value))


@dataclass
class Ball:
    x: float = 0.0
    y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0


class BreakoutGame:
    name = "BREAKOUT"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self.paddle_x = (SCREEN_WIDTH - PADDLE_WIDTH) // 2
        self.bricks = [[True] * BRICK_COLS for _ in range(BRICK_ROWS)]
        self.score = 0
        self.lives = 3
        self.game_over = False
        self.game_won = False
        self.last_update = self.clock()
        self.ball = Ball()
        self._reset_ball()

    def update(self):
        self.last_update = self.clock()
        if self.game_over or self.game_won:
            return
        self.handle_input()
        self._update_ball()
        if self.remaining_bricks() == 0:
            self.game_won = True
            self.game_over = True
        if self.lives <= 0:
            self.game_over = True

    def draw(self):
        d = self.display
        d.clear()
        for row, bricks in enumerate(self.bricks):
            for col, present in enumerate(bricks):
                if present:
                    x, y = _brick_origin(row, col)
                    d.fill_rect(x, y, BRICK_WIDTH - 1, BRICK_HEIGHT, Color.WHITE)
        d.fill_rect(self.paddle_x, PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT, Color.WHITE)
        d.fill_rect(int(self.ball.x), int(self.ball.y), BALL_SIZE, BALL_SIZE, Color.WHITE)
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(0, 0)
        d.write(f"Score:{self.score}")
        d.set_cursor(SCREEN_WIDTH - 45, 0)
        d.write(f"Lives:{self.lives}")
        if self.game_won:
            draw_centered_text(d, "YOU WIN!", 30, 1)
        return d.render()

    def handle_input(self):
        if self.buttons.left and self.paddle_x > 0:
            self.paddle_x -= 2
        if self.buttons.right and self.paddle_x < SCREEN_WIDTH - PADDLE_WIDTH:
            self.paddle_x += 2

    def remaining_bricks(self):
        return sum(sum(row) for row in self.bricks)

    def _reset_ball(self):
        angle = math.radians(self.rng.randrange(-45, 46))
        self.ball = Ball(
            x=float(SCREEN_WIDTH // 2),
            y=float(PADDLE_Y - 10),
            vel_x=math.sin(angle) * 2.0,
            vel_y=-abs(math.cos(angle)) * 2.0,
        )

    def _update_ball(self):
        ball = self.ball
        ball.x += ball.vel_x
        ball.y += ball.vel_y

        if ball.x <= 0 or ball.x >= SCREEN_WIDTH - BALL_SIZE:
            ball.vel_x = -ball.vel_x
            ball.x = _constrain(ball.x, 0, SCREEN_WIDTH - BALL_SIZE)

        if ball.y <= 0:
            ball.vel_y = -ball.vel_y
            ball.y = 0

        if ball.y >= SCREEN_HEIGHT:
            self.lives -= 1
            if self.lives > 0:
                self._reset_ball()
            return

        if self._hits_paddle():
            ball.vel_y = -abs(ball.vel_y)
            hit_pos = (ball.x + BALL_SIZE // 2 - self.paddle_x) / PADDLE_WIDTH
            ball.vel_x = _constrain((hit_pos - 0.5) * 3.0,
                                    -MAX_BALL_SPEED_X, MAX_BALL_SPEED_X)

        self._hit_brick()

    def _hits_paddle(self):
        ball = self.ball
        return (ball.x + BALL_SIZE >= self.paddle_x
                and ball.x <= self.paddle_x + PADDLE_WIDTH
                and ball.y + BALL_SIZE >= PADDLE_Y
                and ball.y <= PADDLE_Y + PADDLE_HEIGHT
                and ball.vel_y > 0)

    def _hit_brick(self):
        """Break the first brick the ball touches and bounce off it."""
        ball = self.ball
        for row, bricks in enumerate(self.bricks):
            for col, present in enumerate(bricks):
                if not present:
                    continue
                brick_x, brick_y = _brick_origin(row, col)
                if (ball.x + BALL_SIZE >= brick_x
                        and ball.x <= brick_x + BRICK_WIDTH
                        and ball.y + BALL_SIZE >= brick_y
                        and ball.y <= brick_y + BRICK_HEIGHT):
                    bricks[col] = False
                    self.score += (BRICK_ROWS - row) * 10
                    delta_x = ball.x + BALL_SIZE // 2 - (brick_x + BRICK_WIDTH // 2)
                    delta_y = ball.y + BALL_SIZE // 2 - (brick_y + BRICK_HEIGHT // 2)
                    if abs(delta_x) > abs(delta_y):
                        ball.vel_x = -ball.vel_x
                    else:
                        ball.vel_y = -ball.vel_y
                    return True
        return False