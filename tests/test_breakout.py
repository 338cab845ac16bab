import math

import pytest

from pocketarcade.breakout import (
    BALL_SIZE,
    BRICK_COLS,
    BRICK_ROWS,
    PADDLE_WIDTH,
    PADDLE_Y,
    Ball,
    BreakoutGame,
)
from pocketarcade.config import SCREEN_HEIGHT, SCREEN_WIDTH
from pocketarcade.display import Color, Display
from pocketarcade.input import ButtonState


class FakeRng:
    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, start, stop):
        value = self.values.pop(0) if self.values else 0
        assert start <= value < stop
        return value


def make_game(*rng_values):
    return BreakoutGame(
        Display(SCREEN_WIDTH, SCREEN_HEIGHT), ButtonState(), lambda: 0, FakeRng(*rng_values)
    )


def test_init_state():
    game = make_game()
    assert game.remaining_bricks() == BRICK_ROWS * BRICK_COLS
    assert game.lives == 3
    assert game.score == 0
    assert game.paddle_x * 2 + PADDLE_WIDTH == SCREEN_WIDTH
    assert game.ball.vel_y < 0


def test_reset_ball_straight_up():
    game = make_game(0)
    assert game.ball.vel_x == pytest.approx(0.0)
    assert game.ball.vel_y == pytest.approx(-2.0)
    assert game.ball.y == PADDLE_Y - 10


def test_reset_ball_angled_keeps_speed():
    game = make_game(45)
    assert math.hypot(game.ball.vel_x, game.ball.vel_y) == pytest.approx(2.0)
    assert game.ball.vel_x > 0
    assert game.ball.vel_y < 0


def test_paddle_moves_left_and_stops_at_edge():
    game = make_game()
    start = game.paddle_x
    game.buttons.update(False, False, True, False)
    game.handle_input()
    assert game.paddle_x == start - 2
    for _ in range(SCREEN_WIDTH):
        game.handle_input()
    assert game.paddle_x == 0


def test_paddle_stops_at_right_edge():
    game = make_game()
    game.buttons.update(False, False, False, True)
    for _ in range(SCREEN_WIDTH):
        game.handle_input()
    assert game.paddle_x == SCREEN_WIDTH - PADDLE_WIDTH


def test_side_wall_bounce():
    game = make_game()
    game.ball = Ball(x=SCREEN_WIDTH - BALL_SIZE - 0.5, y=40.0, vel_x=1.0, vel_y=-0.5)
    game.update()
    assert game.ball.vel_x < 0
    assert game.ball.x <= SCREEN_WIDTH - BALL_SIZE


def test_top_wall_bounce():
    game = make_game()
    game.ball = Ball(x=60.0, y=0.5, vel_x=0.0, vel_y=-1.0)
    game.update()
    assert game.ball.y == 0
    assert game.ball.vel_y > 0


def test_ball_past_bottom_costs_life_and_resets():
    game = make_game()
    game.ball = Ball(x=60.0, y=SCREEN_HEIGHT - 1.0, vel_x=0.0, vel_y=2.0)
    game.update()
    assert game.lives == 2
    assert game.ball.y == PADDLE_Y - 10
    assert not game.game_over


def test_last_life_lost_ends_game():
    game = make_game()
    game.lives = 1
    game.ball = Ball(x=60.0, y=SCREEN_HEIGHT - 1.0, vel_x=0.0, vel_y=2.0)
    game.update()
    assert game.lives == 0
    assert game.game_over is True
    assert game.game_won is False


def test_brick_hit_removes_brick_and_scores():
    game = make_game()
    game.ball = Ball(x=8.0, y=15.0, vel_x=0.0, vel_y=-1.0)
    game.update()
    assert game.bricks[0][0] is False
    assert game.remaining_bricks() == BRICK_ROWS * BRICK_COLS - 1
    assert game.score == 50
    assert game.ball.vel_y > 0


def test_paddle_bounce_sends_ball_up():
    game = make_game()
    game.ball = Ball(x=game.paddle_x + PADDLE_WIDTH - 1.0, y=PADDLE_Y - 2.5,
                     vel_x=0.0, vel_y=1.0)
    game.update()
    assert game.ball.vel_y < 0
    assert 0 < game.ball.vel_x <= 2.5


def test_clearing_all_bricks_wins():
    game = make_game()
    game.bricks = [[False] * BRICK_COLS for _ in range(BRICK_ROWS)]
    game.update()
    assert game.game_won is True
    assert game.game_over is True
    game.draw()
    assert "YOU WIN!" in [t.text for t in game.display.texts]


def test_update_after_game_over_changes_nothing():
    game = make_game()
    game.game_over = True
    before = Ball(game.ball.x, game.ball.y, game.ball.vel_x, game.ball.vel_y)
    game.update()
    assert game.ball == before


def test_draw_shows_paddle_and_ui():
    game = make_game()
    frame = game.draw()
    assert len(frame.split("\n")) == SCREEN_HEIGHT
    assert game.display.get_pixel(game.paddle_x, PADDLE_Y) == Color.WHITE
    texts = [t.text for t in game.display.texts]
    assert any(t.startswith("Lives:") for t in texts)
    assert any(t.startswith("Score:") for t in texts)