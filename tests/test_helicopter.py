import random

import pytest

from pocketarcade.config import SCREEN_HEIGHT, SCREEN_WIDTH
from pocketarcade.display import Color, Display
from pocketarcade.helicopter import (
    CAVE_SEGMENTS,
    HELI_SIZE,
    HELI_X,
    MAX_GAP,
    MIN_GAP,
    MIN_TOP,
    HelicopterGame,
)
from pocketarcade.input import ButtonState


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def setup():
    clock = FakeClock()
    buttons = ButtonState()
    game = HelicopterGame(Display(SCREEN_WIDTH, SCREEN_HEIGHT), buttons, clock,
                          random.Random(7))
    return game, buttons, clock


def tick(game, clock):
    clock.now += 31
    game.update()


def check_cave(cave):
    assert len(cave) == CAVE_SEGMENTS
    for seg in cave:
        assert MIN_GAP <= seg.gap_height <= MAX_GAP
        assert MIN_TOP <= seg.top_height <= SCREEN_HEIGHT - seg.gap_height - 5
        assert seg.top_height + seg.gap_height + seg.bottom_height == SCREEN_HEIGHT


def test_initial_state(setup):
    game, _, _ = setup
    assert game.heli.y == SCREEN_HEIGHT // 2
    assert game.score == 0
    assert game.game_over is False
    check_cave(game.cave)


def test_no_tick_before_interval(setup):
    game, _, clock = setup
    clock.now = 30
    game.update()
    assert game.score == 0
    assert game.heli.y == SCREEN_HEIGHT // 2


def test_gravity_pulls_down(setup):
    game, _, clock = setup
    tick(game, clock)
    assert game.score == 1
    assert game.heli.velocity == pytest.approx(game.gravity)
    assert game.heli.y > SCREEN_HEIGHT // 2


def test_holding_up_lifts(setup):
    game, buttons, clock = setup
    buttons.update(True, False, False, False)
    tick(game, clock)
    assert game.heli.y < SCREEN_HEIGHT // 2
    assert game.heli.velocity < 0


def test_cave_scrolls_and_stays_valid(setup):
    game, _, clock = setup
    second = game.cave[1]
    for _ in range(4):
        tick(game, clock)
    assert game.cave[0] == second
    assert game.cave_offset == 0
    for _ in range(200):
        tick(game, clock)
    check_cave(game.cave)


def test_hitting_top_wall_ends_game(setup):
    game, _, clock = setup
    game.heli.y = 0.0
    game.heli.velocity = 0.0
    tick(game, clock)
    assert game.game_over is True


def test_clamped_at_bottom(setup):
    game, _, clock = setup
    game.heli.y = 100.0
    tick(game, clock)
    assert game.heli.y == SCREEN_HEIGHT - HELI_SIZE
    assert game.heli.velocity == 0.0


def test_speed_increases_every_500(setup):
    game, _, clock = setup
    start = game.game_speed
    game.score = 499
    tick(game, clock)
    assert game.score == 500
    assert game.game_speed > start


def test_draw_shows_helicopter_and_score(setup):
    game, _, _ = setup
    game.score = 57
    frame = game.draw()
    y = int(game.heli.y)
    assert game.display.get_pixel(HELI_X, y) == Color.WHITE
    assert frame.splitlines()[y][HELI_X] == "#"
    assert [t.text for t in game.display.texts] == [str(57 // 10)]