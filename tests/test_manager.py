import random

import pytest

from pocketarcade.breakout import BreakoutGame
from pocketarcade.config import MAX_GAMES, SCREEN_HEIGHT, SCREEN_WIDTH, GameID, GameState
from pocketarcade.display import Display
from pocketarcade.game2048 import Game2048
from pocketarcade.highscore import HighscoreManager
from pocketarcade.input import ButtonState
from pocketarcade.manager import GAME_NAMES, VISIBLE_MENU_ITEMS, GameManager
from pocketarcade.snake import SnakeGame


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def highscores(tmp_path):
    return HighscoreManager(tmp_path / "scores.bin")


@pytest.fixture
def manager(highscores):
    return GameManager(Display(SCREEN_WIDTH, SCREEN_HEIGHT), ButtonState(),
                       highscores, FakeClock(), random.Random(3))


def press(manager, up=False, down=False, left=False, right=False):
    manager.buttons.update(up, down, left, right)
    manager.update()
    manager.buttons.update(False, False, False, False)


def texts(manager):
    return [t.text for t in manager.display.texts]


def test_starts_in_menu(manager):
    assert manager.state is GameState.MENU
    assert manager.menu_selection == 0
    shown = texts(manager)
    assert "GAMES" in shown
    assert GAME_NAMES[:VISIBLE_MENU_ITEMS] == tuple(
        t for t in shown if t in GAME_NAMES)
    assert "v" in shown and "^" not in shown


def test_menu_down_scrolls(manager):
    for _ in range(VISIBLE_MENU_ITEMS):
        press(manager, down=True)
    assert manager.menu_selection == VISIBLE_MENU_ITEMS
    assert manager.menu_scroll == 1
    assert "^" in texts(manager)


def test_menu_up_wraps_to_last(manager):
    press(manager, up=True)
    assert manager.menu_selection == MAX_GAMES - 1
    assert manager.menu_scroll == MAX_GAMES - VISIBLE_MENU_ITEMS
    assert "PAC-MAN" in texts(manager)


def test_menu_down_wraps_to_first(manager):
    for _ in range(MAX_GAMES):
        press(manager, down=True)
    assert manager.menu_selection == 0
    assert manager.menu_scroll == 0


def test_right_starts_selected_game(manager):
    press(manager, down=True)
    press(manager, right=True)
    assert manager.state is GameState.PLAYING
    assert manager.current_game == GameID.TETRIS


def test_highscore_shown_in_menu(highscores):
    highscores.save_highscore(0, 42)
    mgr = GameManager(Display(SCREEN_WIDTH, SCREEN_HEIGHT), ButtonState(),
                      highscores, FakeClock(), random.Random(3))
    assert "42" in texts(mgr)


def test_game_over_saves_highscore(manager, highscores):
    manager.set_game(GameID.SNAKE)
    assert isinstance(manager.game, SnakeGame)
    manager.game.score = 5
    manager.game.game_over = True
    manager.update()
    assert manager.state is GameState.GAME_OVER
    assert manager.new_highscore is True
    assert highscores.highscore(GameID.SNAKE) == 5
    shown = texts(manager)
    assert "GAME OVER" in shown
    assert "Score: 5" in shown
    assert "NEW HIGHSCORE!" in shown


def test_lower_score_is_not_new_highscore(manager, highscores):
    highscores.save_highscore(GameID.SNAKE, 10)
    manager.set_game(GameID.SNAKE)
    manager.game.score = 3
    manager.game.game_over = True
    manager.update()
    assert manager.new_highscore is False
    assert highscores.highscore(GameID.SNAKE) == 10
    assert "NEW HIGHSCORE!" not in texts(manager)


def test_breakout_win_leads_to_won_screen(manager):
    manager.set_game(GameID.BREAKOUT)
    assert isinstance(manager.game, BreakoutGame)
    manager.game.game_over = True
    manager.game.game_won = True
    manager.update()
    assert manager.state is GameState.GAME_WON
    assert "YOU WON!" in texts(manager)
    assert "RIGHT: Play Again" in texts(manager)


def test_2048_win_leads_to_won_screen(manager):
    manager.set_game(GameID.GAME_2048)
    assert isinstance(manager.game, Game2048)
    manager.game.has_won = True
    manager.game.game_over = True
    manager.update()
    assert manager.state is GameState.GAME_WON


def test_game_over_up_returns_to_menu(manager):
    manager.set_game(GameID.SNAKE)
    manager.game.game_over = True
    manager.update()
    press(manager, up=True)
    assert manager.state is GameState.MENU
    assert manager.menu_selection == GameID.SNAKE


def test_game_over_right_restarts(manager):
    manager.set_game(GameID.SNAKE)
    old = manager.game
    old.score = 7
    old.game_over = True
    manager.update()
    press(manager, right=True)
    assert manager.state is GameState.PLAYING
    assert manager.game is not old
    assert manager.game.score == 0
    assert manager.game.game_over is False


def test_unknown_game_rejected(manager):
    with pytest.raises(ValueError):
        manager.set_game(MAX_GAMES)
    assert manager.state is GameState.MENU