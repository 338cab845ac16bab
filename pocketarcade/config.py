"""Screen geometry, game identifiers and manager states."""

from enum import Enum, IntEnum

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

MAX_GAMES = 8
BUTTON_DELAY = 150


class GameID(IntEnum):
    SNAKE = 0
    TETRIS = 1
    FLAPPY = 2
    GAME_2048 = 3
    BREAKOUT = 4
    FROGGER = 5
    HELICOPTER = 6
    PACMAN = 7


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    GAME_WON = "game_won"