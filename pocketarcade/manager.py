"""Menu, game switching and result screens."""

from __future__ import annotations

from .breakout import BreakoutGame
from .config import MAX_GAMES, SCREEN_WIDTH, GameID, GameState
from .display import Color, draw_centered_text
from .flappy import FlappyGame
from .frogger import FroggerGame
from .game2048 import Game2048
from .helicopter import HelicopterGame
from .pacman import PacManGame
from .snake import SnakeGame
from .tetris import TetrisGame

VISIBLE_MENU_ITEMS = 3

GAME_NAMES = ("SNAKE", "TETRIS", "FLAPPY BIRD", "2048", "BREAKOUT",
              "FROGGER", "HELICOPTER", "PAC-MAN")

GAME_CLASSES = {
    GameID.SNAKE: SnakeGame,
    GameID.TETRIS: TetrisGame,
    GameID.FLAPPY: FlappyGame,
    GameID.GAME_2048: Game2048,
    GameID.BREAKOUT: BreakoutGame,
    GameID.FROGGER: FroggerGame,
    GameID.HELICOPTER: HelicopterGame,
    GameID.PACMAN: PacManGame,
}


def _has_won(game):
    if isinstance(game, Game2048):
        return game.has_won
    if isinstance(game, (BreakoutGame, PacManGame)):
        return game.game_won
    return False


class GameManager:
    """Drives the menu and the currently selected game."""

    def __init__(self, display, buttons, highscores, clock, rng):
        self.display = display
        self.buttons = buttons
        self.highscores = highscores
        self.clock = clock
        self.rng = rng
        self.game = None
        self.init()

    def init(self):
        self.state = GameState.MENU
        self.current_game = GameID.SNAKE
        self.menu_selection = 0
        self.menu_scroll = 0
        self.new_highscore = False
        self.show_menu()

    def update(self):
        if self.state is GameState.MENU:
            self.handle_menu_input()
        elif self.state is GameState.PLAYING:
            if self.game is None:
                return
            self.game.update()
            self.game.draw()
            if self.game.game_over:
                self.set_state(GameState.GAME_WON if _has_won(self.game)
                               else GameState.GAME_OVER)
        elif self.state is GameState.GAME_OVER:
            self.handle_game_over_input()
        elif self.state is GameState.GAME_WON:
            self.handle_game_won_input()

    def set_state(self, new_state):
        self.state = GameState(new_state)
        if self.state is GameState.MENU:
            self.show_menu()
        elif self.state is GameState.GAME_OVER:
            self.show_game_over()
        elif self.state is GameState.GAME_WON:
            self.show_game_won()

    def set_game(self, game_id):
        """Start a fresh round of the given game."""
        try:
            game_id = GameID(game_id)
        except ValueError:
            raise ValueError(f"unknown game id: {game_id!r}") from None
        self.current_game = game_id
        self.menu_selection = int(game_id)
        self.game = GAME_CLASSES[game_id](self.display, self.buttons,
                                          self.clock, self.rng)
        self.set_state(GameState.PLAYING)

    def show_menu(self):
        d = self.display
        d.clear()
        draw_centered_text(d, "GAMES", 5, 2)
        d.set_text_size(1)
        last = min(self.menu_scroll + VISIBLE_MENU_ITEMS, MAX_GAMES)
        for row, index in enumerate(range(self.menu_scroll, last)):
            y = 25 + row * 12
            if index == self.menu_selection:
                d.fill_rect(5, y - 2, SCREEN_WIDTH - 10, 10, Color.WHITE)
                d.set_text_color(Color.BLACK)
            else:
                d.set_text_color(Color.WHITE)
            d.set_cursor(10, y)
            d.write(GAME_NAMES[index])
            best = self.highscores.highscore(index)
            if best > 0:
                d.set_cursor(SCREEN_WIDTH - 35, y)
                d.write(str(best))
        if self.menu_scroll > 0:
            d.set_cursor(SCREEN_WIDTH - 10, 20)
            d.set_text_color(Color.WHITE)
            d.write("^")
        if self.menu_scroll + VISIBLE_MENU_ITEMS < MAX_GAMES:
            d.set_cursor(SCREEN_WIDTH - 10, 55)
            d.set_text_color(Color.WHITE)
            d.write("v")
        return d.render()

    def handle_menu_input(self):
        b = self.buttons
        if b.up_pressed:
            self.menu_selection = (self.menu_selection - 1) % MAX_GAMES
            if self.menu_selection == MAX_GAMES - 1:
                self.menu_scroll = MAX_GAMES - VISIBLE_MENU_ITEMS
            elif self.menu_selection < self.menu_scroll:
                self.menu_scroll = self.menu_selection
            self.show_menu()
        elif b.down_pressed:
            self.menu_selection = (self.menu_selection + 1) % MAX_GAMES
            if self.menu_selection == 0:
                self.menu_scroll = 0
            elif self.menu_selection >= self.menu_scroll + VISIBLE_MENU_ITEMS:
                self.menu_scroll = self.menu_selection - VISIBLE_MENU_ITEMS + 1
            self.show_menu()
        elif b.right_pressed:
            self.set_game(self.menu_selection)

    def show_game_over(self):
        return self._show_result("GAME OVER", "RIGHT: Restart")

    def show_game_won(self):
        return self._show_result("YOU WON!", "RIGHT: Play Again")

    def _show_result(self, title, restart_hint):
        d = self.display
        d.clear()
        draw_centered_text(d, title, 0, 2)
        score = self.game.score if self.game is not None else 0
        game_id = int(self.current_game)
        self.new_highscore = self.highscores.is_new_highscore(game_id, score)
        if self.new_highscore:
            self.highscores.save_highscore(game_id, score)
        draw_centered_text(d, f"Score: {score}", 17, 1)
        draw_centered_text(d, f"Best: {self.highscores.highscore(game_id)}", 27, 1)
        if self.new_highscore:
            draw_centered_text(d, "NEW HIGHSCORE!", 37, 1)
        draw_centered_text(d, "UP: Menu", 47, 1)
        draw_centered_text(d, restart_hint, 57, 1)
        return d.render()

    def handle_game_over_input(self):
        if self.buttons.up_pressed:
            self.set_state(GameState.MENU)
        elif self.buttons.right_pressed:
            self.set_game(self.current_game)

    def handle_game_won_input(self):
        self.handle_game_over_input()