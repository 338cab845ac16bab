from pocketarcade.config import SCREEN_HEIGHT, SCREEN_WIDTH
from pocketarcade.display import Color, Display
from pocketarcade.input import ButtonState
from pocketarcade.tetris import (
    BLOCK_SIZE,
    PIECES,
    TETRIS_HEIGHT,
    TETRIS_OFFSET_X,
    TETRIS_OFFSET_Y,
    TETRIS_WIDTH,
    TetrisGame,
)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


class FakeRng:
    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, start, stop):
        value = self.values.pop(0) if self.values else start
        assert start <= value < stop
        return value


def make_game(*rng_values):
    clock = FakeClock()
    game = TetrisGame(
        Display(SCREEN_WIDTH, SCREEN_HEIGHT), ButtonState(), clock, FakeRng(*rng_values)
    )
    return game, clock


def test_init_board_empty_and_piece_spawned():
    game, _ = make_game(2)
    assert all(not any(row) for row in game.board)
    assert game.piece.kind == 2
    assert game.piece.y == 0
    assert game.piece.rotation == 0
    assert game.piece.x == TETRIS_WIDTH // 2 - 2
    assert game.score == 0
    assert game.level == 1


def test_every_rotation_has_four_cells_and_fits_the_board():
    game, _ = make_game()
    for kind, shape in enumerate(PIECES):
        assert len(shape) == 4
        for rotation, cells in enumerate(shape):
            assert len(cells) == 4
            assert all(0 <= x < 4 and 0 <= y < 4 for x, y in cells)
            lowest = max(y for _, y in cells)
            assert game.is_valid_position(3, 4, kind, rotation) is True
            assert game.is_valid_position(3, TETRIS_HEIGHT - 1 - lowest, kind, rotation) is True
            assert game.is_valid_position(3, TETRIS_HEIGHT - lowest, kind, rotation) is False


def test_move_left_stops_at_wall():
    game, _ = make_game()
    for _ in range(TETRIS_WIDTH):
        if not game.move_piece(-1, 0, 0):
            break
    p = game.piece
    assert game.move_piece(-1, 0, 0) is False
    assert game.is_valid_position(p.x, p.y, p.kind, p.rotation)
    assert min(p.x + cx for cx, _ in PIECES[p.kind][p.rotation]) == 0


def test_is_valid_position_rejects_outside_and_occupied():
    game, _ = make_game()
    assert game.is_valid_position(-1, 0, 0, 0) is False
    assert game.is_valid_position(TETRIS_WIDTH - 3, 0, 0, 0) is False
    assert game.is_valid_position(0, TETRIS_HEIGHT - 1, 0, 0) is False
    game.board[1][3] = 1
    assert game.is_valid_position(3, 0, 0, 0) is False
    assert game.is_valid_position(3, 2, 0, 0) is True


def test_up_button_rotates():
    game, _ = make_game()
    game.buttons.update(True, False, False, False)
    game.handle_input()
    assert game.piece.rotation == 1


def test_down_button_moves_piece_down():
    game, _ = make_game()
    game.buttons.update(False, True, False, False)
    game.handle_input()
    assert game.piece.y == 1


def test_update_waits_for_drop_interval():
    game, clock = make_game()
    clock.now = game.drop_speed
    game.update()
    assert game.piece.y == 0
    clock.now = game.drop_speed + 1
    game.update()
    assert game.piece.y == 1


def _prepare_bottom_gap(game):
    x = game.piece.x
    game.board[-1] = [0 if x <= col < x + 4 else 1 for col in range(TETRIS_WIDTH)]
    game.piece.y = TETRIS_HEIGHT - 2


def test_landing_piece_clears_full_line():
    game, clock = make_game()
    _prepare_bottom_gap(game)
    clock.now = 10_000
    game.update()
    assert game.lines_cleared == 1
    assert game.score == 100
    assert all(not any(row) for row in game.board)
    assert not game.game_over
    assert game.piece.y == 0


def test_tenth_line_raises_level():
    game, clock = make_game()
    game.lines_cleared = 9
    _prepare_bottom_gap(game)
    clock.now = 10_000
    game.update()
    assert game.level == 2
    assert game.drop_speed < 500


def test_blocked_spawn_ends_game():
    game, clock = make_game()
    game.board[1][4] = 1
    game.piece.y = TETRIS_HEIGHT - 2
    clock.now = 10_000
    game.update()
    assert game.game_over is True
    assert sum(game.board[-1]) == 4


def test_draw_shows_border_and_piece():
    game, _ = make_game()
    frame = game.draw()
    d = game.display
    assert len(frame.split("\n")) == SCREEN_HEIGHT
    assert d.get_pixel(TETRIS_OFFSET_X - 1, TETRIS_OFFSET_Y - 1) == Color.WHITE
    assert d.get_pixel(
        TETRIS_OFFSET_X + game.piece.x * BLOCK_SIZE, TETRIS_OFFSET_Y + BLOCK_SIZE
    ) == Color.WHITE
    assert "Score:" in [t.text for t in d.texts]