"""Falling-block puzzle on a 10x16 well."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color

TETRIS_WIDTH = 10
TETRIS_HEIGHT = 16
BLOCK_SIZE = 3
TETRIS_FIELD_WIDTH = TETRIS_WIDTH * BLOCK_SIZE
TETRIS_FIELD_HEIGHT = TETRIS_HEIGHT * BLOCK_SIZE
TETRIS_OFFSET_X = (SCREEN_WIDTH - TETRIS_FIELD_WIDTH - 50) // 2
TETRIS_OFFSET_Y = (SCREEN_HEIGHT - TETRIS_FIELD_HEIGHT) // 2

_SHAPES = (
    # I
    (("....", "####", "....", "...."),
     ("..#.", "..#.", "..#.", "..#."),
     ("....", "....", "####", "...."),
     (".#..", ".#..", ".#..", ".#..")),
    # O
    (("....", ".##.", ".##.", "...."),
     ("....", ".##.", ".##.", "...."),
     ("....", ".##.", ".##.", "...."),
     ("....", ".##.", ".##.", "....")),
    # T
    (("....", ".#..", "###.", "...."),
     ("....", ".#..", ".##.", ".#.."),
     ("....", "....", "###.", ".#.."),
     ("....", ".#..", "##..", ".#..")),
    # S
    (("....", ".##.", "##..", "...."),
     ("....", ".#..", ".##.", "..#."),
     ("....", "....", ".##.", "##.."),
     ("....", "#...", "##..", ".#..")),
    # Z
    (("....", "##..", ".##.", "...."),
     ("....", "..#.", ".##.", ".#.."),
     ("....", "....", "##..", ".##."),
     ("....", ".#..", "##..", "#...")),
    # J
    (("....", "#...", "###.", "...."),
     ("....", ".##.", ".#..", ".#.."),
     ("....", "....", "###.", "..#."),
     ("....", ".#..", ".#..", "##..")),
    # L
    (("....", "..#.", "###.", "...."),
     ("....", ".#..", ".#..", ".##."),
     ("....", "....", "###.", "#..."),
     ("....", "##..", ".#..", ".#..")),
)


def _cells(rows):
    return tuple(
        (x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == "#"
    )


# PIECES[kind][rotation] -> cells (x, y) occupied inside the 4x4 box
PIECES = tuple(tuple(_cells(rot) for rot in shape) for shape in _SHAPES)


@dataclass
class Piece:
    x: int
    y: int
    kind: int
    rotation: int = 0


class TetrisGame:
    name = "TETRIS"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self.board = [[0] * TETRIS_WIDTH for _ in range(TETRIS_HEIGHT)]
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.drop_speed = 500
        self.last_drop_time = 0
        self.game_over = False
        self._spawn_new_piece()

    def update(self):
        self.handle_input()
        if self.clock() - self.last_drop_time > self.drop_speed:
            if not self.move_piece(0, 1, 0):
                self._place_piece()
                self._clear_lines()
                self._spawn_new_piece()
                p = self.piece
                if not self.is_valid_position(p.x, p.y, p.kind, p.rotation):
                    self.game_over = True
            self.last_drop_time = self.clock()

    def draw(self):
        d = self.display
        d.clear()
        d.draw_rect(TETRIS_OFFSET_X - 1, TETRIS_OFFSET_Y - 1,
                    TETRIS_FIELD_WIDTH + 2, TETRIS_FIELD_HEIGHT + 2, Color.WHITE)
        for y, row in enumerate(self.board):
            for x, cell in enumerate(row):
                if cell:
                    d.fill_rect(TETRIS_OFFSET_X + x * BLOCK_SIZE,
                                TETRIS_OFFSET_Y + y * BLOCK_SIZE,
                                BLOCK_SIZE, BLOCK_SIZE, Color.WHITE)
        p = self.piece
        for px, py in PIECES[p.kind][p.rotation]:
            screen_x = TETRIS_OFFSET_X + (p.x + px) * BLOCK_SIZE
            screen_y = TETRIS_OFFSET_Y + (p.y + py) * BLOCK_SIZE
            if screen_y >= TETRIS_OFFSET_Y:
                d.fill_rect(screen_x, screen_y, BLOCK_SIZE, BLOCK_SIZE, Color.WHITE)

        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        score_x = TETRIS_OFFSET_X + TETRIS_FIELD_WIDTH + 10
        for y, text in ((5, "Score:"), (15, str(self.score)),
                        (30, "Level:"), (40, str(self.level)),
                        (55, f"L:{self.lines_cleared}")):
            d.set_cursor(score_x, y)
            d.write(text)
        return d.render()

    def handle_input(self):
        b = self.buttons
        if b.left_pressed:
            self.move_piece(-1, 0, 0)
        elif b.right_pressed:
            self.move_piece(1, 0, 0)
        elif b.down_pressed:
            self.move_piece(0, 1, 0)
        elif b.up_pressed:
            self.move_piece(0, 0, 1)

    def move_piece(self, dx, dy, dr):
        """Shift and/or rotate the falling piece; return whether it moved."""
        p = self.piece
        new_x, new_y = p.x + dx, p.y + dy
        new_rotation = (p.rotation + dr) % 4
        if self.is_valid_position(new_x, new_y, p.kind, new_rotation):
            p.x, p.y, p.rotation = new_x, new_y, new_rotation
            return True
        return False

    def is_valid_position(self, x, y, piece_type, rotation):
        for px, py in PIECES[piece_type][rotation]:
            bx, by = x + px, y + py
            if bx < 0 or bx >= TETRIS_WIDTH or by >= TETRIS_HEIGHT:
                return False
            if by >= 0 and self.board[by][bx]:
                return False
        return True

    def _spawn_new_piece(self):
        self.piece = Piece(TETRIS_WIDTH // 2 - 2, 0, self.rng.randrange(0, len(PIECES)))

    def _place_piece(self):
        p = self.piece
        for px, py in PIECES[p.kind][p.rotation]:
            by = p.y + py
            if by >= 0:
                self.board[by][p.x + px] = 1

    def _clear_lines(self):
        remaining = [row for row in self.board if not all(row)]
        cleared = TETRIS_HEIGHT - len(remaining)
        if not cleared:
            return
        self.board = [[0] * TETRIS_WIDTH for _ in range(cleared)] + remaining
        self.score += cleared * 100 * self.level
        self.lines_cleared += cleared
        if self.lines_cleared >= self.level * 10:
            self.level += 1
            self.drop_speed = max(50, self.drop_speed - 50)