"""A monochrome frame buffer with simple drawing primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .config import SCREEN_WIDTH

CHAR_WIDTH = 6
CHAR_HEIGHT = 8


class Color(IntEnum):
    BLACK = 0
    WHITE = 1
    INVERSE = 2


@dataclass(frozen=True)
class TextItem:
    x: int
    y: int
    text: str
    size: int
    color: Color


class Display:
    """An in-memory one-bit display.

    Text is not rasterised; it is recorded in ``texts`` with its position.
    """

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("display dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [bytearray(width) for _ in range(height)]
        self.texts: list[TextItem] = []
        self.text_size = 1
        self.text_color = Color.WHITE
        self.cursor = (0, 0)
        self.frames_shown = 0

    def clear(self):
        for row in self._pixels:
            row[:] = bytes(self.width)
        self.texts.clear()

    def get_pixel(self, x, y):
        if 0 <= x < self.width and 0 <= y < self.height:
            return Color(self._pixels[y][x])
        return Color.BLACK

    def draw_pixel(self, x, y, color):
        x, y = int(x), int(y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        if color == Color.INVERSE:
            self._pixels[y][x] ^= 1
        else:
            self._pixels[y][x] = int(color)

    def fill_rect(self, x, y, w, h, color):
        x, y, w, h = int(x), int(y), int(w), int(h)
        for py in range(max(y, 0), min(y + h, self.height)):
            for px in range(max(x, 0), min(x + w, self.width)):
                self.draw_pixel(px, py, color)

    def draw_rect(self, x, y, w, h, color):
        x, y, w, h = int(x), int(y), int(w), int(h)
        if w <= 0 or h <= 0:
            return
        self.fill_rect(x, y, w, 1, color)
        if h > 1:
            self.fill_rect(x, y + h - 1, w, 1, color)
        if h > 2:
            self.fill_rect(x, y + 1, 1, h - 2, color)
            if w > 1:
                self.fill_rect(x + w - 1, y + 1, 1, h - 2, color)

    def draw_line(self, x0, y0, x1, y1, color):
        x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.draw_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def fill_circle(self, cx, cy, r, color):
        cx, cy, r = int(cx), int(cy), int(r)
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= r * r:
                    self.draw_pixel(cx + dx, cy + dy, color)

    def set_text_size(self, size):
        if size < 1:
            raise ValueError("text size must be at least 1")
        self.text_size = size

    def set_text_color(self, color):
        self.text_color = Color(color)

    def set_cursor(self, x, y):
        self.cursor = (int(x), int(y))

    def write(self, text):
        """Record text at the cursor and advance the cursor past it."""
        text = str(text)
        x, y = self.cursor
        line_start = x
        for line_no, line in enumerate(text.split("\n")):
            if line_no:
                x = 0
                line_start = 0
                y += CHAR_HEIGHT * self.text_size
            if line:
                self.texts.append(
                    TextItem(line_start, y, line, self.text_size, self.text_color)
                )
            x = line_start + len(line) * CHAR_WIDTH * self.text_size
        self.cursor = (x, y)

    def text_bounds(self, text):
        """Return (x, y, width, height) of text drawn at the origin."""
        lines = str(text).split("\n")
        width = max(len(line) for line in lines) * CHAR_WIDTH * self.text_size
        height = len(lines) * CHAR_HEIGHT * self.text_size
        return 0, 0, width, height

    def render(self):
        """Show the frame; returns it as rows of '#' and '.'."""
        self.frames_shown += 1
        return "\n".join(
            "".join("#" if p else "." for p in row) for row in self._pixels
        )


def draw_centered_text(display, text, y, text_size=1):
    display.set_text_size(text_size)
    display.set_text_color(Color.WHITE)
    _, _, w, _ = display.text_bounds(text)
    display.set_cursor(int((SCREEN_WIDTH - w) / 2), y)
    display.write(text)


def draw_highlight_box(display, x, y, w, h, inverted=False):
    if inverted:
        display.fill_rect(x, y, w, h, Color.WHITE)
    else:
        display.draw_rect(x, y, w, h, Color.WHITE)