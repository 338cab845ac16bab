"""Four-button input state with press-edge detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Button(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class ButtonState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    up_pressed: bool = False
    down_pressed: bool = False
    left_pressed: bool = False
    right_pressed: bool = False

    def update(self, up, down, left, right):
        """Take a new reading; *_pressed is true only on the first held frame."""
        self.up_pressed = up and not self.up
        self.down_pressed = down and not self.down
        self.left_pressed = left and not self.left
        self.right_pressed = right and not self.right
        self.up, self.down, self.left, self.right = up, down, left, right

    def is_held(self, button):
        return getattr(self, Button(button).value)

    def was_just_pressed(self, button):
        return getattr(self, Button(button).value + "_pressed")