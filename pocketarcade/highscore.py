"""Per-game highscores persisted with a magic number and checksum."""

from __future__ import annotations

import struct
from pathlib import Path

from .config import MAX_GAMES

HIGHSCORE_MAGIC = 0xABCD
MAX_VALID_SCORE = 999999
_LAYOUT = struct.Struct(f"<H2x{MAX_GAMES}iH2x")


def calculate_checksum(magic, scores):
    """16-bit wrapping sum of the magic number and all scores."""
    return (magic + sum(scores)) & 0xFFFF


class HighscoreManager:
    """Holds one highscore per game, stored in a small binary file."""

    def __init__(self, path):
        self.path = Path(path)
        self._scores = [0] * MAX_GAMES
        self.load()

    @property
    def scores(self):
        return list(self._scores)

    def load(self):
        """Read scores; invalid or missing data is replaced by zeros and saved."""
        try:
            raw = self.path.read_bytes()[: _LAYOUT.size]
            magic, *rest = _LAYOUT.unpack(raw)
        except (OSError, struct.error):
            self._reset()
            return
        scores, checksum = rest[:MAX_GAMES], rest[MAX_GAMES]
        valid = (
            magic == HIGHSCORE_MAGIC
            and checksum == calculate_checksum(magic, scores)
            and all(0 <= s <= MAX_VALID_SCORE for s in scores)
        )
        if valid:
            self._scores = list(scores)
        else:
            self._reset()

    def _reset(self):
        self._scores = [0] * MAX_GAMES
        self.save()

    def save(self):
        data = _LAYOUT.pack(
            HIGHSCORE_MAGIC,
            *self._scores,
            calculate_checksum(HIGHSCORE_MAGIC, self._scores),
        )
        self.path.write_bytes(data)

    def highscore(self, game_id):
        if 0 <= game_id < MAX_GAMES:
            return self._scores[game_id]
        return 0

    def is_new_highscore(self, game_id, score):
        if 0 <= game_id < MAX_GAMES:
            return score > self._scores[game_id]
        return False

    def save_highscore(self, game_id, score):
        if self.is_new_highscore(game_id, score):
            self._scores[game_id] = score
            self.save()

    def reset_all(self):
        self._reset()