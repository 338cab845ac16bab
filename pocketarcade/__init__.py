"""Eight small arcade games, a menu and highscores for a 128x64 one-bit display."""

__version__ = "0.1.0"