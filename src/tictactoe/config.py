# src/tictactoe/config.py

from __future__ import annotations

WIDTH = 3
HEIGHT = 3

# Grid references are one letter + 1..99
MAX_WIDTH = 26
MAX_HEIGHT = 99

PLAYER_NAMES = ("Player 1", "Player 2")

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

LOG_LEVEL = "WARNING"
