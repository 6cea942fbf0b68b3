from __future__ import annotations
from typing import Optional

from tictactoe.core.coords import parse_grid_ref
from tictactoe.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[Move]:
    """
    None means the player asked to quit; unreadable text raises ValueError.
    """
    s = raw.strip()
    if s.lower() in QUIT_WORDS:
        return None
    move = parse_grid_ref(s)
    if move is None:
        raise ValueError("Enter a valid move (e.g. 'A1').")
    return move
