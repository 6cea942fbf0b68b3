# src/tictactoe/core/coords.py

from __future__ import annotations
import re
import string
from typing import Optional

from tictactoe.types import Move

# One letter, then 1..99 (no leading zero)
GRID_REF_RE = re.compile(r"^([a-zA-Z])([1-9][0-9]?)$")


def is_valid_grid_ref(raw: str) -> bool:
    return GRID_REF_RE.match(raw.strip()) is not None


def parse_grid_ref(raw: str) -> Optional[Move]:
    """
    Turn "A1" / "c3" into a zero-based Move.
    Returns None when the text is not a grid reference; never a partial parse.
    """
    m = GRID_REF_RE.match(raw.strip())
    if m is None:
        return None
    letter, number = m.groups()
    col = ord(letter.upper()) - ord("A")
    return Move(col, int(number) - 1)


def column_label(index: int) -> str:
    if index < 0 or index >= len(string.ascii_uppercase):
        raise ValueError(f"Column index {index} has no letter.")
    return string.ascii_uppercase[index]


def format_grid_ref(move: Move) -> str:
    return f"{column_label(move.col)}{move.row + 1}"
