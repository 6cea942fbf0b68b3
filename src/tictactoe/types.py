# src/tictactoe/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Token(str, Enum):
    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


class Move(NamedTuple):
    col: int  # 0 == column "A"
    row: int  # 0 == row "1"


Line = Tuple[Move, ...]


@dataclass(frozen=True)
class Player:
    name: str
    token: Token
