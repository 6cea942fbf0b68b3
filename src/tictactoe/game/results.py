from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from tictactoe.types import Line, Player

Outcome = Literal["win", "draw", "quit"]


@dataclass(frozen=True)
class GameResult:
    outcome: Outcome
    turns: int
    winner: Optional[Player] = None
    line: Optional[Line] = None
