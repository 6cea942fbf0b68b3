from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

from tictactoe.config import WIDTH, HEIGHT, PLAYER_NAMES
from tictactoe.core.board import Board, create
from tictactoe.types import Player, Token


@dataclass(slots=True)
class GameState:
    board: Board
    players: Tuple[Player, Player]
    turn: int = 1
    last_status: str = ""

    @property
    def current(self) -> Player:
        return self.players[(self.turn - 1) % 2]

    def advance(self) -> None:
        self.turn += 1


def new_game(
    width: int = WIDTH,
    height: int = HEIGHT,
    names: Sequence[str] = PLAYER_NAMES,
) -> GameState:
    p1, p2 = names
    return GameState(
        board=create(width, height, Token.EMPTY),
        players=(Player(p1, Token.X), Player(p2, Token.O)),
        last_status=f"{p1} starts.",
    )
