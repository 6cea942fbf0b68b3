# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from tictactoe.config import WIDTH, HEIGHT
from tictactoe.types import Move, Token


@dataclass(slots=True)
class Board:
    width: int = WIDTH
    height: int = HEIGHT
    fill: Token = Token.EMPTY
    grid: List[List[Token]] = field(default_factory=list)  # grid[row][col]

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}.")
        if not self.grid:
            self.grid = [[self.fill for _ in range(self.width)] for _ in range(self.height)]
        elif len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise ValueError(
                f"Grid must be {self.height} rows of {self.width} cells, "
                f"got row lengths {[len(row) for row in self.grid]}."
            )

    def _check(self, move: Move) -> None:
        # Plain list indexing would silently wrap negative indices
        if not (0 <= move.row < self.height and 0 <= move.col < self.width):
            raise IndexError(f"{move} is off a {self.width}x{self.height} board.")

    def get(self, move: Move) -> Token:
        self._check(move)
        return self.grid[move.row][move.col]

    def set(self, move: Move, token: Token) -> None:
        self._check(move)
        self.grid[move.row][move.col] = token

    def rows(self) -> List[Tuple[Token, ...]]:
        return [tuple(row) for row in self.grid]

    def is_full(self) -> bool:
        return all(cell != Token.EMPTY for row in self.grid for cell in row)


def create(width: int, height: int, fill: Token = Token.EMPTY) -> Board:
    return Board(width, height, fill)
