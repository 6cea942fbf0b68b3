# src/tictactoe/core/lines.py

from __future__ import annotations
from typing import List

from tictactoe.core.board import Board
from tictactoe.types import Line, Move


def all_lines(board: Board) -> List[Line]:
    """
    Every candidate winning line: each column, each row, then the two diagonals.

    The diagonals use independent conditions, col + row == width - 1 (collected
    column by column) and row == col (collected row by row). On a square board
    they are the usual two diagonals. On a rectangular board they are kept as-is,
    so they can differ in length or stop short of a corner.
    """
    w, h = board.width, board.height
    lines: List[Line] = []

    anti_diagonal: List[Move] = []
    for c in range(w):
        column: List[Move] = []
        for r in range(h):
            column.append(Move(c, r))
            if c + r == w - 1:
                anti_diagonal.append(Move(c, r))
        lines.append(tuple(column))

    main_diagonal: List[Move] = []
    for r in range(h):
        row: List[Move] = []
        for c in range(w):
            row.append(Move(c, r))
            if r == c:
                main_diagonal.append(Move(c, r))
        lines.append(tuple(row))

    lines.append(tuple(anti_diagonal))
    lines.append(tuple(main_diagonal))
    return lines
