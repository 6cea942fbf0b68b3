# src/tictactoe/core/rules.py

from __future__ import annotations
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.core.lines import all_lines
from tictactoe.types import Line, Token

# A single cell is not a line
MIN_LINE_LENGTH = 2


def is_line_won(board: Board, line: Line) -> bool:
    if len(line) < MIN_LINE_LENGTH:
        return False
    first = board.get(line[0])
    if first == Token.EMPTY:
        return False
    return all(board.get(m) == first for m in line[1:])


def winning_line(board: Board) -> Optional[Line]:
    for line in all_lines(board):
        if is_line_won(board, line):
            return line
    return None


def has_winner(board: Board) -> bool:
    return winning_line(board) is not None


def is_draw(board: Board) -> bool:
    return board.is_full() and not has_winner(board)
