# src/tictactoe/core/validator.py

from __future__ import annotations
from typing import Optional

from tictactoe.config import MAX_WIDTH
from tictactoe.core.board import Board
from tictactoe.core.coords import format_grid_ref
from tictactoe.types import Move, Token


def is_in_bounds(board: Board, move: Move) -> bool:
    return 0 <= move.row < board.height and 0 <= move.col < board.width


def is_occupied(board: Board, move: Move) -> bool:
    return board.get(move) != Token.EMPTY


def is_valid(board: Board, move: Move) -> bool:
    """The only gate a move passes before it is placed."""
    return is_in_bounds(board, move) and not is_occupied(board, move)


def _describe(move: Move) -> str:
    if 0 <= move.col < MAX_WIDTH and move.row >= 0:
        return format_grid_ref(move)
    return f"({move.col}, {move.row})"


def rejection_reason(board: Board, move: Move) -> Optional[str]:
    if not is_in_bounds(board, move):
        return f"{_describe(move)} is off the board."
    if is_occupied(board, move):
        return f"{_describe(move)} is already taken."
    return None
