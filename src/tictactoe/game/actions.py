from __future__ import annotations
from tictactoe.core.board import Board
from tictactoe.core.validator import is_valid, rejection_reason
from tictactoe.types import Move, Token


class IllegalMoveError(ValueError):
    pass


def apply_move(board: Board, move: Move, token: Token) -> None:
    if not is_valid(board, move):
        raise IllegalMoveError(rejection_reason(board, move))
    board.set(move, token)
