from __future__ import annotations
from typing import Iterable, List, Optional, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.core.coords import column_label
from tictactoe.types import Move, Token
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

TITLE = """
▀█▀ █ █▀▀ ▄▄ ▀█▀ ▄▀█ █▀▀ ▄▄ ▀█▀ █▀█ █▀▀
░█░ █ █▄▄ ░░ ░█░ █▀█ █▄▄ ░░ ░█░ █▄█ ██▄
"""


def _piece(token: Token, highlighted: bool = False) -> str:
    if token == Token.X:
        glyph = c(token.value, FG_RED)
    elif token == Token.O:
        glyph = c(token.value, FG_YELLOW)
    else:
        glyph = token.value
    if highlighted:
        glyph = c(glyph, REVERSE)
    return glyph


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render_board(board: Board, highlight: Optional[Iterable[Move]] = None) -> str:
    """
    Box-drawn grid, row 1 at the bottom, column letters underneath.
    """
    hl: Set[Move] = set(highlight) if highlight else set()
    w = board.width
    out: List[str] = []

    out.append("   ┌" + "───┬" * (w - 1) + "───┐")
    for r in range(board.height - 1, -1, -1):
        cells = "".join(f"│ {_piece(board.get(Move(col, r)), Move(col, r) in hl)} " for col in range(w))
        out.append(f"{r + 1:>2} {cells}│")
        if r != 0:
            out.append("   ├" + "───┼" * (w - 1) + "───┤")
    out.append("   └" + "───┴" * (w - 1) + "───┘")
    out.append("  " + "".join(f"   {column_label(col)}" for col in range(w)))

    return "\n".join(out)


def render(board: Board, status: str = "", highlight: Optional[Iterable[Move]] = None) -> None:
    clear_screen()

    print(c(TITLE, BOLD))
    print(render_board(board, highlight))
    print()
    if status:
        print(c(status, FG_CYAN))
    print(c("Enter a grid reference such as A1. Enter q to quit.", DIM))
