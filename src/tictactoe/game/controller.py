from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.core.coords import format_grid_ref
from tictactoe.core.rules import is_draw, winning_line
from tictactoe.game.actions import apply_move
from tictactoe.game.results import GameResult
from tictactoe.game.state import GameState, new_game
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _status_with_players(state: GameState, status: str) -> str:
    """
    Persistent header naming both players and whose turn it is.
    """
    p1, p2 = state.players
    header = f"{p1.token}: {p1.name} | {p2.token}: {p2.name} | Turn {state.turn}: {state.current.name}"
    if status:
        return f"{header}\n{status}"
    return header


def _read(input_fn: InputFn, prompt: str) -> str:
    try:
        return input_fn(prompt)
    except EOFError:
        # Closed stdin: nobody left to answer the prompt
        return "q"


def run_game(state: Optional[GameState] = None, input_fn: InputFn = input) -> GameResult:
    if state is None:
        state = new_game()

    while True:
        render(state.board, _status_with_players(state, state.last_status))

        player = state.current
        raw = _read(input_fn, f"{player.name}, what is your move (e.g. 'A1')? ")

        try:
            move = parse_move(raw)
            if move is None:
                logger.info("Game quit by %s on turn %d", player.name, state.turn)
                render(state.board, _status_with_players(state, "Game quit."))
                return GameResult("quit", state.turn)

            apply_move(state.board, move, player.token)

        except ValueError as e:
            logger.debug("Rejected %r from %s: %s", raw, player.name, e)
            state.last_status = str(e)
            continue

        ref = format_grid_ref(move)
        logger.info("Turn %d: %s (%s) played %s", state.turn, player.name, player.token.value, ref)

        line = winning_line(state.board)
        if line is not None:
            logger.info("%s wins on turn %d", player.name, state.turn)
            render(
                state.board,
                _status_with_players(state, f"{player.name} is the winner!"),
                highlight=line,
            )
            return GameResult("win", state.turn, winner=player, line=line)

        # No legal move left
        if is_draw(state.board):
            logger.info("Draw after %d turns", state.turn)
            render(state.board, _status_with_players(state, "Draw game. The board is full."))
            return GameResult("draw", state.turn)

        state.advance()
        state.last_status = f"{player.name} played {ref}. Next: {state.current.name}"
