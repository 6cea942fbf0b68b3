from __future__ import annotations

import logging

import pytest

from tictactoe.core.board import create
from tictactoe.game.actions import IllegalMoveError, apply_move
from tictactoe.game.controller import run_game
from tictactoe.game.state import new_game
from tictactoe.types import Move, Token
from tictactoe.ui.prompts import parse_move


def test_new_game_defaults():
    state = new_game()
    assert (state.board.width, state.board.height) == (3, 3)
    assert state.current.token == Token.X
    assert [p.name for p in state.players] == ["Player 1", "Player 2"]
    state.advance()
    assert state.current.token == Token.O
    state.advance()
    assert state.current.token == Token.X


def test_apply_move_places_token():
    b = create(3, 3)
    apply_move(b, Move(1, 2), Token.O)
    assert b.get(Move(1, 2)) == Token.O


@pytest.mark.parametrize("move", [Move(0, 0), Move(3, 0), Move(0, 7)])
def test_rejected_move_leaves_board_unchanged(move):
    b = create(3, 3)
    b.set(Move(0, 0), Token.X)
    before = b.rows()
    with pytest.raises(IllegalMoveError):
        apply_move(b, move, Token.O)
    assert b.rows() == before


def test_parse_move():
    assert parse_move(" b3 ") == Move(1, 2)
    assert parse_move("Q") is None
    assert parse_move("exit") is None
    with pytest.raises(ValueError):
        parse_move("3b")


def test_diagonal_game_ends_with_x_winning(scripted, capsys):
    state = new_game()
    result = run_game(state, scripted(["A1", "B1", "B2", "C1", "C3"]))

    assert result.outcome == "win"
    assert result.winner == state.players[0]
    assert result.turns == 5
    assert set(result.line) == {Move(0, 0), Move(1, 1), Move(2, 2)}
    assert "Player 1 is the winner!" in capsys.readouterr().out


def test_invalid_input_is_reprompted_without_using_a_turn(scripted, capsys):
    state = new_game()
    answers = ["hello", "A1", "A1", "D1", "A0", "B1", "q"]
    result = run_game(state, scripted(answers))

    assert result.outcome == "quit"
    assert state.board.get(Move(0, 0)) == Token.X
    assert state.board.get(Move(1, 0)) == Token.O
    assert sum(cell == Token.EMPTY for row in state.board.rows() for cell in row) == 7
    out = capsys.readouterr().out
    assert "Enter a valid move" in out
    assert "A1 is already taken." in out
    assert "D1 is off the board." in out


def test_full_board_ends_in_draw(scripted, capsys):
    moves = ["B1", "A1", "C1", "B2", "A2", "C2", "A3", "B3", "C3"]
    result = run_game(new_game(), scripted(moves))
    assert result.outcome == "draw"
    assert result.winner is None
    assert result.turns == 9
    assert "Draw game" in capsys.readouterr().out


def test_closed_input_quits(scripted):
    state = new_game()
    result = run_game(state, scripted(["B2"]))
    assert result.outcome == "quit"
    assert state.board.get(Move(1, 1)) == Token.X


def test_moves_are_logged(scripted, caplog):
    caplog.set_level(logging.DEBUG, logger="tictactoe.game.controller")
    run_game(new_game(), scripted(["nope", "A1", "q"]))
    messages = [r.getMessage() for r in caplog.records]
    assert any("Rejected 'nope'" in m for m in messages)
    assert any("played A1" in m for m in messages)


def test_rectangular_game(scripted):
    state = new_game(4, 2, ("Ann", "Bo"))
    result = run_game(state, scripted(["A2", "A1", "B2", "B1", "C2", "C1", "D2"]))
    assert result.outcome == "win"
    assert result.winner.name == "Ann"


def test_apply_move_is_gated_by_is_valid(monkeypatch: pytest.MonkeyPatch):
    from tictactoe.game import actions

    seen = []

    def gate(board, move):
        seen.append(move)
        return False

    monkeypatch.setattr(actions, "is_valid", gate)
    b = create(3, 3)
    with pytest.raises(IllegalMoveError):
        apply_move(b, Move(1, 1), Token.X)
    assert seen == [Move(1, 1)]
    assert b.get(Move(1, 1)) == Token.EMPTY


def test_rejected_move_carries_the_reason():
    b = create(3, 3)
    b.set(Move(2, 2), Token.O)
    with pytest.raises(IllegalMoveError, match="C3 is already taken."):
        apply_move(b, Move(2, 2), Token.X)
    with pytest.raises(IllegalMoveError, match="D1 is off the board."):
        apply_move(b, Move(3, 0), Token.X)
