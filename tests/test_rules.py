"""Tests for GameSession turn handling, retries and end-of-game state."""

import pytest

from fourgrid.errors import BoundsError, GameOverError, InputClosedError, OccupiedError, ParseError
from fourgrid.game.rules import GameSession
from fourgrid.utils import MAX_TURNS, Command, GameStatus, Mark

from tests.helpers import LAST_MOVE_WIN_PATTERN, ScriptedIO, draw_moves, pattern_moves


def test_initial_state(session):
    assert session.turn == 1
    assert session.active_mark == Mark.ONE
    assert session.status == GameStatus.IN_PROGRESS
    assert session.winner == Mark.EMPTY
    assert not session.is_game_over


def test_legal_move_advances_turn_and_toggles_player(session):
    status = session.apply_move(2, 2)
    assert status == GameStatus.IN_PROGRESS
    assert session.turn == 2
    assert session.active_mark == Mark.TWO
    assert session.board.get(2, 2).mark == Mark.ONE
    assert session.moves_made == [(2, 2)]


def test_out_of_bounds_move_leaves_state_unchanged(session):
    with pytest.raises(BoundsError):
        session.apply_move(10, 0)
    assert session.turn == 1
    assert session.active_mark == Mark.ONE
    assert session.moves_made == []


def test_occupied_move_leaves_state_unchanged(session):
    session.apply_move(0, 0)
    with pytest.raises(OccupiedError):
        session.apply_move(0, 0)
    assert session.turn == 2
    assert session.active_mark == Mark.TWO


def test_horizontal_win_ends_game(session):
    for move in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]:
        assert session.apply_move(*move) == GameStatus.IN_PROGRESS
    assert session.apply_move(0, 3) == GameStatus.WON
    assert session.winner == Mark.ONE
    assert session.turn == 8
    with pytest.raises(GameOverError):
        session.apply_move(4, 4)


def test_player_two_can_win(session):
    moves = [(4, 4), (0, 0), (4, 3), (1, 0), (2, 4), (2, 0), (1, 4), (3, 0)]
    for move in moves[:-1]:
        session.apply_move(*move)
    assert session.apply_move(*moves[-1]) == GameStatus.WON
    assert session.winner == Mark.TWO


def test_full_board_without_four_is_a_draw(session):
    moves = draw_moves()
    assert len(moves) == MAX_TURNS
    for move in moves[:-1]:
        assert session.apply_move(*move) == GameStatus.IN_PROGRESS
    assert session.apply_move(*moves[-1]) == GameStatus.DRAW
    assert session.winner == Mark.EMPTY
    assert session.turn == MAX_TURNS + 1


def test_four_on_the_last_move_is_a_win_not_a_draw(session):
    moves = pattern_moves(LAST_MOVE_WIN_PATTERN, last=(4, 3))
    assert len(moves) == MAX_TURNS
    assert moves[-1] == (4, 3)
    for move in moves[:-1]:
        assert session.apply_move(*move) == GameStatus.IN_PROGRESS
    assert session.apply_move(*moves[-1]) == GameStatus.WON
    assert session.winner == Mark.ONE
    assert session.turn == MAX_TURNS + 1


def test_play_reports_draw():
    session = GameSession()
    io = ScriptedIO(f"{r} {c}" for r, c in draw_moves())
    assert session.play(io) == GameStatus.DRAW
    assert io.results == [(GameStatus.DRAW, Mark.EMPTY)]
    assert len(io.turns) == MAX_TURNS
    assert io.errors == []


def test_out_of_range_input_reprompts_same_player():
    session = GameSession()
    io = ScriptedIO(["10 0", "0 0", "q"])
    session.play(io)
    assert isinstance(io.errors[0], BoundsError)
    assert io.prompts[:2] == [Mark.ONE, Mark.ONE]
    assert session.turn == 2


def test_occupied_input_reprompts_same_player():
    session = GameSession()
    io = ScriptedIO(["0 0", "0 0", "1 1", "q"])
    session.play(io)
    assert len(io.errors) == 1
    assert isinstance(io.errors[0], OccupiedError)
    assert io.prompts[:3] == [Mark.ONE, Mark.TWO, Mark.TWO]
    assert session.board.get(1, 1).mark == Mark.TWO
    assert session.turn == 3


def test_malformed_input_is_reported_and_retried():
    session = GameSession()
    io = ScriptedIO(["01", "a b", "1 2 3", "2 2", "q"])
    session.play(io)
    assert [type(e) for e in io.errors] == [ParseError, ParseError, ParseError]
    assert session.moves_made == [(2, 2)]


def test_play_reports_winner():
    session = GameSession()
    io = ScriptedIO(["0 0", "1 0", "1 1", "2 0", "2 2", "3 0", "3 3"])
    assert session.play(io) == GameStatus.WON
    assert io.results == [(GameStatus.WON, Mark.ONE)]
    assert [mark for mark, _ in io.turns] == [Mark.ONE, Mark.TWO] * 3 + [Mark.ONE]


def test_quit_leaves_game_in_progress():
    session = GameSession()
    io = ScriptedIO(["0 0", "q"])
    assert session.play(io) == GameStatus.IN_PROGRESS
    assert io.results == []


def test_restart_resets_board_and_turn():
    session = GameSession()
    cell = session.board.get(0, 0)
    io = ScriptedIO(["0 0", "1 1", "r", "q"])
    session.play(io)
    assert io.messages == ["Game restarted."]
    assert session.turn == 1
    assert session.active_mark == Mark.ONE
    assert session.board.get(0, 0) is cell
    assert session.board.is_empty(0, 0)


def test_take_turn_returns_command():
    session = GameSession()
    assert session.take_turn(ScriptedIO(["q"])) == Command.QUIT


def test_closed_input_propagates():
    session = GameSession()
    with pytest.raises(InputClosedError):
        session.play(ScriptedIO(["0 0"]))
    assert session.turn == 2


def test_commands_are_matched_case_insensitively():
    session = GameSession()
    io = ScriptedIO(["0 0", " R ", "1 1", "Q"])
    assert session.play(io) == GameStatus.IN_PROGRESS
    assert io.messages == ["Game restarted."]
    assert session.moves_made == [(1, 1)]
