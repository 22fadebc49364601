"""
Tests for the board model, move validation and hints.
"""

import numpy as np
import pytest

from engine.game_state import GameState, GameStatus, Player, Cell, Move, Outcome, Scores
from engine.move_validator import MoveValidator, MoveError
from engine.hint_advisor import HintAdvisor


def test_init():
    state = GameState()
    assert state.size == 15
    assert state.board.shape == (15, 15)
    assert np.all(state.board == Cell.EMPTY)
    assert state.current_player == Player.BLACK
    assert state.moves == []
    assert state.status == GameStatus.in_progress()
    assert state.hint is None


def test_bad_size():
    with pytest.raises(ValueError):
        GameState(size=0)


def test_player_opposite_and_cells():
    assert Player.BLACK.opposite() == Player.WHITE
    assert Player.WHITE.opposite() == Player.BLACK
    assert Player.BLACK.cell == Cell.BLACK
    assert Cell.WHITE.player == Player.WHITE
    assert Cell.EMPTY.player is None


def test_status_values():
    assert not GameStatus.in_progress().is_terminal
    won = GameStatus.won(Player.WHITE)
    assert won.is_terminal
    assert won.outcome == Outcome.WON
    assert won.winner == Player.WHITE
    assert str(won) == "won(white)"
    assert GameStatus.draw().is_terminal
    assert GameStatus.draw().winner is None


def test_place_and_pop():
    state = GameState(size=9)
    move = state.place_stone(4, 4)

    assert move == Move(row=4, col=4, player=Player.BLACK)
    assert state.cell_at(4, 4) == Cell.BLACK
    assert state.moves == [move]

    assert state.pop_move() == move
    assert state.cell_at(4, 4) == Cell.EMPTY
    assert state.pop_move() is None


def test_move_is_immutable():
    move = Move(row=1, col=2, player=Player.BLACK)
    with pytest.raises(AttributeError):
        move.row = 3


def test_cell_at_out_of_range():
    state = GameState(size=5)
    with pytest.raises(IndexError):
        state.cell_at(5, 0)
    with pytest.raises(IndexError):
        state.cell_at(0, -1)
    with pytest.raises(IndexError):
        state.cell_at(True, 3)


def test_in_bounds_needs_integer_indices():
    state = GameState(size=5)
    assert state.in_bounds(0, 4)
    assert state.in_bounds(np.int64(2), np.int8(3))
    assert not state.in_bounds(True, 0)
    assert not state.in_bounds(0, False)
    assert not state.in_bounds(1.0, 1)
    assert not state.in_bounds("1", 1)


def test_empty_cells_row_major_and_full():
    state = GameState(size=2)
    state.place_stone(0, 1)
    assert state.get_empty_cells() == [(0, 0), (1, 0), (1, 1)]
    assert not state.is_full()

    for r, c in [(0, 0), (1, 0), (1, 1)]:
        state.place_stone(r, c)
    assert state.get_empty_cells() == []
    assert state.is_full()


def test_clear_keeps_scores():
    state = GameState()
    state.place_stone(7, 7)
    state.scores.award(Player.WHITE)
    state.hint = (7, 8)

    state.clear()
    assert np.all(state.board == Cell.EMPTY)
    assert state.moves == []
    assert state.hint is None
    assert state.scores == Scores(black=0, white=1)


def test_render():
    state = GameState(size=3)
    state.place_stone(0, 0)
    state.current_player = Player.WHITE
    state.place_stone(1, 1)
    state.hint = (2, 2)

    rows = state.render().splitlines()
    assert len(rows) == 4
    assert rows[1].split() == ["0", "X", ".", "."]
    assert rows[2].split() == ["1", ".", "O", "."]
    assert rows[3].split() == ["2", ".", ".", "*"]


# ==================== MoveValidator ====================

def test_validate_ok():
    result = MoveValidator().validate_move(GameState(), 7, 7)
    assert result.is_valid
    assert result.error is None


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (15, 0), (0, 15), (100, 100)])
def test_validate_out_of_bounds(row, col):
    result = MoveValidator().validate_move(GameState(), row, col)
    assert not result.is_valid
    assert result.error == MoveError.OUT_OF_BOUNDS


def test_validate_occupied():
    state = GameState()
    state.place_stone(3, 4)
    result = MoveValidator().validate_move(state, 3, 4)
    assert result.error == MoveError.CELL_OCCUPIED
    assert "black" in result.error_message


def test_validate_game_over_comes_first():
    state = GameState()
    state.status = GameStatus.draw()
    validator = MoveValidator()

    assert validator.validate_move(state, 7, 7).error == MoveError.GAME_ALREADY_OVER
    assert validator.validate_move(state, 99, 99).error == MoveError.GAME_ALREADY_OVER
    assert validator.get_valid_moves(state) == []


def test_valid_moves_are_empty_cells():
    state = GameState(size=3)
    state.place_stone(1, 1)
    moves = MoveValidator().get_valid_moves(state)
    assert len(moves) == 8
    assert (1, 1) not in moves


# ==================== HintAdvisor ====================

def test_hint_empty_board_is_center():
    assert HintAdvisor().suggest(GameState()) == (7, 7)


def test_hint_even_board():
    assert HintAdvisor().suggest(GameState(size=4)) == (2, 2)


def test_hint_tie_goes_to_first_in_row_major_order():
    state = GameState()
    state.place_stone(7, 7)
    # (6,7), (7,6), (7,8), (8,7) are all at distance 1
    assert HintAdvisor().suggest(state) == (6, 7)

    state.place_stone(6, 7)
    assert HintAdvisor().suggest(state) == (7, 6)


def test_hint_skips_ring_of_stones():
    state = GameState()
    for r in range(6, 9):
        for c in range(6, 9):
            state.place_stone(r, c)
    # Distance-2 cells, first in row-major order
    assert HintAdvisor().suggest(state) == (5, 7)


def test_hint_none_when_over_or_full():
    state = GameState(size=1)
    state.place_stone(0, 0)
    assert HintAdvisor().suggest(state) is None

    state = GameState()
    state.status = GameStatus.won(Player.BLACK)
    assert HintAdvisor().suggest(state) is None
