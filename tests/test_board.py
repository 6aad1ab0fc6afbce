import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.utils import ROWS, COLS, Player


def test_new_board_is_empty():
    board = Board()
    assert board.grid.shape == (ROWS, COLS)
    assert all(board.get_cell(r, c) == Player.EMPTY for r in range(ROWS) for c in range(COLS))
    assert board.playable_columns() == list(range(COLS))
    assert not board.is_full()


def test_reset_clears_cells():
    board = Board()
    board.set_cell(5, 3, Player.ONE)
    board.set_cell(0, 0, Player.TWO)
    board.reset()
    assert np.all(board.grid == Player.EMPTY.value)


def test_set_and_get_cell():
    board = Board()
    board.set_cell(5, 2, Player.TWO)
    assert board.get_cell(5, 2) == Player.TWO
    assert board.get_cell(4, 2) == Player.EMPTY


@pytest.mark.parametrize("col", [-1, COLS, 100])
def test_out_of_range_columns_are_not_playable(col):
    assert not Board().is_column_playable(col)


def test_column_playable_depends_on_top_cell():
    board = Board()
    board.set_cell(0, 4, Player.ONE)
    assert not board.is_column_playable(4)
    assert board.is_column_playable(3)
    assert 4 not in board.playable_columns()


def test_column_height(make_board):
    board = make_board([
        ".......",
        ".......",
        ".......",
        "..O....",
        "..X....",
        "..XO...",
    ])
    assert board.column_height(2) == 3
    assert board.column_height(3) == 1
    assert board.column_height(0) == 0


def test_is_settled_detects_floating_tokens(make_board):
    settled = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        "O......",
        "X..X...",
    ])
    floating = make_board([
        ".......",
        ".......",
        ".......",
        "...O...",
        ".......",
        "...X...",
    ])
    assert settled.is_settled()
    assert not floating.is_settled()


def test_copy_is_independent():
    board = Board()
    board.set_cell(5, 0, Player.ONE)
    clone = board.copy()
    clone.set_cell(5, 1, Player.TWO)

    assert clone.get_cell(5, 0) == Player.ONE
    assert board.get_cell(5, 1) == Player.EMPTY
    assert clone != board


def test_get_state_returns_a_copy():
    board = Board()
    state = board.get_state()
    state[5, 0] = Player.ONE.value
    assert board.get_cell(5, 0) == Player.EMPTY


def test_from_rows_rejects_bad_shapes_and_values():
    with pytest.raises(ValueError):
        Board.from_rows([[0] * COLS] * (ROWS - 1))
    with pytest.raises(ValueError):
        Board.from_rows([[3] * COLS] * ROWS)


def test_render_shows_tokens_and_column_numbers(make_board):
    board = make_board([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "X.....O",
    ])
    text = board.render()
    lines = text.splitlines()
    assert lines[-3] == "|X           O|"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
