import random

import pytest

from connectfour.game.board import Board
from connectfour.game.gravity import place_and_settle
from connectfour.utils import ROWS, COLS, Player


@pytest.mark.parametrize("col", range(COLS))
def test_token_on_empty_board_lands_on_bottom_row(col):
    board = Board()
    row = place_and_settle(board, col, Player.ONE)
    assert row == ROWS - 1
    assert board.get_cell(ROWS - 1, col) == Player.ONE
    assert board.column_height(col) == 1


def test_tokens_stack_upward():
    board = Board()
    rows = [place_and_settle(board, 3, token) for token in (Player.ONE, Player.TWO, Player.ONE)]
    assert rows == [5, 4, 3]
    assert [board.get_cell(r, 3) for r in (5, 4, 3)] == [Player.ONE, Player.TWO, Player.ONE]


def test_filling_a_column_makes_only_that_column_unplayable():
    board = Board()
    token = Player.ONE
    for _ in range(ROWS):
        place_and_settle(board, 2, token)
        token = token.other()

    assert not board.is_column_playable(2)
    assert all(board.is_column_playable(c) for c in range(COLS) if c != 2)
    assert board.playable_columns() == [0, 1, 3, 4, 5, 6]


def test_last_free_cell_is_the_top_row():
    board = Board()
    for _ in range(ROWS - 1):
        place_and_settle(board, 0, Player.TWO)
    assert place_and_settle(board, 0, Player.ONE) == 0


def test_placing_in_full_column_raises():
    board = Board()
    for _ in range(ROWS):
        place_and_settle(board, 6, Player.ONE)
    with pytest.raises(ValueError):
        place_and_settle(board, 6, Player.TWO)


def test_other_columns_are_untouched():
    board = Board()
    place_and_settle(board, 1, Player.ONE)
    before = board.get_state()
    place_and_settle(board, 5, Player.TWO)
    after = board.get_state()
    after[ROWS - 1, 5] = 0
    assert (before == after).all()


@pytest.mark.parametrize("seed", range(20))
def test_random_games_keep_columns_contiguous(seed):
    rng = random.Random(seed)
    board = Board()
    token = Player.ONE
    while board.playable_columns():
        place_and_settle(board, rng.choice(board.playable_columns()), token)
        assert board.is_settled()
        token = token.other()
    assert board.is_full()
