"""
Tests for board rules.
"""

import numpy as np

from zikzak.game import Board, Cell, WIN_LINES


def test_new_board_is_empty():
    b = Board()
    assert b.empty_cells() == list(range(9))
    assert not b.is_full()
    assert b.winner() is None
    assert b.cells.dtype == np.int8
    assert b.cells.shape == (9,)


def test_apply_marks_empty_cell():
    b = Board()
    assert b.apply(4, Cell.HUMAN)
    assert b.cell(4) == Cell.HUMAN
    assert 4 not in b.empty_cells()


def test_apply_rejects_occupied_cell_without_mutation():
    b = Board()
    assert b.apply(0, Cell.HUMAN)
    assert not b.apply(0, Cell.OPPONENT)
    assert not b.apply(0, Cell.HUMAN)
    assert b.cell(0) == Cell.HUMAN


def test_apply_rejects_out_of_range():
    b = Board()
    for pos in (9, 10, -1, 2**64):
        assert not b.apply(pos, Cell.HUMAN)
    assert b.empty_cells() == list(range(9))


def test_apply_rejects_empty_side_and_non_int():
    b = Board()
    assert not b.apply(3, Cell.EMPTY)
    assert not b.apply("3", Cell.HUMAN)
    assert not b.apply(True, Cell.HUMAN)
    assert b.empty_cells() == list(range(9))


def test_every_line_wins():
    for side in (Cell.HUMAN, Cell.OPPONENT):
        for line in WIN_LINES:
            b = Board()
            for i in line:
                b.apply(i, side)
            assert b.winner() == side


def test_partial_or_mixed_line_is_no_win():
    b = Board()
    b.apply(0, Cell.HUMAN)
    b.apply(1, Cell.HUMAN)
    assert b.winner() is None
    b.apply(2, Cell.OPPONENT)
    assert b.winner() is None


def test_winner_uses_fixed_line_order():
    # Two complete rows only happen on a hand-built board; the first row wins
    b = Board()
    b.cells[:] = [1, 1, 1, -1, -1, -1, 0, 0, 0]
    assert b.winner() == Cell.HUMAN

    b.cells[:] = [-1, -1, -1, 0, 0, 0, 1, 1, 1]
    assert b.winner() == Cell.OPPONENT


def test_empty_cells_ascending():
    b = Board()
    for i in (7, 0, 4):
        b.apply(i, Cell.HUMAN)
    assert b.empty_cells() == [1, 2, 3, 5, 6, 8]


def test_full_board():
    b = Board()
    for i, side in enumerate([1, -1, 1, 1, -1, -1, -1, 1, 1]):
        assert b.apply(i, Cell(side))
    assert b.is_full()
    assert b.empty_cells() == []
    assert b.winner() is None


def test_apply_rejects_unknown_side():
    b = Board()
    for side in (2, -2, 5, "Z"):
        assert not b.apply(4, side)
    assert b.cell(4) == Cell.EMPTY
    assert set(np.unique(b.cells).tolist()) == {0}


def test_render():
    b = Board()
    b.apply(0, Cell.HUMAN)
    b.apply(5, Cell.OPPONENT)
    assert b.render() == "Z|1|2\n-+-+-\n3|4|K\n-+-+-\n6|7|8"
