"""
Tests for the TicTacToe board model.
Run with: pytest test_board.py
"""

import numpy as np
import pytest

from tictactoe.board import Board, Mark, MoveError, OutOfBounds, CellOccupied, render


ALL_CELLS = [(row, col) for row in range(3) for col in range(3)]


# ==================== MARK ====================

def test_mark_opposite_is_involution():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    for mark in Mark:
        assert mark.opposite().opposite() == mark


def test_mark_from_code():
    assert Mark.from_code(0) is None
    assert Mark.from_code(1) == Mark.X
    assert Mark.from_code(-1) == Mark.O
    for mark in Mark:
        assert Mark.from_code(mark.code) == mark
    with pytest.raises(ValueError):
        Mark.from_code(2)


def test_mark_from_symbol():
    assert Mark.from_symbol("x") == Mark.X
    assert Mark.from_symbol(" O\n") == Mark.O
    with pytest.raises(ValueError):
        Mark.from_symbol("z")
    with pytest.raises(ValueError):
        Mark.from_symbol("")


# ==================== GET / SET ====================

def test_empty_board_has_nine_empty_cells():
    board = Board.empty()
    assert all(board.get(row, col) is None for row, col in ALL_CELLS)
    assert not board.is_full()
    assert board.count(Mark.X) == 0


@pytest.mark.parametrize("row,col", ALL_CELLS)
def test_set_then_get_changes_only_that_cell(row, col):
    board = Board.from_rows(["X O", " X ", "O  "])
    new_board = board.set(row, col, Mark.O)

    assert new_board.get(row, col) == Mark.O
    for r, c in ALL_CELLS:
        if (r, c) != (row, col):
            assert new_board.get(r, c) == board.get(r, c)


def test_set_overwrites_without_occupancy_check():
    board = Board.empty().set(1, 1, Mark.X)
    assert board.set(1, 1, Mark.O).get(1, 1) == Mark.O


def test_updates_return_new_board():
    board = Board.empty()
    new_board = board.apply_move(0, 0, Mark.X)

    assert board.get(0, 0) is None
    assert new_board.get(0, 0) == Mark.X
    assert board != new_board


def test_grid_is_read_only():
    board = Board.empty()
    with pytest.raises(ValueError):
        board.grid[0, 0] = 1


@pytest.mark.parametrize("row,col", [
    (-1, 0), (0, -1), (3, 0), (0, 3), (3, 3), (-1, -1), (1, 7), (10, 1),
])
def test_out_of_bounds(row, col):
    board = Board.empty()
    with pytest.raises(OutOfBounds):
        board.get(row, col)
    with pytest.raises(OutOfBounds):
        board.set(row, col, Mark.X)
    with pytest.raises(OutOfBounds):
        board.apply_move(row, col, Mark.X)


def test_out_of_bounds_carries_coordinates():
    with pytest.raises(OutOfBounds) as info:
        Board.empty().get(1, 3)
    assert (info.value.row, info.value.col) == (1, 3)
    assert isinstance(info.value, MoveError)
    assert isinstance(info.value, ValueError)


# ==================== APPLY MOVE ====================

def test_apply_move_on_empty_cell_behaves_like_set():
    board = Board.from_rows(["X  ", " O ", "   "])
    assert board.apply_move(2, 2, Mark.X) == board.set(2, 2, Mark.X)


def test_apply_move_on_occupied_cell():
    board = Board.empty().apply_move(1, 1, Mark.X)

    with pytest.raises(CellOccupied) as info:
        board.apply_move(1, 1, Mark.O)

    assert info.value.mark == Mark.X
    assert (info.value.row, info.value.col) == (1, 1)


def test_apply_move_checks_bounds_before_occupancy():
    board = Board.from_rows(["XXX", "XXX", "XXX"])
    with pytest.raises(OutOfBounds):
        board.apply_move(3, 0, Mark.O)


# ==================== VALUE SEMANTICS ====================

def test_equal_boards_are_equal_and_hash_alike():
    a = Board.empty().apply_move(0, 0, Mark.X).apply_move(1, 1, Mark.O)
    b = Board.empty().apply_move(1, 1, Mark.O).apply_move(0, 0, Mark.X)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Board.empty()}) == 2


def test_board_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board(np.zeros((4, 4), dtype=np.int8))


def test_board_rejects_unknown_cell_codes():
    grid = np.array([[2, 1, 0], [0, 0, 0], [0, 0, 0]], dtype=np.int8)
    with pytest.raises(ValueError):
        Board(grid)
    with pytest.raises(ValueError):
        Board(np.full((3, 3), 5))


def test_board_keeps_its_own_copy_of_the_grid():
    grid = np.zeros((3, 3), dtype=np.int8)
    board = Board(grid)

    grid[1, 1] = 1
    assert board.get(1, 1) is None

    grid.flags.writeable = True
    grid[0, 0] = -1
    assert board.get(0, 0) is None
    assert board.grid.dtype == np.int8


def test_board_accepts_plain_int_grid():
    board = Board(np.array([[1, 0, 0], [0, -1, 0], [0, 0, 0]]))
    assert board == Board.from_rows(["X  ", " O ", "   "])


def test_codes_row_major():
    board = Board.from_rows(["X  ", " O ", "  X"])
    assert board.codes() == [1, 0, 0, 0, -1, 0, 0, 0, 1]


def test_from_rows():
    board = Board.from_rows(["X.O", " X ", "O.."])

    assert board.get(0, 0) == Mark.X
    assert board.get(0, 1) is None
    assert board.get(0, 2) == Mark.O
    assert board.get(2, 0) == Mark.O
    assert board.count(Mark.X) == 2
    assert board.count(Mark.O) == 2

    with pytest.raises(ValueError):
        Board.from_rows(["XO", "   ", "   "])
    with pytest.raises(ValueError):
        Board.from_rows(["   ", "   "])


def test_cells_iterates_row_major():
    board = Board.from_rows(["X  ", "   ", "  O"])
    cells = list(board.cells())

    assert [(r, c) for r, c, _ in cells] == ALL_CELLS
    assert cells[0] == (0, 0, Mark.X)
    assert cells[8] == (2, 2, Mark.O)


def test_is_full():
    assert Board.from_rows(["XOX", "XOO", "OXX"]).is_full()
    assert not Board.from_rows(["XOX", "XOO", "OX "]).is_full()


# ==================== RENDER ====================

def test_render_empty_board():
    assert render(Board.empty()) == " | | \n-+-+-\n | | \n-+-+-\n | | "


def test_render_marks():
    board = Board.from_rows(["X O", " X ", "O  "])
    expected = "\n".join([
        "X| |O",
        "-+-+-",
        " |X| ",
        "-+-+-",
        "O| | ",
    ])
    assert render(board) == expected
    assert str(board) == expected
