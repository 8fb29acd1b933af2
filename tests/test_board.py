"""
tests/test_board.py

Тесты построения треугольной доски и графа прыжков.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board, Cell, build_board
from core.utils import triangular, row_of
from utils.error_handling import InvalidBoardError, InvalidPositionError


# Граф классической доски из 5 рядов: позиция → {destination: jumped}
CLASSIC_5 = {
    1: {4: 2, 6: 3},
    2: {7: 4, 9: 5},
    3: {8: 5, 10: 6},
    4: {1: 2, 6: 5, 11: 7, 13: 8},
    5: {12: 8, 14: 9},
    6: {1: 3, 4: 5, 13: 9, 15: 10},
    7: {2: 4, 9: 8},
    8: {3: 5, 10: 9},
    9: {2: 5, 7: 8},
    10: {3: 6, 8: 9},
    11: {4: 7, 13: 12},
    12: {5: 8, 14: 13},
    13: {4: 8, 6: 9, 11: 12, 15: 14},
    14: {5: 9, 12: 13},
    15: {6: 10, 13: 14},
}


def connection_table(board: Board) -> dict:
    return {pos: dict(cell.connections) for pos, cell in board.cells.items()}


@pytest.mark.parametrize("rows", range(1, 9))
def test_build_cells_all_pegged(rows):
    """triangular(rows) клеток, все с колышками."""
    board = build_board(rows)
    assert board.rows == rows
    assert len(board.cells) == triangular(rows)
    assert set(board.cells) == set(range(1, triangular(rows) + 1))
    assert all(cell.pegged for cell in board.cells.values())
    assert board.peg_count() == triangular(rows)


def test_one_row_has_no_connections():
    assert connection_table(build_board(1)) == {1: {}}


def test_two_rows_have_no_connections():
    assert connection_table(build_board(2)) == {1: {}, 2: {}, 3: {}}


def test_three_rows_hand_verified():
    assert connection_table(build_board(3)) == {
        1: {4: 2, 6: 3},
        2: {},
        3: {},
        4: {1: 2, 6: 5},
        5: {},
        6: {1: 3, 4: 5},
    }


def test_classic_five_rows():
    assert connection_table(build_board(5)) == CLASSIC_5


@pytest.mark.parametrize("rows", range(1, 11))
def test_connections_symmetric(rows):
    board = build_board(rows)
    for pos in board.positions():
        for destination, jumped in board.connections(pos).items():
            assert board.connections(destination)[pos] == jumped


@pytest.mark.parametrize("rows", range(1, 11))
def test_connections_stay_on_board_and_straight(rows):
    """jumped строго между концами, на одной из трёх линий."""
    board = build_board(rows)
    max_pos = board.max_position
    for pos in board.positions():
        for destination, jumped in board.connections(pos).items():
            assert 1 <= jumped <= max_pos
            assert 1 <= destination <= max_pos
            low, high = min(pos, destination), max(pos, destination)
            assert low < jumped < high
            r = row_of(low)
            # вправо, вниз-влево, вниз-вправо
            assert (jumped, high) in (
                (low + 1, low + 2),
                (low + r, low + 2 * r + 1),
                (low + r + 1, low + 2 * r + 3),
            )
            if high == low + 2:
                assert row_of(low) == row_of(high)


@pytest.mark.parametrize("rows", [0, -1, 2.5, "5", None, True])
def test_build_rejects_bad_rows(rows):
    with pytest.raises(InvalidBoardError):
        build_board(rows)


def test_remove_peg_returns_new_board():
    board = build_board(5)
    holed = board.remove_peg(4)
    assert holed is not board
    assert not holed.is_pegged(4)
    assert board.is_pegged(4)
    assert holed.peg_count() == 14
    assert board.peg_count() == 15


def test_place_peg():
    board = build_board(3).remove_peg(2)
    assert board.place_peg(2) == build_board(3)


@pytest.mark.parametrize("pos", [0, 7, -1])
def test_position_out_of_range(pos):
    board = build_board(3)
    with pytest.raises(InvalidPositionError):
        board.remove_peg(pos)
    with pytest.raises(InvalidPositionError):
        board.cell(pos)
    assert dict(board.connections(pos)) == {}


def test_connections_shared_between_values():
    """Ходы не копируют граф связей."""
    board = build_board(5)
    holed = board.remove_peg(1)
    assert holed.connections(4) is board.connections(4)


def test_cells_are_read_only():
    board = build_board(3)
    with pytest.raises(TypeError):
        board.cells[1] = Cell(False, {})
    with pytest.raises(TypeError):
        board.connections(1)[5] = 3


def test_equality_and_hash():
    a = build_board(4).remove_peg(2)
    b = build_board(4).remove_peg(2)
    assert a == b
    assert hash(a) == hash(b)
    assert a != build_board(4)
    assert {a, b} == {a}


def test_with_pegs_validates():
    board = build_board(3)
    assert board.with_pegs([1, 6]).pegs == frozenset({1, 6})
    with pytest.raises(InvalidPositionError):
        board.with_pegs([1, 7])


def test_repr():
    assert repr(build_board(5).remove_peg(1)) == "Board(rows=5, 14/15 pegs)"
