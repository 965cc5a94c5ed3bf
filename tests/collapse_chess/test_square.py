"""Unit tests for /src/collapse_chess/square.py"""

import pytest

from src.collapse_chess.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{'abcdef'[col]}{6 - row}")
        for row in range(6)
        for col in range(6)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """'a1' is the bottom left corner as seen by White: row 5, column 0"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "row, col, notation",
    [(5, 0, "a1"), (5, 5, "f1"), (0, 0, "a6"), (0, 5, "f6"), (3, 2, "c3")],
)
def test_to_algebraic_notation(row: int, col: int, notation: str) -> None:
    assert Square(row, col).to_algebraic() == notation


def test_square_within_bounds() -> None:
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize("row, col", [(6, 0), (0, 6), (-1, 0), (0, -1), (6, 6)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_offset_can_leave_the_board() -> None:
    """Move generation walks off the board and checks bounds afterwards, so offsetting must not fail"""
    square = Square(0, 0).offset(-1, -2)
    assert square == Square(-1, -2)
    assert not square.is_within_bounds()


def test_all_squares() -> None:
    squares = all_squares()
    assert len(squares) == 36
    assert len(set(squares)) == 36
    assert squares[0] == Square(0, 0)
    assert squares[-1] == Square(5, 5)
