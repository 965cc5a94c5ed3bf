"""Unit tests for /src/collapse_chess/board.py"""

import pytest

from src.collapse_chess.board import Board
from src.collapse_chess.cells import COLLAPSED, EMPTY, Occupied
from src.collapse_chess.layout import STARTING_LAYOUT
from src.collapse_chess.pieces import Color, Piece, PieceType
from src.collapse_chess.square import Square, all_squares
from src.core.exceptions import OutOfBoundsError

OUT_OF_BOUNDS = [Square(6, 0), Square(0, 6), Square(-1, 3), Square(3, -1)]


# -- CREATION LOGIC ---
def test_empty_board() -> None:
    board = Board.empty()
    assert len(board.cells) == 36
    assert all(board.cell(square) == EMPTY for square in all_squares())


def test_starting_position(starting_board: Board) -> None:
    """Six pieces per side, each side has exactly one royal piece: a rook on its back rank corner"""
    assert starting_board.to_layout() == STARTING_LAYOUT
    for color in Color:
        squares = starting_board.locate_color(color)
        assert len(squares) == 6
        royals = [sq for sq in squares if starting_board.piece_at(sq).royal]
        assert len(royals) == 1

    assert starting_board.piece_at(Square(5, 5)) == Piece(
        PieceType.ROOK, Color.WHITE, royal=True
    )
    assert starting_board.piece_at(Square(0, 0)) == Piece(
        PieceType.ROOK, Color.BLACK, royal=True
    )
    assert starting_board.collapsed_squares() == []


def test_starting_position_is_a_fresh_board() -> None:
    """Mutating one board must not leak into the next one"""
    first = Board.starting_position()
    first.collapse(Square(3, 3))
    second = Board.starting_position()
    assert not second.is_collapsed(Square(3, 3))


# -- QUERIES ---
def test_queries_on_the_three_cell_states() -> None:
    board = Board.from_layout("r*5/6/2x3/6/6/5R*")
    occupied, collapsed, empty = Square(0, 0), Square(2, 2), Square(3, 3)

    assert board.is_occupied(occupied)
    assert not board.is_collapsed(occupied)
    assert board.piece_at(occupied) == Piece(PieceType.ROOK, Color.BLACK, royal=True)

    assert board.is_collapsed(collapsed)
    assert not board.is_occupied(collapsed)
    assert board.piece_at(collapsed) is None

    assert not board.is_collapsed(empty)
    assert not board.is_occupied(empty)
    assert board.piece_at(empty) is None

    assert board.collapsed_squares() == [collapsed]


@pytest.mark.parametrize("square", OUT_OF_BOUNDS)
def test_queries_out_of_bounds(square: Square, starting_board: Board) -> None:
    with pytest.raises(OutOfBoundsError):
        starting_board.cell(square)
    with pytest.raises(OutOfBoundsError):
        starting_board.is_collapsed(square)
    with pytest.raises(OutOfBoundsError):
        starting_board.is_occupied(square)
    with pytest.raises(OutOfBoundsError):
        starting_board.piece_at(square)


# -- MUTATIONS ---
def test_place_and_clear() -> None:
    board = Board.empty()
    knight = Piece(PieceType.KNIGHT, Color.WHITE)
    board.place(Square(2, 3), knight)
    assert board.cell(Square(2, 3)) == Occupied(knight)
    board.clear(Square(2, 3))
    assert board.cell(Square(2, 3)) == EMPTY


def test_collapse_removes_the_piece(starting_board: Board) -> None:
    starting_board.collapse(Square(0, 3))
    assert starting_board.cell(Square(0, 3)) == COLLAPSED
    assert Square(0, 3) not in starting_board.locate_color(Color.BLACK)


@pytest.mark.parametrize("square", OUT_OF_BOUNDS)
def test_mutations_out_of_bounds(square: Square) -> None:
    board = Board.empty()
    with pytest.raises(OutOfBoundsError):
        board.place(square, Piece(PieceType.PAWN, Color.BLACK))
    with pytest.raises(OutOfBoundsError):
        board.clear(square)
    with pytest.raises(OutOfBoundsError):
        board.collapse(square)
    assert square not in board.cells
