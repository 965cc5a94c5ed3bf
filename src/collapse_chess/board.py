"""The Board holds the content of every square. It is a plain data holder: the only validation it does is bounds checking."""

from dataclasses import dataclass
from typing import Optional, Self

from src.collapse_chess.cells import COLLAPSED, EMPTY, Cell, Collapsed, Occupied
from src.collapse_chess.layout import STARTING_LAYOUT, cells_to_layout, parse_layout
from src.collapse_chess.pieces import Color, Piece
from src.collapse_chess.square import Square, all_squares
from src.core.exceptions import OutOfBoundsError


@dataclass
class Board:
    cells: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        """Fresh board with every square empty"""
        return cls({square: EMPTY for square in all_squares()})

    @classmethod
    def starting_position(cls) -> Self:
        """Six pieces per side: a royal rook, two more rooks, a knight and two pawns"""
        return cls.from_layout(STARTING_LAYOUT)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from layout notation (see layout.py). ex. the starting position: r*1rn1r/p3p1/6/6/1P3P/R1NR1R*"""
        return cls(parse_layout(layout))

    def to_layout(self) -> str:
        return cells_to_layout(self.cells)

    # --- QUERIES ---
    def cell(self, square: Square) -> Cell:
        self._assert_within_bounds(square)
        return self.cells[square]

    def is_collapsed(self, square: Square) -> bool:
        return isinstance(self.cell(square), Collapsed)

    def is_occupied(self, square: Square) -> bool:
        return isinstance(self.cell(square), Occupied)

    def piece_at(self, square: Square) -> Optional[Piece]:
        """The piece standing on the square, None if the square is empty or collapsed"""
        cell = self.cell(square)
        if isinstance(cell, Occupied):
            return cell.piece
        return None

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square, cell in self.cells.items()
            if isinstance(cell, Occupied) and cell.piece.color == color
        ]

    def collapsed_squares(self) -> list[Square]:
        return [
            square
            for square, cell in self.cells.items()
            if isinstance(cell, Collapsed)
        ]

    # --- MUTATIONS ---
    # NOTE: the Board does not protect collapsed squares. The GameEngine never places onto / clears a collapsed square.
    def place(self, square: Square, piece: Piece) -> None:
        self._assert_within_bounds(square)
        self.cells[square] = Occupied(piece)

    def clear(self, square: Square) -> None:
        self._assert_within_bounds(square)
        self.cells[square] = EMPTY

    def collapse(self, square: Square) -> None:
        """Whatever stood on the square is removed along with it"""
        self._assert_within_bounds(square)
        self.cells[square] = COLLAPSED

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(f"Square {square} lies outside of the board.")
