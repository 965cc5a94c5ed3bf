"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The variant is always played on a 6x6 board: (rows, columns)
BOARD_DIMENSIONS = (6, 6)
FILE_NAMES = "abcdef"
RANK_NAMES = "123456"


@dataclass(frozen=True)
class Square:
    """Row 0 is Black's back rank, row 5 is White's back rank."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'f6'. Rank 1 is White's back rank (row 5), so 'a1' -> (5, 0) and 'f6' -> (0, 5)"""
        col = FILE_NAMES.index(sq[0])
        row = BOARD_DIMENSIONS[0] - 1 - RANK_NAMES.index(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        rank = RANK_NAMES[BOARD_DIMENSIONS[0] - 1 - self.row]
        return f"{FILE_NAMES[self.col]}{rank}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square shifted by the given vector (may lie off the board)"""
        return Square(self.row + d_row, self.col + d_col)


def all_squares() -> list[Square]:
    """Every square of the board, row-major"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
