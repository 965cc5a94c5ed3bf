"""
Layout notation: a FEN-like string describing the position on the board.
----

* The six rows are separated by slashes, starting with row 0 (Black's back rank) and ending with row 5 (White's back rank).
* Within a row, squares are read left to right (column 0 to 5):
    * a digit denotes that many consecutive empty squares
    * r, n, p denote a black rook, knight, pawn. Capital letters (R, N, P) are the white pieces.
    * a '*' directly after a piece letter marks that piece as royal
    * x denotes a collapsed square

ex) The starting position:
r*1rn1r/p3p1/6/6/1P3P/R1NR1R*
i.e. Black's royal rook on (0, 0) and White's royal rook on (5, 5).
"""

from src.collapse_chess.cells import (
    COLLAPSED,
    EMPTY,
    Cell,
    Collapsed,
    Empty,
    Occupied,
)
from src.collapse_chess.pieces import LETTER_TO_PIECE, ROYAL_MARKER, Color, Piece
from src.collapse_chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidLayoutError

STARTING_LAYOUT = "r*1rn1r/p3p1/6/6/1P3P/R1NR1R*"
COLLAPSED_MARKER = "x"
# a run of empty squares spans 1 up to a full row
EMPTY_RUN_DIGITS = "".join(str(n) for n in range(1, BOARD_DIMENSIONS[1] + 1))


def is_valid_layout(layout: str) -> bool:
    try:
        parse_layout(layout)
    except InvalidLayoutError:
        return False
    return True


def parse_layout(layout: str) -> dict[Square, Cell]:
    """Read the layout string into the content of every square. Raises InvalidLayoutError if the string is malformed."""
    num_rows = BOARD_DIMENSIONS[0]
    row_layouts = layout.split("/")
    if len(row_layouts) != num_rows:
        raise InvalidLayoutError(
            f"Layout must describe {num_rows} rows, found {len(row_layouts)}: {layout!r}"
        )

    cells: dict[Square, Cell] = {}
    for row, row_layout in enumerate(row_layouts):
        cells.update(_parse_row(row, row_layout, layout))

    _check_royal_pieces(cells, layout)
    return cells


def _parse_row(row: int, row_layout: str, layout: str) -> dict[Square, Cell]:
    cells: dict[Square, Cell] = {}
    col = 0
    for idx, character in enumerate(row_layout):
        if character in EMPTY_RUN_DIGITS:
            for _ in range(int(character)):
                cells[Square(row, col)] = EMPTY
                col += 1
        elif character == COLLAPSED_MARKER:
            cells[Square(row, col)] = COLLAPSED
            col += 1
        elif character.lower() in LETTER_TO_PIECE:
            royal = row_layout[idx + 1 : idx + 2] == ROYAL_MARKER
            cells[Square(row, col)] = Occupied(Piece.from_letter(character, royal))
            col += 1
        elif (
            character == ROYAL_MARKER
            and idx > 0
            and row_layout[idx - 1].lower() in LETTER_TO_PIECE
        ):
            # already consumed together with the piece letter before it
            continue
        else:
            raise InvalidLayoutError(
                f"Unexpected character {character!r} in row {row} of layout {layout!r}"
            )

        if col > BOARD_DIMENSIONS[1]:
            break

    # make sure you are creating a correctly sized board
    if col != BOARD_DIMENSIONS[1]:
        raise InvalidLayoutError(
            f"Row {row} of layout {layout!r} covers {col} columns instead of {BOARD_DIMENSIONS[1]}"
        )
    return cells


def _check_royal_pieces(cells: dict[Square, Cell], layout: str) -> None:
    """A side holds at most one royal piece"""
    for color in Color:
        royals = [
            square
            for square, cell in cells.items()
            if isinstance(cell, Occupied)
            and cell.piece.royal
            and cell.piece.color == color
        ]
        if len(royals) > 1:
            raise InvalidLayoutError(
                f"{color.name.capitalize()} has {len(royals)} royal pieces in layout {layout!r}"
            )


def cells_to_layout(cells: dict[Square, Cell]) -> str:
    """Reverse operation: rows are separated by slashes"""
    return "/".join(_row_to_layout(cells, row) for row in range(BOARD_DIMENSIONS[0]))


def _row_to_layout(cells: dict[Square, Cell], row: int) -> str:
    characters: list[str] = []
    empty_count = 0
    for col in range(BOARD_DIMENSIONS[1]):
        cell = cells[Square(row, col)]
        if isinstance(cell, Empty):
            empty_count += 1
            continue

        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0

        if isinstance(cell, Collapsed):
            characters.append(COLLAPSED_MARKER)
        else:
            characters.append(cell.piece.to_letter())

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)
