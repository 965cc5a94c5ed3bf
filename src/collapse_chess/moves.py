"""
Movement and capturing rules

Key idea: Use strategy pattern to define the legal targets for each piece type.

There is no check / pin concept in this variant: every target allowed by the movement rules is legal.
Collapsed squares act as walls: they are never a target, and sliding pieces cannot see past them.
"""

from enum import Enum, auto
from typing import Callable, Optional, Protocol

from src.collapse_chess.pieces import Color, Piece, PieceType
from src.collapse_chess.square import BOARD_DIMENSIONS, Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, square: Square) -> Optional[Piece]: ...
    def is_collapsed(self, square: Square) -> bool: ...


class TargetKind(Enum):
    MOVE = auto()
    CAPTURE = auto()


Vector = tuple[int, int]  # (delta row, delta column)
LegalTargets = dict[Square, TargetKind]

ORTHOGONALS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
KNIGHT_DELTAS: list[Vector] = [
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
]


def forward(color: Color) -> int:
    """White moves UP the board (towards row 0), Black moves DOWN (towards row 5)"""
    return -1 if color == Color.WHITE else 1


# --- MOVEMENT RULES ---
def raycasting_targets(
    square: Square, board: Board, directions: list[Vector]
) -> LegalTargets:
    """
    Raycasting algorithm
    -----

    Walk along every direction until hitting the edge of the board, a collapsed square, or a piece.
    The first piece found is only a target if it belongs to the opponent.
    """
    player_color = _moving_piece(square, board).color

    targets: LegalTargets = {}
    for d_row, d_col in directions:
        target_square = square
        while True:
            target_square = target_square.offset(d_row, d_col)
            if not target_square.is_within_bounds():
                break

            if board.is_collapsed(target_square):
                break

            occupant = board.piece_at(target_square)
            if occupant is not None:
                if occupant.color != player_color:
                    targets[target_square] = TargetKind.CAPTURE
                break

            targets[target_square] = TargetKind.MOVE
    return targets


def single_step_targets(
    square: Square, board: Board, deltas: list[Vector]
) -> LegalTargets:
    """Raycasting is for sliding pieces. This is the equivalent for pieces that jump straight to their target square"""
    player_color = _moving_piece(square, board).color

    targets: LegalTargets = {}
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        if board.is_collapsed(target_square):
            continue

        occupant = board.piece_at(target_square)
        if occupant is None:
            targets[target_square] = TargetKind.MOVE
        elif occupant.color != player_color:
            targets[target_square] = TargetKind.CAPTURE
    return targets


def pawn_targets(square: Square, board: Board) -> LegalTargets:
    """
    A pawn:
    - moves a single square forward, only onto an empty square (no double step, never takes straight ahead)
    - takes diagonally forward, only onto an opponent's piece
    """
    player_color = _moving_piece(square, board).color
    d_row = forward(player_color)

    targets: LegalTargets = {}
    push_square = square.offset(d_row, 0)
    if (
        push_square.is_within_bounds()
        and not board.is_collapsed(push_square)
        and board.piece_at(push_square) is None
    ):
        targets[push_square] = TargetKind.MOVE

    for d_col in [-1, 1]:
        take_square = square.offset(d_row, d_col)
        if not take_square.is_within_bounds() or board.is_collapsed(take_square):
            continue

        occupant = board.piece_at(take_square)
        if occupant is not None and occupant.color != player_color:
            targets[take_square] = TargetKind.CAPTURE
    return targets


def rook_targets(square: Square, board: Board) -> LegalTargets:
    """Rooks slide either horizontally or vertically"""
    return raycasting_targets(square, board, ORTHOGONALS)


def knight_targets(square: Square, board: Board) -> LegalTargets:
    """Knights always jump such that |delta_row| + |delta_col| = 3, ignoring whatever stands in between"""
    return single_step_targets(square, board, KNIGHT_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
TargetsFn = Callable[[Square, Board], LegalTargets]
MOVEMENT_RULES: dict[PieceType, TargetsFn] = {
    PieceType.ROOK: rook_targets,
    PieceType.KNIGHT: knight_targets,
    PieceType.PAWN: pawn_targets,
}


def legal_targets(board: Board, square: Square) -> LegalTargets:
    """
    Legal targets of the piece standing on the given square
    ----

    An empty or collapsed square has no targets. Returns a fresh mapping; nothing keeps a reference to the board.
    """
    piece = board.piece_at(square)
    if piece is None:
        return {}
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(square, board)


def is_promotion_square(piece: Piece, square: Square) -> bool:
    """A pawn promotes once it reaches the opponent's back rank"""
    if piece.type != PieceType.PAWN:
        return False
    farthest_row = 0 if piece.color == Color.WHITE else BOARD_DIMENSIONS[0] - 1
    return square.row == farthest_row


def _moving_piece(square: Square, board: Board) -> Piece:
    piece = board.piece_at(square)
    # for the type checker: the strategies are only called for occupied squares
    assert piece is not None
    return piece
