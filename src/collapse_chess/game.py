"""
The GameEngine is the entrypoint into the domain layer for the service layer.
It owns the Board and the GameState of one game, and orchestrates a turn:
selecting a piece, looking up its legal targets, and executing the chosen move (capture-collapse, promotion, win condition).

Selections / commits that break the rules are not errors: they are ignored and the state is left unchanged,
so the presentation layer can simply re-render.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.collapse_chess.board import Board
from src.collapse_chess.layout import STARTING_LAYOUT
from src.collapse_chess.moves import (
    LegalTargets,
    TargetKind,
    is_promotion_square,
    legal_targets,
)
from src.collapse_chess.pieces import Color, Piece, PieceType
from src.collapse_chess.square import Square
from src.core.exceptions import OutOfBoundsError

logger = logging.getLogger(__name__)

ROYAL_CAPTURE_REASON = "royal piece captured"


class Phase(Enum):
    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    turn: Color = Color.WHITE
    phase: Phase = Phase.AWAITING_SELECTION
    selected: Optional[Square] = None
    legal_targets: LegalTargets = field(default_factory=dict)
    winner: Optional[Color] = None
    reason: Optional[str] = None
    last_message: str = ""

    @property
    def game_over(self) -> bool:
        return self.phase == Phase.GAME_OVER


def turn_message(color: Color) -> str:
    return f"{color.name.capitalize()} to move"


def win_message(color: Color, captured: Piece) -> str:
    return f"{color.name.capitalize()} wins! Captured the royal {captured.type.name.lower()}"


class GameEngine:
    # --- DOMAIN LAYER API CALLED BY SERVICE ---

    def __init__(self, board: Board, turn: Color = Color.WHITE) -> None:
        self.board = board
        self.state = GameState(turn=turn, last_message=turn_message(turn))

    @classmethod
    def new_game(cls) -> Self:
        """White to move, pieces in their starting position"""
        return cls(Board.starting_position())

    @classmethod
    def from_layout(
        cls, layout: str = STARTING_LAYOUT, turn: Color = Color.WHITE
    ) -> Self:
        """Start playing from any position (see layout.py for the notation)"""
        return cls(Board.from_layout(layout), turn)

    def reset(self) -> GameState:
        """Back to the starting position, from any state (also after the game ended)."""
        self.board = Board.starting_position()
        self.state = GameState(last_message=turn_message(Color.WHITE))
        logger.info("Game reset to the starting position")
        return self.state

    def current_legal_targets(self) -> LegalTargets:
        return dict(self.state.legal_targets)

    def is_game_over(self) -> bool:
        return self.state.game_over

    def winner_and_reason(self) -> Optional[tuple[Color, str]]:
        if self.state.winner is None or self.state.reason is None:
            return None
        return self.state.winner, self.state.reason

    def select_or_move(self, square: Square) -> GameState:
        """
        Single entry point for clicks on a square.
        ----

        If a piece is selected and the square is one of its legal targets, the move gets executed.
        Otherwise the click is treated as a (new) selection.
        """
        self._assert_within_bounds(square)
        if self.state.game_over:
            logger.debug("Ignoring %s: the game is over", square)
            return self.state

        if (
            self.state.phase == Phase.PIECE_SELECTED
            and self.state.selected is not None
            and square in self.state.legal_targets
        ):
            return self.execute(self.state.selected, square)
        return self.select(square)

    def select(self, square: Square) -> GameState:
        """
        Select the piece on the square
        ----

        * Collapsed square: ignored
        * Own piece (not yet selected): becomes the selection, legal targets are computed
        * Empty square, opponent's piece, or the piece that was already selected: the selection is cleared
        """
        self._assert_within_bounds(square)
        if self.state.game_over:
            return self.state

        if self.board.is_collapsed(square):
            logger.debug("Ignoring selection of collapsed square %s", square)
            return self.state

        piece = self.board.piece_at(square)
        if (
            piece is None
            or piece.color != self.state.turn
            or square == self.state.selected
        ):
            self._clear_selection()
            return self.state

        self.state.selected = square
        self.state.legal_targets = legal_targets(self.board, square)
        self.state.phase = Phase.PIECE_SELECTED
        return self.state

    def execute(self, from_square: Square, to_square: Square) -> GameState:
        """
        Attempt to make a move
        -----

        1. Taking the opponent's royal piece ends the game (no collapse, no promotion)
        2. Remember if this is a capture, BEFORE the board gets updated
        3. update the board
        4. promote a pawn that reached the farthest row into a knight
        5. a capture collapses the target square: both the captured and the capturing piece are gone
        6. pass the turn to the opponent

        Moves that are not legal are ignored.
        """
        self._assert_within_bounds(from_square)
        self._assert_within_bounds(to_square)
        if not self._is_legal(from_square, to_square):
            logger.debug("Ignoring illegal move %s -> %s", from_square, to_square)
            return self.state

        moving_piece = self.board.piece_at(from_square)
        target_piece = self.board.piece_at(to_square)
        # for the type checker: _is_legal made sure a piece is standing on the from_square
        assert moving_piece is not None

        # 1. Royal capture ends the game immediately
        if target_piece is not None and target_piece.royal:
            self._move_piece(moving_piece, from_square, to_square)
            self._end_game(moving_piece.color, target_piece)
            return self.state

        # 2. NOTE a legal target that holds a piece always holds an opponent's piece
        is_capture = (
            target_piece is not None and target_piece.color != moving_piece.color
        )

        # 3.
        self._move_piece(moving_piece, from_square, to_square)

        # 4.
        if is_promotion_square(moving_piece, to_square):
            self.board.place(to_square, moving_piece.promote_to(PieceType.KNIGHT))
            logger.info("Pawn promoted to knight on %s", to_square)

        # 5. collapse overrides the promotion
        if is_capture:
            self.board.collapse(to_square)
            logger.info("Square %s collapsed after capture", to_square)

        # 6.
        self._pass_turn()
        return self.state

    # -- PRIVATE HELPERS ---
    def _is_legal(self, from_square: Square, to_square: Square) -> bool:
        if self.state.game_over:
            return False

        piece = self.board.piece_at(from_square)
        if piece is None or piece.color != self.state.turn:
            return False

        return to_square in legal_targets(self.board, from_square)

    def _move_piece(
        self, piece: Piece, from_square: Square, to_square: Square
    ) -> None:
        kind = (
            TargetKind.CAPTURE if self.board.is_occupied(to_square) else TargetKind.MOVE
        )
        self.board.place(to_square, piece)
        self.board.clear(from_square)
        logger.info(
            "%s %s %s -> %s (%s)",
            piece.color.name.capitalize(),
            piece.type.name.lower(),
            from_square,
            to_square,
            kind.name.lower(),
        )

    def _clear_selection(self) -> None:
        self.state.selected = None
        self.state.legal_targets = {}
        self.state.phase = Phase.AWAITING_SELECTION

    def _pass_turn(self) -> None:
        self._clear_selection()
        self.state.turn = self.state.turn.opponent
        self.state.last_message = turn_message(self.state.turn)

    def _end_game(self, winner: Color, captured: Piece) -> None:
        self._clear_selection()
        self.state.phase = Phase.GAME_OVER
        self.state.winner = winner
        self.state.reason = ROYAL_CAPTURE_REASON
        self.state.last_message = win_message(winner, captured)
        logger.info("Game over: %s", self.state.last_message)

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(f"Square {square} lies outside of the board.")
