"""Orchestration of communication from the presentation layer to the game engine (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import GameResponse, LegalTargetsResponse, SelectRequest
from src.collapse_chess.game import GameEngine, GameState
from src.collapse_chess.moves import LegalTargets
from src.collapse_chess.square import Square
from src.core.shared_types import Color, Phase, TargetKind

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for a single game."""

    def __init__(self, engine: Optional[GameEngine] = None) -> None:
        self.engine = engine if engine is not None else GameEngine.new_game()

    # -- Presentation layer logic ---
    def new_game(self) -> GameResponse:
        """Start over: the (possibly finished) game is replaced by a fresh one."""
        state = self.engine.reset()
        return self._create_game_response(state)

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state, ex. to re-render the board."""
        return self._create_game_response(self.engine.state)

    def select_or_move(self, request: SelectRequest) -> GameResponse:
        """A square got clicked: select a piece, or move the selected piece there."""
        square = Square.from_algebraic(request.square)
        state = self.engine.select_or_move(square)
        logger.debug("Handled click on %s: %s", request.square, state.last_message)
        return self._create_game_response(state)

    def legal_targets(self) -> LegalTargetsResponse:
        """Targets of the currently selected piece (empty if nothing is selected)"""
        selected = self.engine.state.selected
        return LegalTargetsResponse(
            selected=selected.to_algebraic() if selected else None,
            legal_targets=self._convert_targets(self.engine.current_legal_targets()),
        )

    # -- Internal helpers --
    def _create_game_response(self, state: GameState) -> GameResponse:
        """Convert the engine's GameState into a GameResponse"""
        return GameResponse(
            layout=self.engine.board.to_layout(),
            turn=Color[state.turn.name],
            phase=Phase[state.phase.name],
            selected=state.selected.to_algebraic() if state.selected else None,
            legal_targets=self._convert_targets(state.legal_targets),
            game_over=state.game_over,
            winner=Color[state.winner.name] if state.winner else None,
            reason=state.reason,
            message=state.last_message,
        )

    def _convert_targets(self, targets: LegalTargets) -> dict[str, TargetKind]:
        return {
            square.to_algebraic(): TargetKind[kind.name]
            for square, kind in targets.items()
        }
