"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.collapse_chess.board import Board
from src.collapse_chess.game import GameEngine
from src.collapse_chess.pieces import Color


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


@pytest.fixture
def engine() -> GameEngine:
    """A fresh game: White to move, pieces on their starting squares"""
    return GameEngine.new_game()


@pytest.fixture
def engine_from_layout() -> Callable[[str, Color], GameEngine]:
    """Call the inner function with the desired layout (and color to move)"""

    def _create_engine(layout: str, turn: Color = Color.WHITE) -> GameEngine:
        return GameEngine.from_layout(layout, turn)

    return _create_engine
