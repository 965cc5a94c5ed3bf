"""
The three states a single square of the board can be in.

A cell is either Empty, Occupied by a piece, or Collapsed. Collapsed is terminal: a square that collapsed
stays collapsed for the rest of the game.
"""

from dataclasses import dataclass

from src.collapse_chess.pieces import Piece


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Occupied:
    piece: Piece


@dataclass(frozen=True)
class Collapsed:
    pass


Cell = Empty | Occupied | Collapsed

EMPTY = Empty()
COLLAPSED = Collapsed()
