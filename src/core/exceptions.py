"""
Custom exceptions shared by all layers.

Business-rule violations (selecting a foreign piece, committing to a square that is not a legal target, ...)
are NOT errors in this game: the engine silently ignores them. Only out-of-domain input raises.
"""


class GameError(Exception):
    """Base class for every error raised by the game packages"""


class OutOfBoundsError(GameError):
    """A square outside of the 6x6 grid was used to access the board. Programming error on the caller's side."""


class InvalidLayoutError(GameError):
    """A layout string could not be interpreted as a board position"""


class InvalidRequestError(GameError):
    """Request data from the presentation layer failed validation"""
