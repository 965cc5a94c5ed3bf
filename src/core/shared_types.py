"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE The domain layer has its own (non-string) enums with the same member names. Conversion happens by member name
# --- (ex. Color[domain_color.name]), so keep both versions in sync.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class TargetKind(StrEnum):
    MOVE = "move"
    CAPTURE = "capture"


class Phase(StrEnum):
    AWAITING_SELECTION = "awaiting selection"
    PIECE_SELECTED = "piece selected"
    GAME_OVER = "game over"
