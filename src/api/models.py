"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.collapse_chess.square import FILE_NAMES, RANK_NAMES
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Phase, TargetKind

SquareName = str


# --- REQUEST MODELS ---
class SelectRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False

            file_character = value[0]
            rank_character = value[1]
            return file_character in FILE_NAMES and rank_character in RANK_NAMES

        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    layout: str
    turn: Color
    phase: Phase
    selected: Optional[SquareName]
    legal_targets: dict[SquareName, TargetKind]
    game_over: bool
    winner: Optional[Color]
    reason: Optional[str]
    message: str


class LegalTargetsResponse(BaseModel):
    selected: Optional[SquareName]
    legal_targets: dict[SquareName, TargetKind]
