"""Defines the types of pieces in play"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    ROOK = auto()
    KNIGHT = auto()
    PAWN = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


LETTER_TO_PIECE: dict[str, PieceType] = {
    "r": PieceType.ROOK,
    "n": PieceType.KNIGHT,
    "p": PieceType.PAWN,
}

PIECE_TO_LETTER: dict[PieceType, str] = {
    value: key for key, value in LETTER_TO_PIECE.items()
}

# marks the royal piece in layout notation, written right after the piece letter
ROYAL_MARKER = "*"


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color
    royal: bool = False

    @classmethod
    def from_letter(cls, character: str, royal: bool = False) -> Self:
        # upper case: White pieces, lower case: Black pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = LETTER_TO_PIECE[character.lower()]
        return cls(piece_type, color, royal)

    def to_letter(self) -> str:
        letter = (
            PIECE_TO_LETTER[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_LETTER[self.type].lower()
        )
        return f"{letter}{ROYAL_MARKER}" if self.royal else letter

    def promote_to(self, new_type: PieceType) -> Self:
        """A promoted piece keeps its color but is never royal"""
        return replace(self, type=new_type, royal=False)
