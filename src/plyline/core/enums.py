"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto

from plyline.core.errors import ChessError, ColorDecodeError


class Color(IntEnum):
    """Side color. The integer value is the external active-colour encoding."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def decode(cls, value: object) -> Color:
        """Decode the active-colour integer (0 = white, 1 = black)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ColorDecodeError(f"Invalid active colour: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ColorDecodeError(f"Invalid active colour: {value!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastleSide(Enum):
    """Which rook the king castles with."""

    SHORT = "short"
    LONG = "long"


class CastlingRights(IntFlag):
    """Bitmask for castling availability (1, 2, 4, 8 as exchanged externally)."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def of(cls, color: Color, side: CastleSide) -> CastlingRights:
        """The single right for *color* castling towards *side*."""
        if color == Color.WHITE:
            if side == CastleSide.SHORT:
                return cls.WHITE_KINGSIDE
            return cls.WHITE_QUEENSIDE
        if side == CastleSide.SHORT:
            return cls.BLACK_KINGSIDE
        return cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH

    @classmethod
    def decode(cls, value: object) -> CastlingRights:
        """Decode the castling-availability integer (0-15)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ChessError(f"Invalid castling availability: {value!r}")
        if not 0 <= value <= int(cls.ALL):
            raise ChessError(f"Invalid castling availability: {value!r}")
        return cls(value)
