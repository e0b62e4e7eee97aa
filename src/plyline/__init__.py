"""plyline - chess position replay from structured move descriptors."""

from plyline.core import (
    Board,
    Castle,
    CastleSide,
    CastlingRights,
    ChessError,
    Color,
    NormalMove,
    Piece,
    PieceType,
    Position,
    Scanner,
)
from plyline.game import GameHistory

__all__ = [
    "Board",
    "Castle",
    "CastleSide",
    "CastlingRights",
    "ChessError",
    "Color",
    "GameHistory",
    "NormalMove",
    "Piece",
    "PieceType",
    "Position",
    "Scanner",
]

__version__ = "0.1.0"
