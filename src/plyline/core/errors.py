"""Exceptions raised by the chess core.

Every error derives from :class:`ChessError`, itself a :class:`ValueError`,
so callers that only care about "bad input" can catch ``ValueError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plyline.core.enums import PieceType
    from plyline.core.move import Move


class ChessError(ValueError):
    """Base class for all chess-core failures."""


class BoardParseError(ChessError):
    """A FEN piece-placement field is malformed."""


class ColorDecodeError(ChessError):
    """An active-colour value is not one of the known encodings."""


class SquareDecodeError(ChessError):
    """A square index is outside 0-63 or otherwise invalid."""


class SourceNotFoundError(ChessError):
    """No square holds a piece that could have made the move."""

    def __init__(self, piece_type: PieceType, move: Move) -> None:
        self.piece_type = piece_type
        self.move = move
        super().__init__(
            f"No {piece_type.name.lower()} can reach the destination of {move}"
        )
