"""FEN piece-placement parsing and serialization.

Only the first FEN field is handled here. Side to move, castling rights and
en passant travel separately (see :mod:`plyline.core.notation.encoding`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plyline.core.board import Board
from plyline.core.errors import BoardParseError
from plyline.core.piece import Piece
from plyline.core.types import make_square

if TYPE_CHECKING:
    from plyline.core.position import Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`."""
    if not isinstance(placement, str):
        raise BoardParseError(f"FEN placement must be a string: {placement!r}")
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise BoardParseError(
            f"Invalid FEN placement (need 8 ranks, got {len(ranks)}): {placement!r}"
        )

    updates: dict[int, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
                continue
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                raise BoardParseError(
                    f"Invalid FEN character {ch!r}: {placement!r}"
                ) from None
            if file < 8:
                updates[make_square(file, rank)] = piece
            file += 1
        if file != 8:
            raise BoardParseError(
                f"Invalid FEN rank {rank_text!r} ({file} squares): {placement!r}"
            )
    return Board.empty().put_pieces(updates)


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to a FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def placement_fen(position: Position) -> str:
    """Board placement of *position*; no colour, rights, en passant or clocks."""
    return board_to_fen(position.board)
