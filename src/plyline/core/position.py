"""Position - board plus side to move, castling rights and en passant."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Final

from plyline.core.board import Board
from plyline.core.enums import CastleSide, CastlingRights, Color, PieceType
from plyline.core.errors import SourceNotFoundError
from plyline.core.move import Castle, Move, NormalMove
from plyline.core.notation.fen import board_from_fen, board_to_fen
from plyline.core.piece import Piece
from plyline.core.scanner import PAWN_HOME_RANK, Scanner
from plyline.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
    file_of,
    make_square,
    rank_of,
    square_from_int,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

# (king from, king to, rook from, rook to) per colour and side.
_CASTLE_SQUARES: Final[dict[tuple[Color, CastleSide], tuple[Square, ...]]] = {
    (Color.WHITE, CastleSide.SHORT): (E1, G1, H1, F1),
    (Color.WHITE, CastleSide.LONG): (E1, C1, A1, D1),
    (Color.BLACK, CastleSide.SHORT): (E8, G8, H8, F8),
    (Color.BLACK, CastleSide.LONG): (E8, C8, A8, D8),
}

# Rights lost whenever a move starts or ends on one of these squares.
_RIGHTS_SQUARES: Final[dict[Square, CastlingRights]] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    E1: CastlingRights.WHITE_BOTH,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    E8: CastlingRights.BLACK_BOTH,
    H8: CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable chess position.

    :meth:`make` never changes the receiver; it returns the position after
    the move. Keeping the sequence of positions (for stepping back through a
    game) is up to the caller, see :class:`plyline.game.GameHistory`.
    """

    board: Board
    castling: CastlingRights = CastlingRights.ALL
    side_to_move: Color = Color.WHITE
    en_passant: Square | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, white to move with all rights."""
        return cls(Board.initial())

    @classmethod
    def empty(cls) -> Position:
        return cls(Board.empty(), CastlingRights.NONE)

    @classmethod
    def specific(
        cls,
        fen_placement: str,
        castling: int,
        color: int,
        en_passant: int | None = None,
    ) -> Position:
        """Build a position from its externally encoded parts.

        Fields are decoded in order (board, castling, colour, en passant) and
        the first failure is raised.
        """
        board = board_from_fen(fen_placement)
        rights = CastlingRights.decode(castling)
        side = Color.decode(color)
        ep = None if en_passant is None else square_from_int(en_passant)
        return cls(board, rights, side, ep)

    # ── Move application ─────────────────────────────────────────────────

    def make(self, move: Move) -> Position:
        """Return the position after *move* is played by the side to move.

        Raises :class:`SourceNotFoundError` when no piece of the right kind
        can have made a normal move.
        """
        color = self.side_to_move
        if isinstance(move, Castle):
            king_from, king_to, rook_from, rook_to = _CASTLE_SQUARES[
                (color, move.side)
            ]
            board = self.board.put_pieces(
                {
                    king_from: None,
                    rook_from: None,
                    king_to: Piece(color, PieceType.KING),
                    rook_to: Piece(color, PieceType.ROOK),
                }
            )
            return Position(
                board=board,
                castling=self._castling_after(king_from, king_to),
                side_to_move=color.opposite,
                en_passant=None,
            )

        source = self._resolve_source(move)
        placed = Piece(color, move.promotion or move.piece_type)
        updates: dict[Square, Piece | None] = {source: None}
        is_pawn = move.piece_type == PieceType.PAWN
        if is_pawn and move.capture and move.destination == self.en_passant:
            updates[make_square(file_of(move.destination), rank_of(source))] = None
        updates[move.destination] = placed

        return Position(
            board=self.board.put_pieces(updates),
            castling=self._castling_after(source, move.destination),
            side_to_move=color.opposite,
            en_passant=_en_passant_after(move, source, color),
        )

    def _resolve_source(self, move: NormalMove) -> Square:
        wanted = Piece(self.side_to_move, move.piece_type)
        disambiguity = move.disambiguity

        def predicate(sq: Square, board: Board) -> bool:
            if board[sq] != wanted:
                return False
            return disambiguity is None or disambiguity.matches(sq)

        found = list(
            Scanner(self.board).candidates(
                move.piece_type,
                move.destination,
                predicate,
                color=self.side_to_move,
                capture=move.capture,
            )
        )
        if not found:
            raise SourceNotFoundError(move.piece_type, move)
        if len(found) > 1:
            _LOGGER.debug(
                "Ambiguous %s: candidates %s, using %s",
                move,
                ", ".join(square_name(sq) for sq in found),
                square_name(found[0]),
            )
        return found[0]

    def _castling_after(self, source: Square, destination: Square) -> CastlingRights:
        rights = self.castling
        for sq in (source, destination):
            lost = _RIGHTS_SQUARES.get(sq)
            if lost is not None:
                rights &= ~lost
        return rights

    # ── Castling rights ──────────────────────────────────────────────────

    def can_castle(self, color: Color, side: CastleSide) -> bool:
        return bool(self.castling & CastlingRights.of(color, side))

    def set_castle(self, color: Color, side: CastleSide, enabled: bool) -> Position:
        """Copy of this position with one castling right set or cleared."""
        right = CastlingRights.of(color, side)
        castling = self.castling | right if enabled else self.castling & ~right
        return replace(self, castling=castling)

    # ── Utilities ────────────────────────────────────────────────────────

    def fen(self) -> str:
        """FEN piece placement only (see :func:`placement_fen`)."""
        return board_to_fen(self.board)


def _en_passant_after(move: NormalMove, source: Square, color: Color) -> Square | None:
    if move.piece_type != PieceType.PAWN:
        return None
    if rank_of(source) != PAWN_HOME_RANK[color]:
        return None
    if abs(rank_of(move.destination) - rank_of(source)) != 2:
        return None
    return make_square(
        file_of(source), (rank_of(source) + rank_of(move.destination)) // 2
    )
