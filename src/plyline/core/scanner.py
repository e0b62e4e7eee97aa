"""Source-square resolution: which square did a piece come from?

Given a destination and a piece kind, the :class:`Scanner` walks that
kind's movement geometry *backwards* from the destination and reports the
squares that satisfy a caller-supplied predicate. It never generates legal
moves; pins and checks are not considered.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Final

from plyline.core.board import Board
from plyline.core.enums import Color, PieceType
from plyline.core.errors import ChessError
from plyline.core.types import (
    Square,
    file_of,
    make_square,
    on_board,
    rank_of,
    square_from_int,
)

Predicate = Callable[[Square, Board], bool]

KNIGHT_OFFSETS: Final[tuple[tuple[int, int], ...]] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Final[tuple[tuple[int, int], ...]] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: Final[tuple[tuple[int, int], ...]] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Final[tuple[tuple[int, int], ...]] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Final[tuple[tuple[int, int], ...]] = BISHOP_DIRS + ROOK_DIRS

# Rank direction a pawn of each colour advances in, and the rank it starts on.
PAWN_PUSH: Final[dict[Color, int]] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_HOME_RANK: Final[dict[Color, int]] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        targets.append(
            tuple(
                make_square(file_idx + df, rank_idx + dr)
                for df, dr in offsets
                if on_board(file_idx + df, rank_idx + dr)
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            ray: list[Square] = []
            while on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class Scanner:
    """Locates candidate origin squares on a fixed :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def find(
        self,
        piece_type: PieceType,
        destination: Square,
        predicate: Predicate,
        *,
        color: Color = Color.WHITE,
        capture: bool = False,
    ) -> Square | None:
        """First square a *piece_type* could have reached *destination* from.

        *color* and *capture* only matter for pawns. Returns ``None`` when no
        square along the geometry satisfies *predicate*.
        """
        return next(
            self.candidates(
                piece_type, destination, predicate, color=color, capture=capture
            ),
            None,
        )

    def candidates(
        self,
        piece_type: PieceType,
        destination: Square,
        predicate: Predicate,
        *,
        color: Color = Color.WHITE,
        capture: bool = False,
    ) -> Iterator[Square]:
        """Every matching origin square, in scan order."""
        square_from_int(destination)
        if piece_type == PieceType.PAWN:
            return self.pawn(color, capture, destination, predicate)
        if piece_type == PieceType.KNIGHT:
            return self.knight(destination, predicate)
        if piece_type == PieceType.BISHOP:
            return self.bishop(destination, predicate)
        if piece_type == PieceType.ROOK:
            return self.rook(destination, predicate)
        if piece_type == PieceType.QUEEN:
            return self.queen(destination, predicate)
        if piece_type == PieceType.KING:
            return self.king(destination, predicate)
        raise ChessError(f"Unknown piece type: {piece_type!r}")

    # -- Per-kind geometry --------------------------------------------------

    def knight(self, destination: Square, predicate: Predicate) -> Iterator[Square]:
        return self._leap(_KNIGHT_TARGETS[destination], predicate)

    def king(self, destination: Square, predicate: Predicate) -> Iterator[Square]:
        return self._leap(_KING_TARGETS[destination], predicate)

    def bishop(self, destination: Square, predicate: Predicate) -> Iterator[Square]:
        return self._slide(_BISHOP_RAYS[destination], predicate)

    def rook(self, destination: Square, predicate: Predicate) -> Iterator[Square]:
        return self._slide(_ROOK_RAYS[destination], predicate)

    def queen(self, destination: Square, predicate: Predicate) -> Iterator[Square]:
        return self._slide(_QUEEN_RAYS[destination], predicate)

    def pawn(
        self,
        color: Color,
        capture: bool,
        destination: Square,
        predicate: Predicate,
    ) -> Iterator[Square]:
        board = self._board
        file_idx = file_of(destination)
        behind = rank_of(destination) - PAWN_PUSH[color]
        if not 0 <= behind < 8:
            return

        if capture:
            for df in (-1, 1):
                if on_board(file_idx + df, behind):
                    sq = make_square(file_idx + df, behind)
                    if predicate(sq, board):
                        yield sq
            return

        one_back = make_square(file_idx, behind)
        if not board.is_empty(one_back):
            if predicate(one_back, board):
                yield one_back
            return

        # Double push: only from the home rank, over an empty square.
        two_behind = behind - PAWN_PUSH[color]
        if two_behind == PAWN_HOME_RANK[color]:
            two_back = make_square(file_idx, two_behind)
            if predicate(two_back, board):
                yield two_back

    # -- Internals ----------------------------------------------------------

    def _leap(
        self, targets: tuple[Square, ...], predicate: Predicate
    ) -> Iterator[Square]:
        board = self._board
        for sq in targets:
            if predicate(sq, board):
                yield sq

    def _slide(
        self,
        rays: tuple[tuple[Square, ...], ...],
        predicate: Predicate,
    ) -> Iterator[Square]:
        board = self._board
        for ray in rays:
            for sq in ray:
                if board.is_empty(sq):
                    continue
                if predicate(sq, board):
                    yield sq
                break
