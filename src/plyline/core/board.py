"""Board - persistent piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from plyline.core.enums import Color, PieceType
from plyline.core.piece import Piece
from plyline.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board.

    Updates never touch the receiver: :meth:`put_piece` and
    :meth:`put_pieces` return a new board sharing nothing mutable with the
    old one, so boards can be freely shared between positions and threads.
    No legality invariant is enforced; any placement is representable.
    """

    __slots__ = ("_squares",)

    _squares: tuple[Piece | None, ...]

    def __init__(self, squares: tuple[Piece | None, ...] | None = None) -> None:
        if squares is None:
            squares = (None,) * 64
        elif len(squares) != 64:
            raise ValueError(f"A board needs 64 squares, got {len(squares)}")
        object.__setattr__(self, "_squares", tuple(squares))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Board is immutable")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def get(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Functional updates -------------------------------------------------

    def put_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Return a copy of this board with *sq* set to *piece* (or cleared)."""
        return self.put_pieces({sq: piece})

    def put_pieces(self, updates: Mapping[Square, Piece | None]) -> Board:
        """Return a copy of this board with every update in *updates* applied."""
        squares = list(self._squares)
        for sq, piece in updates.items():
            squares[sq] = piece
        return Board(tuple(squares))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        squares: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            squares[make_square(f, 0)] = Piece(Color.WHITE, pt)
            squares[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            squares[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            squares[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(tuple(squares))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
