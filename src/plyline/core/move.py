"""Move descriptors, as produced by an algebraic-notation reader.

A descriptor names what moved and where to, not where from: the origin
square is resolved against a position by :meth:`Position.make`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from plyline.core.enums import CastleSide, PieceType
from plyline.core.piece import piece_letter
from plyline.core.types import (
    FILE_NAMES,
    Square,
    coordinate_from_int,
    file_of,
    rank_of,
    square_from_int,
    square_name,
)


@dataclass(frozen=True, slots=True)
class FileDisambiguity:
    """The moving piece stands on *file* (0–7), as in ``Nbd2``."""

    file: int

    def __post_init__(self) -> None:
        coordinate_from_int(self.file, "file")

    def matches(self, sq: Square) -> bool:
        return file_of(sq) == self.file

    def __str__(self) -> str:
        return FILE_NAMES[self.file]


@dataclass(frozen=True, slots=True)
class RankDisambiguity:
    """The moving piece stands on *rank* (0–7), as in ``R1e2``."""

    rank: int

    def __post_init__(self) -> None:
        coordinate_from_int(self.rank, "rank")

    def matches(self, sq: Square) -> bool:
        return rank_of(sq) == self.rank

    def __str__(self) -> str:
        return str(self.rank + 1)


Disambiguity: TypeAlias = FileDisambiguity | RankDisambiguity


@dataclass(frozen=True, slots=True)
class Castle:
    """Castling towards *side*; the colour is whoever is to move."""

    side: CastleSide

    def __str__(self) -> str:
        return "O-O" if self.side == CastleSide.SHORT else "O-O-O"


@dataclass(frozen=True, slots=True)
class NormalMove:
    """Any move other than castling.

    Only squares, files and ranks are validated. Whether *promotion* suits
    the piece and square is left to the caller; whatever is given is placed
    on the destination.
    """

    piece_type: PieceType
    destination: Square
    disambiguity: Disambiguity | None = None
    capture: bool = False
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        square_from_int(self.destination)

    def __str__(self) -> str:
        text = "" if self.piece_type == PieceType.PAWN else piece_letter(self.piece_type)
        if self.disambiguity is not None:
            text += str(self.disambiguity)
        if self.capture:
            text += "x"
        text += square_name(self.destination)
        if self.promotion is not None:
            text += "=" + piece_letter(self.promotion)
        return text


Move: TypeAlias = Castle | NormalMove
