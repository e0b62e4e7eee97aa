"""Core domain layer - pure chess logic with zero external dependencies.

Quick start::

    from plyline.core import Castle, CastleSide, NormalMove, PieceType, Position
    from plyline.core.types import E4

    pos = Position.initial()
    pos = pos.make(NormalMove(PieceType.PAWN, E4))
    print(pos.fen(), pos.en_passant)
"""

from plyline.core.board import Board
from plyline.core.enums import CastleSide, CastlingRights, Color, PieceType
from plyline.core.errors import (
    BoardParseError,
    ChessError,
    ColorDecodeError,
    SourceNotFoundError,
    SquareDecodeError,
)
from plyline.core.move import (
    Castle,
    Disambiguity,
    FileDisambiguity,
    Move,
    NormalMove,
    RankDisambiguity,
)
from plyline.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    placement_fen,
    position_from_dict,
    position_query_params,
    position_to_dict,
    position_to_json,
    position_to_query,
)
from plyline.core.piece import Piece
from plyline.core.position import Position
from plyline.core.scanner import Scanner
from plyline.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_from_int,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "BoardParseError",
    "ChessError",
    "ColorDecodeError",
    "SourceNotFoundError",
    "SquareDecodeError",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_from_int",
    "square_name",
    # Domain objects
    "Board",
    "Castle",
    "Disambiguity",
    "FileDisambiguity",
    "Move",
    "NormalMove",
    "Piece",
    "Position",
    "RankDisambiguity",
    "Scanner",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "placement_fen",
    "position_from_dict",
    "position_query_params",
    "position_to_dict",
    "position_to_json",
    "position_to_query",
]
