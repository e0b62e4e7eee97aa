"""Notation package: FEN placement and wire encodings of a position."""

from plyline.core.notation.encoding import (
    position_from_dict,
    position_query_params,
    position_to_dict,
    position_to_json,
    position_to_query,
)
from plyline.core.notation.fen import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    placement_fen,
)

__all__ = [
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
