"""Wire encodings of a position for the move-search service.

The service identifies a position by four fields::

    fen_position           FEN piece placement
    castling_availability  4-bit castling mask (1=K, 2=Q, 4=k, 8=q)
    active_colour          0 = white, 1 = black
    en_passant             square index 0-63, omitted when there is none
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final
from urllib.parse import urlencode

from plyline.core.errors import ChessError
from plyline.core.notation.fen import board_to_fen

if TYPE_CHECKING:
    from plyline.core.position import Position

FEN_POSITION: Final = "fen_position"
CASTLING_AVAILABILITY: Final = "castling_availability"
ACTIVE_COLOUR: Final = "active_colour"
EN_PASSANT: Final = "en_passant"


def position_to_dict(position: Position) -> dict[str, Any]:
    """Structured form of *position*; ``en_passant`` only when present."""
    data: dict[str, Any] = {
        FEN_POSITION: board_to_fen(position.board),
        CASTLING_AVAILABILITY: int(position.castling),
        ACTIVE_COLOUR: int(position.side_to_move),
    }
    if position.en_passant is not None:
        data[EN_PASSANT] = position.en_passant
    return data


def position_to_json(position: Position) -> str:
    return json.dumps(position_to_dict(position))


def position_query_params(position: Position) -> list[tuple[str, str]]:
    """Query parameters in a stable order, ``en_passant`` only when present."""
    return [(key, str(value)) for key, value in position_to_dict(position).items()]


def position_to_query(position: Position) -> str:
    """URL-encoded query string, e.g. ``fen_position=...&active_colour=0``."""
    return urlencode(position_query_params(position))


def position_from_dict(data: Mapping[str, Any]) -> Position:
    """Rebuild a position from :func:`position_to_dict` output."""
    from plyline.core.position import Position

    missing = [
        key
        for key in (FEN_POSITION, CASTLING_AVAILABILITY, ACTIVE_COLOUR)
        if key not in data
    ]
    if missing:
        raise ChessError(f"Position data is missing {', '.join(missing)}")
    return Position.specific(
        data[FEN_POSITION],
        data[CASTLING_AVAILABILITY],
        data[ACTIVE_COLOUR],
        data.get(EN_PASSANT),
    )
