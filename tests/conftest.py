"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from plyline.core.enums import CastlingRights, Color
from plyline.core.notation import board_from_fen
from plyline.core.position import Position


@pytest.fixture
def start() -> Position:
    """Standard starting position."""
    return Position.initial()


@pytest.fixture
def castling_ready() -> Position:
    """Both sides may castle either way; nothing between kings and rooks."""
    return Position(
        board_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R"),
        CastlingRights.ALL,
        Color.WHITE,
    )
