"""Game history - the sequence of positions a game passes through."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from plyline.core.errors import ChessError
from plyline.core.move import Move
from plyline.core.position import Position

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameHistory:
    """Positions of a game, one per ply, plus a cursor for navigation.

    ``positions[0]`` is the start position and ``positions[n]`` the position
    after ``moves[n - 1]``. Positions are immutable, so stepping back and
    forth is just moving the cursor.
    """

    start: Position = field(default_factory=Position.initial)
    moves: list[Move] = field(default_factory=list, init=False)
    positions: list[Position] = field(init=False)
    ply: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.positions = [self.start]

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def replay(
        cls, moves: Iterable[Move], start: Position | None = None
    ) -> GameHistory:
        """Play *moves* from *start* and leave the cursor on the last ply."""
        history = cls(start if start is not None else Position.initial())
        for move in moves:
            history.push(move)
        return history

    # ── Move application ─────────────────────────────────────────────────

    def push(self, move: Move) -> Position:
        """Play *move* from the current ply.

        Plies after the cursor are discarded first, so pushing while looking
        at an earlier position starts a new line from there.
        """
        try:
            position = self.current.make(move)
        except ChessError:
            _LOGGER.warning("Cannot replay ply %d (%s)", self.ply + 1, move)
            raise
        del self.moves[self.ply :]
        del self.positions[self.ply + 1 :]
        self.moves.append(move)
        self.positions.append(position)
        self.ply += 1
        return position

    # ── Navigation ───────────────────────────────────────────────────────

    @property
    def current(self) -> Position:
        return self.positions[self.ply]

    @property
    def ply_count(self) -> int:
        """Number of half-moves recorded."""
        return len(self.moves)

    def go_to(self, ply: int) -> Position:
        if not 0 <= ply <= self.ply_count:
            raise IndexError(f"Ply {ply} outside 0..{self.ply_count}")
        self.ply = ply
        return self.current

    def forward(self) -> Position:
        return self.go_to(min(self.ply + 1, self.ply_count))

    def back(self) -> Position:
        return self.go_to(max(self.ply - 1, 0))

    def first(self) -> Position:
        return self.go_to(0)

    def last(self) -> Position:
        return self.go_to(self.ply_count)
