"""Tests for GameHistory."""

import logging

import pytest

from plyline.core.enums import CastleSide, Color, PieceType
from plyline.core.errors import SourceNotFoundError
from plyline.core.move import Castle, Move, NormalMove
from plyline.core.position import Position
from plyline.core.types import C4, C5, E4, E5, F3, G1, parse_square
from plyline.game.history import GameHistory

ITALIAN: list[Move] = [
    NormalMove(PieceType.PAWN, E4),
    NormalMove(PieceType.PAWN, E5),
    NormalMove(PieceType.KNIGHT, F3),
    NormalMove(PieceType.KNIGHT, parse_square("c6")),
    NormalMove(PieceType.BISHOP, C4),
    NormalMove(PieceType.BISHOP, C5),
    Castle(CastleSide.SHORT),
]


class TestReplay:
    def test_positions_per_ply(self) -> None:
        history = GameHistory.replay(ITALIAN)
        assert history.ply_count == 7
        assert len(history.positions) == 8
        assert history.positions[0] == Position.initial()

    def test_cursor_on_last_ply(self) -> None:
        history = GameHistory.replay(ITALIAN)
        assert history.ply == 7
        assert history.current.fen() == (
            "r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQ1RK1"
        )
        assert history.current.side_to_move == Color.BLACK
        assert not history.current.can_castle(Color.WHITE, CastleSide.SHORT)
        assert history.current.can_castle(Color.BLACK, CastleSide.SHORT)

    def test_each_position_follows_from_previous(self) -> None:
        history = GameHistory.replay(ITALIAN)
        for ply, move in enumerate(history.moves):
            assert history.positions[ply].make(move) == history.positions[ply + 1]

    def test_custom_start(self) -> None:
        start = Position.initial().make(NormalMove(PieceType.PAWN, E4))
        history = GameHistory.replay([NormalMove(PieceType.PAWN, E5)], start)
        assert history.positions[0] is start
        assert history.current.en_passant == parse_square("e6")

    def test_empty_replay(self) -> None:
        history = GameHistory.replay([])
        assert history.ply_count == 0
        assert history.current == Position.initial()

    def test_failure_propagates_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        moves = [NormalMove(PieceType.PAWN, E4), NormalMove(PieceType.QUEEN, E4)]
        with caplog.at_level(logging.WARNING, logger="plyline.game.history"):
            with pytest.raises(SourceNotFoundError):
                GameHistory.replay(moves)
        assert "ply 2" in caplog.text


class TestNavigation:
    def test_back_and_forward(self) -> None:
        history = GameHistory.replay(ITALIAN)
        assert history.back() == history.positions[6]
        assert history.back() == history.positions[5]
        assert history.forward() == history.positions[6]
        assert history.ply == 6

    def test_clamps_at_ends(self) -> None:
        history = GameHistory.replay(ITALIAN[:2])
        history.first()
        assert history.back() == Position.initial()
        assert history.ply == 0
        history.last()
        assert history.forward() == history.positions[2]
        assert history.ply == 2

    def test_go_to(self) -> None:
        history = GameHistory.replay(ITALIAN)
        assert history.go_to(3).board[F3] is not None
        assert history.go_to(3).board[G1] is None

    @pytest.mark.parametrize("ply", [-1, 8])
    def test_go_to_out_of_range(self, ply: int) -> None:
        history = GameHistory.replay(ITALIAN)
        with pytest.raises(IndexError):
            history.go_to(ply)


class TestPush:
    def test_push_appends(self) -> None:
        history = GameHistory()
        position = history.push(NormalMove(PieceType.PAWN, E4))
        assert history.current is position
        assert history.moves == [NormalMove(PieceType.PAWN, E4)]

    def test_push_from_earlier_ply_branches(self) -> None:
        history = GameHistory.replay(ITALIAN)
        history.go_to(2)
        history.push(NormalMove(PieceType.KNIGHT, F3))
        assert history.ply_count == 3
        assert len(history.positions) == 4
        assert history.moves[-1] == NormalMove(PieceType.KNIGHT, F3)

    def test_failed_push_keeps_history(self) -> None:
        history = GameHistory.replay(ITALIAN[:2])
        with pytest.raises(SourceNotFoundError):
            history.push(NormalMove(PieceType.ROOK, E4))
        assert history.ply_count == 2
        assert history.ply == 2

    def test_positions_are_not_shared_mutably(self) -> None:
        history = GameHistory.replay(ITALIAN[:1])
        before = history.positions[0]
        history.push(NormalMove(PieceType.PAWN, E5))
        assert history.positions[0] is before
        assert before == Position.initial()
