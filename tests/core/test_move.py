"""Tests for move descriptors, square helpers and enums."""

import pytest

from plyline.core.enums import CastleSide, CastlingRights, Color, PieceType
from plyline.core.errors import ColorDecodeError, SquareDecodeError
from plyline.core.move import Castle, FileDisambiguity, NormalMove, RankDisambiguity
from plyline.core.piece import Piece
from plyline.core.types import (
    A1, D2, E4, E8, H8,
    file_of, make_square, parse_square, rank_of, square_from_int, square_name,
)


class TestMoveDisplay:
    def test_castles(self) -> None:
        assert str(Castle(CastleSide.SHORT)) == "O-O"
        assert str(Castle(CastleSide.LONG)) == "O-O-O"

    def test_pawn_push(self) -> None:
        assert str(NormalMove(PieceType.PAWN, E4)) == "e4"

    def test_piece_with_file(self) -> None:
        move = NormalMove(PieceType.KNIGHT, D2, FileDisambiguity(1))
        assert str(move) == "Nbd2"

    def test_piece_with_rank_and_capture(self) -> None:
        move = NormalMove(PieceType.ROOK, D2, RankDisambiguity(0), capture=True)
        assert str(move) == "R1xd2"

    def test_promotion(self) -> None:
        move = NormalMove(PieceType.PAWN, E8, FileDisambiguity(3), True, PieceType.QUEEN)
        assert str(move) == "dxe8=Q"

    def test_moves_are_hashable_values(self) -> None:
        assert NormalMove(PieceType.PAWN, E4) == NormalMove(PieceType.PAWN, E4)
        assert len({Castle(CastleSide.SHORT), Castle(CastleSide.SHORT)}) == 1


class TestDisambiguity:
    def test_file(self) -> None:
        assert FileDisambiguity(4).matches(E4)
        assert not FileDisambiguity(3).matches(E4)

    def test_rank(self) -> None:
        assert RankDisambiguity(3).matches(E4)
        assert not RankDisambiguity(0).matches(E4)


class TestSquares:
    def test_coordinates(self) -> None:
        assert (file_of(E4), rank_of(E4)) == (4, 3)
        assert make_square(4, 3) == E4

    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert parse_square("e4") == E4

    @pytest.mark.parametrize("name", ["", "e9", "i1", "e44"])
    def test_bad_names(self, name: str) -> None:
        with pytest.raises(SquareDecodeError):
            parse_square(name)

    def test_square_from_int(self) -> None:
        assert square_from_int(0) == A1
        assert square_from_int(63) == H8

    @pytest.mark.parametrize("value", [-1, 64, True, "3", None])
    def test_square_from_int_rejects(self, value: object) -> None:
        with pytest.raises(SquareDecodeError):
            square_from_int(value)


class TestEnums:
    def test_colour_encoding(self) -> None:
        assert Color.decode(0) == Color.WHITE
        assert Color.decode(1) == Color.BLACK
        assert Color.WHITE.opposite == Color.BLACK

    def test_colour_decode_rejects(self) -> None:
        with pytest.raises(ColorDecodeError):
            Color.decode(2)

    def test_castling_bit_layout(self) -> None:
        assert CastlingRights.of(Color.WHITE, CastleSide.SHORT) == 1
        assert CastlingRights.of(Color.WHITE, CastleSide.LONG) == 2
        assert CastlingRights.of(Color.BLACK, CastleSide.SHORT) == 4
        assert CastlingRights.of(Color.BLACK, CastleSide.LONG) == 8
        assert CastlingRights.both(Color.BLACK) == 12

    def test_castling_decode(self) -> None:
        assert CastlingRights.decode(15) == CastlingRights.ALL
        assert CastlingRights.decode(0) == CastlingRights.NONE


class TestPiece:
    def test_fen_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_from_char(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    @pytest.mark.parametrize("char", ["x", "", "NN", "1"])
    def test_from_char_rejects(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)


class TestMoveValidation:
    @pytest.mark.parametrize("destination", [-1, 64, True, "e4"])
    def test_destination_out_of_range(self, destination: object) -> None:
        with pytest.raises(SquareDecodeError):
            NormalMove(PieceType.KNIGHT, destination)  # type: ignore[arg-type]

    @pytest.mark.parametrize("file", [-1, 8])
    def test_file_out_of_range(self, file: int) -> None:
        with pytest.raises(SquareDecodeError, match="file"):
            FileDisambiguity(file)

    @pytest.mark.parametrize("rank", [-1, 8])
    def test_rank_out_of_range(self, rank: int) -> None:
        with pytest.raises(SquareDecodeError, match="rank"):
            RankDisambiguity(rank)

    def test_promotion_is_not_checked(self) -> None:
        move = NormalMove(PieceType.KNIGHT, E8, promotion=PieceType.KING)
        assert str(move) == "Ne8=K"
