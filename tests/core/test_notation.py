"""Tests for FEN input and the move report."""

from pathlib import Path

import pytest

from chessmoves.core.enums import CastlingRights, Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.move_generator import generate_moves
from chessmoves.core.notation import (
    STARTING_FEN,
    MoveSummary,
    ParseError,
    format_move,
    format_square,
    load_position,
    position_from_fen,
    position_to_fen,
    summarize,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import A1, D1, E1, E2, E3, E4, E8, G1, parse_square


class TestFenParsing:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE

    def test_starting_castling(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.castling == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.en_passant is None

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant == E3

    def test_no_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == CastlingRights.NONE
        assert not pos.can_castle_kingside(Color.WHITE)
        assert not pos.can_castle_queenside(Color.BLACK)

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )
        assert pos.can_castle_kingside(Color.WHITE)
        assert not pos.can_castle_queenside(Color.WHITE)
        assert pos.can_castle_queenside(Color.BLACK)

    def test_trailing_fields_ignored(self) -> None:
        short = position_from_fen("8/8/8/8/8/8/8/4K3 w - -")
        long = position_from_fen("8/8/8/8/8/8/8/4K3 w - - 12 40 extra")
        assert short == long

    def test_surrounding_whitespace_ignored(self) -> None:
        pos = position_from_fen("\n  " + STARTING_FEN + "\n")
        assert position_to_fen(pos) == STARTING_FEN.rsplit(" ", 2)[0]

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(ParseError, ValueError)

    def test_invalid_fen_raises(self) -> None:
        with pytest.raises(ParseError, match="at least 4 fields"):
            position_from_fen("invalid")

    def test_invalid_side_to_move_raises(self) -> None:
        with pytest.raises(ParseError, match="side-to-move"):
            position_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_invalid_board_rank_count_raises(self) -> None:
        with pytest.raises(ParseError, match="8 ranks"):
            position_from_fen("8/8/8/8/8/8/8 w - - 0 1")

    def test_invalid_board_rank_width_raises(self) -> None:
        with pytest.raises(ParseError, match="Invalid piece character"):
            position_from_fen("9/8/8/8/8/8/8/8 w - - 0 1")
        with pytest.raises(ParseError, match="rank width"):
            position_from_fen("7/8/8/8/8/8/8/8 w - - 0 1")

    @pytest.mark.parametrize("run", ["0", "\u00b2", "\u0664"])
    def test_only_ascii_run_lengths_accepted(self, run: str) -> None:
        with pytest.raises(ParseError):
            position_from_fen(run + "7/8/8/8/8/8/8/8 w - - 0 1")

    def test_invalid_piece_character_raises(self) -> None:
        with pytest.raises(ParseError, match="Invalid piece character"):
            position_from_fen("7x/8/8/8/8/8/8/8 w - - 0 1")

    def test_invalid_castling_field_raises(self) -> None:
        with pytest.raises(ParseError, match="castling"):
            position_from_fen("8/8/8/8/8/8/8/8 w KX - 0 1")
        with pytest.raises(ParseError, match="castling"):
            position_from_fen("8/8/8/8/8/8/8/8 w KK - 0 1")

    def test_invalid_en_passant_raises(self) -> None:
        with pytest.raises(ParseError, match="en-passant"):
            position_from_fen("8/8/8/8/8/8/8/8 w - z9 0 1")


class TestFenSerialisation:
    def test_round_trip(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq -"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_en_passant_and_partial_rights(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w Kq d6"
        assert position_to_fen(position_from_fen(fen)) == fen


class TestLoadPosition:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "start.fen"
        path.write_text(STARTING_FEN + "\n", encoding="utf-8")
        assert load_position(path) == position_from_fen(STARTING_FEN)

    def test_non_utf8_file_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.fen"
        path.write_bytes(b"\xff\xfe 8/8 w - -")
        with pytest.raises(ParseError, match="not UTF-8"):
            load_position(path)

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_position(tmp_path / "absent.fen")


class TestMoveReport:
    def test_format_square(self) -> None:
        assert format_square(E2) == "<E:2>"
        assert format_square(A1) == "<A:1>"
        assert format_square(parse_square("h8")) == "<H:8>"

    def test_format_plain_move(self) -> None:
        move = Move(PieceType.PAWN, E2, E4)
        assert format_move(move) == "Pawn at <E:2> can move to <E:4>"

    def test_format_castling_move(self) -> None:
        king = Move(PieceType.KING, E1, G1, is_castle=True)
        rook = Move(PieceType.ROOK, A1, D1, is_castle=True)
        assert format_move(king) == (
            "King at <E:1> can move to <G:1> (as castling move)"
        )
        assert format_move(rook) == (
            "Rook at <A:1> can move to <D:1> (as castling move)"
        )

    def test_summary_of_starting_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        summary = summarize(generate_moves(pos))
        assert summary == MoveSummary(total=20, unique_pieces=10)
        assert summary.describe(Color.WHITE) == (
            "20 legal moves (10 unique pieces) for white player"
        )

    def test_castling_pair_counts_two_pieces(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        moves = generate_moves(pos)
        summary = summarize(moves)
        # King moves 5 + castle, rook moves 9 + castle
        assert summary.total == 16
        assert summary.unique_pieces == 2

    def test_empty_summary(self) -> None:
        assert summarize([]) == MoveSummary(total=0, unique_pieces=0)
        assert summarize([]).describe(Color.BLACK) == (
            "0 legal moves (0 unique pieces) for black player"
        )
