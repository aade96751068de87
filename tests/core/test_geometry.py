"""Tests for the geometry predicates."""

import pytest

from chessmoves.core.enums import Color
from chessmoves.core.geometry import (
    is_en_passant_target,
    is_occupied,
    is_occupied_by,
    is_reachable,
)
from chessmoves.core.notation import position_from_fen
from chessmoves.core.position import Position
from chessmoves.core.types import D6, E1, E2, E4, E6, E7, Square

OFF_BOARD = [Square(-1, 0), Square(0, -1), Square(8, 3), Square(3, 8)]


class TestOccupancy:
    def test_occupied(self, start_position: Position) -> None:
        assert is_occupied(E2, start_position)
        assert not is_occupied(E4, start_position)

    def test_occupied_by(self, start_position: Position) -> None:
        assert is_occupied_by(E1, Color.WHITE, start_position)
        assert not is_occupied_by(E1, Color.BLACK, start_position)
        assert not is_occupied_by(E4, Color.WHITE, start_position)

    @pytest.mark.parametrize("sq", OFF_BOARD)
    def test_off_board_is_never_occupied(
        self, start_position: Position, sq: Square
    ) -> None:
        assert not is_occupied(sq, start_position)
        assert not is_occupied_by(sq, Color.WHITE, start_position)
        assert not is_occupied_by(sq, Color.BLACK, start_position)


class TestReachable:
    def test_empty_square(self, start_position: Position) -> None:
        assert is_reachable(E4, Color.WHITE, start_position)
        assert is_reachable(E4, Color.BLACK, start_position)

    def test_opponent_square_is_capturable(self, start_position: Position) -> None:
        assert is_reachable(E7, Color.WHITE, start_position)
        assert is_reachable(E2, Color.BLACK, start_position)

    def test_own_square_is_not(self, start_position: Position) -> None:
        assert not is_reachable(E2, Color.WHITE, start_position)
        assert not is_reachable(E7, Color.BLACK, start_position)

    @pytest.mark.parametrize("sq", OFF_BOARD)
    def test_off_board_is_unreachable(
        self, start_position: Position, sq: Square
    ) -> None:
        assert not is_reachable(sq, Color.WHITE, start_position)


class TestEnPassantTarget:
    def test_matches_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        assert is_en_passant_target(D6, pos)
        assert not is_en_passant_target(E6, pos)

    def test_no_target(self, start_position: Position) -> None:
        assert not is_en_passant_target(D6, start_position)
