"""Geometry predicates shared by every move rule.

All predicates are pure queries and return ``False`` for off-board squares
instead of raising, so rules can probe offsets without bounds checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmoves.core.types import Square, on_board

if TYPE_CHECKING:
    from chessmoves.core.enums import Color
    from chessmoves.core.position import Position

__all__ = [
    "is_en_passant_target",
    "is_occupied",
    "is_occupied_by",
    "is_reachable",
    "on_board",
]


def is_occupied(sq: Square, pos: Position) -> bool:
    """A piece of either color stands on *sq*."""
    return on_board(*sq) and pos.board[sq] is not None


def is_occupied_by(sq: Square, color: Color, pos: Position) -> bool:
    """A piece of *color* stands on *sq*."""
    if not on_board(*sq):
        return False
    piece = pos.board[sq]
    return piece is not None and piece.color == color


def is_reachable(sq: Square, color: Color, pos: Position) -> bool:
    """*sq* is on the board and empty or holds a piece *color* may capture."""
    if not on_board(*sq):
        return False
    piece = pos.board[sq]
    return piece is None or piece.color != color


def is_en_passant_target(sq: Square, pos: Position) -> bool:
    return pos.en_passant is not None and pos.en_passant == sq
