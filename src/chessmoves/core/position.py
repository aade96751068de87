"""Position — board plus the metadata move generation reads."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessmoves.core.board import Board
from chessmoves.core.enums import CastlingRights, Color
from chessmoves.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Static snapshot: board, side to move, castling rights, en passant.

    Built once by the input adapter and only read afterwards, so any number
    of generation calls may share one instance.  Castling rights and the
    en-passant target are trusted exactly as supplied.  The default is an
    empty board with no rights; use :meth:`initial` for the opening array.
    """

    board: Board = field(default_factory=Board)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.NONE
    en_passant: Square | None = None

    @classmethod
    def initial(cls) -> Position:
        """Standard start: White to move, all castling rights."""
        return cls(Board.initial(), Color.WHITE, CastlingRights.ALL, None)

    def can_castle_kingside(self, color: Color) -> bool:
        return bool(self.castling & CastlingRights.kingside(color))

    def can_castle_queenside(self, color: Color) -> bool:
        return bool(self.castling & CastlingRights.queenside(color))
