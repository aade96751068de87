"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import PieceType
from chessmoves.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate relocation of one piece.

    Castling relocates two pieces, so it is reported as two records (the
    king segment and the rook segment) that both carry ``is_castle``.
    """

    piece_type: PieceType
    from_sq: Square
    to_sq: Square
    is_castle: bool = False

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
