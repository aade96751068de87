"""Human-readable move report."""

from __future__ import annotations

from collections.abc import Iterable

from chessmoves.core.enums import PieceType
from chessmoves.core.move import Move
from chessmoves.core.notation.models import MoveSummary
from chessmoves.core.types import Square


def format_square(sq: Square) -> str:
    """Bracketed coordinate, e.g. ``Square(6, 4)`` → ``'<E:2>'``."""
    return f"<{chr(ord('A') + sq.file)}:{8 - sq.rank}>"


def format_move(move: Move) -> str:
    """Sentence such as ``Pawn at <E:2> can move to <E:4>``."""
    text = (
        f"{move.piece_type.label} at {format_square(move.from_sq)} "
        f"can move to {format_square(move.to_sq)}"
    )
    if move.is_castle:
        text += " (as castling move)"
    return text


def summarize(moves: Iterable[Move]) -> MoveSummary:
    """Count moves and the distinct (piece type, origin) pairs behind them."""
    total = 0
    pieces: set[tuple[PieceType, Square]] = set()
    for move in moves:
        total += 1
        pieces.add((move.piece_type, move.from_sq))
    return MoveSummary(total=total, unique_pieces=len(pieces))
