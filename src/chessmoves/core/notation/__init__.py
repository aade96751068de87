"""Notation package: FEN input and move report output."""

from chessmoves.core.notation.describe import format_move, format_square, summarize
from chessmoves.core.notation.fen import (
    STARTING_FEN,
    ParseError,
    load_position,
    position_from_fen,
    position_to_fen,
)
from chessmoves.core.notation.models import MoveSummary

__all__ = [
    "STARTING_FEN",
    "MoveSummary",
    "ParseError",
    "format_move",
    "format_square",
    "load_position",
    "position_from_fen",
    "position_to_fen",
    "summarize",
]
