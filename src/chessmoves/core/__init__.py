"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmoves.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_pseudo_legal_moves():
        print(move)
"""

from chessmoves.core.board import Board
from chessmoves.core.enums import CastlingRights, Color, PieceType
from chessmoves.core.geometry import (
    is_en_passant_target,
    is_occupied,
    is_occupied_by,
    is_reachable,
)
from chessmoves.core.move import Move
from chessmoves.core.move_generator import MoveGenerator, generate_moves
from chessmoves.core.notation import (
    STARTING_FEN,
    MoveSummary,
    ParseError,
    format_move,
    load_position,
    position_from_fen,
    position_to_fen,
    summarize,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position
from chessmoves.core.types import Square, on_board, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "on_board",
    "parse_square",
    "square_name",
    # Geometry
    "is_en_passant_target",
    "is_occupied",
    "is_occupied_by",
    "is_reachable",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "generate_moves",
    # Notation
    "STARTING_FEN",
    "MoveSummary",
    "ParseError",
    "format_move",
    "load_position",
    "position_from_fen",
    "position_to_fen",
    "summarize",
]
