"""Pseudo-legal move generation.

Every rule is a pure function of a piece's origin and the position.  Moves
that leave the mover's own king attacked are *not* filtered out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.geometry import (
    is_en_passant_target,
    is_occupied,
    is_occupied_by,
    is_reachable,
)
from chessmoves.core.move import Move
from chessmoves.core.types import Square, on_board

if TYPE_CHECKING:
    from chessmoves.core.position import Position

Offset = tuple[int, int]


def symmetric_offsets(bases: tuple[Offset, ...]) -> tuple[Offset, ...]:
    """Mirror each base vector across both axes, dropping duplicates.

    ``(2, 1)`` expands to four vectors, ``(1, 0)`` to two.
    """
    offsets: list[Offset] = []
    for d_rank, d_file in bases:
        for r_sign in (1, -1):
            for f_sign in (1, -1):
                vec = (d_rank * r_sign, d_file * f_sign)
                if vec not in offsets:
                    offsets.append(vec)
    return tuple(offsets)


KNIGHT_OFFSETS = symmetric_offsets(((2, 1), (1, 2)))
KING_OFFSETS = symmetric_offsets(((1, 0), (0, 1), (1, 1)))

ROOK_DIRS = symmetric_offsets(((1, 0), (0, 1)))
BISHOP_DIRS = symmetric_offsets(((1, 1),))
QUEEN_DIRS = symmetric_offsets(((1, 0), (0, 1), (1, 1)))

# Rank index where each side's pawns start, and the direction they advance.
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_HOME_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

_KING_FILE = 4

# (kingside?, files that must be empty, king to, rook from, rook to)
_CASTLE_WINGS: tuple[tuple[bool, tuple[int, ...], int, int, int], ...] = (
    (True, (5, 6), 6, 7, 5),
    (False, (1, 2, 3), 2, 0, 3),
)


# -- Generic rules ------------------------------------------------------------


def leaper_destinations(
    origin: Square, color: Color, offsets: tuple[Offset, ...], pos: Position
) -> list[Square]:
    """Fixed jumps; intervening pieces are ignored."""
    targets = (origin.offset(dr, df) for dr, df in offsets)
    return [sq for sq in targets if is_reachable(sq, color, pos)]


def slider_destinations(
    origin: Square, color: Color, dirs: tuple[Offset, ...], pos: Position
) -> list[Square]:
    """Walk each ray until the edge or the first occupied square."""
    opponent = color.opposite
    squares: list[Square] = []
    for dr, df in dirs:
        sq = origin.offset(dr, df)
        while on_board(*sq) and not is_occupied(sq, pos):
            squares.append(sq)
            sq = sq.offset(dr, df)
        if is_occupied_by(sq, opponent, pos):
            squares.append(sq)
    return squares


# -- Special rules ------------------------------------------------------------


def pawn_destinations(origin: Square, color: Color, pos: Position) -> list[Square]:
    """Single push, double push from the start rank, and diagonal captures.

    A diagonal square counts when it holds an opponent piece or is the
    en-passant target.  Promotion is not modelled.
    """
    forward = _PAWN_FORWARD[color]
    opponent = color.opposite
    squares: list[Square] = []

    one_step = origin.offset(forward, 0)
    if on_board(*one_step) and not is_occupied(one_step, pos):
        squares.append(one_step)
        if origin.rank == _PAWN_START_RANK[color]:
            two_step = origin.offset(2 * forward, 0)
            if not is_occupied(two_step, pos):
                squares.append(two_step)

    for df in (1, -1):
        cap_sq = origin.offset(forward, df)
        if is_occupied_by(cap_sq, opponent, pos) or is_en_passant_target(cap_sq, pos):
            squares.append(cap_sq)

    return squares


def castling_moves(color: Color, pos: Position) -> list[Move]:
    """King + rook record pairs for every wing *color* may still castle on.

    Only the rights flags and the emptiness of the squares between king and
    rook are consulted; attacked squares are not considered.
    """
    rank = _HOME_RANK[color]
    king_from = Square(rank, _KING_FILE)
    moves: list[Move] = []

    for kingside, between, king_to, rook_from, rook_to in _CASTLE_WINGS:
        allowed = (
            pos.can_castle_kingside(color)
            if kingside
            else pos.can_castle_queenside(color)
        )
        if not allowed:
            continue
        if any(is_occupied(Square(rank, f), pos) for f in between):
            continue
        moves.append(
            Move(PieceType.KING, king_from, Square(rank, king_to), is_castle=True)
        )
        moves.append(
            Move(
                PieceType.ROOK,
                Square(rank, rook_from),
                Square(rank, rook_to),
                is_castle=True,
            )
        )

    return moves


# -- Dispatch -----------------------------------------------------------------


def piece_destinations(
    piece_type: PieceType, origin: Square, color: Color, pos: Position
) -> list[Square]:
    """Destinations for one piece according to its movement rule."""
    match piece_type:
        case PieceType.PAWN:
            return pawn_destinations(origin, color, pos)
        case PieceType.KNIGHT:
            return leaper_destinations(origin, color, KNIGHT_OFFSETS, pos)
        case PieceType.BISHOP:
            return slider_destinations(origin, color, BISHOP_DIRS, pos)
        case PieceType.ROOK:
            return slider_destinations(origin, color, ROOK_DIRS, pos)
        case PieceType.QUEEN:
            return slider_destinations(origin, color, QUEEN_DIRS, pos)
        case PieceType.KING:
            return leaper_destinations(origin, color, KING_OFFSETS, pos)
    raise ValueError(f"Unknown piece type: {piece_type!r}")


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Position`.

    The position is never modified, so one generator may be queried
    repeatedly (or from several threads) with identical results.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    @property
    def position(self) -> Position:
        return self._pos

    def generate_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All pseudo-legal moves for *color* (default: side to move).

        Pieces are visited row-major from the top-left corner; castling
        pairs come last.
        """
        pos = self._pos
        if color is None:
            color = pos.side_to_move

        moves: list[Move] = []
        for origin, piece in pos.board.pieces(color):
            for to_sq in piece_destinations(piece.piece_type, origin, color, pos):
                moves.append(Move(piece.piece_type, origin, to_sq))

        moves.extend(castling_moves(color, pos))
        return moves

    def moves_from(self, origin: Square) -> list[Move]:
        """Non-castling moves of the piece standing on *origin*."""
        if not on_board(*origin):
            return []
        piece = self._pos.board[origin]
        if piece is None:
            return []
        destinations = piece_destinations(
            piece.piece_type, origin, piece.color, self._pos
        )
        return [Move(piece.piece_type, origin, to_sq) for to_sq in destinations]


def generate_moves(position: Position, color: Color | None = None) -> list[Move]:
    """Shortcut for ``MoveGenerator(position).generate_pseudo_legal_moves(color)``."""
    return MoveGenerator(position).generate_pseudo_legal_moves(color)
