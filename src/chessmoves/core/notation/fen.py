"""FEN parsing and serialization."""

from __future__ import annotations

import logging
from pathlib import Path

from chessmoves.core.board import Board
from chessmoves.core.enums import CastlingRights, Color
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position
from chessmoves.core.types import Square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Empty-run lengths; any other character must name a piece.
_RUN_DIGITS = "12345678"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


class ParseError(ValueError):
    """The position description is structurally invalid."""


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Only the first four fields are read; clocks and anything after them are
    ignored.
    """
    parts = fen.split()
    if len(parts) < 4:
        raise ParseError(f"Invalid FEN (need at least 4 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement, top rank first
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ParseError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch in _RUN_DIGITS:
                file += int(ch)
            else:
                if file >= 8:
                    raise ParseError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[Square(rank, file)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise ParseError(f"{exc} in FEN: {fen!r}") from None
                file += 1
            if file > 8:
                raise ParseError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ParseError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ParseError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ParseError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise ParseError(f"Invalid FEN en-passant square: {ep_part!r}") from None

    return Position(board, side, castling, ep)


def position_to_fen(pos: Position) -> str:
    """Serialise the four fields a :class:`Position` carries."""
    # 1. Board
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[Square(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str}"


def load_position(path: str | Path) -> Position:
    """Read a FEN description from *path* and parse it."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise ParseError(f"FEN file is not UTF-8 text: {path}") from None
    pos = position_from_fen(text)
    _LOGGER.debug("Loaded %s: %s", path, position_to_fen(pos))
    return pos
