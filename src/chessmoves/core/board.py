"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import Square, on_board

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Fixed 8x8 grid of optional pieces, indexed by :class:`Square`.

    Rows are stored top to bottom (rank index 0 is algebraic rank 8).
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _check(sq: Square) -> None:
        # Negative indexes would silently wrap around the row lists.
        if not on_board(sq.rank, sq.file):
            raise IndexError(f"Square off the board: {sq!r}")

    def __getitem__(self, sq: Square) -> Piece | None:
        self._check(sq)
        return self._cells[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._check(sq)
        self._cells[sq.rank][sq.file] = piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """*color*'s pieces in row-major order (rank, then file, ascending)."""
        for rank, row in enumerate(self._cells):
            for file, piece in enumerate(row):
                if piece is not None and piece.color == color:
                    yield Square(rank, file), piece

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[Square(0, f)] = Piece(Color.BLACK, pt)
            b[Square(1, f)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, f)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self._cells))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._cells):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
