"""Square type and coordinate helpers.

Board layout follows the printed diagram, top row first:
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)

The rank axis is therefore inverted relative to algebraic ranks: White
pawns advance toward rank index 0.
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """A (rank, file) coordinate pair; may lie off the board."""

    rank: int
    file: int

    def offset(self, d_rank: int, d_file: int) -> Square:
        """Shifted square. The result is not checked against the board."""
        return Square(self.rank + d_rank, self.file + d_file)


def on_board(rank: int, file: int) -> bool:
    """Both coordinates lie in 0–7."""
    return 0 <= rank <= 7 and 0 <= file <= 7


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    return _FILES[sq.file] + str(8 - sq.rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e6'`` → ``Square(2, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, f) for f in range(8))
