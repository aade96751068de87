"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import Color


@dataclass(slots=True, frozen=True)
class MoveSummary:
    """Aggregate counts for one generated move list."""

    total: int
    unique_pieces: int

    def describe(self, color: Color) -> str:
        return (
            f"{self.total} legal moves ({self.unique_pieces} unique pieces) "
            f"for {color} player"
        )
