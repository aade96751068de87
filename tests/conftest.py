"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from chessmoves.core.notation import STARTING_FEN, position_from_fen
from chessmoves.core.position import Position


@pytest.fixture
def start_position() -> Position:
    """Standard opening array, White to move, all castling rights."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def fen_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a FEN record to a temporary file and return its path."""

    def _write(fen: str) -> Path:
        path = tmp_path / "position.fen"
        path.write_text(fen, encoding="utf-8")
        return path

    return _write
