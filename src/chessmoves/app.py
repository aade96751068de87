"""Command-line entry point: list pseudo-legal moves for a FEN file."""

from __future__ import annotations

import argparse
import logging
import sys

from chessmoves.core.move_generator import MoveGenerator
from chessmoves.core.notation import (
    ParseError,
    format_move,
    load_position,
    summarize,
)

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmoves",
        description="List every pseudo-legal move for the side to move.",
    )
    parser.add_argument("fen_file", nargs="?", help="file holding one FEN record")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the report and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.fen_file is None:
        parser.print_usage()
        return 0

    try:
        position = load_position(args.fen_file)
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", args.fen_file, exc)
        return 1
    except ParseError as exc:
        _LOGGER.error("Cannot parse %s: %s", args.fen_file, exc)
        return 1

    moves = MoveGenerator(position).generate_pseudo_legal_moves()
    for move in moves:
        print(format_move(move))

    summary = summarize(moves)
    _LOGGER.debug("Generated %d moves for %s", summary.total, position.side_to_move)
    print(summary.describe(position.side_to_move))
    return 0


if __name__ == "__main__":
    sys.exit(main())
