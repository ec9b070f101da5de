"""Console entry point: play a match by typing moves on stdin."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from lightchess.core.enums import Validation
from lightchess.core.errors import InvalidCoordinateFormat, InvalidFenFormat
from lightchess.core.notation.squares import decode, encode, parse_movement
from lightchess.game.match import Match

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LIGHTCHESS_LOG_LEVEL"

_MESSAGES: dict[Validation, str] = {
    Validation.LEGAL_MOVE: "ok",
    Validation.ILLEGAL_MOVE: "illegal move",
    Validation.KING_ON_CHECK: "illegal move: your king would be in check",
    Validation.BLANK_SQUARE: "there is no piece on that square",
    Validation.OUT_OF_BOARD: "square is off the board",
    Validation.CHECKMATE: "checkmate",
    Validation.MATCH_FINISHED: "the match is over",
}

HELP = """commands:
  <from><to>     play a move, e.g. e2e4 or e2 e4
  moves <square> list legal destinations of a piece
  board          show the board
  fen            print the position as FEN
  quit           leave"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightchess",
        description="Play a two-player chess match on the console.",
    )
    parser.add_argument("--fen", default=None, help="Start from this FEN position")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging verbosity (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def _handle(match: Match, line: str, out: TextIO) -> bool:
    """Run one command line. Returns False when the session should end."""
    command, _, argument = line.strip().partition(" ")
    command = command.lower()

    if not command:
        return True
    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(HELP, file=out)
    elif command == "board":
        print(match.render(), file=out)
    elif command == "fen":
        print(match.to_fen(), file=out)
    elif command == "moves":
        try:
            origin = decode(argument.strip())
        except InvalidCoordinateFormat as exc:
            print(exc, file=out)
            return True
        names = sorted(encode(c) for c in match.legal_destinations(origin))
        print(" ".join(names) if names else "no legal moves", file=out)
    else:
        try:
            movement = parse_movement(line)
        except InvalidCoordinateFormat:
            print(f"unknown command {line.strip()!r}; type 'help'", file=out)
            return True
        result = match.apply_move(movement)
        print(_MESSAGES[result], file=out)
        if result == Validation.CHECKMATE:
            print(match.render(), file=out)
            print(f"{match.winner!s} wins", file=out)
        elif result == Validation.LEGAL_MOVE:
            print(match.render(), file=out)
            suffix = " (check)" if match.is_in_check() else ""
            print(f"{match.turn!s} to move{suffix}", file=out)
    return True


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run a console session and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    try:
        match = Match.from_fen(args.fen) if args.fen else Match()
    except InvalidFenFormat as exc:
        print(exc, file=out)
        return 2

    _LOGGER.info("Starting match from %s", match.to_fen())
    print(match.render(), file=out)
    print(f"{match.turn!s} to move", file=out)
    for line in inp:
        if not _handle(match, line, out):
            break
    return 0


def main() -> None:
    """Launch the lightchess console."""
    sys.exit(run())


if __name__ == "__main__":
    main()
