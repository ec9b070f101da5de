"""Notation package: square names and FEN parsing / serialization."""

from lightchess.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen
from lightchess.core.notation.squares import decode, encode, parse_movement

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "decode",
    "encode",
    "parse_movement",
]
