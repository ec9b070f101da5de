"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from lightchess.core import Board, Color, Rules

    board = Board.initial()
    for movement in Rules.all_legal_moves(board, Color.WHITE):
        print(movement)
"""

from lightchess.core.board import Board
from lightchess.core.enums import Color, MatchPhase, PieceType, Validation
from lightchess.core.errors import (
    InvalidCoordinate,
    InvalidCoordinateFormat,
    InvalidFenFormat,
    MissingKingError,
)
from lightchess.core.move import Movement
from lightchess.core.move_generator import MoveGenerator, cast_ray
from lightchess.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    decode,
    encode,
    parse_movement,
)
from lightchess.core.piece import EMPTY, Empty, Piece, Square
from lightchess.core.render import render_unicode
from lightchess.core.rules import Rules
from lightchess.core.types import Coordinate, square_name

__all__ = [
    # Enums
    "Color",
    "MatchPhase",
    "PieceType",
    "Validation",
    # Errors
    "InvalidCoordinate",
    "InvalidCoordinateFormat",
    "InvalidFenFormat",
    "MissingKingError",
    # Types / helpers
    "Coordinate",
    "square_name",
    # Domain objects
    "Board",
    "EMPTY",
    "Empty",
    "Movement",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Square",
    "cast_ray",
    # Notation / rendering
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "decode",
    "encode",
    "parse_movement",
    "render_unicode",
]
