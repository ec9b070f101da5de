"""FEN parsing and serialization.

The engine does not track castling rights, the en-passant target or move
clocks: those fields are validated on import and written as fixed
placeholders on export.
"""

from __future__ import annotations

import logging

from lightchess.core.board import Board
from lightchess.core.enums import Color, PieceType
from lightchess.core.errors import InvalidFenFormat
from lightchess.core.piece import EMPTY, PIECE_CHARS, Piece, Square
from lightchess.core.types import BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0"

PLACEHOLDER_FIELDS = "KQkq - 0 0"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def _fail(message: str, fen: str) -> InvalidFenFormat:
    _LOGGER.debug("Rejected FEN %r: %s", fen, message)
    return InvalidFenFormat(f"Invalid FEN ({message}): {fen!r}")


def _parse_rank(rank_text: str, fen: str) -> list[Square]:
    squares: list[Square] = []
    for ch in rank_text:
        if ch in "12345678":
            squares.extend([EMPTY] * int(ch))
        elif ch in PIECE_CHARS:
            squares.append(Piece.from_char(ch))
        else:
            raise _fail(f"bad piece character {ch!r}", fen)
        if len(squares) > BOARD_SIZE:
            raise _fail("rank wider than 8 squares", fen)
    if len(squares) != BOARD_SIZE:
        raise _fail("rank narrower than 8 squares", fen)
    return squares


def _check_castling(field: str, fen: str) -> None:
    if field == "-":
        return
    if not field or len(set(field)) != len(field) or not set(field) <= set("KQkq"):
        raise _fail(f"castling field {field!r}", fen)


def _check_en_passant(field: str, fen: str) -> None:
    if field == "-":
        return
    if len(field) != 2 or field[0] not in "abcdefgh" or field[1] not in "12345678":
        raise _fail(f"en-passant field {field!r}", fen)


def _check_clock(field: str, name: str, fen: str) -> None:
    if not field.isascii() or not field.isdigit():
        raise _fail(f"{name} {field!r}", fen)


def board_from_fen(fen: str) -> tuple[Board, Color]:
    """Parse a six-field FEN string into a fresh board and the side to move.

    The whole string is validated before the board is built.
    """
    if not isinstance(fen, str):
        raise InvalidFenFormat(f"FEN must be a string, got {type(fen).__name__}")
    parts = fen.split()
    if len(parts) != 6:
        raise _fail("need 6 fields", fen)

    placement, side_part, castling_part, ep_part, halfmove, fullmove = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise _fail("board must contain 8 ranks", fen)
    rows = [_parse_rank(rank_text, fen) for rank_text in ranks]

    # 2. Side to move
    side = _SIDES.get(side_part)
    if side is None:
        raise _fail(f"side-to-move field {side_part!r}", fen)

    # 3–6. Unmodelled fields
    _check_castling(castling_part, fen)
    _check_en_passant(ep_part, fen)
    _check_clock(halfmove, "halfmove clock", fen)
    _check_clock(fullmove, "fullmove number", fen)

    # FEN lists rank 8 first; the board's row 0 is rank 1.
    board = Board.from_rows(rows[::-1])
    for color in Color:
        kings = len(board.pieces(color, PieceType.KING))
        if kings != 1:
            raise _fail(f"{color!s} has {kings} kings, need exactly 1", fen)
    return board, side


def board_to_fen(board: Board, turn: Color) -> str:
    """Serialise *board* and *turn* to FEN."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            square = board[Coordinate(rank, file)]
            if not square.occupied:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(square)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if turn == Color.WHITE else "b"
    return f"{board_str} {side_str} {PLACEHOLDER_FIELDS}"
