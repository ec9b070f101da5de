"""Human-readable board rendering."""

from __future__ import annotations

from lightchess.core.board import Board
from lightchess.core.types import BOARD_SIZE, Coordinate

FOOTER = "   A  B  C  D  E  F  G  H"


def render_unicode(board: Board) -> str:
    """Grid of chess glyphs, rank 8 at the top, files labelled underneath.

    Example line: ``"8 |♜ |♞ |♝ |♛ |♚ |♝ |♞ |♜ |"``; empty squares are blank.
    """
    lines: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        cells = "".join(
            f"{board[Coordinate(row, column)].symbol} |" for column in range(BOARD_SIZE)
        )
        lines.append(f"{row + 1} |{cells}")
    lines.append(FOOTER)
    return "\n".join(lines)
